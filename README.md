# squire

Helpers for working with SQLite from Python:

- **Feature probing** (`squire.version`, `squire.probe`, `squire.features`,
  `squire.library`): find the SQLite version, threading mode and compile-time
  options of a library, and work out which features it supports.
- **Parameter binding** (`squire.bind`, `squire.blob`, `squire.mapping`,
  `squire.parameters`): turn Python values and record classes into parameters
  that the standard `sqlite3` module accepts.
- **Database locations** (`squire.database`): describe a database as a file
  path, a URI or an in-memory database, together with the open flags each needs.

The package has no dependencies beyond the standard library.

## Installation

```
pip install .
```

For the test suite:

```
pip install ".[test]"
pytest
```

## Versions

```python
from squire.version import Version

v = Version.parse("3.50.4")
assert v == Version.from_number(3050004) == Version(3, 50, 4)
assert v.to_number() == 3050004
assert v < Version.release(3, 51)
assert str(v) == "3.50.4"
```

`Version.parse` raises `ParseVersionError` (a `ValueError`) unless the text is
exactly three dot-separated numbers.

## Probing a library

`SystemProbe` looks at the SQLite library behind the standard `sqlite3` module,
reading `sqlite_version()` and `PRAGMA compile_options`. It opens its own
in-memory connection unless one is passed in. `StaticProbe` answers from a
version, a set of flags and a threading mode that you give it.

```python
from squire.probe import Flag, StaticProbe, SystemProbe, Threading
from squire.version import Version
from squire.library import Library

library = Library.probe(SystemProbe())
print(library.version, library.threading)
print(sorted(key.as_str() for key in library.features))

probe = StaticProbe(Version(3, 37, 0), flags=[Flag.ENABLE_JSON], threading=Threading.MULTI_THREAD)
```

- `Flag` lists the compile-time options that matter. `Flag.of("ENABLE_JSON1")`
  and `Flag.of("SQLITE_ENABLE_JSON1")` both give `Flag.ENABLE_JSON`, and unknown
  names give `None`. `Flag.parse` raises `ParseFlagError` for them instead.
  `option_name()` and `base_name()` give the name with and without the
  `SQLITE_` prefix.
- `Threading` is `SINGLE_THREAD`, `MULTI_THREAD` or `SERIALIZED`.
  `Threading.parse("multi-thread")` reads the names that `as_str()` writes. An
  unknown name raises `UnknownThreadingMode`.

## Features

`squire.features.keys.FeatureKey` names each detectable feature, such as
`FeatureKey.JSON` and `FeatureKey.LOAD_EXTENSION`. `FeatureKey.parse` reads the
`snake_case` names and raises `UnknownFeature` for others.

The detectors live in `squire.features.interface` and `squire.features.content`
(`Json`, `Jsonb`, `Fts5`, `ErrorOffset`, `PrepareQuiet` and so on). Some turn on
with a flag, some are present unless a flag omits them, and some depend on the
version. For example, JSON needs `SQLITE_ENABLE_JSON1` before 3.38 and is
present unless `SQLITE_OMIT_JSON` is set from 3.38 on.

`squire.features.registry` connects keys to detectors:

```python
from squire.features.keys import FeatureKey
from squire.features.registry import feature_for, is_supported, supported

is_supported(FeatureKey.JSON, probe)
list(supported(probe))          # supported keys, in key order
feature_for(FeatureKey.FTS5)    # the Fts5 detector
```

## Library metadata

`Library` is a frozen record of a version, a threading mode and a set of
feature keys. It can be written to and read from `DEP_SQLITE3_VERSION`,
`DEP_SQLITE3_THREADING` and `DEP_SQLITE3_FEATURES` variables:

```python
env = library.to_metadata()
assert Library.from_metadata(env) == library
library.cfg_names()   # e.g. ["sqlite_has_attach", "sqlite_has_json", ...]
```

`from_metadata()` reads `os.environ` when no mapping is given. A missing or
malformed variable raises `MetadataError`, whose `kind` says which one is wrong
(`missing_version`, `invalid_threading`, `invalid_feature`, ...).

## Binding parameters

`to_bind_value` converts a value into one SQLite binds directly:

- `None` stays `None`.
- `True` and `False` become `1` and `0`.
- Integers must fit in a signed 64-bit value, otherwise `BindError` is raised.
- Bytes-like values become `bytes`.
- A `Reservation(n)` from `squire.blob` becomes `n` zero bytes, or an empty
  blob if `n` is negative.
- Other types raise `TypeError`.

The `parameters` decorator marks a dataclass or named tuple as a parameter set.
`bind_parameters` then gives a dict for named parameters or a tuple for
positional ones, ready for `sqlite3`:

```python
import sqlite3
from dataclasses import dataclass
from squire.mapping import field
from squire.parameters import bind_parameters, parameters


@parameters
@dataclass
class NewRow:
    text: str = field(rename="a")
    b: int
    c: float


conn = sqlite3.connect(":memory:")
conn.execute("CREATE TABLE example (a TEXT NOT NULL, b INTEGER, c REAL)")
conn.execute("INSERT INTO example (a, b, c) VALUES (:a, :b, :c)", bind_parameters(NewRow("hello", 42, 3.14)))
conn.execute("SELECT a FROM example WHERE b = ?", bind_parameters(42))
```

- Dataclasses bind by name and named tuples by position. Positions start at 1.
  Use `@parameters(named=True)` or `@parameters(sequential=True)` to choose the
  other way.
- `squire.mapping.field` takes `skip`, `index`, `rename` and `convert`. An
  explicit `index` always binds by position. Positions that no field fills bind
  `NULL`.
- Mappings passed to `bind_parameters` bind by name, and tuples and lists by
  position. Any other value binds as the single positional parameter.
- A class that cannot be mapped raises `MappingError`.

## Database locations

```python
from squire.database import Database, SQLITE_OPEN_URI

Database.memory().location()                 # ""
Database.memory().named("shared").location() # "shared"
Database.path("data.db").flags()             # 0
Database.uri("file:data.db?mode=ro").flags() == SQLITE_OPEN_URI
```

`to_location` accepts strings, bytes and path-like objects. It raises
`ValueError` for a location that contains a `\0` character.

## What this package does not do

squire does not open connections, run statements or map result rows onto
objects. `Database` only describes where a database is and which open flags it
needs. To talk to a database, use the standard `sqlite3` module and pass it the
values that `bind_parameters` produces.
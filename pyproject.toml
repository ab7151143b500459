[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "squire"
version = "0.0.1a4"
description = "SQLite feature probing, parameter binding and database locations"
requires-python = ">=3.10"
dependencies = []
keywords = ["sqlite", "database", "sql", "features", "parameters"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Database",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["squire"]

[tool.pytest.ini_options]
addopts = "-ra"

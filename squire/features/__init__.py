"""SQLite feature keys and detectors, decided by library version and compile options."""
"""SQLite feature probing, parameter binding and database locations."""

__version__ = "0.0.1a4"
"""ROSTER

An in-memory directory of departments and their employees, driven by a small
SQL-like query language. Queries are parsed into typed commands and executed
against a volatile two-level store.
"""

__all__ = ["__version__"]
__version__ = "0.1.0"

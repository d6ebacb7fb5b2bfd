"""In-memory directory adapters."""

from .memory import InMemoryDepartmentCollection, InMemoryEmployeeCollection
from .memory_store import InMemoryDirectoryData

__all__ = [
    "InMemoryDepartmentCollection",
    "InMemoryDirectoryData",
    "InMemoryEmployeeCollection",
]

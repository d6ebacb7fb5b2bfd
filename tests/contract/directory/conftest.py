"""Pytest fixtures for directory collection contract tests.

Provided fixtures
-----------------
- **collection**: Parametrized factory that returns a **fresh**, empty
  `DepartmentCollection` per test. Currently supports `"memory"` (the
  in-memory implementation). To exercise additional implementations later,
  add their keys to the `params` list and branch in the fixture body.
- **employees**: The employee collection of a freshly formed "Shipping"
  department in `collection`.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from roster.adapters.directory import InMemoryDepartmentCollection, InMemoryDirectoryData

if TYPE_CHECKING:
    from roster.interfaces.directory import DepartmentCollection, EmployeeCollection

# pylint: disable=redefined-outer-name


@pytest.fixture(params=["memory"])
def collection(request: pytest.FixtureRequest) -> DepartmentCollection:
    """Return a fresh department collection for the requested backend.

    Current params:
      - `"memory"` → `InMemoryDepartmentCollection` (non-durable, in-memory)
    """

    match request.param:
        case "memory":
            return InMemoryDepartmentCollection(InMemoryDirectoryData())
        case _:
            raise ValueError(f"unknown collection type: {request.param}")


@pytest.fixture
def employees(collection: DepartmentCollection) -> EmployeeCollection:
    """Employee collection of a new "Shipping" department."""
    collection.create("Shipping")
    return collection.find("Shipping").employees

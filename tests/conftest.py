"""Global pytest fixtures for ROSTER.

Also applies the default folder mark (`unit`, `contract`, `functional`, `e2e`)
to every collected test that does not already carry it.
"""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import pytest

from roster.adapters.directory import InMemoryDepartmentCollection, InMemoryDirectoryData
from roster.bootstrap.bootstrap import bootstrap
from roster.interfaces.directory import DepartmentCollection
from roster.service_layer.database import Database

# pylint: disable=redefined-outer-name, unused-argument

TESTS_ROOT = Path(__file__).parent.resolve()
FOLDER_MARKERS = {
    TESTS_ROOT / "unit": "unit",
    TESTS_ROOT / "contract": "contract",
    TESTS_ROOT / "functional": "functional",
    TESTS_ROOT / "e2e": "e2e",
}


@pytest.hookimpl(tryfirst=True)
def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Add the folder's default mark to each item collected under it."""
    for item in items:
        path = item.path.resolve()  # pytest>=8: pathlib.Path
        for folder, marker_name in FOLDER_MARKERS.items():
            if folder not in path.parents:
                continue
            if not any(marker.name == marker_name for marker in item.iter_markers()):
                item.add_marker(getattr(pytest.mark, marker_name))


@pytest.fixture(autouse=True, scope="session")
def _no_seed_env() -> Iterator[None]:
    """Keep ROSTER_* settings from the developer's shell out of the tests."""
    with pytest.MonkeyPatch.context() as mp:
        mp.delenv("ROSTER_SEED", raising=False)
        mp.delenv("ROSTER_PROMPT", raising=False)
        mp.delenv("ROSTER_LOG_PATH", raising=False)
        mp.delenv("ROSTER_FORCE_FLUSH_FLIGHT_RECORDER", raising=False)
        yield


@pytest.fixture
def departments() -> DepartmentCollection:
    """A fresh, empty in-memory department collection."""
    return InMemoryDepartmentCollection(InMemoryDirectoryData())


@pytest.fixture
def database() -> Database:
    """A query facade over a fresh, empty directory."""
    return bootstrap(seed=False).database


@pytest.fixture
def seeded_database() -> Database:
    """A query facade over a directory populated with the seed fixture."""
    return bootstrap(seed=True).database

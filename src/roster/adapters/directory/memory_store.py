"""In-memory backing store for the directory adapters."""

from dataclasses import dataclass, field

from roster.interfaces.directory import Department


@dataclass(slots=True)
class InMemoryDirectoryData:
    """Shared in-memory backing store for the department collection.

    Departments are keyed by their uppercased name. Each department owns its
    own employee collection, so the store is a map of maps: dissolving a
    department drops its employees with it and no employee can exist outside
    a department.

    Nothing here is durable; the data lives exactly as long as this object.
    """

    # keyed by department key
    departments: dict[str, Department] = field(default_factory=dict)

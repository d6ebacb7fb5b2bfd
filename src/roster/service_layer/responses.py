"""Query responses returned to the caller.

A response is one of:

- ``Exit``: the caller should stop reading queries,
- ``NoOp``: nothing happened and nothing should be shown,
- ``Message``: a line of text (success, or an ``ERROR:`` line),
- ``Table``: tabular data with a title, ordered headers, and rows.

Rendering is left to the entrypoint.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field

ERROR_PREFIX = "ERROR: "


@dataclass(frozen=True)
class Response:
    """Base class for all query responses."""


@dataclass(frozen=True)
class Exit(Response):
    """Stop listening for queries."""


@dataclass(frozen=True)
class NoOp(Response):
    """No operation was performed."""


@dataclass(frozen=True)
class Message(Response):
    """Plain text output."""

    text: str

    @property
    def is_error(self) -> bool:
        """Whether the message reports a failed query."""
        return self.text.startswith(ERROR_PREFIX)


@dataclass(frozen=True)
class Table(Response):
    """Unformatted tabular data.

    Attributes:
        title: Data set name.
        headers: Column names, in display order.
        rows: One mapping per row from column name to cell text. A row may omit
            a column that has no value.
    """

    title: str
    headers: tuple[str, ...]
    rows: tuple[Mapping[str, str], ...] = field(default_factory=tuple)

    @classmethod
    def single_column(cls, title: str, header: str, values: Iterable[str]) -> Table:
        """Build a one-column table from a sequence of cell values."""
        return cls(
            title=title,
            headers=(header,),
            rows=tuple({header: value} for value in values),
        )

"""Render query responses for the terminal.

Tables are drawn with Rich on stdout; plain messages are echoed to stdout and
error messages go to stderr through :func:`~.messages.error`.
"""

from __future__ import annotations

import click
from rich import box
from rich.console import Console
from rich.table import Table as RichTable
from rich.text import Text

from roster.service_layer.responses import Message, Response, Table

from .messages import error


def render_table(table: Table, console: Console | None = None) -> None:
    """Print a response table, one Rich column per header.

    Cells missing from a row are shown blank. Names are printed literally,
    never read as Rich markup.
    """
    console = console or Console()
    # wide enough that the title stays on one line
    rich_table = RichTable(
        title=Text(table.title), box=box.SIMPLE_HEAD, min_width=len(table.title)
    )
    for header in table.headers:
        rich_table.add_column(Text(header))
    for row in table.rows:
        rich_table.add_row(*(Text(row.get(header, "")) for header in table.headers))
    console.print(rich_table)


def render_response(response: Response, console: Console | None = None) -> None:
    """Show a response. ``Exit`` and ``NoOp`` print nothing."""
    match response:
        case Message(is_error=True):
            error(response.text)
        case Message():
            click.echo(response.text)
        case Table():
            render_table(response, console)
        case _:
            pass

"""ROSTER query commands: one-shot ``query`` and the interactive ``shell``.

Both commands build a fresh, volatile directory (optionally seeded), so state
lives only as long as the process.

Behavior
- Tables and plain messages go to **stdout**; ``ERROR:`` messages go to **stderr**.
- ``query`` exits with status 1 when the query fails.
- ``shell`` reads one query per line until an exit command or end of input.

Failure modes
- An unreadable ``ROSTER_SEED`` value or a broken seed fixture → ``ClickException``.
"""

from __future__ import annotations

import logging

import click

from roster import config
from roster.bootstrap.bootstrap import bootstrap
from roster.interfaces.directory.errors import SeedError
from roster.service_layer.database import Database
from roster.service_layer.responses import Exit, Message

from .helpers import render_response, warn

logger = logging.getLogger(__name__)

SEED_OPTION_HELP = (
    "Populate the directory with sample departments and employees before "
    "running queries. Defaults to the ROSTER_SEED environment variable."
)


def _get_database(seed: bool | None) -> Database:
    try:
        return bootstrap(seed=seed).database
    except config.InvalidSettingError as e:
        raise click.ClickException(str(e)) from e
    except SeedError as e:
        raise click.ClickException(f"Cannot seed the directory: {e}") from e


@click.command()
@click.argument("text", nargs=-1, required=True)
@click.option("--seed/--no-seed", default=None, help=SEED_OPTION_HELP)
@click.pass_context
def query(ctx: click.Context, text: tuple[str, ...], seed: bool | None) -> None:
    """Run a single query and print its result.

    \b
    Examples:
      roster query --seed show departments
      roster query --seed list employees in sales
    """
    database = _get_database(seed)
    response = database.query(" ".join(text))
    render_response(response)
    if isinstance(response, Message) and response.is_error:
        ctx.exit(1)


@click.command()
@click.option("--seed/--no-seed", default=None, help=SEED_OPTION_HELP)
@click.option(
    "--prompt",
    default=config.DEFAULT_PROMPT,
    envvar=config.PROMPT_ENVVAR,
    show_envvar=True,
    help="Prompt shown before each query.",
)
def shell(seed: bool | None, prompt: str) -> None:
    """Start an interactive query shell.

    Type "help" for the list of available queries and "exit" to leave.
    """
    database = _get_database(seed)
    while True:
        try:
            line = click.prompt(
                prompt, default="", show_default=False, prompt_suffix=""
            )
        except click.Abort:
            warn("Input closed; leaving the shell.")
            break

        response = database.query(line)
        if isinstance(response, Exit):
            logger.debug("Exit requested; leaving the shell")
            break
        render_response(response)

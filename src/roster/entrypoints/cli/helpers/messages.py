"""Terminal message helpers for the ROSTER CLI.

Small helpers for rendering user-visible lines with sensible emoji→ASCII fallbacks.
Messages write to stderr so stdout carries only query output.
"""

import click


def _supports_character(character: str) -> bool:
    """Return True if *character* can be encoded on stderr.

    Args:
        character: A single Unicode character to probe (e.g., "⚠️", "❌").

    Returns:
        bool: True if encoding succeeds; False on `UnicodeEncodeError`.
    """

    stream = click.get_text_stream("stderr")  # pragma: no mutate
    encoding = getattr(stream, "encoding", None) or "ascii"
    try:
        character.encode(encoding)
    except UnicodeEncodeError:
        return False
    return True


def caution_glyph() -> str:
    """Warning marker: "⚠️" when the stream supports it, otherwise "[!]"."""
    emoji, fallback = ("⚠️", "[!]")  # pragma: no mutate
    if _supports_character(emoji):
        return emoji
    return fallback


def error_glyph() -> str:
    """Error marker: "❌" when the stream supports it, otherwise "[X]"."""
    emoji, fallback = ("❌", "[X]")  # pragma: no mutate
    if _supports_character(emoji):
        return emoji
    return fallback


def warn(msg: str) -> None:
    """Emit a yellow, bold warning line to **stderr** with a caution glyph.

    Example:
        ``⚠️  Input closed; leaving the shell.``
    """
    g = caution_glyph()
    click.secho(f"{g}  {msg}", fg="yellow", bold=True, err=True)


def error(msg: str) -> None:
    """Emit a red, bold error line to **stderr** with an error glyph.

    Example:
        ``❌  ERROR: Query target not found: Department "Shipping" not found``
    """
    g = error_glyph()
    click.secho(f"{g}  {msg}", fg="red", bold=True, err=True)

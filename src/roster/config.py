"""Configuration utilities for ROSTER.

This module centralizes small helpers and constants related to application
configuration. ROSTER reads no config files; everything comes from the
environment (or the matching CLI options).
"""

import os

SEED_ENVVAR = "ROSTER_SEED"  # pragma: no mutate
PROMPT_ENVVAR = "ROSTER_PROMPT"  # pragma: no mutate

DEFAULT_PROMPT = "> "  # pragma: no mutate

_TRUTHY = frozenset({"1", "true", "yes", "on"})
_FALSY = frozenset({"0", "false", "no", "off"})


class InvalidSettingError(ValueError):
    """Raised when an environment setting has a value ROSTER cannot interpret."""

    def __init__(self, name: str, value: str) -> None:
        super().__init__(f"Invalid value for {name}: {value!r}")
        self.name = name
        self.value = value


def get_seed() -> bool:
    """Whether a new directory should be populated with the seed fixture.

    Returns:
        True if `ROSTER_SEED` is set to `1`, `true`, `yes`, or `on`
        (case-insensitive); False if it is unset, empty, or `0/false/no/off`.

    Raises:
        InvalidSettingError: If `ROSTER_SEED` holds any other value.
    """
    if not (value := os.environ.get(SEED_ENVVAR, "").strip()):
        return False
    if value.lower() in _TRUTHY:
        return True
    if value.lower() in _FALSY:
        return False
    raise InvalidSettingError(SEED_ENVVAR, value)

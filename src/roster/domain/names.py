"""Name normalization for departments and employees.

Every name entering the directory is reduced to two forms:

- a **key**: the uppercased name, used for identity and lookups, and
- a **display name**: the title-cased name shown to users.

The key of an entity is always derived from its name, never stored separately.
"""


def to_key(raw: str) -> str:
    """Return the case-insensitive lookup key for ``raw``."""
    return raw.upper()


def _capitalize_word(word: str) -> str:
    return word[:1].upper() + word[1:].lower()


def to_department_name(raw: str) -> str:
    """Return the display form of a department name.

    The whole token is treated as one word: first character upper, rest lower.

    Example:
        >>> to_department_name("sHIPPING")
        'Shipping'
    """
    return _capitalize_word(raw)


def to_employee_name(raw: str) -> str:
    """Return the display form of an employee name.

    Each whitespace-separated word is capitalized and the words are re-joined
    with single spaces, so multi-word names are supported.

    Example:
        >>> to_employee_name("baby   DRIVER")
        'Baby Driver'
    """
    return " ".join(_capitalize_word(word) for word in raw.split())

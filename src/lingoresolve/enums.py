"""Enumerations for lingoresolve type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.13+.
"""

from enum import StrEnum


class LoadStatus(StrEnum):
    """Outcome of loading one catalog from the backing source.

    StrEnum provides automatic string conversion: str(LoadStatus.SUCCESS) == "success"
    """

    SUCCESS = "success"
    """Payload fetched and parsed."""

    NOT_FOUND = "not_found"
    """Source has no catalog for the locale. Recorded as an empty catalog."""

    ERROR = "error"
    """Source failed or payload was malformed. Recorded as an empty catalog."""


class MissingKeyPolicy(StrEnum):
    """What translate() returns when no catalog in the chain has the key.

    StrEnum provides automatic string conversion: str(MissingKeyPolicy.EMPTY) == "empty"
    """

    EMPTY = "empty"
    """Return the empty string."""

    BRACKETED = "bracketed"
    """Return the key wrapped in braces: {HELLO}"""

    KEY = "key"
    """Return the key itself: HELLO"""


class FormatErrorPolicy(StrEnum):
    """What translate() returns when arguments do not fit the template.

    StrEnum provides automatic string conversion: str(FormatErrorPolicy.RAW) == "raw"
    """

    RAW = "raw"
    """Return the template unformatted."""

    MARKED = "marked"
    """Return the template followed by a {!format} marker."""


__all__ = [
    "FormatErrorPolicy",
    "LoadStatus",
    "MissingKeyPolicy",
]

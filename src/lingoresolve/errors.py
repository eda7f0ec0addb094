"""Exception hierarchy for lingoresolve.

Only InvalidLocaleFormatError (and CatalogSourceUnavailableError when the
default locale has no catalog at all) reaches callers of the public API.
The remaining types describe failures that are recovered locally and
reported through logging, load results, and the on_load_error callback.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

__all__ = [
    "CatalogError",
    "CatalogParseError",
    "CatalogSourceUnavailableError",
    "FormatArgumentError",
    "InvalidLocaleFormatError",
    "LingoError",
]


class LingoError(Exception):
    """Base exception for all lingoresolve errors."""


class InvalidLocaleFormatError(LingoError, ValueError):
    """Raw locale string does not match language[-_region].

    Indicates a programmer or configuration error; never swallowed.

    Attributes:
        raw: The rejected input (repr-safe, may be a non-string)
    """

    def __init__(self, raw: object) -> None:
        """Initialize InvalidLocaleFormatError.

        Args:
            raw: The rejected locale value
        """
        super().__init__(f"Malformed locale string {raw!r}")
        self.raw = raw


class CatalogError(LingoError):
    """Base for failures tied to one catalog.

    Attributes:
        locale: Canonical identifier whose catalog failed
        cause: Underlying exception, if any
    """

    def __init__(self, message: str, *, locale: str, cause: BaseException | None = None) -> None:
        """Initialize CatalogError.

        Args:
            message: Error message
            locale: Canonical locale identifier
            cause: Underlying exception
        """
        super().__init__(message)
        self.locale = locale
        self.cause = cause


class CatalogSourceUnavailableError(CatalogError):
    """Loader could not produce a payload for a locale.

    Recovered as an empty catalog, except at initialization when no
    default-level catalog is available.
    """


class CatalogParseError(CatalogError):
    """Payload is not a flat JSON object of string keys to string values.

    Recovered as an empty catalog.
    """


class FormatArgumentError(LingoError):
    """Positional arguments do not fit the template's placeholders.

    Never raised out of translate(); built for diagnostics only.

    Attributes:
        key: Message key being formatted
        template: The resolved template
        args: Arguments supplied by the caller
    """

    def __init__(self, key: str, template: str, args: tuple[object, ...], reason: str) -> None:
        """Initialize FormatArgumentError.

        Args:
            key: Message key
            template: Resolved template
            args: Supplied arguments
            reason: Text of the underlying formatting exception
        """
        super().__init__(f"Cannot format '{key}' with {len(args)} argument(s): {reason}")
        self.key = key
        self.template = template
        self.args_supplied = args

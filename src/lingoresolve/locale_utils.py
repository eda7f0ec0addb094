"""Locale utilities: separator normalization, Babel lookup, OS detection.

OS-locale detection is an input source like any other: its result is fed
through LocaleSpec.parse by the caller and rejected the same way when it
does not fit the two-letter syntax.

Python 3.13+.
"""

from __future__ import annotations

import functools
import os
from typing import TYPE_CHECKING

from lingoresolve.babel_compat import get_locale_class

if TYPE_CHECKING:
    from babel import Locale

__all__ = [
    "clear_locale_cache",
    "get_babel_locale",
    "get_system_locale",
    "normalize_separator",
]

_PSEUDO_LOCALES = frozenset({"C", "POSIX"})


def normalize_separator(locale_code: str) -> str:
    """Convert BCP-47 hyphens to POSIX underscores.

    Example:
        >>> normalize_separator("en-US")
        'en_US'
        >>> normalize_separator("en")
        'en'
    """
    return locale_code.replace("-", "_")


@functools.lru_cache(maxsize=128)
def get_babel_locale(locale_code: str) -> Locale:
    """Get a Babel Locale object with caching.

    Thread-safe via lru_cache internal locking.

    Args:
        locale_code: Locale code (BCP-47 or POSIX format accepted)

    Returns:
        Babel Locale object

    Raises:
        BabelImportError: If Babel is not installed
        babel.core.UnknownLocaleError: If locale is not in CLDR
        ValueError: If locale format is invalid
    """
    locale_class = get_locale_class()
    return locale_class.parse(normalize_separator(locale_code))


def clear_locale_cache() -> None:
    """Clear the Babel Locale cache."""
    get_babel_locale.cache_clear()


def _strip_posix_suffixes(value: str) -> str:
    # de_DE.UTF-8@euro -> de_DE
    return value.split(".")[0].split("@")[0]


def get_system_locale(*, raise_on_failure: bool = False) -> str | None:
    """Detect system locale from OS and environment variables.

    Detection order:
    1. Python locale.getlocale() (OS-level locale)
    2. LC_ALL environment variable (overrides all)
    3. LC_MESSAGES environment variable (for message catalogs)
    4. LANG environment variable (default locale)

    Strips encoding and modifier suffixes. Filters out "C" and "POSIX"
    pseudo-locales. The result is not validated.

    Args:
        raise_on_failure: If True, raise RuntimeError when locale cannot be
            determined. If False (default), return None.

    Returns:
        Detected locale code in POSIX format, or None.

    Raises:
        RuntimeError: If raise_on_failure is True and locale cannot be determined.

    Example:
        >>> import os
        >>> os.environ['LANG'] = 'de_DE.UTF-8'
        >>> get_system_locale()
        'de_DE'
    """
    import locale as locale_module  # noqa: PLC0415

    try:
        system_locale, _ = locale_module.getlocale()
        if system_locale:
            stripped = _strip_posix_suffixes(system_locale)
            if stripped and stripped not in _PSEUDO_LOCALES:
                return normalize_separator(stripped)
    except (ValueError, AttributeError):
        pass

    for var in ("LC_ALL", "LC_MESSAGES", "LANG"):
        value = os.environ.get(var)
        if not value:
            continue
        stripped = _strip_posix_suffixes(value)
        if stripped and stripped not in _PSEUDO_LOCALES:
            return normalize_separator(stripped)

    if raise_on_failure:
        msg = (
            "Could not determine system locale. "
            "Set LC_ALL, LC_MESSAGES, or LANG environment variable."
        )
        raise RuntimeError(msg)

    return None

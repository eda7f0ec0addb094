"""Shared constants for lingoresolve.

Constants are grouped by domain:
- Locale syntax: Accepted pattern and canonical separator
- Defaults: Locale, directory, and file naming used by the bundled loaders
- Fallback strings: Sentinels returned when resolution or formatting fails

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Locale syntax
    "LOCALE_PATTERN",
    "CANONICAL_SEPARATOR",
    "MAX_CHAIN_LENGTH",
    # Defaults
    "DEFAULT_LOCALE",
    "DEFAULT_LOCALE_DIR",
    "CATALOG_SUFFIX",
    "MAX_CATALOG_SIZE",
    # Fallback strings
    "FALLBACK_EMPTY",
    "FALLBACK_MISSING_KEY",
    "FALLBACK_FORMAT_ERROR",
]

# ============================================================================
# LOCALE SYNTAX
# ============================================================================

# Two-letter language with optional two-letter region, either separator.
# Matched case-insensitively; output case is normalized by LocaleSpec.
LOCALE_PATTERN: str = r"^([a-z]{2})(?:[_-]([a-z]{2}))?$"

# Separator used in canonical identifiers (en_US, zh_CN).
CANONICAL_SEPARATOR: str = "_"

# current full, current language, default full, default language
MAX_CHAIN_LENGTH: int = 4

# ============================================================================
# DEFAULTS
# ============================================================================

DEFAULT_LOCALE: str = "en_US"

# Directory searched by PathCatalogLoader when none is given.
DEFAULT_LOCALE_DIR: str = "locale"

# Catalog file naming: <identifier>.json
CATALOG_SUFFIX: str = ".json"

# Maximum catalog payload size in bytes (10 MB).
# Prevents unbounded memory allocation from oversized catalog files.
MAX_CATALOG_SIZE: int = 10 * 1024 * 1024

# ============================================================================
# FALLBACK STRINGS
# ============================================================================

FALLBACK_EMPTY: str = ""

# Template patterns - use .format(...)
FALLBACK_MISSING_KEY: str = "{{{key}}}"  # e.g., {HELLO}
FALLBACK_FORMAT_ERROR: str = "{template}{{!format}}"  # e.g., Hello %s!{!format}

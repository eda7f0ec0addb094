"""lingoresolve - runtime message translation with locale fallback.

Resolves a message key for the current locale from flat key -> template
catalogs, falling back through a fixed chain (current locale, its language,
default locale, its language) and substituting %-style positional arguments.

Public API:
    TranslationService - Thread-safe translate/set_locale facade
    TranslatorConfig - Missing-key and format-error policies, lock timeout
    LocaleSpec - Canonical (language, region) locale value
    parse_locale - Parse a raw locale string into a LocaleSpec
    PathCatalogLoader - <dir>/<locale>.json catalog source
    MappingCatalogLoader - In-memory catalog source
    ZipCatalogLoader - Zip archive catalog source

Exceptions:
    LingoError - Base exception class
    InvalidLocaleFormatError - Malformed locale string
    CatalogSourceUnavailableError - Default locale has no loadable catalog

Submodules:
    lingoresolve.catalog - Loaders, parsing, CatalogStore, load diagnostics
    lingoresolve.runtime - Fallback chain, formatting, RWLock, configuration
    lingoresolve.locale_utils - System locale detection, Babel lookup
"""

from .catalog import (
    CatalogStore,
    FallbackInfo,
    LoadSummary,
    MappingCatalogLoader,
    PathCatalogLoader,
    ZipCatalogLoader,
)
from .enums import FormatErrorPolicy, LoadStatus, MissingKeyPolicy
from .errors import (
    CatalogParseError,
    CatalogSourceUnavailableError,
    InvalidLocaleFormatError,
    LingoError,
)
from .locale_spec import LocaleSpec, parse_locale
from .runtime import TranslatorConfig
from .service import TranslationService

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("lingoresolve")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "CatalogParseError",
    "CatalogSourceUnavailableError",
    "CatalogStore",
    "FallbackInfo",
    "FormatErrorPolicy",
    "InvalidLocaleFormatError",
    "LingoError",
    "LoadStatus",
    "LoadSummary",
    "LocaleSpec",
    "MappingCatalogLoader",
    "MissingKeyPolicy",
    "PathCatalogLoader",
    "TranslationService",
    "TranslatorConfig",
    "ZipCatalogLoader",
    "__version__",
    "parse_locale",
]

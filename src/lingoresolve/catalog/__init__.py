"""Catalog package: loaders, payload parsing, and the catalog store.

Submodules:
    types    - PEP 695 type aliases (LocaleCode, MessageKey, Template, Catalog)
    loading  - CatalogLoader protocol, Path/Mapping/Zip loaders,
               FallbackInfo, CatalogLoadResult, LoadSummary
    parsing  - parse_catalog (flat JSON object -> read-only mapping)
    store    - CatalogStore (lazy load-once cache, locale pointers)

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability

from lingoresolve.catalog.loading import (
    CatalogLoader,
    CatalogLoadResult,
    FallbackInfo,
    LoadSummary,
    MappingCatalogLoader,
    PathCatalogLoader,
    ZipCatalogLoader,
)
from lingoresolve.catalog.parsing import parse_catalog
from lingoresolve.catalog.store import CatalogSnapshot, CatalogStore
from lingoresolve.catalog.types import (
    EMPTY_CATALOG,
    Catalog,
    CatalogPayload,
    LocaleCode,
    MessageKey,
    Template,
)

__all__ = [
    # Store
    "CatalogStore",
    "CatalogSnapshot",
    # Loaders
    "CatalogLoader",
    "PathCatalogLoader",
    "MappingCatalogLoader",
    "ZipCatalogLoader",
    # Parsing
    "parse_catalog",
    # Load tracking
    "CatalogLoadResult",
    "LoadSummary",
    # Fallback observability
    "FallbackInfo",
    # Type aliases
    "EMPTY_CATALOG",
    "Catalog",
    "CatalogPayload",
    "LocaleCode",
    "MessageKey",
    "Template",
]

"""Type aliases for the catalog domain.

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Callable, Mapping
from types import MappingProxyType
from typing import TypeAlias

__all__ = [
    "EMPTY_CATALOG",
    "Catalog",
    "CatalogLoaderFunc",
    "CatalogPayload",
    "LocaleCode",
    "MessageKey",
    "Template",
]

LocaleCode: TypeAlias = str
"""Canonical locale identifier (e.g., 'en', 'en_US')."""

MessageKey: TypeAlias = str
"""Catalog key (e.g., 'HELLO')."""

Template: TypeAlias = str
"""Message template with optional %-style placeholders (e.g., 'Hello %s!')."""

Catalog: TypeAlias = Mapping[MessageKey, Template]
"""Immutable key -> template mapping for one locale."""

CatalogPayload: TypeAlias = bytes | bytearray | memoryview | str | Mapping[str, str]
"""What a loader may return: raw JSON bytes/text or an already-decoded mapping."""

CatalogLoaderFunc: TypeAlias = Callable[[LocaleCode], CatalogPayload | None]
"""Backing source: canonical identifier -> payload, None when absent."""

EMPTY_CATALOG: Mapping[str, str] = MappingProxyType({})
"""Shared catalog recorded for locales whose source is missing or broken."""

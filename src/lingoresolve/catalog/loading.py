"""Catalog loading infrastructure.

The store accepts any callable mapping a canonical locale identifier to a
payload. This module provides the protocol describing that contract, three
ready-made sources, and the immutable records used to report load attempts.

Components:
    CatalogLoader - Protocol for catalog sources (structural typing)
    PathCatalogLoader - <directory>/<locale>.json with path-traversal prevention
    MappingCatalogLoader - In-memory catalogs keyed by locale
    ZipCatalogLoader - <prefix><locale>.json members of a zip archive
    FallbackInfo - Record of a key resolved below the requested locale
    CatalogLoadResult - Result of one load attempt
    LoadSummary - Aggregate of all load attempts

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import zipfile
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Protocol

from lingoresolve.catalog.types import CatalogPayload, LocaleCode
from lingoresolve.constants import CATALOG_SUFFIX, DEFAULT_LOCALE_DIR
from lingoresolve.enums import LoadStatus
from lingoresolve.locale_spec import LocaleSpec

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Protocol
    "CatalogLoader",
    "describe_source",
    # Concrete loaders
    "PathCatalogLoader",
    "MappingCatalogLoader",
    "ZipCatalogLoader",
    # Fallback observability
    "FallbackInfo",
    # Load result types
    "CatalogLoadResult",
    "LoadSummary",
]


class CatalogLoader(Protocol):
    """Protocol for catalog sources.

    A plain function satisfies it. Returning None, or raising
    FileNotFoundError, means the source has no catalog for the locale.
    Any other exception is a source failure. Both are recorded as an empty
    catalog by the store.

    Loaders may additionally define describe_path(locale) -> str for
    diagnostics; see describe_source().

    Example:
        >>> def fetch(locale: str) -> bytes | None:
        ...     return CATALOGS.get(locale)
        >>> service = TranslationService(fetch, "en_US")
    """

    def __call__(self, locale: LocaleCode) -> CatalogPayload | None:
        """Fetch the payload for a canonical locale identifier."""
        ...


def describe_source(loader: object, locale: LocaleCode) -> str:
    """Human-readable origin of a locale's catalog for log lines and results.

    Uses the loader's describe_path() when present.
    """
    describe = getattr(loader, "describe_path", None)
    if callable(describe):
        return str(describe(locale))
    return f"{locale}{CATALOG_SUFFIX}"


def _validate_locale_component(locale: LocaleCode) -> None:
    if not locale:
        msg = "Locale code cannot be empty"
        raise ValueError(msg)
    if ".." in locale:
        msg = f"Path traversal sequences not allowed in locale: '{locale}'"
        raise ValueError(msg)
    if "/" in locale or "\\" in locale:
        msg = f"Path separators not allowed in locale: '{locale}'"
        raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class PathCatalogLoader:
    """File system loader reading <base_dir>/<locale><suffix>.

    Security:
        Locale codes containing path separators or ".." are rejected, and the
        resolved path must stay inside base_dir.

    Example:
        >>> loader = PathCatalogLoader("locale")
        >>> loader("en_US")  # reads locale/en_US.json
        b'{"HELLO": "Hello %s!"}'

    Attributes:
        base_dir: Directory holding catalog files (default: "locale")
        suffix: File suffix appended to the locale identifier
    """

    base_dir: str | Path = DEFAULT_LOCALE_DIR
    suffix: str = CATALOG_SUFFIX
    _resolved_root: Path = field(init=False, repr=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "_resolved_root", Path(self.base_dir).resolve())

    def describe_path(self, locale: LocaleCode) -> str:
        """Path the catalog for locale would be read from."""
        return str(Path(self.base_dir) / f"{locale}{self.suffix}")

    def __call__(self, locale: LocaleCode) -> bytes:
        """Read the catalog file for locale.

        Raises:
            ValueError: If locale contains path traversal sequences
            FileNotFoundError: If the file does not exist
            OSError: If the file cannot be read
        """
        _validate_locale_component(locale)
        full_path = (self._resolved_root / f"{locale}{self.suffix}").resolve()
        try:
            full_path.relative_to(self._resolved_root)
        except ValueError:
            msg = f"Path traversal detected: '{locale}' escapes {self._resolved_root}"
            raise ValueError(msg) from None
        return full_path.read_bytes()


class MappingCatalogLoader:
    """In-memory loader over a mapping of locale -> payload.

    Keys are normalized on construction, so "en-us" and "en_US" address the
    same entry. Values may be decoded mappings, JSON text, or JSON bytes.

    Example:
        >>> loader = MappingCatalogLoader({"en-US": {"HELLO": "Hello %s!"}})
        >>> loader("en_US")
        mappingproxy({'HELLO': 'Hello %s!'})
    """

    __slots__ = ("_payloads",)

    def __init__(self, payloads: Mapping[str, CatalogPayload]) -> None:
        """Initialize from locale -> payload pairs.

        Raises:
            InvalidLocaleFormatError: If a key is not a valid locale
        """
        normalized: dict[LocaleCode, CatalogPayload] = {}
        for raw, payload in payloads.items():
            if isinstance(payload, Mapping):
                payload = MappingProxyType(dict(payload))
            normalized[LocaleSpec.parse(raw).full] = payload
        self._payloads: Mapping[LocaleCode, CatalogPayload] = MappingProxyType(normalized)

    @property
    def locales(self) -> tuple[LocaleCode, ...]:
        """Locales this loader can serve, in insertion order."""
        return tuple(self._payloads)

    def describe_path(self, locale: LocaleCode) -> str:
        return f"<memory>/{locale}"

    def __call__(self, locale: LocaleCode) -> CatalogPayload | None:
        return self._payloads.get(locale)

    def __repr__(self) -> str:
        return f"MappingCatalogLoader(locales={self.locales!r})"


@dataclass(frozen=True, slots=True)
class ZipCatalogLoader:
    """Loader reading <prefix><locale><suffix> members of a zip archive.

    The archive is opened per call, so one instance is safe to share
    between threads.

    Attributes:
        archive: Path to the zip file
        prefix: Member name prefix, e.g. "locale/"
        suffix: Member name suffix
    """

    archive: str | Path
    prefix: str = f"{DEFAULT_LOCALE_DIR}/"
    suffix: str = CATALOG_SUFFIX

    def member_name(self, locale: LocaleCode) -> str:
        return f"{self.prefix}{locale}{self.suffix}"

    def describe_path(self, locale: LocaleCode) -> str:
        return f"{self.archive}!{self.member_name(locale)}"

    def __call__(self, locale: LocaleCode) -> bytes:
        """Read the catalog member for locale.

        Raises:
            ValueError: If locale contains path traversal sequences
            FileNotFoundError: If the archive or member does not exist
            zipfile.BadZipFile: If the archive is corrupt
        """
        _validate_locale_component(locale)
        name = self.member_name(locale)
        with zipfile.ZipFile(self.archive) as zf:
            try:
                return zf.read(name)
            except KeyError:
                msg = f"No member '{name}' in {self.archive}"
                raise FileNotFoundError(msg) from None


@dataclass(frozen=True, slots=True)
class FallbackInfo:
    """A key resolved from a locale other than the requested one.

    Passed to the on_fallback callback of TranslationService.

    Attributes:
        requested_locale: Current full locale (first chain entry)
        resolved_locale: Chain entry whose catalog held the key
        key: The message key

    Example:
        >>> def log_fallback(info: FallbackInfo) -> None:
        ...     print(f"{info.key}: {info.requested_locale} -> {info.resolved_locale}")
        >>> service = TranslationService(loader, "en_US", on_fallback=log_fallback)
    """

    requested_locale: LocaleCode
    resolved_locale: LocaleCode
    key: str


@dataclass(frozen=True, slots=True)
class CatalogLoadResult:
    """Result of loading one catalog.

    Attributes:
        locale: Canonical identifier
        status: Load status (success, not_found, error)
        error: CatalogError if status is not SUCCESS, None otherwise
        source_path: Human-readable origin of the payload
        message_count: Number of keys in the recorded catalog
    """

    locale: LocaleCode
    status: LoadStatus
    error: Exception | None = None
    source_path: str | None = None
    message_count: int = 0

    @property
    def is_success(self) -> bool:
        """Check if catalog loaded successfully."""
        return self.status == LoadStatus.SUCCESS

    @property
    def is_not_found(self) -> bool:
        """Check if the source had no catalog (expected for fallback levels)."""
        return self.status == LoadStatus.NOT_FOUND

    @property
    def is_error(self) -> bool:
        """Check if the source failed or the payload was malformed."""
        return self.status == LoadStatus.ERROR


@dataclass(frozen=True, slots=True)
class LoadSummary:
    """Immutable aggregate of catalog load results.

    Example:
        >>> summary = service.get_load_summary()
        >>> for result in summary.get_errors():
        ...     print(f"Failed: {result.source_path}: {result.error}")
    """

    results: tuple[CatalogLoadResult, ...]

    def __repr__(self) -> str:
        return (
            f"LoadSummary(total={self.total_attempted}, "
            f"ok={self.successful}, "
            f"not_found={self.not_found}, "
            f"errors={self.errors})"
        )

    @property
    def total_attempted(self) -> int:
        return len(self.results)

    @property
    def successful(self) -> int:
        return sum(1 for r in self.results if r.is_success)

    @property
    def not_found(self) -> int:
        return sum(1 for r in self.results if r.is_not_found)

    @property
    def errors(self) -> int:
        return sum(1 for r in self.results if r.is_error)

    @property
    def has_errors(self) -> bool:
        return self.errors > 0

    @property
    def all_successful(self) -> bool:
        """True if every attempt found and parsed its catalog."""
        return self.errors == 0 and self.not_found == 0

    def get_errors(self) -> tuple[CatalogLoadResult, ...]:
        return tuple(r for r in self.results if r.is_error)

    def get_not_found(self) -> tuple[CatalogLoadResult, ...]:
        return tuple(r for r in self.results if r.is_not_found)

    def get_successful(self) -> tuple[CatalogLoadResult, ...]:
        return tuple(r for r in self.results if r.is_success)

    def get_by_locale(self, locale: LocaleCode) -> tuple[CatalogLoadResult, ...]:
        return tuple(r for r in self.results if r.locale == locale)

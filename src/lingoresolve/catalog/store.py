"""Catalog storage with lazy, load-once caching.

CatalogStore owns every loaded catalog plus the current and default locale
pointers. Catalogs are published copy-on-write: each insertion builds a new
read-only mapping and swaps the reference under the write lock, so a
snapshot handed to a reader never changes underneath it.

Loading is lazy and memoized forever: a canonical identifier is fetched the
first time a locale (or a locale whose language-only projection it is) is
ensured, and never evicted. The loader is always invoked outside the lock.
Two threads ensuring the same new locale may both fetch it; both publish
and the last one wins.

Failure policy:
    - Malformed locale strings raise InvalidLocaleFormatError.
    - Missing sources and broken payloads become empty catalogs, are logged,
      recorded as the locale's latest CatalogLoadResult, and passed to
      on_load_error.
    - initialize() raises CatalogSourceUnavailableError only when no
      default-level catalog could be loaded (require_default_catalog=True).

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator, Mapping
from dataclasses import dataclass
from types import MappingProxyType

from lingoresolve.catalog.loading import CatalogLoadResult, LoadSummary, describe_source
from lingoresolve.catalog.parsing import parse_catalog
from lingoresolve.catalog.types import EMPTY_CATALOG, Catalog, CatalogLoaderFunc, LocaleCode
from lingoresolve.enums import LoadStatus
from lingoresolve.errors import (
    CatalogError,
    CatalogParseError,
    CatalogSourceUnavailableError,
)
from lingoresolve.locale_spec import LocaleSpec
from lingoresolve.runtime.rwlock import RWLock

__all__ = ["CatalogSnapshot", "CatalogStore"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class CatalogSnapshot:
    """Consistent view of store state taken under one read lock.

    Attributes:
        current: Current locale
        default: Default locale
        catalogs: Read-only mapping of canonical identifier to catalog
    """

    current: LocaleSpec
    default: LocaleSpec
    catalogs: Mapping[LocaleCode, Catalog]


def _with_language_only(spec: LocaleSpec) -> Iterator[LocaleSpec]:
    yield spec
    if not spec.is_language_only():
        yield spec.language_only()


class CatalogStore:
    """Thread-safe owner of loaded catalogs and locale pointers.

    Example:
        >>> store = CatalogStore()
        >>> store.initialize(loader, "en_US")
        >>> store.set_current_locale("zh-CN")
        >>> store.snapshot().current.full
        'zh_CN'
    """

    __slots__ = (
        "_catalogs",
        "_current",
        "_default",
        "_load_results",
        "_loader",
        "_lock",
        "_lock_timeout",
        "_on_load_error",
    )

    def __init__(
        self,
        *,
        lock_timeout: float | None = None,
        on_load_error: Callable[[CatalogError], None] | None = None,
    ) -> None:
        """Create an empty, uninitialized store.

        Args:
            lock_timeout: Seconds to wait for the internal lock; None waits
                indefinitely. Expiry raises TimeoutError.
            on_load_error: Called with the CatalogError of every failed or
                missing catalog, outside the lock.
        """
        self._lock = RWLock()
        self._lock_timeout = lock_timeout
        self._on_load_error = on_load_error
        self._loader: CatalogLoaderFunc | None = None
        self._catalogs: Mapping[LocaleCode, Catalog] = MappingProxyType({})
        self._current: LocaleSpec | None = None
        self._default: LocaleSpec | None = None
        self._load_results: dict[LocaleCode, CatalogLoadResult] = {}

    def __repr__(self) -> str:
        return (
            f"CatalogStore(default={self._default}, current={self._current}, "
            f"loaded={len(self._catalogs)})"
        )

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------

    def _report(self, error: CatalogError) -> None:
        if self._on_load_error is not None:
            self._on_load_error(error)

    def _fetch(
        self, loader: CatalogLoaderFunc, locale: LocaleCode
    ) -> tuple[Catalog, CatalogLoadResult]:
        """Invoke the loader and parse its payload. Never raises CatalogError."""
        source_path = describe_source(loader, locale)

        try:
            payload = loader(locale)
        except FileNotFoundError:
            payload = None
        except Exception as e:  # noqa: BLE001 - loader is caller-supplied
            error = CatalogSourceUnavailableError(
                f"Catalog source for '{locale}' failed: {e}", locale=locale, cause=e
            )
            logger.warning("Catalog %s not loaded from %s: %s", locale, source_path, e)
            self._report(error)
            return EMPTY_CATALOG, CatalogLoadResult(
                locale=locale, status=LoadStatus.ERROR, error=error, source_path=source_path
            )

        if payload is None:
            error = CatalogSourceUnavailableError(
                f"No catalog source for '{locale}'", locale=locale
            )
            logger.info("Catalog %s not found at %s", locale, source_path)
            self._report(error)
            return EMPTY_CATALOG, CatalogLoadResult(
                locale=locale,
                status=LoadStatus.NOT_FOUND,
                error=error,
                source_path=source_path,
            )

        try:
            catalog = parse_catalog(payload, locale=locale)
        except CatalogParseError as e:
            logger.error("Failed to parse catalog %s: %s", source_path, e)
            self._report(e)
            return EMPTY_CATALOG, CatalogLoadResult(
                locale=locale, status=LoadStatus.ERROR, error=e, source_path=source_path
            )

        logger.info("Loaded catalog %s (%d messages)", locale, len(catalog))
        return catalog, CatalogLoadResult(
            locale=locale,
            status=LoadStatus.SUCCESS,
            source_path=source_path,
            message_count=len(catalog),
        )

    def _publish(self, fetched: list[tuple[LocaleCode, Catalog, CatalogLoadResult]]) -> None:
        """Swap in a new catalog mapping containing fetched entries.

        Caller must hold the write lock.
        """
        catalogs = dict(self._catalogs)
        for locale, catalog, result in fetched:
            if locale in catalogs:
                logger.debug("Catalog %s already published, replacing", locale)
            catalogs[locale] = catalog
            self._load_results[locale] = result
        self._catalogs = MappingProxyType(catalogs)

    def _require_loader(self) -> CatalogLoaderFunc:
        with self._lock.read(self._lock_timeout):
            loader = self._loader
        if loader is None:
            msg = "CatalogStore is not initialized; call initialize() first"
            raise RuntimeError(msg)
        return loader

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def initialize(
        self,
        loader: CatalogLoaderFunc,
        default_locale_raw: str,
        *,
        require_default_catalog: bool = True,
    ) -> LocaleSpec:
        """Set the loader and load the default locale's catalogs.

        Loads the default full catalog and, when the default has a region,
        its language-only catalog. Resets any previous state. Sets the
        current locale to the default.

        Args:
            loader: Catalog source
            default_locale_raw: Default locale, e.g. "en_US"
            require_default_catalog: Fail when no default-level catalog loads

        Returns:
            Parsed default locale

        Raises:
            InvalidLocaleFormatError: If default_locale_raw is malformed
            CatalogSourceUnavailableError: If require_default_catalog is set
                and none of the default-level catalogs could be loaded
        """
        default = LocaleSpec.parse(default_locale_raw)
        if not callable(loader):
            msg = f"loader must be callable, got {type(loader).__name__}"
            raise TypeError(msg)

        fetched = [
            (spec.full, *self._fetch(loader, spec.full))
            for spec in _with_language_only(default)
        ]

        if require_default_catalog and not any(result.is_success for _, _, result in fetched):
            tried = ", ".join(locale for locale, _, _ in fetched)
            msg = f"No catalog available for default locale {default} (tried: {tried})"
            first_error = fetched[0][2].error
            raise CatalogSourceUnavailableError(
                msg,
                locale=default.full,
                cause=first_error.cause if isinstance(first_error, CatalogError) else None,
            )

        with self._lock.write(self._lock_timeout):
            self._loader = loader
            self._catalogs = MappingProxyType({})
            self._load_results = {}
            self._publish(fetched)
            self._default = default
            self._current = default

        logger.info("Catalog store initialized with default locale %s", default)
        return default

    def ensure_loaded(self, spec: LocaleSpec) -> None:
        """Load spec's catalog (and its language-only catalog) if absent.

        Idempotent. Source and parse failures are recorded as empty catalogs
        and never raised.

        Raises:
            RuntimeError: If the store is not initialized
        """
        loader = self._require_loader()
        with self._lock.read(self._lock_timeout):
            catalogs = self._catalogs

        missing = [s.full for s in _with_language_only(spec) if s.full not in catalogs]
        if not missing:
            logger.debug("Catalogs for %s already loaded", spec)
            return

        fetched = [(locale, *self._fetch(loader, locale)) for locale in missing]
        with self._lock.write(self._lock_timeout):
            self._publish(fetched)

    def set_current_locale(self, raw: str) -> LocaleSpec:
        """Switch the current locale, loading its catalogs first.

        The exclusive lock is held only for the pointer swap; loading
        happens before it is taken.

        Args:
            raw: Locale string, e.g. "zh-CN"

        Returns:
            Parsed new current locale

        Raises:
            InvalidLocaleFormatError: If raw is malformed (state unchanged)
            RuntimeError: If the store is not initialized
        """
        spec = LocaleSpec.parse(raw)
        self.ensure_loaded(spec)
        with self._lock.write(self._lock_timeout):
            previous = self._current
            self._current = spec
        logger.info("Current locale changed: %s -> %s", previous, spec)
        return spec

    def reload(self, spec: LocaleSpec) -> CatalogLoadResult:
        """Re-fetch one catalog and replace it wholesale.

        A failed reload records an empty catalog, same as a failed load.

        Raises:
            RuntimeError: If the store is not initialized
        """
        loader = self._require_loader()
        catalog, result = self._fetch(loader, spec.full)
        with self._lock.write(self._lock_timeout):
            self._publish([(spec.full, catalog, result)])
        logger.info("Reloaded catalog %s (%s)", spec, result.status)
        return result

    def reload_all(self) -> tuple[CatalogLoadResult, ...]:
        """Re-fetch every loaded catalog.

        Raises:
            RuntimeError: If the store is not initialized
        """
        loader = self._require_loader()
        with self._lock.read(self._lock_timeout):
            locales = tuple(self._catalogs)
        fetched = [(locale, *self._fetch(loader, locale)) for locale in locales]
        with self._lock.write(self._lock_timeout):
            self._publish(fetched)
        return tuple(result for _, _, result in fetched)

    def snapshot(self) -> CatalogSnapshot:
        """Current locale, default locale, and catalog mapping, read together.

        Raises:
            RuntimeError: If the store is not initialized
        """
        with self._lock.read(self._lock_timeout):
            current, default, catalogs = self._current, self._default, self._catalogs
        if current is None or default is None:
            msg = "CatalogStore is not initialized; call initialize() first"
            raise RuntimeError(msg)
        return CatalogSnapshot(current=current, default=default, catalogs=catalogs)

    @property
    def loaded_locales(self) -> tuple[LocaleCode, ...]:
        """Canonical identifiers with a recorded catalog (possibly empty)."""
        with self._lock.read(self._lock_timeout):
            return tuple(self._catalogs)

    def get_load_summary(self) -> LoadSummary:
        """Latest load result for each locale since initialize().

        A reload replaces the locale's earlier result, so the summary stays
        bounded by the number of known locales.
        """
        with self._lock.read(self._lock_timeout):
            return LoadSummary(results=tuple(self._load_results.values()))

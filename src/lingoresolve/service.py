"""TranslationService - the public translation entry point.

Combines current/default locale state (CatalogStore), fallback resolution
(runtime.resolver), and positional formatting (runtime.formatting).

Thread Safety:
    translate() takes the store's read lock only long enough to snapshot the
    current locale and catalog mapping; resolution and formatting run
    without any lock. set_locale() loads catalogs first, then takes the
    exclusive lock for the pointer swap. A translate() call therefore sees
    either the old locale or the new one, never a mix.

Missing keys and argument mismatches never raise; see MissingKeyPolicy and
FormatErrorPolicy.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path

from lingoresolve.catalog.loading import (
    CatalogLoadResult,
    FallbackInfo,
    LoadSummary,
    PathCatalogLoader,
)
from lingoresolve.catalog.store import CatalogStore
from lingoresolve.catalog.types import CatalogLoaderFunc, LocaleCode
from lingoresolve.constants import (
    DEFAULT_LOCALE,
    DEFAULT_LOCALE_DIR,
    FALLBACK_EMPTY,
    FALLBACK_MISSING_KEY,
)
from lingoresolve.enums import MissingKeyPolicy
from lingoresolve.errors import CatalogError, InvalidLocaleFormatError
from lingoresolve.locale_spec import LocaleSpec
from lingoresolve.locale_utils import get_system_locale
from lingoresolve.runtime.config import TranslatorConfig
from lingoresolve.runtime.formatting import format_template
from lingoresolve.runtime.resolver import build_fallback_chain, resolve

__all__ = ["TranslationService"]

logger = logging.getLogger(__name__)


class TranslationService:
    """Locale-aware key -> string translation with a four-level fallback.

    Lookup order for current zh_CN and default en_US:

        1. zh_CN  2. zh  3. en_US  4. en

    Example:
        >>> loader = MappingCatalogLoader({
        ...     "en_US": {"HELLO": "Hello %s!"},
        ...     "zh_CN": {"HELLO": "你好%s!"},
        ... })
        >>> service = TranslationService(loader, "en_US")
        >>> service.translate("HELLO", "Sam")
        'Hello Sam!'
        >>> _ = service.set_locale("zh_CN")
        >>> service.translate("HELLO", "Sam")
        '你好Sam!'
        >>> _ = service.set_locale("fr")  # no fr catalog; not an error
        >>> service.translate("HELLO", "Sam")
        'Hello Sam!'
    """

    __slots__ = ("_config", "_on_fallback", "_store")

    def __init__(
        self,
        loader: CatalogLoaderFunc,
        default_locale: str = DEFAULT_LOCALE,
        *,
        config: TranslatorConfig | None = None,
        on_fallback: Callable[[FallbackInfo], None] | None = None,
        on_load_error: Callable[[CatalogError], None] | None = None,
    ) -> None:
        """Create a service and load the default locale's catalogs.

        Args:
            loader: Catalog source, canonical identifier -> payload
            default_locale: Fallback floor, e.g. "en_US"
            config: Policies and lock timeout (defaults: TranslatorConfig())
            on_fallback: Called when a key resolves from a locale other than
                the current full locale
            on_load_error: Called for every missing or broken catalog

        Raises:
            InvalidLocaleFormatError: If default_locale is malformed
            CatalogSourceUnavailableError: If no default-level catalog loads
                and config.require_default_catalog is set
        """
        self._config = config if config is not None else TranslatorConfig()
        self._on_fallback = on_fallback
        self._store = CatalogStore(
            lock_timeout=self._config.lock_timeout,
            on_load_error=on_load_error,
        )
        self._store.initialize(
            loader,
            default_locale,
            require_default_catalog=self._config.require_default_catalog,
        )

    @classmethod
    def from_directory(
        cls,
        directory: str | Path = DEFAULT_LOCALE_DIR,
        default_locale: str = DEFAULT_LOCALE,
        *,
        config: TranslatorConfig | None = None,
        on_fallback: Callable[[FallbackInfo], None] | None = None,
        on_load_error: Callable[[CatalogError], None] | None = None,
    ) -> TranslationService:
        """Create a service reading <directory>/<locale>.json files.

        Remaining arguments are as for the constructor.
        """
        return cls(
            PathCatalogLoader(directory),
            default_locale,
            config=config,
            on_fallback=on_fallback,
            on_load_error=on_load_error,
        )

    def __repr__(self) -> str:
        snapshot = self._store.snapshot()
        return (
            f"TranslationService(current={snapshot.current}, "
            f"default={snapshot.default}, catalogs={len(snapshot.catalogs)})"
        )

    @property
    def config(self) -> TranslatorConfig:
        return self._config

    @property
    def current_locale(self) -> LocaleSpec:
        """Locale used by subsequent translate() calls."""
        return self._store.snapshot().current

    @property
    def default_locale(self) -> LocaleSpec:
        """Fallback floor fixed at construction."""
        return self._store.snapshot().default

    @property
    def fallback_chain(self) -> tuple[LocaleCode, ...]:
        """Canonical identifiers translate() currently probes, in order."""
        snapshot = self._store.snapshot()
        return build_fallback_chain(snapshot.current, snapshot.default)

    @property
    def loaded_locales(self) -> tuple[LocaleCode, ...]:
        return self._store.loaded_locales

    def _missing(self, key: str) -> str:
        logger.debug("Key '%s' not found in any locale", key)
        match self._config.missing_key_policy:
            case MissingKeyPolicy.BRACKETED:
                return FALLBACK_MISSING_KEY.format(key=key)
            case MissingKeyPolicy.KEY:
                return str(key)
            case _:
                return FALLBACK_EMPTY

    def translate(self, key: str, *args: object) -> str:
        """Translate key for the current locale, formatting with args.

        Falls back through current full, current language, default full,
        default language. Never raises for a missing key or mismatched
        arguments.

        Args:
            key: Message key, e.g. "HELLO"
            *args: Positional values for %-style placeholders

        Returns:
            Formatted translation, or the missing-key sentinel
        """
        snapshot = self._store.snapshot()
        chain = build_fallback_chain(snapshot.current, snapshot.default)
        resolution = resolve(chain, snapshot.catalogs, key)
        if resolution is None:
            return self._missing(key)

        if self._on_fallback is not None and resolution.locale != chain[0]:
            self._on_fallback(
                FallbackInfo(
                    requested_locale=chain[0],
                    resolved_locale=resolution.locale,
                    key=key,
                )
            )

        return format_template(
            resolution.template,
            args,
            key=key,
            policy=self._config.format_error_policy,
        )

    def has_message(self, key: str) -> bool:
        """True if any catalog in the current chain has a non-empty template."""
        snapshot = self._store.snapshot()
        chain = build_fallback_chain(snapshot.current, snapshot.default)
        return resolve(chain, snapshot.catalogs, key) is not None

    def set_locale(self, locale: str) -> LocaleSpec:
        """Make locale current, loading its catalogs if needed.

        A locale with no catalog source is accepted; lookups then fall
        through to the default.

        Returns:
            The parsed, now-current locale

        Raises:
            InvalidLocaleFormatError: If locale is malformed (state unchanged)
        """
        return self._store.set_current_locale(locale)

    def apply_system_locale(
        self, detector: Callable[[], str | None] = get_system_locale
    ) -> LocaleSpec:
        """Seed the current locale from the operating system.

        The detector's result is treated like any set_locale() input. When it
        is missing or malformed, the current locale becomes the default.

        Args:
            detector: Returns a raw locale tag or None

        Returns:
            The now-current locale
        """
        raw = detector()
        default = self.default_locale
        if raw is None:
            logger.info("System locale undetermined, using default %s", default)
            return self._store.set_current_locale(default.full)
        try:
            return self._store.set_current_locale(raw)
        except InvalidLocaleFormatError:
            logger.warning("Ignoring system locale %r, using default %s", raw, default)
            return self._store.set_current_locale(default.full)

    def reload(self, locale: str | None = None) -> tuple[CatalogLoadResult, ...]:
        """Re-fetch catalogs from the loader, replacing them wholesale.

        Args:
            locale: One locale to reload; None reloads every loaded catalog

        Raises:
            InvalidLocaleFormatError: If locale is malformed
        """
        if locale is None:
            return self._store.reload_all()
        return (self._store.reload(LocaleSpec.parse(locale)),)

    def get_load_summary(self) -> LoadSummary:
        """Latest load result for each catalog.

        Example:
            >>> summary = service.get_load_summary()
            >>> summary.get_not_found()[0].locale
            'fr'
        """
        return self._store.get_load_summary()

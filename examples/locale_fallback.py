"""TranslationService Example - Locale Fallback Chains.

Demonstrates how a key is resolved through the four-level chain
(current locale, its language, default locale, its language) and how
missing catalogs and missing keys are handled.

Scenarios covered:
1. Switching between locales with and without catalogs
2. Inspecting the fallback chain
3. Catalogs on disk with PathCatalogLoader
4. Observing fallbacks and load failures

Python 3.13+.
"""

from __future__ import annotations

import json
import logging
import tempfile
from pathlib import Path

from lingoresolve import (
    FallbackInfo,
    MappingCatalogLoader,
    MissingKeyPolicy,
    TranslationService,
    TranslatorConfig,
)

CATALOGS = {
    "en_US": {
        "HELLO": "Hello %s!",
        "IN_EN": "I speak America English!",
        "ONLY_IN_EN_US": "Howdie!",
    },
    "en": {
        "IN_EN": "I speak Generic English!",
        "ONLY_IN_EN": "I'm special!",
    },
    "zh_CN": {
        "HELLO": "你好%s!",
        "ONLY_IN_ZH": "I speak Chinese!",
    },
}


def example_1_switching_locales() -> None:
    """Example 1: en_US -> zh_CN -> fr (no catalog)."""
    print("=" * 60)
    print("Example 1: Switching Locales")
    print("=" * 60)

    service = TranslationService(MappingCatalogLoader(CATALOGS), "en_US")

    for locale in ("en_US", "zh_CN", "fr"):
        service.set_locale(locale)
        print(f"  [{locale}] HELLO -> {service.translate('HELLO', 'Sam')}")


def example_2_chain() -> None:
    """Example 2: Which catalog answers which key."""
    print("\n" + "=" * 60)
    print("Example 2: Inspecting the Fallback Chain")
    print("=" * 60)

    config = TranslatorConfig(missing_key_policy=MissingKeyPolicy.BRACKETED)
    service = TranslationService(MappingCatalogLoader(CATALOGS), "en_US", config=config)
    service.set_locale("zh_CN")

    print(f"  chain: {' -> '.join(service.fallback_chain)}")
    for key in ("ONLY_IN_ZH", "ONLY_IN_EN_US", "ONLY_IN_EN", "IN_EN", "NO_SUCH_KEY"):
        print(f"  {key:14} -> {service.translate(key)}")


def example_3_directory() -> None:
    """Example 3: <dir>/<locale>.json catalogs."""
    print("\n" + "=" * 60)
    print("Example 3: Catalogs on Disk")
    print("=" * 60)

    with tempfile.TemporaryDirectory() as tmpdir:
        base = Path(tmpdir)
        for locale, messages in CATALOGS.items():
            (base / f"{locale}.json").write_text(
                json.dumps(messages, ensure_ascii=False), encoding="utf-8"
            )

        service = TranslationService.from_directory(base, "en_US")
        service.set_locale("zh-CN")
        print(f"  HELLO -> {service.translate('HELLO', 'Sam')}")
        print(f"  {service.get_load_summary()!r}")


def example_4_observability() -> None:
    """Example 4: Callbacks for fallbacks and load failures."""
    print("\n" + "=" * 60)
    print("Example 4: Observing Fallbacks")
    print("=" * 60)

    def on_fallback(info: FallbackInfo) -> None:
        print(f"  [fallback] {info.key}: {info.requested_locale} -> {info.resolved_locale}")

    service = TranslationService(
        MappingCatalogLoader(CATALOGS),
        "en_US",
        on_fallback=on_fallback,
        on_load_error=lambda error: print(f"  [load] {error}"),
    )
    service.set_locale("zh_CN")
    service.translate("IN_EN")
    service.set_locale("de")

    for result in service.get_load_summary().get_not_found():
        print(f"  not found: {result.locale} ({result.source_path})")


if __name__ == "__main__":
    logging.basicConfig(level=logging.WARNING)
    example_1_switching_locales()
    example_2_chain()
    example_3_directory()
    example_4_observability()

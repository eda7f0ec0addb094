"""Fallback-chain construction and key lookup.

Both functions are pure. The chain order is fixed:

    1. current locale        (zh_CN)
    2. lang only             (zh)
    3. default locale        (en_US)
    4. lang only of default  (en)

so a more specific translation always wins over its language-only or
default counterpart. Duplicates collapse to their first occurrence.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass

from lingoresolve.catalog.types import Catalog, LocaleCode, MessageKey, Template
from lingoresolve.locale_spec import LocaleSpec

__all__ = ["Resolution", "build_fallback_chain", "resolve"]


@dataclass(frozen=True, slots=True)
class Resolution:
    """A found template and the chain entry it came from."""

    locale: LocaleCode
    template: Template


def build_fallback_chain(current: LocaleSpec, default: LocaleSpec) -> tuple[LocaleCode, ...]:
    """Ordered canonical identifiers to probe for a lookup.

    Example:
        >>> build_fallback_chain(LocaleSpec.parse("zh_CN"), LocaleSpec.parse("en_US"))
        ('zh_CN', 'zh', 'en_US', 'en')
        >>> build_fallback_chain(LocaleSpec.parse("en"), LocaleSpec.parse("en_US"))
        ('en', 'en_US')
    """
    candidates = (
        current.full,
        current.language,
        default.full,
        default.language,
    )
    # dict.fromkeys() removes duplicates while maintaining insertion order
    return tuple(dict.fromkeys(candidates))


def resolve(
    chain: Sequence[LocaleCode],
    catalogs: Mapping[LocaleCode, Catalog],
    key: MessageKey,
) -> Resolution | None:
    """Find the first non-empty template for key along chain.

    Chain entries without a catalog are skipped. Later entries are never
    consulted once a match is found.

    Returns:
        Resolution, or None when the chain is exhausted
    """
    for locale in chain:
        catalog = catalogs.get(locale)
        if catalog is None:
            continue
        template = catalog.get(key)
        if template:
            return Resolution(locale=locale, template=template)
    return None

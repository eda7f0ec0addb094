"""Catalog payload parsing.

A catalog payload is a flat JSON object of string keys to string values,
UTF-8 encoded (a leading BOM is tolerated). Loaders may also hand over an
already-decoded mapping, which gets the same shape validation.

Python 3.13+.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from types import MappingProxyType

from lingoresolve.catalog.types import Catalog, CatalogPayload, LocaleCode
from lingoresolve.constants import MAX_CATALOG_SIZE
from lingoresolve.errors import CatalogParseError

__all__ = ["parse_catalog"]


def _decode(payload: bytes | str, locale: LocaleCode) -> object:
    if isinstance(payload, bytes):
        if len(payload) > MAX_CATALOG_SIZE:
            msg = (
                f"Catalog for '{locale}' is {len(payload)} bytes, "
                f"exceeds limit of {MAX_CATALOG_SIZE}"
            )
            raise CatalogParseError(msg, locale=locale)
        try:
            payload = payload.decode("utf-8-sig")
        except UnicodeDecodeError as e:
            msg = f"Catalog for '{locale}' is not valid UTF-8: {e}"
            raise CatalogParseError(msg, locale=locale, cause=e) from e
    elif len(payload) > MAX_CATALOG_SIZE:
        msg = f"Catalog for '{locale}' exceeds limit of {MAX_CATALOG_SIZE} characters"
        raise CatalogParseError(msg, locale=locale)

    try:
        return json.loads(payload)
    except RecursionError as e:
        msg = f"Catalog for '{locale}' is nested too deeply to decode"
        raise CatalogParseError(msg, locale=locale, cause=e) from e
    except json.JSONDecodeError as e:
        msg = f"Catalog for '{locale}' is not valid JSON: {e}"
        raise CatalogParseError(msg, locale=locale, cause=e) from e


def parse_catalog(payload: CatalogPayload, *, locale: LocaleCode) -> Catalog:
    """Parse a loader payload into an immutable catalog.

    Args:
        payload: JSON bytes (or bytearray/memoryview), JSON text, or a
            mapping of str to str
        locale: Canonical identifier, used in error messages

    Returns:
        Read-only mapping of key to template

    Raises:
        CatalogParseError: If the payload is not a flat object of strings

    Example:
        >>> catalog = parse_catalog(b'{"HELLO": "Hello %s!"}', locale="en_US")
        >>> catalog["HELLO"]
        'Hello %s!'
    """
    match payload:
        case bytes() | str():
            data = _decode(payload, locale)
        case bytearray() | memoryview():
            data = _decode(bytes(payload), locale)
        case Mapping():
            data = payload
        case _:
            msg = (
                f"Catalog for '{locale}' has unsupported payload type "
                f"{type(payload).__name__}"
            )
            raise CatalogParseError(msg, locale=locale)

    if not isinstance(data, Mapping):
        msg = f"Catalog for '{locale}' must be a JSON object, got {type(data).__name__}"
        raise CatalogParseError(msg, locale=locale)

    for key, value in data.items():
        if not isinstance(key, str) or not isinstance(value, str):
            msg = (
                f"Catalog for '{locale}' maps {key!r} to {type(value).__name__}; "
                "only string keys and string values are allowed"
            )
            raise CatalogParseError(msg, locale=locale)

    return MappingProxyType(dict(data))

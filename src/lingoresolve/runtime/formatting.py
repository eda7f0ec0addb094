"""Positional argument substitution.

Templates use printf-style placeholders (%s, %d, %.2f, %%). Substitution is
only attempted when arguments are supplied, so a template rendered without
arguments is returned verbatim, "%%" included.

A mismatch between placeholders and arguments, or an argument whose
conversion fails, never raises: it is logged and resolved per
FormatErrorPolicy.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging

from lingoresolve.constants import FALLBACK_FORMAT_ERROR
from lingoresolve.enums import FormatErrorPolicy
from lingoresolve.errors import FormatArgumentError

__all__ = ["format_template"]

logger = logging.getLogger(__name__)


def format_template(
    template: str,
    args: tuple[object, ...],
    *,
    key: str = "",
    policy: FormatErrorPolicy = FormatErrorPolicy.RAW,
) -> str:
    """Substitute positional args into template.

    Args:
        template: Template with %-style placeholders
        args: Positional arguments, possibly empty
        key: Message key, for diagnostics
        policy: What to return when args do not fit the template

    Returns:
        Formatted string, or the policy's fallback on mismatch

    Example:
        >>> format_template("Hello %s!", ("Sam",))
        'Hello Sam!'
        >>> format_template("Hello!", ("Sam",))
        'Hello!'
        >>> format_template("Hello!", ("Sam",), policy=FormatErrorPolicy.MARKED)
        'Hello!{!format}'
    """
    if not args:
        return template

    try:
        return template % args
    except Exception as e:  # noqa: BLE001 - args may carry arbitrary __str__/__format__
        error = FormatArgumentError(key, template, args, str(e))
        logger.warning("%s", error)

    match policy:
        case FormatErrorPolicy.MARKED:
            return FALLBACK_FORMAT_ERROR.format(template=template)
        case _:
            return template

"""Resolution runtime: fallback chains, formatting, locking, configuration.

Python 3.13+. Zero external dependencies.
"""

from .config import TranslatorConfig
from .formatting import format_template
from .resolver import Resolution, build_fallback_chain, resolve
from .rwlock import RWLock

__all__ = [
    "RWLock",
    "Resolution",
    "TranslatorConfig",
    "build_fallback_chain",
    "format_template",
    "resolve",
]

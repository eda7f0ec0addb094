"""Configuration for TranslationService.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass

from lingoresolve.enums import FormatErrorPolicy, MissingKeyPolicy

__all__ = ["TranslatorConfig"]


@dataclass(frozen=True, slots=True)
class TranslatorConfig:
    """Immutable TranslationService configuration.

    ``TranslatorConfig()`` with no arguments gives the documented defaults.

    Attributes:
        missing_key_policy: Result of translate() for a key absent from the
            whole chain (default: EMPTY, the empty string).
        format_error_policy: Result of translate() when arguments do not fit
            the template (default: RAW, the unformatted template).
        require_default_catalog: Fail construction when neither the default
            locale nor its language-only projection has a loadable catalog
            (default: True).
        lock_timeout: Seconds to wait for the internal lock before raising
            TimeoutError; None waits indefinitely (default: None).

    Example:
        >>> config = TranslatorConfig(missing_key_policy=MissingKeyPolicy.BRACKETED)
        >>> service = TranslationService(loader, "en_US", config=config)
        >>> service.translate("NOPE")
        '{NOPE}'
    """

    missing_key_policy: MissingKeyPolicy = MissingKeyPolicy.EMPTY
    format_error_policy: FormatErrorPolicy = FormatErrorPolicy.RAW
    require_default_catalog: bool = True
    lock_timeout: float | None = None

    def __post_init__(self) -> None:
        """Validate and coerce configuration values.

        Plain strings are accepted for the policies ("bracketed", "marked").

        Raises:
            ValueError: If a policy is unknown or lock_timeout is negative
        """
        object.__setattr__(self, "missing_key_policy", MissingKeyPolicy(self.missing_key_policy))
        object.__setattr__(
            self, "format_error_policy", FormatErrorPolicy(self.format_error_policy)
        )
        if self.lock_timeout is not None and self.lock_timeout < 0:
            msg = "lock_timeout must be non-negative"
            raise ValueError(msg)

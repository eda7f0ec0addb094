"""Pytest configuration for the lingoresolve test suite.

Single Source of Truth for Hypothesis max_examples:
- dev: Local development with 500 examples (thorough property testing)
- ci: GitHub Actions with 50 examples (fast CI feedback)
- verbose: Debug mode with progress output (100 examples)

Profile auto-detection:
- CI=true environment variable -> "ci" profile (GitHub Actions sets this)
- HYPOTHESIS_PROFILE env var -> explicit override
- Otherwise -> "dev" profile (local development)

Override manually: HYPOTHESIS_PROFILE=verbose pytest tests/

Fuzzing Test Separation:
Tests marked with @pytest.mark.fuzz are excluded from normal test runs.
Run them via: pytest -m fuzz
"""

from __future__ import annotations

import json
import os

import pytest
from hypothesis import Phase, Verbosity, settings

from lingoresolve import MappingCatalogLoader, TranslationService

# =============================================================================
# HYPOTHESIS PROFILES - SINGLE SOURCE OF TRUTH
# =============================================================================

settings.register_profile(
    "dev",
    max_examples=500,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=False,
)

settings.register_profile(
    "ci",
    max_examples=50,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=True,
    print_blob=True,
)

settings.register_profile(
    "verbose",
    max_examples=100,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=False,
    verbosity=Verbosity.verbose,
)


def _detect_profile() -> str:
    """Detect appropriate Hypothesis profile based on execution context.

    Priority:
    1. HYPOTHESIS_PROFILE env var (explicit override)
    2. CI=true env var (GitHub Actions auto-detection)
    3. Default to "dev" (local development)
    """
    explicit = os.environ.get("HYPOTHESIS_PROFILE")
    if explicit in ("dev", "ci", "verbose"):
        return explicit
    if os.environ.get("CI") == "true":
        return "ci"
    return "dev"


settings.load_profile(_detect_profile())


# =============================================================================
# FUZZING TEST SEPARATION
# =============================================================================


def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Skip fuzz-marked tests unless explicitly requested with -m fuzz."""
    marker_expr = config.getoption("-m", default="")
    if "fuzz" in str(marker_expr):
        return

    skip_fuzz = pytest.mark.skip(reason="Fuzzing test - run with: pytest -m fuzz")
    for item in items:
        if "fuzz" in item.keywords:
            item.add_marker(skip_fuzz)


# =============================================================================
# SHARED CATALOGS
# =============================================================================

TEST_CATALOGS: dict[str, dict[str, str]] = {
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


@pytest.fixture
def catalog_bytes() -> dict[str, bytes]:
    """TEST_CATALOGS encoded as JSON payloads, keyed by canonical locale."""
    return {
        locale: json.dumps(messages, ensure_ascii=False).encode("utf-8")
        for locale, messages in TEST_CATALOGS.items()
    }


@pytest.fixture
def loader(catalog_bytes: dict[str, bytes]) -> MappingCatalogLoader:
    return MappingCatalogLoader(catalog_bytes)


@pytest.fixture
def service(loader: MappingCatalogLoader) -> TranslationService:
    return TranslationService(loader, "en_US")

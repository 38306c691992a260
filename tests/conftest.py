"""Pytest configuration for the cldrcurrency test suite.

Single Source of Truth for Hypothesis max_examples:
- dev: Local development with 500 examples (thorough property testing)
- ci: GitHub Actions with 50 examples (fast CI feedback)
- verbose: Debug mode with progress output (100 examples)

Profile auto-detection:
- HYPOTHESIS_PROFILE env var -> explicit override
- CI=true environment variable -> "ci" profile
- Otherwise -> "dev" profile

Fuzzing Test Separation:
Tests marked with @pytest.mark.fuzz are excluded from normal test runs.
Run them via: pytest -m fuzz
"""

from collections.abc import Iterator
from datetime import date

import pytest
from hypothesis import Phase, Verbosity, settings

from cldrcurrency import lookup as lookup_module
from cldrcurrency.currency import Currency
from cldrcurrency.data import CurrencyHistory, StaticCurrencyData
from cldrcurrency.lookup import CurrencyLookup

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
    import os

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


def pytest_configure(config: pytest.Config) -> None:
    """Register the 'fuzz' marker for intensive property tests."""
    config.addinivalue_line(
        "markers",
        "fuzz: Intensive property tests for fuzzing (excluded from normal test runs)",
    )


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
# SHARED FIXTURES
# =============================================================================

def make_en_currencies() -> dict[str, Currency]:
    """Small English currency map covering every status combination."""
    return {
        "AFA": Currency(code="AFA", name="Afghani", symbol="AFA", from_year=1927, to_year=2002),
        "AFN": Currency(
            code="AFN",
            name="Afghani",
            symbol="Af",
            digits=2,
            iso_digits=2,
            tender=True,
            from_year=2002,
            count={"one": "Afghan Afghani", "other": "Afghan Afghanis"},
        ),
        "AUD": Currency(
            code="AUD",
            name="Australian Dollar",
            symbol="A$",
            narrow_symbol="$",
            digits=2,
            iso_digits=2,
            tender=True,
            count={"one": "Australian dollar", "other": "Australian dollars"},
        ),
        "CHF": Currency(
            code="CHF",
            name="Swiss Franc",
            symbol="Fr.",
            digits=2,
            cash_digits=2,
            cash_rounding=5,
            iso_digits=2,
            tender=True,
        ),
        "USD": Currency(
            code="USD",
            name="US Dollar",
            symbol="$",
            narrow_symbol="$",
            digits=2,
            iso_digits=2,
            tender=True,
            count={"one": "US dollar", "other": "US dollars"},
        ),
        "USN": Currency(
            code="USN",
            name="US Dollar (Next day)",
            symbol="USN",
            digits=2,
            iso_digits=2,
        ),
        "DEM": Currency(
            code="DEM",
            name="German Mark",
            symbol="DM",
            digits=2,
            from_year=1948,
            to_year=2002,
        ),
    }


@pytest.fixture
def en_currencies() -> dict[str, Currency]:
    return make_en_currencies()


@pytest.fixture
def static_source() -> StaticCurrencyData:
    """Static data source with English and German currency maps."""
    de = {
        "EUR": Currency(
            code="EUR",
            name="Euro",
            symbol="€",
            digits=2,
            iso_digits=2,
            tender=True,
            count={"one": "Euro", "other": "Euro"},
        ),
        "USD": Currency(code="USD", name="US-Dollar", symbol="$", digits=2, iso_digits=2),
    }
    return StaticCurrencyData(
        {"en": make_en_currencies(), "de": de},
        known_codes={"AFA", "AFN", "AUD", "CHF", "DEM", "EUR", "USD", "USN", "JPY"},
        territories={"en": "US", "de": "DE"},
        territory_currencies={
            "US": [CurrencyHistory(code="USD", tender=True)],
            "AU": [CurrencyHistory(code="AUD", tender=True)],
            "DE": [
                CurrencyHistory(code="DEM", to_date=date(2002, 2, 28)),
                CurrencyHistory(code="EUR", from_date=date(1999, 1, 1)),
            ],
            "AQ": [],
        },
    )


@pytest.fixture
def lookup(static_source: StaticCurrencyData) -> CurrencyLookup:
    return CurrencyLookup(static_source)


@pytest.fixture
def fresh_default_lookup() -> Iterator[None]:
    """Reset the module-level default lookup around a test."""
    lookup_module.reset_default_lookup()
    yield
    lookup_module.reset_default_lookup()

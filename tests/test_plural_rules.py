"""Tests for CLDR plural category selection."""

from decimal import Decimal

import pytest
from hypothesis import given
from hypothesis import strategies as st

from cldrcurrency.constants import PLURAL_CATEGORIES
from cldrcurrency.plural_rules import select_plural_category


class TestSelectPluralCategory:
    @pytest.mark.parametrize(
        ("number", "locale", "expected"),
        [
            (1, "en_US", "one"),
            (2, "en_US", "other"),
            (0, "en", "other"),
            (5, "ru_RU", "many"),
            (2, "ru-RU", "few"),
            (42, "ja_JP", "other"),
            (Decimal("1"), "de", "one"),
        ],
    )
    def test_cldr_rules(self, number: int | Decimal, locale: str, expected: str) -> None:
        assert select_plural_category(number, locale) == expected

    @pytest.mark.parametrize("locale", ["xx_XX", "not a locale"])
    def test_unknown_locale_falls_back_to_one_other(self, locale: str) -> None:
        assert select_plural_category(1, locale) == "one"
        assert select_plural_category(-1, locale) == "one"
        assert select_plural_category(3, locale) == "other"

    @given(number=st.integers(min_value=-10_000, max_value=10_000))
    def test_always_a_cldr_category(self, number: int) -> None:
        assert select_plural_category(number, "ar") in PLURAL_CATEGORIES

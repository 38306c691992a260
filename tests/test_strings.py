"""Tests for the currency string index builder."""

import pytest
from hypothesis import given

from cldrcurrency.currency import Currency
from cldrcurrency.status import is_current
from cldrcurrency.strings import (
    add_unique_narrow_symbols,
    build_currency_strings,
    candidate_strings,
    invert_currency_strings,
    normalize_currency_string,
    remove_duplicate_strings,
)
from tests.strategies import REFERENCE_YEAR, currency_maps

AFA = Currency(code="AFA", name="Afghani", symbol="AFA", to_year=2002)
AFN = Currency(code="AFN", name="Afghani", symbol="؋", iso_digits=2)


class TestNormalization:
    @pytest.mark.parametrize(
        ("raw", "expected"),
        [("Fr.", "fr"), ("fr..", "fr."), ("US$", "us$"), ("  Euro ", "euro"), (".", "")],
    )
    def test_normalize(self, raw: str, expected: str) -> None:
        assert normalize_currency_string(raw) == expected


class TestCandidateStrings:
    def test_collects_name_symbol_code_and_plurals(self) -> None:
        currency = Currency(
            code="USD",
            name="US Dollar",
            symbol="$",
            count={"one": "US dollar", "other": "US dollars"},
        )
        assert candidate_strings(currency) == ("us dollar", "$", "usd", "us dollars")

    def test_trailing_period_trimmed(self) -> None:
        currency = Currency(code="CHF", name="Swiss Franc", symbol="fr.")
        assert "fr" in candidate_strings(currency)
        assert "fr." not in candidate_strings(currency)

    def test_narrow_symbol_not_a_candidate(self) -> None:
        currency = Currency(code="AUD", name="Australian Dollar", symbol="A$", narrow_symbol="$")
        assert "$" not in candidate_strings(currency)

    def test_empty_strings_dropped(self) -> None:
        currency = Currency(code="TST", name="Test", symbol="", count={"other": "."})
        assert candidate_strings(currency) == ("test", "tst")


class TestInvert:
    def test_pairs_sorted(self) -> None:
        pairs = invert_currency_strings({"AFN": AFN, "AFA": AFA})
        assert pairs == sorted(pairs)
        assert ("afghani", "AFA") in pairs
        assert ("afghani", "AFN") in pairs

    def test_accepts_iterable(self) -> None:
        assert invert_currency_strings([AFA]) == [("afa", "AFA"), ("afghani", "AFA")]


class TestCollisionResolution:
    def test_current_beats_historic(self) -> None:
        currencies = {"AFA": AFA, "AFN": AFN}
        index = build_currency_strings(currencies)
        assert index["afghani"] == "AFN"
        assert index["afa"] == "AFA"

    def test_two_current_drops_string(self) -> None:
        usd = Currency(code="USD", name="Dollar", symbol="$", iso_digits=2)
        cad = Currency(code="CAD", name="Dollar", symbol="CA$", iso_digits=2)
        index = build_currency_strings({"USD": usd, "CAD": cad})
        assert "dollar" not in index
        assert index["usd"] == "USD"

    def test_two_historic_drops_string(self) -> None:
        frf = Currency(code="FRF", name="Franc", symbol="F", to_year=2002)
        bef = Currency(code="BEF", name="Franc", symbol="BF", to_year=2002)
        index = build_currency_strings({"FRF": frf, "BEF": bef}, year=REFERENCE_YEAR)
        assert "franc" not in index

    def test_current_with_neither_drops_string(self) -> None:
        future = Currency(code="AAA", name="Coin", symbol="A", iso_digits=2, to_year=2099)
        live = Currency(code="BBB", name="Coin", symbol="B", iso_digits=2)
        index = build_currency_strings({"AAA": future, "BBB": live}, year=REFERENCE_YEAR)
        assert "coin" not in index

    def test_same_code_twice_is_not_a_collision(self) -> None:
        count = {"one": "euro", "other": "euro"}
        currency = Currency(code="EUR", name="Euro", symbol="€", count=count)
        assert remove_duplicate_strings(invert_currency_strings([currency]), {"EUR": currency}) == {
            "eur": "EUR",
            "euro": "EUR",
            "€": "EUR",
        }


class TestNarrowSymbols:
    def test_narrow_symbols_never_override(self) -> None:
        usd = Currency(code="USD", name="US Dollar", symbol="$", narrow_symbol="$", iso_digits=2)
        aud = Currency(
            code="AUD", name="Australian Dollar", symbol="A$", narrow_symbol="$", iso_digits=2
        )
        index = build_currency_strings({"USD": usd, "AUD": aud})
        assert index["$"] == "USD"

    def test_first_code_wins_among_narrow_symbols(self) -> None:
        aud = Currency(code="AUD", name="Australian Dollar", symbol="A$", narrow_symbol="$")
        cad = Currency(code="CAD", name="Canadian Dollar", symbol="CA$", narrow_symbol="$")
        index = add_unique_narrow_symbols({}, {"CAD": cad, "AUD": aud})
        assert index == {"$": "AUD"}

    def test_narrow_symbol_survives_dropped_collision(self) -> None:
        usd = Currency(code="USD", name="US Dollar", symbol="$", iso_digits=2)
        cad = Currency(
            code="CAD", name="Canadian Dollar", symbol="$", narrow_symbol="$", iso_digits=2
        )
        index = build_currency_strings({"USD": usd, "CAD": cad})
        assert index["$"] == "CAD"

    def test_does_not_mutate_input(self) -> None:
        original = {"a$": "AUD"}
        aud = Currency(code="AUD", name="Australian Dollar", symbol="A$", narrow_symbol="$")
        add_unique_narrow_symbols(original, {"AUD": aud})
        assert original == {"a$": "AUD"}


class TestIndexProperties:
    def test_index_is_read_only(self) -> None:
        index = build_currency_strings({"AFN": AFN})
        with pytest.raises(TypeError):
            index["x"] = "AFN"  # type: ignore[index]

    def test_fixture_locale(self, en_currencies: dict[str, Currency]) -> None:
        index = build_currency_strings(en_currencies)
        assert index["afghani"] == "AFN"
        assert index["fr"] == "CHF"
        assert index["$"] == "USD"
        assert index["us dollars"] == "USD"

    @given(currencies=currency_maps())
    def test_deterministic(self, currencies: dict[str, Currency]) -> None:
        reordered = dict(reversed(list(currencies.items())))
        assert dict(build_currency_strings(currencies, year=REFERENCE_YEAR)) == dict(
            build_currency_strings(reordered, year=REFERENCE_YEAR)
        )

    @given(currencies=currency_maps())
    def test_values_are_input_codes(self, currencies: dict[str, Currency]) -> None:
        index = build_currency_strings(currencies, year=REFERENCE_YEAR)
        assert set(index.values()) <= set(currencies)

    @given(currencies=currency_maps())
    def test_resolved_string_belongs_to_unique_or_current_claimant(
        self, currencies: dict[str, Currency]
    ) -> None:
        pairs = invert_currency_strings(currencies)
        resolved = remove_duplicate_strings(pairs, currencies, year=REFERENCE_YEAR)
        for text, code in resolved.items():
            claimants = {c for t, c in pairs if t == text}
            assert code in claimants
            if len(claimants) > 1:
                assert is_current(currencies[code])

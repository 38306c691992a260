"""Tests for currency status predicates."""

from datetime import date

import pytest
from hypothesis import given

from cldrcurrency.currency import Currency
from cldrcurrency.status import (
    is_annotated,
    is_current,
    is_historic,
    is_private,
    is_tender,
    is_unannotated,
)
from tests.strategies import REFERENCE_YEAR, currencies


def _currency(**kwargs: object) -> Currency:
    fields: dict[str, object] = {"code": "TST", "name": "Test", "symbol": "T"}
    fields.update(kwargs)
    return Currency(**fields)  # type: ignore[arg-type]


class TestHistoric:
    def test_missing_iso_digits_is_historic(self) -> None:
        assert is_historic(_currency(iso_digits=None))

    def test_missing_iso_digits_is_historic_even_without_end_year(self) -> None:
        currency = _currency(iso_digits=None, to_year=None)
        assert is_historic(currency)
        assert not is_current(currency)

    def test_past_end_year_is_historic(self) -> None:
        assert is_historic(_currency(iso_digits=2, to_year=2002), year=2026)

    def test_end_year_equal_to_reference_is_not_historic(self) -> None:
        assert not is_historic(_currency(iso_digits=2, to_year=2026), year=2026)

    def test_defaults_to_current_calendar_year(self) -> None:
        last_year = date.today().year - 1
        assert is_historic(_currency(iso_digits=2, to_year=last_year))
        assert not is_historic(_currency(iso_digits=2, to_year=last_year + 1))

    def test_year_boundary_changes_result(self) -> None:
        currency = _currency(iso_digits=2, to_year=2026)
        assert not is_historic(currency, year=2026)
        assert is_historic(currency, year=2027)


class TestCurrent:
    def test_iso_digits_and_no_end_year(self) -> None:
        assert is_current(_currency(iso_digits=2))

    def test_end_year_is_not_current(self) -> None:
        assert not is_current(_currency(iso_digits=2, to_year=2099))

    def test_future_end_year_is_neither(self) -> None:
        currency = _currency(iso_digits=2, to_year=2099)
        assert not is_current(currency)
        assert not is_historic(currency, year=2026)


class TestOtherPredicates:
    def test_tender(self) -> None:
        assert is_tender(_currency(tender=True))
        assert not is_tender(_currency(tender=False))

    @pytest.mark.parametrize(
        ("name", "annotated"),
        [
            ("US Dollar (Next day)", True),
            ("US Dollar", False),
            ("Dollar(", True),
            ("Dollar)", False),
        ],
    )
    def test_annotated(self, name: str, annotated: bool) -> None:
        currency = _currency(name=name)
        assert is_annotated(currency) is annotated
        assert is_unannotated(currency) is not annotated

    def test_private(self) -> None:
        assert is_private(_currency(code="XAZ"))
        assert not is_private(_currency(code="AZX"))


class TestStatusProperties:
    @given(currency=currencies())
    def test_never_current_and_historic(self, currency: Currency) -> None:
        assert not (is_current(currency) and is_historic(currency, year=REFERENCE_YEAR))

    @given(currency=currencies())
    def test_annotated_partitions(self, currency: Currency) -> None:
        assert is_annotated(currency) != is_unannotated(currency)

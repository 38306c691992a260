"""Currency filter engine.

Selects the subset of a currency collection that matches an ``only``
expression and does not match an ``exclude`` expression.

A filter expression is a single atom or an iterable of atoms. Iterables
are unions: ``["tender", "current"]`` selects currencies that are tender OR
current. Atoms are:

- a CurrencyStatus member, or its lowercase value ("current", "historic",
  "tender", "annotated", "unannotated", "private", "all")
- a currency code, compared case-insensitively ("usd", "USD")
- None, which matches nothing

Status values take precedence over codes: "all" is the status tag while
"ALL" is the Albanian lek.

The "private" atom does not filter the input. It resolves to the live
contents of the private currency registry, so in ``only`` it adds the
registered currencies to the result and in ``exclude`` it removes them.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from types import MappingProxyType
from typing import TYPE_CHECKING

from cldrcurrency.currency import (
    Currency,
    CurrencyCode,
    is_iso_code_shape,
    normalize_currency_code,
)
from cldrcurrency.enums import CurrencyStatus
from cldrcurrency.status import (
    is_annotated,
    is_current,
    is_historic,
    is_tender,
    is_unannotated,
)

if TYPE_CHECKING:
    from cldrcurrency.registry import PrivateCurrencyRegistry

__all__ = [
    "FilterAtom",
    "FilterSpec",
    "currency_filter",
    "matches_status",
]

type FilterAtom = CurrencyStatus | str | None
"""Single filter element: status tag, currency code, or None."""

type FilterSpec = FilterAtom | Iterable[FilterAtom]
"""Filter atom or union of filter atoms."""

type CurrencyCollection = Mapping[CurrencyCode, Currency] | Iterable[Currency]

_STATUS_VALUES: frozenset[str] = frozenset(status.value for status in CurrencyStatus)


def _resolve_atom(atom: FilterAtom) -> CurrencyStatus | CurrencyCode | None:
    """Map an atom to a status tag, a normalized code, or None.

    Raises:
        ValueError: If the atom is neither a status tag nor a code.
    """
    if atom is None or isinstance(atom, CurrencyStatus):
        return atom
    if not isinstance(atom, str):
        msg = f"Unknown currency filter {atom!r}"
        raise ValueError(msg)
    if atom in _STATUS_VALUES:
        return CurrencyStatus(atom)

    code = normalize_currency_code(atom)
    if not is_iso_code_shape(code):
        msg = f"Unknown currency filter {atom!r}"
        raise ValueError(msg)
    return code


def _atoms(spec: FilterSpec) -> list[CurrencyStatus | CurrencyCode | None]:
    if spec is None or isinstance(spec, str) or not isinstance(spec, Iterable):
        return [_resolve_atom(spec)]
    return [_resolve_atom(atom) for atom in spec]


def _is_all(spec: FilterSpec) -> bool:
    if isinstance(spec, str):
        return spec == CurrencyStatus.ALL
    return isinstance(spec, list | tuple) and len(spec) == 1 and spec[0] == CurrencyStatus.ALL


def _is_nothing(spec: FilterSpec) -> bool:
    if spec is None:
        return True
    return isinstance(spec, list | tuple) and len(spec) == 1 and spec[0] is None


def matches_status(
    currency: Currency,
    atom: FilterAtom,
    *,
    registry: PrivateCurrencyRegistry | None = None,
    year: int | None = None,
) -> bool:
    """Check whether one currency matches one filter atom.

    The private tag matches currencies held by ``registry``; without a
    registry it matches nothing.

    Args:
        currency: Currency to test
        atom: Filter atom
        registry: Private currency registry for the private tag
        year: Reference year for the historic tag (default: current year)

    Raises:
        ValueError: If the atom is not a recognized filter atom.
    """
    resolved = _resolve_atom(atom)
    match resolved:
        case None:
            return False
        case CurrencyStatus.ALL:
            return True
        case CurrencyStatus.CURRENT:
            return is_current(currency)
        case CurrencyStatus.HISTORIC:
            return is_historic(currency, year=year)
        case CurrencyStatus.TENDER:
            return is_tender(currency)
        case CurrencyStatus.ANNOTATED:
            return is_annotated(currency)
        case CurrencyStatus.UNANNOTATED:
            return is_unannotated(currency)
        case CurrencyStatus.PRIVATE:
            return registry is not None and registry.lookup(currency.code) == currency
        case code:
            return currency.code == code


def _expand(
    candidates: list[Currency],
    spec: FilterSpec,
    registry: PrivateCurrencyRegistry | None,
    year: int | None,
) -> list[Currency]:
    atoms = _atoms(spec)
    selectors = [atom for atom in atoms if atom is not CurrencyStatus.PRIVATE]

    selected = [
        currency
        for currency in candidates
        if any(matches_status(currency, atom, year=year) for atom in selectors)
    ]

    if CurrencyStatus.PRIVATE in atoms and registry is not None:
        seen = set(selected)
        selected.extend(
            currency for currency in registry.all().values() if currency not in seen
        )
    return selected


def currency_filter(
    currencies: CurrencyCollection,
    only: FilterSpec = CurrencyStatus.ALL,
    exclude: FilterSpec = None,
    *,
    registry: PrivateCurrencyRegistry | None = None,
    year: int | None = None,
) -> CurrencyCollection:
    """Return the currencies matching ``only`` and not matching ``exclude``.

    When ``only`` is "all" and ``exclude`` is None the input object itself
    is returned. Otherwise mappings produce a read-only mapping keyed by
    currency code; tuples produce a tuple and any other iterable a list,
    both in input order with private currencies appended.

    Args:
        currencies: Mapping of code to Currency, or iterable of Currency
        only: Filter expression selecting currencies
        exclude: Filter expression removing currencies
        registry: Private currency registry resolving the private tag
        year: Reference year for the historic tag (default: current year)

    Raises:
        ValueError: If a filter atom is not recognized.

    Example:
        >>> usd = Currency(code="USD", name="US Dollar", symbol="$", iso_digits=2, tender=True)
        >>> usn = Currency(code="USN", name="US Dollar (Next day)", symbol="USN", iso_digits=2)
        >>> [c.code for c in currency_filter([usd, usn], only="current", exclude="annotated")]
        ['USD']
    """
    if _is_all(only) and _is_nothing(exclude):
        return currencies

    if isinstance(currencies, Mapping):
        candidates = list(currencies.values())
    else:
        candidates = list(currencies)

    selected = _expand(candidates, only, registry, year)
    removed = set(_expand(candidates, exclude, registry, year))

    result: list[Currency] = []
    seen: set[Currency] = set()
    for currency in selected:
        if currency not in removed and currency not in seen:
            seen.add(currency)
            result.append(currency)

    if isinstance(currencies, Mapping):
        return MappingProxyType({currency.code: currency for currency in result})
    if isinstance(currencies, tuple):
        return tuple(result)
    return result

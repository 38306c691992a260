"""Quickstart example for cldrcurrency.

This example demonstrates currency metadata lookup, filtering, string
resolution and private currencies against CLDR data shipped with Babel.

Requires: pip install cldrcurrency[babel]

Note: Examples ignore the 'errors' return value where a query cannot fail.
In production, always check errors and report them.
"""

from cldrcurrency import (
    Currency,
    CurrencyLookup,
    StaticCurrencyData,
    currency_filter,
)

lookup = CurrencyLookup()

# Example 1: Currency metadata
print("=" * 50)
print("Example 1: Currency Metadata")
print("=" * 50)

currency, _ = lookup.currency_for_code("aud", "en")
print(f"{currency.code}: {currency.name} ({currency.symbol}), {currency.digits} digits")
# Output: AUD: Australian Dollar (A$), 2 digits

currency, _ = lookup.currency_for_code("CHF", "de-CH")
print(f"{currency.code}: {currency.name}, cash rounding {currency.cash_rounding}")
# Output: CHF: Schweizer Franken, cash rounding 5

# Example 2: Errors are returned, not raised
print("\n" + "=" * 50)
print("Example 2: Error Handling")
print("=" * 50)

currency, errors = lookup.currency_for_code("GGG", "en")
print(f"currency={currency}")
for error in errors:
    print(error)
# Output: error[CURRENCY_UNKNOWN]: The currency 'GGG' is unknown in locale 'en'

# Example 3: Filtering by status
print("\n" + "=" * 50)
print("Example 3: Filtering")
print("=" * 50)

current, _ = lookup.currencies_for_locale("en", only="current", exclude="annotated")
historic, _ = lookup.currencies_for_locale("en", only="historic")
print(f"Current currencies: {len(current)}")
print(f"Historic currencies: {len(historic)}")
print(f"DEM is historic: {'DEM' in historic}")

# Example 4: Parsing user input
print("\n" + "=" * 50)
print("Example 4: Resolving Currency Strings")
print("=" * 50)

for text in ("US Dollars", "euros", "Fr.", "zloty"):
    code, errors = lookup.currency_code_for_string(text, "en")
    print(f"{text!r:14} -> {code or errors[0].diagnostic.message}")

strings, _ = lookup.strings_for_currency("EUR", "en")
print(f"EUR strings: {strings}")

# Example 5: Plural display names
print("\n" + "=" * 50)
print("Example 5: Pluralization")
print("=" * 50)

for amount in (1, 2, 5):
    name, _ = lookup.pluralize(amount, "PLN", "pl")
    print(f"{amount} {name}")

# Example 6: Currency from locale
print("\n" + "=" * 50)
print("Example 6: Currency From Locale")
print("=" * 50)

for locale in ("en-AU", "de", "de-CH", "en-US-u-cu-eur"):
    code, _ = lookup.currency_from_locale(locale)
    print(f"{locale:16} -> {code}")

# Example 7: Private currencies
print("\n" + "=" * 50)
print("Example 7: Private Currencies")
print("=" * 50)

points, errors = lookup.register_currency("XPT", name="Platinum", digits=2)
print(f"XPT registration errors: {[type(error).__name__ for error in errors]}")
# Output: ['CurrencyAlreadyDefinedError'] - XPT is an ISO 4217 code

points = lookup.register_currency_or_raise(
    "XLP",
    name="Loyalty Point",
    digits=0,
    count={"one": "loyalty point", "other": "loyalty points"},
)
print(f"Registered {points.code}: {points.name}")

code, _ = lookup.currency_code_for_string("loyalty points", "en", only=["current", "private"])
print(f"'loyalty points' -> {code}")

# Example 8: Static data without Babel
print("\n" + "=" * 50)
print("Example 8: Static Currency Data")
print("=" * 50)

static = CurrencyLookup(
    StaticCurrencyData(
        {
            "en": [
                Currency(code="USD", name="US Dollar", symbol="$", iso_digits=2, tender=True),
                Currency(code="USN", name="US Dollar (Next day)", symbol="USN", iso_digits=2),
            ]
        }
    )
)
records, _ = static.currencies_for_locale("en")
print(f"Unannotated: {sorted(currency_filter(records, 'unannotated'))}")
print(f"'$' -> {static.currency_code_for_string_or_raise('$', 'en')}")

print("\n" + "=" * 50)
print("[SUCCESS] All examples completed successfully!")
print("=" * 50)

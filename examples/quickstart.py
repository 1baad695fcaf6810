"""Quickstart example for currencykit.

This example demonstrates looking up ISO 4217 currencies by code, numeric
code and country, and handling lookups that cannot resolve.
"""

from currencykit import Currency, CurrencyRegistry, UnknownCurrencyError

# Example 1: Lookup by alphabetic code
print("=" * 50)
print("Example 1: Lookup by Code")
print("=" * 50)

euro = Currency.of("EUR")
print(f"{euro.code} ({euro.numeric_code}): {euro.name}, {euro.fraction_digits} decimals")

# Example 2: Numeric codes, as int or zero-padded text
print("\n" + "=" * 50)
print("Example 2: Lookup by Numeric Code")
print("=" * 50)

print(f"978   -> {Currency.of(978)}")
print(f"'036' -> {Currency.of('036')}")
print(f"Same instance: {Currency.of(978) is euro}")

# Example 3: Lookup by country
print("\n" + "=" * 50)
print("Example 3: Lookup by Country")
print("=" * 50)

for country in ("FR", "JP", "TN"):
    print(f"{country} -> {Currency.of_country(country)}")

# Example 4: Ambiguous and unknown identifiers
print("\n" + "=" * 50)
print("Example 4: Failed Lookups")
print("=" * 50)

registry = CurrencyRegistry.get_instance()
for identifier in ("CH", "QQ"):
    try:
        registry.get_currency_for_country(identifier)
    except UnknownCurrencyError as e:
        print(f"{identifier}: {e.reason} {e.candidates}")
        if e.diagnostic is not None:
            print(e.diagnostic.format_error())

print(f"All CH currencies: {[str(c) for c in registry.get_currencies_for_country('CH')]}")

# Example 5: Comparing currencies
print("\n" + "=" * 50)
print("Example 5: Comparing Currencies")
print("=" * 50)

print(f"euro.matches('EUR'): {euro.matches('EUR')}")
print(f"euro.matches(978):   {euro.matches(978)}")
print(f"euro.matches('USD'): {euro.matches('USD')}")
print(f"Registry size: {len(registry)} currencies")

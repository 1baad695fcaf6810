"""Currency dataset record type.

A dataset is any iterable of CurrencyEntry rows. The registry depends only
on the shape of these rows, not on where they come from; the bundled
ISO 4217 table lives in currencykit.iso4217.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass

__all__ = [
    "CountryCode",
    "CurrencyEntry",
    "iso_4217_entries",
]


type CountryCode = str
"""ISO 3166-1 alpha-2 country code (e.g., 'FR', 'JP', 'US')."""


@dataclass(frozen=True, slots=True)
class CurrencyEntry:
    """One row of a currency dataset.

    Immutable, thread-safe, hashable.

    Attributes:
        code: Alphabetic currency code (e.g., 'EUR').
        numeric_code: Numeric code without leading zeros (e.g., 978).
        name: Display name (e.g., 'Euro').
        fraction_digits: Default number of fraction digits.
        countries: Countries using the currency, in dataset order.
    """

    code: str
    numeric_code: int
    name: str
    fraction_digits: int
    countries: tuple[CountryCode, ...] = ()


def iso_4217_entries() -> tuple[CurrencyEntry, ...]:
    """Return the bundled ISO 4217 dataset.

    The table is imported on first call so that registries built from custom
    datasets never load it.
    """
    from currencykit.iso4217 import ISO_4217_ENTRIES  # noqa: PLC0415

    return ISO_4217_ENTRIES

"""Integrity tests for the bundled ISO 4217 table."""

import re

from currencykit import CurrencyEntry, CurrencyRegistry
from currencykit.constants import (
    ISO_3166_ALPHA2_LENGTH,
    ISO_4217_CODE_LENGTH,
    ISO_4217_NUMERIC_CODE_DIGITS,
)
from currencykit.dataset import iso_4217_entries
from currencykit.iso4217 import ISO_4217_ENTRIES

_CODE_RE = re.compile(rf"[A-Z]{{{ISO_4217_CODE_LENGTH}}}")
_COUNTRY_RE = re.compile(rf"[A-Z]{{{ISO_3166_ALPHA2_LENGTH}}}")


class TestIso4217Table:
    """Shape and content of ISO_4217_ENTRIES."""

    def test_accessor_returns_table(self) -> None:
        """iso_4217_entries() returns the module constant."""
        assert iso_4217_entries() is ISO_4217_ENTRIES

    def test_more_than_100_entries(self) -> None:
        """The table covers the full active currency list."""
        assert len(ISO_4217_ENTRIES) > 100

    def test_entries_are_records(self) -> None:
        """Every row is a CurrencyEntry."""
        assert all(isinstance(e, CurrencyEntry) for e in ISO_4217_ENTRIES)

    def test_code_shape(self) -> None:
        """Codes are three uppercase letters."""
        assert all(_CODE_RE.fullmatch(e.code) for e in ISO_4217_ENTRIES)

    def test_numeric_code_range(self) -> None:
        """Numeric codes fit in three digits."""
        limit = 10**ISO_4217_NUMERIC_CODE_DIGITS
        assert all(0 < e.numeric_code < limit for e in ISO_4217_ENTRIES)

    def test_country_shape(self) -> None:
        """Countries are ISO 3166-1 alpha-2 codes."""
        for entry in ISO_4217_ENTRIES:
            assert isinstance(entry.countries, tuple)
            assert all(_COUNTRY_RE.fullmatch(c) for c in entry.countries), entry.code

    def test_sorted_by_code(self) -> None:
        """Rows are kept in alphabetical order."""
        codes = [e.code for e in ISO_4217_ENTRIES]
        assert codes == sorted(codes)

    def test_fraction_digits_values(self) -> None:
        """ISO 4217 minor units are 0, 2, 3 or 4."""
        assert {e.fraction_digits for e in ISO_4217_ENTRIES} <= {0, 2, 3, 4}

    def test_no_currency_codes_excluded(self) -> None:
        """Entries without a minor unit are not part of the table."""
        codes = {e.code for e in ISO_4217_ENTRIES}
        assert codes.isdisjoint({"XXX", "XTS", "XAU", "XAG", "XPT", "XPD", "XDR"})

    def test_builds_registry(self) -> None:
        """The table is a well-formed dataset."""
        registry = CurrencyRegistry(ISO_4217_ENTRIES)
        assert len(registry) == len(ISO_4217_ENTRIES)

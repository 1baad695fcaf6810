"""Cross-check a currency dataset against Babel's CLDR data.

The bundled table follows ISO 4217, which is authoritative. CLDR data in
Babel reflects common usage and is an independent second source, so
disagreements are worth a look:

    1. Structural (error): dataset codes Babel does not recognize.
    2. Fraction digits (warning): dataset value differs from
       babel.numbers.get_currency_precision().
    3. Countries (warning): CLDR reports a single active legal tender for a
       country the dataset knows, but the dataset does not list the country
       under that currency.

Requires Babel installation:
    pip install currencykit[babel]

Without Babel, verify_dataset() raises BabelImportError with installation
guidance.

Python 3.13+. Babel is optional dependency.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from currencykit.constants import CLDR_REFERENCE_LOCALE, ISO_3166_ALPHA2_LENGTH
from currencykit.dataset import CurrencyEntry, iso_4217_entries
from currencykit.diagnostics import Diagnostic, ErrorTemplate

__all__ = [
    "BabelImportError",
    "VerificationReport",
    "verify_dataset",
]


class BabelImportError(ImportError):
    """Raised when Babel is required but not installed.

    Provides installation guidance to users.
    """

    def __init__(self) -> None:
        super().__init__(
            "Babel is required for dataset verification. "
            "Install with: pip install currencykit[babel]"
        )


@dataclass(frozen=True, slots=True)
class VerificationReport:
    """Immutable outcome of verify_dataset().

    Attributes:
        errors: Structural problems (codes unknown to CLDR)
        warnings: Disagreements with CLDR worth reviewing
        entry_count: Number of dataset entries checked
        cldr_count: Number of currencies known to Babel
    """

    errors: tuple[Diagnostic, ...]
    warnings: tuple[Diagnostic, ...]
    entry_count: int
    cldr_count: int

    @property
    def is_valid(self) -> bool:
        """True if no structural errors were found; warnings are allowed."""
        return not self.errors

    @property
    def diagnostics(self) -> tuple[Diagnostic, ...]:
        """Errors followed by warnings."""
        return self.errors + self.warnings


# ============================================================================
# BABEL INTERFACE (LAZY IMPORT)
# ============================================================================


def _get_babel_currencies() -> set[str]:
    """Get every currency code known to Babel's CLDR data."""
    try:
        from babel.numbers import list_currencies  # noqa: PLC0415
    except ImportError as e:
        raise BabelImportError from e
    return set(list_currencies(locale=CLDR_REFERENCE_LOCALE))


def _get_babel_precision(code: str) -> int:
    """Get CLDR precision (fraction digits) for a currency."""
    try:
        from babel.numbers import get_currency_precision  # noqa: PLC0415
    except ImportError as e:
        raise BabelImportError from e
    return get_currency_precision(code)


def _get_babel_tender_currencies() -> dict[str, list[str]]:
    """Get currently active legal tender currencies per territory.

    Data format in CLDR: list of (code, start_date, end_date, tender);
    end_date=None means still active, tender=True means legal tender.
    """
    try:
        from babel.core import get_global  # noqa: PLC0415
    except ImportError as e:
        raise BabelImportError from e
    territory_currencies = get_global("territory_currencies")
    return {
        territory: [c[0] for c in currencies if c[2] is None and c[3]]
        for territory, currencies in territory_currencies.items()
        if len(territory) == ISO_3166_ALPHA2_LENGTH and territory.isalpha()
    }


# ============================================================================
# CHECKS
# ============================================================================


def _check_unrecognized(
    entries: tuple[CurrencyEntry, ...],
    babel_currencies: set[str],
) -> list[Diagnostic]:
    return [
        ErrorTemplate.verify_code_not_in_cldr(entry.code)
        for entry in entries
        if entry.code not in babel_currencies
    ]


def _check_fraction_digits(
    entries: tuple[CurrencyEntry, ...],
    babel_currencies: set[str],
) -> list[Diagnostic]:
    result: list[Diagnostic] = []
    for entry in sorted(entries, key=lambda e: e.code):
        if entry.code not in babel_currencies:
            continue
        cldr_digits = _get_babel_precision(entry.code)
        if cldr_digits != entry.fraction_digits:
            result.append(
                ErrorTemplate.verify_fraction_digits_mismatch(
                    entry.code, entry.fraction_digits, cldr_digits
                )
            )
    return result


def _check_countries(
    entries: tuple[CurrencyEntry, ...],
    tender: dict[str, list[str]],
) -> list[Diagnostic]:
    dataset_codes = {entry.code for entry in entries}
    listed: dict[str, set[str]] = {}
    for entry in entries:
        for country in entry.countries:
            listed.setdefault(country, set()).add(entry.code)

    result: list[Diagnostic] = []
    for country in sorted(listed):
        active = tender.get(country, [])
        if len(active) != 1:
            continue
        (cldr_code,) = active
        if cldr_code in dataset_codes and cldr_code not in listed[country]:
            result.append(ErrorTemplate.verify_country_not_associated(country, cldr_code))
    return result


def verify_dataset(entries: Iterable[CurrencyEntry] | None = None) -> VerificationReport:
    """Compare a currency dataset with Babel's CLDR data.

    Args:
        entries: Dataset to check. Defaults to the bundled ISO 4217 table.

    Returns:
        VerificationReport with structural errors and CLDR disagreements.

    Raises:
        BabelImportError: If Babel not installed.
    """
    rows = tuple(entries) if entries is not None else iso_4217_entries()
    babel_currencies = _get_babel_currencies()
    tender = _get_babel_tender_currencies()

    errors = _check_unrecognized(rows, babel_currencies)
    warnings = _check_fraction_digits(rows, babel_currencies)
    warnings.extend(_check_countries(rows, tender))

    return VerificationReport(
        errors=tuple(errors),
        warnings=tuple(warnings),
        entry_count=len(rows),
        cldr_count=len(babel_currencies),
    )

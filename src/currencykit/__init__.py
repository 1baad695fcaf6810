"""currencykit - ISO 4217 currencies as shared, immutable value objects.

Resolves currencies by alphabetic code, numeric code, or issuing country
through a process-wide registry. Every lookup for a currency returns the
identical Currency instance.

Public API:
    Currency - Immutable currency value object (Currency.of, Currency.of_country)
    CurrencyRegistry - Lookup indices over a currency dataset
    CurrencyEntry - One row of a currency dataset

Exceptions:
    CurrencyError - Base exception class
    InvalidArgumentError - Invalid Currency construction arguments
    UnknownCurrencyError - Code, numeric code or country did not resolve
    DatasetError - Malformed currency dataset

Submodules:
    currencykit.diagnostics - Diagnostic codes, templates and formatter
    currencykit.iso4217 - Bundled ISO 4217 table
    currencykit.verification - Dataset cross-check against Babel CLDR data
"""

from .currency import Currency
from .dataset import CurrencyEntry
from .diagnostics import (
    CurrencyError,
    DatasetError,
    InvalidArgumentError,
    LookupFailure,
    UnknownCurrencyError,
)
from .registry import CurrencyRegistry

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("currencykit")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

# ISO 4217 standard the bundled table follows
__iso_4217_edition__ = "2024"

__all__ = [
    "Currency",
    "CurrencyEntry",
    "CurrencyError",
    "CurrencyRegistry",
    "DatasetError",
    "InvalidArgumentError",
    "LookupFailure",
    "UnknownCurrencyError",
    "__iso_4217_edition__",
    "__version__",
]

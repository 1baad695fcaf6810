"""Diagnostic codes and data structures.

Defines error codes, lookup classifications, and diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum, StrEnum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "LookupFailure",
    "LookupKind",
]


class LookupKind(StrEnum):
    """Index consulted by a failed registry lookup.

    Inherits from ``StrEnum`` so that ``str(kind)`` yields the plain value
    (``"code"``, ``"numeric_code"``, ``"country"``) for logs and JSON output.
    """

    CODE = "code"
    NUMERIC_CODE = "numeric_code"
    COUNTRY = "country"


class LookupFailure(StrEnum):
    """Why a lookup could not resolve to exactly one currency.

    ABSENT: Nothing in the dataset matches the identifier.
    AMBIGUOUS: The identifier (a country) maps to more than one currency.
    """

    ABSENT = "absent"
    AMBIGUOUS = "ambiguous"


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Argument errors (Currency construction)
        2000-2999: Lookup errors (registry queries)
        3000-3999: Dataset errors (registry construction)
        4000-4999: Verification findings (dataset vs CLDR)
    """

    # Argument errors (1000-1999)
    INVALID_FRACTION_DIGITS = 1001
    INVALID_NUMERIC_CODE = 1002
    EMPTY_CURRENCY_CODE = 1003

    # Lookup errors (2000-2999)
    UNKNOWN_CURRENCY_CODE = 2001
    UNKNOWN_NUMERIC_CODE = 2002
    UNKNOWN_COUNTRY = 2003
    AMBIGUOUS_COUNTRY = 2004

    # Dataset errors (3000-3999)
    DATASET_DUPLICATE_CODE = 3001
    DATASET_DUPLICATE_NUMERIC_CODE = 3002
    DATASET_INVALID_ENTRY = 3003

    # Verification findings (4000-4999)
    VERIFY_CODE_NOT_IN_CLDR = 4001
    VERIFY_FRACTION_DIGITS_MISMATCH = 4002
    VERIFY_COUNTRY_NOT_ASSOCIATED = 4003


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Provides rich error information for both humans and tools.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        hint: Suggestion for fixing the error
        identifier: The value that triggered the diagnostic (code, numeric
            code, or country code), rendered as text
        lookup: Index consulted, for lookup errors
        reason: Failure classification, for lookup errors
        candidates: Currency codes involved (ambiguous countries, duplicates)
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None
    identifier: str | None = None
    lookup: LookupKind | None = None
    reason: LookupFailure | None = None
    candidates: tuple[str, ...] = ()
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic in compiler style.

        Delegates to DiagnosticFormatter for consistent output.

        Example output:
            error[AMBIGUOUS_COUNTRY]: Country 'CH' has more than one currency
              = lookup: country (ambiguous)
              = candidates: CHF, CHE, CHW
              = help: Pick one with get_currencies_for_country()

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)

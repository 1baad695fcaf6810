"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, LookupFailure, LookupKind


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    This provides:
        - Testable error messages
        - Consistent formatting
        - Documentation of all error cases
    """

    # ------------------------------------------------------------------
    # Argument errors
    # ------------------------------------------------------------------

    @staticmethod
    def invalid_fraction_digits(code: str, fraction_digits: int) -> Diagnostic:
        """Negative default fraction digits.

        Args:
            code: Currency code being constructed
            fraction_digits: The rejected value

        Returns:
            Diagnostic for INVALID_FRACTION_DIGITS
        """
        msg = (
            f"The default fraction digits cannot be less than zero "
            f"(currency '{code}', got {fraction_digits})"
        )
        return Diagnostic(
            code=DiagnosticCode.INVALID_FRACTION_DIGITS,
            message=msg,
            hint="Use 0 for currencies without a minor unit",
            identifier=code,
        )

    @staticmethod
    def invalid_numeric_code(code: str, numeric_code: object) -> Diagnostic:
        """Numeric code that is negative or not an integer.

        Args:
            code: Currency code being constructed
            numeric_code: The rejected value

        Returns:
            Diagnostic for INVALID_NUMERIC_CODE
        """
        msg = f"Invalid numeric code {numeric_code!r} for currency '{code}'"
        return Diagnostic(
            code=DiagnosticCode.INVALID_NUMERIC_CODE,
            message=msg,
            hint="Numeric codes are non-negative integers without leading zeros",
            identifier=code,
        )

    @staticmethod
    def empty_currency_code() -> Diagnostic:
        """Currency code is the empty string.

        Returns:
            Diagnostic for EMPTY_CURRENCY_CODE
        """
        return Diagnostic(
            code=DiagnosticCode.EMPTY_CURRENCY_CODE,
            message="Currency code cannot be empty",
            hint="ISO currencies use their 3-letter ISO 4217 code",
        )

    # ------------------------------------------------------------------
    # Lookup errors
    # ------------------------------------------------------------------

    @staticmethod
    def unknown_currency_code(code: str) -> Diagnostic:
        """No currency with this alphabetic code.

        Args:
            code: The code that was not found

        Returns:
            Diagnostic for UNKNOWN_CURRENCY_CODE
        """
        msg = f"Unknown currency code '{code}'"
        return Diagnostic(
            code=DiagnosticCode.UNKNOWN_CURRENCY_CODE,
            message=msg,
            hint="Codes are case-sensitive ISO 4217 codes (e.g., 'EUR', 'USD')",
            identifier=code,
            lookup=LookupKind.CODE,
            reason=LookupFailure.ABSENT,
        )

    @staticmethod
    def unknown_numeric_code(numeric_code: int) -> Diagnostic:
        """No currency with this numeric code.

        Args:
            numeric_code: The normalized numeric code that was not found

        Returns:
            Diagnostic for UNKNOWN_NUMERIC_CODE
        """
        msg = f"Unknown numeric currency code {numeric_code}"
        return Diagnostic(
            code=DiagnosticCode.UNKNOWN_NUMERIC_CODE,
            message=msg,
            hint="Numeric codes are ISO 4217 numbers (e.g., 978 for EUR)",
            identifier=str(numeric_code),
            lookup=LookupKind.NUMERIC_CODE,
            reason=LookupFailure.ABSENT,
        )

    @staticmethod
    def unknown_country(country_code: str) -> Diagnostic:
        """Country not associated with any currency.

        Args:
            country_code: The country code that was not found

        Returns:
            Diagnostic for UNKNOWN_COUNTRY
        """
        msg = f"No currency found for country '{country_code}'"
        return Diagnostic(
            code=DiagnosticCode.UNKNOWN_COUNTRY,
            message=msg,
            hint="Use an ISO 3166-1 alpha-2 country code (e.g., 'FR', 'JP')",
            identifier=country_code,
            lookup=LookupKind.COUNTRY,
            reason=LookupFailure.ABSENT,
        )

    @staticmethod
    def ambiguous_country(country_code: str, candidates: tuple[str, ...]) -> Diagnostic:
        """Country associated with several currencies.

        Args:
            country_code: The ambiguous country code
            candidates: Codes of every currency used by the country

        Returns:
            Diagnostic for AMBIGUOUS_COUNTRY
        """
        msg = (
            f"Country '{country_code}' has more than one currency "
            f"({', '.join(candidates)}); no single currency can be returned"
        )
        return Diagnostic(
            code=DiagnosticCode.AMBIGUOUS_COUNTRY,
            message=msg,
            hint="Pick one with get_currencies_for_country() or look it up by code",
            identifier=country_code,
            lookup=LookupKind.COUNTRY,
            reason=LookupFailure.AMBIGUOUS,
            candidates=candidates,
        )

    # ------------------------------------------------------------------
    # Dataset errors
    # ------------------------------------------------------------------

    @staticmethod
    def dataset_duplicate_code(code: str) -> Diagnostic:
        """Two dataset entries share an alphabetic code.

        Args:
            code: The duplicated code

        Returns:
            Diagnostic for DATASET_DUPLICATE_CODE
        """
        msg = f"Currency dataset defines code '{code}' more than once"
        return Diagnostic(
            code=DiagnosticCode.DATASET_DUPLICATE_CODE,
            message=msg,
            hint="Each currency code must be unique across the dataset",
            identifier=code,
            candidates=(code,),
        )

    @staticmethod
    def dataset_duplicate_numeric_code(
        numeric_code: int, first: str, second: str
    ) -> Diagnostic:
        """Two dataset entries share a numeric code.

        Args:
            numeric_code: The duplicated numeric code
            first: Code of the entry that claimed it first
            second: Code of the conflicting entry

        Returns:
            Diagnostic for DATASET_DUPLICATE_NUMERIC_CODE
        """
        msg = (
            f"Currency dataset assigns numeric code {numeric_code} "
            f"to both '{first}' and '{second}'"
        )
        return Diagnostic(
            code=DiagnosticCode.DATASET_DUPLICATE_NUMERIC_CODE,
            message=msg,
            hint="Each numeric code must be unique across the dataset",
            identifier=str(numeric_code),
            candidates=(first, second),
        )

    @staticmethod
    def dataset_invalid_entry(position: int, reason: str) -> Diagnostic:
        """Dataset entry rejected during construction.

        Args:
            position: Zero-based index of the entry in the dataset
            reason: Why the entry was rejected

        Returns:
            Diagnostic for DATASET_INVALID_ENTRY
        """
        msg = f"Invalid currency dataset entry at position {position}: {reason}"
        return Diagnostic(
            code=DiagnosticCode.DATASET_INVALID_ENTRY,
            message=msg,
            hint="Entries need a code, numeric code, name, fraction digits and countries",
            identifier=str(position),
        )

    # ------------------------------------------------------------------
    # Verification findings
    # ------------------------------------------------------------------

    @staticmethod
    def verify_code_not_in_cldr(code: str) -> Diagnostic:
        """Dataset currency unknown to Babel's CLDR data.

        Args:
            code: The unrecognized currency code

        Returns:
            Diagnostic for VERIFY_CODE_NOT_IN_CLDR
        """
        msg = f"Currency '{code}' is in the dataset but not recognized by Babel"
        return Diagnostic(
            code=DiagnosticCode.VERIFY_CODE_NOT_IN_CLDR,
            message=msg,
            hint="Check for a typo or a withdrawn ISO 4217 code",
            identifier=code,
        )

    @staticmethod
    def verify_fraction_digits_mismatch(
        code: str, dataset_digits: int, cldr_digits: int
    ) -> Diagnostic:
        """Dataset fraction digits differ from CLDR precision.

        Args:
            code: The currency code
            dataset_digits: Fraction digits in the dataset
            cldr_digits: Precision reported by Babel

        Returns:
            Diagnostic for VERIFY_FRACTION_DIGITS_MISMATCH
        """
        msg = f"{code}: ISO 4217={dataset_digits}, Babel CLDR={cldr_digits}"
        return Diagnostic(
            code=DiagnosticCode.VERIFY_FRACTION_DIGITS_MISMATCH,
            message=msg,
            hint="The dataset follows ISO 4217; CLDR may reflect common usage",
            identifier=code,
            severity="warning",
        )

    @staticmethod
    def verify_country_not_associated(country_code: str, cldr_code: str) -> Diagnostic:
        """CLDR tender currency missing from the dataset's country list.

        Args:
            country_code: The ISO 3166-1 country code
            cldr_code: The single active tender currency reported by CLDR

        Returns:
            Diagnostic for VERIFY_COUNTRY_NOT_ASSOCIATED
        """
        msg = (
            f"{country_code}: CLDR tender currency is {cldr_code}, "
            f"but the dataset does not list {country_code} for it"
        )
        return Diagnostic(
            code=DiagnosticCode.VERIFY_COUNTRY_NOT_ASSOCIATED,
            message=msg,
            hint="Add the country to the currency's entry if ISO 4217 lists it",
            identifier=country_code,
            candidates=(cldr_code,),
            severity="warning",
        )

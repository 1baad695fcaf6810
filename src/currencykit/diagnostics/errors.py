"""Currency exception hierarchy with structured diagnostics.

All exceptions can carry Diagnostic objects for rich error information.
Concrete errors also derive from the matching built-in exception
(ValueError, LookupError) so generic handlers keep working.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, LookupFailure, LookupKind

__all__ = [
    "CurrencyError",
    "DatasetError",
    "InvalidArgumentError",
    "UnknownCurrencyError",
]


class CurrencyError(Exception):
    """Base exception for all currencykit errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize CurrencyError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.message)
        else:
            self.diagnostic = None
            super().__init__(message)


class InvalidArgumentError(CurrencyError, ValueError):
    """Invalid value passed to Currency construction.

    Raised synchronously, never retried: it always signals a programmer or
    data error at the call site.
    """


class UnknownCurrencyError(CurrencyError, LookupError):
    """Identifier could not be resolved to exactly one currency.

    Raised by every registry lookup. Resolution against the static dataset
    is deterministic, so retrying with the same input cannot succeed.

    Attributes:
        identifier: The code, numeric code, or country code that failed
        lookup: Which index was consulted
        reason: ABSENT (nothing matches) or AMBIGUOUS (several currencies)
        candidates: Currency codes of an ambiguous country, else empty

    Example:
        >>> try:
        ...     registry.get_currency_for_country("CH")
        ... except UnknownCurrencyError as e:
        ...     if e.reason is LookupFailure.AMBIGUOUS:
        ...         print(e.candidates)
        ('CHE', 'CHF', 'CHW')
    """

    def __init__(
        self,
        message: str | Diagnostic,
        *,
        identifier: str | int,
        lookup: LookupKind,
        reason: LookupFailure = LookupFailure.ABSENT,
        candidates: tuple[str, ...] = (),
    ) -> None:
        """Initialize UnknownCurrencyError.

        Args:
            message: Error message string OR Diagnostic object
            identifier: The identifier that failed to resolve
            lookup: Index consulted
            reason: Failure classification
            candidates: Currency codes involved in an ambiguous match
        """
        super().__init__(message)
        self.identifier = identifier
        self.lookup = lookup
        self.reason = reason
        self.candidates = candidates

    @property
    def is_ambiguous(self) -> bool:
        """True if the identifier matched more than one currency."""
        return self.reason is LookupFailure.AMBIGUOUS


class DatasetError(CurrencyError):
    """Currency dataset is malformed.

    Raised during registry construction. Treated as a fatal startup error:
    the registry is left uninitialized and nothing is cached.
    """

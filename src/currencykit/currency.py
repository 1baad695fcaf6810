"""Immutable currency value object.

A Currency identifies a monetary currency by alphabetic code and numeric
code, and carries a display name and the default number of fraction digits
used for minor units.

Identity:
    Two currencies are the same currency iff both their code and numeric code
    match. Name and fraction digits are descriptive only and take no part in
    equality or hashing.

Canonical instances:
    Currency.of() and Currency.of_country() resolve through the process-wide
    CurrencyRegistry and always return the shared instance for a currency.
    Constructing Currency directly is reserved for custom currencies and
    dataset loading.

Python 3.13+.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from currencykit.diagnostics import ErrorTemplate, InvalidArgumentError

if TYPE_CHECKING:
    from currencykit.registry import CurrencyIdentifier

__all__ = ["Currency"]


@dataclass(frozen=True, slots=True, eq=False)
class Currency:
    """A currency. Immutable, thread-safe, hashable.

    For ISO currencies the code is the 3-letter uppercase ISO 4217 code and
    the numeric code is the ISO 4217 number without leading zeros. For
    non-ISO currencies no constraints are defined beyond uniqueness across
    the application.

    Attributes:
        code: Alphabetic currency code (e.g., 'EUR').
        numeric_code: Numeric currency code (e.g., 978). Useful when storing
            monies in a database.
        name: Display name (e.g., 'Euro'). For ISO currencies this is the
            official English name.
        fraction_digits: Default number of fraction digits (typical scale),
            e.g. 2 for the Euro and 0 for the Japanese Yen.

    Raises:
        InvalidArgumentError: If fraction_digits is negative, numeric_code is
            negative or not an integer, or code is empty.

    Example:
        >>> eur = Currency("EUR", 978, "Euro", 2)
        >>> str(eur)
        'EUR'
        >>> eur.matches(978)
        True
    """

    code: str
    numeric_code: int
    name: str
    fraction_digits: int

    def __post_init__(self) -> None:
        code = str(self.code)
        if not code:
            raise InvalidArgumentError(ErrorTemplate.empty_currency_code())

        try:
            numeric_code = int(self.numeric_code)
        except (TypeError, ValueError) as e:
            raise InvalidArgumentError(
                ErrorTemplate.invalid_numeric_code(code, self.numeric_code)
            ) from e
        if numeric_code < 0:
            raise InvalidArgumentError(ErrorTemplate.invalid_numeric_code(code, numeric_code))

        try:
            fraction_digits = int(self.fraction_digits)
        except (TypeError, ValueError) as e:
            raise InvalidArgumentError(
                ErrorTemplate.invalid_fraction_digits(code, self.fraction_digits)  # type: ignore[arg-type]
            ) from e
        if fraction_digits < 0:
            raise InvalidArgumentError(
                ErrorTemplate.invalid_fraction_digits(code, fraction_digits)
            )

        # Frozen dataclass: normalize through object.__setattr__
        object.__setattr__(self, "code", code)
        object.__setattr__(self, "numeric_code", numeric_code)
        object.__setattr__(self, "name", str(self.name))
        object.__setattr__(self, "fraction_digits", fraction_digits)

    @classmethod
    def of(cls, identifier: CurrencyIdentifier) -> Currency:
        """Return the shared Currency for an ISO currency code.

        Args:
            identifier: 3-letter code ('EUR'), numeric code (978), or numeric
                string with or without leading zeros ('036').

        Returns:
            The canonical instance held by the process-wide registry.

        Raises:
            UnknownCurrencyError: If the code is unknown.
        """
        from currencykit.registry import CurrencyRegistry  # noqa: PLC0415 - circular

        return CurrencyRegistry.get_instance().get_currency(identifier)

    @classmethod
    def of_country(cls, country_code: str) -> Currency:
        """Return the shared Currency for an ISO 3166-1 country code.

        Raises:
            UnknownCurrencyError: If the country is unknown, or it has no
                single currency.
        """
        from currencykit.registry import CurrencyRegistry  # noqa: PLC0415 - circular

        return CurrencyRegistry.get_instance().get_currency_for_country(country_code)

    def matches(self, other: Currency | str | int) -> bool:
        """Check whether this currency is the given currency.

        Comparison depends on what is passed:
            - Currency: both code and numeric code must match.
            - str: must equal this currency's code.
            - int: must equal this currency's numeric code.

        Scalar input matches on a single key, a Currency needs both. A string
        is always compared as an alphabetic code, even if it looks numeric.

        Args:
            other: Currency instance, currency code, or numeric currency code.

        Returns:
            True if other identifies this currency.

        Raises:
            TypeError: If other is none of the accepted types (bool included).
        """
        match other:
            case Currency():
                return self.code == other.code and self.numeric_code == other.numeric_code
            case bool():
                msg = f"Cannot compare Currency with {type(other).__name__}"
                raise TypeError(msg)
            case str():
                return self.code == other
            case int():
                return self.numeric_code == other
            case _:
                msg = f"Cannot compare Currency with {type(other).__name__}"
                raise TypeError(msg)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Currency):
            return NotImplemented
        return self.code == other.code and self.numeric_code == other.numeric_code

    def __hash__(self) -> int:
        return hash((self.code, self.numeric_code))

    def __str__(self) -> str:
        return self.code

"""Canonical currency registry.

Resolves currencies by alphabetic code, numeric code, or issuing country,
and guarantees that every lookup for a given currency returns the same
shared Currency instance.

Architecture:
    - One Currency is created per dataset entry, once.
    - Three read-only indices (by code, by numeric code, by country) are
      built from that single set of objects, so the same instance is
      reachable from every index.
    - Countries using more than one currency are kept out of the country
      index and reported as ambiguous instead of resolving to whichever
      currency was seen last.

Lifecycle:
    CurrencyRegistry(entries) builds a registry eagerly from any dataset.
    CurrencyRegistry.get_instance() returns the process-wide registry built
    from the bundled ISO 4217 table, constructing it on first call.
    reset_instance() drops it so tests can rebuild from a clean state.

Thread Safety:
    The process-wide instance is published under a class-level Lock with
    double-checked reads: under concurrent first access exactly one thread
    builds it, the others wait and then share the result. A registry is
    immutable once constructed; lookups take no locks.

Python 3.13+.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Iterable, Iterator, Mapping
from types import MappingProxyType
from typing import ClassVar

from currencykit.currency import Currency
from currencykit.dataset import CountryCode, CurrencyEntry, iso_4217_entries
from currencykit.diagnostics import (
    CurrencyError,
    DatasetError,
    ErrorTemplate,
    InvalidArgumentError,
    LookupFailure,
    LookupKind,
    UnknownCurrencyError,
)

__all__ = ["CurrencyIdentifier", "CurrencyRegistry"]

logger = logging.getLogger(__name__)


type CurrencyIdentifier = str | int
"""Alphabetic code ('EUR'), numeric code (978) or numeric string ('036')."""


def _classify(identifier: CurrencyIdentifier) -> tuple[LookupKind, str | int]:
    """Pick the index for an identifier and normalize it.

    Numeric strings lose their leading zeros ('036' -> 36), matching how the
    dataset stores numeric codes.

    Raises:
        TypeError: If identifier is neither str nor int (bool is rejected).
    """
    match identifier:
        case bool():
            pass
        case int():
            return LookupKind.NUMERIC_CODE, identifier
        case str() if identifier.isascii() and identifier.isdigit():
            return LookupKind.NUMERIC_CODE, int(identifier)
        case str():
            return LookupKind.CODE, identifier
    msg = f"Currency identifier must be str or int, got {type(identifier).__name__}"
    raise TypeError(msg)


def _currency_from_entry(position: int, entry: CurrencyEntry) -> Currency:
    try:
        return Currency(entry.code, entry.numeric_code, entry.name, entry.fraction_digits)
    except InvalidArgumentError as e:
        raise DatasetError(ErrorTemplate.dataset_invalid_entry(position, str(e))) from e
    except AttributeError as e:
        raise DatasetError(
            ErrorTemplate.dataset_invalid_entry(position, f"missing field ({e})")
        ) from e


def _entry_countries(position: int, entry: CurrencyEntry) -> tuple[CountryCode, ...]:
    countries = getattr(entry, "countries", ())
    try:
        result = tuple(countries) if not isinstance(countries, str) else None
    except TypeError:
        result = None
    if result is None or not all(isinstance(c, str) for c in result):
        raise DatasetError(
            ErrorTemplate.dataset_invalid_entry(
                position, "countries must be a sequence of country code strings"
            )
        )
    return result


class CurrencyRegistry:
    """Single authoritative source of shared Currency instances.

    Example:
        >>> registry = CurrencyRegistry.get_instance()
        >>> eur = registry.get_currency("EUR")
        >>> eur is registry.get_currency(978) is registry.get_currency("978")
        True
        >>> registry.get_currency_for_country("FR") is eur
        True
        >>> registry.get_available_currencies()["EUR"] is eur
        True

    Args:
        entries: Dataset rows. Consumed once.

    Raises:
        DatasetError: If the dataset is malformed (duplicate codes, invalid
            field values). No partially built registry is ever returned.
    """

    __slots__ = (
        "_by_code",
        "_by_country",
        "_by_numeric_code",
        "_countries_by_code",
        "_country_currencies",
    )

    # Process-wide instance, built lazily by get_instance()
    _instance: ClassVar[CurrencyRegistry | None] = None
    _instance_lock: ClassVar[threading.Lock] = threading.Lock()

    def __init__(self, entries: Iterable[CurrencyEntry]) -> None:
        by_code: dict[str, Currency] = {}
        by_numeric_code: dict[int, Currency] = {}
        country_currencies: dict[CountryCode, list[Currency]] = {}
        countries_by_code: dict[str, tuple[CountryCode, ...]] = {}

        for position, entry in enumerate(entries):
            currency = _currency_from_entry(position, entry)
            countries = _entry_countries(position, entry)

            if currency.code in by_code:
                raise DatasetError(ErrorTemplate.dataset_duplicate_code(currency.code))
            claimed = by_numeric_code.get(currency.numeric_code)
            if claimed is not None:
                raise DatasetError(
                    ErrorTemplate.dataset_duplicate_numeric_code(
                        currency.numeric_code, claimed.code, currency.code
                    )
                )

            by_code[currency.code] = currency
            by_numeric_code[currency.numeric_code] = currency
            countries_by_code[currency.code] = tuple(sorted(set(countries)))

            for country in countries:
                bucket = country_currencies.setdefault(country, [])
                if currency not in bucket:
                    bucket.append(currency)

        # Ambiguous countries stay out of the single-currency index
        by_country = {
            country: currencies[0]
            for country, currencies in country_currencies.items()
            if len(currencies) == 1
        }

        self._by_code: Mapping[str, Currency] = MappingProxyType(by_code)
        self._by_numeric_code: Mapping[int, Currency] = MappingProxyType(by_numeric_code)
        self._by_country: Mapping[CountryCode, Currency] = MappingProxyType(by_country)
        self._country_currencies: Mapping[CountryCode, tuple[Currency, ...]] = (
            MappingProxyType({c: tuple(cs) for c, cs in country_currencies.items()})
        )
        self._countries_by_code: Mapping[str, tuple[CountryCode, ...]] = MappingProxyType(
            countries_by_code
        )

        logger.debug(
            "Built currency registry: %d currencies, %d countries (%d ambiguous)",
            len(by_code),
            len(country_currencies),
            len(country_currencies) - len(by_country),
        )

    # ------------------------------------------------------------------
    # Process-wide instance
    # ------------------------------------------------------------------

    @classmethod
    def get_instance(cls) -> CurrencyRegistry:
        """Return the process-wide registry built from the ISO 4217 table.

        Constructed on first call; later calls reuse it. Safe under
        concurrent first access: exactly one construction runs.

        Raises:
            DatasetError: If the bundled dataset is malformed. Nothing is
                cached, so the next call fails the same way.
        """
        instance = cls._instance
        if instance is not None:
            return instance

        with cls._instance_lock:
            if cls._instance is None:
                try:
                    cls._instance = cls(iso_4217_entries())
                except CurrencyError:
                    logger.error("Failed to build the process-wide currency registry")
                    raise
            return cls._instance

    @classmethod
    def reset_instance(cls) -> None:
        """Drop the process-wide registry; the next get_instance() rebuilds it.

        Intended for test isolation. Instances already handed out stay valid
        but are no longer the canonical ones after the rebuild.
        """
        with cls._instance_lock:
            cls._instance = None
        logger.debug("Process-wide currency registry reset")

    @classmethod
    def is_initialized(cls) -> bool:
        """Check whether the process-wide registry has been built."""
        return cls._instance is not None

    # ------------------------------------------------------------------
    # Lookups
    # ------------------------------------------------------------------

    def get_currency(self, identifier: CurrencyIdentifier) -> Currency:
        """Resolve an alphabetic or numeric currency code.

        Args:
            identifier: Alphabetic code ('EUR'), numeric code (978), or
                numeric string with optional leading zeros ('036').
                Alphabetic codes are case-sensitive.

        Returns:
            The shared Currency instance.

        Raises:
            UnknownCurrencyError: If no currency matches.
            TypeError: If identifier is neither str nor int.
        """
        kind, key = _classify(identifier)

        if kind is LookupKind.CODE:
            currency = self._by_code.get(key)  # type: ignore[call-overload]
            if currency is None:
                raise UnknownCurrencyError(
                    ErrorTemplate.unknown_currency_code(str(key)),
                    identifier=identifier,
                    lookup=kind,
                )
            return currency

        currency = self._by_numeric_code.get(key)  # type: ignore[call-overload]
        if currency is None:
            raise UnknownCurrencyError(
                ErrorTemplate.unknown_numeric_code(int(key)),
                identifier=identifier,
                lookup=kind,
            )
        return currency

    def get_currency_for_country(self, country_code: CountryCode) -> Currency:
        """Resolve the single currency of an ISO 3166-1 country.

        Args:
            country_code: 2-letter country code (e.g., 'FR'). Case-sensitive.

        Returns:
            The shared Currency instance.

        Raises:
            UnknownCurrencyError: If the country is unknown (reason ABSENT),
                or it uses more than one currency (reason AMBIGUOUS, with the
                candidate codes attached).
        """
        currency = self._by_country.get(country_code)
        if currency is not None:
            return currency

        currencies = self._country_currencies.get(country_code, ())
        if currencies:
            candidates = tuple(c.code for c in currencies)
            raise UnknownCurrencyError(
                ErrorTemplate.ambiguous_country(country_code, candidates),
                identifier=country_code,
                lookup=LookupKind.COUNTRY,
                reason=LookupFailure.AMBIGUOUS,
                candidates=candidates,
            )
        raise UnknownCurrencyError(
            ErrorTemplate.unknown_country(country_code),
            identifier=country_code,
            lookup=LookupKind.COUNTRY,
        )

    def get_currencies_for_country(self, country_code: CountryCode) -> tuple[Currency, ...]:
        """Return every currency used by a country, in dataset order.

        Empty tuple for unknown countries. Unlike get_currency_for_country(),
        ambiguous countries are answered in full so the caller can choose.
        """
        return self._country_currencies.get(country_code, ())

    def get_countries(self, identifier: CurrencyIdentifier) -> tuple[CountryCode, ...]:
        """Return the sorted country codes listed for a currency.

        Raises:
            UnknownCurrencyError: If the currency is unknown.
        """
        return self._countries_by_code[self.get_currency(identifier).code]

    def get_available_currencies(self) -> Mapping[str, Currency]:
        """Return a read-only mapping of every code to its shared Currency."""
        return self._by_code

    # ------------------------------------------------------------------
    # Container protocol
    # ------------------------------------------------------------------

    def __contains__(self, identifier: object) -> bool:
        try:
            kind, key = _classify(identifier)  # type: ignore[arg-type]
        except TypeError:
            return False
        if kind is LookupKind.CODE:
            return key in self._by_code
        return key in self._by_numeric_code

    def __iter__(self) -> Iterator[Currency]:
        return iter(self._by_code.values())

    def __len__(self) -> int:
        return len(self._by_code)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(currencies={len(self._by_code)}, "
            f"countries={len(self._country_currencies)})"
        )

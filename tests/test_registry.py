"""Tests for CurrencyRegistry lookups against the bundled ISO 4217 table.

Tests cover:
- get_currency by code, numeric code and numeric string
- Identity sharing across indices and get_available_currencies()
- Country resolution with absent/ambiguous diagnostics
- Container protocol (len, in, iteration)
- Process-wide instance lifecycle (lazy build, reset)
"""

import logging
from collections.abc import Mapping

import pytest

from currencykit import Currency, CurrencyRegistry, LookupFailure, UnknownCurrencyError
from currencykit.diagnostics import DiagnosticCode, LookupKind


@pytest.fixture
def registry() -> CurrencyRegistry:
    """Process-wide registry (reset around each test by conftest)."""
    return CurrencyRegistry.get_instance()


class TestGetCurrency:
    """Tests for get_currency()."""

    @pytest.mark.parametrize(
        ("code", "numeric_code", "name", "fraction_digits"),
        [
            ("EUR", "978", "Euro", 2),
            ("GBP", "826", "Pound Sterling", 2),
            ("USD", "840", "US Dollar", 2),
            ("CAD", "124", "Canadian Dollar", 2),
            ("AUD", "036", "Australian Dollar", 2),
            ("NZD", "554", "New Zealand Dollar", 2),
            ("JPY", "392", "Yen", 0),
            ("TND", "788", "Tunisian Dinar", 3),
        ],
    )
    def test_known_currencies(
        self,
        registry: CurrencyRegistry,
        code: str,
        numeric_code: str,
        name: str,
        fraction_digits: int,
    ) -> None:
        """Known ISO currencies carry the published data."""
        currency = registry.get_currency(code)
        assert isinstance(currency, Currency)
        assert currency.code == code
        assert currency.numeric_code == int(numeric_code)
        assert currency.name == name
        assert currency.fraction_digits == fraction_digits

    def test_unknown_code(self, registry: CurrencyRegistry) -> None:
        """XXX is not in the dataset."""
        with pytest.raises(UnknownCurrencyError) as exc_info:
            registry.get_currency("XXX")
        error = exc_info.value
        assert error.identifier == "XXX"
        assert error.lookup is LookupKind.CODE
        assert error.reason is LookupFailure.ABSENT
        assert error.candidates == ()
        assert error.diagnostic is not None
        assert error.diagnostic.code == DiagnosticCode.UNKNOWN_CURRENCY_CODE
        assert "XXX" in str(error)

    def test_unknown_currency_is_lookup_error(self, registry: CurrencyRegistry) -> None:
        """UnknownCurrencyError can be caught as LookupError."""
        with pytest.raises(LookupError):
            registry.get_currency("ABC")

    def test_codes_are_case_sensitive(self, registry: CurrencyRegistry) -> None:
        """Lowercase codes do not resolve."""
        with pytest.raises(UnknownCurrencyError):
            registry.get_currency("eur")

    def test_empty_code(self, registry: CurrencyRegistry) -> None:
        """The empty string is an unknown code, not a numeric one."""
        with pytest.raises(UnknownCurrencyError) as exc_info:
            registry.get_currency("")
        assert exc_info.value.lookup is LookupKind.CODE

    def test_numeric_int(self, registry: CurrencyRegistry) -> None:
        """Integer identifiers resolve through the numeric index."""
        assert registry.get_currency(978) is registry.get_currency("EUR")

    @pytest.mark.parametrize("text", ["36", "036", "0036", "000036"])
    def test_numeric_string_leading_zeros(
        self, registry: CurrencyRegistry, text: str
    ) -> None:
        """Numeric strings lose their leading zeros before lookup."""
        assert registry.get_currency(text) is registry.get_currency("AUD")

    def test_unknown_numeric(self, registry: CurrencyRegistry) -> None:
        """Unknown numeric codes report the numeric lookup."""
        with pytest.raises(UnknownCurrencyError) as exc_info:
            registry.get_currency("0999")
        error = exc_info.value
        assert error.identifier == "0999"
        assert error.lookup is LookupKind.NUMERIC_CODE
        assert error.diagnostic is not None
        assert error.diagnostic.code == DiagnosticCode.UNKNOWN_NUMERIC_CODE
        assert error.diagnostic.identifier == "999"

    def test_negative_numeric(self, registry: CurrencyRegistry) -> None:
        """Negative integers never match."""
        with pytest.raises(UnknownCurrencyError):
            registry.get_currency(-978)

    @pytest.mark.parametrize("value", [True, 978.0, None, b"EUR"])
    def test_unsupported_identifier_types(
        self, registry: CurrencyRegistry, value: object
    ) -> None:
        """Only str and int identifiers are accepted."""
        with pytest.raises(TypeError, match="must be str or int"):
            registry.get_currency(value)  # type: ignore[arg-type]


class TestIdentitySharing:
    """The same Currency instance is reachable from every index."""

    def test_repeated_lookup_same_instance(self, registry: CurrencyRegistry) -> None:
        """Two lookups for a code return the identical object."""
        assert registry.get_currency("EUR") is registry.get_currency("EUR")

    def test_code_and_numeric_same_instance(self, registry: CurrencyRegistry) -> None:
        """Code and numeric lookups share the instance for every entry."""
        for currency in registry:
            assert registry.get_currency(currency.code) is currency
            assert registry.get_currency(currency.numeric_code) is currency

    def test_available_currencies(self, registry: CurrencyRegistry) -> None:
        """Available currencies are the instances direct lookup returns."""
        eur = registry.get_currency("EUR")
        gbp = registry.get_currency("GBP")
        usd = registry.get_currency("USD")

        available = registry.get_available_currencies()

        assert len(available) > 100
        assert all(isinstance(c, Currency) for c in available.values())
        assert available["EUR"] is eur
        assert available["GBP"] is gbp
        assert available["USD"] is usd

    def test_available_currencies_read_only(self, registry: CurrencyRegistry) -> None:
        """The returned mapping cannot be modified."""
        available = registry.get_available_currencies()
        assert isinstance(available, Mapping)
        with pytest.raises(TypeError):
            available["ZZZ"] = Currency("ZZZ", 1, "Fake", 2)  # type: ignore[index]

    def test_country_same_instance(self, registry: CurrencyRegistry) -> None:
        """Country lookups return the shared instance."""
        eur = registry.get_currency("EUR")
        for country in ("FR", "DE", "IT", "ES"):
            assert registry.get_currency_for_country(country) is eur

    def test_process_wide_instance_reused(self) -> None:
        """get_instance() builds once and then returns the same registry."""
        assert CurrencyRegistry.get_instance() is CurrencyRegistry.get_instance()


class TestCountryLookup:
    """Tests for get_currency_for_country() and related lookups."""

    @pytest.mark.parametrize(
        ("country", "code"),
        [("FR", "EUR"), ("GB", "GBP"), ("JP", "JPY"), ("TN", "TND"), ("LI", "CHF")],
    )
    def test_single_currency_country(
        self, registry: CurrencyRegistry, country: str, code: str
    ) -> None:
        """Countries with one currency resolve."""
        assert registry.get_currency_for_country(country).code == code

    def test_unknown_country(self, registry: CurrencyRegistry) -> None:
        """Unknown countries report reason ABSENT."""
        with pytest.raises(UnknownCurrencyError) as exc_info:
            registry.get_currency_for_country("QQ")
        error = exc_info.value
        assert error.identifier == "QQ"
        assert error.lookup is LookupKind.COUNTRY
        assert error.reason is LookupFailure.ABSENT
        assert not error.is_ambiguous
        assert error.diagnostic is not None
        assert error.diagnostic.code == DiagnosticCode.UNKNOWN_COUNTRY

    @pytest.mark.parametrize(
        ("country", "candidates"),
        [
            ("CH", ("CHE", "CHF", "CHW")),
            ("US", ("USD", "USN")),
            ("UY", ("UYI", "UYU", "UYW")),
            ("PA", ("PAB", "USD")),
            ("LS", ("LSL", "ZAR")),
        ],
    )
    def test_ambiguous_country(
        self,
        registry: CurrencyRegistry,
        country: str,
        candidates: tuple[str, ...],
    ) -> None:
        """Multi-currency countries are refused, never silently resolved."""
        with pytest.raises(UnknownCurrencyError) as exc_info:
            registry.get_currency_for_country(country)
        error = exc_info.value
        assert error.reason is LookupFailure.AMBIGUOUS
        assert error.is_ambiguous
        assert error.candidates == candidates
        assert error.diagnostic is not None
        assert error.diagnostic.code == DiagnosticCode.AMBIGUOUS_COUNTRY
        assert "more than one currency" in str(error)

    def test_absent_and_ambiguous_messages_differ(self, registry: CurrencyRegistry) -> None:
        """Both failures share a type but not a message."""
        with pytest.raises(UnknownCurrencyError) as absent:
            registry.get_currency_for_country("QQ")
        with pytest.raises(UnknownCurrencyError) as ambiguous:
            registry.get_currency_for_country("US")
        assert "No currency found" in str(absent.value)
        assert "more than one currency" in str(ambiguous.value)

    def test_currencies_for_ambiguous_country(self, registry: CurrencyRegistry) -> None:
        """Every currency of an ambiguous country is listed, shared instances."""
        currencies = registry.get_currencies_for_country("US")
        assert currencies == (registry.get_currency("USD"), registry.get_currency("USN"))
        assert currencies[0] is registry.get_currency("USD")

    def test_currencies_for_unknown_country(self, registry: CurrencyRegistry) -> None:
        """Unknown countries have no currencies."""
        assert registry.get_currencies_for_country("QQ") == ()

    def test_get_countries(self, registry: CurrencyRegistry) -> None:
        """Countries of a currency are returned sorted."""
        assert registry.get_countries("GBP") == ("GB", "GG", "IM", "JE")
        assert registry.get_countries(826) == ("GB", "GG", "IM", "JE")

    def test_get_countries_unknown(self, registry: CurrencyRegistry) -> None:
        """Unknown currencies raise like get_currency()."""
        with pytest.raises(UnknownCurrencyError):
            registry.get_countries("XXX")


class TestContainerProtocol:
    """Tests for len(), in and iteration."""

    def test_len(self, registry: CurrencyRegistry) -> None:
        """len() counts currencies."""
        assert len(registry) == len(registry.get_available_currencies())

    @pytest.mark.parametrize("identifier", ["EUR", 978, "978", "036"])
    def test_contains_known(self, registry: CurrencyRegistry, identifier: str | int) -> None:
        """Known identifiers are members."""
        assert identifier in registry

    @pytest.mark.parametrize("identifier", ["XXX", 999, "eur", None, 978.0, True])
    def test_contains_unknown(self, registry: CurrencyRegistry, identifier: object) -> None:
        """Unknown or unsupported identifiers are not members; nothing raises."""
        assert identifier not in registry

    def test_iteration_in_dataset_order(self, registry: CurrencyRegistry) -> None:
        """Iteration yields currencies in dataset order."""
        codes = [c.code for c in registry]
        assert codes == list(registry.get_available_currencies())
        assert codes[0] == "AED"

    def test_repr(self, registry: CurrencyRegistry) -> None:
        """repr() summarizes the registry."""
        assert repr(registry).startswith("CurrencyRegistry(currencies=")


class TestProcessWideInstance:
    """Tests for the lazily built process-wide registry."""

    def test_not_built_before_first_use(self) -> None:
        """Nothing is built until get_instance() is called."""
        assert not CurrencyRegistry.is_initialized()
        CurrencyRegistry.get_instance()
        assert CurrencyRegistry.is_initialized()

    def test_reset_rebuilds(self) -> None:
        """reset_instance() makes the next call build a new registry."""
        first = CurrencyRegistry.get_instance()
        CurrencyRegistry.reset_instance()
        assert not CurrencyRegistry.is_initialized()
        second = CurrencyRegistry.get_instance()
        assert second is not first
        assert second.get_currency("EUR") is not first.get_currency("EUR")
        assert second.get_currency("EUR") == first.get_currency("EUR")

    def test_build_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        """Construction is logged at DEBUG with currency counts."""
        with caplog.at_level(logging.DEBUG, logger="currencykit.registry"):
            registry = CurrencyRegistry.get_instance()
        assert f"{len(registry)} currencies" in caplog.text

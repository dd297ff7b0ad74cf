# tests/test_models.py
"""
Domain Tests - Unit Tests for ExchangeRate and Exchange Errors

Files that USE this module:
- pytest (test runner executes these tests)

Files that this module USES:
- coinquote.domain (ExchangeRate and error taxonomy)
"""
import dataclasses
import math

import pytest

from coinquote.domain import (
    ExchangeError,
    ExchangeException,
    ExchangeRate,
    InvalidRateError,
    MalformedResponseError,
    ServiceError,
    StatusError,
)


class TestExchangeRate:
    def test_creation(self):
        rate = ExchangeRate("XMR", "EUR", 1.56)
        assert rate.base_currency == "XMR"
        assert rate.quote_currency == "EUR"
        assert rate.rate == 1.56
        assert rate.service_name == "coinmarketcap.com"

    def test_symbols_are_normalized(self):
        rate = ExchangeRate(" xmr", "eur ", 2)
        assert (rate.base_currency, rate.quote_currency) == ("XMR", "EUR")
        assert isinstance(rate.rate, float)

    def test_is_immutable(self):
        rate = ExchangeRate("XMR", "EUR", 1.56)
        with pytest.raises(dataclasses.FrozenInstanceError):
            rate.rate = 2.0

    @pytest.mark.parametrize("value", [0, -1.5, math.inf, math.nan, "abc", None, True])
    def test_rejects_invalid_rate(self, value):
        with pytest.raises(InvalidRateError):
            ExchangeRate("XMR", "EUR", value)

    @pytest.mark.parametrize("base,quote", [("", "EUR"), ("XMR", "   "), (None, "EUR")])
    def test_rejects_empty_symbols(self, base, quote):
        with pytest.raises(ValueError):
            ExchangeRate(base, quote, 1.0)

    def test_inverse(self):
        inverse = ExchangeRate("XMR", "EUR", 200.0).inverse()
        assert inverse == ExchangeRate("EUR", "XMR", 0.005)

    def test_service_name_not_compared(self):
        assert ExchangeRate("XMR", "EUR", 1.0, service_name="a") == ExchangeRate("XMR", "EUR", 1.0)


class TestExchangeErrors:
    def test_status_error(self):
        error = StatusError(500)
        assert isinstance(error, ExchangeError)
        assert error.code == 500
        assert error.error_msg is None
        assert "500" in str(error)

    def test_service_error_uses_success_code(self):
        error = ServiceError("id not found")
        assert error.code == 200
        assert error.error_msg == "id not found"
        assert str(error) == "id not found"

    def test_malformed_has_no_error_msg(self):
        error = MalformedResponseError("missing 'data'")
        assert error.code == 200
        assert error.error_msg is None
        assert "missing 'data'" in str(error)

    def test_legacy_name(self):
        assert ExchangeException is ExchangeError
        assert ExchangeException(404).code == 404

    def test_repr(self):
        assert repr(ServiceError("x")) == "ServiceError(code=200, error_msg='x')"

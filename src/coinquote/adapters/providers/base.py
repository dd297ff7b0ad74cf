# src/coinquote/adapters/providers/base.py
"""
Base Provider Interface for Exchange Rate Providers

This module defines the contract of an exchange rate lookup: a query for a
(base, quote) pair whose outcome is delivered to an ExchangeCallback.

Files that USE this module:
- coinquote.adapters.providers.coinmarketcap (CoinMarketCapExchangeApi implements ExchangeApi)
- tests.test_exchange_api (mock callbacks are specced on ExchangeCallback)

Files that this module USES:
- coinquote.domain.models (ExchangeRate delivered on success)
"""
from abc import ABC, abstractmethod

from coinquote.domain.models import ExchangeRate


class ExchangeCallback(ABC):
    """Receives the outcome of one query: exactly one of the two methods is called, once."""

    @abstractmethod
    def on_success(self, rate: ExchangeRate) -> None:
        raise NotImplementedError

    @abstractmethod
    def on_error(self, error: Exception) -> None:
        raise NotImplementedError


class ExchangeApi(ABC):
    @abstractmethod
    def query(self, base: str, quote: str, callback: ExchangeCallback) -> None:
        """Look up the price of one ``base`` in ``quote`` and report it to ``callback``."""
        raise NotImplementedError

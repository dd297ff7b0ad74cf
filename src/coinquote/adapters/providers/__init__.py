# src/coinquote/adapters/providers/__init__.py
"""
Provider Adapters - External API Clients

This package contains adapters for external exchange rate APIs.
All providers implement the ExchangeApi interface.
"""

from coinquote.adapters.providers.base import ExchangeApi, ExchangeCallback
from coinquote.adapters.providers.coinmarketcap import (
    CoinMarketCapExchangeApi,
    build_query_params,
    parse_exchange_rate,
)

__all__ = [
    "ExchangeApi",
    "ExchangeCallback",
    "CoinMarketCapExchangeApi",
    "build_query_params",
    "parse_exchange_rate",
]

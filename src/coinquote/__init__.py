# src/coinquote/__init__.py
"""
coinquote - Cryptocurrency Exchange Rate Client

Fetches the current price of a crypto asset in a fiat (or other) currency
from the CoinMarketCap ticker service and delivers it asynchronously,
either through an on_success/on_error callback or as an awaitable.
"""

__version__ = "1.0.0"

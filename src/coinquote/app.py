# src/coinquote/app.py
"""
Application Entry Point - One-shot Rate Lookup

This module is the composition root: it configures logging from settings,
wires the HTTP transport into the CoinMarketCap client and resolves a single
(base, quote) query.

Files that USE this module:
- coinquote.__main__ (python -m coinquote BASE QUOTE)

Files that this module USES:
- coinquote.shared.logging_conf (setup_logging for logging configuration)
- coinquote.config (settings for logging and HTTP configuration)
- coinquote.adapters.http (RequestsTransport)
- coinquote.adapters.providers (CoinMarketCapExchangeApi)
"""

from __future__ import annotations  # Enable postponed evaluation of annotations for forward references

import argparse  # Command-line argument parsing
import asyncio  # Event loop for awaiting the query
import logging  # Standard library for logging messages and errors
from typing import Optional, Sequence

from coinquote.adapters.http import RequestsTransport  # requests-based HTTP transport
from coinquote.adapters.providers import CoinMarketCapExchangeApi  # Ticker client
from coinquote.config import settings  # Application settings
from coinquote.domain.errors import ExchangeError  # Error taxonomy for reporting
from coinquote.shared.logging_conf import setup_logging  # Configure logging with file rotation

logger = logging.getLogger(__name__)


def _parse_args(argv: Optional[Sequence[str]]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="coinquote",
        description="Fetch the current price of a crypto asset in another currency.",
    )
    parser.add_argument("base", nargs="?", default=settings.asset_symbol, help="asset symbol (default: %(default)s)")
    parser.add_argument("quote", nargs="?", default=settings.default_currency, help="currency code (default: %(default)s)")
    return parser.parse_args(argv)


async def fetch_rate(base: str, quote: str, api: CoinMarketCapExchangeApi):
    return await api.query_async(base, quote)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """
    Run one lookup and print the result.
    
    Returns:
        Process exit code: 0 on success, 1 on any lookup failure
    """
    args = _parse_args(argv)
    setup_logging(
        level=settings.log_level,
        log_file=settings.log_file,
        log_stdout=settings.log_stdout,
        max_bytes=settings.log_max_bytes,
        backup_count=settings.log_backup_count,
    )

    with RequestsTransport() as transport:
        api = CoinMarketCapExchangeApi(transport=transport)
        try:
            rate = asyncio.run(fetch_rate(args.base, args.quote, api))
        except ExchangeError as e:
            logger.error("Exchange lookup failed: code=%s error=%s (%s)", e.code, e.error_msg, e)
            return 1
        except Exception as e:
            logger.error("Exchange lookup failed: %s (type: %s)", e, type(e).__name__)
            return 1

    print(f"1 {rate.base_currency} = {rate.rate} {rate.quote_currency} ({rate.service_name})")
    return 0

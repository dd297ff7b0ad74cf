# src/coinquote/adapters/providers/coinmarketcap.py
"""
CoinMarketCap Ticker Provider for Crypto Exchange Rates

This module implements the CoinMarketCap ticker client. One query issues a
single GET to the asset's ticker endpoint with ``?convert=<QUOTE>`` and maps
the outcome onto the callback:

- transport failure          -> on_error(<the transport exception>)
- non-2xx HTTP status        -> on_error(StatusError(status))
- metadata.error is set      -> on_error(ServiceError(message)), code 200
- unexpected body shape      -> on_error(MalformedResponseError)
- otherwise                  -> on_success(ExchangeRate)

There is no retry and no caching; every query goes to the network.

Files that USE this module:
- coinquote.app (CLI entry point queries a single rate)
- tests.test_exchange_api (unit tests)

Files that this module USES:
- coinquote.adapters.providers.base (ExchangeApi / ExchangeCallback interface)
- coinquote.adapters.http (HttpTransport, RequestsTransport)
- coinquote.domain (ExchangeRate and error taxonomy)
- coinquote.config (settings for endpoint and currencies)
"""
from __future__ import annotations

import asyncio
import logging
from typing import Any, Dict, Mapping, Optional, Tuple

from coinquote.adapters.http import HttpResponse, HttpTransport, RequestsTransport
from coinquote.adapters.providers.base import ExchangeApi, ExchangeCallback
from coinquote.config import settings
from coinquote.domain.errors import (
    ExchangeError,
    InvalidRateError,
    MalformedResponseError,
    ServiceError,
    StatusError,
)
from coinquote.domain.models import DEFAULT_SERVICE_NAME, ExchangeRate
from coinquote.shared.validators import normalize_symbol

log = logging.getLogger(__name__)


def build_query_params(quote: str) -> Dict[str, str]:
    """Query string for a ticker request; the currency code is sent as given."""
    return {"convert": quote}


def _require_mapping(value: Any, what: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise MalformedResponseError(f"expected {what} to be an object, got {type(value).__name__}")
    return value


def parse_exchange_rate(
    payload: Any,
    base: str,
    quote: str,
    default_currency: str = "USD",
    service_name: str = DEFAULT_SERVICE_NAME,
) -> ExchangeRate:
    """
    Extract the ``base`` price in ``quote`` from a decoded ticker response.
    
    Expected shape: {"data": {"quotes": {"<CUR>": {"price": ...}}}, "metadata": {"error": ...}}
    
    The entry keyed by ``quote`` is used when present. Otherwise, if ``quote``
    is the service's default currency, the default-currency entry is used.
    
    Args:
        payload: Decoded JSON body
        base: Base currency symbol reported on the resulting rate
        quote: Requested quote currency
        default_currency: Currency the service always includes (USD)
        service_name: Service name reported on the resulting rate
        
    Returns:
        ExchangeRate for (base, quote)
        
    Raises:
        ServiceError: If metadata.error is non-null (data is not inspected)
        MalformedResponseError: If any expected field is missing or has the wrong type
    """
    body = _require_mapping(payload, "response body")
    metadata = _require_mapping(body.get("metadata"), "'metadata'")

    error = metadata.get("error")
    if error is not None:
        raise ServiceError(str(error))

    data = _require_mapping(body.get("data"), "'data'")
    quotes = _require_mapping(data.get("quotes"), "'data.quotes'")

    entry = quotes.get(quote)
    if entry is None and quote != normalize_symbol(quote):
        entry = quotes.get(normalize_symbol(quote))
    if entry is None and normalize_symbol(quote) == normalize_symbol(default_currency):
        entry = quotes.get(normalize_symbol(default_currency))
    if entry is None:
        raise MalformedResponseError(f"no quote entry for {quote!r}")

    price = _require_mapping(entry, f"'data.quotes.{quote}'").get("price")
    if isinstance(price, bool) or not isinstance(price, (int, float)):
        raise MalformedResponseError(f"price for {quote!r} is not a number: {price!r}")

    try:
        return ExchangeRate(base, quote, price, service_name=service_name)
    except InvalidRateError as e:
        raise MalformedResponseError(str(e)) from e


class _FutureCallback(ExchangeCallback):
    """Resolves an asyncio future from whichever thread the transport completes on."""

    def __init__(self, loop: asyncio.AbstractEventLoop, future: asyncio.Future):
        self.loop = loop
        self.future = future

    def _settle(self, setter, value) -> None:
        if not self.future.done():
            setter(value)

    def on_success(self, rate: ExchangeRate) -> None:
        self.loop.call_soon_threadsafe(self._settle, self.future.set_result, rate)

    def on_error(self, error: Exception) -> None:
        self.loop.call_soon_threadsafe(self._settle, self.future.set_exception, error)


class CoinMarketCapExchangeApi(ExchangeApi):
    SERVICE_NAME = DEFAULT_SERVICE_NAME

    def __init__(
        self,
        transport: Optional[HttpTransport] = None,
        base_url: Optional[str] = None,
        default_currency: Optional[str] = None,
        asset_symbol: Optional[str] = None,
        invert_asset_quotes: bool = False,
    ):
        """
        Initialize the CoinMarketCap ticker client.
        
        Args:
            transport: Optional HTTP transport (defaults to a RequestsTransport)
            base_url: Optional ticker endpoint (defaults to settings.base_url)
            default_currency: Optional currency always quoted by the service (defaults to settings.default_currency)
            asset_symbol: Optional symbol of the asset behind base_url (defaults to settings.asset_symbol)
            invert_asset_quotes: Answer fiat-to-asset pairs (e.g. EUR in XMR) by requesting
                convert=<base> and inverting the rate (off by default: every query
                then requests convert=<quote> as given)
        """
        self._owns_transport = transport is None
        self.transport = transport or RequestsTransport()
        self.base_url = base_url or settings.base_url
        self.default_currency = normalize_symbol(default_currency or settings.default_currency)
        self.asset_symbol = normalize_symbol(asset_symbol or settings.asset_symbol)
        self.invert_asset_quotes = invert_asset_quotes

    def close(self) -> None:
        """Close the transport if this client created it; an injected transport belongs to the caller."""
        if self._owns_transport and isinstance(self.transport, RequestsTransport):
            self.transport.close()

    def __enter__(self) -> CoinMarketCapExchangeApi:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def _resolve_pair(self, base: str, quote: str) -> Tuple[str, bool]:
        """
        Return the currency to request and whether the result must be inverted.
        
        The service prices the asset in other currencies, so a query whose quote
        is the asset (e.g. EUR in XMR) requests convert=EUR and inverts the rate
        when invert_asset_quotes is enabled.
        """
        if (
            self.invert_asset_quotes
            and normalize_symbol(quote) == self.asset_symbol
            and normalize_symbol(base) != self.asset_symbol
        ):
            return base, True
        return quote, False

    def query(self, base: str, quote: str, callback: ExchangeCallback) -> None:
        """
        Look up the price of one ``base`` in ``quote``.
        
        Returns immediately; exactly one of callback.on_success or
        callback.on_error is invoked once the transport completes.
        """
        for role, symbol in (("base", base), ("quote", quote)):
            if not isinstance(symbol, str) or not symbol.strip():
                callback.on_error(ValueError(f"{role} currency must be a non-empty symbol, got {symbol!r}"))
                return

        convert, inverse = self._resolve_pair(base, quote)
        log.info("Fetching %s/%s rate from %s (convert=%s)", base, quote, self.SERVICE_NAME, convert)

        completed = []

        def on_response(response: HttpResponse) -> None:
            completed.append(True)
            self._handle_response(response, base, quote, convert, inverse, callback)

        def on_failure(error: Exception) -> None:
            completed.append(True)
            log.warning("%s/%s request failed before a response: %s", base, quote, error)
            callback.on_error(error)

        try:
            self.transport.get(self.base_url, build_query_params(convert), on_response, on_failure)
        except Exception as e:
            if completed:
                # raised by the caller's own callback on a synchronous transport
                raise
            log.error("Could not issue %s/%s request: %s", base, quote, e)
            callback.on_error(e)

    def _handle_response(
        self,
        response: HttpResponse,
        base: str,
        quote: str,
        convert: str,
        inverse: bool,
        callback: ExchangeCallback,
    ) -> None:
        if not response.ok:
            log.warning("%s returned HTTP %d for %s/%s", self.SERVICE_NAME, response.status_code, base, quote)
            callback.on_error(StatusError(response.status_code))
            return

        try:
            try:
                payload = response.json()
            except ValueError as e:
                raise MalformedResponseError(f"invalid JSON: {e}", code=response.status_code) from e
            # The service always prices its asset; inverse pairs are flipped afterwards
            if inverse:
                rate = parse_exchange_rate(
                    payload, quote, convert, self.default_currency, self.SERVICE_NAME
                ).inverse()
            else:
                rate = parse_exchange_rate(
                    payload, base, convert, self.default_currency, self.SERVICE_NAME
                )
        except ExchangeError as e:
            log.warning("%s/%s lookup failed: %r", base, quote, e)
            callback.on_error(e)
            return
        except Exception as e:
            # e.g. RecursionError on deeply nested bodies, InvalidRateError on inversion
            log.warning("%s/%s response could not be read: %s (type: %s)", base, quote, e, type(e).__name__)
            error = MalformedResponseError(f"{type(e).__name__}: {e}", code=response.status_code)
            error.__cause__ = e
            callback.on_error(error)
            return

        log.info("%s/%s = %s", rate.base_currency, rate.quote_currency, rate.rate)
        callback.on_success(rate)

    async def query_async(self, base: str, quote: str) -> ExchangeRate:
        """
        Awaitable form of query().
        
        Returns:
            ExchangeRate for (base, quote)
            
        Raises:
            The exception query() would have passed to on_error.
        """
        loop = asyncio.get_running_loop()
        future = loop.create_future()
        self.query(base, quote, _FutureCallback(loop, future))
        return await future

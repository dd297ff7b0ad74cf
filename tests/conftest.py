# tests/conftest.py
"""
Shared Test Fixtures - Ticker Payloads and In-process Transports

Files that USE this module:
- tests.test_exchange_api
- tests.test_transport
- tests.test_app

Files that this module USES:
- coinquote.adapters.http (HttpTransport, HttpResponse)
"""
import json
from concurrent.futures import Executor, Future

import pytest
import requests

from coinquote.adapters.http import HttpResponse, HttpTransport


def make_requests_response(status_code=200, text="", url="http://localhost/?convert=EUR"):
    """A real requests.Response carrying the given status and body."""
    resp = requests.Response()
    resp.status_code = status_code
    resp._content = text.encode("utf-8")
    resp.encoding = "utf-8"
    resp.url = url
    return resp


def make_ticker_body(base, quote, rate, default_currency="USD"):
    """Success body as returned by the ticker endpoint for ?convert=<quote>."""
    quotes = {
        default_currency: {
            "price": rate,
            "volume_24h": 57090.0,
            "market_cap": 9182747.0,
            "percent_change_1h": -2.34,
            "percent_change_24h": 2.08,
            "percent_change_7d": -31.08,
        }
    }
    if quote != default_currency:
        quotes[quote] = {
            "price": rate,
            "volume_24h": 30377728.701265607,
            "market_cap": 2174289586.0,
            "percent_change_1h": -0.16,
            "percent_change_24h": -3.46,
            "percent_change_7d": 1.49,
        }
    return json.dumps({
        "data": {
            "id": 328,
            "name": "Monero",
            "symbol": base,
            "website_slug": "monero",
            "rank": 12,
            "circulating_supply": 16034593.0,
            "total_supply": 16034593.0,
            "max_supply": None,
            "quotes": quotes,
            "last_updated": 1528795188,
        },
        "metadata": {"timestamp": 1528794926, "error": None},
    })


def make_error_body(message="id not found"):
    return json.dumps({
        "data": None,
        "metadata": {"timestamp": 1525137187, "error": message},
    })


class FakeTransport(HttpTransport):
    """Records requests and completes them synchronously with a canned outcome."""

    def __init__(self, response=None, failure=None):
        self.response = response
        self.failure = failure
        self.requests = []

    def get(self, url, params, on_response, on_failure):
        self.requests.append((url, dict(params or {})))
        if self.failure is not None:
            on_failure(self.failure)
        else:
            on_response(self.response)


class DeferredTransport(HttpTransport):
    """Holds completion handlers until the test calls complete()."""

    def __init__(self):
        self.pending = []

    def get(self, url, params, on_response, on_failure):
        self.pending.append((on_response, on_failure))

    def complete(self, response):
        on_response, _ = self.pending.pop(0)
        on_response(response)


class InlineExecutor(Executor):
    """Executor that runs submitted work on the calling thread."""

    def submit(self, fn, *args, **kwargs):
        future = Future()
        try:
            future.set_result(fn(*args, **kwargs))
        except Exception as e:
            future.set_exception(e)
        return future


@pytest.fixture
def ok_response():
    def _make(base="XMR", quote="EUR", rate=1.56):
        return HttpResponse(200, make_ticker_body(base, quote, rate), "http://localhost/")
    return _make

# src/coinquote/adapters/http/transport.py
"""
HTTP Transport - Non-blocking GET with Completion Handlers

This module defines the transport capability the exchange client depends on:
"issue a GET and later invoke a completion handler with either a response or
a transport failure". The default implementation runs requests.Session.get on
a worker thread owned by the transport, so callers never block on the network.

Files that USE this module:
- coinquote.adapters.providers.coinmarketcap (issues ticker requests through HttpTransport)
- coinquote.app (owns the RequestsTransport lifetime)
- tests.test_transport (unit tests)

Files that this module USES:
- coinquote.config (settings for timeout and worker count)
"""
from __future__ import annotations

import json
import logging
from abc import ABC, abstractmethod
from concurrent.futures import Executor, ThreadPoolExecutor
from dataclasses import dataclass, field
from threading import Lock
from typing import Any, Callable, Mapping, Optional

import requests

from coinquote.config import settings

log = logging.getLogger(__name__)

ResponseHandler = Callable[["HttpResponse"], None]
FailureHandler = Callable[[Exception], None]


@dataclass(frozen=True)
class HttpResponse:
    """Status and body of a completed HTTP exchange."""
    status_code: int
    text: str
    url: str = ""
    # requests' own decoder when the response came from a requests.Response
    decoder: Optional[Callable[[], Any]] = field(default=None, compare=False, repr=False)

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300

    def json(self) -> Any:
        """Decode the body; raises ValueError on malformed JSON."""
        if self.decoder is not None:
            return self.decoder()
        return json.loads(self.text)


class HttpTransport(ABC):
    @abstractmethod
    def get(
        self,
        url: str,
        params: Optional[Mapping[str, str]],
        on_response: ResponseHandler,
        on_failure: FailureHandler,
    ) -> None:
        """
        Issue a GET request without blocking the caller.

        Exactly one of ``on_response`` (any status code) or ``on_failure``
        (no response received: connection error, timeout, TLS) is invoked
        once the request completes.
        """
        raise NotImplementedError


class RequestsTransport(HttpTransport):
    """
    HttpTransport backed by a requests.Session and a worker pool.

    The executor is created on first use unless one is injected; an injected
    executor is not shut down by close().
    """

    def __init__(
        self,
        session: Optional[requests.Session] = None,
        timeout: Optional[float] = None,
        executor: Optional[Executor] = None,
        max_workers: Optional[int] = None,
    ):
        """
        Initialize the transport.
        
        Args:
            session: Optional requests session (defaults to a new Session)
            timeout: Optional HTTP timeout in seconds (defaults to settings.http_timeout_seconds)
            executor: Optional executor that runs the blocking requests
            max_workers: Worker count for the lazily created pool (defaults to settings.http_max_workers)
        """
        self.session = session or requests.Session()
        self.timeout = timeout or settings.http_timeout_seconds
        self.max_workers = max_workers or settings.http_max_workers
        self._executor = executor
        self._owns_executor = executor is None
        self._lock = Lock()
        self._closed = False

    def _get_executor(self) -> Executor:
        with self._lock:
            if self._closed:
                raise RuntimeError("RequestsTransport is closed")
            if self._executor is None:
                self._executor = ThreadPoolExecutor(
                    max_workers=self.max_workers, thread_name_prefix="coinquote-http"
                )
            return self._executor

    def get(self, url, params, on_response, on_failure) -> None:
        executor = self._get_executor()
        executor.submit(self._perform, url, params, on_response, on_failure)

    def _perform(
        self,
        url: str,
        params: Optional[Mapping[str, str]],
        on_response: ResponseHandler,
        on_failure: FailureHandler,
    ) -> None:
        log.debug("GET %s params=%s", url, params)
        try:
            resp = self.session.get(url, params=params, timeout=self.timeout)
            response = HttpResponse(resp.status_code, resp.text, resp.url or url, decoder=resp.json)
        except requests.exceptions.Timeout as e:
            log.warning("GET %s timed out after %ss", url, self.timeout)
            self._dispatch(on_failure, e)
            return
        except requests.exceptions.RequestException as e:
            log.warning("GET %s failed (network/connection error): %s", url, e)
            self._dispatch(on_failure, e)
            return
        except Exception as e:
            log.error("GET %s failed unexpectedly: %s (type: %s)", url, e, type(e).__name__)
            self._dispatch(on_failure, e)
            return

        log.debug("GET %s -> HTTP %d", response.url, response.status_code)
        self._dispatch(on_response, response)

    @staticmethod
    def _dispatch(handler: Callable[[Any], None], arg: Any) -> None:
        # Completion handlers run on a pool thread; nobody above us can catch.
        try:
            handler(arg)
        except Exception:
            log.exception("Completion handler %r raised", handler)

    def close(self) -> None:
        """Shut down the owned worker pool and the session."""
        with self._lock:
            self._closed = True
            executor, self._executor = self._executor, None
        if executor is not None and self._owns_executor:
            executor.shutdown(wait=True)
        self.session.close()

    def __enter__(self) -> RequestsTransport:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

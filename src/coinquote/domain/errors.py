# src/coinquote/domain/errors.py
"""
Domain Errors - Exchange Rate Lookup Failures

This module defines the exceptions delivered through the error channel of
an exchange rate query. Every ExchangeError carries a ``code`` (always set)
and an optional ``error_msg`` that is present only when the upstream payload
reported an explicit error.

The subclasses tag where the failure came from:
- StatusError: the service answered with a failing HTTP status
- ServiceError: HTTP succeeded but the body reported an error (code 200)
- MalformedResponseError: the body did not have the expected shape

Files that USE this module:
- coinquote.domain.models (InvalidRateError)
- coinquote.adapters.providers.coinmarketcap (raises and delivers these errors)
- coinquote.app (reports code/message on failure)
- tests.* (assert on code and error_msg)

Files that this module USES:
- None (pure domain layer)
"""
from typing import Optional

# HTTP status reported for failures found inside a successful response
SERVICE_ERROR_CODE = 200


class ExchangeError(Exception):
    """Base exception for a failed exchange rate lookup."""

    def __init__(self, code: int, error_msg: Optional[str] = None, detail: Optional[str] = None):
        self.code = code
        self.error_msg = error_msg
        super().__init__(detail or error_msg or f"exchange request failed with code {code}")

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, error_msg={self.error_msg!r})"


# Name used by existing callers of the wallet exchange API
ExchangeException = ExchangeError


class StatusError(ExchangeError):
    """Raised when the service responds with a non-success HTTP status."""

    def __init__(self, code: int):
        super().__init__(code, detail=f"exchange service returned HTTP {code}")


class ServiceError(ExchangeError):
    """Raised when a 2xx response body carries a service-reported error (e.g. unknown symbol)."""

    def __init__(self, message: str):
        super().__init__(SERVICE_ERROR_CODE, error_msg=message)


class MalformedResponseError(ExchangeError):
    """Raised when the response body does not match the expected ticker shape."""

    def __init__(self, detail: str, code: int = SERVICE_ERROR_CODE):
        super().__init__(code, detail=f"malformed exchange response: {detail}")


class InvalidRateError(ValueError):
    """Raised when a rate value is invalid (e.g., negative, zero or not finite)."""
    pass

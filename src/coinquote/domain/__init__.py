# src/coinquote/domain/__init__.py
"""
Domain Layer - Pure Business Objects

This package contains the rate value object and the error taxonomy.
No dependencies on infrastructure or external systems.
"""

from coinquote.domain.models import DEFAULT_SERVICE_NAME, ExchangeRate
from coinquote.domain.errors import (
    SERVICE_ERROR_CODE,
    ExchangeError,
    ExchangeException,
    InvalidRateError,
    MalformedResponseError,
    ServiceError,
    StatusError,
)

__all__ = [
    "ExchangeRate",
    "DEFAULT_SERVICE_NAME",
    "ExchangeError",
    "ExchangeException",
    "StatusError",
    "ServiceError",
    "MalformedResponseError",
    "InvalidRateError",
    "SERVICE_ERROR_CODE",
]

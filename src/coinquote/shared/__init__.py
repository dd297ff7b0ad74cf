# src/coinquote/shared/__init__.py
"""
Shared Utilities - Cross-cutting Concerns

This package contains shared utilities used across all layers:
- Validation
- Logging configuration
"""

from coinquote.shared.validators import (
    normalize_symbol,
    validate_base_url,
    validate_currency_symbol,
)
from coinquote.shared.logging_conf import setup_logging

__all__ = [
    "validate_currency_symbol",
    "validate_base_url",
    "normalize_symbol",
    "setup_logging",
]

# src/coinquote/domain/models.py
"""
Domain Models - Exchange Rate Value Object

This module contains the immutable result of a successful exchange rate
lookup: the price of one unit of a base currency expressed in a quote currency.

Files that USE this module:
- coinquote.adapters.providers.* (providers build ExchangeRate from responses)
- coinquote.app (prints the resolved rate)
- tests.* (tests compare delivered rates)

Files that this module USES:
- coinquote.domain.errors (InvalidRateError for rejected values)
"""

from __future__ import annotations  # Enable postponed evaluation of annotations

import math
from dataclasses import dataclass, field

from coinquote.domain.errors import InvalidRateError

DEFAULT_SERVICE_NAME = "coinmarketcap.com"


def _normalize(symbol: str, role: str) -> str:
    if not isinstance(symbol, str) or not symbol.strip():
        raise ValueError(f"{role} currency must be a non-empty symbol, got {symbol!r}")
    return symbol.strip().upper()


@dataclass(frozen=True)
class ExchangeRate:
    """
    Price of one unit of ``base_currency`` expressed in ``quote_currency``.

    Symbols are stripped and upper-cased on construction. The rate must be a
    finite number greater than zero.

    Attributes:
        base_currency: Asset being priced (e.g. "XMR")
        quote_currency: Currency the price is expressed in (e.g. "EUR")
        rate: Price of one base unit in quote units
        service_name: Service that produced the rate
    """
    base_currency: str
    quote_currency: str
    rate: float
    service_name: str = field(default=DEFAULT_SERVICE_NAME, compare=False)

    def __post_init__(self) -> None:
        # frozen dataclass: normalized values are written through object.__setattr__
        object.__setattr__(self, "base_currency", _normalize(self.base_currency, "base"))
        object.__setattr__(self, "quote_currency", _normalize(self.quote_currency, "quote"))
        try:
            rate = float(self.rate)
        except (TypeError, ValueError) as e:
            raise InvalidRateError(f"rate must be numeric, got {self.rate!r}") from e
        if isinstance(self.rate, bool) or not math.isfinite(rate) or rate <= 0:
            raise InvalidRateError(f"rate must be a positive finite number, got {self.rate!r}")
        object.__setattr__(self, "rate", rate)

    def inverse(self) -> ExchangeRate:
        """Return the same rate quoted the other way round (quote priced in base)."""
        return ExchangeRate(
            base_currency=self.quote_currency,
            quote_currency=self.base_currency,
            rate=1.0 / self.rate,
            service_name=self.service_name,
        )

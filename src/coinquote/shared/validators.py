# src/coinquote/shared/validators.py
"""
Input Validation Utilities - Symbol and URL Validation

This module validates currency symbols and service endpoints so that
configuration mistakes are caught when settings load instead of turning
into confusing service errors later.

Files that USE this module:
- coinquote.config.settings (uses validation functions in Settings field validators)
- coinquote.adapters.providers.coinmarketcap (normalize_symbol for pair matching)

Files that this module USES:
- None (pure utility functions)
"""
import re
import urllib.parse


def validate_currency_symbol(symbol: str) -> bool:
    """
    Validate a ticker or currency code format.
    
    Args:
        symbol: Symbol to validate (e.g. "XMR", "EUR", "usd")
        
    Returns:
        True if valid, False otherwise
    """
    if not symbol:
        return False
    
    # Tickers are short alphanumerics: XMR, EUR, USDT, 1INCH
    return bool(re.match(r'^[A-Za-z0-9]{2,10}$', symbol.strip()))


def validate_base_url(url: str) -> bool:
    """
    Validate a service endpoint URL.
    
    Args:
        url: URL to validate
        
    Returns:
        True if the URL is http(s) and has a host, False otherwise
    """
    if not url:
        return False
    
    parsed = urllib.parse.urlparse(url)
    return parsed.scheme in ("http", "https") and bool(parsed.netloc)


def normalize_symbol(symbol: str) -> str:
    """Strip whitespace and upper-case a symbol for comparisons."""
    return symbol.strip().upper()

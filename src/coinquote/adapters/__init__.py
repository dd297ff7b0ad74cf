# src/coinquote/adapters/__init__.py
"""
Adapters Layer - External System Integration

This package contains adapters for external systems:
- HTTP transport (requests-based)
- Exchange rate providers (CoinMarketCap ticker API)
"""

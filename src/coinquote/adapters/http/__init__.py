# src/coinquote/adapters/http/__init__.py
"""
HTTP Adapters - Transport for Outbound Requests

The exchange client talks to the network only through HttpTransport.
"""

from coinquote.adapters.http.transport import HttpResponse, HttpTransport, RequestsTransport

__all__ = [
    "HttpResponse",
    "HttpTransport",
    "RequestsTransport",
]

"""
Airbrake Client - HTTP Transport
================================
Request handler abstractions and the default requests-based handler.
"""

from .base import BaseHttpRequestHandler, BaseHttpRequest, BaseHttpResponse
from .requests_handler import (
    HttpRequestHandler,
    RequestsHttpRequest,
    RequestsHttpResponse,
    build_notices_url,
    build_proxies,
)

__all__ = [
    "BaseHttpRequestHandler",
    "BaseHttpRequest",
    "BaseHttpResponse",
    "HttpRequestHandler",
    "RequestsHttpRequest",
    "RequestsHttpResponse",
    "build_notices_url",
    "build_proxies",
]

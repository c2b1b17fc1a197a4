"""Strand: immutable middleware chains for async request handlers."""

from .chain import Chain, Constructor, Handler, MiddlewareCallable, from_middleware
from .requests import Request
from .responses import JSONResponse, PlainTextResponse, Response, coerce_response
from .testing import TestClient

__all__ = [
    "Chain",
    "Constructor",
    "Handler",
    "JSONResponse",
    "MiddlewareCallable",
    "PlainTextResponse",
    "Request",
    "Response",
    "TestClient",
    "coerce_response",
    "from_middleware",
]

"""Request context passed through a chain."""

from __future__ import annotations

from typing import Any, Mapping


class Request:
    """Minimal per-request context.

    Transports build one of these per incoming request. The chain never reads
    it; decorators use ``state`` to hand values to the handlers they wrap.
    """

    __slots__ = ("headers", "method", "path", "state")

    def __init__(self, *, method: str, path: str, headers: Mapping[str, str] | None = None) -> None:
        self.method = method.upper()
        self.path = path
        self.headers = {name.lower(): value for name, value in (headers or {}).items()}
        self.state: dict[str, Any] = {}

    def header(self, name: str, default: str | None = None) -> str | None:
        return self.headers.get(name.lower(), default)

    def __repr__(self) -> str:
        return f"Request({self.method} {self.path})"

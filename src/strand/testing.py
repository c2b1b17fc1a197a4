"""In-process driver for composed handlers."""

from __future__ import annotations

from typing import Mapping

from .chain import Handler
from .requests import Request
from .responses import Response


class TestClient:
    """Feed synthetic requests to a finalized chain and return its responses."""

    __test__ = False

    def __init__(self, handler: Handler) -> None:
        self.handler = handler

    async def send(self, request: Request) -> Response:
        return await self.handler(request)

    async def request(self, method: str, path: str, *, headers: Mapping[str, str] | None = None) -> Response:
        return await self.send(Request(method=method, path=path, headers=headers))

    async def get(self, path: str, *, headers: Mapping[str, str] | None = None) -> Response:
        return await self.request("GET", path, headers=headers)

"""Compose a small middleware chain and drive it in-process."""

from __future__ import annotations

import asyncio
import logging

from strand import Chain, PlainTextResponse, Request, Response, TestClient, from_middleware


def timing(handler):
    async def timed(request: Request) -> Response:
        loop = asyncio.get_running_loop()
        started = loop.time()
        response = await handler(request)
        elapsed = loop.time() - started
        return response.with_headers((("x-elapsed", f"{elapsed:.6f}"),))

    return timed


async def require_token(request: Request, handler) -> Response:
    if request.header("authorization") != "Bearer demo":
        return PlainTextResponse("missing token", status=401)
    request.state["user"] = "demo"
    return await handler(request)


def hello(request: Request) -> str:
    return f"hello {request.state['user']}"


base = Chain(timing)
protected = base.append(from_middleware(require_token))


async def main() -> None:
    client = TestClient(protected.then_func(hello))
    denied = await client.get("/")
    allowed = await client.get("/", headers={"Authorization": "Bearer demo"})
    print(denied.status, denied.body.decode())
    print(allowed.status, allowed.body.decode(), allowed.header("x-elapsed"))


if __name__ == "__main__":
    logging.basicConfig(level=logging.DEBUG)
    asyncio.run(main())

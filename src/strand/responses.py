"""Response value produced by handlers."""

from __future__ import annotations

from http import HTTPStatus
from typing import Any, Iterable

import msgspec
from msgspec import structs

Headers = tuple[tuple[str, str], ...]

_TEXT = "text/plain; charset=utf-8"
_JSON = "application/json"
_BINARY = "application/octet-stream"


class Response(msgspec.Struct, frozen=True):
    """Immutable response; decorators derive changed copies instead of mutating."""

    status: int = int(HTTPStatus.OK)
    headers: Headers = ()
    body: bytes = b""

    def with_headers(self, headers: Iterable[tuple[str, str]]) -> "Response":
        return structs.replace(self, headers=self.headers + tuple(headers))

    def with_body(self, body: bytes) -> "Response":
        return structs.replace(self, body=body)

    def header(self, name: str, default: str | None = None) -> str | None:
        wanted = name.lower()
        return next((value for key, value in self.headers if key.lower() == wanted), default)


def _typed(content_type: str, body: bytes, status: int, extra: Iterable[tuple[str, str]] | None) -> Response:
    return Response(status=int(status), headers=(("content-type", content_type), *(extra or ())), body=body)


def PlainTextResponse(
    text: str,
    *,
    status: int = int(HTTPStatus.OK),
    headers: Iterable[tuple[str, str]] | None = None,
) -> Response:
    return _typed(_TEXT, text.encode("utf-8"), status, headers)


def JSONResponse(
    data: Any,
    *,
    status: int = int(HTTPStatus.OK),
    headers: Iterable[tuple[str, str]] | None = None,
) -> Response:
    """Encode ``data`` with :mod:`msgspec`."""

    return _typed(_JSON, msgspec.json.encode(data), status, headers)


def coerce_response(result: Any) -> Response:
    """Map the return value of a plain function onto a :class:`Response`.

    ``None`` becomes 204, ``str`` plain text, bytes-like an octet stream and
    anything else JSON.
    """

    if isinstance(result, Response):
        return result
    if result is None:
        return Response(status=int(HTTPStatus.NO_CONTENT))
    if isinstance(result, str):
        return PlainTextResponse(result)
    if isinstance(result, (bytes, bytearray, memoryview)):
        return _typed(_BINARY, bytes(result), HTTPStatus.OK, None)
    return JSONResponse(result)


__all__ = ["Headers", "JSONResponse", "PlainTextResponse", "Response", "coerce_response"]

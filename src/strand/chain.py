"""Immutable middleware chains."""

from __future__ import annotations

import inspect
import logging
from typing import Any, Awaitable, Callable, Iterator

from .requests import Request
from .responses import Response, coerce_response

logger = logging.getLogger(__name__)

Handler = Callable[[Request], Awaitable[Response]]
Constructor = Callable[[Handler], Handler]
MiddlewareCallable = Callable[[Request, Handler], Awaitable[Response]]


class Chain:
    """Ordered, immutable sequence of handler constructors.

    ``Chain(a, b, c).then(endpoint)`` is equivalent to ``a(b(c(endpoint)))``:
    the first constructor wraps outermost and sees the request first. Deriving
    a chain with :meth:`append` or :meth:`extend` never touches the receiver.
    """

    __slots__ = ("_constructors",)

    def __init__(self, *constructors: Constructor) -> None:
        self._constructors: tuple[Constructor, ...] = tuple(constructors)

    @property
    def constructors(self) -> tuple[Constructor, ...]:
        return self._constructors

    def then(self, handler: Handler) -> Handler:
        """Wrap ``handler`` with every constructor, last to first.

        An empty chain returns ``handler`` itself.
        """

        logger.debug("finalizing chain of %d constructor(s) around %r", len(self._constructors), handler)
        for constructor in reversed(self._constructors):
            handler = constructor(handler)
        return handler

    def then_func(self, func: Callable[[Request], Any]) -> Handler:
        """Finalize the chain around a plain function.

        ``func`` may be sync or async; its return value is coerced into a
        :class:`~strand.responses.Response`.
        """

        return self.then(_FunctionHandler(func))

    def append(self, *constructors: Constructor) -> "Chain":
        """Return a new chain with ``constructors`` added innermost."""

        return Chain(*self._constructors, *constructors)

    def extend(self, other: "Chain") -> "Chain":
        """Return a new chain running ``self`` then ``other``."""

        return Chain(*self._constructors, *other._constructors)

    def __add__(self, other: object) -> "Chain":
        if not isinstance(other, Chain):
            return NotImplemented
        return self.extend(other)

    def __len__(self) -> int:
        return len(self._constructors)

    def __iter__(self) -> Iterator[Constructor]:
        return iter(self._constructors)

    def __repr__(self) -> str:
        names = ", ".join(getattr(c, "__qualname__", repr(c)) for c in self._constructors)
        return f"Chain({names})"


def from_middleware(middleware: MiddlewareCallable) -> Constructor:
    """Adapt a ``(request, handler)`` middleware into a chain constructor."""

    def constructor(handler: Handler) -> Handler:
        return _BoundMiddleware(middleware, handler)

    constructor.__qualname__ = getattr(middleware, "__qualname__", type(middleware).__qualname__)
    return constructor


class _BoundMiddleware:
    __slots__ = ("_handler", "_middleware")

    def __init__(self, middleware: MiddlewareCallable, handler: Handler) -> None:
        self._middleware = middleware
        self._handler = handler

    async def __call__(self, request: Request) -> Response:
        return await self._middleware(request, self._handler)


class _FunctionHandler:
    __slots__ = ("_func",)

    def __init__(self, func: Callable[[Request], Any]) -> None:
        self._func = func

    async def __call__(self, request: Request) -> Response:
        result = self._func(request)
        if inspect.isawaitable(result):
            result = await result
        return coerce_response(result)


__all__ = [
    "Chain",
    "Constructor",
    "Handler",
    "MiddlewareCallable",
    "from_middleware",
]

"""Handler contract for generated API handlers.

Every generated handler class derives from HandlerBase and is checked with
assert_handler when server.handler_gen is imported, so a class that stops
being a WSGI callable fails at import instead of on the first request.
"""

from __future__ import annotations

import json
from collections.abc import Callable, Iterable
from typing import Any, Protocol, runtime_checkable

StartResponse = Callable[..., Any]


@runtime_checkable
class HTTPHandler(Protocol):
    """A WSGI application serving one API method."""

    def __call__(
        self, environ: dict[str, Any], start_response: StartResponse
    ) -> Iterable[bytes]: ...


class HandlerBase:
    """Default handler: answers 501 until a subclass overrides __call__."""

    def __call__(
        self, environ: dict[str, Any], start_response: StartResponse
    ) -> Iterable[bytes]:
        name = type(self).__name__
        body = json.dumps({
            "error": {
                "code": 501,
                "message": f"{name} is not implemented",
                "status": "UNIMPLEMENTED",
            }
        }).encode()
        start_response("501 Not Implemented", [
            ("Content-Type", "application/json; charset=UTF-8"),
            ("Content-Length", str(len(body))),
        ])
        return [body]


def assert_handler(cls: type) -> type:
    """Raise TypeError unless cls is a class whose instances are HTTPHandlers."""
    if not isinstance(cls, type) or not issubclass(cls, HTTPHandler):
        raise TypeError(f"{cls!r} does not implement HTTPHandler")
    return cls

"""A small WSGI router that answers raised problems with problem details."""

from __future__ import annotations

import functools
import json
from collections.abc import Callable, Iterable
from http import HTTPStatus
from typing import Any

from .errors import ApiProblemDetails
from .problem import ProblemResponse

Handler = Callable[[dict[str, Any]], Any]


def handle_errors(handler: Handler) -> Handler:
    """Wrap a handler so a raised ApiProblemDetails comes back as its response."""

    @functools.wraps(handler)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return handler(*args, **kwargs)
        except ApiProblemDetails as error:
            return error.as_response()

    return wrapper


def _status_line(status: int) -> str:
    try:
        phrase = HTTPStatus(status).phrase
    except ValueError:
        phrase = "Unknown"
    return f"{status} {phrase}"


def _encode(result: Any) -> tuple[int, str | None, bytes]:
    if isinstance(result, ProblemResponse):
        return result.status, result.content_type, result.body
    if result is None:
        return 200, None, b""
    if isinstance(result, str):
        return 200, "text/plain; charset=utf-8", result.encode()
    if isinstance(result, bytes):
        return 200, "application/octet-stream", result
    return 200, "application/json; charset=utf-8", json.dumps(result).encode()


class Route:
    """Maps exact paths to handlers taking the WSGI environ."""

    def __init__(self) -> None:
        self._handlers: dict[str, Handler] = {}

    def at(self, path: str, handler: Handler) -> Route:
        """Serve ``handler`` at ``path``; returns the route for chaining."""
        if not path.startswith("/"):
            raise ValueError(f"path must start with '/': {path!r}")
        self._handlers[path] = handle_errors(handler)
        return self

    def __call__(
        self, environ: dict[str, Any], start_response: Callable[..., Any]
    ) -> Iterable[bytes]:
        handler = self._handlers.get(environ.get("PATH_INFO") or "/")
        if handler is None:
            status, content_type, body = 404, None, b""
        else:
            status, content_type, body = _encode(handler(environ))
        headers = [("Content-Length", str(len(body)))]
        if content_type is not None:
            headers.insert(0, ("Content-Type", content_type))
        start_response(_status_line(status), headers)
        return [body]
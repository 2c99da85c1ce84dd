"""A small service with one endpoint and its problem details documented."""

from __future__ import annotations

import argparse
from typing import Any
from wsgiref.simple_server import make_server

from .errors import ApiProblemDetails, problem
from .wsgi import Route

TITLE = "Hello World"
VERSION = "1.0"
SERVER_URL = "http://localhost:3000"


class IndexError_(ApiProblemDetails):
    """Errors the index endpoint can answer with."""


@problem(
    422,
    title="The object passed failed to validate.",
    ty="https://example.net/validation-error",
)
class InvalidValue(IndexError_):
    """The provided value was invalid"""

    def __str__(self) -> str:
        return "The object passed failed to validate."


@problem(500)
class InternalServerError(IndexError_):
    """Some unknown error occured"""

    def __str__(self) -> str:
        return "Something really bad happened"


def _index(environ: dict[str, Any]) -> str:
    return "Hello World"


def openapi_document() -> dict[str, Any]:
    """The OpenAPI description of the service."""
    responses: dict[str, Any] = {
        "200": {
            "description": "",
            "content": {"text/plain; charset=utf-8": {"schema": {"type": "string"}}},
        }
    }
    for meta in IndexError_.meta():
        responses[str(meta["status"])] = {
            "description": meta["description"],
            "content": meta["content"],
        }
    return {
        "openapi": "3.0.0",
        "info": {"title": TITLE, "version": VERSION},
        "servers": [{"url": SERVER_URL}],
        "paths": {"/": {"get": {"responses": responses}}},
    }


def create_app() -> Route:
    """The WSGI application: the endpoint and its OpenAPI document."""
    return Route().at("/", _index).at("/openapi.json", lambda environ: openapi_document())


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Serve the example API.")
    parser.add_argument("--host", default="127.0.0.1")
    parser.add_argument("--port", type=int, default=8080)
    args = parser.parse_args(argv)
    with make_server(args.host, args.port, create_app()) as server:
        server.serve_forever()
    return 0
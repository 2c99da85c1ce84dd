"""Problem details specifications, response bodies and response metadata."""

from __future__ import annotations

import inspect
import json
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any

PROBLEM_CONTENT_TYPE = "application/problem+json"
ABOUT_BLANK = "about:blank"

_STATUS_ERROR = (
    "Invalid status code, it must be greater or equal to 100 and less than 1000."
)


def _string_schema(value: str) -> dict[str, Any]:
    return {"type": "string", "enum": [value]}


def _number_schema(value: int) -> dict[str, Any]:
    return {"type": "number", "enum": [value]}


@dataclass(frozen=True)
class ProblemSpec:
    """The fixed members of one kind of problem: status, title, type and detail."""

    status: int
    title: str | None = None
    ty: str = ABOUT_BLANK
    detail: str | None = None

    def __post_init__(self) -> None:
        if isinstance(self.status, bool) or not isinstance(self.status, int):
            raise TypeError(f"status must be an int, got {type(self.status).__name__}")
        if not 100 <= self.status < 1000:
            raise ValueError(_STATUS_ERROR)

    def _members(self) -> Iterator[tuple[str, Any]]:
        yield "type", self.ty
        yield "status", self.status
        if self.title is not None:
            yield "title", self.title
        if self.detail is not None:
            yield "detail", self.detail

    def schema(self) -> dict[str, Any]:
        """Inline schema whose properties pin every member to its one value."""
        properties = {
            name: _number_schema(value) if name == "status" else _string_schema(value)
            for name, value in self._members()
        }
        return {"properties": properties}

    def body(self) -> dict[str, Any]:
        """The JSON object sent for this problem."""
        return dict(self._members())

    def response_meta(self, description: str | None) -> dict[str, Any]:
        """Description of the response this problem produces."""
        return {
            "description": description or "",
            "status": self.status,
            "content": {PROBLEM_CONTENT_TYPE: {"schema": self.schema()}},
            "headers": {},
        }


@dataclass(frozen=True)
class ProblemResponse:
    """An encoded problem details response."""

    status: int
    body: bytes
    content_type: str = PROBLEM_CONTENT_TYPE

    @property
    def headers(self) -> list[tuple[str, str]]:
        return [
            ("Content-Type", self.content_type),
            ("Content-Length", str(len(self.body))),
        ]

    def json(self) -> Any:
        """Decode the body."""
        return json.loads(self.body)


def description_from_doc(doc: str | None) -> str | None:
    """Turn a docstring into a response description: lines stripped, blanks dropped at the ends."""
    if not doc:
        return None
    text = "\n".join(line.strip() for line in inspect.cleandoc(doc).splitlines())
    return text or None
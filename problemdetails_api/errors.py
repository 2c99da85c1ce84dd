"""Exception families whose members answer with problem details responses."""

from __future__ import annotations

import json
from collections.abc import Callable
from typing import Any, ClassVar, TypeVar

from .problem import (
    ABOUT_BLANK,
    ProblemResponse,
    ProblemSpec,
    description_from_doc,
)

_E = TypeVar("_E", bound=type)


class ApiProblemDetails(Exception):
    """Base of a problem family.

    A direct subclass defines the family; its subclasses are the variants,
    each given its problem members with :func:`problem`.
    """

    problem_spec: ClassVar[ProblemSpec | None] = None
    _variants: ClassVar[list[type[ApiProblemDetails]]]

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        if ApiProblemDetails in cls.__bases__:
            cls._variants = []
        else:
            cls._family()._variants.append(cls)

    @classmethod
    def _family(cls) -> type[ApiProblemDetails]:
        for klass in cls.__mro__:
            if ApiProblemDetails in klass.__bases__:
                return klass
        raise TypeError("ApiProblemDetails must be subclassed to define a problem family")

    @classmethod
    def _is_family(cls) -> bool:
        return ApiProblemDetails in cls.__bases__

    def as_response(self) -> ProblemResponse:
        """Encode this error as a problem details response."""
        spec = type(self).problem_spec
        if spec is None:
            raise TypeError(
                f"{type(self).__name__} has no problem specification; "
                "decorate it with @problem(status=...)"
            )
        return ProblemResponse(spec.status, json.dumps(spec.body()).encode())

    @classmethod
    def meta(cls) -> list[dict[str, Any]]:
        """Response descriptions for every variant of the family, in definition order."""
        family = cls._family()
        responses = []
        for variant in family._variants:
            spec = variant.problem_spec
            if spec is None:
                raise TypeError(
                    f"{variant.__name__} has no problem specification; "
                    "decorate it with @problem(status=...)"
                )
            responses.append(spec.response_meta(description_from_doc(variant.__doc__)))
        return responses


def problem(
    status: int,
    title: str | None = None,
    ty: str | None = None,
    detail: str | None = None,
) -> Callable[[_E], _E]:
    """Class decorator giving a variant its status, title, type and detail."""
    spec = ProblemSpec(status, title, ABOUT_BLANK if ty is None else ty, detail)

    def decorate(cls: _E) -> _E:
        if (
            not isinstance(cls, type)
            or not issubclass(cls, ApiProblemDetails)
            or cls is ApiProblemDetails
            or cls._is_family()
        ):
            raise TypeError("problem can only be applied to a variant of an ApiProblemDetails family")
        cls.problem_spec = spec
        return cls

    return decorate
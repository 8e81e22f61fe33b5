"""Generic request descriptor and the endpoint contract that produces it."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, TypeVar, runtime_checkable

from gdax_client.rest.pagination import Pagination
from gdax_client.rest.route import Route

ResponseT = TypeVar("ResponseT")
ResponseT_co = TypeVar("ResponseT_co", covariant=True)


@dataclass(frozen=True, slots=True)
class RestRequest:
    """Method-agnostic description of one HTTP call, built fresh per request."""

    route: Route
    http_method: str = "GET"
    body: str = ""
    pagination: Pagination | None = None


@runtime_checkable
class EndPointRequest(Protocol[ResponseT_co]):
    """Interface every endpoint value satisfies.

    ``response_type`` is the type the response body decodes into (a pydantic
    model, ``list[Model]`` or a parametrized generic model). ``create_request``
    must be pure: the same endpoint value always yields an equal descriptor.
    """

    @property
    def response_type(self) -> type[ResponseT_co]:
        ...

    def create_request(self) -> RestRequest:
        ...

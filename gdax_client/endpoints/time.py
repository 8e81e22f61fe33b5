"""Endpoints under the "Market Data / Time" section of the API."""

from dataclasses import dataclass
from typing import ClassVar

from gdax_client.rest.request import RestRequest
from gdax_client.rest.route import Route
from gdax_client.schemas.time import Time


@dataclass(frozen=True, slots=True)
class GetTime:
    """Current exchange time, useful to measure local clock drift."""

    response_type: ClassVar[type[Time]] = Time

    def create_request(self) -> RestRequest:
        return RestRequest(route=Route().add_segment("time"))

"""Endpoints under the "Market Data / Currencies" section of the API."""

from dataclasses import dataclass
from typing import Any, ClassVar

from gdax_client.rest.request import RestRequest
from gdax_client.rest.route import Route
from gdax_client.schemas.currency import Currency


@dataclass(frozen=True, slots=True)
class GetCurrencies:
    response_type: ClassVar[Any] = list[Currency]

    def create_request(self) -> RestRequest:
        return RestRequest(route=Route().add_segment("currencies"))

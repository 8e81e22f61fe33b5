"""Endpoints under the "Market Data / Products" section of the API.

Every endpoint here is a frozen value constructed from its path parameters.
Routes all start with ``/products``; product-scoped endpoints append the
product id (e.g. ``BTC-USD``) and a resource name.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Any, ClassVar

from gdax_client.rest.pagination import Pagination
from gdax_client.rest.request import RestRequest
from gdax_client.rest.route import Route
from gdax_client.schemas.order_book import OrderBook, PriceLevel
from gdax_client.schemas.product import Product, Stats, Ticker, Trade


class Level(IntEnum):
    """Order book aggregation levels.

    Levels 1 and 2 aggregate orders per price, reporting the summed size and
    the order count. Level 3 lists individual orders with their ids; the
    exchange asks that it only be used to bootstrap a websocket-maintained book.
    """

    BEST = 1
    TOP_50 = 2
    FULL = 3


def _product_route(product_id: str, resource: str) -> Route:
    return Route().add_segment("products").add_segment(product_id).add_segment(resource)


@dataclass(frozen=True, slots=True)
class GetProducts:
    response_type: ClassVar[Any] = list[Product]

    def create_request(self) -> RestRequest:
        return RestRequest(route=Route().add_segment("products"))


@dataclass(frozen=True, slots=True)
class GetProductTicker:
    """Last trade, best bid/ask and 24h volume for one product."""

    product_id: str

    response_type: ClassVar[type[Ticker]] = Ticker

    def create_request(self) -> RestRequest:
        return RestRequest(route=_product_route(self.product_id, "ticker"))


@dataclass(frozen=True, slots=True)
class GetProductOrderBook:
    product_id: str
    level: Level = Level.BEST

    response_type: ClassVar[Any] = OrderBook[PriceLevel]

    def create_request(self) -> RestRequest:
        route = _product_route(self.product_id, "book").add_attribute_value("level", int(self.level))
        return RestRequest(route=route)


@dataclass(frozen=True, slots=True)
class GetTrades:
    """Latest trades for a product, newest first.

    Pass ``Pagination(After(trade_id))`` to page towards older trades.
    """

    product_id: str
    pagination: Pagination | None = None

    response_type: ClassVar[Any] = list[Trade]

    def create_request(self) -> RestRequest:
        return RestRequest(route=_product_route(self.product_id, "trades"), pagination=self.pagination)


@dataclass(frozen=True, slots=True)
class Get24hrStats:
    product_id: str

    response_type: ClassVar[type[Stats]] = Stats

    def create_request(self) -> RestRequest:
        return RestRequest(route=_product_route(self.product_id, "stats"))

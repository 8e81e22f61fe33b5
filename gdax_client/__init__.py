"""Typed asyncio client for the GDAX public market-data REST API.

Two concepts cover the whole package:

- :class:`RESTClient` owns the HTTPS connection pool and executes requests;
- endpoint values (``GetTime``, ``GetProducts``, ``GetTrades`` ...) describe one
  API call each and declare the type their response decodes into.

Example::

    async with RESTClient.default() as client:
        ticker = await client.send_request(GetProductTicker("BTC-USD"))
"""

__version__ = "0.1.0"

from gdax_client.endpoints import (  # noqa: E402
    Get24hrStats,
    GetCurrencies,
    GetProductOrderBook,
    GetProducts,
    GetProductTicker,
    GetTime,
    GetTrades,
    Level,
)
from gdax_client.rest import (  # noqa: E402
    After,
    Before,
    ConnectorError,
    Cursor,
    DecodeError,
    EndPointRequest,
    GdaxError,
    Pagination,
    RESTClient,
    RestRequest,
    Route,
    TransportError,
    UriError,
)

__all__ = [
    "After",
    "Before",
    "ConnectorError",
    "Cursor",
    "DecodeError",
    "EndPointRequest",
    "GdaxError",
    "Get24hrStats",
    "GetCurrencies",
    "GetProductOrderBook",
    "GetProductTicker",
    "GetProducts",
    "GetTime",
    "GetTrades",
    "Level",
    "Pagination",
    "RESTClient",
    "RestRequest",
    "Route",
    "TransportError",
    "UriError",
    "__version__",
]

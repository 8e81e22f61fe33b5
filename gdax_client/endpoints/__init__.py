from gdax_client.endpoints.currencies import GetCurrencies
from gdax_client.endpoints.products import (
    Get24hrStats,
    GetProductOrderBook,
    GetProducts,
    GetProductTicker,
    GetTrades,
    Level,
)
from gdax_client.endpoints.time import GetTime

__all__ = [
    "Get24hrStats",
    "GetCurrencies",
    "GetProductOrderBook",
    "GetProductTicker",
    "GetProducts",
    "GetTime",
    "GetTrades",
    "Level",
]

from gdax_client.schemas.currency import Currency
from gdax_client.schemas.fields import OrderCount, OrderId, OrderInfo, StrFloat, parse_order_info, parse_str_float
from gdax_client.schemas.order_book import OrderBook, PriceLevel
from gdax_client.schemas.product import Product, Stats, Ticker, Trade
from gdax_client.schemas.time import Time

__all__ = [
    "Currency",
    "OrderBook",
    "OrderCount",
    "OrderId",
    "OrderInfo",
    "PriceLevel",
    "Product",
    "Stats",
    "StrFloat",
    "Ticker",
    "Time",
    "Trade",
    "parse_order_info",
    "parse_str_float",
]

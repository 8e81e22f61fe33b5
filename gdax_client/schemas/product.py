from datetime import datetime
from typing import Literal

from pydantic import BaseModel

from gdax_client.schemas.fields import StrFloat


class Product(BaseModel):
    model_config = {"frozen": True}

    id: str
    base_currency: str
    quote_currency: str
    base_min_size: StrFloat
    base_max_size: StrFloat
    quote_increment: StrFloat


class Ticker(BaseModel):
    model_config = {"frozen": True}

    trade_id: int
    price: StrFloat
    size: StrFloat
    bid: StrFloat
    ask: StrFloat
    volume: StrFloat
    time: datetime


class Trade(BaseModel):
    model_config = {"frozen": True}

    time: datetime
    trade_id: int
    price: StrFloat
    size: StrFloat
    side: Literal["buy", "sell"]  # maker order side


class Stats(BaseModel):
    """Rolling 24 hour statistics for a product; volume is in base currency."""

    model_config = {"frozen": True}

    open: StrFloat
    high: StrFloat
    low: StrFloat
    volume: StrFloat
    last: StrFloat | None = None
    volume_30day: StrFloat | None = None

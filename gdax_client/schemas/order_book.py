"""Order book snapshot models.

Each side of the book is a list of positional arrays
``[price, size, order_info]``; prices and sizes are numeric strings, and
``order_info`` is an aggregated order count for levels 1 and 2 or an order id
for level 3.
"""

from __future__ import annotations

from typing import Any, Generic, TypeVar

from pydantic import BaseModel, model_validator

from gdax_client.schemas.fields import OrderInfoField, StrFloat

LevelT = TypeVar("LevelT")


class PriceLevel(BaseModel):
    model_config = {"frozen": True}

    price: StrFloat
    size: StrFloat
    order_info: OrderInfoField

    @model_validator(mode="before")
    @classmethod
    def _from_positional_array(cls, data: Any) -> Any:
        if isinstance(data, (list, tuple)):
            if len(data) != 3:
                raise ValueError(f"price level must have 3 elements, got {len(data)}")
            price, size, order_info = data
            return {"price": price, "size": size, "order_info": order_info}
        return data


class OrderBook(BaseModel, Generic[LevelT]):
    model_config = {"frozen": True}

    sequence: int
    bids: list[LevelT]
    asks: list[LevelT]

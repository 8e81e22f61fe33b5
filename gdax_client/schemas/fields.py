"""Field-level decoders for the exchange's irregular JSON encodings.

Two rules are shared by the response models:

- numeric values that arrive as JSON strings (``"0.01000000"``) are parsed to
  ``float`` through :data:`StrFloat`;
- the third element of an order-book price level is either an order count
  (JSON integer) or an order identifier (UUID string), decoded into the
  :data:`OrderInfo` union by :func:`parse_order_info`.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from typing import Annotated, Any
from uuid import UUID

from pydantic import BeforeValidator, PlainValidator, ValidationInfo

from gdax_client.rest.errors import DecodeError

_DECIMAL_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


def parse_str_float(value: Any) -> float:
    """Parse a JSON string holding a base-10 number into a float."""
    if not isinstance(value, str):
        raise DecodeError(f"expected a numeric string, got {type(value).__name__}: {value!r}")
    if not _DECIMAL_RE.fullmatch(value):
        raise DecodeError(f"invalid float literal: {value!r}")
    result = float(value)
    if not math.isfinite(result):
        raise DecodeError(f"float literal out of range: {value!r}")
    return result


def _validate_str_float(value: Any, info: ValidationInfo) -> float:
    # Models built in Python code may pass numbers directly; JSON must use strings.
    if info.mode == "python" and isinstance(value, int | float) and not isinstance(value, bool):
        return float(value)
    return parse_str_float(value)


StrFloat = Annotated[float, BeforeValidator(_validate_str_float)]


@dataclass(frozen=True, slots=True)
class OrderCount:
    """Aggregated number of orders at a price level (levels 1 and 2)."""

    num_orders: int


@dataclass(frozen=True, slots=True)
class OrderId:
    """Identifier of the single order at a price level (level 3)."""

    order_id: UUID


OrderInfo = OrderCount | OrderId


def parse_order_info(value: Any) -> OrderInfo:
    # Integer first, UUID string second.
    if isinstance(value, OrderCount | OrderId):
        return value
    if isinstance(value, int) and not isinstance(value, bool):
        return OrderCount(value)
    if not isinstance(value, str):
        raise DecodeError(f"unexpected order info {value!r}: expected an integer count or a UUID string")
    try:
        return OrderId(UUID(value))
    except ValueError as exc:
        raise DecodeError(f"unexpected order info {value!r}: not a valid UUID") from exc


OrderInfoField = Annotated[OrderInfo, PlainValidator(parse_order_info)]

"""Decoding of buffered response bodies into declared response types."""

from __future__ import annotations

from functools import lru_cache
from typing import Any, TypeVar

from pydantic import TypeAdapter, ValidationError

from gdax_client.rest.errors import DecodeError

T = TypeVar("T")


@lru_cache(maxsize=None)
def _adapter_for(response_type: Any) -> TypeAdapter[Any]:
    return TypeAdapter(response_type)


def decode_response(response_type: type[T], body: bytes | str) -> T:
    """Decode a JSON document into ``response_type``.

    Raises DecodeError, chained to the pydantic error, when the body is not
    valid JSON or does not match the type (including custom field rules).
    """
    try:
        return _adapter_for(response_type).validate_json(body)
    except ValidationError as exc:
        raise DecodeError(f"cannot decode response as {_type_name(response_type)}: {exc}") from exc


def _type_name(response_type: Any) -> str:
    return response_type.__name__ if isinstance(response_type, type) else repr(response_type)

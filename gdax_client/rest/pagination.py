"""Keyset pagination cursors for list endpoints such as trades."""

from __future__ import annotations

from dataclasses import dataclass
from urllib.parse import urlencode


def _require_positive(name: str, value: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise ValueError(f"{name} must be a positive integer, got {value!r}")


@dataclass(frozen=True, slots=True)
class Before:
    """Request records newer than ``id``."""

    id: int

    def __post_init__(self) -> None:
        _require_positive("cursor id", self.id)


@dataclass(frozen=True, slots=True)
class After:
    """Request records older than ``id``."""

    id: int

    def __post_init__(self) -> None:
        _require_positive("cursor id", self.id)


Cursor = Before | After


@dataclass(frozen=True, slots=True)
class Pagination:
    page: Cursor
    limit: int | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.page, (Before, After)):
            raise TypeError(f"page must be Before or After, got {type(self.page).__name__}")
        if self.limit is not None:
            _require_positive("limit", self.limit)

    def query_params(self) -> list[tuple[str, str]]:
        """Ordered query parameters: the cursor first, then the optional limit."""
        key = "before" if isinstance(self.page, Before) else "after"
        params = [(key, str(self.page.id))]
        if self.limit is not None:
            params.append(("limit", str(self.limit)))
        return params

    def to_query_string(self) -> str:
        return f"?{urlencode(self.query_params())}"

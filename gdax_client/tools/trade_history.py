from __future__ import annotations

import asyncio
import csv
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

from gdax_client.core.config import Settings, get_settings
from gdax_client.endpoints.products import GetTrades
from gdax_client.rest.errors import TransportError
from gdax_client.rest.pagination import After, Pagination
from gdax_client.schemas.product import Trade

logger = logging.getLogger(__name__)

CSV_FIELDNAMES = ["time", "trade_id", "price", "size", "side"]


class TradesClient(Protocol):
    async def send_request(self, endpoint: GetTrades) -> list[Trade]:
        ...


@dataclass(frozen=True)
class TradeHistoryConfig:
    product_id: str
    output_path: Path
    start_id: int | None = None
    limit: int | None = None
    max_pages: int | None = None
    retry_attempts: int = 3
    retry_backoff_seconds: float = 1.0
    retry_backoff_max_seconds: float = 8.0

    def __post_init__(self) -> None:
        for name in ("start_id", "limit", "max_pages"):
            value = getattr(self, name)
            if value is not None and (isinstance(value, bool) or not isinstance(value, int) or value <= 0):
                raise ValueError(f"{name} must be a positive integer, got {value!r}")

    @classmethod
    def from_settings(
        cls,
        product_id: str,
        output_path: Path,
        *,
        start_id: int | None = None,
        limit: int | None = None,
        max_pages: int | None = None,
        settings: Settings | None = None,
    ) -> TradeHistoryConfig:
        settings = settings or get_settings()
        return cls(
            product_id=product_id,
            output_path=output_path,
            start_id=start_id,
            limit=limit if limit is not None else settings.trade_history_page_limit,
            max_pages=max_pages,
            retry_attempts=settings.trade_history_retry_attempts,
            retry_backoff_seconds=settings.trade_history_retry_backoff_seconds,
            retry_backoff_max_seconds=settings.trade_history_retry_backoff_max_seconds,
        )


@dataclass
class TradeHistorySummary:
    pages: int = 0
    trades_written: int = 0
    last_trade_id: int | None = None


def default_output_path(product_id: str, start_id: int | None) -> Path:
    suffix = str(start_id) if start_id is not None else "latest"
    return Path(f"{product_id}-{suffix}.csv")


def _trade_to_csv_row(trade: Trade) -> dict[str, object]:
    return {
        "time": trade.time.isoformat(),
        "trade_id": trade.trade_id,
        "price": trade.price,
        "size": trade.size,
        "side": trade.side,
    }


def _page_for(cursor: int | None, limit: int | None) -> Pagination | None:
    if cursor is None:
        # Newest trades; Pagination always carries a cursor.
        return None
    return Pagination(page=After(cursor), limit=limit)


async def _fetch_page(client: TradesClient, config: TradeHistoryConfig, cursor: int | None) -> list[Trade]:
    attempts = max(1, config.retry_attempts)
    backoff_base = max(0.0, config.retry_backoff_seconds)
    backoff_cap = max(backoff_base, config.retry_backoff_max_seconds)
    endpoint = GetTrades(config.product_id, _page_for(cursor, config.limit))

    attempt = 1
    while True:
        try:
            return await client.send_request(endpoint)
        except TransportError as exc:
            if attempt >= attempts:
                raise
            delay = min(backoff_cap, backoff_base * (2 ** (attempt - 1)))
            logger.warning(
                "Trade page fetch failed; retrying",
                extra={
                    "product_id": config.product_id,
                    "cursor": cursor,
                    "attempt": attempt,
                    "attempts_total": attempts,
                    "status": exc.status_code,
                    "sleep_seconds": delay,
                },
            )
            await asyncio.sleep(delay)
            attempt += 1


async def download_trade_history(client: TradesClient, config: TradeHistoryConfig) -> TradeHistorySummary:
    """Walk the trade history backwards from ``start_id`` and write it to CSV.

    Pages are requested with ``After(cursor)`` where the cursor is the oldest
    trade id seen so far, until the exchange returns an empty page or
    ``max_pages`` is reached. Transport failures are retried with the same
    cursor; decode failures abort the download.
    """
    summary = TradeHistorySummary()
    cursor = config.start_id

    config.output_path.parent.mkdir(parents=True, exist_ok=True)
    with config.output_path.open("w", newline="", encoding="utf-8") as csv_file:
        writer = csv.DictWriter(csv_file, fieldnames=CSV_FIELDNAMES)
        writer.writeheader()

        while config.max_pages is None or summary.pages < config.max_pages:
            trades = await _fetch_page(client, config, cursor)
            if not trades:
                break

            for trade in trades:
                writer.writerow(_trade_to_csv_row(trade))
            summary.pages += 1
            summary.trades_written += len(trades)
            summary.last_trade_id = trades[-1].trade_id
            cursor = trades[-1].trade_id

            logger.info(
                "Trade page written",
                extra={
                    "product_id": config.product_id,
                    "page": summary.pages,
                    "trades": len(trades),
                    "next_cursor": cursor,
                },
            )

    return summary

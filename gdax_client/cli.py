from __future__ import annotations

import argparse
import asyncio
import json
import time
from pathlib import Path

from gdax_client.core.config import get_settings
from gdax_client.core.logging import setup_logging
from gdax_client.endpoints import GetProducts, GetProductTicker, GetTime
from gdax_client.rest.client import RESTClient
from gdax_client.rest.errors import GdaxError
from gdax_client.tools.trade_history import TradeHistoryConfig, default_output_path, download_trade_history


def _positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid int value: {value!r}") from None
    if number <= 0:
        raise argparse.ArgumentTypeError(f"must be a positive integer, got {number}")
    return number


def _build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="GDAX public market-data CLI")
    parser.add_argument("--sandbox", action="store_true", help="Use the sandbox API instead of production")
    subparsers = parser.add_subparsers(dest="command")

    subparsers.add_parser("time", help="Print exchange time and local clock drift")
    subparsers.add_parser("tickers", help="Print last price and volume for every product")

    download_parser = subparsers.add_parser(
        "download_trades",
        help="Download a product's trade history to CSV, newest first",
    )
    download_parser.add_argument("product", help="Product id, e.g. BTC-USD")
    download_parser.add_argument("--start_id", type=_positive_int, default=None, help="Resume after this trade id")
    download_parser.add_argument("--output", default=None, help="CSV path (default: <product>-<start_id>.csv)")
    download_parser.add_argument("--limit", type=_positive_int, default=None, help="Trades per page")
    download_parser.add_argument("--max_pages", type=_positive_int, default=None, help="Stop after N pages")

    return parser


def _client(sandbox: bool) -> RESTClient:
    if sandbox:
        settings = get_settings()
        return RESTClient.sandbox(
            timeout=settings.request_timeout_seconds,
            max_connections=settings.max_connections,
            max_keepalive_connections=settings.max_keepalive_connections,
        )
    return RESTClient.from_settings()


async def _run_time(client: RESTClient) -> int:
    server_time = await client.send_request(GetTime())
    drift = server_time.epoch - time.time()
    print(f"GDAX time: {server_time.iso.isoformat()}  local clock is behind by {drift:.3f}s")
    return 0


async def _run_tickers(client: RESTClient) -> int:
    products = await client.send_request(GetProducts())
    try:
        async with asyncio.TaskGroup() as group:
            tasks = [group.create_task(client.send_request(GetProductTicker(product.id))) for product in products]
    except ExceptionGroup as errors:
        raise errors.exceptions[0]
    for product, task in zip(products, tasks):
        ticker = task.result()
        print(f"{product.id}\tprice: {ticker.price}\tvolume: {ticker.volume}\ttime: {ticker.time.isoformat()}")
    return 0


def _download_config(args: argparse.Namespace) -> TradeHistoryConfig:
    output = Path(args.output) if args.output else default_output_path(args.product, args.start_id)
    return TradeHistoryConfig.from_settings(
        args.product,
        output,
        start_id=args.start_id,
        limit=args.limit,
        max_pages=args.max_pages,
    )


async def _run_download_trades(client: RESTClient, config: TradeHistoryConfig) -> int:
    output = config.output_path
    print(f"Downloading {config.product_id} trades starting at {config.start_id} into {output}, please be patient...")
    summary = await download_trade_history(client, config)
    print(
        json.dumps(
            {
                "pages": summary.pages,
                "trades_written": summary.trades_written,
                "last_trade_id": summary.last_trade_id,
                "output": str(output),
            },
            indent=2,
            sort_keys=True,
        )
    )
    return 0


async def _async_main(args: argparse.Namespace, config: TradeHistoryConfig | None) -> int:
    async with _client(args.sandbox) as client:
        if config is not None:
            return await _run_download_trades(client, config)
        if args.command == "time":
            return await _run_time(client)
        return await _run_tickers(client)


def main(argv: list[str] | None = None) -> int:
    parser = _build_arg_parser()
    args = parser.parse_args(argv)
    if args.command not in {"time", "tickers", "download_trades"}:
        parser.print_help()
        return 1

    config = None
    if args.command == "download_trades":
        try:
            config = _download_config(args)
        except ValueError as exc:
            print(f"error: {exc}")
            return 2

    setup_logging()
    try:
        return asyncio.run(_async_main(args, config))
    except GdaxError as exc:
        print(f"error: {exc}")
        return 2


if __name__ == "__main__":
    raise SystemExit(main())

import asyncio
import csv
from pathlib import Path

import httpx
import pytest

from gdax_client import cli
from gdax_client.core.config import Settings
from gdax_client.rest.client import RESTClient
from gdax_client.tools import trade_history

_TICKER = {
    "trade_id": 4729088,
    "price": "333.99",
    "size": "0.193",
    "bid": "333.98",
    "ask": "333.99",
    "volume": "5957.11914015",
    "time": "2015-11-14T20:46:03.511254Z",
}

_PRODUCT = {
    "id": "BTC-USD",
    "base_currency": "BTC",
    "quote_currency": "USD",
    "base_min_size": "0.01",
    "base_max_size": "10000.00",
    "quote_increment": "0.01",
}


def _handler(request: httpx.Request) -> httpx.Response:
    path = request.url.path
    if path == "/time":
        return httpx.Response(200, json={"iso": "2015-01-07T23:47:25.201Z", "epoch": 1420674445.201})
    if path == "/products":
        return httpx.Response(200, json=[_PRODUCT])
    if path == "/products/BTC-USD/ticker":
        return httpx.Response(200, json=_TICKER)
    if path == "/products/BTC-USD/trades":
        if "after" in request.url.params:
            return httpx.Response(200, json=[])
        return httpx.Response(
            200,
            json=[{"time": "2014-11-07T22:19:28.578544Z", "trade_id": 74, "price": "10.0", "size": "0.01", "side": "buy"}],
        )
    return httpx.Response(404, json={"message": "NotFound"})


@pytest.fixture(autouse=True)
def _mock_client(monkeypatch: pytest.MonkeyPatch) -> list[bool]:
    sandbox_flags: list[bool] = []

    def fake_client(sandbox: bool) -> RESTClient:
        sandbox_flags.append(sandbox)
        return RESTClient("http://mock.gdax.test", transport=httpx.MockTransport(_handler))

    monkeypatch.setattr(cli, "_client", fake_client)
    monkeypatch.setattr(cli, "setup_logging", lambda: None)
    return sandbox_flags


def test_no_command_prints_help(capsys: pytest.CaptureFixture[str]) -> None:
    assert cli.main([]) == 1
    assert "download_trades" in capsys.readouterr().out


def test_time_command(capsys: pytest.CaptureFixture[str]) -> None:
    assert cli.main(["time"]) == 0
    assert "GDAX time: 2015-01-07T23:47:25.201000+00:00" in capsys.readouterr().out


def test_tickers_command(capsys: pytest.CaptureFixture[str], _mock_client: list[bool]) -> None:
    assert cli.main(["--sandbox", "tickers"]) == 0
    out = capsys.readouterr().out
    assert "BTC-USD\tprice: 333.99\tvolume: 5957.11914015" in out
    assert _mock_client == [True]


def test_download_trades_command(tmp_path: Path) -> None:
    output = tmp_path / "trades.csv"
    assert cli.main(["download_trades", "BTC-USD", "--output", str(output)]) == 0

    with output.open(newline="", encoding="utf-8") as csv_file:
        rows = list(csv.DictReader(csv_file))
    assert [row["trade_id"] for row in rows] == ["74"]


def test_api_failure_returns_error_code(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    def failing_client(sandbox: bool) -> RESTClient:
        return RESTClient(
            "http://mock.gdax.test",
            transport=httpx.MockTransport(lambda request: httpx.Response(503, text="maintenance")),
        )

    monkeypatch.setattr(cli, "_client", failing_client)
    assert cli.main(["time"]) == 2
    out = capsys.readouterr().out
    assert out.startswith("error: GET http://mock.gdax.test/time failed (HTTP 503)")


@pytest.mark.parametrize("flag", ["--start_id", "--limit", "--max_pages"])
def test_download_trades_rejects_non_positive_numbers(
    flag: str, tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    output = tmp_path / "trades.csv"
    with pytest.raises(SystemExit) as exc_info:
        cli.main(["download_trades", "BTC-USD", "--output", str(output), flag, "0"])

    assert exc_info.value.code == 2
    assert "must be a positive integer" in capsys.readouterr().err
    assert not output.exists()


def test_download_trades_rejects_invalid_configured_limit(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    monkeypatch.setattr(trade_history, "get_settings", lambda: Settings(trade_history_page_limit=0))
    output = tmp_path / "trades.csv"

    assert cli.main(["download_trades", "BTC-USD", "--output", str(output)]) == 2
    assert "limit must be a positive integer" in capsys.readouterr().out
    assert not output.exists()


def test_tickers_failure_cancels_pending_requests(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    events: list[str] = []
    started = asyncio.Event()

    async def handler(request: httpx.Request) -> httpx.Response:
        path = request.url.path
        if path == "/products":
            return httpx.Response(200, json=[_PRODUCT, {**_PRODUCT, "id": "ETH-USD"}])
        if path == "/products/BTC-USD/ticker":
            await started.wait()
            return httpx.Response(500, text="boom")
        started.set()
        try:
            await asyncio.sleep(3600)
        except asyncio.CancelledError:
            events.append("cancelled")
            raise
        return httpx.Response(200, json=_TICKER)

    class RecordingClient(RESTClient):
        async def aclose(self) -> None:
            events.append("closed")
            await super().aclose()

    monkeypatch.setattr(
        cli, "_client", lambda sandbox: RecordingClient("http://mock.gdax.test", transport=httpx.MockTransport(handler))
    )

    assert cli.main(["tickers"]) == 2
    assert "HTTP 500" in capsys.readouterr().out
    assert events == ["cancelled", "closed"]

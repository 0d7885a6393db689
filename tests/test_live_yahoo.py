"""Smoke tests against the real Yahoo Finance endpoints (pytest --run-integration)."""

import pytest

from src.infrastructure.config.settings import GatewaySettings
from src.infrastructure.entrypoints.composition import build_gateway

pytestmark = pytest.mark.integration


@pytest.fixture(scope="module")
def live_gateway():
    return build_gateway(GatewaySettings(log_level="WARNING"))


async def test_quote(live_gateway):
    quote = await live_gateway.call("get_quote", {"symbol": "AAPL"})
    assert quote["symbol"] == "AAPL"
    assert quote["regularMarketPrice"] is not None


async def test_historical_data(live_gateway):
    bars = await live_gateway.call("get_historical_data", {"symbol": "MSFT", "period1": "1mo"})
    assert bars
    assert isinstance(bars[0]["date"], str)


async def test_daily_gainers(live_gateway):
    result = await live_gateway.call("get_daily_gainers", {"count": 5})
    assert result["count"] == len(result["quotes"]) <= 5


async def test_market_summary(live_gateway):
    summary = await live_gateway.call("get_market_summary")
    assert [index["symbol"] for index in summary["indices"]][0] == "^GSPC"

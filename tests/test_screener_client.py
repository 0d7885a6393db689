import pytest

from src.application.services.screener_client import PrimaryScreenerStrategy, ScreenerFallbackClient
from src.domain.entities.screener import DAY_GAINERS, DAY_LOSERS, ScreenerQuery
from src.domain.errors import UpstreamResponseError, UpstreamUnavailable
from tests.fakes import FakeMarketDataProvider, ScriptedScreenerStrategy, screener_quote


def _client(provider, fallback):
    return ScreenerFallbackClient(PrimaryScreenerStrategy(provider), fallback)


async def test_primary_success_does_not_touch_fallback():
    provider = FakeMarketDataProvider()
    provider.responses["screener"] = {
        "id": "day_gainers",
        "count": 5,
        "total": 80,
        "quotes": [screener_quote(symbol) for symbol in ("E", "D", "C", "B", "A")],
    }
    fallback = ScriptedScreenerStrategy(error=AssertionError("fallback must not run"))

    result = await _client(provider, fallback).fetch(ScreenerQuery(DAY_GAINERS, count=5))

    assert result.count == 5
    assert [quote.symbol for quote in result.quotes] == ["E", "D", "C", "B", "A"]
    assert fallback.queries == []
    assert provider.calls_to("screener") == [
        (("day_gainers", 5), {"lang": "en-US", "region": "US"})
    ]


async def test_fallback_result_has_the_same_shape_as_primary():
    raw = {"id": "day_losers", "quotes": [{"symbol": "ZZ", "regularMarketPrice": 2.5}]}

    primary_provider = FakeMarketDataProvider()
    primary_provider.responses["screener"] = raw
    from_primary = await _client(primary_provider, ScriptedScreenerStrategy()).fetch(
        ScreenerQuery(DAY_LOSERS)
    )

    failing_provider = FakeMarketDataProvider()
    failing_provider.failures["screener"] = RuntimeError("crumb rejected")
    from_fallback = await _client(failing_provider, ScriptedScreenerStrategy(payload=raw)).fetch(
        ScreenerQuery(DAY_LOSERS)
    )

    assert from_primary == from_fallback
    assert from_fallback.quotes[0].short_name == "ZZ"


async def test_fallback_receives_the_same_query():
    provider = FakeMarketDataProvider()
    provider.failures["screener"] = RuntimeError("boom")
    fallback = ScriptedScreenerStrategy(payload={})
    query = ScreenerQuery(DAY_GAINERS, count=7, lang="en-GB", region="GB")

    await _client(provider, fallback).fetch(query)

    assert fallback.queries == [query]


async def test_empty_fallback_payload_is_an_empty_result():
    provider = FakeMarketDataProvider()
    provider.failures["screener"] = RuntimeError("boom")

    result = await _client(provider, ScriptedScreenerStrategy(payload={})).fetch(
        ScreenerQuery(DAY_GAINERS)
    )

    assert result.count == 0
    assert result.quotes == ()


async def test_both_stages_failing_raises_upstream_unavailable_with_context():
    provider = FakeMarketDataProvider()
    provider.failures["screener"] = RuntimeError("primary exploded")
    fallback = ScriptedScreenerStrategy(
        error=UpstreamResponseError(503, "https://query1.finance.yahoo.com/v1/finance/screener")
    )

    with pytest.raises(UpstreamUnavailable) as caught:
        await _client(provider, fallback).fetch(ScreenerQuery(DAY_GAINERS))

    assert caught.value.status_code == 503
    assert caught.value.primary_error == "primary exploded"
    assert caught.value.details == {"status_code": 503, "primary_error": "primary exploded"}


async def test_transport_failure_in_fallback_has_no_status():
    provider = FakeMarketDataProvider()
    provider.failures["screener"] = RuntimeError("primary exploded")
    fallback = ScriptedScreenerStrategy(error=ConnectionError("dns"))

    with pytest.raises(UpstreamUnavailable) as caught:
        await _client(provider, fallback).fetch(ScreenerQuery(DAY_GAINERS))

    assert caught.value.status_code is None
    assert "dns" in caught.value.message

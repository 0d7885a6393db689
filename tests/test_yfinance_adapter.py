from datetime import date, datetime, timezone

import numpy as np
import pandas as pd
import pytest

from src.application.operations import MarketDataGateway
from src.infrastructure.stock_data import yfinance_adapter
from src.infrastructure.stock_data.yfinance_adapter import (
    YFinanceMarketDataProvider,
    _plain,
    _range_kwargs,
)
from tests.fakes import ScriptedScreenerStrategy

DATES = pd.DatetimeIndex(["2024-05-01", "2024-05-02", "2024-05-03"], tz="America/New_York")


def _history_frame() -> pd.DataFrame:
    return pd.DataFrame(
        {
            "Open": [10.0, 11.0, 12.0],
            "High": [10.5, 11.5, 12.5],
            "Low": [9.5, 10.5, np.nan],
            "Close": [10.2, 11.2, 12.2],
            "Adj Close": [10.1, 11.1, 12.1],
            "Volume": np.array([1000, 2000, 3000], dtype=np.int64),
            "Dividends": [0.0, 0.24, 0.0],
            "Stock Splits": [0.0, 0.0, 4.0],
        },
        index=DATES,
    )


class FakeTicker:
    info: dict = {}
    frame = pd.DataFrame()
    metadata: dict = {}
    history_calls: list = []

    def __init__(self, symbol):
        self.symbol = symbol

    def history(self, **kwargs):
        FakeTicker.history_calls.append((self.symbol, kwargs))
        return FakeTicker.frame

    def get_history_metadata(self):
        return FakeTicker.metadata


@pytest.fixture
def ticker(monkeypatch):
    FakeTicker.info = {}
    FakeTicker.frame = _history_frame()
    FakeTicker.metadata = {}
    FakeTicker.history_calls = []
    monkeypatch.setattr(yfinance_adapter.yf, "Ticker", FakeTicker)
    return FakeTicker


@pytest.fixture
def adapter():
    return YFinanceMarketDataProvider(http_client=None)


class TestQuote:
    async def test_info_is_returned_for_normalization(self, adapter, ticker):
        ticker.info = {"symbol": "AAPL", "shortName": "Apple Inc.", "regularMarketPrice": 190.1,
                       "regularMarketTime": 1717444800}
        quote = await adapter.quote("AAPL")
        assert quote["regularMarketTime"] == 1717444800
        assert quote["regularMarketPrice"] == 190.1

    async def test_symbol_is_filled_in_when_missing(self, adapter, ticker):
        ticker.info = {"shortName": "S&P 500"}
        assert (await adapter.quote("^GSPC"))["symbol"] == "^GSPC"

    async def test_empty_info_is_an_error(self, adapter, ticker):
        ticker.info = {"trailingPegRatio": None}
        with pytest.raises(ValueError, match="No quote data"):
            await adapter.quote("NOPE")


class TestHistorical:
    async def test_rows_are_flattened_in_order(self, adapter, ticker):
        bars = await adapter.historical("AAPL", "1mo", datetime(2024, 6, 3, tzinfo=timezone.utc))

        assert [bar["date"].day for bar in bars] == [1, 2, 3]
        assert bars[0] == {
            "date": DATES[0].to_pydatetime(),
            "open": 10.0,
            "high": 10.5,
            "low": 9.5,
            "close": 10.2,
            "adjClose": 10.1,
            "volume": 1000,
        }
        assert bars[2]["low"] is None
        assert type(bars[1]["volume"]) is int

    async def test_shorthand_start_maps_to_period(self, adapter, ticker):
        await adapter.historical("AAPL", "6mo", "now", interval="1wk")
        assert ticker.history_calls == [
            ("AAPL", {"interval": "1wk", "auto_adjust": False, "period": "6mo"})
        ]

    async def test_empty_history_is_an_error(self, adapter, ticker):
        ticker.frame = pd.DataFrame()
        with pytest.raises(ValueError, match="No historical data"):
            await adapter.historical("AAPL", "1y", "now")


class TestChart:
    async def test_chart_carries_meta_quotes_and_events(self, adapter, ticker):
        ticker.metadata = {
            "currency": "USD",
            "regularMarketPrice": np.float64(12.2),
            "firstTradeDate": pd.Timestamp("1980-12-12", tz="UTC"),
        }
        start = datetime(2024, 5, 1, tzinfo=timezone.utc)
        end = datetime(2024, 6, 1, tzinfo=timezone.utc)

        chart = await adapter.chart("AAPL", start, end)

        assert ticker.history_calls[0][1] == {
            "interval": "1d", "auto_adjust": False, "actions": True, "start": start, "end": end,
        }
        assert chart["meta"]["currency"] == "USD"
        assert type(chart["meta"]["regularMarketPrice"]) is float
        assert chart["meta"]["firstTradeDate"] == datetime(1980, 12, 12, tzinfo=timezone.utc)
        assert [quote["adjclose"] for quote in chart["quotes"]] == [10.1, 11.1, 12.1]
        assert chart["events"]["dividends"] == [{"date": DATES[1].to_pydatetime(), "amount": 0.24}]
        assert chart["events"]["splits"] == [{"date": DATES[2].to_pydatetime(), "ratio": 4.0}]

    async def test_only_requested_events_are_returned(self, adapter, ticker):
        chart = await adapter.chart("AAPL", "1mo", "now", events="div")
        assert set(chart["events"]) == {"dividends"}

    async def test_missing_action_columns_yield_no_events(self, adapter, ticker):
        ticker.frame = _history_frame().drop(columns=["Dividends", "Stock Splits"])
        chart = await adapter.chart("AAPL", "1mo", "now")
        assert chart["events"] == {"dividends": [], "splits": []}


class RecordingHttp:
    """Stands in for YahooHttpClient; records each endpoint call."""

    def __init__(self, screener_payload=None, news=None):
        self.calls = []
        self.screener_payload = screener_payload or {}
        self.articles = news or []

    async def screener(self, scr_id, count, lang, region):
        self.calls.append(("screener", scr_id, count, lang, region))
        return self.screener_payload

    async def news(self, query, news_count, region, lang):
        self.calls.append(("news", query, news_count, region, lang))
        return self.articles

    async def options(self, symbol, expiration, formatted):
        self.calls.append(("options", symbol, expiration, formatted))
        return {}

    async def trending_symbols(self, region, count):
        self.calls.append(("trending_symbols", region, count))
        return {}


def _forbid_yf_screen(monkeypatch):
    def fake_screen(scr_id, count):
        raise AssertionError("yf.screen only serves the US / en-US market")

    monkeypatch.setattr(yfinance_adapter.yf, "screen", fake_screen)


class TestScreener:
    async def test_default_locale_uses_yf_screen(self, adapter, monkeypatch):
        calls = []

        def fake_screen(scr_id, count):
            calls.append((scr_id, count))
            return {"id": scr_id, "quotes": [{"symbol": "UP"}]}

        monkeypatch.setattr(yfinance_adapter.yf, "screen", fake_screen)

        result = await adapter.screener("day_gainers", 7, lang="en-US", region="us")

        assert calls == [("day_gainers", 7)]
        assert result["quotes"] == [{"symbol": "UP"}]

    @pytest.mark.parametrize("region, lang", [("GB", "en-GB"), ("CA", "en-US"), ("US", "es-US")])
    async def test_other_locales_use_the_predefined_endpoint(self, monkeypatch, region, lang):
        _forbid_yf_screen(monkeypatch)
        http = RecordingHttp(screener_payload={"quotes": [{"symbol": "VOD.L"}]})

        result = await YFinanceMarketDataProvider(http).screener("day_losers", 4, lang=lang, region=region)

        assert http.calls == [("screener", "day_losers", 4, lang, region)]
        assert result == {"quotes": [{"symbol": "VOD.L"}]}

    async def test_gainers_for_a_foreign_region_return_that_region(self, monkeypatch):
        _forbid_yf_screen(monkeypatch)
        http = RecordingHttp(screener_payload={"quotes": [{"symbol": "VOD.L", "shortName": "Vodafone"}]})
        fallback = ScriptedScreenerStrategy(error=AssertionError("primary stage should answer"))
        gateway = MarketDataGateway(YFinanceMarketDataProvider(http), fallback)

        result = await gateway.call("get_daily_gainers", {"count": 1, "region": "GB", "lang": "en-GB"})

        assert [quote["symbol"] for quote in result["quotes"]] == ["VOD.L"]
        assert http.calls == [("screener", "day_gainers", 1, "en-GB", "GB")]
        assert fallback.queries == []


async def test_news_forwards_locale_to_the_search_endpoint():
    http = RecordingHttp(news=[{"title": f"story {index}"} for index in range(4)])

    articles = await YFinanceMarketDataProvider(http).news("bank", news_count=2, region="GB", lang="en-GB")

    assert http.calls == [("news", "bank", 2, "GB", "en-GB")]
    assert articles == [{"title": "story 0"}, {"title": "story 1"}]


async def test_endpoint_methods_delegate_to_the_http_client():
    http = RecordingHttp()
    adapter = YFinanceMarketDataProvider(http)

    await adapter.options("AAPL", date(2024, 6, 21))
    await adapter.trending_symbols("GB", count=3)

    assert http.calls == [
        ("options", "AAPL", date(2024, 6, 21), False),
        ("trending_symbols", "GB", 3),
    ]


class TestHelpers:
    def test_range_kwargs(self):
        start = datetime(2024, 1, 1, tzinfo=timezone.utc)
        assert _range_kwargs("ytd", start) == {"period": "ytd"}
        assert _range_kwargs(start, "1d") == {"start": start, "end": "1d"}

    def test_plain_unwraps_pandas_and_numpy(self):
        frame = pd.DataFrame({"value": [np.int64(3), np.nan]}, index=pd.Index(["a", "b"], name="key"))
        assert _plain(frame) == [{"key": "a", "value": 3.0}, {"key": "b", "value": None}]
        assert _plain(pd.Series([np.float64(1.5), np.nan])) == [1.5, None]
        assert _plain({"when": pd.NaT, "tags": ("x",)}) == {"when": None, "tags": ["x"]}
        assert type(_plain(np.int32(4))) is int

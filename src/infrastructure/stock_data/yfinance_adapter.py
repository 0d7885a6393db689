"""
Infrastructure adapter: yfinance + direct Yahoo endpoints -> IMarketDataProvider.

All yfinance-specific details (Ticker.info, history(), Search, screen) are confined
here; the rest of the codebase depends only on IMarketDataProvider.  yfinance is
synchronous, so every call runs in a worker thread.  pandas frames are flattened
into lists of plain dicts (NaN -> None, numpy scalars -> Python scalars) while
timestamps stay native for the application-layer sanitizer.
"""

import asyncio
from datetime import date
from typing import Any, Optional

import numpy as np
import pandas as pd
import yfinance as yf
from loguru import logger

from src.domain.ports.market_data_port import IMarketDataProvider, PeriodBound
from src.infrastructure.stock_data.yahoo_http_client import YahooHttpClient

DEFAULT_REGION = "US"
DEFAULT_LANG = "en-US"


class YFinanceMarketDataProvider(IMarketDataProvider):
    """Fetches market data from Yahoo Finance via yfinance and YahooHttpClient."""

    def __init__(self, http_client: YahooHttpClient) -> None:
        self._http = http_client

    async def quote(self, symbol: str) -> dict[str, Any]:
        return await asyncio.to_thread(self._quote, symbol)

    def _quote(self, symbol: str) -> dict[str, Any]:
        info = dict(yf.Ticker(symbol).info or {})
        if info.get("regularMarketPrice") is None and not info.get("shortName"):
            raise ValueError(f"No quote data available for symbol: {symbol!r}")
        info.setdefault("symbol", symbol)
        return info

    async def historical(
        self,
        symbol: str,
        period1: PeriodBound,
        period2: PeriodBound,
        interval: str = "1d",
    ) -> list[dict[str, Any]]:
        return await asyncio.to_thread(self._historical, symbol, period1, period2, interval)

    def _historical(
        self, symbol: str, period1: PeriodBound, period2: PeriodBound, interval: str
    ) -> list[dict[str, Any]]:
        history = yf.Ticker(symbol).history(
            interval=interval, auto_adjust=False, **_range_kwargs(period1, period2)
        )
        if history.empty:
            raise ValueError(f"No historical data available for symbol: {symbol!r}")
        return [
            {
                "date": timestamp.to_pydatetime(),
                "open": _number(row.get("Open")),
                "high": _number(row.get("High")),
                "low": _number(row.get("Low")),
                "close": _number(row.get("Close")),
                "adjClose": _number(row.get("Adj Close")),
                "volume": _integer(row.get("Volume")),
            }
            for timestamp, row in history.iterrows()
        ]

    async def search(self, query: str, news_count: int = 8) -> dict[str, Any]:
        return await asyncio.to_thread(self._search, query, news_count)

    def _search(self, query: str, news_count: int) -> dict[str, Any]:
        result = yf.Search(query, news_count=news_count)
        return {"quotes": list(result.quotes or []), "news": list(result.news or [])}

    async def news(
        self, query: str, news_count: int = 10, region: str = "US", lang: str = "en-US"
    ) -> list[dict[str, Any]]:
        # yf.Search has no region/lang switch, so news goes through the search endpoint directly.
        articles = await self._http.news(query, news_count, region, lang)
        return articles[:news_count]

    async def quote_summary(self, symbol: str, modules: list[str]) -> dict[str, Any]:
        return await self._http.quote_summary(symbol, modules)

    async def recommendations_by_symbol(self, symbol: str) -> dict[str, Any]:
        return await self._http.recommendations_by_symbol(symbol)

    async def trending_symbols(self, region: str = "US", count: int = 10) -> dict[str, Any]:
        return await self._http.trending_symbols(region, count)

    async def options(
        self, symbol: str, expiration: Optional[date] = None, formatted: bool = False
    ) -> dict[str, Any]:
        return await self._http.options(symbol, expiration, formatted)

    async def insights(
        self, symbol: str, reports_count: int = 5, region: str = "US", lang: str = "en-US"
    ) -> dict[str, Any]:
        return await self._http.insights(symbol, reports_count, region, lang)

    async def screener(
        self, scr_id: str, count: int, lang: str = "en-US", region: str = "US"
    ) -> dict[str, Any]:
        # yf.screen runs predefined screens for the US / en-US market only.
        if (region.upper(), lang) != (DEFAULT_REGION, DEFAULT_LANG):
            logger.debug("Screen {} for {} / {} via predefined endpoint", scr_id, region, lang)
            return await self._http.screener(scr_id, count, lang, region)
        return await asyncio.to_thread(yf.screen, scr_id, count=count)

    async def chart(
        self,
        symbol: str,
        period1: PeriodBound,
        period2: PeriodBound,
        interval: str = "1d",
        events: str = "div|split|earn",
    ) -> dict[str, Any]:
        return await asyncio.to_thread(self._chart, symbol, period1, period2, interval, events)

    def _chart(
        self,
        symbol: str,
        period1: PeriodBound,
        period2: PeriodBound,
        interval: str,
        events: str,
    ) -> dict[str, Any]:
        ticker = yf.Ticker(symbol)
        history = ticker.history(
            interval=interval, auto_adjust=False, actions=True, **_range_kwargs(period1, period2)
        )
        meta = {key: _plain(value) for key, value in (ticker.get_history_metadata() or {}).items()}
        quotes = [
            {
                "date": timestamp.to_pydatetime(),
                "open": _number(row.get("Open")),
                "high": _number(row.get("High")),
                "low": _number(row.get("Low")),
                "close": _number(row.get("Close")),
                "volume": _integer(row.get("Volume")),
                "adjclose": _number(row.get("Adj Close")),
            }
            for timestamp, row in history.iterrows()
        ]
        requested = set(events.split("|"))
        chart_events: dict[str, list[dict[str, Any]]] = {}
        # history() carries dividends and splits only; "earn" has no series here.
        if "div" in requested:
            chart_events["dividends"] = _event_rows(history, "Dividends", "amount")
        if "split" in requested:
            chart_events["splits"] = _event_rows(history, "Stock Splits", "ratio")
        return {"meta": meta, "quotes": quotes, "events": chart_events}


def _range_kwargs(period1: PeriodBound, period2: PeriodBound) -> dict[str, Any]:
    """Map resolved bounds onto history() arguments.

    A shorthand start becomes yfinance's `period` (a range ending now); concrete
    starts become start/end, with the end bound forwarded as resolved.
    """
    if isinstance(period1, str):
        return {"period": period1}
    return {"start": period1, "end": period2}


def _event_rows(history: pd.DataFrame, column: str, key: str) -> list[dict[str, Any]]:
    if column not in history.columns:
        return []
    series = history[column]
    return [
        {"date": timestamp.to_pydatetime(), key: float(value)}
        for timestamp, value in series[series != 0].items()
    ]


def _number(value: Any) -> Optional[float]:
    if value is None or pd.isna(value):
        return None
    return round(float(value), 4)


def _integer(value: Any) -> Optional[int]:
    if value is None or pd.isna(value):
        return None
    return int(value)


def _plain(value: Any) -> Any:
    """Convert pandas / numpy containers and scalars into plain Python values."""
    if isinstance(value, pd.DataFrame):
        return [
            {str(key): _plain(item) for key, item in row.items()}
            for row in value.reset_index().to_dict(orient="records")
        ]
    if isinstance(value, pd.Series):
        return [_plain(item) for item in value.tolist()]
    if isinstance(value, dict):
        return {key: _plain(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_plain(item) for item in value]
    if value is pd.NaT:
        return None
    if isinstance(value, pd.Timestamp):
        return value.to_pydatetime()
    if isinstance(value, np.generic):
        value = value.item()
    if isinstance(value, float) and pd.isna(value):
        return None
    return value

"""
Port (interface) for upstream market-data providers.
Infrastructure adapters (e.g. YFinanceMarketDataProvider) must implement this interface.

Every method performs exactly one upstream call and returns the provider's raw,
loosely-typed payload.  Normalization and sanitization happen in the application layer.
Period bounds arrive already resolved: a datetime for exact instants, or an opaque
shorthand string ("1mo", "1y") whose meaning the provider decides.
"""

from abc import ABC, abstractmethod
from datetime import date, datetime
from typing import Any, Optional, Union

PeriodBound = Union[datetime, str]


class IMarketDataProvider(ABC):
    @abstractmethod
    async def quote(self, symbol: str) -> dict[str, Any]: ...

    @abstractmethod
    async def historical(
        self,
        symbol: str,
        period1: PeriodBound,
        period2: PeriodBound,
        interval: str = "1d",
    ) -> list[dict[str, Any]]: ...

    @abstractmethod
    async def search(self, query: str, news_count: int = 8) -> dict[str, Any]:
        """Return {"quotes": [...], "news": [...]} for a free-text query."""
        ...

    @abstractmethod
    async def news(
        self, query: str, news_count: int = 10, region: str = "US", lang: str = "en-US"
    ) -> list[dict[str, Any]]: ...

    @abstractmethod
    async def quote_summary(self, symbol: str, modules: list[str]) -> dict[str, Any]: ...

    @abstractmethod
    async def recommendations_by_symbol(self, symbol: str) -> dict[str, Any]: ...

    @abstractmethod
    async def trending_symbols(self, region: str = "US", count: int = 10) -> dict[str, Any]: ...

    @abstractmethod
    async def options(
        self, symbol: str, expiration: Optional[date] = None, formatted: bool = False
    ) -> dict[str, Any]: ...

    @abstractmethod
    async def insights(
        self, symbol: str, reports_count: int = 5, region: str = "US", lang: str = "en-US"
    ) -> dict[str, Any]: ...

    @abstractmethod
    async def screener(
        self, scr_id: str, count: int, lang: str = "en-US", region: str = "US"
    ) -> dict[str, Any]:
        """Run a predefined screen.  Returns {id, title, description, count, total, start, quotes}."""
        ...

    @abstractmethod
    async def chart(
        self,
        symbol: str,
        period1: PeriodBound,
        period2: PeriodBound,
        interval: str = "1d",
        events: str = "div|split|earn",
    ) -> dict[str, Any]:
        """Return {"meta": {...}, "quotes": [...], "events": {...}} in provider vocabulary."""
        ...

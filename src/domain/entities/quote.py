"""
Domain entities for canonical quote and screener records.
Zero external dependencies, pure Python dataclasses only.

Serialized keys keep the provider's camelCase vocabulary (shortName,
regularMarketPrice, ...) because downstream consumers read them by those names.
"""

from dataclasses import dataclass
from typing import Any, Optional


@dataclass(frozen=True)
class QuoteRecord:
    symbol: str
    short_name: str
    regular_market_price: Optional[float] = None
    regular_market_change: Optional[float] = None
    regular_market_change_percent: Optional[float] = None
    regular_market_volume: Optional[int] = None
    market_cap: Optional[int] = None
    exchange: Optional[str] = None
    full_exchange_name: Optional[str] = None
    regular_market_time: Any = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "symbol": self.symbol,
            "shortName": self.short_name,
            "regularMarketPrice": self.regular_market_price,
            "regularMarketChange": self.regular_market_change,
            "regularMarketChangePercent": self.regular_market_change_percent,
            "regularMarketVolume": self.regular_market_volume,
            "marketCap": self.market_cap,
            "exchange": self.exchange,
            "fullExchangeName": self.full_exchange_name,
            "regularMarketTime": self.regular_market_time,
        }


@dataclass(frozen=True)
class ScreenerResult:
    id: str
    title: str
    description: str
    count: int
    total: int
    start: int
    quotes: tuple[QuoteRecord, ...]

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "count": self.count,
            "total": self.total,
            "start": self.start,
            "quotes": [quote.to_dict() for quote in self.quotes],
        }

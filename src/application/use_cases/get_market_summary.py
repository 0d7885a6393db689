"""
Use-case: snapshot of the major US indices.
Depends only on Domain ports and entities, no infrastructure imports.

Index quotes are requested concurrently; the output order always follows
MARKET_INDICES, whichever quote arrives first.
"""

import asyncio
from datetime import datetime
from typing import Any, Callable

from src.application.schemas import GetMarketSummaryRequest
from src.application.services.field_normalizer import normalize_quote
from src.application.services.period_resolver import utc_now
from src.application.services.result_sanitizer import sanitize
from src.domain.ports.market_data_port import IMarketDataProvider

MARKET_INDICES = ("^GSPC", "^DJI", "^IXIC", "^RUT", "^VIX")

INDEX_FIELDS = (
    "symbol",
    "shortName",
    "regularMarketPrice",
    "regularMarketChange",
    "regularMarketChangePercent",
    "regularMarketTime",
)


class GetMarketSummaryUseCase:
    def __init__(
        self,
        provider: IMarketDataProvider,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self._provider = provider
        self._clock = clock

    async def execute(self, request: GetMarketSummaryRequest) -> dict[str, Any]:
        raw_quotes = await asyncio.gather(
            *(self._provider.quote(symbol) for symbol in MARKET_INDICES)
        )
        indices = []
        for raw in raw_quotes:
            record = normalize_quote(raw).to_dict()
            indices.append({field: record[field] for field in INDEX_FIELDS})
        return sanitize({"indices": indices, "timestamp": self._clock()})

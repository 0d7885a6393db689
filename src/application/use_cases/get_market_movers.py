"""
Use-case: day gainers / day losers through the screener fallback client.
Depends only on Domain entities and application services, no infrastructure imports.
"""

from datetime import datetime
from typing import Any, Callable

from src.application.schemas import ScreenerRequest
from src.application.services.period_resolver import utc_now
from src.application.services.result_sanitizer import sanitize
from src.application.services.screener_client import ScreenerFallbackClient
from src.domain.entities.screener import ScreenDefinition, ScreenerQuery


class GetMarketMoversUseCase:
    def __init__(
        self,
        screener: ScreenerFallbackClient,
        screen: ScreenDefinition,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self._screener = screener
        self._screen = screen
        self._clock = clock

    async def execute(self, request: ScreenerRequest) -> dict[str, Any]:
        """Run the configured screen.

        Returns:
            {id, title, description, count, total, start, quotes, timestamp} where
            quotes are canonical QuoteRecord dicts in upstream rank order and
            count == len(quotes).
        """
        query = ScreenerQuery(
            screen=self._screen,
            count=request.count,
            lang=request.lang,
            region=request.region,
        )
        result = await self._screener.fetch(query)
        return sanitize({**result.to_dict(), "timestamp": self._clock()})

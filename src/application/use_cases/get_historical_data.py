"""
Use-case: retrieve historical OHLCV bars for a given symbol.
Depends only on Domain ports and entities, no infrastructure imports.
"""

from datetime import datetime
from typing import Any, Callable

from src.application.schemas import GetHistoricalDataRequest
from src.application.services.period_resolver import resolve_range, utc_now
from src.application.services.result_sanitizer import sanitize
from src.domain.ports.market_data_port import IMarketDataProvider


class GetHistoricalDataUseCase:
    def __init__(
        self,
        provider: IMarketDataProvider,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self._provider = provider
        self._clock = clock

    async def execute(self, request: GetHistoricalDataRequest) -> list[dict[str, Any]]:
        """Fetch historical bars for *request.symbol*.

        Args:
            request.period1:  Start bound: YYYY-MM-DD, "now", or a shorthand such as
                              '1mo' / '1y' that the provider interprets.
            request.period2:  End bound, same grammar.  Defaults to "now".
            request.interval: Bar frequency (e.g. '1d', '1wk').

        Returns:
            List of {date, open, high, low, close, adjClose, volume} dicts with
            ISO-8601 dates, in upstream order.
        """
        period1, period2 = resolve_range(request.period1, request.period2, self._clock())
        bars = await self._provider.historical(
            request.symbol.upper(),
            period1,
            period2,
            interval=request.interval,
        )
        return sanitize(bars)

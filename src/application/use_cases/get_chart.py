"""
Use-case: provider-shaped chart series (meta, quotes, events) for a symbol.
Depends only on Domain ports, no infrastructure imports.

The payload keeps the provider's vocabulary; the only transformation applied is
timestamp-to-ISO sanitization.
"""

from datetime import datetime
from typing import Any, Callable

from src.application.schemas import GetChartRequest
from src.application.services.period_resolver import resolve_range, utc_now
from src.application.services.result_sanitizer import sanitize
from src.domain.ports.market_data_port import IMarketDataProvider


class GetChartUseCase:
    def __init__(
        self,
        provider: IMarketDataProvider,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self._provider = provider
        self._clock = clock

    async def execute(self, request: GetChartRequest) -> dict[str, Any]:
        period1, period2 = resolve_range(request.period1, request.period2, self._clock())
        chart = await self._provider.chart(
            request.symbol.upper(),
            period1,
            period2,
            interval=request.interval,
            events=request.events,
        )
        return sanitize(chart)

"""
Use-cases: similar-symbol recommendations and research insights for a symbol.
Depends only on Domain ports, no infrastructure imports.
"""

from typing import Any

from src.application.schemas import GetInsightsRequest, GetRecommendationsRequest
from src.application.services.result_sanitizer import sanitize
from src.domain.ports.market_data_port import IMarketDataProvider


class GetRecommendationsUseCase:
    def __init__(self, provider: IMarketDataProvider) -> None:
        self._provider = provider

    async def execute(self, request: GetRecommendationsRequest) -> dict[str, Any]:
        return sanitize(await self._provider.recommendations_by_symbol(request.symbol.upper()))


class GetInsightsUseCase:
    def __init__(self, provider: IMarketDataProvider) -> None:
        self._provider = provider

    async def execute(self, request: GetInsightsRequest) -> dict[str, Any]:
        """Technical events, valuation, and up to *reports_count* research reports."""
        insights = await self._provider.insights(
            request.symbol.upper(),
            reports_count=request.reports_count,
            region=request.region,
            lang=request.lang,
        )
        return sanitize(insights)

"""
Use-case: symbols currently trending in a region.
Depends only on Domain ports, no infrastructure imports.
"""

from typing import Any

from src.application.schemas import GetTrendingSymbolsRequest
from src.application.services.result_sanitizer import sanitize
from src.domain.ports.market_data_port import IMarketDataProvider


class GetTrendingSymbolsUseCase:
    def __init__(self, provider: IMarketDataProvider) -> None:
        self._provider = provider

    async def execute(self, request: GetTrendingSymbolsRequest) -> dict[str, Any]:
        trending = await self._provider.trending_symbols(
            request.region.upper(), count=request.count
        )
        return sanitize(trending)

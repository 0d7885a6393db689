"""
Use-cases: free-text symbol search and news search.
Depends only on Domain ports, no infrastructure imports.
"""

from typing import Any

from src.application.schemas import GetNewsRequest, SearchSymbolsRequest
from src.application.services.result_sanitizer import sanitize
from src.domain.ports.market_data_port import IMarketDataProvider


class SearchSymbolsUseCase:
    def __init__(self, provider: IMarketDataProvider) -> None:
        self._provider = provider

    async def execute(self, request: SearchSymbolsRequest) -> dict[str, Any]:
        return sanitize(await self._provider.search(request.query))


class GetNewsUseCase:
    def __init__(self, provider: IMarketDataProvider) -> None:
        self._provider = provider

    async def execute(self, request: GetNewsRequest) -> list[dict[str, Any]]:
        """Return up to *request.news_count* articles matching *request.query*."""
        articles = await self._provider.news(
            request.query,
            news_count=request.news_count,
            region=request.region,
            lang=request.lang,
        )
        return sanitize(articles)

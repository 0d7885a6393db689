"""
Use-case: selected quote-summary modules for a symbol, in provider vocabulary.
Depends only on Domain ports, no infrastructure imports.
"""

from typing import Any

from src.application.schemas import GetQuoteSummaryRequest
from src.application.services.result_sanitizer import sanitize
from src.domain.ports.market_data_port import IMarketDataProvider


class GetQuoteSummaryUseCase:
    def __init__(self, provider: IMarketDataProvider) -> None:
        self._provider = provider

    async def execute(self, request: GetQuoteSummaryRequest) -> dict[str, Any]:
        summary = await self._provider.quote_summary(request.symbol.upper(), list(request.modules))
        return sanitize(summary)

"""
Use-case: option chain for a symbol, optionally pinned to one expiration date.
Depends only on Domain ports, no infrastructure imports.
"""

from typing import Any

from src.application.schemas import GetOptionsRequest
from src.application.services.result_sanitizer import sanitize
from src.domain.ports.market_data_port import IMarketDataProvider


class GetOptionsUseCase:
    def __init__(self, provider: IMarketDataProvider) -> None:
        self._provider = provider

    async def execute(self, request: GetOptionsRequest) -> dict[str, Any]:
        """Fetch the chain for *request.date*, or the nearest expiration when omitted."""
        chain = await self._provider.options(
            request.symbol.upper(),
            expiration=request.date,
            formatted=request.formatted,
        )
        return sanitize(chain)

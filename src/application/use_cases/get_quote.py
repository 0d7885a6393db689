"""
Use-case: retrieve the current quote for a given symbol as a canonical QuoteRecord.
Depends only on Domain ports and entities, no infrastructure imports.
"""

from typing import Any

from src.application.schemas import GetQuoteRequest
from src.application.services.field_normalizer import normalize_quote
from src.application.services.result_sanitizer import sanitize
from src.domain.ports.market_data_port import IMarketDataProvider


class GetQuoteUseCase:
    def __init__(self, provider: IMarketDataProvider) -> None:
        self._provider = provider

    async def execute(self, request: GetQuoteRequest) -> dict[str, Any]:
        """Fetch the quote for *request.symbol* (uppercased).

        Raises:
            Any exception propagated from the IMarketDataProvider on API failure.
        """
        raw = await self._provider.quote(request.symbol.upper())
        return sanitize(normalize_quote(raw).to_dict())

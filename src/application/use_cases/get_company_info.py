"""
Use-case: company statistics joined with a best-effort company profile.
Depends only on Domain ports and entities, no infrastructure imports.

The statistics and profile lookups run concurrently.  The operation succeeds as soon
as the statistics lookup does; a failed profile lookup is recorded as a PartialResult
and surfaces as "profile": None.
"""

import asyncio
from typing import Any, Optional

from loguru import logger

from src.application.schemas import GetCompanyInfoRequest
from src.application.services.result_sanitizer import sanitize
from src.domain.errors import PartialResult
from src.domain.ports.market_data_port import IMarketDataProvider

STATISTICS_MODULES = ["summaryDetail", "financialData", "defaultKeyStatistics"]
PROFILE_MODULES = ["assetProfile"]


class GetCompanyInfoUseCase:
    def __init__(self, provider: IMarketDataProvider) -> None:
        self._provider = provider

    async def execute(self, request: GetCompanyInfoRequest) -> dict[str, Any]:
        symbol = request.symbol.upper()
        statistics, profile = await asyncio.gather(
            self._provider.quote_summary(symbol, STATISTICS_MODULES),
            self._profile(symbol),
        )
        if isinstance(profile, PartialResult):
            logger.warning("Company profile for {} unavailable: {}", symbol, profile.message)
            profile = None
        return sanitize({"quote": statistics, "profile": profile})

    async def _profile(self, symbol: str) -> Optional[Any]:
        try:
            return await self._provider.quote_summary(symbol, PROFILE_MODULES)
        except Exception as exc:
            return PartialResult(field="profile", message=str(exc))

"""
Infrastructure adapter: Yahoo public screener endpoint -> IScreenerStrategy.

Fallback stage for ScreenerFallbackClient.  Non-2xx answers surface as
UpstreamResponseError (carrying status_code); a 2xx answer without results is an
empty payload, which normalizes to an empty screener result.
"""

from typing import Any

from src.domain.entities.screener import ScreenerQuery
from src.domain.ports.screener_port import IScreenerStrategy
from src.infrastructure.stock_data.yahoo_http_client import YahooHttpClient


class HttpScreenerStrategy(IScreenerStrategy):
    name = "predefined-endpoint"

    def __init__(self, http_client: YahooHttpClient) -> None:
        self._http = http_client

    async def fetch(self, query: ScreenerQuery) -> dict[str, Any]:
        return await self._http.screener(query.scr_id, query.count, query.lang, query.region)

"""
Two-stage screener lookup: a primary strategy, then a fallback strategy on failure.

Both stages return the provider's raw screener payload; the client normalizes
whichever one answered, so callers receive the same ScreenerResult shape no matter
which path served the request.
"""

from typing import Any

from loguru import logger

from src.application.services.field_normalizer import normalize_screener
from src.domain.entities.quote import ScreenerResult
from src.domain.entities.screener import ScreenerQuery
from src.domain.errors import UpstreamUnavailable
from src.domain.ports.market_data_port import IMarketDataProvider
from src.domain.ports.screener_port import IScreenerStrategy


class PrimaryScreenerStrategy(IScreenerStrategy):
    """Structured screener call through the market-data provider."""

    name = "primary"

    def __init__(self, provider: IMarketDataProvider) -> None:
        self._provider = provider

    async def fetch(self, query: ScreenerQuery) -> dict[str, Any]:
        return await self._provider.screener(
            query.scr_id, query.count, lang=query.lang, region=query.region
        )


class ScreenerFallbackClient:
    def __init__(self, primary: IScreenerStrategy, fallback: IScreenerStrategy) -> None:
        self._primary = primary
        self._fallback = fallback

    async def fetch(self, query: ScreenerQuery) -> ScreenerResult:
        """Run the screen, falling back once if the primary stage fails.

        Raises:
            UpstreamUnavailable: if both stages fail.  Carries the fallback's HTTP
                status (when it had one) and the primary stage's error text.
        """
        try:
            raw = await self._primary.fetch(query)
        except Exception as primary_exc:
            logger.warning(
                "Primary screener {} failed for {}: {}; trying {}",
                self._primary.name,
                query.scr_id,
                primary_exc,
                self._fallback.name,
            )
            raw = await self._run_fallback(query, primary_exc)
        return normalize_screener(raw or {}, query.screen)

    async def _run_fallback(self, query: ScreenerQuery, primary_exc: Exception) -> dict[str, Any]:
        try:
            return await self._fallback.fetch(query)
        except Exception as exc:
            status_code = getattr(exc, "status_code", None)
            raise UpstreamUnavailable(
                f"Screener {query.scr_id} unavailable: {exc}",
                status_code=status_code,
                primary_error=str(primary_exc),
            ) from exc

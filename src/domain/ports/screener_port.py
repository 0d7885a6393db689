"""
Port (interface) for one stage of a screener lookup.
Two implementations are composed by ScreenerFallbackClient: a primary strategy
backed by the structured provider call and a fallback strategy that queries the
provider's public screener endpoint directly.
"""

from abc import ABC, abstractmethod
from typing import Any

from src.domain.entities.screener import ScreenerQuery


class IScreenerStrategy(ABC):
    name: str = "screener"

    @abstractmethod
    async def fetch(self, query: ScreenerQuery) -> dict[str, Any]:
        """Return the raw screener payload (id, title, count, quotes, ...).

        An empty dict is a valid answer meaning "no results".
        Raises on any upstream failure.
        """
        ...

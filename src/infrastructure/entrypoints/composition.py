"""
Composition Root shared by every entry point.

Wires settings, logging, the Yahoo HTTP client, the yfinance provider and the
fallback screener into one MarketDataGateway.  Entry points call build_gateway()
once at startup.
"""

from typing import Optional

from src.application.operations import MarketDataGateway
from src.infrastructure.config.settings import GatewaySettings
from src.infrastructure.logging.logger import configure_logging
from src.infrastructure.stock_data.screener_strategy import HttpScreenerStrategy
from src.infrastructure.stock_data.yahoo_http_client import YahooHttpClient
from src.infrastructure.stock_data.yfinance_adapter import YFinanceMarketDataProvider


def build_gateway(settings: Optional[GatewaySettings] = None) -> MarketDataGateway:
    settings = settings or GatewaySettings.from_env()
    configure_logging(settings)
    http_client = YahooHttpClient(timeout=settings.http_timeout, user_agent=settings.user_agent)
    return MarketDataGateway(
        provider=YFinanceMarketDataProvider(http_client),
        fallback_screener=HttpScreenerStrategy(http_client),
    )

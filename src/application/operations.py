"""
Operation facade: the single entry point every front-end goes through.

MarketDataGateway owns the operation table (name -> parameter model, description,
use-case, tool category).  It validates the parameter bag, runs the use-case and
classifies failures:

  - call()   returns a JSON-safe result or raises a GatewayError subclass
  - invoke() never raises; failures come back as an error descriptor dict

Dependency-injection contract: receives an IMarketDataProvider and the fallback
IScreenerStrategy; never imports yfinance or httpx directly.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Callable, Optional

import pydantic
from loguru import logger

from src.application import schemas
from src.application.services.period_resolver import utc_now
from src.application.services.screener_client import PrimaryScreenerStrategy, ScreenerFallbackClient
from src.application.use_cases.get_chart import GetChartUseCase
from src.application.use_cases.get_company_info import GetCompanyInfoUseCase
from src.application.use_cases.get_historical_data import GetHistoricalDataUseCase
from src.application.use_cases.get_market_movers import GetMarketMoversUseCase
from src.application.use_cases.get_market_summary import GetMarketSummaryUseCase
from src.application.use_cases.get_options import GetOptionsUseCase
from src.application.use_cases.get_quote import GetQuoteUseCase
from src.application.use_cases.get_quote_summary import GetQuoteSummaryUseCase
from src.application.use_cases.get_recommendations import GetInsightsUseCase, GetRecommendationsUseCase
from src.application.use_cases.get_trending_symbols import GetTrendingSymbolsUseCase
from src.application.use_cases.search_symbols import GetNewsUseCase, SearchSymbolsUseCase
from src.domain.entities.screener import DAY_GAINERS, DAY_LOSERS
from src.domain.errors import GatewayError, UpstreamUnavailable, ValidationError
from src.domain.ports.market_data_port import IMarketDataProvider
from src.domain.ports.screener_port import IScreenerStrategy

BASIC = "basic"
ADVANCED = "advanced"
ANALYSIS = "analysis"
NEWS = "news"


@dataclass(frozen=True)
class Operation:
    name: str
    description: str
    request_model: type[schemas.OperationRequest]
    use_case: Any
    category: str


class MarketDataGateway:
    def __init__(
        self,
        provider: IMarketDataProvider,
        fallback_screener: IScreenerStrategy,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        """
        Args:
            provider:          IMarketDataProvider implementation (e.g. YFinanceMarketDataProvider).
            fallback_screener: Strategy used when the provider's screener call fails.
            clock:             Evaluation instant for "now" periods and result timestamps.
        """
        screener = ScreenerFallbackClient(PrimaryScreenerStrategy(provider), fallback_screener)
        operations = (
            Operation("get_quote", "Get current stock quote information",
                      schemas.GetQuoteRequest, GetQuoteUseCase(provider), BASIC),
            Operation("get_historical_data", "Get historical stock data",
                      schemas.GetHistoricalDataRequest, GetHistoricalDataUseCase(provider, clock), ADVANCED),
            Operation("search_symbols", "Search for stock symbols",
                      schemas.SearchSymbolsRequest, SearchSymbolsUseCase(provider), BASIC),
            Operation("get_company_info", "Get company information and statistics",
                      schemas.GetCompanyInfoRequest, GetCompanyInfoUseCase(provider), BASIC),
            Operation("get_recommendations", "Get symbols similar to a stock, as recommended by Yahoo Finance",
                      schemas.GetRecommendationsRequest, GetRecommendationsUseCase(provider), ANALYSIS),
            Operation("get_trending_symbols", "Get trending symbols from Yahoo Finance",
                      schemas.GetTrendingSymbolsRequest, GetTrendingSymbolsUseCase(provider), NEWS),
            Operation("get_market_summary", "Get market summary with major indices",
                      schemas.GetMarketSummaryRequest, GetMarketSummaryUseCase(provider, clock), BASIC),
            Operation("get_news", "Search for news articles related to a query",
                      schemas.GetNewsRequest, GetNewsUseCase(provider), NEWS),
            Operation("get_options", "Get options chain data for a stock",
                      schemas.GetOptionsRequest, GetOptionsUseCase(provider), ADVANCED),
            Operation("get_insights", "Get technical insights, valuation and research reports for a stock",
                      schemas.GetInsightsRequest, GetInsightsUseCase(provider), ANALYSIS),
            Operation("get_daily_gainers", "Get the stocks with the greatest gains in the trading day",
                      schemas.GetDailyGainersRequest,
                      GetMarketMoversUseCase(screener, DAY_GAINERS, clock), ANALYSIS),
            Operation("get_daily_losers", "Get the stocks with the greatest losses in the trading day",
                      schemas.GetDailyLosersRequest,
                      GetMarketMoversUseCase(screener, DAY_LOSERS, clock), ANALYSIS),
            Operation("get_chart", "Get chart data with price series and dividend/split events",
                      schemas.GetChartRequest, GetChartUseCase(provider, clock), ADVANCED),
            Operation("get_quote_summary", "Get selected quote summary modules for a stock",
                      schemas.GetQuoteSummaryRequest, GetQuoteSummaryUseCase(provider), ADVANCED),
        )
        self._operations = {operation.name: operation for operation in operations}

    @property
    def operations(self) -> tuple[Operation, ...]:
        return tuple(self._operations.values())

    def operation(self, name: str) -> Operation:
        if not isinstance(name, str) or name not in self._operations:
            raise ValidationError(f"Unknown operation: {name!r}", field="operation")
        return self._operations[name]

    def validate(self, name: str, params: Optional[Mapping[str, Any]] = None) -> schemas.OperationRequest:
        """Validate *params* against the operation's declared shape.

        Raises:
            ValidationError: naming the first offending field.
        """
        operation = self.operation(name)
        if params is None:
            params = {}
        if not isinstance(params, Mapping):
            raise ValidationError(
                f"Parameters must be an object, got {type(params).__name__}",
                field="params",
                operation=name,
            )
        try:
            return operation.request_model.model_validate(dict(params))
        except pydantic.ValidationError as exc:
            first = exc.errors()[0]
            field = ".".join(str(part) for part in first["loc"]) or "params"
            raise ValidationError(
                f"Invalid parameter {field!r}: {first['msg']}",
                field=field,
                operation=name,
                details={"errors": exc.errors(include_url=False, include_context=False, include_input=False)},
            ) from exc

    async def call(self, name: str, params: Optional[Mapping[str, Any]] = None) -> Any:
        request = self.validate(name, params)
        logger.debug("Calling {} with {}", name, request.model_dump(mode="json"))
        try:
            return await self._operations[name].use_case.execute(request)
        except GatewayError as exc:
            exc.operation = exc.operation or name
            logger.error("{} failed: {}", name, exc.message)
            raise
        except Exception as exc:
            logger.error("{} failed upstream: {}", name, exc)
            raise UpstreamUnavailable(str(exc) or type(exc).__name__, operation=name) from exc

    async def invoke(self, name: str, params: Optional[Mapping[str, Any]] = None) -> Any:
        """Boundary-safe variant of call(): returns the result or an error descriptor."""
        try:
            return await self.call(name, params)
        except GatewayError as exc:
            return exc.to_dict()

"""
Declared parameter shapes for every gateway operation.

Each model is an immutable OperationRequest: created per call, validated once,
discarded afterwards.  The same models feed the tool registry (args_schema),
the HTTP schema listing and the MCP server, so descriptions and defaults live here only.
"""

import datetime as dt
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_SUMMARY_MODULES = [
    "summaryDetail",
    "financialData",
    "recommendationTrend",
    "defaultKeyStatistics",
]

INTERVAL_HELP = "Data interval (1m, 2m, 5m, 15m, 30m, 60m, 90m, 1h, 1d, 5d, 1wk, 1mo, 3mo)"


class OperationRequest(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore", str_strip_whitespace=True)


class SymbolRequest(OperationRequest):
    symbol: str = Field(min_length=1, description="Stock symbol (e.g., AAPL, GOOGL)")


class GetQuoteRequest(SymbolRequest):
    pass


class GetHistoricalDataRequest(SymbolRequest):
    period1: str = Field(default="1y", description="Start date (YYYY-MM-DD) or period like '1mo', '1y'")
    period2: str = Field(default="now", description="End date (YYYY-MM-DD) or 'now'")
    interval: str = Field(default="1d", description=INTERVAL_HELP)


class SearchSymbolsRequest(OperationRequest):
    query: str = Field(min_length=1, description="Search query")


class GetCompanyInfoRequest(SymbolRequest):
    pass


class GetRecommendationsRequest(SymbolRequest):
    pass


class GetTrendingSymbolsRequest(OperationRequest):
    region: str = Field(default="US", description="Region (US, GB, CA, etc.)")
    count: int = Field(default=10, gt=0, description="Number of trending symbols to return")


class GetMarketSummaryRequest(OperationRequest):
    pass


class GetNewsRequest(OperationRequest):
    query: str = Field(min_length=1, description="Search query for news")
    news_count: int = Field(default=10, gt=0, description="Number of news articles to return")
    region: str = Field(default="US", description="Region for news search (US, GB, CA, etc.)")
    lang: str = Field(default="en-US", description="Language for news search")


class GetOptionsRequest(SymbolRequest):
    date: Optional[dt.date] = Field(
        default=None, description="Expiration date for options (YYYY-MM-DD format)"
    )
    formatted: bool = Field(default=False, description="Whether to format the data")


class GetInsightsRequest(SymbolRequest):
    reports_count: int = Field(default=5, gt=0, description="Number of reports to return")
    region: str = Field(default="US", description="Region (US, GB, CA, etc.)")
    lang: str = Field(default="en-US", description="Language code")


class ScreenerRequest(OperationRequest):
    count: int = Field(default=10, gt=0, le=250, description="Number of stocks to return")
    region: str = Field(default="US", description="Region (US, GB, CA, etc.)")
    lang: str = Field(default="en-US", description="Language code")


class GetDailyGainersRequest(ScreenerRequest):
    pass


class GetDailyLosersRequest(ScreenerRequest):
    pass


class GetChartRequest(SymbolRequest):
    period1: str = Field(default="1mo", description="Start date (YYYY-MM-DD) or period like '1mo', '1y'")
    period2: str = Field(default="now", description="End date (YYYY-MM-DD) or 'now'")
    interval: str = Field(default="1d", description=INTERVAL_HELP)
    events: str = Field(default="div|split|earn", description="Event types to return (div|split|earn)")


class GetQuoteSummaryRequest(SymbolRequest):
    modules: list[str] = Field(
        default_factory=lambda: list(DEFAULT_SUMMARY_MODULES),
        min_length=1,
        description="List of modules to include",
    )

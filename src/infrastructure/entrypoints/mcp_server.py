"""
MCP entry point: exposes every gateway operation as an MCP tool, plus a few
ready-made resources (market summary, trending symbols, daily movers, general news).

Tool failures are returned as the gateway's error descriptor, never raised, so the
agent always receives a JSON payload it can read.

Run (stdio, for desktop MCP clients):
    python -m src.infrastructure.entrypoints.mcp_server
Run (SSE):
    python -m src.infrastructure.entrypoints.mcp_server --transport sse
"""

import argparse
import inspect
import json
from typing import Annotated, Any

from loguru import logger
from mcp.server.fastmcp import FastMCP
from pydantic import Field

from src.application.operations import MarketDataGateway, Operation
from src.domain.errors import GatewayError
from src.infrastructure.config.settings import GatewaySettings
from src.infrastructure.entrypoints.composition import build_gateway

SERVER_NAME = "yahoo-finance-mcp"


def create_server(gateway: MarketDataGateway, settings: GatewaySettings) -> FastMCP:
    mcp = FastMCP(SERVER_NAME)
    region, lang = settings.default_region, settings.default_lang

    for operation in gateway.operations:
        mcp.add_tool(
            _tool_function(gateway, operation),
            name=operation.name,
            description=operation.description,
        )

    async def read(operation: str, params: dict[str, Any]) -> str:
        try:
            result = await gateway.call(operation, params)
        except GatewayError as exc:
            raise RuntimeError(f"Failed to read resource for {operation}: {exc.message}") from exc
        return json.dumps(result, indent=2)

    @mcp.resource("yahoo-finance://market-summary", mime_type="application/json")
    async def market_summary() -> str:
        """Current market summary and major indices."""
        return await read("get_market_summary", {})

    @mcp.resource("yahoo-finance://trending-symbols", mime_type="application/json")
    async def trending_symbols() -> str:
        """Currently trending symbols."""
        return await read("get_trending_symbols", {"region": region})

    @mcp.resource("yahoo-finance://daily-gainers", mime_type="application/json")
    async def daily_gainers() -> str:
        """Stocks with highest gains today."""
        return await read("get_daily_gainers", {"count": 10, "region": region, "lang": lang})

    @mcp.resource("yahoo-finance://daily-losers", mime_type="application/json")
    async def daily_losers() -> str:
        """Stocks with highest losses today."""
        return await read("get_daily_losers", {"count": 10, "region": region, "lang": lang})

    @mcp.resource("yahoo-finance://news/general", mime_type="application/json")
    async def general_news() -> str:
        """General market news and updates."""
        return await read("get_news", {"query": "market", "news_count": 10, "region": region, "lang": lang})

    return mcp


def _tool_function(gateway: MarketDataGateway, operation: Operation):
    """Wrap one operation in a coroutine whose signature mirrors its request model.

    FastMCP derives the tool input schema from the signature, so the tool exposes
    the request model's fields, defaults and descriptions without restating them.
    """

    async def run(**params: Any) -> Any:
        return await gateway.invoke(operation.name, params)

    parameters = [
        inspect.Parameter(
            name,
            inspect.Parameter.KEYWORD_ONLY,
            default=(
                inspect.Parameter.empty
                if field.is_required()
                else field.get_default(call_default_factory=True)
            ),
            annotation=Annotated[field.annotation, Field(description=field.description)],
        )
        for name, field in operation.request_model.model_fields.items()
    ]
    run.__signature__ = inspect.Signature(parameters, return_annotation=Any)
    run.__name__ = operation.name
    run.__doc__ = operation.description
    return run


def main() -> None:
    parser = argparse.ArgumentParser(description="Yahoo Finance MCP server")
    parser.add_argument("--transport", choices=("stdio", "sse"), default="stdio")
    args = parser.parse_args()

    settings = GatewaySettings.from_env()
    server = create_server(build_gateway(settings), settings)
    logger.info("{} running on {}", SERVER_NAME, args.transport)
    server.run(transport=args.transport)


if __name__ == "__main__":
    main()

"""
LangChain tool wrappers, infrastructure entrypoint.

The LangChain tool type is an infrastructure concern and must NOT appear in the
application or domain layers.  This module binds each gateway operation to a
StructuredTool whose args_schema is the operation's own parameter model, so the
agent sees exactly the declared shape and defaults.
"""

from typing import Any, Optional

from langchain_core.tools import StructuredTool

from src.application.operations import MarketDataGateway, Operation


def create_tools(
    gateway: MarketDataGateway,
    category: Optional[str] = None,
) -> list[StructuredTool]:
    """Build one async tool per gateway operation.

    Args:
        gateway:  MarketDataGateway with its provider already injected.
        category: Optional filter ("basic", "advanced", "analysis", "news").

    Returns:
        List of StructuredTool objects.  Each tool returns the operation result, or
        {'error': '<message>', 'kind': ..., ...} when the call fails.
    """
    return [
        _build_tool(gateway, operation)
        for operation in gateway.operations
        if category is None or operation.category == category
    ]


def _build_tool(gateway: MarketDataGateway, operation: Operation) -> StructuredTool:
    async def run(**params: Any) -> Any:
        return await gateway.invoke(operation.name, params)

    return StructuredTool.from_function(
        coroutine=run,
        name=operation.name,
        description=operation.description,
        args_schema=operation.request_model,
    )

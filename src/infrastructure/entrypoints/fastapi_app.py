"""
FastAPI entry point: request/response HTTP front-end over the gateway.

This module is the Composition Root for HTTP runs: it builds the gateway once and
exposes every operation under /operations/{name}.  Classified failures map onto
HTTP statuses (ValidationError -> 422, UpstreamUnavailable -> 502) with the error
descriptor as body.

Run locally:
    uvicorn src.infrastructure.entrypoints.fastapi_app:app --reload --port 8000
"""

from typing import Any, Optional

from fastapi import Body, FastAPI, Request
from fastapi.responses import JSONResponse

from src.application.operations import MarketDataGateway
from src.domain.errors import GatewayError, UpstreamUnavailable, ValidationError
from src.infrastructure.entrypoints.composition import build_gateway

_STATUS_BY_ERROR = {
    ValidationError: 422,
    UpstreamUnavailable: 502,
}


def create_app(gateway: MarketDataGateway) -> FastAPI:
    app = FastAPI(title="Yahoo Finance Market Data Gateway")

    @app.exception_handler(GatewayError)
    async def gateway_error_handler(request: Request, exc: GatewayError) -> JSONResponse:
        status = _STATUS_BY_ERROR.get(type(exc), 500)
        return JSONResponse(status_code=status, content=exc.to_dict())

    @app.get("/health")
    async def health():
        return {"status": "ok"}

    @app.get("/operations")
    async def list_operations():
        """Every operation with its description, category and JSON parameter schema."""
        return [
            {
                "name": operation.name,
                "description": operation.description,
                "category": operation.category,
                "parameters": operation.request_model.model_json_schema(),
            }
            for operation in gateway.operations
        ]

    @app.post("/operations/{name}")
    async def call_operation(name: str, params: Optional[dict[str, Any]] = Body(default=None)):
        return await gateway.call(name, params or {})

    return app


app = create_app(build_gateway())

"""Shared fixtures: an in-memory provider, a scripted fallback screener and a gateway wired to both."""

import pytest

from src.application.operations import MarketDataGateway
from tests.fakes import FIXED_NOW, FakeMarketDataProvider, ScriptedScreenerStrategy


def pytest_addoption(parser: pytest.Parser) -> None:
    parser.addoption(
        "--run-integration",
        action="store_true",
        default=False,
        help="Run tests that call the real Yahoo Finance endpoints.",
    )


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    if config.getoption("--run-integration"):
        return
    skip_integration = pytest.mark.skip(reason="integration tests require --run-integration")
    for item in items:
        if "integration" in item.keywords:
            item.add_marker(skip_integration)


@pytest.fixture
def provider() -> FakeMarketDataProvider:
    return FakeMarketDataProvider()


@pytest.fixture
def fallback() -> ScriptedScreenerStrategy:
    return ScriptedScreenerStrategy()


@pytest.fixture
def gateway(provider: FakeMarketDataProvider, fallback: ScriptedScreenerStrategy) -> MarketDataGateway:
    return MarketDataGateway(provider, fallback, clock=lambda: FIXED_NOW)

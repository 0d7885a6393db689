"""
Domain entities describing predefined screener queries.
Zero external dependencies, pure Python dataclasses only.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ScreenDefinition:
    scr_id: str
    title: str
    description: str


DAY_GAINERS = ScreenDefinition(
    scr_id="day_gainers",
    title="Day Gainers",
    description="Discover the equities with the greatest gains in the trading day.",
)

DAY_LOSERS = ScreenDefinition(
    scr_id="day_losers",
    title="Day Losers",
    description="Discover the equities with the greatest losses in the trading day.",
)


@dataclass(frozen=True)
class ScreenerQuery:
    screen: ScreenDefinition
    count: int = 10
    lang: str = "en-US"
    region: str = "US"

    @property
    def scr_id(self) -> str:
        return self.screen.scr_id

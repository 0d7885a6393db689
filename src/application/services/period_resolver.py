"""
Period resolution for range-bearing operations (historical data, chart).

A period expression is one of:
  - "now"          resolved to the evaluation instant supplied by the caller
  - "YYYY-MM-DD"   resolved to midnight UTC of that calendar date
  - anything else  an opaque shorthand ("1mo", "1y", "ytd") forwarded unchanged;
                   the upstream provider owns the shorthand grammar.

Resolution never raises for string input and is deterministic for a fixed `now`.
"""

import re
from datetime import datetime, timezone

from src.domain.ports.market_data_port import PeriodBound

NOW = "now"

_EXACT_DATE = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")


def resolve_period(expression: str, now: datetime) -> PeriodBound:
    if expression == NOW:
        return now
    if _EXACT_DATE.fullmatch(expression):
        try:
            return datetime.strptime(expression, "%Y-%m-%d").replace(tzinfo=timezone.utc)
        except ValueError:
            # Date-shaped but not a calendar date (e.g. 2024-13-40).
            return expression
    return expression


def resolve_range(
    period1: str, period2: str, now: datetime
) -> tuple[PeriodBound, PeriodBound]:
    """Resolve both bounds of a range against the same evaluation instant."""
    return resolve_period(period1, now), resolve_period(period2, now)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)

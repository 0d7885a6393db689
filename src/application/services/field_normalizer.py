"""
Table-driven normalization of raw quote / screener records into canonical entities.

QUOTE_FIELDS declares, for each canonical attribute, the raw key it is read from and
(optionally) another raw key to fall back on.  An optional converter
unifies representations that differ between upstream paths (epoch seconds vs
datetime for regularMarketTime).  A value counts as absent when the key
is missing, None or an empty string; absent values become None, never omitted.
Adding a canonical field is a change to QUOTE_FIELDS and QuoteRecord only.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Callable, Optional

from loguru import logger

from src.domain.entities.quote import QuoteRecord, ScreenerResult
from src.domain.entities.screener import ScreenDefinition


@dataclass(frozen=True)
class FieldRule:
    attribute: str
    source: str
    fallback: Optional[str] = None
    default: Any = None
    convert: Optional[Callable[[Any], Any]] = None


def epoch_to_datetime(value: Any) -> Any:
    """Epoch seconds become an aware UTC datetime; anything else is returned as is."""
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return datetime.fromtimestamp(value, tz=timezone.utc)
    return value


QUOTE_FIELDS: tuple[FieldRule, ...] = (
    FieldRule("short_name", "shortName", fallback="symbol"),
    FieldRule("regular_market_price", "regularMarketPrice"),
    FieldRule("regular_market_change", "regularMarketChange"),
    FieldRule("regular_market_change_percent", "regularMarketChangePercent"),
    FieldRule("regular_market_volume", "regularMarketVolume"),
    FieldRule("market_cap", "marketCap"),
    FieldRule("exchange", "exchange"),
    FieldRule("full_exchange_name", "fullExchangeName"),
    FieldRule("regular_market_time", "regularMarketTime", convert=epoch_to_datetime),
)


def _is_absent(value: Any) -> bool:
    return value is None or value == ""


def _lookup(raw: Mapping[str, Any], rule: FieldRule) -> Any:
    value = raw.get(rule.source)
    if _is_absent(value) and rule.fallback is not None:
        value = raw.get(rule.fallback)
    if _is_absent(value):
        return rule.default
    return rule.convert(value) if rule.convert else value


def normalize_quote(raw: Mapping[str, Any]) -> QuoteRecord:
    """Map one raw record onto QuoteRecord.

    Raises:
        ValueError: if the record carries no symbol.
    """
    symbol = raw.get("symbol")
    if _is_absent(symbol):
        raise ValueError("quote record has no symbol")
    values = {rule.attribute: _lookup(raw, rule) for rule in QUOTE_FIELDS}
    return QuoteRecord(symbol=symbol, **values)


def normalize_screener(raw: Mapping[str, Any], screen: ScreenDefinition) -> ScreenerResult:
    """Map a raw screener payload onto ScreenerResult, preserving upstream order.

    `count` always reflects the normalized quote sequence, whatever upstream reported.
    """
    quotes = []
    for record in raw.get("quotes") or []:
        if not isinstance(record, Mapping) or _is_absent(record.get("symbol")):
            logger.warning("Dropping screener record without symbol from {}", screen.scr_id)
            continue
        quotes.append(normalize_quote(record))

    return ScreenerResult(
        id=raw.get("id") or screen.scr_id,
        title=raw.get("title") or screen.title,
        description=raw.get("description") or screen.description,
        count=len(quotes),
        total=raw.get("total") or 0,
        start=raw.get("start") or 0,
        quotes=tuple(quotes),
    )

"""
Recursive JSON-safety transform for provider payloads.

Timestamps (datetime, date, and their pandas subclasses) become ISO-8601 strings,
tuples become lists; every other value passes through unchanged.  Mapping keys are
sanitized the same way so frames keyed by timestamp survive serialization.
The transform is pure and idempotent.
"""

from collections.abc import Mapping
from datetime import date, datetime, time
from typing import Any


def sanitize(value: Any) -> Any:
    if isinstance(value, (datetime, date, time)):
        return value.isoformat()
    if isinstance(value, Mapping):
        return {_sanitize_key(key): sanitize(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [sanitize(item) for item in value]
    return value


def _sanitize_key(key: Any) -> Any:
    if isinstance(key, (datetime, date, time)):
        return key.isoformat()
    return key

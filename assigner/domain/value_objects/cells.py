"""Loose-typed cell coercion for tabular plan rows.

Rows arrive from spreadsheets and JSON uploads, so a single column may hold
strings, numbers, NaN floats or ``None``. These helpers never raise: bad
numbers become 0, bad text becomes "" and bad dates become ``None``.
"""

from __future__ import annotations

import logging
import math
import re
from datetime import date, datetime, timezone

logger = logging.getLogger(__name__)

# Placeholder names exported by the upstream planning sheet for "nobody"
RESOURCE_SENTINELS = frozenset({"", "None", "nan"})

_DATE_FORMATS = (
    "%Y-%m-%d %H:%M",
    "%Y-%m-%d %H:%M:%S",
    "%d.%m.%Y",
    # Slash dates are month-first; day-first only when the month would be > 12
    "%m/%d/%Y",
    "%d/%m/%Y",
)

_FLOAT_PREFIX = re.compile(r"^\s*[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?")


def _is_nan(value: object) -> bool:
    return isinstance(value, float) and math.isnan(value)


def to_text(value: object) -> str:
    """Render a cell as stripped text ("" for missing values)."""
    if value is None or _is_nan(value):
        return ""
    if isinstance(value, float) and value.is_integer():
        # 7.0 -> "7" so ids read from numeric columns stay stable
        return str(int(value))
    return str(value).strip()


def to_number(value: object) -> float:
    """Render a cell as a finite float, 0.0 when it is not numeric."""
    if isinstance(value, bool):
        return float(value)
    if isinstance(value, (int, float)):
        number = float(value)
    elif isinstance(value, str):
        try:
            number = float(value.replace(",", ".").strip())
        except ValueError:
            return 0.0
    else:
        return 0.0
    return number if math.isfinite(number) else 0.0


def to_resource_name(value: object) -> str | None:
    """Resource name of a cell, ``None`` for the sentinel placeholders."""
    name = to_text(value)
    if name in RESOURCE_SENTINELS:
        return None
    return name


def _as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def parse_datetime(value: object) -> datetime | None:
    """Parse a date-like cell into an aware datetime.

    Naive values are taken as UTC. Returns ``None`` for anything unparseable.
    """
    if isinstance(value, datetime):
        return _as_utc(value)
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day, tzinfo=timezone.utc)
    if not isinstance(value, str):
        return None

    raw = value.strip()
    if not raw:
        return None
    try:
        iso = raw[:-1] + "+00:00" if raw.endswith("Z") else raw
        return _as_utc(datetime.fromisoformat(iso))
    except ValueError:
        pass
    for fmt in _DATE_FORMATS:
        try:
            return _as_utc(datetime.strptime(raw, fmt))
        except ValueError:
            continue
    logger.debug("Could not parse date: %s", raw)
    return None


def format_timestamp(value: datetime) -> str:
    """UTC timestamp with millisecond precision, e.g. 2025-03-01T00:00:00.000Z."""
    utc = _as_utc(value).astimezone(timezone.utc)
    return utc.strftime("%Y-%m-%dT%H:%M:%S") + f".{utc.microsecond // 1000:03d}Z"


def parse_float_prefix(value: object) -> float | None:
    """Parse the leading number of a cell ("12.5h" -> 12.5), ``None`` if there is none."""
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return None if _is_nan(value) else float(value)
    if not isinstance(value, str):
        return None
    match = _FLOAT_PREFIX.match(value)
    if not match:
        return None
    return float(match.group(0))

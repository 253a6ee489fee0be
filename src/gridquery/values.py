"""Type-aware value validation and canonical, locale-independent encodings."""

from __future__ import annotations

import logging
import re
from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from typing import Any

from gridquery.config import GridQueryConfig
from gridquery.schema import ValueType

logger = logging.getLogger(__name__)

DATE_FORMAT = "%Y-%m-%d"
DATETIME_FORMAT = "%Y-%m-%dT%H:%M:%S"

_NUMBER_RE = re.compile(r"^\s*[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?\s*$", re.ASCII)
_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$", re.ASCII)
_DATETIME_RE = re.compile(r"^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}(\.\d{3})?$", re.ASCII)
_BOOLEAN_VALUES = {"true": True, "false": False}

_MONTHS = (
    "january", "february", "march", "april", "may", "june",
    "july", "august", "september", "october", "november", "december",
)
_MONTH_NUMBERS = {
    **{name: number for number, name in enumerate(_MONTHS, start=1)},
    **{name[:3]: number for number, name in enumerate(_MONTHS, start=1)},
    "sept": 9,
}
_MONTH_WORD_RE = re.compile(r"\b([A-Za-z]+)\.?(?=[\s,]|$)", re.ASCII)
_MERIDIEM_RE = re.compile(r"\s*(?<![A-Za-z])([AaPp])\.?[Mm]\.?$", re.ASCII)


def validate_value(raw: str, value_type: ValueType) -> str | None:
    """Check a value read from a query against the property type.

    Returns the value to store (booleans normalized to lower case) or None
    when the value does not conform. Empty values never conform.
    """
    if not raw:
        return None

    if value_type == ValueType.STRING:
        return raw

    if value_type == ValueType.NUMBER:
        return raw if parse_number(raw) is not None else None

    if value_type == ValueType.BOOLEAN:
        normalized = raw.strip().lower()
        return normalized if normalized in _BOOLEAN_VALUES else None

    if value_type == ValueType.DATE:
        if _DATE_RE.match(raw) and _strptime(raw, DATE_FORMAT) is not None:
            return raw
        return None

    if value_type == ValueType.DATETIME:
        if not _DATETIME_RE.match(raw):
            return None
        fmt = DATETIME_FORMAT + ".%f" if "." in raw else DATETIME_FORMAT
        return raw if _strptime(raw, fmt) is not None else None

    return None


def parse_number(raw: str) -> Decimal | None:
    """Parse invariant decimal text ("1234.5", "-1e3"); no grouping, no locale."""
    if not _NUMBER_RE.match(raw):
        return None
    try:
        return Decimal(raw.strip())
    except InvalidOperation:
        return None


def parse_boolean(raw: str) -> bool | None:
    return _BOOLEAN_VALUES.get(raw.strip().lower())


def _strptime(raw: str, fmt: str) -> datetime | None:
    try:
        return datetime.strptime(raw, fmt)
    except ValueError:
        return None


def coerce_datetime(raw: str, config: GridQueryConfig | None = None) -> datetime | None:
    """Best-effort reading of a date/time typed by a user or produced by a widget.

    ISO 8601 is tried first, then the invariant layouts from the config.
    Time zone information is dropped; the wall-clock fields are kept.
    """
    config = config or GridQueryConfig()
    text = raw.strip()
    if not text:
        return None
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        parsed = None
    if parsed is None:
        numeric, meridiem = _english_to_numeric(text)
        for fmt in config.date_input_formats:
            parsed = _strptime(numeric, fmt)
            if parsed is not None:
                break
        if parsed is not None and meridiem is not None:
            parsed = _apply_meridiem(parsed, meridiem)
    if parsed is None:
        return None
    return parsed.replace(tzinfo=None)


def _english_to_numeric(text: str) -> tuple[str, str | None]:
    """Rewrite English month names as ``M01``..``M12`` and strip a trailing AM/PM.

    strptime's %B, %b and %p follow the process locale, so fixed tables are
    used instead. Returns the rewritten text and "a", "p" or None.
    """
    meridiem = None
    marker = _MERIDIEM_RE.search(text)
    if marker is not None:
        meridiem = marker.group(1).lower()
        text = text[: marker.start()]

    def month(match: re.Match[str]) -> str:
        number = _MONTH_NUMBERS.get(match.group(1).lower())
        return match.group(0) if number is None else f"M{number:02d}"

    return _MONTH_WORD_RE.sub(month, text), meridiem


def _apply_meridiem(parsed: datetime, meridiem: str) -> datetime | None:
    if not 1 <= parsed.hour <= 12:
        return None
    hour = parsed.hour % 12 + (12 if meridiem == "p" else 0)
    return parsed.replace(hour=hour)


def format_value(
    raw: str,
    value_type: ValueType,
    *,
    case_insensitive: bool = False,
    config: GridQueryConfig | None = None,
) -> str:
    """Render a raw value the way it appears in a query token."""
    value = raw or ""

    if value_type == ValueType.STRING:
        if case_insensitive and value.strip():
            return f"{value}/i"
        return value

    if value_type == ValueType.BOOLEAN:
        flag = parse_boolean(value)
        return value if flag is None else str(flag).lower()

    if value_type in (ValueType.DATE, ValueType.DATETIME):
        parsed = coerce_datetime(value, config)
        if parsed is None:
            logger.debug("Leaving unparseable %s value %r as-is", value_type.value, value)
            return value
        # isoformat keeps four-digit years below 1000; strftime("%Y") may not
        if value_type == ValueType.DATE:
            return parsed.date().isoformat()
        return parsed.replace(microsecond=0).isoformat()

    return value


def coerce_value(value: Any, value_type: ValueType) -> Any:
    """Convert a query value or a row value to a comparable Python value.

    Returns None when the value cannot be represented in the given type.
    """
    if value is None:
        return None

    if value_type == ValueType.STRING:
        return value if isinstance(value, str) else str(value)

    if value_type == ValueType.NUMBER:
        if isinstance(value, bool):
            return None
        if isinstance(value, (int, Decimal)):
            number = Decimal(value)
        elif isinstance(value, float):
            number = Decimal(repr(value))
        else:
            number = parse_number(str(value))
        # NaN and infinities have no ordering
        if number is None or not number.is_finite():
            return None
        return number

    if value_type == ValueType.BOOLEAN:
        if isinstance(value, bool):
            return value
        return parse_boolean(str(value))

    if value_type == ValueType.DATE:
        if isinstance(value, datetime):
            return value.date()
        if isinstance(value, date):
            return value
        parsed = coerce_datetime(str(value))
        return parsed.date() if parsed is not None else None

    if value_type == ValueType.DATETIME:
        if isinstance(value, datetime):
            return value.replace(tzinfo=None)
        if isinstance(value, date):
            return datetime(value.year, value.month, value.day)
        return coerce_datetime(str(value))

    return None

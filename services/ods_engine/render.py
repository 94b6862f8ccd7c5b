"""Value rendering - turns values into text by walking the format parts.

The output is a rough approximation built on str.format and
datetime.strftime. There is no real i18n here: month and weekday names and
the AM/PM marker come from the host's C locale. The consuming application
applies its own formatting rules when it opens the document, so nobody
typically notices.

Every entry point walks the parts in order. Parts that mean nothing for the
value kind are skipped, and malformed attributes fall back to defaults.
Rendering never raises.
"""

from __future__ import annotations

import logging
from datetime import datetime, timedelta
from typing import TYPE_CHECKING, List, Optional

from services.engine_config import get_engine_settings

from .schemas import FormatNumberStyle, FormatPartType

if TYPE_CHECKING:
    from .format import FormatPart, ValueFormat

logger = logging.getLogger(__name__)


# =============================================================================
# ATTRIBUTE HELPERS
# =============================================================================

def _is_long(part: FormatPart) -> bool:
    return part.attr.attr_def("number:style", "") == FormatNumberStyle.LONG.value


def _is_textual(part: FormatPart) -> bool:
    return part.attr.attr_def("number:textual", "") == "true"


def _decimal_places(part: FormatPart) -> Optional[int]:
    """number:decimal-places, None if absent or unparsable."""
    name = "number:decimal-places"
    raw = part.attr.attr(name)
    if raw is None:
        return None
    try:
        value = int(raw)
    except ValueError:
        logger.debug(f"Unparsable {name}={raw!r} on {part.part_type.value} part, using default")
        return None
    if value < 0:
        logger.debug(f"Negative {name}={raw!r} on {part.part_type.value} part, using default")
        return None
    return min(value, get_engine_settings().max_decimal_places)


def _literal(part: FormatPart, buf: List[str]) -> None:
    if part.content is not None:
        buf.append(part.content)


# =============================================================================
# PER-PART RENDERING
# =============================================================================

def _boolean_part(part: FormatPart, buf: List[str], value: bool) -> None:
    if part.part_type == FormatPartType.BOOLEAN:
        buf.append("true" if value else "false")
    elif part.part_type == FormatPartType.TEXT:
        _literal(part, buf)


def _float_part(part: FormatPart, buf: List[str], value: float) -> None:
    if part.part_type == FormatPartType.NUMBER:
        dec = _decimal_places(part) or 0
        buf.append(f"{value:.{dec}f}")
    elif part.part_type == FormatPartType.SCIENTIFIC_NUMBER:
        dec = _decimal_places(part)
        if dec is None:
            buf.append(f"{value:e}")
        else:
            buf.append(f"{value:.{dec}e}")
    elif part.part_type in (FormatPartType.CURRENCY_SYMBOL, FormatPartType.TEXT):
        _literal(part, buf)


def _str_part(part: FormatPart, buf: List[str], value: str) -> None:
    if part.part_type == FormatPartType.TEXT_CONTENT:
        buf.append(value)
    elif part.part_type == FormatPartType.TEXT:
        _literal(part, buf)


def _datetime_part(part: FormatPart, buf: List[str], value: datetime, h12: bool) -> None:
    ptype = part.part_type
    if ptype == FormatPartType.DAY:
        buf.append(f"{value.day:02d}" if _is_long(part) else str(value.day))
    elif ptype == FormatPartType.MONTH:
        if _is_textual(part):
            buf.append(value.strftime("%B" if _is_long(part) else "%b"))
        else:
            buf.append(f"{value.month:02d}" if _is_long(part) else str(value.month))
    elif ptype == FormatPartType.YEAR:
        if _is_long(part):
            buf.append(f"{value.year:04d}")
        else:
            buf.append(f"{value.year % 100:02d}")
    elif ptype == FormatPartType.DAY_OF_WEEK:
        buf.append(value.strftime("%A" if _is_long(part) else "%a"))
    elif ptype == FormatPartType.WEEK_OF_YEAR:
        week = int(value.strftime("%W"))
        buf.append(f"{week:02d}" if _is_long(part) else str(week))
    elif ptype == FormatPartType.HOURS:
        hour = value.hour
        if h12:
            hour = hour % 12 or 12
        buf.append(f"{hour:02d}" if _is_long(part) else str(hour))
    elif ptype == FormatPartType.MINUTES:
        buf.append(f"{value.minute:02d}" if _is_long(part) else str(value.minute))
    elif ptype == FormatPartType.SECONDS:
        buf.append(f"{value.second:02d}" if _is_long(part) else str(value.second))
    elif ptype == FormatPartType.AM_PM:
        buf.append(value.strftime("%p"))
    elif ptype == FormatPartType.TEXT:
        _literal(part, buf)
    # Era and quarter are modeled but not rendered.


def _truncated(seconds: int, unit: int) -> int:
    """Whole units in seconds, truncated toward zero."""
    whole = abs(seconds) // unit
    return -whole if seconds < 0 else whole


def _remainder(value: int, modulus: int) -> int:
    """Remainder with the sign of value."""
    rest = abs(value) % modulus
    return -rest if value < 0 else rest


def _duration_part(part: FormatPart, buf: List[str], value: timedelta) -> None:
    seconds = int(value.total_seconds())
    if part.part_type == FormatPartType.HOURS:
        buf.append(str(_truncated(seconds, 3600)))
    elif part.part_type == FormatPartType.MINUTES:
        buf.append(str(_remainder(_truncated(seconds, 60), 60)))
    elif part.part_type == FormatPartType.SECONDS:
        buf.append(str(_remainder(seconds, 60)))
    elif part.part_type == FormatPartType.TEXT:
        _literal(part, buf)


# =============================================================================
# ENTRY POINTS
# =============================================================================

def format_boolean(value_format: ValueFormat, value: bool) -> str:
    """Format a boolean. Yields "" if no part matches."""
    buf: List[str] = []
    for part in value_format.parts:
        _boolean_part(part, buf, value)
    return "".join(buf)


def format_float(value_format: ValueFormat, value: float) -> str:
    """Format a number. Yields "" if no part matches."""
    buf: List[str] = []
    for part in value_format.parts:
        _float_part(part, buf, value)
    return "".join(buf)


def format_str(value_format: ValueFormat, value: str) -> str:
    """Format a text value. Yields "" if no part matches."""
    buf: List[str] = []
    for part in value_format.parts:
        _str_part(part, buf, value)
    return "".join(buf)


def format_datetime(value_format: ValueFormat, value: datetime) -> str:
    """Format a date-time.

    Any AM/PM part switches every hours part of the format to the
    12-hour clock.
    """
    h12 = any(p.part_type == FormatPartType.AM_PM for p in value_format.parts)

    buf: List[str] = []
    for part in value_format.parts:
        _datetime_part(part, buf, value, h12)
    return "".join(buf)


def format_time_duration(value_format: ValueFormat, value: timedelta) -> str:
    """Format an elapsed time.

    Hours are total hours (not clamped to a day), minutes and seconds are
    the remainders. Fractional seconds are dropped.
    """
    buf: List[str] = []
    for part in value_format.parts:
        _duration_part(part, buf, value)
    return "".join(buf)

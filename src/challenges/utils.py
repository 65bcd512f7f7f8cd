from __future__ import annotations

import math
import re
from datetime import datetime, timezone, tzinfo
from zoneinfo import ZoneInfo

DEFAULT_TIMEZONE = "Asia/Seoul"
UNKNOWN_TEXT = "알 수 없음"

_WEEKDAYS = ("월", "화", "수", "목", "금", "토", "일")
_DATE_ONLY_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def default_tz() -> tzinfo:
    return ZoneInfo(DEFAULT_TIMEZONE)


def parse_instant(value: object, tz: tzinfo | None = None) -> datetime | None:
    """Convert a datetime, epoch milliseconds or ISO-8601 text to an aware datetime.

    Date-only text is UTC midnight. Other naive values are read in ``tz``
    (the default timezone when omitted).
    Returns None for anything that is not a valid instant.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, (int, float)):
        if not math.isfinite(value):
            return None
        try:
            return datetime.fromtimestamp(value / 1000, tz=timezone.utc)
        except (OverflowError, OSError, ValueError):
            return None
    elif isinstance(value, str):
        text = value.strip()
        try:
            parsed = datetime.fromisoformat(text.replace("Z", "+00:00"))
        except ValueError:
            return None
        if _DATE_ONLY_RE.match(text):
            return parsed.replace(tzinfo=timezone.utc)
    else:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=tz or default_tz())
    return parsed


def format_instant(value: object, tz: tzinfo | None = None) -> str:
    parsed = parse_instant(value, tz)
    if parsed is None:
        return UNKNOWN_TEXT
    try:
        local = parsed.astimezone(tz or default_tz())
    except (OverflowError, ValueError):
        return UNKNOWN_TEXT
    meridiem = "오전" if local.hour < 12 else "오후"
    hour = local.hour % 12 or 12
    return (
        f"{local.year}년 {local.month}월 {local.day}일 "
        f"({_WEEKDAYS[local.weekday()]}) {meridiem} {hour:02d}:{local.minute:02d}"
    )


def format_duration(milliseconds: object) -> str | None:
    if isinstance(milliseconds, bool) or not isinstance(milliseconds, (int, float)):
        return None
    if not math.isfinite(milliseconds) or milliseconds < 0:
        return None
    total_seconds = int(milliseconds // 1000)
    days, remainder = divmod(total_seconds, 86400)
    hours, remainder = divmod(remainder, 3600)
    minutes, seconds = divmod(remainder, 60)

    parts = []
    if days:
        parts.append(f"{days}일")
    if hours:
        parts.append(f"{hours}시간")
    if minutes:
        parts.append(f"{minutes}분")
    # seconds always render when nothing larger did, so 0 gives "0초"
    if seconds or not parts:
        parts.append(f"{seconds}초")
    return " ".join(parts)

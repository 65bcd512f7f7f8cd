from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone, tzinfo

from challenges.records import Record, Status, classify
from challenges.utils import UNKNOWN_TEXT, format_duration, format_instant, parse_instant

UNTITLED_TEXT = "이름 없는 도전"
ELAPSED_PREFIX = "진행"


@dataclass(frozen=True)
class RecordView:
    title: str
    status: Status
    start_text: str | None = None
    end_text: str | None = None
    duration_text: str | None = None
    failure_reason_text: str | None = None
    description: str | None = None


def _date_text(moment: datetime | None, tz: tzinfo | None) -> str | None:
    if moment is None:
        return None
    text = format_instant(moment, tz)
    return None if text == UNKNOWN_TEXT else text


def _span_ms(start: datetime, end: datetime) -> float:
    return (end - start) / timedelta(milliseconds=1)


def present_record(
    record: Record,
    *,
    now: datetime | None = None,
    show_failure_reason: bool = True,
    tz: tzinfo | None = None,
) -> RecordView:
    """Derive the display values for a single record.

    Invalid or missing fields never raise; the matching value is left as None.
    ``now`` is sampled here when not supplied and is only used for the elapsed
    duration of active records.
    """
    classification = classify(record)
    start = parse_instant(record.start, tz)
    end = parse_instant(record.end, tz) if classification.has_ended else None

    duration_text = None
    if start is not None:
        if end is not None:
            duration_text = format_duration(_span_ms(start, end))
        elif classification.status is Status.ACTIVE:
            current = parse_instant(now, tz) if now is not None else datetime.now(timezone.utc)
            elapsed = format_duration(_span_ms(start, current)) if current else None
            if elapsed:
                duration_text = f"{ELAPSED_PREFIX} {elapsed}"

    failure_reason_text = None
    if (
        classification.status is Status.FAILED
        and show_failure_reason
        and isinstance(record.failure_reason, str)
    ):
        failure_reason_text = record.failure_reason.strip() or None

    return RecordView(
        title=UNTITLED_TEXT if record.title is None else str(record.title),
        status=classification.status,
        start_text=_date_text(start, tz),
        end_text=_date_text(end, tz),
        duration_text=duration_text,
        failure_reason_text=failure_reason_text,
        description=str(record.description) if record.description else None,
    )

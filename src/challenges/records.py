from __future__ import annotations

import enum
import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any

logger = logging.getLogger(__name__)


class Status(enum.Enum):
    ACTIVE = "active"
    COMPLETED = "completed"
    FAILED = "failed"


@dataclass(frozen=True)
class Record:
    """One challenge entry as found in the records document.

    Every field is optional. Timestamps are kept exactly as supplied and only
    parsed when display values are derived.
    """

    title: Any = None
    description: Any = None
    start: Any = None
    end: Any = None
    failed: Any = None
    failure_reason: Any = None
    hidden: Any = None
    template: Any = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Record:
        return cls(
            title=data.get("title"),
            description=data.get("description"),
            start=data.get("start"),
            end=data.get("end"),
            failed=data.get("failed"),
            failure_reason=data.get("failureReason"),
            hidden=data.get("hidden"),
            template=data.get("template"),
        )


@dataclass(frozen=True)
class Classification:
    is_failed: bool
    has_ended: bool
    status: Status


def classify(record: Record) -> Classification:
    is_failed = bool(record.failed)
    has_ended = record.end is not None
    if is_failed:
        status = Status.FAILED
    elif has_ended:
        status = Status.COMPLETED
    else:
        status = Status.ACTIVE
    return Classification(is_failed=is_failed, has_ended=has_ended, status=status)


def records_from_payload(payload: object) -> list[Record]:
    if not isinstance(payload, Mapping):
        return []
    entries = payload.get("records")
    if not isinstance(entries, list):
        return []

    records = []
    for index, entry in enumerate(entries):
        if not isinstance(entry, Mapping):
            logger.warning("Skipping record #%d: expected an object, got %s", index, type(entry).__name__)
            continue
        records.append(Record.from_dict(entry))
    return records


def visible_records(records: Iterable[Record]) -> list[Record]:
    return [record for record in records if not record.hidden and not record.template]


def partition_records(records: Iterable[Record]) -> tuple[list[Record], list[Record]]:
    """Split records into (current, past): past holds the failed ones."""
    current: list[Record] = []
    past: list[Record] = []
    for record in records:
        if classify(record).is_failed:
            past.append(record)
        else:
            current.append(record)
    return current, past

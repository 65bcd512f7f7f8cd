from __future__ import annotations

import pytest

from challenges.records import (
    Record,
    Status,
    classify,
    partition_records,
    records_from_payload,
    visible_records,
)


@pytest.mark.parametrize(
    ("record", "status"),
    [
        (Record(), Status.ACTIVE),
        (Record(start="2024-01-01T00:00:00Z"), Status.ACTIVE),
        (Record(end="2024-01-02T00:00:00Z"), Status.COMPLETED),
        (Record(end="not a date"), Status.COMPLETED),
        (Record(failed=True), Status.FAILED),
        (Record(failed=True, end="2024-01-02T00:00:00Z"), Status.FAILED),
        (Record(failed=False, end="2024-01-02T00:00:00Z"), Status.COMPLETED),
        (Record(failed=0), Status.ACTIVE),
    ],
)
def test_classify_status(record, status) -> None:
    assert classify(record).status is status


@pytest.mark.parametrize(
    "record",
    [
        Record(),
        Record(end=""),
        Record(failed="yes"),
        Record(failed=True, end=0),
        Record(start="x", end=None, failed=None),
    ],
)
def test_classification_is_consistent(record) -> None:
    result = classify(record)

    if result.status is Status.FAILED:
        assert result.is_failed
    elif result.status is Status.COMPLETED:
        assert not result.is_failed and result.has_ended
    else:
        assert not result.is_failed and not result.has_ended


def test_has_ended_ignores_parseability() -> None:
    assert classify(Record(end="tomorrow-ish")).has_ended
    assert not classify(Record(end=None)).has_ended


def test_record_from_dict_maps_fields_and_ignores_extras() -> None:
    record = Record.from_dict(
        {
            "title": "Run",
            "start": "2024-01-01",
            "failed": True,
            "failureReason": "rain",
            "color": "blue",
        }
    )

    assert record == Record(title="Run", start="2024-01-01", failed=True, failure_reason="rain")


@pytest.mark.parametrize("payload", [None, [], "records", {}, {"records": None}, {"records": {"a": 1}}])
def test_records_from_payload_treats_bad_shapes_as_empty(payload) -> None:
    assert records_from_payload(payload) == []


def test_records_from_payload_skips_non_object_entries() -> None:
    records = records_from_payload({"records": [{"title": "a"}, None, 3, {"title": "b"}]})

    assert [record.title for record in records] == ["a", "b"]


def test_visible_records_drops_hidden_and_template() -> None:
    records = [
        Record(title="shown"),
        Record(title="hidden", hidden=True),
        Record(title="template", template=True),
        Record(title="also shown", hidden=False),
    ]

    assert [record.title for record in visible_records(records)] == ["shown", "also shown"]


def test_partition_records_splits_failed_into_past() -> None:
    records = [
        Record(title="a"),
        Record(title="b", failed=True),
        Record(title="c", end="2024-01-01"),
        Record(title="d", failed=True, end="2024-01-01"),
    ]

    current, past = partition_records(records)

    assert [record.title for record in current] == ["a", "c"]
    assert [record.title for record in past] == ["b", "d"]


def test_partition_records_empty() -> None:
    assert partition_records([]) == ([], [])

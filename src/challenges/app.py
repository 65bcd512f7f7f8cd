from __future__ import annotations

import re
from collections.abc import Sequence
from datetime import tzinfo

import streamlit as st

from challenges.config import load_config, resolve_timezone, validate_config
from challenges.log import configure_logging
from challenges.presenter import RecordView, present_record
from challenges.records import Record, Status, partition_records, visible_records
from challenges.records_api import RecordsLoadError, fetch_records

PAGE_TITLE = "도전 기록"
CURRENT_HEADER = "현재 진행 중인 도전"
PAST_HEADER = "실패한 도전"
CURRENT_EMPTY_MESSAGE = (
    "현재 진행 중인 도전이 없어요. records.json 파일에서 새로운 도전을 추가해보세요."
)
PAST_EMPTY_MESSAGE = "아직 실패한 도전 기록이 없어요."
LOAD_ERROR_PREFIX = "기록을 불러오지 못했습니다"

_MARKDOWN_SPECIAL_RE = re.compile(r"([\\`*_{}\[\]()#+\-.!|>~<])")

STATUS_BADGES = {
    Status.ACTIVE: ("⏳", "진행 중"),
    Status.COMPLETED: ("✅", "완료"),
    Status.FAILED: ("❌", "실패"),
}


def records_page() -> None:
    st.title(PAGE_TITLE)
    config = load_config()
    configure_logging(config.log_level)

    invalid = validate_config(config)
    if invalid:
        st.warning("Challenge board env vars are not valid.")
        st.code(", ".join(invalid))
        return
    tz = resolve_timezone(config)

    try:
        records = fetch_records(config.records_source, timeout=config.fetch_timeout)
    except RecordsLoadError as exc:
        message = f"{LOAD_ERROR_PREFIX}: {exc}"
        for header in (CURRENT_HEADER, PAST_HEADER):
            st.subheader(header)
            st.error(message)
        return

    current, past = partition_records(visible_records(records))

    st.subheader(CURRENT_HEADER)
    render_record_list(current, CURRENT_EMPTY_MESSAGE, show_failure_reason=False, tz=tz)

    st.subheader(PAST_HEADER)
    render_record_list(past, PAST_EMPTY_MESSAGE, show_failure_reason=True, tz=tz)


def render_record_list(
    records: Sequence[Record],
    empty_message: str,
    *,
    show_failure_reason: bool,
    tz: tzinfo | None = None,
) -> None:
    if not records:
        st.info(empty_message)
        return

    for record in records:
        view = present_record(record, show_failure_reason=show_failure_reason, tz=tz)
        container = st.container(border=True)
        with container:
            render_record_item(view)


def escape_markdown(text: str) -> str:
    return _MARKDOWN_SPECIAL_RE.sub(r"\\\1", text)


def render_record_item(view: RecordView) -> None:
    emoji, label = STATUS_BADGES[view.status]
    st.markdown(f"#### {escape_markdown(view.title)}")
    st.markdown(f"{emoji} **{label}**")

    meta = []
    if view.start_text:
        meta.append(f"시작: {view.start_text}")
    if view.end_text:
        meta.append(f"완료: {view.end_text}")
    if view.duration_text:
        meta.append(f"`{view.duration_text}`")
    if meta:
        st.caption(" · ".join(meta))

    if view.failure_reason_text:
        st.text(f"실패 사유: {view.failure_reason_text}")

    if view.description:
        st.text(view.description)


def run_app() -> None:
    st.set_page_config(page_title=PAGE_TITLE, page_icon="🏁")
    pages = [
        st.Page(records_page, title=PAGE_TITLE),
    ]
    navigation = st.navigation(pages, position="sidebar")
    navigation.run()

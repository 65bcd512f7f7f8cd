from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import requests

from challenges.records import Record, records_from_payload

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 15


class RecordsLoadError(Exception):
    """The records document could not be fetched or decoded."""


def build_headers() -> dict[str, str]:
    return {
        "Accept": "application/json",
        "Cache-Control": "no-store",
    }


def is_remote(source: str) -> bool:
    return source.startswith(("http://", "https://"))


def _fetch_remote(url: str, timeout: float) -> Any:
    try:
        response = requests.get(url, headers=build_headers(), timeout=timeout)
        response.raise_for_status()
    except requests.HTTPError as exc:
        failed = exc.response
        if failed is None:
            raise RecordsLoadError(str(exc)) from exc
        raise RecordsLoadError(f"({failed.status_code}) {failed.reason}") from exc
    except requests.RequestException as exc:
        raise RecordsLoadError(str(exc)) from exc

    try:
        return response.json()
    except ValueError as exc:
        raise RecordsLoadError(str(exc)) from exc


def _read_local(path: Path) -> Any:
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise RecordsLoadError(str(exc)) from exc

    try:
        return json.loads(text)
    except ValueError as exc:
        raise RecordsLoadError(str(exc)) from exc


def fetch_payload(source: str, timeout: float = DEFAULT_TIMEOUT) -> Any:
    if is_remote(source):
        return _fetch_remote(source, timeout)
    return _read_local(Path(source))


def fetch_records(source: str, timeout: float = DEFAULT_TIMEOUT) -> list[Record]:
    logger.info("Fetching records from %s", source)
    try:
        payload = fetch_payload(source, timeout)
    except RecordsLoadError as exc:
        logger.error("Failed to load records from %s: %s", source, exc)
        raise
    records = records_from_payload(payload)
    logger.info("Loaded %d records from %s", len(records), source)
    return records

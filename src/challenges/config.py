from __future__ import annotations

import os
from dataclasses import dataclass
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from dotenv import load_dotenv

from challenges.records_api import DEFAULT_TIMEOUT
from challenges.utils import DEFAULT_TIMEZONE

DEFAULT_RECORDS_SOURCE = "records.json"


@dataclass(frozen=True)
class AppConfig:
    records_source: str
    timezone: str = DEFAULT_TIMEZONE
    fetch_timeout: float | None = DEFAULT_TIMEOUT
    log_level: str = "INFO"


def _parse_timeout(raw: str | None) -> float | None:
    if raw is None or not raw.strip():
        return DEFAULT_TIMEOUT
    try:
        value = float(raw)
    except ValueError:
        return None
    return value if value > 0 else None


def load_config() -> AppConfig:
    load_dotenv()
    return AppConfig(
        records_source=os.getenv("CHALLENGES_RECORDS_SOURCE", DEFAULT_RECORDS_SOURCE).strip(),
        timezone=os.getenv("CHALLENGES_TIMEZONE", DEFAULT_TIMEZONE).strip(),
        fetch_timeout=_parse_timeout(os.getenv("CHALLENGES_FETCH_TIMEOUT")),
        log_level=os.getenv("CHALLENGES_LOG_LEVEL", "INFO"),
    )


def resolve_timezone(config: AppConfig) -> ZoneInfo:
    return ZoneInfo(config.timezone)


def validate_config(config: AppConfig) -> list[str]:
    invalid = []
    if not config.records_source:
        invalid.append("CHALLENGES_RECORDS_SOURCE")
    try:
        resolve_timezone(config)
    except (ZoneInfoNotFoundError, ValueError):
        invalid.append("CHALLENGES_TIMEZONE")
    if config.fetch_timeout is None:
        invalid.append("CHALLENGES_FETCH_TIMEOUT")
    return invalid

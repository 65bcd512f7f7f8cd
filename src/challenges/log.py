from __future__ import annotations

import logging
import sys

_LOGGER_NAME = "challenges"
_CONFIGURED_ATTR = "_challenges_logging"
_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def _parse_level(raw: str) -> int:
    level = getattr(logging, raw.strip().upper(), None)
    return level if isinstance(level, int) else logging.INFO


def configure_logging(level: str = "INFO") -> logging.Logger:
    logger = logging.getLogger(_LOGGER_NAME)
    logger.setLevel(_parse_level(level))
    logger.propagate = False

    if not any(getattr(handler, _CONFIGURED_ATTR, False) for handler in logger.handlers):
        handler = logging.StreamHandler(stream=sys.stdout)
        handler.setFormatter(logging.Formatter(_FORMAT))
        setattr(handler, _CONFIGURED_ATTR, True)
        logger.addHandler(handler)

    return logger

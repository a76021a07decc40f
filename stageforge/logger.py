from __future__ import annotations

import logging
import os

_configured = False


def _ensure_base_logger() -> None:
    global _configured
    if _configured:
        return
    logging.basicConfig(
        level=_level(),
        format="%(asctime)s | %(name)s | %(levelname)s | %(message)s",
    )
    _configured = True


def _level() -> int:
    name = os.getenv("STAGEFORGE_LOG_LEVEL", "WARNING").upper()
    return getattr(logging, name, logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    _ensure_base_logger()
    return logging.getLogger(name)

"""Logging setup for the worker process (loguru)."""
from __future__ import annotations

import sys

from loguru import logger

from sqs_worker.app.core import SERVICE_NAME

LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "{extra[service_name]} | <level>{message}</level> | {extra}"
)


def setup_logger(level: str = "INFO", json_logs: bool = False) -> None:
    """Route all records to stderr; `enqueue` keeps sinks safe across threads."""
    logger.configure(
        handlers=[
            {
                "sink": sys.stderr,
                "level": (level or "INFO").upper(),
                "format": LOG_FORMAT,
                "serialize": json_logs,
                "backtrace": False,
                "diagnose": False,
                "enqueue": True,
            }
        ],
        extra={"service_name": SERVICE_NAME},
    )

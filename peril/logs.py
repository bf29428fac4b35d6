"""Persisting game logs to disk."""

from __future__ import annotations

import logging
import os
import time
from datetime import timedelta
from typing import Union

from peril.routing import GameLog

LOGS_FILE = "game.log"
WRITE_TO_DISK_SLEEP = 1.0

_logger = logging.getLogger(__name__)


def _rfc3339(moment) -> str:
    if moment.tzinfo is None:
        moment = moment.astimezone()
    stamp = moment.strftime("%Y-%m-%dT%H:%M:%S")
    offset = moment.utcoffset() or timedelta(0)
    if offset == timedelta(0):
        return stamp + "Z"
    sign = "+" if offset > timedelta(0) else "-"
    minutes = abs(int(offset.total_seconds())) // 60
    return f"{stamp}{sign}{minutes // 60:02d}:{minutes % 60:02d}"


def format_log_line(gamelog: GameLog) -> str:
    """Render a game log as one line: '<RFC 3339 time> <username>: <message>'."""
    return f"{_rfc3339(gamelog.current_time)} {gamelog.username}: {gamelog.message}"


def write_log(
    gamelog: GameLog,
    path: Union[str, os.PathLike] = LOGS_FILE,
    delay: float = WRITE_TO_DISK_SLEEP,
) -> None:
    """Append a game log to the logs file after a simulated slow write."""
    _logger.info("received game log...")
    time.sleep(delay)
    try:
        handle = open(path, "a", encoding="utf-8")
    except OSError as exc:
        raise OSError(f"could not open logs file: {exc}") from exc
    with handle:
        try:
            handle.write(format_log_line(gamelog) + "\n")
        except OSError as exc:
            raise OSError(f"could not write to logs file: {exc}") from exc
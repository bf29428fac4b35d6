"""Exchange names, routing keys and message models shared by clients and server."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

ARMY_MOVES_PREFIX = "army_moves"
WAR_RECOGNITIONS_PREFIX = "war"
PAUSE_KEY = "pause"
GAME_LOG_SLUG = "game_logs"

EXCHANGE_PERIL_DIRECT = "peril_direct"
EXCHANGE_PERIL_TOPIC = "peril_topic"


@dataclass(frozen=True)
class PlayingState:
    """Whether the game is currently paused."""

    is_paused: bool


@dataclass(frozen=True)
class GameLog:
    """A single log entry produced by a player."""

    current_time: datetime
    message: str
    username: str
"""Core game data: ranks, locations, units, players and the messages between them."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, Optional

Location = str


class UnitRank(str, Enum):
    """The kinds of unit a player can spawn."""

    INFANTRY = "infantry"
    CAVALRY = "cavalry"
    ARTILLERY = "artillery"

    def __str__(self) -> str:
        return self.value


_POWER = {
    UnitRank.ARTILLERY: 10,
    UnitRank.CAVALRY: 5,
    UnitRank.INFANTRY: 1,
}

_LOCATIONS = frozenset(
    {"americas", "europe", "africa", "asia", "australia", "antarctica"}
)


@dataclass
class Unit:
    """A single unit owned by a player."""

    id: int
    rank: UnitRank
    location: Location


@dataclass
class Player:
    """A player and the units they own, keyed by unit id."""

    username: str
    units: dict[int, Unit] = field(default_factory=dict)


@dataclass
class ArmyMove:
    """A move of some of a player's units to a new location."""

    player: Player
    units: list[Unit]
    to_location: Location


@dataclass
class RecognitionOfWar:
    """A declaration of war between two players."""

    attacker: Player
    defender: Player


def all_ranks() -> frozenset[UnitRank]:
    """Return every valid unit rank."""
    return frozenset(UnitRank)


def all_locations() -> frozenset[Location]:
    """Return every valid location."""
    return _LOCATIONS


def overlapping_location(p1: Player, p2: Player) -> Optional[Location]:
    """Return a location where both players have units, or None."""
    other_locations = {unit.location for unit in p2.units.values()}
    return next(
        (unit.location for unit in p1.units.values() if unit.location in other_locations),
        None,
    )


def units_to_power_level(units: Iterable[Unit]) -> int:
    """Sum the fighting power of the given units."""
    return sum(_POWER.get(unit.rank, 0) for unit in units)
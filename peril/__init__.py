"""Game logic for Peril, a multiplayer war game: units, moves, wars, logs and routing names."""

__version__ = "0.1.0"
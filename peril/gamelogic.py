"""Console helpers: help text, prompts and flavour messages."""

from __future__ import annotations

import random
import sys
from collections.abc import Iterable

MALICIOUS_LOGS = (
    "Never interrupt your enemy when he is making a mistake.",
    "The hardest thing of all for a soldier is to retreat.",
    "A soldier will fight long and hard for a bit of colored ribbon.",
    "It is well that war is so terrible, otherwise we should grow too fond of it.",
    "The art of war is simple enough. Find out where your enemy is. Get at him as "
    "soon as you can. Strike him as hard as you can, and keep moving on.",
    "All warfare is based on deception.",
)

CLIENT_HELP_LINES = (
    "Possible commands:",
    "* move <location> <unitID> <unitID> <unitID>...",
    "    example:",
    "    move asia 1",
    "* spawn <location> <rank>",
    "    example:",
    "    spawn europe infantry",
    "* status",
    "* spam <n>",
    "    example:",
    "    spam 5",
    "* quit",
    "* help",
)

SERVER_HELP_LINES = (
    "Possible commands:",
    "* pause",
    "* resume",
    "* quit",
    "* help",
)

QUIT_MESSAGE = "I hate this game! (╯°□°)╯︵ ┻━┻"


def _emit(lines: Iterable[str]) -> str:
    """Write the lines to stdout and return the text written."""
    text = "".join(f"{line}\n" for line in lines)
    sys.stdout.write(text)
    sys.stdout.flush()
    return text


def print_client_help() -> str:
    """Print the commands available to a client and return the text."""
    return _emit(CLIENT_HELP_LINES)


def client_welcome() -> str:
    """Greet the player and ask for a username.

    Raises ValueError if no username is entered.
    """
    _emit(("Welcome to the Peril client!", "Please enter your username:"))
    words = get_input()
    if not words:
        raise ValueError("you must enter a username. goodbye")
    username = words[0]
    _emit((f"Welcome, {username}!",))
    print_client_help()
    return username


def print_server_help() -> str:
    """Print the commands available to the server and return the text."""
    return _emit(SERVER_HELP_LINES)


def get_input() -> list[str]:
    """Prompt for a line on stdin and return its words; empty at end of input."""
    print("> ", end="", flush=True)
    line = sys.stdin.readline()
    return line.split()


def get_malicious_log() -> str:
    """Return a randomly chosen flavour log message."""
    return random.choice(MALICIOUS_LOGS)


def print_quit() -> str:
    """Print the farewell message and return the text."""
    return _emit((QUIT_MESSAGE,))
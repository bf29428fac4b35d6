"""Entry point of the game client."""

from __future__ import annotations

import argparse
import sys
from typing import Optional, Sequence

STARTUP_MESSAGE = "Starting Peril client..."


def _build_parser() -> argparse.ArgumentParser:
    return argparse.ArgumentParser(
        prog="peril-client",
        description="Start the Peril game client.",
    )


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Start the client; returns the process exit status."""
    parser = _build_parser()
    parser.parse_args(list(argv) if argv is not None else sys.argv[1:])
    sys.stdout.write(f"{STARTUP_MESSAGE}\n")
    sys.stdout.flush()
    return 0
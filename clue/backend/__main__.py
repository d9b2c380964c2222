"""Entry point for running a game of Clue from the console."""

from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv

from .errors import SettingsError
from .loaders import load_settings
from .table import build_game

logger = logging.getLogger("clue")


def load_env() -> Optional[Path]:
    """Load a .env file, preferring the backend directory, then the project root."""
    backend_dir = Path(__file__).parent
    for env_file in (backend_dir / ".env", backend_dir.parent.parent / ".env"):
        if env_file.exists():
            load_dotenv(env_file)
            return env_file
    return None


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Play or simulate a game of Clue")
    parser.add_argument(
        "--settings",
        default=os.getenv("CLUE_SETTINGS"),
        help="Path to a table YAML file (default: bundled table.yaml)",
    )
    parser.add_argument("--seed", type=int, default=None, help="Override the dealing/AI seed")
    parser.add_argument("--max-rounds", type=int, default=None, help="Override the round limit")
    parser.add_argument(
        "--log-level",
        default=os.getenv("CLUE_LOG_LEVEL", "INFO"),
        help="Logging level (DEBUG shows every event and deduction)",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    env_file = load_env()
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    if env_file:
        logger.debug("Loaded environment from %s", env_file)

    try:
        settings = load_settings(args.settings)
    except SettingsError as exc:
        logger.error("%s", exc)
        return 2
    if args.seed is not None:
        settings.game.seed = args.seed
    max_rounds = args.max_rounds if args.max_rounds is not None else settings.game.max_rounds

    game = build_game(settings)
    winner = game.run(max_rounds=max_rounds)
    if winner is None:
        print(f"No winner after {game.turn_number} turns.")
    else:
        print(f"{winner.name} ({winner.character}) wins after {game.turn_number} turns!")
    return 0


if __name__ == "__main__":
    sys.exit(main())

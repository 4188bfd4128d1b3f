"""
Configuration for the snake engine.

Settings come from environment variables (optionally via a .env file) and an
optional YAML options file:

    SNAKE_SCORES_PATH   where the high score table is kept
    SNAKE_OPTIONS_PATH  YAML file with chaos_mode / worm_mode / pickups
    SNAKE_LOG_LEVEL     logging level for the entry points (default INFO)
"""

import logging
import os
from pathlib import Path
from typing import Optional

import yaml
from dotenv import load_dotenv

from domain.options import GameOptions

load_dotenv()

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"


def get_scores_path() -> str:
    """
    Determine where the high score file lives.

    Returns:
        SNAKE_SCORES_PATH if set, otherwise backend/high_scores.json
    """
    path = os.getenv("SNAKE_SCORES_PATH", "").strip()
    if path:
        return path
    backend_dir = Path(__file__).parent
    return str(backend_dir / "high_scores.json")


def get_log_level() -> str:
    return os.getenv("SNAKE_LOG_LEVEL", "INFO").strip().upper() or "INFO"


def configure_logging(level: Optional[str] = None) -> None:
    logging.basicConfig(
        level=level or get_log_level(),
        format=LOG_FORMAT,
    )


def load_options(path: Optional[str] = None) -> GameOptions:
    """
    Load GameOptions from a YAML file.

    Args:
        path: file to read; defaults to SNAKE_OPTIONS_PATH. With neither set,
            the defaults are returned.

    Raises:
        FileNotFoundError: the configured file does not exist
        ValueError: the file does not describe valid options
    """
    path = path or os.getenv("SNAKE_OPTIONS_PATH", "").strip()
    if not path:
        return GameOptions()

    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    if not isinstance(data, dict):
        raise ValueError(f"Options file {path} must contain a mapping.")
    return GameOptions.from_dict(data)

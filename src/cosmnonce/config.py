"""
CLI defaults from ~/.cosmnonce/.env and the environment.

The codec itself takes no configuration; these values only seed
command-line options that the user did not pass explicitly.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv


# Default config directory
COSMNONCE_DIR = Path.home() / ".cosmnonce"
COSMNONCE_ENV = COSMNONCE_DIR / ".env"

CHAIN_ID_ENV = "COSMNONCE_CHAIN_ID"


def load_config(env_path: Optional[Path] = None) -> bool:
    """
    Load ``KEY=VALUE`` defaults from a .env file into the environment.

    Variables already set in the environment win over the file.

    Returns:
        True if a file was found and loaded
    """
    env_path = env_path or COSMNONCE_ENV
    if not env_path.exists():
        return False
    return load_dotenv(env_path, override=False)


def get_chain_id() -> Optional[str]:
    """Get the default chain ID, or None if unset."""
    return os.environ.get(CHAIN_ID_ENV) or None

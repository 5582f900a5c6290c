"""Configuration loading from environment variables and defaults."""

import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

# Load .env file if it exists
env_path = Path(__file__).parent.parent.parent / ".env"
if env_path.exists():
    load_dotenv(dotenv_path=env_path)


def _parse_seed(raw: Optional[str]) -> Optional[int]:
    if raw is None or not raw.strip():
        return None
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"CARD_DECK_SHUFFLE_SEED must be an integer, got {raw!r}")


# Logging
LOG_LEVEL = os.getenv("CARD_DECK_LOG_LEVEL", "WARNING").upper()

# Shuffling: unset means seed from OS entropy
SHUFFLE_SEED = _parse_seed(os.getenv("CARD_DECK_SHUFFLE_SEED"))

# Role: Central configuration module for the concierge backend. Loads .env into environment variables and
# computes runtime flags (DEBUG) plus the history window sent to the model.

from __future__ import annotations

import os
from dotenv import load_dotenv

DEBUG: bool = False
HISTORY_WINDOW: int = 10


def load_env() -> None:
    """
    Load .env into os.environ, then recompute DEBUG and HISTORY_WINDOW.
    This makes the flags correct even if load_env() is called after import.
    """
    global DEBUG, HISTORY_WINDOW
    load_dotenv()
    DEBUG = os.getenv("DEBUG", "0").lower() in {"1", "true", "yes"}

    try:
        HISTORY_WINDOW = max(0, int(os.getenv("CONCIERGE_HISTORY_WINDOW", "10")))
    except ValueError:
        HISTORY_WINDOW = 10

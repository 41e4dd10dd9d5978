# Role: Client-side configuration for the chat widget. Loads .env into environment variables and computes the
# backend URL, request timeout and DEBUG flag. Importers read widget.config.<NAME> at call time.

from __future__ import annotations

import os
from dotenv import load_dotenv

DEBUG: bool = False
CONCIERGE_API_URL: str = "http://127.0.0.1:8000"
REQUEST_TIMEOUT_SECONDS: float = 30.0

# Upper bound on a single typed message.
MAX_INPUT_CHARS: int = 600


def load_env() -> None:
    """
    Load .env into os.environ, then recompute the module-level settings.
    Safe to call more than once (e.g. on every Streamlit rerun).
    """
    global DEBUG, CONCIERGE_API_URL, REQUEST_TIMEOUT_SECONDS
    load_dotenv()
    DEBUG = os.getenv("DEBUG", "0").lower() in {"1", "true", "yes"}
    CONCIERGE_API_URL = os.getenv("CONCIERGE_API_URL", "http://127.0.0.1:8000").rstrip("/")

    try:
        REQUEST_TIMEOUT_SECONDS = float(os.getenv("CONCIERGE_TIMEOUT_SECONDS", "30"))
    except ValueError:
        REQUEST_TIMEOUT_SECONDS = 30.0

# config.py
# Startup settings for the checker. Built once and handed to the analyzer.

import os
from dataclasses import dataclass

from dotenv import load_dotenv

DEFAULT_MODEL = "gemini-3-flash-preview"
MIN_CHARS = 50
MAX_CHARS = 5000


@dataclass(frozen=True)
class Settings:
    api_key: str = ""
    model: str = DEFAULT_MODEL
    min_chars: int = MIN_CHARS
    max_chars: int = MAX_CHARS
    request_timeout: float = 60.0
    debug: bool = False


def _env_bool(value):
    return (value or "").strip().lower() in {"1", "true", "yes", "on"}


def load_settings(env=None):
    """
    Reads settings from the environment (and a local .env file, if any).
    Pass a mapping as `env` to skip the process environment entirely.
    """
    if env is None:
        load_dotenv()
        env = os.environ

    timeout = env.get("GEMINI_TIMEOUT", "").strip()
    return Settings(
        api_key=env.get("GEMINI_API_KEY", "").strip(),
        model=env.get("GEMINI_MODEL", "").strip() or DEFAULT_MODEL,
        request_timeout=float(timeout) if timeout else 60.0,
        debug=_env_bool(env.get("FLASK_DEBUG")),
    )

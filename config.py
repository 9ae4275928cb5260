import os
from dataclasses import dataclass
from typing import Optional

DEFAULT_MODEL_NAME = "gemini-2.5-flash"


@dataclass(frozen=True)
class Settings:
    api_key: Optional[str]
    model_name: str = DEFAULT_MODEL_NAME
    timeout_ms: Optional[int] = None


def _read_timeout() -> Optional[int]:
    raw = os.getenv("GEMINI_TIMEOUT_MS")
    if not raw:
        return None
    try:
        timeout = int(raw)
    except ValueError:
        raise ValueError(f"GEMINI_TIMEOUT_MS must be an integer, got {raw!r}")
    return timeout if timeout > 0 else None


def load_settings() -> Settings:
    """Reads the provider configuration from the environment.

    Called once per request so a credential rotated in the environment is
    picked up without restarting the process.
    """
    api_key = (
        os.getenv("API_KEY")
        or os.getenv("GEMINI_API_KEY")
        or os.getenv("GOOGLE_API_KEY")
    )
    return Settings(
        api_key=api_key or None,
        model_name=os.getenv("GEMINI_MODEL", DEFAULT_MODEL_NAME),
        timeout_ms=_read_timeout(),
    )

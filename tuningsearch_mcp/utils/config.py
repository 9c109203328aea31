import os
from dataclasses import dataclass
from dotenv import load_dotenv

from tuningsearch_mcp.search.errors import ConfigurationError


DEFAULT_API_BASE_URL = "https://api.tuningsearch.com"
DEFAULT_REQUEST_TIMEOUT = 30.0


@dataclass(frozen=True)
class Settings:
    tuningsearch_api_key: str | None
    api_base_url: str = DEFAULT_API_BASE_URL
    request_timeout: float = DEFAULT_REQUEST_TIMEOUT


def _float_env(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = float(raw)
    except ValueError:
        return default
    return value if value > 0 else default


def load_settings(require_api_key: bool = True) -> Settings:
    load_dotenv()
    api_key = os.getenv("TUNINGSEARCH_API_KEY", "").strip() or None
    base_url = os.getenv("TUNINGSEARCH_API_BASE_URL", "").strip() or DEFAULT_API_BASE_URL
    request_timeout = _float_env("REQUEST_TIMEOUT", DEFAULT_REQUEST_TIMEOUT)

    if require_api_key and not api_key:
        raise ConfigurationError("TUNINGSEARCH_API_KEY environment variable is not set")

    return Settings(
        tuningsearch_api_key=api_key,
        api_base_url=base_url.rstrip("/"),
        request_timeout=request_timeout,
    )

"""Client configuration loaded from environment variables.

Nothing here reads the environment at import time; a ``Settings`` instance is
only built when a caller asks for one.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_API_URL = "https://api.github.com"
DEFAULT_CONNECT_TIMEOUT = 5.0


class Settings(BaseSettings):
    """Client settings read from ``GIST_*`` environment variables or ``.env``."""

    model_config = SettingsConfigDict(
        env_prefix="GIST_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    token: str = ""
    api_url: str = DEFAULT_API_URL
    connect_timeout: float = DEFAULT_CONNECT_TIMEOUT
    log_level: str = "INFO"
    json_logs: bool = False

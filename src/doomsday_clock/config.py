"""
Configuration management using Pydantic Settings.

Every value has a default equal to the fixed constant the scheduled job
relies on, so a run with no environment behaves identically everywhere.
Values can be overridden through DOOMSDAY_* environment variables or a
.env file in the working directory:

    DOOMSDAY_SOURCE_URL=https://en.wikipedia.org/wiki/Doomsday_Clock
    DOOMSDAY_OUTPUT_PATH=public/doomsday.json
    DOOMSDAY_LOG_LEVEL=DEBUG
"""

from typing import Dict, Optional
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


DEFAULT_SOURCE_URL = "https://en.wikipedia.org/wiki/Doomsday_Clock"
DEFAULT_USER_AGENT = "trmnl-doomsday-clock-bot/1.0 (github actions)"
DEFAULT_OUTPUT_PATH = "doomsday.json"
TIMELINE_MARKER = "Timeline of the Doomsday Clock"
MODERN_SINCE_YEAR = 2000


class AppConfig(BaseSettings):
    """
    Application configuration loaded from environment variables.

    Environment Variables (prefix DOOMSDAY_, case-insensitive):
        SOURCE_URL: Page to fetch
        USER_AGENT: User-agent header identifying the bot
        OUTPUT_PATH: Where the JSON snapshot is written
        TIMELINE_MARKER: Text that identifies the timeline table
        MODERN_SINCE_YEAR: First year included in the "modern" view
        REQUEST_TIMEOUT: Seconds before the fetch gives up (unset = no timeout)
        LOG_LEVEL: Root logging level for the CLI

    Properties:
        request_headers: Header dict sent with the fetch

    Example:
        >>> config = get_app_config()
        >>> config.output_path
        'doomsday.json'
        >>> config.request_headers
        {'user-agent': 'trmnl-doomsday-clock-bot/1.0 (github actions)'}
    """

    source_url: str = Field(
        default=DEFAULT_SOURCE_URL,
        description="Encyclopedia page containing the timeline table"
    )

    user_agent: str = Field(
        default=DEFAULT_USER_AGENT,
        description="User-agent header identifying the bot"
    )

    output_path: str = Field(
        default=DEFAULT_OUTPUT_PATH,
        description="Relative path of the JSON snapshot"
    )

    timeline_marker: str = Field(
        default=TIMELINE_MARKER,
        description="Literal text used to find the timeline table"
    )

    modern_since_year: int = Field(
        default=MODERN_SINCE_YEAR,
        description="Entries with year >= this value form the 'modern' view"
    )

    request_timeout: Optional[float] = Field(
        default=None,
        description="HTTP timeout in seconds (None keeps the platform default)"
    )

    log_level: str = Field(
        default="INFO",
        description="Logging level used by the command-line entry point"
    )

    model_config = SettingsConfigDict(
        env_prefix='DOOMSDAY_',
        env_file='.env',
        env_file_encoding='utf-8',
        case_sensitive=False,
        extra='ignore'
    )

    @property
    def request_headers(self) -> Dict[str, str]:
        """Headers sent with the page request."""
        return {"user-agent": self.user_agent}


# Singleton pattern - loaded once, cached forever
_app_config: Optional[AppConfig] = None


def get_app_config() -> AppConfig:
    """
    Get global application config instance (lazy-loaded singleton).

    Configuration is loaded from environment variables and .env file.
    Cached after first access.

    Returns:
        Singleton AppConfig instance

    Example:
        >>> config = get_app_config()
        >>> config2 = get_app_config()
        >>> config is config2
        True
    """
    global _app_config
    if _app_config is None:
        _app_config = AppConfig()
    return _app_config


def reset_app_config() -> None:
    """Drop the cached config so the next get_app_config() reloads it."""
    global _app_config
    _app_config = None

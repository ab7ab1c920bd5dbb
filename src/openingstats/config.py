from __future__ import annotations

import os
from dataclasses import MISSING, dataclass, field

from dotenv import load_dotenv

from openingstats.utils.now import Now

_MISSING = object()
_SETTINGS_ALIAS_FIELDS = (
    "chesscom_max_retries",
    "chesscom_retry_backoff_ms",
    "chesscom_timeout_s",
    "chesscom_user_agent",
)

DEFAULT_USER_AGENT = "openingstats/0.1.0 (+https://github.com/openingstats/openingstats)"
DEFAULT_MAX_WORKERS = 4

load_dotenv()


def _env_flag(name: str, default: str = "0") -> bool:
    return os.getenv(name, default) == "1"


def _field_value(name: str, field_info: object, kwargs: dict[str, object]) -> object:
    value = kwargs.pop(name, _MISSING)
    if value is not _MISSING:
        return value
    default_factory = getattr(field_info, "default_factory", MISSING)
    if default_factory is not MISSING:
        return default_factory()
    default = getattr(field_info, "default", MISSING)
    if default is not MISSING:
        return default
    raise TypeError(f"Missing required argument: {name}")


def _apply_settings_aliases(settings: Settings, kwargs: dict[str, object]) -> None:
    for alias in _SETTINGS_ALIAS_FIELDS:
        value = kwargs.pop(alias, _MISSING)
        if value is not _MISSING:
            setattr(settings, alias, value)


def _raise_on_unexpected_kwargs(kwargs: dict[str, object]) -> None:
    if kwargs:
        unexpected = next(iter(kwargs))
        raise TypeError(f"Settings.__init__() got an unexpected keyword argument '{unexpected}'")


@dataclass(slots=True)
class ChesscomSettings:
    """Chess.com API configuration."""

    max_retries: int = int(os.getenv("CHESSCOM_MAX_RETRIES", "3"))
    retry_backoff_ms: int = int(os.getenv("CHESSCOM_RETRY_BACKOFF_MS", "500"))
    timeout_s: int = int(os.getenv("CHESSCOM_TIMEOUT_S", "20"))
    user_agent: str = os.getenv("CHESSCOM_USER_AGENT", DEFAULT_USER_AGENT)


@dataclass(slots=True, init=False)
class Settings:
    """Configuration for one opening statistics run."""

    username: str = os.getenv("CHESSCOM_USERNAME", os.getenv("CHESSCOM_USER", ""))
    pieces: str = os.getenv("OPENING_STATS_PIECES", "white")
    time_class: str = os.getenv("CHESSCOM_TIME_CLASS", "blitz")
    year: int = field(
        default_factory=lambda: int(os.getenv("OPENING_STATS_YEAR", "0")) or Now.as_date().year
    )
    months: list[int] | None = None
    include_current_month: bool = _env_flag("OPENING_STATS_INCLUDE_CURRENT_MONTH")
    max_workers: int = int(os.getenv("OPENING_STATS_MAX_WORKERS", str(DEFAULT_MAX_WORKERS)))
    log_level: str = os.getenv("OPENING_STATS_LOG_LEVEL", "WARNING")

    chesscom: ChesscomSettings = field(default_factory=ChesscomSettings)

    def __init__(self, **kwargs: object) -> None:
        for name, field_info in self.__dataclass_fields__.items():
            setattr(self, name, _field_value(name, field_info, kwargs))
        _apply_settings_aliases(self, kwargs)
        _raise_on_unexpected_kwargs(kwargs)

    @property
    def chesscom_max_retries(self) -> int:
        return self.chesscom.max_retries

    @chesscom_max_retries.setter
    def chesscom_max_retries(self, value: int) -> None:
        self.chesscom.max_retries = value

    @property
    def chesscom_retry_backoff_ms(self) -> int:
        return self.chesscom.retry_backoff_ms

    @chesscom_retry_backoff_ms.setter
    def chesscom_retry_backoff_ms(self, value: int) -> None:
        self.chesscom.retry_backoff_ms = value

    @property
    def chesscom_timeout_s(self) -> int:
        return self.chesscom.timeout_s

    @chesscom_timeout_s.setter
    def chesscom_timeout_s(self, value: int) -> None:
        self.chesscom.timeout_s = value

    @property
    def chesscom_user_agent(self) -> str:
        return self.chesscom.user_agent

    @chesscom_user_agent.setter
    def chesscom_user_agent(self, value: str) -> None:
        self.chesscom.user_agent = value


def _apply_env_overrides(settings: Settings) -> None:
    username = os.getenv("CHESSCOM_USERNAME") or os.getenv("CHESSCOM_USER")
    if username:
        settings.username = username
    pieces = os.getenv("OPENING_STATS_PIECES")
    if pieces:
        settings.pieces = pieces
    time_class = os.getenv("CHESSCOM_TIME_CLASS")
    if time_class:
        settings.time_class = time_class
    year = os.getenv("OPENING_STATS_YEAR")
    if year:
        settings.year = int(year)
    if os.getenv("OPENING_STATS_INCLUDE_CURRENT_MONTH"):
        settings.include_current_month = _env_flag("OPENING_STATS_INCLUDE_CURRENT_MONTH")
    max_workers = os.getenv("OPENING_STATS_MAX_WORKERS")
    if max_workers:
        settings.max_workers = int(max_workers)
    log_level = os.getenv("OPENING_STATS_LOG_LEVEL")
    if log_level:
        settings.log_level = log_level
    max_retries = os.getenv("CHESSCOM_MAX_RETRIES")
    if max_retries:
        settings.chesscom_max_retries = int(max_retries)
    backoff = os.getenv("CHESSCOM_RETRY_BACKOFF_MS")
    if backoff:
        settings.chesscom_retry_backoff_ms = int(backoff)
    timeout = os.getenv("CHESSCOM_TIMEOUT_S")
    if timeout:
        settings.chesscom_timeout_s = int(timeout)
    user_agent = os.getenv("CHESSCOM_USER_AGENT")
    if user_agent:
        settings.chesscom_user_agent = user_agent


def get_settings(**overrides: object) -> Settings:
    """Return Settings built from the environment, with explicit overrides applied last."""
    load_dotenv()
    settings = Settings()
    _apply_env_overrides(settings)
    for name, value in overrides.items():
        if value is None:
            continue
        if not hasattr(settings, name):
            raise TypeError(f"get_settings() got an unexpected keyword argument '{name}'")
        setattr(settings, name, value)
    return settings

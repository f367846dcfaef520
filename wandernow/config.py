"""Application configuration helpers."""

from dataclasses import dataclass, field
import os
from functools import lru_cache
from typing import List

from dotenv import load_dotenv


load_dotenv()

DEFAULT_CORS_ORIGINS = "http://localhost:3000,http://127.0.0.1:3000"


@dataclass
class Settings:
    """Holds runtime configuration loaded from the environment."""

    app_title: str = "WanderNow Itinerary Generator"
    currency_symbol: str = "₹"
    cors_origins: List[str] = field(default_factory=list)
    log_level: str = "INFO"
    max_days: int = 30


def _split_origins(raw: str) -> List[str]:
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Load and cache settings so every module shares the same values."""

    log_level = os.getenv("WANDERNOW_LOG_LEVEL", "INFO").upper()
    if log_level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
        raise ValueError(f"WANDERNOW_LOG_LEVEL must be a logging level name, got {log_level!r}.")

    try:
        max_days = int(os.getenv("WANDERNOW_MAX_DAYS", "30"))
    except ValueError as exc:
        raise ValueError("WANDERNOW_MAX_DAYS must be an integer.") from exc
    if max_days < 1:
        raise ValueError("WANDERNOW_MAX_DAYS must be at least 1.")

    return Settings(
        app_title=os.getenv("WANDERNOW_APP_TITLE", "WanderNow Itinerary Generator"),
        currency_symbol=os.getenv("WANDERNOW_CURRENCY_SYMBOL", "₹"),
        cors_origins=_split_origins(os.getenv("WANDERNOW_CORS_ORIGINS", DEFAULT_CORS_ORIGINS)),
        log_level=log_level,
        max_days=max_days,
    )

"""Environment-driven configuration objects for the bot."""
from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv

from .exceptions import ConfigurationException

SUPPORTED_LANGUAGES = ("en", "ru", "uz")
CURRENCY_POSITIONS = ("prefix", "suffix")


@dataclass(slots=True)
class CurrencyConfig:
    symbol: str
    position: str


@dataclass(slots=True)
class Settings:
    bot_token: str
    default_language: str
    currency: CurrencyConfig
    cart_ttl_seconds: int
    cart_max_users: int
    log_level: str

    @property
    def telegram_bot_token(self) -> str:
        """Alias for bot_token."""
        return self.bot_token


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = int(raw)
    except ValueError as exc:
        raise ConfigurationException(f"{name} must be an integer, got {raw!r}") from exc
    if value <= 0:
        raise ConfigurationException(f"{name} must be positive, got {value}")
    return value


def load_settings() -> Settings:
    """Load environment variables once and expose typed settings."""
    load_dotenv()

    token = os.getenv("TELEGRAM_BOT_TOKEN")
    if not token:
        raise ConfigurationException("TELEGRAM_BOT_TOKEN environment variable is not set")

    default_language = os.getenv("DEFAULT_LANGUAGE", "en").strip().lower()
    if default_language not in SUPPORTED_LANGUAGES:
        raise ConfigurationException(
            f"DEFAULT_LANGUAGE must be one of {', '.join(SUPPORTED_LANGUAGES)}"
        )

    position = os.getenv("CURRENCY_POSITION", "prefix").strip().lower()
    if position not in CURRENCY_POSITIONS:
        raise ConfigurationException("CURRENCY_POSITION must be 'prefix' or 'suffix'")

    currency = CurrencyConfig(
        symbol=os.getenv("CURRENCY_SYMBOL", "$"),
        position=position,
    )

    return Settings(
        bot_token=token,
        default_language=default_language,
        currency=currency,
        cart_ttl_seconds=_int_env("CART_TTL_SECONDS", 24 * 60 * 60),
        cart_max_users=_int_env("CART_MAX_USERS", 10_000),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
    )

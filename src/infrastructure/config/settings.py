"""Runtime settings for the quote bot, read from the environment.

A ``.env`` file is honoured via python-dotenv. When QUOTEBOT_SECRET_ARN is set,
the JSON secret it points to is exported into the environment first, so API
keys can live in AWS Secrets Manager instead of plain env vars.
"""

import os
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Callable
from zoneinfo import ZoneInfo

from dotenv import load_dotenv

QUOTE_PROVIDERS = ("alphavantage", "yfinance")


@dataclass
class Settings:
    """Application settings."""

    alpha_vantage_api_key: str = field(
        default_factory=lambda: os.getenv("ALPHA_VANTAGE_API_KEY", "")
    )
    telegram_bot_token: str = field(
        default_factory=lambda: os.getenv("TELEGRAM_BOT_TOKEN", "")
    )
    telegram_webhook_secret: str = field(
        default_factory=lambda: os.getenv("TELEGRAM_WEBHOOK_SECRET", "")
    )
    quote_provider: str = field(
        default_factory=lambda: os.getenv("QUOTE_PROVIDER", "alphavantage").lower()
    )
    market_timezone: str = field(
        default_factory=lambda: os.getenv("MARKET_TIMEZONE", "America/New_York")
    )
    http_timeout: float = field(
        default_factory=lambda: float(os.getenv("HTTP_TIMEOUT", "10"))
    )
    log_level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO"))

    def validate(self) -> None:
        """Validate required settings."""
        if self.quote_provider not in QUOTE_PROVIDERS:
            raise ValueError(
                f"Unknown QUOTE_PROVIDER {self.quote_provider!r}; "
                f"expected one of {', '.join(QUOTE_PROVIDERS)}"
            )
        if self.quote_provider == "alphavantage" and not self.alpha_vantage_api_key:
            raise ValueError(
                "ALPHA_VANTAGE_API_KEY not set. Get a free key at: "
                "https://www.alphavantage.co/support/#api-key"
            )

    def has_telegram(self) -> bool:
        return bool(self.telegram_bot_token)

    def market_clock(self) -> Callable[[], date]:
        """Return a callable giving today's date in the market's time zone."""
        zone = ZoneInfo(self.market_timezone)
        return lambda: datetime.now(zone).date()


def load_settings() -> Settings:
    """Load .env, pull secrets from Secrets Manager if configured, then read Settings."""
    load_dotenv()
    secret_arn = os.environ.get("QUOTEBOT_SECRET_ARN")
    if secret_arn:
        from src.infrastructure.secrets.secrets_manager_adapter import SecretsManagerAdapter
        SecretsManagerAdapter().load_into_env(secret_arn)
    return Settings()

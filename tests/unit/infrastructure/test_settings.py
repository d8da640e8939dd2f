from __future__ import annotations

from datetime import date

import pytest

from src.infrastructure.config import settings as settings_module
from src.infrastructure.config.settings import Settings, load_settings


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        "ALPHA_VANTAGE_API_KEY",
        "TELEGRAM_BOT_TOKEN",
        "TELEGRAM_WEBHOOK_SECRET",
        "QUOTE_PROVIDER",
        "MARKET_TIMEZONE",
        "HTTP_TIMEOUT",
        "LOG_LEVEL",
        "QUOTEBOT_SECRET_ARN",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr(settings_module, "load_dotenv", lambda: False)


def test_defaults() -> None:
    settings = Settings()
    assert settings.quote_provider == "alphavantage"
    assert settings.market_timezone == "America/New_York"
    assert settings.http_timeout == 10.0
    assert settings.has_telegram() is False


def test_reads_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("QUOTE_PROVIDER", "YFinance")
    monkeypatch.setenv("TELEGRAM_BOT_TOKEN", "123:ABC")
    monkeypatch.setenv("HTTP_TIMEOUT", "2.5")

    settings = load_settings()

    assert settings.quote_provider == "yfinance"
    assert settings.telegram_bot_token == "123:ABC"
    assert settings.http_timeout == 2.5
    settings.validate()


def test_alpha_vantage_requires_key() -> None:
    with pytest.raises(ValueError, match="ALPHA_VANTAGE_API_KEY"):
        Settings().validate()
    Settings(alpha_vantage_api_key="k").validate()


def test_unknown_provider() -> None:
    with pytest.raises(ValueError, match="Unknown QUOTE_PROVIDER"):
        Settings(quote_provider="bloomberg").validate()


def test_market_clock_returns_a_date() -> None:
    clock = Settings(market_timezone="Pacific/Auckland").market_clock()
    assert isinstance(clock(), date)


def test_secret_is_loaded_before_settings(monkeypatch: pytest.MonkeyPatch) -> None:
    loaded = []

    class FakeAdapter:
        def load_into_env(self, secret_id: str) -> None:
            loaded.append(secret_id)
            monkeypatch.setenv("ALPHA_VANTAGE_API_KEY", "from-secret")

    monkeypatch.setenv("QUOTEBOT_SECRET_ARN", "arn:aws:secretsmanager:us-east-1:1:secret:bot")
    monkeypatch.setattr(
        "src.infrastructure.secrets.secrets_manager_adapter.SecretsManagerAdapter",
        FakeAdapter,
    )

    settings = load_settings()

    assert loaded == ["arn:aws:secretsmanager:us-east-1:1:secret:bot"]
    assert settings.alpha_vantage_api_key == "from-secret"

"""Fakes for the domain ports and shared test data."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal

from src.domain.entities.stock_price import DailyQuote, QuoteSeries
from src.domain.ports.delivery_channel_port import IDeliveryChannel
from src.domain.ports.stock_data_port import IQuoteProvider

# A Thursday. Monday is 2026-10-12, the weekend before is 10-10/10-11.
TODAY = date(2026, 10, 15)


def quote(open_: str, close: str) -> DailyQuote:
    return DailyQuote(open=Decimal(open_), close=Decimal(close))


@dataclass(frozen=True)
class RecordingSeries(QuoteSeries):
    """QuoteSeries that remembers every day the resolver looked up."""

    probed: list = field(default_factory=list, compare=False)

    def get(self, day: date):
        self.probed.append(day)
        return super().get(day)


class FakeQuoteProvider(IQuoteProvider):
    def __init__(self, days: dict | None = None, error: Exception | None = None) -> None:
        self.days = days or {}
        self.error = error
        self.calls: list[str] = []
        self.last_series: RecordingSeries | None = None

    async def fetch_daily_series(self, symbol: str) -> QuoteSeries:
        self.calls.append(symbol)
        if self.error is not None:
            raise self.error
        self.last_series = RecordingSeries(symbol=symbol, days=self.days)
        return self.last_series


class RecordingChannel(IDeliveryChannel):
    def __init__(self, name: str = "test") -> None:
        self._name = name
        self.sent: list[tuple[str, str]] = []

    @property
    def name(self) -> str:
        return self._name

    async def send(self, identity: str, text: str) -> None:
        self.sent.append((identity, text))

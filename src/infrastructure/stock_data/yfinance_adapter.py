"""
Infrastructure adapter: yfinance → IQuoteProvider.
All yfinance-specific details (Ticker.history(), the pandas frame it returns)
are confined here; the rest of the codebase depends only on IQuoteProvider.
yfinance is blocking, so the download runs in a worker thread.
"""

import asyncio
import logging
from decimal import Decimal

import yfinance as yf

from src.domain.entities.stock_price import DailyQuote, QuoteSeries
from src.domain.errors.price_query_errors import UpstreamError
from src.domain.ports.stock_data_port import IQuoteProvider

logger = logging.getLogger(__name__)


def _price(value) -> Decimal:
    return Decimal(str(round(float(value), 4)))


class YFinanceQuoteProvider(IQuoteProvider):
    """Fetches daily open/close prices from Yahoo Finance via the yfinance library."""

    def __init__(self, period: str = "3mo") -> None:
        self._period = period

    async def fetch_daily_series(self, symbol: str) -> QuoteSeries:
        try:
            return await asyncio.to_thread(self._download, symbol)
        except UpstreamError:
            raise
        except Exception as exc:
            raise UpstreamError(f"yfinance download for {symbol} failed: {exc}") from exc

    def _download(self, symbol: str) -> QuoteSeries:
        history = yf.Ticker(symbol).history(period=self._period, interval="1d")
        if history.empty:
            raise UpstreamError(f"No historical data available for symbol: {symbol!r}")

        # Rows with a missing open or close are not trading days.
        history = history.dropna(subset=["Open", "Close"])
        if history.empty:
            raise UpstreamError(f"No complete daily prices for symbol: {symbol!r}")

        days = {
            timestamp.date(): DailyQuote(open=_price(row["Open"]), close=_price(row["Close"]))
            for timestamp, row in history.iterrows()
        }
        logger.debug("Fetched %d daily quotes for %s", len(days), symbol)
        return QuoteSeries(symbol=symbol, days=days)

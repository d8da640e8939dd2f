"""
Infrastructure adapter: Alpha Vantage TIME_SERIES_DAILY → IQuoteProvider.
All Alpha Vantage payload details (series key, "1. open" / "4. close" fields,
error notes) are confined here; the rest of the codebase depends only on
IQuoteProvider and QuoteSeries.
"""

import logging
from datetime import date
from decimal import Decimal, InvalidOperation

import httpx

from src.domain.entities.stock_price import DailyQuote, QuoteSeries
from src.domain.errors.price_query_errors import UpstreamError
from src.domain.ports.stock_data_port import IQuoteProvider

logger = logging.getLogger(__name__)

SERIES_KEY = "Time Series (Daily)"
OPEN_FIELD = "1. open"
CLOSE_FIELD = "4. close"
# Payload keys Alpha Vantage uses instead of data for errors and throttling.
ERROR_KEYS = ("Error Message", "Note", "Information")


class AlphaVantageQuoteProvider(IQuoteProvider):
    """Fetches daily open/close prices from the Alpha Vantage REST API."""

    BASE_URL = "https://www.alphavantage.co/query"

    def __init__(
        self,
        api_key: str,
        http: httpx.AsyncClient | None = None,
        timeout: float = 10.0,
        outputsize: str = "compact",
    ) -> None:
        """
        Args:
            api_key:    Alpha Vantage API key.
            http:       Shared AsyncClient; a short-lived one is opened per
                        fetch when omitted.
            timeout:    Per-request timeout in seconds for the short-lived client.
            outputsize: "compact" (last 100 trading days) or "full".
        """
        self._api_key = api_key
        self._http = http
        self._timeout = timeout
        self._outputsize = outputsize

    async def fetch_daily_series(self, symbol: str) -> QuoteSeries:
        params = {
            "function": "TIME_SERIES_DAILY",
            "symbol": symbol,
            "outputsize": self._outputsize,
            "apikey": self._api_key,
        }
        try:
            if self._http is not None:
                response = await self._http.get(self.BASE_URL, params=params)
            else:
                async with httpx.AsyncClient(timeout=self._timeout) as http:
                    response = await http.get(self.BASE_URL, params=params)
            response.raise_for_status()
            payload = response.json()
        except httpx.HTTPStatusError as exc:
            raise UpstreamError(
                f"Alpha Vantage returned {exc.response.status_code} for {symbol}"
            ) from exc
        except httpx.HTTPError as exc:
            raise UpstreamError(
                f"Alpha Vantage request for {symbol} failed: {type(exc).__name__}"
            ) from exc
        except ValueError as exc:
            raise UpstreamError(f"Alpha Vantage returned non-JSON for {symbol}") from exc

        return self._to_series(symbol, payload)

    @staticmethod
    def _to_series(symbol: str, payload: object) -> QuoteSeries:
        if not isinstance(payload, dict):
            raise UpstreamError(f"Unexpected Alpha Vantage payload for {symbol}")
        for key in ERROR_KEYS:
            if key in payload:
                raise UpstreamError(f"Alpha Vantage {key} for {symbol}: {payload[key]}")

        raw_days = payload.get(SERIES_KEY)
        if not isinstance(raw_days, dict) or not raw_days:
            raise UpstreamError(f"No daily series in Alpha Vantage payload for {symbol}")

        days: dict[date, DailyQuote] = {}
        try:
            for iso_day, prices in raw_days.items():
                days[date.fromisoformat(iso_day)] = DailyQuote(
                    open=Decimal(prices[OPEN_FIELD]),
                    close=Decimal(prices[CLOSE_FIELD]),
                )
        except (KeyError, TypeError, ValueError, InvalidOperation) as exc:
            raise UpstreamError(f"Malformed Alpha Vantage series for {symbol}: {exc}") from exc

        logger.debug("Fetched %d daily quotes for %s", len(days), symbol)
        return QuoteSeries(symbol=symbol, days=days)

"""
Port (interface) for daily quote providers.
Infrastructure adapters (e.g. AlphaVantageQuoteProvider, YFinanceQuoteProvider)
must implement this interface.
"""

from abc import ABC, abstractmethod

from src.domain.entities.stock_price import QuoteSeries


class IQuoteProvider(ABC):
    @abstractmethod
    async def fetch_daily_series(self, symbol: str) -> QuoteSeries:
        """Fetch the recent daily open/close series for *symbol*.

        Raises:
            UpstreamError: on transport failure, non-2xx status, a malformed
                           payload or an empty series.
        """
        ...

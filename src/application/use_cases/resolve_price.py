"""
Use-case: resolve a PriceRequest to the price on the nearest trading day.
Depends only on Domain ports and entities — no infrastructure imports.

Relative (defaulted) dates fall back up to four days to absorb weekends and
holidays; dates the user typed are taken literally.
"""

import logging
from datetime import date, timedelta

from src.domain.entities.price_request import PriceRequest
from src.domain.entities.stock_price import ResolvedPrice
from src.domain.errors.price_query_errors import DataUnavailable
from src.domain.ports.stock_data_port import IQuoteProvider

logger = logging.getLogger(__name__)

MAX_PROBE_DAYS = 5


def us_date(day: date) -> str:
    return day.strftime("%m-%d-%Y")


def probe_dates(request: PriceRequest) -> list[date]:
    """Dates to look up, in order: the requested day, then earlier days if allowed."""
    if request.explicit_date:
        return [request.date]
    return [request.date - timedelta(days=offset) for offset in range(MAX_PROBE_DAYS)]


class PriceResolver:
    def __init__(self, provider: IQuoteProvider) -> None:
        self._provider = provider

    async def resolve(self, request: PriceRequest) -> ResolvedPrice:
        """Fetch the series for *request.symbol* once and find a trading day.

        Raises:
            DataUnavailable: explicit date missing from the series, or no
                             trading day within the probe window.
            UpstreamError:   propagated from IQuoteProvider on fetch failure.
        """
        series = await self._provider.fetch_daily_series(request.symbol)

        for day in probe_dates(request):
            quote = series.get(day)
            if quote is not None:
                if day != request.date:
                    logger.debug(
                        "No %s data on %s, using %s", request.symbol, request.date, day
                    )
                return ResolvedPrice.for_quantity(
                    symbol=request.symbol,
                    price_per_share=quote.price(request.session),
                    session=request.session,
                    effective_date=day,
                    quantity=request.quantity,
                )

        if request.explicit_date:
            raise DataUnavailable(
                f"No data for {request.symbol} on {us_date(request.date)}"
            )
        raise DataUnavailable(
            f"No data for {request.symbol} in the {MAX_PROBE_DAYS} days up to "
            f"{us_date(request.date)}"
        )

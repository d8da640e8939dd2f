"""
Domain entities for daily stock price data.
Zero external dependencies — pure Python dataclasses only.
"""

from dataclasses import dataclass, field
from datetime import date
from decimal import ROUND_HALF_UP, Decimal, localcontext
from types import MappingProxyType
from typing import Mapping, Optional

CENT = Decimal("0.01")


@dataclass(frozen=True)
class DailyQuote:
    open: Decimal
    close: Decimal

    def price(self, session: str) -> Decimal:
        return self.open if session == "open" else self.close


@dataclass(frozen=True)
class QuoteSeries:
    """Daily quotes for one symbol, keyed by trading day only."""

    symbol: str
    days: Mapping[date, DailyQuote] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "days", MappingProxyType(dict(self.days)))

    def get(self, day: date) -> Optional[DailyQuote]:
        return self.days.get(day)

    def __len__(self) -> int:
        return len(self.days)


@dataclass(frozen=True)
class ResolvedPrice:
    symbol: str
    price_per_share: Decimal
    session: str
    effective_date: date
    quantity: int
    total_price: Decimal

    @classmethod
    def for_quantity(
        cls,
        symbol: str,
        price_per_share: Decimal,
        session: str,
        effective_date: date,
        quantity: int,
    ) -> "ResolvedPrice":
        with localcontext() as ctx:
            # Room for the exact product and for its integer part plus cents.
            ctx.prec = max(
                ctx.prec,
                len(price_per_share.as_tuple().digits)
                + max(price_per_share.adjusted() + 1, 0)
                + len(str(quantity))
                + 2,
            )
            total = (price_per_share * quantity).quantize(CENT, rounding=ROUND_HALF_UP)
        return cls(
            symbol=symbol,
            price_per_share=price_per_share,
            session=session,
            effective_date=effective_date,
            quantity=quantity,
            total_price=total,
        )

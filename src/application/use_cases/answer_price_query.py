"""
Use-case: answer one raw chat message with a price or a user-facing error.
Depends only on Domain ports and entities — no infrastructure imports.
"""

from decimal import ROUND_HALF_UP

from src.application.parsing.request_parser import RequestParser
from src.application.use_cases.resolve_price import PriceResolver, us_date
from src.domain.entities.query_outcome import OutcomeKind, QueryOutcome
from src.domain.entities.stock_price import CENT, ResolvedPrice
from src.domain.errors.price_query_errors import PriceQueryError


def format_answer(price: ResolvedPrice) -> str:
    """e.g. '1234.56 on close 10-02-2026 (102.88 per share)'."""
    answer = f"{price.total_price} on {price.session} {us_date(price.effective_date)}"
    if price.quantity > 1:
        answer += f" ({price.price_per_share.quantize(CENT, rounding=ROUND_HALF_UP)} per share)"
    return answer


class AnswerPriceQueryUseCase:
    def __init__(self, parser: RequestParser, resolver: PriceResolver) -> None:
        self._parser = parser
        self._resolver = resolver

    async def execute(self, raw_text: str) -> QueryOutcome:
        """Parse and resolve *raw_text*.

        Never raises a PriceQueryError: every domain failure is returned as a
        QueryOutcome whose kind tells the caller how to reply.
        """
        request = None
        try:
            request = self._parser.parse(raw_text)
            price = await self._resolver.resolve(request)
        except PriceQueryError as exc:
            return QueryOutcome(kind=exc.kind, message=exc.message, request=request)
        return QueryOutcome(
            kind=OutcomeKind.OK,
            message=format_answer(price),
            request=request,
            price=price,
        )

from __future__ import annotations

from datetime import date
from decimal import Decimal

import pytest

from src.application.parsing.request_parser import HELP_TEXT, RequestParser
from src.application.use_cases.answer_price_query import AnswerPriceQueryUseCase, format_answer
from src.application.use_cases.resolve_price import PriceResolver
from src.domain.entities.query_outcome import OutcomeKind
from src.domain.entities.stock_price import ResolvedPrice
from src.domain.errors.price_query_errors import UpstreamError
from tests.support import FakeQuoteProvider, quote

MONDAY = date(2026, 10, 12)


def _use_case(parser: RequestParser, provider: FakeQuoteProvider) -> AnswerPriceQueryUseCase:
    return AnswerPriceQueryUseCase(parser=parser, resolver=PriceResolver(provider))


@pytest.mark.asyncio
async def test_weekday_question_resolves_to_that_day(parser: RequestParser) -> None:
    provider = FakeQuoteProvider({MONDAY: quote("480.00", "482.10")})

    outcome = await _use_case(parser, provider).execute("qqq monday")

    assert outcome.kind is OutcomeKind.OK
    assert outcome.price.effective_date == MONDAY
    assert outcome.message == "482.10 on close 10-12-2026"
    assert outcome.request.symbol == "QQQ"


@pytest.mark.asyncio
async def test_quantity_answer_shows_per_share_price(parser: RequestParser) -> None:
    provider = FakeQuoteProvider({date(2026, 10, 2): quote("120.00", "123.45")})

    outcome = await _use_case(parser, provider).execute("wmt 10-2 close 12")

    assert outcome.kind is OutcomeKind.OK
    assert outcome.message == "1481.40 on close 10-02-2026 (123.45 per share)"


@pytest.mark.asyncio
async def test_invalid_input_skips_the_provider(parser: RequestParser) -> None:
    provider = FakeQuoteProvider()

    outcome = await _use_case(parser, provider).execute("help")

    assert outcome.kind is OutcomeKind.INVALID_INPUT
    assert outcome.message == HELP_TEXT
    assert outcome.request is None
    assert provider.calls == []


@pytest.mark.asyncio
async def test_explicit_holiday_is_data_unavailable(parser: RequestParser) -> None:
    provider = FakeQuoteProvider({date(2026, 10, 2): quote("1", "2")})

    outcome = await _use_case(parser, provider).execute("wmt 10-3 close 12")

    assert outcome.kind is OutcomeKind.DATA_UNAVAILABLE
    assert outcome.message == "No data for WMT on 10-03-2026"
    assert outcome.request.explicit_date is True
    assert outcome.price is None


@pytest.mark.asyncio
async def test_upstream_error_outcome(parser: RequestParser) -> None:
    provider = FakeQuoteProvider(error=UpstreamError("Alpha Vantage returned 503 for AAPL"))

    outcome = await _use_case(parser, provider).execute("aapl")

    assert outcome.kind is OutcomeKind.UPSTREAM_ERROR
    assert "503" in outcome.message


def test_format_answer_single_share() -> None:
    price = ResolvedPrice.for_quantity("AAPL", Decimal("189.9850"), "open", MONDAY, 1)
    assert format_answer(price) == "189.99 on open 10-12-2026"

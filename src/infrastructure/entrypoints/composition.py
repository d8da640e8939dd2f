"""
Composition helpers shared by the FastAPI app and the console REPL.

Binds the configured quote provider to the parser, resolver and
conversation registry so both entrypoints wire the core identically.
"""

from datetime import date
from typing import Callable

import httpx

from src.application.parsing.request_parser import RequestParser
from src.application.services.conversations import ConversationRegistry
from src.application.use_cases.answer_price_query import AnswerPriceQueryUseCase
from src.application.use_cases.resolve_price import PriceResolver
from src.domain.ports.stock_data_port import IQuoteProvider
from src.infrastructure.config.settings import Settings
from src.infrastructure.stock_data.alphavantage_adapter import AlphaVantageQuoteProvider
from src.infrastructure.stock_data.yfinance_adapter import YFinanceQuoteProvider


def build_quote_provider(
    settings: Settings,
    http: httpx.AsyncClient | None = None,
) -> IQuoteProvider:
    """Return the IQuoteProvider named by settings.quote_provider."""
    settings.validate()
    if settings.quote_provider == "yfinance":
        return YFinanceQuoteProvider()
    return AlphaVantageQuoteProvider(
        api_key=settings.alpha_vantage_api_key,
        http=http,
        timeout=settings.http_timeout,
    )


def build_registry(
    provider: IQuoteProvider,
    clock: Callable[[], date] = date.today,
) -> ConversationRegistry:
    use_case = AnswerPriceQueryUseCase(
        parser=RequestParser(clock=clock),
        resolver=PriceResolver(provider),
    )
    return ConversationRegistry(use_case)

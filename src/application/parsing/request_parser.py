"""
Parser: raw chat text → PriceRequest.
Depends only on Domain entities and errors — no infrastructure imports.

Tokens after the symbol are classified by content, not position, so
"aapl 12 open monday" and "aapl monday open 12" are the same question.
"""

import re
from datetime import date, timedelta
from typing import Callable, Optional

from src.application.parsing.date_tokens import parse_date_token
from src.domain.entities.price_request import PriceRequest
from src.domain.errors.price_query_errors import InvalidInput

HELP_KEYWORD = "help"
MAX_SYMBOL_LENGTH = 5
MAX_QUANTITY_DIGITS = 12

HELP_TEXT = (
    "Ask me about a stock price, e.g.\n"
    " aapl\n"
    " axp yesterday open\n"
    " wmt 10-3 close 12\n"
    "Defaults to yesterday's close price for 1 share"
)

_QUANTITY = re.compile(r"^\d+$")
_SESSION = re.compile(r"^[co][a-z]*$")


def _fail(reason: str) -> InvalidInput:
    return InvalidInput(f"{reason}\n{HELP_TEXT}")


class RequestParser:
    def __init__(self, clock: Callable[[], date] = date.today) -> None:
        """
        Args:
            clock: Returns the current calendar date in the market's time zone.
        """
        self._clock = clock

    def parse(self, raw_text: str) -> PriceRequest:
        """Turn *raw_text* into a validated PriceRequest.

        Raises:
            InvalidInput: carrying the help text, on any violation.
        """
        tokens = (raw_text or "").lower().split()
        symbol = tokens[0] if tokens else ""
        if not symbol or len(symbol) > MAX_SYMBOL_LENGTH or symbol == HELP_KEYWORD:
            raise InvalidInput(HELP_TEXT)

        quantity_token: Optional[str] = None
        session_token: Optional[str] = None
        date_token: Optional[str] = None
        for token in tokens[1:]:
            if _QUANTITY.match(token):
                quantity_token = token
            elif token[0] in "co":
                session_token = token
            else:
                date_token = token

        today = self._clock()
        requested_date = today - timedelta(days=1)
        if date_token is not None:
            parsed = parse_date_token(date_token, today)
            if parsed is None:
                raise _fail("need a US date or day of week")
            if parsed > today:
                raise _fail("date should be today or in the past")
            requested_date = parsed

        session = "close"
        if session_token is not None:
            if not _SESSION.match(session_token):
                raise _fail("time should be open or close")
            session = "close" if session_token.startswith("c") else "open"

        quantity = 1
        if quantity_token is not None:
            digits = quantity_token.lstrip("0")
            if not digits or len(digits) > MAX_QUANTITY_DIGITS:
                raise _fail("bad quantity")
            quantity = int(digits)

        return PriceRequest(
            symbol=symbol.upper(),
            date=requested_date,
            session=session,
            quantity=quantity,
            explicit_date=date_token is not None,
        )

"""
Domain entity for a parsed stock price question.
Zero external dependencies — pure Python dataclass only.
"""

from dataclasses import dataclass
from datetime import date

SESSIONS = ("open", "close")


@dataclass(frozen=True)
class PriceRequest:
    """One user question, created per inbound message and discarded after the reply.

    symbol:        Upper-cased ticker, 1-5 characters.
    date:          Requested trading day; never after the current date.
    session:       "open" or "close".
    quantity:      Number of shares, at least 1.
    explicit_date: True when the user typed the date, False when defaulted.
    """

    symbol: str
    date: date
    session: str = "close"
    quantity: int = 1
    explicit_date: bool = False

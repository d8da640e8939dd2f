"""
Tagged result of answering one inbound message.
Callers dispatch on ``kind`` with a match statement instead of inspecting
exception types.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from src.domain.entities.price_request import PriceRequest
from src.domain.entities.stock_price import ResolvedPrice


class OutcomeKind(str, Enum):
    OK = "ok"
    INVALID_INPUT = "invalid_input"
    DATA_UNAVAILABLE = "data_unavailable"
    UPSTREAM_ERROR = "upstream_error"


@dataclass(frozen=True)
class QueryOutcome:
    kind: OutcomeKind
    message: str
    request: Optional[PriceRequest] = None
    price: Optional[ResolvedPrice] = None

"""
Application service: per-identity conversations and their registry.

Business decisions owned here:
  - exactly one reply per inbound message, whatever happens;
  - empty messages get the help text without touching the parser;
  - provider failures are logged and surfaced only as a generic message.

Delivery channels are injected; no HTTP or chat-platform code appears here.
"""

import asyncio
import logging
from typing import Optional

from src.application.parsing.request_parser import HELP_TEXT
from src.application.use_cases.answer_price_query import AnswerPriceQueryUseCase
from src.domain.entities.query_outcome import OutcomeKind
from src.domain.ports.delivery_channel_port import IDeliveryChannel

logger = logging.getLogger(__name__)

GENERIC_FAILURE = "Something went wrong"


class Conversation:
    """Handle for one sender on one channel, reused for all of their messages."""

    def __init__(
        self,
        identity: str,
        channel: IDeliveryChannel,
        use_case: AnswerPriceQueryUseCase,
    ) -> None:
        self.identity = identity
        self.channel = channel
        self._use_case = use_case
        # Keeps replies to one sender in the order their messages arrived.
        self._lock = asyncio.Lock()

    async def receive(self, raw_text: Optional[str]) -> None:
        async with self._lock:
            reply = await self._answer(raw_text)
            await self.channel.send(self.identity, reply)

    async def _answer(self, raw_text: Optional[str]) -> str:
        if not raw_text or not raw_text.strip():
            return HELP_TEXT
        try:
            outcome = await self._use_case.execute(raw_text)
        except Exception:
            logger.exception(
                "Unexpected failure answering %s:%s", self.channel.name, self.identity
            )
            return GENERIC_FAILURE

        match outcome.kind:
            case OutcomeKind.OK | OutcomeKind.INVALID_INPUT:
                return outcome.message
            case OutcomeKind.DATA_UNAVAILABLE:
                logger.info("%s:%s %s", self.channel.name, self.identity, outcome.message)
                return outcome.message
            case OutcomeKind.UPSTREAM_ERROR:
                logger.warning(
                    "Quote provider failed for %s:%s: %s",
                    self.channel.name,
                    self.identity,
                    outcome.message,
                )
                return GENERIC_FAILURE
        return GENERIC_FAILURE


class ConversationRegistry:
    """Owns every Conversation for the lifetime of the process.

    Handles are keyed by (channel name, identity), created on the first
    message and never evicted.
    """

    def __init__(self, use_case: AnswerPriceQueryUseCase) -> None:
        self._use_case = use_case
        self._conversations: dict[tuple[str, str], Conversation] = {}

    def get_or_create(self, identity: str, channel: IDeliveryChannel) -> Conversation:
        key = (channel.name, str(identity))
        conversation = self._conversations.get(key)
        if conversation is None:
            logger.info("New conversation %s:%s", *key)
            conversation = Conversation(str(identity), channel, self._use_case)
            self._conversations[key] = conversation
        return conversation

    async def dispatch(
        self,
        identity: str,
        raw_text: Optional[str],
        channel: IDeliveryChannel,
    ) -> None:
        """Core entry point: answer *raw_text* from *identity* with exactly one reply."""
        await self.get_or_create(identity, channel).receive(raw_text)

    def __len__(self) -> int:
        return len(self._conversations)

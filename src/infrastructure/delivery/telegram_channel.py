"""
Infrastructure adapter: Telegram Bot API sendMessage → IDeliveryChannel.
The message travels as a JSON body, so no manual URL or UTF-8 encoding is needed.
"""

import logging

import httpx

from src.domain.ports.delivery_channel_port import IDeliveryChannel

logger = logging.getLogger(__name__)


class TelegramDeliveryChannel(IDeliveryChannel):
    """Sends replies to Telegram chats, keyed by chat id."""

    API_URL = "https://api.telegram.org"

    def __init__(
        self,
        bot_token: str,
        http: httpx.AsyncClient | None = None,
        timeout: float = 10.0,
    ) -> None:
        self._bot_token = bot_token
        self._http = http
        self._timeout = timeout

    @property
    def name(self) -> str:
        return "telegram"

    @property
    def send_url(self) -> str:
        return f"{self.API_URL}/bot{self._bot_token}/sendMessage"

    async def send(self, identity: str, text: str) -> None:
        """Post *text* to chat *identity*. Failures are logged, not raised."""
        if not identity or not text:
            logger.error("Refusing to send message %r to chat %r", text, identity)
            return
        body = {"chat_id": identity, "text": text}
        try:
            if self._http is not None:
                response = await self._http.post(self.send_url, json=body)
            else:
                async with httpx.AsyncClient(timeout=self._timeout) as http:
                    response = await http.post(self.send_url, json=body)
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            logger.error(
                "Telegram sendMessage to chat %s returned %s",
                identity,
                exc.response.status_code,
            )
        except httpx.HTTPError as exc:
            # str(exc) may embed the request URL, which carries the bot token.
            logger.error(
                "Telegram sendMessage to chat %s failed: %s", identity, type(exc).__name__
            )

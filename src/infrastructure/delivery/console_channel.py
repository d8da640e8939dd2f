"""Infrastructure adapter: stdout → IDeliveryChannel, for the console REPL."""

import sys
from typing import TextIO

from src.domain.ports.delivery_channel_port import IDeliveryChannel


class ConsoleDeliveryChannel(IDeliveryChannel):
    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream

    @property
    def name(self) -> str:
        return "cli"

    async def send(self, identity: str, text: str) -> None:
        stream = self._stream or sys.stdout
        stream.write(f"{text}\n")
        stream.flush()

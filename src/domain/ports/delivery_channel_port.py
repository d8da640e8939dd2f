"""
Port (interface) for reply delivery channels.
Infrastructure adapters (e.g. TelegramDeliveryChannel, ConsoleDeliveryChannel)
must implement this interface. The core only hands over text keyed by identity.
"""

from abc import ABC, abstractmethod


class IDeliveryChannel(ABC):
    @property
    @abstractmethod
    def name(self) -> str:
        """Short channel name, used to keep identities of different channels apart."""
        ...

    @abstractmethod
    async def send(self, identity: str, text: str) -> None:
        """Deliver *text* to the sender identified by *identity*."""
        ...

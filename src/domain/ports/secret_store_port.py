"""
Port (interface) for secret stores.
Infrastructure adapters (e.g. SecretsManagerAdapter) must implement this interface.
Used at startup to provide the Alpha Vantage key and the Telegram bot token.
"""

from abc import ABC, abstractmethod


class ISecretStore(ABC):
    @abstractmethod
    def get_secret(self, secret_id: str) -> dict:
        """Fetch and deserialize a secret. Returns the key-value pairs."""
        ...

    @abstractmethod
    def load_into_env(self, secret_id: str) -> None:
        """Export every key-value pair of the secret as an environment variable."""
        ...

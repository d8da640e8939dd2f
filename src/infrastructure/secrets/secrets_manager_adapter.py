"""
Infrastructure adapter: AWS Secrets Manager → ISecretStore.

load_into_env() runs once in load_settings(), before Settings reads the
environment, so ALPHA_VANTAGE_API_KEY and TELEGRAM_BOT_TOKEN can be kept in
a single JSON secret.
"""

import json
import logging
import os

import boto3

from src.domain.ports.secret_store_port import ISecretStore

logger = logging.getLogger(__name__)


class SecretsManagerAdapter(ISecretStore):
    """Fetches and deserializes secrets from AWS Secrets Manager."""

    def __init__(self, region: str | None = None, client=None) -> None:
        self._client = client or boto3.client(
            "secretsmanager",
            region_name=region or os.environ.get("AWS_DEFAULT_REGION", "us-east-1"),
        )

    def get_secret(self, secret_id: str) -> dict:
        """Fetch and deserialize a JSON secret by ARN or name."""
        response = self._client.get_secret_value(SecretId=secret_id)
        if "SecretString" not in response:
            raise ValueError(f"Secret {secret_id!r} has no SecretString; binary secrets are not supported")
        return json.loads(response["SecretString"])

    def load_into_env(self, secret_id: str) -> None:
        """Inject all key-value pairs of a JSON secret into os.environ.

        Values already present in the environment are overwritten.
        """
        secrets = self.get_secret(secret_id)
        for key, value in secrets.items():
            os.environ[key] = str(value)
        logger.info("Loaded %d settings from secret %s", len(secrets), secret_id)

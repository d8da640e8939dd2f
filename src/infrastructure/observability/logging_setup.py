"""Logging configuration shared by the entrypoints."""

import logging

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"


def configure_logging(level: str | int = "INFO") -> None:
    """Configure the root logger once; later calls only adjust the level."""
    if isinstance(level, str):
        level = level.upper()
    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger().setLevel(level)
    # Request URLs carry the bot token and the Alpha Vantage key.
    logging.getLogger("httpx").setLevel(logging.WARNING)

"""
Console entry point — ask the bot from a terminal.

Every stdin line is answered as a message from the "cli" identity; replies
are printed to stdout. This module is the Composition Root for the REPL.

Run:
    python -m src.infrastructure.entrypoints.console [--provider yfinance]
"""

import argparse
import asyncio
import sys

from src.infrastructure.config.settings import QUOTE_PROVIDERS, load_settings
from src.infrastructure.delivery.console_channel import ConsoleDeliveryChannel
from src.infrastructure.entrypoints.composition import build_quote_provider, build_registry
from src.infrastructure.observability.logging_setup import configure_logging

CLI_IDENTITY = "cli"


async def run(registry, channel, stream=None) -> None:
    """Dispatch lines from *stream* (stdin by default) until end of input."""
    stream = stream or sys.stdin
    while True:
        line = await asyncio.to_thread(stream.readline)
        if not line:
            break
        await registry.dispatch(CLI_IDENTITY, line.strip(), channel)


def main(argv: list[str] | None = None) -> None:
    """CLI entry point."""
    parser = argparse.ArgumentParser(description="Ask for stock prices from the terminal")
    parser.add_argument(
        "--provider",
        choices=QUOTE_PROVIDERS,
        default=None,
        help="Quote provider (default: QUOTE_PROVIDER or alphavantage)",
    )
    args = parser.parse_args(argv)

    settings = load_settings()
    if args.provider:
        settings.quote_provider = args.provider
    configure_logging(settings.log_level)

    try:
        provider = build_quote_provider(settings)
    except ValueError as exc:
        print(f"Error: {exc}")
        sys.exit(1)

    registry = build_registry(provider, clock=settings.market_clock())
    asyncio.run(run(registry, ConsoleDeliveryChannel()))


if __name__ == "__main__":
    main()

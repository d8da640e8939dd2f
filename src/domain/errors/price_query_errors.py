"""
Error taxonomy for price queries.

Each error carries the OutcomeKind it maps to, so the message-handling
boundary can turn any of them into a QueryOutcome without an isinstance chain.
"""

from src.domain.entities.query_outcome import OutcomeKind


class PriceQueryError(Exception):
    kind: OutcomeKind = OutcomeKind.UPSTREAM_ERROR

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class InvalidInput(PriceQueryError):
    """The user typed something unparseable. The message always ends with the help text."""

    kind = OutcomeKind.INVALID_INPUT


class DataUnavailable(PriceQueryError):
    """Well-formed request, but no tradable price was found."""

    kind = OutcomeKind.DATA_UNAVAILABLE


class UpstreamError(PriceQueryError):
    """The quote provider fetch failed. The message is for logs, not for users."""

    kind = OutcomeKind.UPSTREAM_ERROR

"""Shared exception hierarchy for tzblocks services."""

# ── Chain ─────────────────────────────────────────────────────────────────────


class ChainClientError(Exception):
    """Base exception for chain client errors."""


class TransportError(ChainClientError):
    """The node request failed (unreachable host, bad status, timeout)."""


class DecodeError(ChainClientError):
    """The node response does not match the expected schema."""


class InvalidIdentifierError(ChainClientError, TypeError):
    """Block identifier is neither a level (int) nor a hash (str)."""

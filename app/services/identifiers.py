"""Identifier generation for new entities."""
import secrets


def next_id() -> str:
    """Return a new unique identifier (32 hex characters)."""
    return secrets.token_hex(16)

"""Identifier generation."""

import uuid


def generate_id() -> str:
    """Return a new opaque record identifier."""
    return str(uuid.uuid4())

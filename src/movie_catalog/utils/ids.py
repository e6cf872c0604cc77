"""
Identifier generation for movie records.
"""

import uuid


def generate_id() -> str:
    """Return a new random (version 4) UUID as a string."""
    return str(uuid.uuid4())

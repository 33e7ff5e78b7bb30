"""Id generation for activities and completions."""

import uuid


def new_id() -> str:
    """
    Generate a unique identifier.

    Returns:
        A random RFC 4122 version 4 UUID string
    """
    return str(uuid.uuid4())

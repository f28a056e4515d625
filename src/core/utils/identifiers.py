"""Image identifier generation."""

import uuid


def generate_image_id() -> str:
    """Return a new time-ordered unique image identifier.

    Version-1 UUIDs embed the generation timestamp and a clock sequence,
    so identifiers minted by the same host never collide and can be
    ordered by creation time.
    """
    return str(uuid.uuid1())

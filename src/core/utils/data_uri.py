"""Data-URI image payload helpers.

Images travel and are stored as data-URI strings::

    data:image/<subtype>;base64,<data>

Creation only applies a syntactic gate; the Base64 tail is checked when a
binary view is requested.
"""

import base64
import binascii

from aws_lambda_powertools import Logger

from core.models.errors import FormatError
from core.utils.constants import DATA_URI_IMAGE_MARKER, DATA_URI_SEPARATOR

logger = Logger(UTC=True)


def validate_create_payload(payload: str | None) -> bool:
    """Return True if the payload is non-empty and carries an image data-URI marker."""
    if not payload:
        return False

    return DATA_URI_IMAGE_MARKER in payload


def decode_to_binary(payload: str) -> bytes:
    """Decode the Base64 tail of a data-URI payload.

    Everything after the first comma is treated as Base64. Whitespace
    (MIME line wrapping) is ignored; any other non-alphabet character is an
    error. The MIME prefix is not checked against the decoded content.

    Args:
        payload: Stored data-URI string

    Returns:
        Raw image bytes

    Raises:
        FormatError: If there is no comma or the tail is not valid Base64
    """
    head, separator, data = payload.partition(DATA_URI_SEPARATOR)

    if not separator:
        logger.warning("Image payload has no data separator")
        raise FormatError(
            message="Stored image is not a valid data URI",
            details={"reason": "missing separator"},
        )

    try:
        return base64.b64decode("".join(data.split()), validate=True)
    except (binascii.Error, ValueError) as exc:
        logger.warning(
            "Image payload is not valid base64",
            extra={"prefix": head[:64]},
        )
        raise FormatError(
            message="Stored image could not be decoded",
            details={"encoding": "base64"},
        ) from exc

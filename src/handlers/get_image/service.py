"""
Business logic for image retrieval.

This module looks images up in the configured store and derives the
binary view served by the JPEG endpoint.
"""

from aws_lambda_powertools import Logger

from core.infrastructure.factory import build_image_store
from core.models.image import Image
from core.repositories.image_repository import ImageRepository
from core.utils.constants import JPEG_CONTENT_TYPE
from core.utils.data_uri import decode_to_binary
from core.utils.mime import detect_mime_type

logger = Logger(UTC=True)


class GetService:
    """Application service responsible for retrieving stored images.

    Only one representation is stored per image, so the size hint is
    recorded in the logs and otherwise ignored.
    """

    def __init__(self, store: ImageRepository | None = None) -> None:
        self.store = store if store is not None else build_image_store()

    def find_by_id(self, image_id: str, size: str | None = None) -> Image:
        """Return the stored image record.

        Raises:
            NotFoundError: If no image exists for the identifier
            StorageError: If the store read fails
        """
        logger.debug(
            "Fetching image",
            extra={"image_id": image_id, "size": size},
        )

        if size is not None:
            logger.info(
                "Size hint has no stored variant, returning original",
                extra={"image_id": image_id, "size": size},
            )

        payload = self.store.get(image_id=image_id)
        return Image(id=image_id, image=payload)

    def find_jpeg_by_id(self, image_id: str, size: str | None = None) -> bytes:
        """Return the decoded binary content of the stored image.

        The bytes are served as JPEG regardless of the stored subtype.

        Raises:
            NotFoundError: If no image exists for the identifier
            FormatError: If the stored payload is not decodable
            StorageError: If the store read fails
        """
        image = self.find_by_id(image_id, size)
        content = decode_to_binary(image.image)

        detected = detect_mime_type(content)
        if detected is not None and detected != JPEG_CONTENT_TYPE:
            logger.warning(
                "Serving non-JPEG content as JPEG",
                extra={"image_id": image_id, "detected_mime_type": detected},
            )

        return content

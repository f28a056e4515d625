"""Business logic for image creation.

This module validates the payload, mints the identifier and persists the
image through the configured store.
"""

from collections.abc import Callable

from aws_lambda_powertools import Logger

from core.infrastructure.factory import build_image_store
from core.models.errors import ValidationError
from core.models.image import Image
from core.repositories.image_repository import ImageRepository
from core.utils.constants import DATA_URI_IMAGE_MARKER
from core.utils.data_uri import validate_create_payload
from core.utils.identifiers import generate_image_id

logger = Logger(UTC=True)


class CreateService:
    """Application service responsible for storing new images."""

    def __init__(
        self,
        store: ImageRepository | None = None,
        id_generator: Callable[[], str] = generate_image_id,
    ) -> None:
        self.store = store if store is not None else build_image_store()
        self._generate_id = id_generator

    def create(self, image: str | None) -> str:
        """Store an image and return its new identifier.

        Args:
            image: Data-URI image payload

        Returns:
            Identifier assigned to the image

        Raises:
            ValidationError: If the payload is empty or not an image data URI
            StorageError: If the store rejects the write
        """
        if not image:
            raise ValidationError(
                message="Image is required",
                details={"field": "image"},
            )

        if not validate_create_payload(image):
            raise ValidationError(
                message=f"Invalid image: expected a '{DATA_URI_IMAGE_MARKER}' data URI",
                details={"field": "image"},
            )

        record = Image(id=self._generate_id(), image=image)

        image_id = self.store.put(image_id=record.id, payload=record.image)

        logger.info(
            "Image created",
            extra={"image_id": image_id, "size": len(record.image)},
        )
        return image_id

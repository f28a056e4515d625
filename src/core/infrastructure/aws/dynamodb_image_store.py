"""DynamoDB-backed implementation of ImageRepository."""

from aws_lambda_powertools import Logger
from botocore.exceptions import BotoCoreError, ClientError

from core.infrastructure.adapters.dynamodb_adapter import DynamoDBAdapter, DynamoDBAdapterProtocol
from core.models.errors import NotFoundError, StorageError
from core.repositories.image_repository import ImageRepository
from core.utils.constants import (
    ERROR_CODE_IMAGE_FETCH_FAILED,
    ERROR_CODE_IMAGE_INVALID_STATE,
    ERROR_CODE_IMAGE_SAVE_FAILED,
)

logger = Logger(UTC=True)

KEY_ATTRIBUTE = "image_id"
PAYLOAD_ATTRIBUTE = "image"


class DynamoDBImageStore(ImageRepository):
    """DynamoDB-backed image storage with error handling.

    Each image is one item ``{"image_id": <id>, "image": <payload>}``.
    All boto3 errors are caught and translated into domain-specific
    errors with stable semantics.
    """

    def __init__(self, adapter: DynamoDBAdapterProtocol | None = None) -> None:
        """Initialize with DynamoDB adapter."""
        self._db: DynamoDBAdapterProtocol = adapter or DynamoDBAdapter()

    def put(self, *, image_id: str, payload: str) -> str:
        """Persist an image payload.

        Raises:
            StorageError: If the write fails
        """
        logger.debug(
            "Saving image",
            extra={"image_id": image_id, "size": len(payload)},
        )

        try:
            self._db.put_item(item={KEY_ATTRIBUTE: image_id, PAYLOAD_ATTRIBUTE: payload})

        except (ClientError, BotoCoreError) as exc:
            logger.error(
                "DynamoDB put_item failed",
                extra={"image_id": image_id, "error": str(exc)},
            )
            raise StorageError(
                message="Unable to save image at this time",
                error_code=ERROR_CODE_IMAGE_SAVE_FAILED,
                details={"image_id": image_id},
            ) from exc

        except Exception as exc:
            logger.exception("Unexpected error saving image")
            raise StorageError(
                message="Unable to save image at this time",
                error_code=ERROR_CODE_IMAGE_SAVE_FAILED,
                details={"image_id": image_id},
            ) from exc

        logger.info("Image saved", extra={"image_id": image_id})
        return image_id

    def get(self, *, image_id: str) -> str:
        """Fetch an image payload.

        Raises:
            NotFoundError: If no item exists for the identifier
            StorageError: If the read fails or the item is malformed
        """
        logger.debug("Fetching image", extra={"image_id": image_id})

        try:
            response = self._db.get_item(key={KEY_ATTRIBUTE: image_id})

        except (ClientError, BotoCoreError) as exc:
            logger.error(
                "DynamoDB get_item failed",
                extra={"image_id": image_id, "error": str(exc)},
            )
            raise StorageError(
                message="Unable to retrieve image",
                error_code=ERROR_CODE_IMAGE_FETCH_FAILED,
                details={"image_id": image_id},
            ) from exc

        except Exception as exc:
            logger.exception("Unexpected error fetching image")
            raise StorageError(
                message="Unable to retrieve image",
                error_code=ERROR_CODE_IMAGE_FETCH_FAILED,
                details={"image_id": image_id},
            ) from exc

        item = response.get("Item")

        if item is None:
            raise NotFoundError(
                message=f"Image not found: {image_id}",
                details={"image_id": image_id},
            )

        payload = item.get(PAYLOAD_ATTRIBUTE)
        if not isinstance(payload, str):
            logger.error(
                "Stored item has no image payload",
                extra={"image_id": image_id},
            )
            raise StorageError(
                message="Stored image is incomplete",
                error_code=ERROR_CODE_IMAGE_INVALID_STATE,
                details={"image_id": image_id},
            )

        return payload

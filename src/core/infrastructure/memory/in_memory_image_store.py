"""In-process implementation of ImageRepository."""

from threading import Lock

from aws_lambda_powertools import Logger

from core.models.errors import NotFoundError
from core.repositories.image_repository import ImageRepository

logger = Logger(UTC=True)


class InMemoryImageStore(ImageRepository):
    """Dict-backed image storage.

    Contents live only as long as the process (one Lambda container, one
    test). Used for tests and local runs without DynamoDB.
    """

    def __init__(self, images: dict[str, str] | None = None) -> None:
        self._images: dict[str, str] = dict(images or {})
        self._lock = Lock()

    def put(self, *, image_id: str, payload: str) -> str:
        with self._lock:
            self._images[image_id] = payload

        logger.debug("Image saved in memory", extra={"image_id": image_id})
        return image_id

    def get(self, *, image_id: str) -> str:
        with self._lock:
            payload = self._images.get(image_id)

        if payload is None:
            raise NotFoundError(
                message=f"Image not found: {image_id}",
                details={"image_id": image_id},
            )

        return payload

    def __len__(self) -> int:
        with self._lock:
            return len(self._images)

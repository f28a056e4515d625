"""Image store selection from environment configuration."""

import os

from aws_lambda_powertools import Logger

from core.infrastructure.aws.dynamodb_image_store import DynamoDBImageStore
from core.infrastructure.memory.in_memory_image_store import InMemoryImageStore
from core.repositories.image_repository import ImageRepository
from core.utils.constants import (
    DEFAULT_STORE_BACKEND,
    ENV_IMAGE_STORE_BACKEND,
    STORE_BACKEND_DYNAMODB,
    STORE_BACKEND_MEMORY,
)

logger = Logger(UTC=True)

# Shared by every service in the container so memory-backed images survive
# between invocations.
_memory_store = InMemoryImageStore()


def build_image_store() -> ImageRepository:
    """Return the image store configured by ``IMAGE_STORE_BACKEND``.

    Raises:
        RuntimeError: If the backend name is not recognized
    """
    backend = (os.getenv(ENV_IMAGE_STORE_BACKEND) or DEFAULT_STORE_BACKEND).strip().lower()

    if backend == STORE_BACKEND_DYNAMODB:
        return DynamoDBImageStore()

    if backend == STORE_BACKEND_MEMORY:
        logger.debug("Using in-memory image store")
        return _memory_store

    raise RuntimeError(
        f"Unsupported {ENV_IMAGE_STORE_BACKEND} value: {backend!r}. "
        f"Expected '{STORE_BACKEND_DYNAMODB}' or '{STORE_BACKEND_MEMORY}'."
    )

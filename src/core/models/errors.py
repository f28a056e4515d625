"""Exception hierarchy for the image store.

Handlers map each class to an HTTP status through
``core.utils.decorators.error_response``.
"""

from typing import Any, ClassVar

from core.utils.constants import (
    ERROR_CODE_INVALID_IMAGE_FORMAT,
    ERROR_CODE_RESOURCE_NOT_FOUND,
    ERROR_CODE_STORAGE,
    ERROR_CODE_UNAUTHORIZED,
    ERROR_CODE_VALIDATION_FAILED,
)


class ImageServiceError(Exception):
    """
    Base exception for all image service errors.

    Subclasses set ``default_code``; callers may still pass a more specific
    ``error_code``. Optional context goes in ``details``.
    """

    default_code: ClassVar[str | None] = None
    default_message: ClassVar[str | None] = None

    message: str
    error_code: str
    details: dict[str, Any]

    def __init__(
        self,
        *,
        message: str | None = None,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        message = message or self.default_message
        error_code = error_code or self.default_code
        if message is None or error_code is None:
            raise TypeError(f"{type(self).__name__} requires a message and an error code")

        self.message = message
        self.error_code = error_code
        self.details = details or {}

        super().__init__(self.message)


class ValidationError(ImageServiceError):
    """Request input is missing or is not an image data URI."""

    default_code = ERROR_CODE_VALIDATION_FAILED


class UnauthorizedError(ImageServiceError):
    """The credential is missing or the security service rejected it."""

    default_code = ERROR_CODE_UNAUTHORIZED
    default_message = "Unauthorized"


class NotFoundError(ImageServiceError):
    default_code = ERROR_CODE_RESOURCE_NOT_FOUND


class FormatError(ImageServiceError):
    """A stored payload cannot be decoded to binary."""

    default_code = ERROR_CODE_INVALID_IMAGE_FORMAT


class StorageError(ImageServiceError):
    """The store is unreachable or rejected the operation."""

    default_code = ERROR_CODE_STORAGE

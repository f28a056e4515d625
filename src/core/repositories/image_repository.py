"""Abstract contract for image persistence."""

from abc import ABC, abstractmethod


class ImageRepository(ABC):
    """Key-value contract for storing and retrieving image payloads.

    Implementations could be DynamoDB, Redis, an in-process dict, etc.
    The store knows nothing about image formats or size variants; services
    depend on this interface, not the implementation.
    """

    @abstractmethod
    def put(self, *, image_id: str, payload: str) -> str:
        """Persist a payload under an identifier.

        Existing payloads under the same identifier are overwritten.

        Args:
            image_id: Unique image identifier
            payload: Data-URI image string

        Returns:
            The identifier the payload was stored under

        Raises:
            StorageError: If the backend is unreachable or rejects the write
        """

    @abstractmethod
    def get(self, *, image_id: str) -> str:
        """Fetch the payload stored under an identifier.

        Args:
            image_id: Unique image identifier

        Returns:
            The exact payload previously stored

        Raises:
            NotFoundError: If nothing is stored under the identifier
            StorageError: If the backend read fails
        """

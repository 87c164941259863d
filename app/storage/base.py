from abc import ABC, abstractmethod


class BaseDocumentStorage(ABC):
    """Contract for request-scoped scratch storage of uploaded bytes."""

    @abstractmethod
    def save(self, data: bytes, filename: str = "") -> str:
        """Persist bytes and return the key used to read them back.

        Args:
            data: Raw document content.
            filename: Declared client filename; only its extension is kept.
        """

    @abstractmethod
    def read(self, key: str) -> bytes:
        """Return the bytes stored under ``key``.

        Raises:
            FileNotFoundError: if nothing is stored under ``key``.
        """

    @abstractmethod
    def delete(self, key: str) -> None:
        """Remove the entry stored under ``key``; missing keys are ignored."""

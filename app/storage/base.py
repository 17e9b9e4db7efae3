from abc import ABC, abstractmethod


class BaseStorageClient(ABC):
    """Contract for all document storage adapters."""

    @abstractmethod
    def upload(self, folder_id: str, payload: bytes, file_name: str, media_type: str) -> str:
        """Store a document in a folder.

        Returns:
            Id of the newly created remote object.

        Raises:
            StorageError: if the upload fails for any reason.
        """

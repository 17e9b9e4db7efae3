class StorageError(Exception):
    """Raised when a document cannot be stored in the destination folder."""

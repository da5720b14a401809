class StorageError(Exception):
    """Raised when records cannot be written to the store."""

"""IO exceptions."""


class StorageResolutionError(Exception):
    """Raised when a storage location cannot be resolved or used."""


class LoadCorruptionError(Exception):
    """Raised when persisted step data exists but cannot be decoded."""


class SaveFailureError(Exception):
    """Raised by a byte store when a write is refused for a non-OS reason."""

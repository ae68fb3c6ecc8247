"""File storage registry mapping backend names to storage classes."""

import logging
from typing import Type

from moviesapi.config import settings
from moviesapi.storage.azure_blob import AzureBlobFileStorage
from moviesapi.storage.base import FileStorage
from moviesapi.storage.local import LocalFileStorage

logger = logging.getLogger(__name__)

# Registry mapping backend names to storage classes
STORAGE_REGISTRY: dict[str, Type[FileStorage]] = {
    "local": LocalFileStorage,
    "azure": AzureBlobFileStorage,
}


def create_file_storage(backend: str) -> FileStorage:
    """
    Build a storage backend by name.

    Args:
        backend: The backend name (e.g., "local", "azure")

    Returns:
        Storage instance configured from the application settings

    Raises:
        ValueError: If no backend is registered under that name
    """
    storage_class = STORAGE_REGISTRY.get(backend)
    if storage_class is None:
        raise ValueError(f"Unknown file storage backend: {backend!r}")
    return storage_class.from_settings(settings)


def get_file_storage() -> FileStorage:
    """FastAPI dependency returning the configured storage backend."""
    return create_file_storage(settings.file_storage)


async def delete_file_after_commit(storage: FileStorage, file_route: str | None, container: str) -> None:
    """
    Remove the file of an entity whose deletion is already committed.

    A failure here cannot be rolled back against the database, so it is
    logged and the file is left orphaned.
    """
    try:
        await storage.delete_file(file_route, container)
    except Exception as e:
        logger.warning(f"Could not delete {file_route!r} from {container!r}, leaving orphaned file: {e}")


__all__ = [
    "AzureBlobFileStorage",
    "FileStorage",
    "LocalFileStorage",
    "STORAGE_REGISTRY",
    "create_file_storage",
    "delete_file_after_commit",
    "get_file_storage",
]

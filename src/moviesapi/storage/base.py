"""Base file storage interface for uploaded images."""

import uuid
from abc import ABC, abstractmethod
from pathlib import PurePosixPath
from urllib.parse import urlparse

from fastapi import UploadFile

from moviesapi.config import Settings


class FileStorage(ABC):
    """
    Abstract base class for file storage backends.

    Files are grouped by container (e.g. "movies", "actors"). Stored files
    are addressed by the route returned from `save_file`, which is what the
    entities persist.
    """

    @classmethod
    @abstractmethod
    def from_settings(cls, settings: Settings) -> "FileStorage":
        """Build the backend from application settings."""

    @abstractmethod
    async def save_file(self, container: str, file: UploadFile) -> str:
        """
        Store an uploaded file under a new unique name.

        Args:
            container: Container to store the file in
            file: The uploaded file

        Returns:
            Public route (URL) of the stored file
        """

    @abstractmethod
    async def delete_file(self, file_route: str | None, container: str) -> None:
        """
        Delete a stored file.

        An empty or missing route is a no-op, as is a route whose file no
        longer exists.
        """

    async def edit_file(self, container: str, file_route: str | None, file: UploadFile) -> str:
        """Replace a stored file: the old one is deleted before the new one is saved."""
        await self.delete_file(file_route, container)
        return await self.save_file(container, file)

    @staticmethod
    def generate_file_name(filename: str | None) -> str:
        """Random file name that keeps the upload's extension."""
        extension = PurePosixPath(filename or "").suffix
        return f"{uuid.uuid4()}{extension}"

    @staticmethod
    def file_name_from_route(file_route: str) -> str:
        """Last path segment of a stored file's route."""
        return PurePosixPath(urlparse(file_route).path).name

"""File storage in Azure Blob Storage."""

import logging

from azure.core.exceptions import ResourceExistsError, ResourceNotFoundError
from azure.storage.blob import ContentSettings, PublicAccess
from azure.storage.blob.aio import BlobServiceClient, ContainerClient
from fastapi import UploadFile

from moviesapi.config import Settings
from moviesapi.storage.base import FileStorage

logger = logging.getLogger(__name__)


class AzureBlobFileStorage(FileStorage):
    """
    Stores files as blobs, one blob container per storage container.

    Containers are created on first use with public read access to blobs, so
    the returned blob URL can be handed straight to clients.
    """

    def __init__(self, connection_string: str) -> None:
        if not connection_string:
            raise ValueError("Azure storage connection string is not configured")
        self.connection_string = connection_string

    @classmethod
    def from_settings(cls, settings: Settings) -> "AzureBlobFileStorage":
        return cls(settings.azure_storage_connection_string)

    def _service_client(self) -> BlobServiceClient:
        return BlobServiceClient.from_connection_string(self.connection_string)

    async def _ensure_container(self, service: BlobServiceClient, container: str) -> ContainerClient:
        container_client = service.get_container_client(container)
        try:
            await container_client.create_container(public_access=PublicAccess.BLOB)
            logger.info(f"Created blob container {container!r}")
        except ResourceExistsError:
            pass
        return container_client

    async def save_file(self, container: str, file: UploadFile) -> str:
        file_name = self.generate_file_name(file.filename)
        content = await file.read()

        async with self._service_client() as service:
            container_client = await self._ensure_container(service, container)
            blob_client = container_client.get_blob_client(file_name)
            await blob_client.upload_blob(
                content,
                content_settings=ContentSettings(content_type=file.content_type),
            )
            logger.info(f"Uploaded {file.filename!r} to blob {container}/{file_name}")
            return blob_client.url

    async def delete_file(self, file_route: str | None, container: str) -> None:
        if not file_route:
            return

        file_name = self.file_name_from_route(file_route)
        async with self._service_client() as service:
            container_client = service.get_container_client(container)
            try:
                await container_client.delete_blob(file_name)
                logger.info(f"Deleted blob {container}/{file_name}")
            except ResourceNotFoundError:
                logger.info(f"Blob {container}/{file_name} already absent")

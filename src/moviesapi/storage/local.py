"""File storage on the local disk, served by the app under /media."""

import asyncio
import logging
from pathlib import Path

from fastapi import UploadFile

from moviesapi.config import Settings
from moviesapi.storage.base import FileStorage

logger = logging.getLogger(__name__)

MEDIA_URL_PATH = "/media"


class LocalFileStorage(FileStorage):
    """Stores files in `<media_root>/<container>/` and returns their public URL."""

    def __init__(self, media_root: Path, public_base_url: str) -> None:
        self.media_root = Path(media_root)
        self.public_base_url = public_base_url.rstrip("/")

    @classmethod
    def from_settings(cls, settings: Settings) -> "LocalFileStorage":
        return cls(settings.media_root, settings.public_base_url)

    async def save_file(self, container: str, file: UploadFile) -> str:
        file_name = self.generate_file_name(file.filename)
        folder = self.media_root / container
        content = await file.read()

        def _write() -> None:
            folder.mkdir(parents=True, exist_ok=True)
            (folder / file_name).write_bytes(content)

        await asyncio.to_thread(_write)
        logger.info(f"Saved {file.filename!r} as {container}/{file_name} ({len(content)} bytes)")
        return f"{self.public_base_url}{MEDIA_URL_PATH}/{container}/{file_name}"

    async def delete_file(self, file_route: str | None, container: str) -> None:
        if not file_route:
            return

        path = self.media_root / container / self.file_name_from_route(file_route)
        await asyncio.to_thread(path.unlink, missing_ok=True)
        logger.info(f"Deleted {container}/{path.name}")

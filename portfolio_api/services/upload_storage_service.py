from fastapi import UploadFile
from portfolio_api.core.config import settings
from portfolio_api.core.exceptions import PayloadTooLargeError, ValidationError
from contextlib import asynccontextmanager
from typing import Optional, Sequence
import aiofiles
import aiofiles.os
import logging
import os
import time
import uuid

logger = logging.getLogger(__name__)

MB = 1024 * 1024
CHUNK_SIZE = 64 * 1024

# Per-resource upload rules: folder under the upload root, size cap, filename prefix
BLOG_IMAGES = ("blogs", 5 * MB, "")
CV_DOCUMENTS = ("cvs", 10 * MB, "CV_")
HOBBY_IMAGES = ("hobbies", 5 * MB, "")
QUOTE_IMAGES = ("quotes", 2 * MB, "")

PUBLIC_PREFIX = "/uploads"


class UploadStorageService:
    """Writes uploaded files to local disk and hands back their public path"""

    def _unique_filename(self, original: Optional[str], prefix: str) -> str:
        file_extension = os.path.splitext(original)[1] if original else ""
        return f"{prefix}{int(time.time() * 1000)}_{uuid.uuid4().hex[:8]}{file_extension}"

    async def save(
        self,
        file: UploadFile,
        rule: tuple,
        allowed_mime_types: Optional[Sequence[str]] = None,
    ) -> str:
        """
        Store `file` under the rule's folder and return its public path

        Args:
            file: The multipart upload
            rule: (folder, max_bytes, filename_prefix)
            allowed_mime_types: If given, any other content type is rejected

        Returns:
            str: Path like /uploads/blogs/1700000000000_ab12cd34.png
        """
        folder, max_bytes, prefix = rule

        if allowed_mime_types and file.content_type not in allowed_mime_types:
            raise ValidationError(f"Only {', '.join(allowed_mime_types)} files allowed")

        target_dir = os.path.join(settings.upload_root, folder)
        os.makedirs(target_dir, exist_ok=True)

        filename = self._unique_filename(file.filename, prefix)
        target_path = os.path.join(target_dir, filename)

        written = 0
        try:
            async with aiofiles.open(target_path, "wb") as out:
                while True:
                    chunk = await file.read(CHUNK_SIZE)
                    if not chunk:
                        break
                    written += len(chunk)
                    if written > max_bytes:
                        raise PayloadTooLargeError(max_bytes)
                    await out.write(chunk)
        except Exception:
            if await aiofiles.os.path.exists(target_path):
                await aiofiles.os.remove(target_path)
            raise

        public_path = f"{PUBLIC_PREFIX}/{folder}/{filename}"
        logger.info(f"✅ Stored upload {file.filename!r} ({written} bytes) at {public_path}")
        return public_path

    def _local_path(self, public_path: str) -> Optional[str]:
        if not public_path.startswith(PUBLIC_PREFIX + "/"):
            return None
        relative = public_path[len(PUBLIC_PREFIX) + 1:]
        return os.path.join(settings.upload_root, *relative.split("/"))

    async def discard(self, public_path: Optional[str]) -> None:
        """Remove a stored upload by its public path; missing files are ignored"""
        if not public_path:
            return
        local_path = self._local_path(public_path)
        if local_path and await aiofiles.os.path.exists(local_path):
            await aiofiles.os.remove(local_path)
            logger.info(f"🗑️ Discarded upload {public_path}")

    @asynccontextmanager
    async def discard_on_error(self, *public_paths: Optional[str]):
        """Delete freshly stored uploads if the record write that follows fails"""
        try:
            yield
        except Exception:
            for public_path in public_paths:
                await self.discard(public_path)
            raise


upload_storage_service = UploadStorageService()

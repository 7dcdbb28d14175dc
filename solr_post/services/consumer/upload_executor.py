import logging
import mimetypes
from pathlib import Path
from typing import AsyncIterator

import aiofiles
import aiofiles.os
import httpx

from solr_post.core.exceptions import UploadError
from .job_models import UploadJob

OCTET_STREAM = "application/octet-stream"


def guess_content_type(path: Path) -> str:
    """Content type from the file extension, falling back to octet-stream."""
    content_type, _ = mimetypes.guess_type(path.name)
    return content_type or OCTET_STREAM


class UploadExecutor:
    """Posts a single file to the Solr update endpoint."""

    def __init__(self, client: httpx.AsyncClient, update_url: str, chunk_size: int = 256 * 1024):
        self.client = client
        self.update_url = update_url
        self.chunk_size = chunk_size

        logging.debug(f"UploadExecutor initialized for {update_url}")

    async def execute_upload(self, job: UploadJob) -> int:
        """Stream the file to Solr. Returns the HTTP status, raises UploadError on failure."""
        file_path = job.file_path.resolve()

        try:
            stat = await aiofiles.os.stat(file_path)
        except OSError as e:
            raise UploadError(str(file_path), f"cannot stat file: {e}") from e

        # resource.name and literal.id follow the extracting request handler
        params = {"resource.name": str(file_path), "literal.id": str(file_path)}
        headers = {
            "Content-Type": guess_content_type(file_path),
            "Content-Length": str(stat.st_size),
        }

        try:
            response = await self.client.post(
                self.update_url,
                params=params,
                headers=headers,
                content=self._stream_file(file_path),
            )
        except (httpx.HTTPError, OSError) as e:
            raise UploadError(str(file_path), str(e) or type(e).__name__) from e

        if not response.is_success:
            raise UploadError(
                str(file_path),
                response.reason_phrase,
                status_code=response.status_code,
                url=str(response.url),
            )

        logging.debug(f"Indexed {file_path} ({stat.st_size:,} bytes)")
        return response.status_code

    async def _stream_file(self, file_path: Path) -> AsyncIterator[bytes]:
        async with aiofiles.open(file_path, "rb") as f:
            while True:
                chunk = await f.read(self.chunk_size)
                if not chunk:
                    break
                yield chunk

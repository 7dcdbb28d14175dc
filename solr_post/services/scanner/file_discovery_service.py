import logging
import os
from pathlib import Path
from typing import Iterator

import aiofiles.os

from solr_post.core.exceptions import SourceDirectoryError
from .domain_objects import Candidate, ScanConfiguration


class FileDiscoveryService:
    def __init__(self, config: ScanConfiguration):
        self.config = config

    async def validate_root(self) -> Path:
        """Fail fast when the source directory cannot be walked."""
        source_path = Path(self.config.source_directory)

        if not await aiofiles.os.path.exists(source_path):
            raise SourceDirectoryError(str(source_path), "does not exist")

        if not await aiofiles.os.path.isdir(source_path):
            raise SourceDirectoryError(str(source_path), "is not a directory")

        if not os.access(source_path, os.R_OK | os.X_OK):
            raise SourceDirectoryError(str(source_path), "permission denied")

        return source_path

    def iter_candidates(self) -> Iterator[Candidate]:
        """Lazily yield every file below the root with an allowed extension."""
        source_path = Path(self.config.source_directory)

        for root, _, files in os.walk(source_path, onerror=self._on_walk_error):
            for file in files:
                candidate = Candidate.from_path(Path(root) / file)
                if candidate.extension in self.config.file_extensions:
                    yield candidate

    @staticmethod
    def _on_walk_error(error: OSError) -> None:
        logging.warning(f"Skipping unreadable directory {error.filename}: {error}")

import logging
from re import Pattern
from typing import Optional

import aiofiles

from solr_post.core.exceptions import FileReadError
from .domain_objects import Candidate


class ContentFilter:
    """
    Decides whether a candidate's content should be indexed.

    Exclude is checked first and its verdict is final; include is only
    consulted for files the exclude pattern let through.
    """

    def __init__(
        self,
        include_regex: Optional[Pattern[str]] = None,
        exclude_regex: Optional[Pattern[str]] = None,
    ):
        self.include_regex = include_regex
        self.exclude_regex = exclude_regex

    @property
    def is_active(self) -> bool:
        return self.include_regex is not None or self.exclude_regex is not None

    async def admit(self, candidate: Candidate) -> bool:
        if not self.is_active:
            return True

        contents = await self._read_contents(candidate)
        return self.matches(contents)

    def matches(self, contents: str) -> bool:
        if self.exclude_regex is not None and self.exclude_regex.search(contents):
            return False

        if self.include_regex is not None and not self.include_regex.search(contents):
            return False

        return True

    async def _read_contents(self, candidate: Candidate) -> str:
        try:
            async with aiofiles.open(candidate.path, "rb") as f:
                raw = await f.read()
        except OSError as e:
            raise FileReadError(str(candidate.path), e) from e

        logging.debug(f"Read {len(raw)} bytes from {candidate.path} for content filtering")
        return raw.decode("utf-8", errors="replace")

import asyncio
import logging
from typing import Iterable, Optional

from solr_post.services.consumer.job_models import UploadJob
from solr_post.services.scanner.domain_objects import Candidate


class UploadQueueService:
    """
    FIFO of accepted candidates shared by the upload workers.

    The queue is closed by putting one stop sentinel per worker, so every
    worker drains real jobs first and then exits.
    """

    def __init__(self):
        self.job_queue: asyncio.Queue[Optional[UploadJob]] = asyncio.Queue()
        self._closed = False

    async def add_candidates(self, candidates: Iterable[Candidate]) -> int:
        if self._closed:
            raise RuntimeError("Upload queue is closed")

        added = 0
        for candidate in candidates:
            await self.job_queue.put(UploadJob(candidate=candidate))
            added += 1

        logging.debug(f"Added {added} jobs to upload queue, size now {self.job_queue.qsize()}")
        return added

    async def close(self, worker_count: int) -> None:
        self._closed = True
        for _ in range(worker_count):
            await self.job_queue.put(None)

    async def get_next_job(self) -> Optional[UploadJob]:
        """Returns the next job, or None once the queue has been closed and drained."""
        return await self.job_queue.get()

    def mark_job_done(self) -> None:
        self.job_queue.task_done()


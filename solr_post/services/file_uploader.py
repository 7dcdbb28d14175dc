import asyncio
import logging
from typing import Iterable, List

from solr_post.services.consumer.job_models import UploadResult
from solr_post.services.consumer.job_processor import JobProcessor
from solr_post.services.job_queue import UploadQueueService
from solr_post.services.scanner.domain_objects import Candidate


class FileUploaderService:
    """
    Fixed-size pool of upload workers.

    Each worker handles one job at a time, so the number of in-flight
    requests never exceeds the worker count.
    """

    def __init__(
            self,
            job_queue: UploadQueueService,
            job_processor: JobProcessor,
            worker_count: int = 8,
    ):
        if worker_count < 1:
            raise ValueError("worker_count must be at least 1")

        self.job_queue = job_queue
        self.job_processor = job_processor

        self._workers: List[asyncio.Task] = []
        self._worker_count = worker_count
        self._results: List[UploadResult] = []
        self._active_uploads = 0
        self._peak_active_uploads = 0

        logging.debug(f"FileUploaderService initialized with {self._worker_count} workers")

    async def run(self, candidates: Iterable[Candidate]) -> List[UploadResult]:
        """Upload every candidate and return once all of them have settled."""
        await self.job_queue.add_candidates(candidates)
        await self.job_queue.close(self._worker_count)

        for i in range(self._worker_count):
            worker_task = asyncio.create_task(
                self._worker_loop(f"worker-{i + 1}"), name=f"upload-worker-{i + 1}"
            )
            self._workers.append(worker_task)

        logging.debug(f"Started {len(self._workers)} upload workers")

        try:
            await asyncio.gather(*self._workers)
        finally:
            await self._stop_workers()

        return list(self._results)

    async def _stop_workers(self) -> None:
        for worker in self._workers:
            if not worker.done():
                worker.cancel()

        if self._workers:
            await asyncio.gather(*self._workers, return_exceptions=True)

        self._workers.clear()

    async def _worker_loop(self, worker_id: str) -> None:
        while True:
            job = await self.job_queue.get_next_job()
            if job is None:
                self.job_queue.mark_job_done()
                logging.debug(f"Upload {worker_id} finished")
                return

            self._active_uploads += 1
            self._peak_active_uploads = max(self._peak_active_uploads, self._active_uploads)
            try:
                result = await self.job_processor.process_job(job)
                self._results.append(result)
            finally:
                self._active_uploads -= 1
                self.job_queue.mark_job_done()

    @property
    def peak_active_uploads(self) -> int:
        return self._peak_active_uploads

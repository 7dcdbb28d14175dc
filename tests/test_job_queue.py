"""
Tests for UploadQueueService.
"""

from pathlib import Path

import pytest

from solr_post.services.job_queue import UploadQueueService
from solr_post.services.scanner.domain_objects import Candidate


def candidates(*names):
    return [Candidate.from_path(Path("/data") / name) for name in names]


class TestUploadQueueService:
    @pytest.mark.asyncio
    async def test_fifo_order(self):
        queue = UploadQueueService()
        await queue.add_candidates(candidates("a.html", "b.html", "c.html"))
        await queue.close(worker_count=1)

        names = []
        while (job := await queue.get_next_job()) is not None:
            names.append(job.file_path.name)

        assert names == ["a.html", "b.html", "c.html"]

    @pytest.mark.asyncio
    async def test_one_sentinel_per_worker(self):
        queue = UploadQueueService()
        await queue.add_candidates(candidates("a.html"))
        await queue.close(worker_count=3)

        assert queue.job_queue.qsize() == 4
        assert (await queue.get_next_job()) is not None
        for _ in range(3):
            assert await queue.get_next_job() is None

    @pytest.mark.asyncio
    async def test_closed_queue_rejects_candidates(self):
        queue = UploadQueueService()
        await queue.close(worker_count=1)

        with pytest.raises(RuntimeError):
            await queue.add_candidates(candidates("a.html"))

    @pytest.mark.asyncio
    async def test_add_returns_count(self):
        queue = UploadQueueService()
        assert await queue.add_candidates(candidates("a.html", "b.html")) == 2

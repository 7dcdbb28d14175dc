"""
Post Orchestrator - runs one complete solr_post pipeline.

validate root -> enumerate -> content filter -> on_start -> upload pool
-> optional commit -> on_finish
"""

import asyncio
import logging
import time
from contextlib import asynccontextmanager
from typing import AsyncIterator, Iterable, List, Optional

import httpx

from solr_post.core.exceptions import FileReadError
from solr_post.models import PostConfig
from solr_post.services.consumer.job_models import RunSummary, UploadResult
from solr_post.services.consumer.job_processor import JobProcessor
from solr_post.services.consumer.upload_executor import UploadExecutor
from solr_post.services.file_uploader import FileUploaderService
from solr_post.services.job_queue import UploadQueueService
from solr_post.services.scanner.content_filter import ContentFilter
from solr_post.services.scanner.domain_objects import Candidate, ScanConfiguration
from solr_post.services.scanner.file_discovery_service import FileDiscoveryService
from solr_post.services.tracking.progress_tracker import ProgressCallbacks, ProgressTracker


class PostOrchestrator:
    def __init__(
        self,
        config: PostConfig,
        callbacks: Optional[ProgressCallbacks] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.config = config
        self.transport = transport
        self.progress_tracker = ProgressTracker(callbacks)
        self.discovery_service = FileDiscoveryService(
            ScanConfiguration(
                source_directory=config.directory_path,
                file_extensions=config.file_extensions,
            )
        )
        self.content_filter = ContentFilter(
            include_regex=config.include_regex,
            exclude_regex=config.exclude_regex,
        )

    async def run(self) -> RunSummary:
        started = time.monotonic()

        # Fatal errors surface here, before any upload
        await self.discovery_service.validate_root()
        accepted = await self.filter_candidates(self.discovery_service.iter_candidates())

        async with self._http_client() as client:
            self.progress_tracker.start(len(accepted))

            uploader = FileUploaderService(
                job_queue=UploadQueueService(),
                job_processor=JobProcessor(
                    upload_executor=UploadExecutor(
                        client, self.config.resolved_update_url, self.config.chunk_size
                    ),
                    progress_tracker=self.progress_tracker,
                ),
                worker_count=self.config.concurrency,
            )
            results = await uploader.run(accepted)

            committed = False
            if self.config.commit and self.progress_tracker.state.completed > 0:
                committed = await self.commit(client)

        self.progress_tracker.finish()
        return self._build_summary(results, committed, time.monotonic() - started)

    async def filter_candidates(self, candidates: Iterable[Candidate]) -> List[Candidate]:
        """Apply the content filter, reading at most `concurrency` files at once."""
        if not self.content_filter.is_active:
            return list(candidates)

        semaphore = asyncio.Semaphore(self.config.concurrency)

        async def check(candidate: Candidate) -> Optional[Candidate]:
            async with semaphore:
                try:
                    admitted = await self.content_filter.admit(candidate)
                except FileReadError as e:
                    logging.warning(f"Skipping {candidate.path}: {e.cause}")
                    self.progress_tracker.record_skipped(str(candidate.path), e)
                    return None

            if not admitted:
                logging.debug(f"Filtered out by content rules: {candidate.path}")
                return None
            return candidate

        checked = await asyncio.gather(*(check(candidate) for candidate in candidates))
        return [candidate for candidate in checked if candidate is not None]

    async def commit(self, client: httpx.AsyncClient) -> bool:
        """Ask Solr to commit the uploaded documents. Failure is logged, not raised."""
        try:
            response = await client.get(self.config.commit_url, params={"commit": "true"})
        except httpx.HTTPError as e:
            logging.error(f"Commit failed: {e}. Is the Solr server running?")
            return False

        if not response.is_success:
            logging.error(f"Commit failed: GET {response.url} returned {response.status_code}")
            return False

        logging.info("Commit successful")
        return True

    @asynccontextmanager
    async def _http_client(self) -> AsyncIterator[httpx.AsyncClient]:
        auth = httpx.BasicAuth(*self.config.basic_auth) if self.config.basic_auth else None
        async with httpx.AsyncClient(
            auth=auth,
            timeout=httpx.Timeout(self.config.timeout_seconds),
            limits=httpx.Limits(max_connections=self.config.concurrency),
            transport=self.transport,
        ) as client:
            yield client

    def _build_summary(
        self, results: List[UploadResult], committed: bool, elapsed: float
    ) -> RunSummary:
        state = self.progress_tracker.state
        return RunSummary(
            total=state.total,
            succeeded=state.completed,
            failed=state.failed,
            skipped=state.skipped,
            committed=committed,
            elapsed_seconds=elapsed,
            failures=[result for result in results if not result.success],
        )

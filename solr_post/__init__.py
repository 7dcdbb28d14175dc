"""
solr_post - post a directory of documents to a Solr collection concurrently.

    config = build_post_config(collection="portal", directory_path="./public")
    summary = await solr_post(config, on_next=print)
"""

import asyncio
from typing import Callable, Optional

import httpx

from .core.exceptions import (
    FileReadError,
    PostConfigError,
    SolrPostError,
    SourceDirectoryError,
    UploadError,
)
from .models import PostConfig, build_post_config
from .services.consumer.job_models import RunSummary
from .services.post_orchestrator import PostOrchestrator
from .services.tracking.progress_tracker import ProgressCallbacks

__version__ = "0.1.0"


async def solr_post(
    config: PostConfig,
    on_start: Optional[Callable[[int], None]] = None,
    on_next: Optional[Callable[[int], None]] = None,
    on_finish: Optional[Callable[[], None]] = None,
    on_error: Optional[Callable[[str, SolrPostError], None]] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> RunSummary:
    """
    Post every matching file under config.directory_path to Solr.

    on_start is called with the number of files that passed filtering,
    on_next with the running count of successful uploads and on_finish once
    every upload has settled. on_error receives per-file read and upload
    failures; those never stop the rest of the batch.

    Raises SourceDirectoryError before any upload when the directory
    cannot be read.
    """
    callbacks = ProgressCallbacks.from_optional(
        on_start=on_start, on_next=on_next, on_finish=on_finish, on_error=on_error
    )
    orchestrator = PostOrchestrator(config, callbacks, transport=transport)
    return await orchestrator.run()


def run_solr_post(config: PostConfig, **callbacks) -> RunSummary:
    """Blocking wrapper around solr_post() for callers without an event loop."""
    return asyncio.run(solr_post(config, **callbacks))


__all__ = [
    "FileReadError",
    "PostConfig",
    "PostConfigError",
    "ProgressCallbacks",
    "RunSummary",
    "SolrPostError",
    "SourceDirectoryError",
    "UploadError",
    "build_post_config",
    "run_solr_post",
    "solr_post",
]

"""
Job Models for the upload consumer - typed data structures for the upload queue.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from solr_post.services.scanner.domain_objects import Candidate


@dataclass
class UploadJob:
    """One accepted candidate waiting for a worker."""

    candidate: Candidate

    @property
    def file_path(self) -> Path:
        return self.candidate.path

    def __str__(self) -> str:
        return f"UploadJob(path={self.file_path})"


@dataclass
class UploadResult:
    """
    Result object for a single upload attempt.

    Provides structured information about job completion
    for the run summary and error reporting.
    """

    file_path: str
    success: bool
    processing_time_seconds: float
    status_code: Optional[int] = None
    error_message: Optional[str] = None
    hint: Optional[str] = None

    def __str__(self) -> str:
        status = "SUCCESS" if self.success else "FAILED"
        return (
            f"UploadResult({status}, "
            f"file={self.file_path}, "
            f"time={self.processing_time_seconds:.2f}s)"
        )


@dataclass
class RunSummary:
    total: int = 0
    succeeded: int = 0
    failed: int = 0
    skipped: int = 0
    committed: bool = False
    elapsed_seconds: float = 0.0
    failures: List[UploadResult] = field(default_factory=list)

    @property
    def has_failures(self) -> bool:
        return self.failed > 0 or self.skipped > 0

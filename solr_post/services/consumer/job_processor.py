"""
Job Processor - uploads one job and reports the outcome to the progress tracker.
"""

import logging
import time

from solr_post.core.exceptions import UploadError
from solr_post.services.tracking.progress_tracker import ProgressTracker
from .job_error_classifier import JobErrorClassifier
from .job_models import UploadJob, UploadResult
from .upload_executor import UploadExecutor


class JobProcessor:
    def __init__(
        self,
        upload_executor: UploadExecutor,
        progress_tracker: ProgressTracker,
        error_classifier: JobErrorClassifier = None,
    ):
        self.upload_executor = upload_executor
        self.progress_tracker = progress_tracker
        self.error_classifier = error_classifier or JobErrorClassifier()

    async def process_job(self, job: UploadJob) -> UploadResult:
        """Upload a single file. Failures are recorded, never raised."""
        file_path = str(job.file_path)
        started = time.monotonic()

        try:
            status_code = await self.upload_executor.execute_upload(job)
        except UploadError as e:
            hint = self.error_classifier.classify(e)
            if self.error_classifier.is_systemic(e):
                logging.error(f"Failed to index {file_path}: {e}. {hint}")
            else:
                logging.warning(f"Failed to index {file_path}: {e}. {hint}")
            self.progress_tracker.record_failure(file_path, e)
            return UploadResult(
                file_path=file_path,
                success=False,
                processing_time_seconds=time.monotonic() - started,
                status_code=e.status_code,
                error_message=str(e),
                hint=hint,
            )

        completed = self.progress_tracker.record_success()
        logging.debug(f"Indexed ({completed}/{self.progress_tracker.state.total}): {file_path}")
        return UploadResult(
            file_path=file_path,
            success=True,
            processing_time_seconds=time.monotonic() - started,
            status_code=status_code,
        )

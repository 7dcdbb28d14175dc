from .job_error_classifier import JobErrorClassifier
from .job_models import RunSummary, UploadJob, UploadResult
from .job_processor import JobProcessor
from .upload_executor import UploadExecutor, guess_content_type

__all__ = [
    "JobErrorClassifier",
    "JobProcessor",
    "RunSummary",
    "UploadExecutor",
    "UploadJob",
    "UploadResult",
    "guess_content_type",
]

# solr_post/core/exceptions.py

from typing import Optional


class SolrPostError(Exception):
    """Base class for all errors raised by solr_post."""


class PostConfigError(SolrPostError):
    """Raised when a run configuration is invalid. Fatal, raised before any upload."""


class SourceDirectoryError(SolrPostError):
    """Raised when the source directory cannot be walked. Fatal to the run."""

    def __init__(self, directory: str, reason: str):
        self.directory = directory
        self.reason = reason
        super().__init__(f"Cannot read source directory {directory}: {reason}")


class FileReadError(SolrPostError):
    """Raised when a candidate file cannot be read by the content filter."""

    def __init__(self, file_path: str, cause: Exception):
        self.file_path = file_path
        self.cause = cause
        super().__init__(f"Failed to read {file_path}: {cause}")


class UploadError(SolrPostError):
    """Raised when a single file could not be posted to Solr."""

    def __init__(
        self,
        file_path: str,
        reason: str,
        status_code: Optional[int] = None,
        url: Optional[str] = None,
    ):
        self.file_path = file_path
        self.reason = reason
        self.status_code = status_code
        self.url = url
        if status_code is not None:
            message = f"POST {url} returned {status_code} for {file_path}: {reason}"
        else:
            message = f"POST failed for {file_path}: {reason}"
        super().__init__(message)

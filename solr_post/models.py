"""
Run configuration for a solr_post run.

PostConfig is built once per run and never mutated; the pipeline only reads it.
"""

import re
from pathlib import Path
from re import Pattern
from typing import FrozenSet, Optional
from urllib.parse import urlparse

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .config import DEFAULT_FILE_EXTENSIONS, Settings
from .core.exceptions import PostConfigError


def normalize_extension(extension: str) -> str:
    """Lower-case an extension and strip the leading dot: '.HTML' -> 'html'."""
    return extension.strip().lstrip(".").lower()


def compile_content_pattern(pattern: Optional[str]) -> Optional[Pattern[str]]:
    """Compile a content filter pattern; matching is always case-insensitive."""
    if pattern is None or pattern == "":
        return None
    try:
        return re.compile(pattern, re.IGNORECASE)
    except re.error as e:
        raise PostConfigError(f"Invalid regex {pattern!r}: {e}") from e


class PostConfig(BaseModel):
    """Immutable configuration for posting a directory of files to Solr."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    host: str = "localhost"
    port: int = Field(default=8983, ge=1, le=65535)
    collection: str = "collection1"
    # Overrides host, port and collection when set,
    # e.g. "http://localhost:8983/solr/my_collection/update"
    update_url: Optional[str] = None

    directory_path: Path = Path("./")
    file_extensions: FrozenSet[str] = frozenset(DEFAULT_FILE_EXTENSIONS.split(","))

    # Exclude takes precedence over include
    exclude_regex: Optional[Pattern[str]] = None
    include_regex: Optional[Pattern[str]] = None

    concurrency: int = Field(default=8, ge=1)
    basic_auth_creds: Optional[str] = None  # "user:password"
    timeout_seconds: float = Field(default=30.0, gt=0)
    commit: bool = True
    chunk_size: int = Field(default=256 * 1024, ge=1)

    @field_validator("file_extensions", mode="before")
    @classmethod
    def _normalize_extensions(cls, value):
        if isinstance(value, str):
            value = value.split(",")
        extensions = frozenset(normalize_extension(ext) for ext in value if ext.strip())
        if not extensions:
            raise ValueError("at least one file extension is required")
        return extensions

    @field_validator("exclude_regex", "include_regex", mode="before")
    @classmethod
    def _compile_pattern(cls, value):
        if isinstance(value, str):
            return compile_content_pattern(value)
        if isinstance(value, Pattern) and not value.flags & re.IGNORECASE:
            return re.compile(value.pattern, value.flags | re.IGNORECASE)
        return value

    @field_validator("update_url")
    @classmethod
    def _validate_url(cls, value):
        if value is None:
            return value
        parsed = urlparse(value)
        if parsed.scheme not in ("http", "https") or not parsed.netloc:
            raise ValueError(f"not an http(s) URL: {value!r}")
        return value

    @field_validator("basic_auth_creds")
    @classmethod
    def _validate_creds(cls, value):
        if value is not None and ":" not in value:
            raise ValueError("credentials must look like 'user:password'")
        return value

    @property
    def resolved_update_url(self) -> str:
        """The Solr update endpoint every file is posted to."""
        if self.update_url:
            return self.update_url
        return f"http://{self.host}:{self.port}/solr/{self.collection}/update"

    @property
    def commit_url(self) -> str:
        """Update handler to send the commit to; the extracting handler is not used for commits."""
        url = self.resolved_update_url.rstrip("/")
        if url.endswith("/extract"):
            url = url[: -len("/extract")]
        return url

    @property
    def basic_auth(self) -> Optional[tuple]:
        if self.basic_auth_creds is None:
            return None
        user, _, password = self.basic_auth_creds.partition(":")
        return user, password

    @classmethod
    def from_settings(cls, settings: Settings, **overrides) -> "PostConfig":
        """Build a run config from Settings defaults plus explicit overrides."""
        values = {
            "host": settings.host,
            "port": settings.port,
            "collection": settings.collection,
            "update_url": settings.update_url,
            "file_extensions": settings.file_extension_list,
            "concurrency": settings.concurrency,
            "timeout_seconds": settings.request_timeout_seconds,
            "commit": settings.commit_after_upload,
            "chunk_size": settings.upload_chunk_size_kb * 1024,
        }
        values.update({k: v for k, v in overrides.items() if v is not None})
        return build_post_config(**values)


def describe_validation_error(error: ValidationError) -> str:
    return "; ".join(
        f"{'.'.join(str(loc) for loc in err['loc'])}: {err['msg']}"
        for err in error.errors()
    )


def build_post_config(**values) -> PostConfig:
    """Construct a PostConfig, converting validation failures into PostConfigError."""
    try:
        return PostConfig(**values)
    except ValidationError as e:
        raise PostConfigError(f"Invalid configuration: {describe_validation_error(e)}") from e


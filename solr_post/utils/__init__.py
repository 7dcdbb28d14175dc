"""
Utilities package for solr_post.

Pure helpers that support the pipeline without side effects.
"""

from .progress_utils import (
    calculate_index_progress,
    format_elapsed,
    format_progress_line,
)

__all__ = [
    "calculate_index_progress",
    "format_elapsed",
    "format_progress_line",
]

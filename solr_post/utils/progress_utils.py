"""Progress calculation utilities for solr_post."""


def calculate_index_progress(indexed_count: int, total_count: int) -> float:
    if total_count <= 0:
        return 100.0  # Nothing to index is "complete"

    if indexed_count >= total_count:
        return 100.0

    if indexed_count <= 0:
        return 0.0

    return (indexed_count / total_count) * 100.0


def format_progress_line(indexed_count: int, total_count: int) -> str:
    percent = calculate_index_progress(indexed_count, total_count)
    return f"{indexed_count}/{total_count} indexed {percent:.2f}%"


def format_elapsed(seconds: float) -> str:
    if seconds < 60:
        return f"{seconds:.1f}s"

    minutes, secs = divmod(int(seconds), 60)
    if minutes < 60:
        return f"{minutes}m {secs:02d}s"

    hours, minutes = divmod(minutes, 60)
    return f"{hours}h {minutes:02d}m {secs:02d}s"

"""
Tests for progress_utils utilities.
"""

from solr_post.utils.progress_utils import (
    calculate_index_progress,
    format_elapsed,
    format_progress_line,
)


class TestCalculateIndexProgress:
    def test_zero_percent(self):
        assert calculate_index_progress(0, 10) == 0.0

    def test_fifty_percent(self):
        assert calculate_index_progress(5, 10) == 50.0

    def test_complete(self):
        assert calculate_index_progress(10, 10) == 100.0

    def test_nothing_to_index(self):
        assert calculate_index_progress(0, 0) == 100.0

    def test_over_complete(self):
        assert calculate_index_progress(12, 10) == 100.0


class TestFormatProgressLine:
    def test_two_decimals(self):
        assert format_progress_line(1, 3) == "1/3 indexed 33.33%"

    def test_complete(self):
        assert format_progress_line(3, 3) == "3/3 indexed 100.00%"


class TestFormatElapsed:
    def test_seconds(self):
        assert format_elapsed(4.3) == "4.3s"

    def test_minutes(self):
        assert format_elapsed(125) == "2m 05s"

    def test_hours(self):
        assert format_elapsed(3725) == "1h 02m 05s"

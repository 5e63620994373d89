#!/usr/bin/env python3
"""
Tests for BatchProcessor ordering, error capture and progress reporting.
"""

from __future__ import annotations

import pytest

from media_identifier import MediaParser
from mediaid import BatchProcessor, MediaType

NAMES = [
    "Dark.Matter.S01E05.720p.HDTV.x264-KILLERS.mkv",
    "Movie.2023.1080p.BluRay.x264-GROUP.mkv",
    "unknown.file.mkv",
    "Show.1x05.Pilot.HDTV.mkv",
    "Heat.1995.DVDRip.avi",
]


class FlakyParser:
    """Parser double that fails on one name."""

    def __init__(self, bad_name):
        self.bad_name = bad_name
        self.inner = MediaParser()

    def parse(self, filename):
        if filename == self.bad_name:
            raise RuntimeError("boom")
        return self.inner.parse(filename)


def test_sequential_keeps_input_order():
    processor = BatchProcessor(MediaParser(), batch_size=2)
    result = processor.process(NAMES)

    assert result.total_names == len(NAMES)
    assert [r.original for r in result.results] == NAMES
    assert result.errors == []


def test_parallel_keeps_input_order():
    names = NAMES * 20
    processor = BatchProcessor(MediaParser(), batch_size=3, max_workers=4)
    result = processor.process_parallel(names)

    assert [r.original for r in result.results] == names


def test_parallel_matches_sequential():
    parser = MediaParser()
    sequential = BatchProcessor(parser, batch_size=2).process(NAMES)
    parallel = BatchProcessor(parser, batch_size=2, max_workers=3).process_parallel(NAMES)

    assert sequential.results == parallel.results


def test_errors_are_recorded_and_processing_continues():
    processor = BatchProcessor(FlakyParser("unknown.file.mkv"), batch_size=2)
    result = processor.process(NAMES)

    assert result.errors == [{"index": 2, "name": "unknown.file.mkv", "error": "boom"}]
    assert result.results[2] is None
    assert len(result.parsed) == len(NAMES) - 1


def test_progress_callback_reaches_total():
    calls = []
    processor = BatchProcessor(MediaParser(), batch_size=2)
    processor.process(NAMES, progress_callback=lambda done, total: calls.append((done, total)))

    assert calls == [(2, 5), (4, 5), (5, 5)]


def test_count_by_media_type():
    result = BatchProcessor(MediaParser()).process(NAMES)

    assert result.count(MediaType.EPISODE) == 2
    assert result.count(MediaType.MOVIE) == 2
    assert result.count(MediaType.UNKNOWN) == 1


def test_empty_input():
    result = BatchProcessor(MediaParser()).process_parallel([])
    assert result.total_names == 0
    assert result.results == []


@pytest.mark.parametrize("kwargs", [{"batch_size": 0}, {"max_workers": 0}])
def test_invalid_sizes(kwargs):
    with pytest.raises(ValueError):
        BatchProcessor(MediaParser(), **kwargs)


def test_performance_stats():
    processor = BatchProcessor(MediaParser(), batch_size=10, max_workers=2)
    assert processor.get_performance_stats() == {"status": "no_processing_started"}

    processor.process(NAMES)
    stats = processor.get_performance_stats()
    assert stats["processed_count"] == len(NAMES)
    assert stats["batch_size"] == 10
    assert stats["max_workers"] == 2

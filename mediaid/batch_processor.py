#!/usr/bin/env python3
"""
Batch processor for parsing many filenames.

Parses names in fixed-size batches, optionally spread over a thread pool,
with progress reporting and basic throughput metrics. Results always come
back in input order.
"""

from __future__ import annotations

import logging
import time
from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional, Protocol, Sequence

from .models import MediaType, ParsedMedia


class SupportsParse(Protocol):
    def parse(self, filename: str) -> ParsedMedia: ...


@dataclass
class BatchResult:
    total_names: int
    results: List[Optional[ParsedMedia]] = field(default_factory=list)
    errors: List[Dict[str, Any]] = field(default_factory=list)
    processing_time: float = 0.0
    names_per_second: float = 0.0

    @property
    def parsed(self) -> List[ParsedMedia]:
        return [r for r in self.results if r is not None]

    def count(self, media_type: MediaType) -> int:
        return sum(1 for r in self.parsed if r.media_type is media_type)


class BatchProcessor:
    def __init__(self, parser: SupportsParse, batch_size: int = 100, max_workers: int = 4) -> None:
        if batch_size < 1:
            raise ValueError("batch_size must be at least 1")
        if max_workers < 1:
            raise ValueError("max_workers must be at least 1")
        self.parser = parser
        self.batch_size = batch_size
        self.max_workers = max_workers

        self.start_time: Optional[float] = None
        self.processed_count = 0

        self.logger = logging.getLogger(__name__)

    def process(
        self,
        names: Sequence[str],
        progress_callback: Optional[Callable[[int, int], None]] = None,
    ) -> BatchResult:
        """Parse names one batch after another on the calling thread."""
        self.start_time = time.time()
        self.processed_count = 0

        total = len(names)
        results: List[Optional[ParsedMedia]] = [None] * total
        errors: List[Dict[str, Any]] = []

        self.logger.info("Starting batch parsing of %s names", total)

        for offset in range(0, total, self.batch_size):
            batch = list(names[offset : offset + self.batch_size])
            parsed, batch_errors = self._process_batch(offset, batch)
            results[offset : offset + len(batch)] = parsed
            errors.extend(batch_errors)

            self.processed_count += len(batch)
            if progress_callback:
                progress_callback(self.processed_count, total)

        return self._finish(total, results, errors)

    def process_parallel(
        self,
        names: Sequence[str],
        progress_callback: Optional[Callable[[int, int], None]] = None,
    ) -> BatchResult:
        """Parse batches concurrently; the parser must be safe to share between threads."""
        self.start_time = time.time()
        self.processed_count = 0

        total = len(names)
        results: List[Optional[ParsedMedia]] = [None] * total
        errors: List[Dict[str, Any]] = []

        self.logger.info("Starting parallel parsing of %s names with %s workers", total, self.max_workers)

        with ThreadPoolExecutor(max_workers=self.max_workers) as executor:
            future_to_offset = {
                executor.submit(self._process_batch, offset, list(names[offset : offset + self.batch_size])): offset
                for offset in range(0, total, self.batch_size)
            }

            for future in as_completed(future_to_offset):
                offset = future_to_offset[future]
                parsed, batch_errors = future.result()
                results[offset : offset + len(parsed)] = parsed
                errors.extend(batch_errors)

                self.processed_count += len(parsed)
                if progress_callback:
                    progress_callback(self.processed_count, total)

        return self._finish(total, results, errors)

    def _process_batch(self, offset: int, batch: Sequence[str]):
        parsed: List[Optional[ParsedMedia]] = []
        errors: List[Dict[str, Any]] = []
        for idx, name in enumerate(batch, offset):
            try:
                parsed.append(self.parser.parse(name))
            except Exception as exc:  # noqa: BLE001
                self.logger.error("Parsing %r failed: %s", name, exc)
                errors.append({"index": idx, "name": name, "error": str(exc)})
                parsed.append(None)
        return parsed, errors

    def _finish(self, total: int, results: List[Optional[ParsedMedia]], errors: List[Dict[str, Any]]) -> BatchResult:
        processing_time = time.time() - (self.start_time or time.time())
        names_per_second = (total / processing_time) if processing_time > 0 else 0.0

        self.logger.info("Parsed %s names in %.3fs (%.1f names/s)", total, processing_time, names_per_second)

        return BatchResult(
            total_names=total,
            results=results,
            errors=sorted(errors, key=lambda e: e["index"]),
            processing_time=processing_time,
            names_per_second=names_per_second,
        )

    def get_performance_stats(self) -> Dict[str, Any]:
        if not self.start_time:
            return {"status": "no_processing_started"}

        elapsed_time = time.time() - self.start_time
        current_rate = (self.processed_count / elapsed_time) if elapsed_time > 0 else 0.0

        return {
            "processed_count": self.processed_count,
            "elapsed_time": elapsed_time,
            "current_rate": current_rate,
            "batch_size": self.batch_size,
            "max_workers": self.max_workers,
        }

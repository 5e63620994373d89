#!/usr/bin/env python3
"""
Path parser module to keep directory handling separate from filename parsing.

Splits an input string into offsets (all into the untouched input):
- directory prefix (everything up to and including the last "/" or "\\")
- name region (what the scanners look at)
- extension (from the dot, when it is a whitelisted container)
"""

from dataclasses import dataclass
from typing import Optional

from .tokenizer import Tokenizer


@dataclass
class PathParseResult:
    """Structured result of splitting a filepath into regions."""
    original: str
    name_start: int
    name_end: int
    extension: Optional[str] = None

    @property
    def directory(self) -> Optional[str]:
        """Directory prefix including its trailing separator, if any."""
        return self.original[:self.name_start] or None

    @property
    def name(self) -> str:
        return self.original[self.name_start:self.name_end]

    @property
    def basename(self) -> str:
        """Filename without its parent directories (extension kept)."""
        return self.original[self.name_start:]


class PathParser:
    """Parser that isolates the parent directory and the extension."""

    def __init__(self, tokenizer: Optional[Tokenizer] = None):
        self.tokenizer = tokenizer or Tokenizer()

    def parse(self, filepath: str) -> PathParseResult:
        """
        Split a filepath into directory, name and extension regions.

        Both "/" and "\\" are treated as directory separators.

        Args:
            filepath: Full input string. Can be empty.

        Returns:
            PathParseResult with offsets into filepath
        """
        if not filepath:
            return PathParseResult(original=filepath or "", name_start=0, name_end=0)

        name_start = max(filepath.rfind('/'), filepath.rfind('\\')) + 1
        basename = filepath[name_start:]

        found = self.tokenizer.extract_extension(basename)
        # A bare ".mkv" has no name in front of the dot
        if found is None or found[1] == 0:
            return PathParseResult(original=filepath, name_start=name_start, name_end=len(filepath))

        ext, dot_pos = found
        return PathParseResult(
            original=filepath,
            name_start=name_start,
            name_end=name_start + dot_pos,
            extension=ext,
        )

#!/usr/bin/env python3
"""
Error types raised outside the parsing pipeline.

Parsing itself never raises: unknown or ambiguous input only lowers the
confidence of the result. The only errors are configuration errors, raised
when a ParserConfig is built, before any filename is parsed.
"""

from typing import Iterable, List


class MediaIdError(Exception):
    """Base class for media identifier errors."""


class ConfigurationError(MediaIdError, ValueError):
    """Raised when a parser configuration is invalid."""

    def __init__(self, messages: Iterable[str]):
        self.messages: List[str] = list(messages) or ["invalid configuration"]
        super().__init__("; ".join(self.messages))

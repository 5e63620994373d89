#!/usr/bin/env python3
"""
Vocabulary scanners for the technical tags of a release name.
"""

from .constants import (
    AUDIO_MARKERS,
    CODEC_MARKERS,
    LANGUAGE_MARKERS,
    NOISE_MARKERS,
    RESOLUTION_MARKERS,
    SOURCE_MARKERS,
)
from .models import MatchCategory
from .scanner import MarkerScanner


class QualityScanner(MarkerScanner):
    """Resolution markers: 720p, 1080p, 2160p, 4K..."""

    def __init__(self):
        super().__init__('quality', MatchCategory.QUALITY, RESOLUTION_MARKERS)


class SourceScanner(MarkerScanner):
    """Release source: BluRay, WEB-DL, HDTV..."""

    def __init__(self):
        super().__init__('source', MatchCategory.SOURCE, SOURCE_MARKERS)


class CodecScanner(MarkerScanner):
    def __init__(self):
        super().__init__('codec', MatchCategory.CODEC, CODEC_MARKERS)


class AudioScanner(MarkerScanner):
    def __init__(self):
        super().__init__('audio', MatchCategory.AUDIO, AUDIO_MARKERS)


class LanguageScanner(MarkerScanner):
    """Language codes and names; raw is the language name ("HUN" -> "Hungarian")."""

    def __init__(self):
        super().__init__('language', MatchCategory.LANGUAGE, LANGUAGE_MARKERS)


class NoiseScanner(MarkerScanner):
    """Release flags that carry no metadata but must not end up in a title."""

    def __init__(self):
        super().__init__('noise', MatchCategory.NOISE, NOISE_MARKERS, confidence=90)

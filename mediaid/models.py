#!/usr/bin/env python3
"""
Data model shared by every stage of the identification pipeline.

Match and Hole are position-tagged views into one input string:
start/end are str indices into the original filename, end exclusive.
ParsedMedia is the only object handed back to callers.
"""

import json
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional, Tuple


class MediaType(Enum):
    """Kind of media a filename describes."""
    MOVIE = 'movie'
    EPISODE = 'episode'
    UNKNOWN = 'unknown'


class MatchCategory(Enum):
    """Semantic category of a match."""
    TITLE = 'title'
    YEAR = 'year'
    SEASON = 'season'
    EPISODE = 'episode'
    EPISODE_TITLE = 'episode_title'
    QUALITY = 'quality'
    SOURCE = 'source'
    CODEC = 'codec'
    AUDIO = 'audio'
    LANGUAGE = 'language'
    RELEASE_GROUP = 'release_group'
    OTHER = 'other'
    NOISE = 'noise'
    CONTAINER = 'container'

    @property
    def priority(self) -> int:
        """Conflict-resolution priority; higher wins regardless of length."""
        return _PRIORITIES[self]


_PRIORITIES = {
    MatchCategory.SEASON: 100,
    MatchCategory.EPISODE: 100,
    MatchCategory.CONTAINER: 100,
    MatchCategory.RELEASE_GROUP: 95,
    MatchCategory.YEAR: 90,
    MatchCategory.QUALITY: 80,
    MatchCategory.SOURCE: 75,
    MatchCategory.CODEC: 70,
    MatchCategory.AUDIO: 65,
    MatchCategory.LANGUAGE: 60,
    MatchCategory.NOISE: 50,
    MatchCategory.EPISODE_TITLE: 40,
    MatchCategory.TITLE: 30,
    MatchCategory.OTHER: 10,
}


@dataclass(frozen=True)
class Match:
    """A category-tagged span found by a scanner."""
    start: int
    end: int
    value: str
    raw: str
    category: MatchCategory
    confidence: int = 100

    @property
    def length(self) -> int:
        return self.end - self.start

    @property
    def is_empty(self) -> bool:
        return self.start == self.end

    def overlaps(self, other: 'Match') -> bool:
        """Check whether two spans share at least one character."""
        return self.start < other.end and other.start < self.end

    def to_dict(self) -> Dict[str, Any]:
        return {
            "category": self.category.value,
            "value": self.value,
            "raw": self.raw,
            "start": self.start,
            "end": self.end,
            "confidence": self.confidence,
        }

    def __str__(self) -> str:
        return f"{self.category.name}[{self.start}..{self.end}]='{self.value}'"


@dataclass(frozen=True)
class Hole:
    """An unmatched span left over after conflict resolution."""
    start: int
    end: int
    text: str

    @property
    def length(self) -> int:
        return self.end - self.start

    @property
    def is_empty(self) -> bool:
        return not self.text.strip()


@dataclass(frozen=True)
class EpisodeInfo:
    season: Optional[int] = None
    episode: Optional[int] = None
    episode_end: Optional[int] = None
    episode_title: Optional[str] = None
    absolute_episode: Optional[int] = None


@dataclass(frozen=True)
class QualityInfo:
    resolution: Optional[str] = None
    source: Optional[str] = None
    codec: Optional[str] = None
    audio: Optional[str] = None


@dataclass(frozen=True)
class ParsedMedia:
    """Structured identification of a single filename."""
    original: str
    media_type: MediaType = MediaType.UNKNOWN
    title: Optional[str] = None
    year: Optional[int] = None
    episode_info: EpisodeInfo = field(default_factory=EpisodeInfo)
    quality: QualityInfo = field(default_factory=QualityInfo)
    languages: Tuple[str, ...] = ()
    release_group: Optional[str] = None
    container: Optional[str] = None
    confidence: int = 0
    matches: Tuple[Match, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert to a JSON-ready dict.

        Episode and quality fields are flattened into the top level and the
        match list is only present when it is not empty.
        """
        data: Dict[str, Any] = {
            "original": self.original,
            "media_type": self.media_type.value,
            "title": self.title,
            "year": self.year,
            "season": self.episode_info.season,
            "episode": self.episode_info.episode,
            "episode_end": self.episode_info.episode_end,
            "episode_title": self.episode_info.episode_title,
            "absolute_episode": self.episode_info.absolute_episode,
            "resolution": self.quality.resolution,
            "source": self.quality.source,
            "codec": self.quality.codec,
            "audio": self.quality.audio,
            "languages": list(self.languages),
            "release_group": self.release_group,
            "container": self.container,
            "confidence": self.confidence,
        }
        if self.matches:
            data["matches"] = [m.to_dict() for m in self.matches]
        return data

    def to_json(self, indent: Optional[int] = 2) -> str:
        """Convert result to JSON format."""
        return json.dumps(self.to_dict(), indent=indent, ensure_ascii=False)


@dataclass(frozen=True)
class AnalysisResult:
    """Matches and holes of one filename, for diagnostics."""
    input: str
    name_start: int
    name_end: int
    matches: Tuple[Match, ...]
    holes: Tuple[Hole, ...]

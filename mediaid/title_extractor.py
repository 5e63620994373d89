#!/usr/bin/env python3
"""
Title extractor module for inferring titles from the holes between matches.

The title is the first meaningful hole of the name that comes before the
first year or season/episode marker. Without such a marker the leading hole
before any technical tag is used. A title is "anchored" when some scanner
match follows it; a name with no scanner match at all only gets a fallback
title made of the whole cleaned name.

The episode title is the hole right after the last season/episode marker.
"""

import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence

from .models import Hole, Match, MatchCategory
from .tokenizer import Tokenizer
from .trimmer import Trimmer

logger = logging.getLogger(__name__)

_STRUCTURAL = (MatchCategory.YEAR, MatchCategory.SEASON, MatchCategory.EPISODE)
_EPISODE_MARKERS = (MatchCategory.SEASON, MatchCategory.EPISODE)
# Matches that come from the path split rather than from a scanner
_NON_SCANNER = (MatchCategory.CONTAINER, MatchCategory.OTHER)


@dataclass
class TitleSelection:
    """Titles picked from the holes, with the holes they came from."""
    title: Optional[str] = None
    title_hole: Optional[Hole] = None
    anchored: bool = False
    episode_title: Optional[str] = None
    episode_title_hole: Optional[Hole] = None

    @property
    def used_holes(self) -> List[Hole]:
        return [h for h in (self.title_hole, self.episode_title_hole) if h is not None]


class TitleExtractor:
    """Extractor for titles from unmatched text."""

    def __init__(self, tokenizer: Optional[Tokenizer] = None, trimmer: Optional[Trimmer] = None,
                 extract_episode_titles: bool = True, smart_tokenize: bool = True):
        self.tokenizer = tokenizer or Tokenizer()
        self.trimmer = trimmer or Trimmer()
        self.extract_episode_titles = extract_episode_titles
        self.smart_tokenize = smart_tokenize

    def clean(self, text: str) -> str:
        """
        Turn raw hole text into a display title.

        "Dark.Matter." -> "Dark Matter", "Stargate.SG-1." -> "Stargate SG-1"

        Args:
            text: Raw slice of the input

        Returns:
            Cleaned text, possibly empty
        """
        split = self.tokenizer.tokenize_smart if self.smart_tokenize else self.tokenizer.tokenize
        joined = ' '.join(token.value for token in split(text))
        return self.trimmer.trim(joined)

    def process(self, matches: Sequence[Match], holes: Sequence[Hole],
                name_start: int, name_end: int) -> TitleSelection:
        """
        Pick the title and episode title.

        Args:
            matches: Accepted matches sorted by start
            holes: Holes of the same string, in order
            name_start: Start of the filename (after any directory)
            name_end: End of the filename (before any extension)

        Returns:
            TitleSelection
        """
        selection = TitleSelection()
        scanned = [m for m in matches if m.category not in _NON_SCANNER]

        title_start = name_start
        for m in scanned:
            if m.category is MatchCategory.RELEASE_GROUP and m.start == name_start:
                title_start = m.end

        if scanned:
            structural = [m.start for m in scanned if m.category in _STRUCTURAL]
            if structural:
                limit = min(structural)
            else:
                limit = min((m.start for m in scanned if m.start >= title_start), default=name_end)

            for hole in holes:
                if hole.start < title_start or hole.end > limit or hole.is_empty:
                    continue
                cleaned = self.clean(hole.text)
                if cleaned:
                    selection.title = cleaned
                    selection.title_hole = hole
                    selection.anchored = any(m.start >= hole.end for m in scanned)
                    break
        else:
            # Nothing recognised: the whole name is all we have
            fallback = [h for h in holes if h.start >= name_start and h.end <= name_end and not h.is_empty]
            if fallback:
                cleaned = self.clean(fallback[0].text)
                if cleaned:
                    selection.title = cleaned
                    selection.title_hole = fallback[0]

        if self.extract_episode_titles:
            self._pick_episode_title(selection, scanned, holes, name_end)

        logger.debug("title=%r anchored=%s episode_title=%r",
                     selection.title, selection.anchored, selection.episode_title)
        return selection

    def _pick_episode_title(self, selection: TitleSelection, scanned: Sequence[Match],
                            holes: Sequence[Hole], name_end: int) -> None:
        markers = [m for m in scanned if m.category in _EPISODE_MARKERS]
        if not markers:
            return
        last_end = max(m.end for m in markers)
        for hole in holes:
            if hole.start != last_end or hole.end > name_end:
                continue
            if hole is selection.title_hole:
                return
            cleaned = self.clean(hole.text)
            if len(cleaned) > 1:
                selection.episode_title = cleaned
                selection.episode_title_hole = hole
            return

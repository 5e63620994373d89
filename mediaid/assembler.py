#!/usr/bin/env python3
"""
Assembler: turns accepted matches and the title selection into ParsedMedia.

Confidence formula (0-100):

    evidence  = sum(WEIGHTS[c] * best_confidence[c] / 100) over the distinct
                categories that have an accepted match
    bonus     = 25 for an anchored title, 5 for a fallback title
    penalty   = round(30 * leftover), leftover being the share of the name's
                alphanumeric characters that sit in holes not used as title or
                episode title
    score     = clamp(evidence + bonus - penalty, 0, 100)

Adding a category never lowers the score and leftover text always lowers it.
"""

import logging
from typing import Dict, List, Optional, Sequence, Tuple

from .models import (
    EpisodeInfo,
    Hole,
    Match,
    MatchCategory,
    MediaType,
    ParsedMedia,
    QualityInfo,
)
from .title_extractor import TitleSelection

logger = logging.getLogger(__name__)

WEIGHTS: Dict[MatchCategory, int] = {
    MatchCategory.SEASON: 12,
    MatchCategory.EPISODE: 13,
    MatchCategory.YEAR: 20,
    MatchCategory.RELEASE_GROUP: 8,
    MatchCategory.QUALITY: 8,
    MatchCategory.SOURCE: 6,
    MatchCategory.CODEC: 6,
    MatchCategory.AUDIO: 4,
    MatchCategory.LANGUAGE: 4,
    MatchCategory.NOISE: 2,
}

ANCHORED_TITLE_BONUS = 25
FALLBACK_TITLE_BONUS = 5
LEFTOVER_PENALTY = 30


def _alnum_count(text: str) -> int:
    return sum(1 for ch in text if ch.isalnum())


def compute_confidence(matches: Sequence[Match], selection: TitleSelection,
                       holes: Sequence[Hole], name: str) -> int:
    """
    Score how much of the name was understood.

    Args:
        matches: Accepted matches
        selection: Title selection, whose holes do not count as leftover
        holes: All holes of the input
        name: The name region text (no directory, no extension)

    Returns:
        Integer confidence in [0, 100]
    """
    best: Dict[MatchCategory, int] = {}
    for m in matches:
        if m.category in WEIGHTS:
            best[m.category] = max(best.get(m.category, 0), m.confidence)

    evidence = sum(WEIGHTS[c] * conf / 100 for c, conf in best.items())

    bonus = 0
    if selection.title is not None:
        bonus = ANCHORED_TITLE_BONUS if selection.anchored else FALLBACK_TITLE_BONUS

    total = _alnum_count(name)
    used = selection.used_holes
    leftover_chars = sum(_alnum_count(h.text) for h in holes if h not in used)
    leftover = leftover_chars / total if total else 0.0
    penalty = round(LEFTOVER_PENALTY * leftover)

    score = round(evidence) + bonus - penalty
    return max(0, min(100, score))


def _best_slot(matches: Sequence[Match], category: MatchCategory) -> Optional[str]:
    # Most confident wins; ">=" lets a later match win a tie
    chosen: Optional[Match] = None
    for m in matches:
        if m.category is category and (chosen is None or m.confidence >= chosen.confidence):
            chosen = m
    return chosen.value if chosen else None


def _episode_numbers(raw: str) -> Tuple[Optional[int], Optional[int]]:
    first, _, last = raw.partition('-')
    try:
        return int(first), (int(last) if last else None)
    except ValueError:
        return None, None


class Assembler:
    """Builds the final ParsedMedia."""

    def assemble(self, original: str, matches: Sequence[Match], holes: Sequence[Hole],
                 selection: TitleSelection, name_start: int, name_end: int,
                 container: Optional[str], include_matches: bool = False) -> ParsedMedia:
        """
        Assemble a ParsedMedia from the pipeline output.

        Args:
            original: Untouched input
            matches: Accepted matches (post rules), sorted by start
            holes: Holes of the input
            selection: Title and episode title selection
            name_start: Start of the name region
            name_end: End of the name region
            container: Extension, lower-cased, if any
            include_matches: Keep the accepted matches on the result

        Returns:
            ParsedMedia
        """
        categories = {m.category for m in matches}

        year: Optional[int] = None
        years = [m for m in matches if m.category is MatchCategory.YEAR]
        if years:
            year = int(years[0].raw)

        if MatchCategory.SEASON in categories and MatchCategory.EPISODE in categories:
            media_type = MediaType.EPISODE
        elif year is not None or (selection.title is not None and selection.anchored):
            media_type = MediaType.MOVIE
        else:
            media_type = MediaType.UNKNOWN

        episode_info = EpisodeInfo()
        if media_type is MediaType.EPISODE:
            episode_info = self._episode_info(matches, selection)

        quality = QualityInfo(
            resolution=_best_slot(matches, MatchCategory.QUALITY),
            source=_best_slot(matches, MatchCategory.SOURCE),
            codec=_best_slot(matches, MatchCategory.CODEC),
            audio=_best_slot(matches, MatchCategory.AUDIO),
        )

        languages: List[str] = []
        seen = set()
        for m in matches:
            if m.category is MatchCategory.LANGUAGE and m.raw.casefold() not in seen:
                seen.add(m.raw.casefold())
                languages.append(m.raw)

        release_group = next((m.raw for m in matches if m.category is MatchCategory.RELEASE_GROUP), None)

        confidence = compute_confidence(matches, selection, holes, original[name_start:name_end])
        logger.debug("assembled %s with confidence %d", media_type.value, confidence)

        return ParsedMedia(
            original=original,
            media_type=media_type,
            title=selection.title,
            year=year,
            episode_info=episode_info,
            quality=quality,
            languages=tuple(languages),
            release_group=release_group,
            container=container,
            confidence=confidence,
            matches=tuple(matches) if include_matches else (),
        )

    @staticmethod
    def _episode_info(matches: Sequence[Match], selection: TitleSelection) -> EpisodeInfo:
        season_match = next(m for m in matches if m.category is MatchCategory.SEASON)
        episode_match = next(m for m in matches if m.category is MatchCategory.EPISODE)
        season, _ = _episode_numbers(season_match.raw)
        episode, episode_end = _episode_numbers(episode_match.raw)
        return EpisodeInfo(
            season=season,
            episode=episode,
            episode_end=episode_end,
            episode_title=selection.episode_title,
        )

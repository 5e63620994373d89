#!/usr/bin/env python3
"""
Season/episode scanner.

A combined marker such as "S01E05" yields two adjacent matches: a SEASON
match over "S01" and an EPISODE match over "E05". The raw form of a season
match is its number ("1", or "1-3" for a season range); the raw form of an
episode match is "5", or "1-2" for a multi-episode file.

Recognised forms, strongest first:
    S01E05, S1E5, S01E01E02, S01E01-E02, S01E01-02    (confidence 100)
    1x05                                              (95)
    S01-S03                                           (95)
    S01                                               (90)
    Season 1, Season.01                               (85)
    Episode 5                                         (80)
    .117. -> S1E17, .2401. -> S24E01                  (75 / 70)

The compact numeric forms are only tried when nothing else names an episode,
and never on numbers that look like a year, a resolution or a codec.
"""

import logging
import re
from typing import List, Optional

from .models import Match, MatchCategory
from .scanner import Scanner, bounded

logger = logging.getLogger(__name__)

_COMBINED = re.compile(bounded(
    r'S(?P<season>\d{1,2})'
    r'(?P<ep>E(?P<episode>\d{1,3})(?:-?E(?P<end1>\d{1,3})|-(?P<end2>\d{1,3}))?)'
), re.IGNORECASE)

_CROSS = re.compile(bounded(r'(?P<season>\d{1,2})(?P<ep>x(?P<episode>\d{1,3}))'), re.IGNORECASE)

_SEASON_RANGE = re.compile(bounded(r'S(?P<season>\d{1,2})-S(?P<season_end>\d{1,2})'), re.IGNORECASE)

_SEASON_ONLY = re.compile(bounded(r'S(?P<season>\d{1,2})'), re.IGNORECASE)

_SEASON_WORD = re.compile(bounded(r'Season[. _-]?(?P<season>\d{1,2})'), re.IGNORECASE)

_EPISODE_WORD = re.compile(bounded(r'Episode[. _-]?(?P<episode>\d{1,3})'), re.IGNORECASE)

# Compact numbers need a separator in front; the name start is usually a title
_COMPACT_3 = re.compile(r'(?<=[.\-_ ])(?P<season>\d)(?P<episode>\d{2})(?![A-Za-z0-9])')
_COMPACT_4 = re.compile(r'(?<=[.\-_ ])(?P<season>[1-9]\d)(?P<episode>\d{2})(?![A-Za-z0-9])')

_RESOLUTION_NUMBERS = frozenset({'480', '576', '720', '1080', '2160'})
_CODEC_NUMBERS = frozenset({'264', '265'})


def _number(digits: str) -> str:
    return str(int(digits))


class EpisodeScanner(Scanner):
    """Finds season and episode markers."""

    name = 'episode'
    category = MatchCategory.EPISODE
    categories = (MatchCategory.SEASON, MatchCategory.EPISODE)

    def find_matches(self, text: str, start: int = 0, end: Optional[int] = None) -> List[Match]:
        start, end = self._region(text, start, end)
        matches: List[Match] = []

        for m in _COMBINED.finditer(text, start, end):
            ep_end = m.group('end1') or m.group('end2')
            matches.extend(self._split(m, 100, ep_end))

        for m in _CROSS.finditer(text, start, end):
            matches.extend(self._split(m, 95, None))

        for m in _SEASON_RANGE.finditer(text, start, end):
            matches.append(Match(
                start=m.start(), end=m.end(), value=m.group(0),
                raw=f"{_number(m.group('season'))}-{_number(m.group('season_end'))}",
                category=MatchCategory.SEASON, confidence=95,
            ))

        for m in _SEASON_ONLY.finditer(text, start, end):
            matches.append(Match(
                start=m.start(), end=m.end(), value=m.group(0),
                raw=_number(m.group('season')),
                category=MatchCategory.SEASON, confidence=90,
            ))

        for m in _SEASON_WORD.finditer(text, start, end):
            matches.append(Match(
                start=m.start(), end=m.end(), value=m.group(0),
                raw=_number(m.group('season')),
                category=MatchCategory.SEASON, confidence=85,
            ))

        for m in _EPISODE_WORD.finditer(text, start, end):
            matches.append(Match(
                start=m.start(), end=m.end(), value=m.group(0),
                raw=_number(m.group('episode')),
                category=MatchCategory.EPISODE, confidence=80,
            ))

        if not any(m.category is MatchCategory.EPISODE for m in matches):
            matches.extend(self._compact(text, start, end))

        logger.debug("episode scanner: %d candidates", len(matches))
        return matches

    @staticmethod
    def _split(m: 're.Match', confidence: int, episode_end: Optional[str]) -> List[Match]:
        """Turn one combined marker into adjacent SEASON and EPISODE matches."""
        split_at = m.start('ep')
        raw_episode = _number(m.group('episode'))
        if episode_end is not None:
            raw_episode = f"{raw_episode}-{_number(episode_end)}"
        return [
            Match(
                start=m.start(), end=split_at, value=m.group(0)[:split_at - m.start()],
                raw=_number(m.group('season')),
                category=MatchCategory.SEASON, confidence=confidence,
            ),
            Match(
                start=split_at, end=m.end(), value=m.group('ep'),
                raw=raw_episode,
                category=MatchCategory.EPISODE, confidence=confidence,
            ),
        ]

    @staticmethod
    def _compact(text: str, start: int, end: int) -> List[Match]:
        found: List[Match] = []
        for pattern, confidence in ((_COMPACT_3, 75), (_COMPACT_4, 70)):
            for m in pattern.finditer(text, start, end):
                digits = m.group(0)
                if not EpisodeScanner._is_compact_episode(digits):
                    continue
                split_at = m.start('episode')
                found.append(Match(
                    start=m.start(), end=split_at, value=m.group('season'),
                    raw=_number(m.group('season')),
                    category=MatchCategory.SEASON, confidence=confidence,
                ))
                found.append(Match(
                    start=split_at, end=m.end(), value=m.group('episode'),
                    raw=_number(m.group('episode')),
                    category=MatchCategory.EPISODE, confidence=confidence,
                ))
        return found

    @staticmethod
    def _is_compact_episode(digits: str) -> bool:
        if digits in _RESOLUTION_NUMBERS or digits in _CODEC_NUMBERS:
            return False
        if len(digits) == 4 and 1900 <= int(digits) <= 2099:
            return False
        return digits[-2:] != '00'

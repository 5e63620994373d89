#!/usr/bin/env python3
"""
Tests for the pattern scanners.
"""

import pytest

from mediaid import (
    AudioScanner,
    CodecScanner,
    EpisodeScanner,
    LanguageScanner,
    MatchCategory,
    NoiseScanner,
    QualityScanner,
    ReleaseGroupScanner,
    SourceScanner,
    YearScanner,
)


def by_category(matches, category):
    return [m for m in matches if m.category is category]


@pytest.fixture
def episode_scanner():
    return EpisodeScanner()


class TestEpisodeScanner:
    """Tests for season/episode markers."""

    def test_combined_marker_is_split(self, episode_scanner):
        """Test that S01E05 yields adjacent season and episode matches."""
        matches = episode_scanner.find_matches("Dark.Matter.S01E05.720p")
        assert len(matches) == 2
        season = by_category(matches, MatchCategory.SEASON)[0]
        episode = by_category(matches, MatchCategory.EPISODE)[0]
        assert (season.start, season.end, season.value, season.raw) == (12, 15, "S01", "1")
        assert (episode.start, episode.end, episode.value, episode.raw) == (15, 18, "E05", "5")
        assert season.confidence == episode.confidence == 100

    def test_short_marker(self, episode_scanner):
        matches = episode_scanner.find_matches("show.s1e5.hdtv")
        assert by_category(matches, MatchCategory.SEASON)[0].raw == "1"
        assert by_category(matches, MatchCategory.EPISODE)[0].raw == "5"

    @pytest.mark.parametrize("name", ["Show.S01E01E02", "Show.S01E01-E02", "Show.S01E01-02"])
    def test_multi_episode(self, episode_scanner, name):
        """Test multi-episode and ranged forms."""
        episode = by_category(episode_scanner.find_matches(name), MatchCategory.EPISODE)[0]
        assert episode.raw == "1-2"
        assert episode.end == len(name)

    def test_cross_form(self, episode_scanner):
        matches = episode_scanner.find_matches("Show.1x05.HDTV")
        season = by_category(matches, MatchCategory.SEASON)[0]
        episode = by_category(matches, MatchCategory.EPISODE)[0]
        assert (season.value, season.raw) == ("1", "1")
        assert (episode.value, episode.raw) == ("x05", "5")
        assert episode.confidence == 95

    def test_season_word(self, episode_scanner):
        matches = episode_scanner.find_matches("Show.Season.2")
        assert len(matches) == 1
        assert matches[0].category is MatchCategory.SEASON
        assert (matches[0].raw, matches[0].confidence) == ("2", 85)

    def test_episode_word(self, episode_scanner):
        matches = episode_scanner.find_matches("Show Episode 7")
        assert [(m.category, m.raw) for m in matches] == [(MatchCategory.EPISODE, "7")]

    def test_season_range(self, episode_scanner):
        matches = episode_scanner.find_matches("Show.S01-S03.Complete")
        ranges = [m for m in matches if m.value == "S01-S03"]
        assert len(ranges) == 1
        assert ranges[0].raw == "1-3"

    def test_compact_three_digits(self, episode_scanner):
        """Test that .117. reads as S1E17."""
        matches = episode_scanner.find_matches("Show.117.HDTV")
        season = by_category(matches, MatchCategory.SEASON)[0]
        episode = by_category(matches, MatchCategory.EPISODE)[0]
        assert (season.raw, episode.raw) == ("1", "17")
        assert season.end == episode.start
        assert episode.confidence == 75

    def test_compact_four_digits(self, episode_scanner):
        matches = episode_scanner.find_matches("Show.2401.HDTV")
        season = by_category(matches, MatchCategory.SEASON)[0]
        episode = by_category(matches, MatchCategory.EPISODE)[0]
        assert (season.raw, episode.raw) == ("24", "1")
        assert episode.confidence == 70

    @pytest.mark.parametrize("name", [
        "Movie.2019.1080p",
        "Movie.720.HDTV",
        "Movie.H.264",
        "Movie.x264",
        "Movie.300.HDTV",
    ])
    def test_compact_skips_years_resolutions_and_codecs(self, episode_scanner, name):
        assert episode_scanner.find_matches(name) == []

    def test_compact_not_used_with_explicit_episode(self, episode_scanner):
        matches = episode_scanner.find_matches("Show.S01E05.117")
        assert len(matches) == 2

    def test_region(self, episode_scanner):
        """Test that offsets stay in the coordinates of the full string."""
        text = "dir/Show.S02E03"
        matches = episode_scanner.find_matches(text, 4, len(text))
        assert by_category(matches, MatchCategory.SEASON)[0].start == 9


class TestYearScanner:
    """Tests for years."""

    def test_year(self):
        matches = YearScanner().find_matches("Movie.2023.1080p")
        assert [(m.value, m.raw, m.confidence) for m in matches] == [("2023", "2023", 100)]

    def test_leading_year_is_less_certain(self):
        matches = YearScanner().find_matches("2012.Movie")
        assert matches[0].confidence == 70

    def test_range(self):
        assert YearScanner().find_matches("Movie.1968") == []
        assert YearScanner(1900, 2039).find_matches("Movie.1968")[0].raw == "1968"

    def test_not_inside_numbers(self):
        assert YearScanner().find_matches("Movie.20230.x") == []


class TestMarkerScanners:
    """Tests for the vocabulary scanners."""

    def test_quality(self):
        match = QualityScanner().find_matches("Movie.1080p.x")[0]
        assert (match.value, match.raw, match.category) == ("1080p", "1080p", MatchCategory.QUALITY)

    def test_quality_alias(self):
        assert QualityScanner().find_matches("Movie.4K.HDR")[0].raw == "2160p"

    def test_source(self):
        matches = SourceScanner().find_matches("Show.WEB-DL.x")
        assert [(m.value, m.raw) for m in matches] == [("WEB-DL", "WEB-DL")]

    def test_source_case_insensitive(self):
        assert SourceScanner().find_matches("movie.bluray.x")[0].raw == "Blu-ray"

    def test_short_source_needs_upper_case(self):
        assert SourceScanner().find_matches("Movie.ts.Cam") == []
        assert SourceScanner().find_matches("Movie.TS.x")[0].raw == "Telesync"

    def test_codec(self):
        match = CodecScanner().find_matches("Movie.x264-GROUP")[0]
        assert (match.value, match.raw) == ("x264", "H.264")

    def test_audio_prefers_longest_candidate_available(self):
        values = {m.value for m in AudioScanner().find_matches("Movie.DTS-HD.MA.x")}
        assert "DTS-HD.MA" in values

    def test_stereo_audio(self):
        match = AudioScanner().find_matches("Movie.2020.2.0.x")[0]
        assert (match.value, match.raw) == ("2.0", "2.0")
        assert AudioScanner().find_matches("Movie.AAC2.0.x")[0].value == "AAC2.0"

    def test_language(self):
        matches = LanguageScanner().find_matches("Film.HUN.ENG.x")
        assert [(m.value, m.raw) for m in matches] == [("HUN", "Hungarian"), ("ENG", "English")]

    def test_noise(self):
        matches = NoiseScanner().find_matches("Movie.PROPER.REPACK")
        assert [m.raw for m in matches] == ["PROPER", "REPACK"]
        assert all(m.category is MatchCategory.NOISE for m in matches)

    def test_underscore_is_a_boundary(self):
        assert QualityScanner().find_matches("Movie_720p_x")[0].value == "720p"

    def test_no_match_inside_words(self):
        assert LanguageScanner().find_matches("Hunter.Engine") == []


class TestReleaseGroupScanner:
    """Tests for release group placements."""

    @pytest.fixture
    def scanner(self):
        return ReleaseGroupScanner()

    def test_trailing_group(self, scanner):
        matches = scanner.find_matches("Movie.720p.BluRay-SPARKS")
        assert len(matches) == 1
        assert (matches[0].value, matches[0].raw, matches[0].confidence) == ("-SPARKS", "SPARKS", 90)

    @pytest.mark.parametrize("name", ["Movie-X264", "Movie.WEB-DL", "Movie-2020", "Movie-sample", "the-movie.2020"])
    def test_false_positives(self, scanner, name):
        assert scanner.find_matches(name) == []

    def test_prefix_group(self, scanner):
        matches = scanner.find_matches("fulcrum-ballerina.2025.bdrip")
        assert len(matches) == 1
        assert (matches[0].start, matches[0].end, matches[0].raw) == (0, 8, "fulcrum")
        assert matches[0].confidence == 85

    def test_bracketed_group(self, scanner):
        matches = scanner.find_matches("[HorribleSubs] Show - 01")
        assert [(m.start, m.end, m.raw) for m in matches] == [(0, 14, "HorribleSubs")]

    def test_region_end(self, scanner):
        """Test that the group is found at the end of the region, not the string."""
        text = "Movie.720p-GRP.mkv"
        matches = scanner.find_matches(text, 0, len(text) - 4)
        assert matches[0].raw == "GRP"

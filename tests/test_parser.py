#!/usr/bin/env python3
"""
End-to-end tests for MediaParser on real-world release names.
"""

import json

import pytest

from media_identifier import MediaParser, parse, parse_debug
from mediaid import MatchCategory, MediaType, ParserConfig, YearScanner
from mediaid.config import SCANNER_CATEGORIES


@pytest.fixture
def parser():
    """Fixture providing a MediaParser with the default configuration."""
    return MediaParser()


class TestEpisodes:
    """Tests for TV episode names."""

    def test_scene_episode(self):
        """Test the canonical scene episode name."""
        result = parse("Dark.Matter.S01E05.720p.HDTV.x264-KILLERS.mkv")
        assert result.media_type is MediaType.EPISODE
        assert result.title == "Dark Matter"
        assert result.episode_info.season == 1
        assert result.episode_info.episode == 5
        assert result.episode_info.episode_end is None
        assert result.quality.resolution == "720p"
        assert "HDTV" in result.quality.source
        assert "x264" in result.quality.codec
        assert result.release_group == "KILLERS"
        assert result.container == "mkv"
        assert result.year is None
        assert result.confidence >= 60

    def test_hyphenated_title(self):
        result = parse("Stargate.SG-1.S01E01.mkv")
        assert result.title == "Stargate SG-1"
        assert result.media_type is MediaType.EPISODE
        assert (result.episode_info.season, result.episode_info.episode) == (1, 1)

    def test_multi_episode(self):
        result = parse("Show.Name.S02E03E04.HDTV.mkv")
        assert result.title == "Show Name"
        assert result.episode_info.episode == 3
        assert result.episode_info.episode_end == 4

    def test_episode_title(self):
        result = parse("Show.1x05.Pilot.HDTV.mkv")
        assert result.media_type is MediaType.EPISODE
        assert result.title == "Show"
        assert result.episode_info.episode_title == "Pilot"

    def test_episode_titles_can_be_disabled(self):
        parser = MediaParser(ParserConfig(extract_episode_titles=False))
        result = parser.parse("Show.1x05.Pilot.HDTV.mkv")
        assert result.episode_info.episode_title is None
        assert result.episode_info.episode == 5

    def test_year_after_marker_is_episode_title(self):
        """Test that a number after the marker is not taken as the year."""
        result = parse("Show.S05E10.2001.720p.mkv")
        assert result.year is None
        assert result.episode_info.episode_title == "2001"
        assert result.title == "Show"

    def test_season_pack_is_not_an_episode(self):
        """Test that a season without an episode leaves the episode fields empty."""
        result = parse("Dark.Matter.S01.720p.mkv")
        assert result.media_type is MediaType.MOVIE
        assert result.title == "Dark Matter"
        assert result.episode_info.season is None
        assert result.episode_info.episode is None

    def test_marker_only(self):
        result = parse("S01E01")
        assert result.media_type is MediaType.EPISODE
        assert result.title is None
        assert result.container is None


class TestMovies:
    """Tests for movie names."""

    def test_scene_movie(self):
        result = parse("Movie.2023.1080p.BluRay.x264-GROUP.mkv")
        assert result.media_type is MediaType.MOVIE
        assert result.title == "Movie"
        assert result.year == 2023
        assert result.quality.resolution == "1080p"
        assert result.quality.source == "BluRay"
        assert result.quality.codec == "x264"
        assert result.release_group == "GROUP"

    def test_capitalised_hyphenated_title(self):
        result = parse("The.Amazing.Spider-Man.2012.720p.BluRay.x264-SPARKS.mkv")
        assert result.title == "The Amazing Spider-Man"
        assert result.year == 2012
        assert result.release_group == "SPARKS"

    def test_directory_is_ignored(self):
        result = parse("/media/Movies/Inception.2010.1080p.BluRay.mkv")
        assert result.title == "Inception"
        assert result.year == 2010
        assert result.original == "/media/Movies/Inception.2010.1080p.BluRay.mkv"

    def test_windows_directory(self):
        result = parse("D:\\Films\\Heat.1995.DVDRip.avi")
        assert result.title == "Heat"
        assert result.year == 1995
        assert result.container == "avi"

    def test_leading_year_belongs_to_title(self):
        parser = MediaParser(ParserConfig(year_min=1900))
        result = parser.parse("2001.A.Space.Odyssey.1968.1080p.mkv")
        assert result.title == "2001 A Space Odyssey"
        assert result.year == 1968

    def test_unicode_title(self):
        result = parse("Amélie.2001.1080p.mkv")
        assert result.title == "Amélie"
        assert result.year == 2001

    def test_prefix_release_group(self):
        result = parse("fulcrum-ballerina.2025.bdrip.mkv")
        assert result.release_group == "fulcrum"
        assert result.title == "ballerina"
        assert result.year == 2025

    def test_bracketed_release_group(self):
        result = parse("[HorribleSubs] One Piece - 01 [720p].mkv")
        assert result.release_group == "HorribleSubs"
        assert result.quality.resolution == "720p"
        assert result.title == "One Piece 01"

    def test_languages(self):
        result = parse("Movie.2020.HUN.ENG.1080p.WEB-DL.mkv")
        assert result.languages == ("Hungarian", "English")
        assert result.quality.source == "WEB-DL"
        assert result.release_group is None

    def test_languages_are_deduplicated(self):
        assert parse("Film.2020.HUN.hun.mkv").languages == ("Hungarian",)

    def test_languages_are_normalized(self):
        result = parse("Home.Alone.1990.REMASTERED.BDRip.x264.AC3.HuN-Essence.mkv")
        assert result.languages == ("Hungarian",)
        assert result.release_group == "Essence"

    def test_hyphenated_title_at_end_of_name(self):
        """Test that "-Man" completing the title is not a release group."""
        result = parse("The.Amazing.Spider-Man.mkv")
        assert result.title == "The Amazing Spider-Man"
        assert result.release_group is None

    def test_lower_case_title_keeps_trailing_group(self):
        result = parse("some.movie-GRP.mkv")
        assert result.release_group == "GRP"


class TestUnknown:
    """Tests for names with nothing recognisable."""

    def test_unknown_name(self):
        result = parse("unknown.file.mkv")
        assert result.media_type is MediaType.UNKNOWN
        assert result.container == "mkv"
        assert result.confidence < 30
        assert result.title == "unknown file"

    def test_empty_string(self):
        result = parse("")
        assert result.media_type is MediaType.UNKNOWN
        assert result.title is None
        assert result.confidence == 0
        assert result.original == ""

    @pytest.mark.parametrize("name", ["....", "-", "[]", "()", ".mkv", "/", "\\\\server\\share\\", "\x00\x01"])
    def test_junk_never_raises(self, name):
        result = parse(name)
        assert result.original == name
        assert 0 <= result.confidence <= 100

    def test_very_long_name(self):
        name = "A" * 5000 + ".2020.mkv"
        result = parse(name)
        assert result.original == name
        assert result.year is None
        assert result.media_type is MediaType.UNKNOWN


class TestConfidence:
    """Tests for the confidence score."""

    def test_more_evidence_scores_higher(self):
        assert parse("Movie.2023.1080p.BluRay.x264-GROUP.mkv").confidence > parse("unknown.file.mkv").confidence

    def test_leftover_text_lowers_score(self):
        clean = parse("Show.S01E01.720p.mkv")
        noisy = parse("Show.S01E01.720p.junk.words.here.mkv")
        assert noisy.confidence < clean.confidence


class TestOutput:
    """Tests for debug output and serialization."""

    def test_matches_only_in_debug(self, parser):
        name = "Dark.Matter.S01E05.720p.HDTV.x264-KILLERS.mkv"
        assert parser.parse(name).matches == ()
        debug = parse_debug(name)
        categories = [m.category for m in debug.matches]
        assert MatchCategory.SEASON in categories
        assert MatchCategory.CONTAINER in categories

    def test_include_matches_config(self):
        parser = MediaParser(ParserConfig(include_matches=True))
        assert parser.parse("Movie.2020.mkv").matches

    def test_to_json(self):
        data = json.loads(parse("Dark.Matter.S01E05.720p.HDTV.x264-KILLERS.mkv").to_json())
        assert data["media_type"] == "episode"
        assert data["title"] == "Dark Matter"
        assert data["season"] == 1
        assert data["episode"] == 5
        assert data["languages"] == []
        assert "matches" not in data

    def test_debug_json_lists_matches(self):
        data = json.loads(parse_debug("Movie.2020.mkv").to_json())
        assert {"category": "year", "value": "2020", "raw": "2020", "start": 6, "end": 10,
                "confidence": 100} in data["matches"]


class TestConfiguration:
    """Tests for configuration effects on parsing."""

    def test_disabled_category(self):
        enabled = [c for c in SCANNER_CATEGORIES if c is not MatchCategory.RELEASE_GROUP]
        parser = MediaParser(ParserConfig(enabled_categories=enabled))
        result = parser.parse("Dark.Matter.S01E05.720p.HDTV.x264-KILLERS.mkv")
        assert result.release_group is None
        assert result.episode_info.episode == 5

    def test_custom_extensions(self):
        parser = MediaParser(ParserConfig(extensions=["webm"]))
        assert parser.parse("Movie.2020.webm").container == "webm"
        assert parser.parse("Movie.2020.mkv").container is None

    def test_group_at_length_cut_is_ignored(self):
        parser = MediaParser(ParserConfig(max_length=19))
        result = parser.parse("Movie.2020.x264-GRP.extra.words.mkv")
        assert result.year == 2020
        assert result.release_group is None

    def test_custom_scanner_registry(self):
        parser = MediaParser(scanners=[YearScanner()])
        result = parser.parse("Movie.2020.1080p.mkv")
        assert result.year == 2020
        assert result.quality.resolution is None

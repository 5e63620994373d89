#!/usr/bin/env python3
"""
Constant vocabularies used by the tokenizer and the scanners.

Everything here is immutable (frozensets and tuples). ParserConfig can
override the known-tag set and the extension whitelist per parser instance.
"""

# Separators that split a name into tokens
SEPARATORS = frozenset({'.', ' ', '_', '-'})

# Tags that must never be glued to a neighbouring word by tokenize_smart
KNOWN_TAGS = frozenset({
    'HDTV', 'PDTV', 'WEB', 'WEBRIP', 'WEBDL', 'BLURAY', 'BDRIP', 'DVDRIP',
    'HDRIP', 'X264', 'X265', 'HEVC', 'AAC', 'AC3', 'DTS', 'PROPER', 'REPACK',
    'REAL', 'INTERNAL', 'LIMITED', 'HUN', 'ENG', 'GER', 'FRE', 'SPA', 'ITA',
    'RUS', 'JPN',
})

# File extensions accepted as a container
EXTENSIONS = frozenset({
    'mkv', 'mp4', 'avi', 'wmv', 'mov', 'm4v', 'ts', 'm2ts',
    'srt', 'sub', 'idx', 'ass', 'ssa', 'nfo', 'sfv', 'jpg', 'png',
})

DEFAULT_YEAR_MIN = 1990
DEFAULT_YEAR_MAX = 2039

# Longest name (in characters) handed to the scanners
DEFAULT_MAX_LENGTH = 1024

# (normalized value, regex source) pairs, most specific first. Patterns are
# matched case-insensitively; (?-i:...) marks the short ones that must be
# upper case to count.
RESOLUTION_MARKERS = (
    ('2160p', r'2160p|4K|UHD'),
    ('1080p', r'1080[pi]'),
    ('720p', r'720p'),
    ('576p', r'576p'),
    ('480p', r'480p'),
)

SOURCE_MARKERS = (
    ('Blu-ray', r'Blu-?Ray|BDRip|BRRip|(?-i:BD)'),
    ('WEB-DL', r'WEB-?DL|WEB'),
    ('WEBRip', r'WEB-?Rip'),
    ('HD-DVD', r'HD-?DVD'),
    ('HDTV', r'HDTV'),
    ('PDTV', r'PDTV'),
    ('DVDRip', r'DVD-?Rip|DVD'),
    ('HDRip', r'HDRip'),
    ('CAM', r'(?-i:CAM|HDCAM)'),
    ('Telesync', r'(?-i:TS|HDTS)|TELESYNC'),
)

CODEC_MARKERS = (
    ('H.264', r'[Hx]\.?264'),
    ('H.265', r'[Hx]\.?265'),
    ('HEVC', r'HEVC'),
    ('XviD', r'XviD'),
    ('DivX', r'DivX'),
    ('AV1', r'AV1'),
    ('VP9', r'VP9'),
)

AUDIO_MARKERS = (
    ('DTS-HD MA', r'DTS-?HD[.\s]?MA'),
    ('DTS-HD', r'DTS-?HD'),
    ('DTS', r'DTS'),
    ('TrueHD', r'TrueHD'),
    ('Atmos', r'Atmos'),
    ('DD+5.1', r'DD\+5\.1'),
    ('DD5.1', r'DD5\.1'),
    ('AC3', r'AC3'),
    ('AAC', r'AAC(?:2\.0)?'),
    ('FLAC', r'FLAC'),
    ('MP3', r'MP3'),
    ('5.1', r'5\.1'),
    ('7.1', r'7\.1'),
    ('2.0', r'2\.0'),
)

LANGUAGE_MARKERS = (
    ('Hungarian', r'HUN|Hungarian|Magyar'),
    ('English', r'ENG|English'),
    ('German', r'GER|German|Deutsch'),
    ('French', r'FRE|FRA|French'),
    ('Spanish', r'SPA|ESP|Spanish'),
    ('Italian', r'ITA|Italian'),
    ('Russian', r'RUS|Russian'),
    ('Japanese', r'JPN|JAP|Japanese'),
    ('Korean', r'KOR|Korean'),
    ('Chinese', r'CHI|Chinese'),
    ('Multi', r'MULTi'),
    ('Dual Audio', r'Dual[.\s]?Audio'),
)

NOISE_MARKERS = (
    ('REMASTERED', r'REMASTERED'),
    ('PROPER', r'PROPER'),
    ('REPACK', r'REPACK'),
    ('INTERNAL', r'INTERNAL'),
    ('LIMITED', r'LIMITED'),
    ('READ.NFO', r'READ\.?NFO'),
    ('HYBRID', r'HYBRID'),
    ('COMPLETE', r'COMPLETE'),
    ('UNRATED', r'UNRATED'),
    ('EXTENDED', r'EXTENDED'),
    ('DC', r'(?-i:DC)'),
    ('SAMPLE', r'Sample'),
)

# Trailing "-WORD" segments that are not release groups
RELEASE_GROUP_FALSE_POSITIVES = frozenset({
    'MKV', 'AVI', 'MP4', 'SRT', 'NFO', 'SFV', 'SAMPLE', 'SUBS', 'SUB',
    'EXTRAS', 'FEATURETTES', 'DL', 'RIP', 'RAY', 'HD', 'MA',
})

# Leading words that look like "group-" prefixes but start a title
COMMON_TITLE_WORDS = frozenset({
    'the', 'a', 'an', 'new', 'old', 'big', 'best', 'top', 'my', 'our',
    'this', 'that', 'one', 'two', 'first', 'last',
})

# Strings trimmed from both ends of a cleaned title
TRIMMING_STRINGS = ('.', '_', '-', ' ', ',', ';', ':', '+', '~', '&')

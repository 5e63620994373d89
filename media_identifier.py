#!/usr/bin/env python3
"""
Media filename identifier: finds movie/episode metadata in release names.

Pipeline: split off directory and extension -> run scanners over the name ->
resolve conflicts -> find holes -> extract titles -> assemble ParsedMedia.

Usage:
    media-identifier Dark.Matter.S01E05.720p.HDTV.x264-KILLERS.mkv
    find /media -name '*.mkv' | media-identifier --json
"""

import argparse
import dataclasses
import logging
import sys
from typing import Iterable, List, Optional, Sequence

from mediaid import (
    AnalysisResult,
    Assembler,
    AudioScanner,
    BatchProcessor,
    CodecScanner,
    ConfigurationError,
    ConflictResolver,
    EpisodeScanner,
    HoleFinder,
    LanguageScanner,
    Match,
    MatchCategory,
    MediaType,
    NoiseScanner,
    ParsedMedia,
    ParserConfig,
    PathParser,
    QualityScanner,
    ReleaseGroupScanner,
    Scanner,
    SourceScanner,
    TitleExtractor,
    Tokenizer,
    YearScanner,
    load_config,
    write_report,
)

logger = logging.getLogger(__name__)


def default_scanners(config: ParserConfig) -> List[Scanner]:
    """Scanner registry for a config; disabled categories are left out."""
    scanners: List[Scanner] = [
        EpisodeScanner(),
        YearScanner(config.year_min, config.year_max),
        QualityScanner(),
        SourceScanner(),
        CodecScanner(),
        AudioScanner(),
        LanguageScanner(),
        NoiseScanner(),
        ReleaseGroupScanner(config.known_tags),
    ]
    return [s for s in scanners if config.is_enabled(*s.categories)]


class MediaParser:
    """Parser for identifying media metadata in filenames.

    Immutable after construction; one instance can be shared between threads.
    """

    def __init__(self, config: Optional[ParserConfig] = None, scanners: Optional[Sequence[Scanner]] = None):
        self.config = config or ParserConfig()
        self.tokenizer = Tokenizer(known_tags=self.config.known_tags, extensions=self.config.extensions)
        self.path_parser = PathParser(self.tokenizer)
        self.scanners = tuple(scanners) if scanners is not None else tuple(default_scanners(self.config))
        self.resolver = ConflictResolver(self.tokenizer)
        self.hole_finder = HoleFinder()
        self.title_extractor = TitleExtractor(
            self.tokenizer,
            extract_episode_titles=self.config.extract_episode_titles,
            smart_tokenize=self.config.smart_tokenize,
        )
        self.assembler = Assembler()

    def scan(self, text: str, start: int, end: int) -> List[Match]:
        """Run every scanner over text[start:end] and keep enabled categories."""
        candidates: List[Match] = []
        for scanner in self.scanners:
            for match in scanner.find_matches(text, start, end):
                if self.config.is_enabled(match.category):
                    candidates.append(match)
        return candidates

    def analyze(self, filename: str) -> AnalysisResult:
        """
        Run the pipeline up to hole detection.

        Args:
            filename: File name or path

        Returns:
            AnalysisResult with the accepted matches and the holes, which
            together cover the whole input
        """
        split = self.path_parser.parse(filename)
        name_start, name_end = split.name_start, split.name_end
        scan_end = min(name_end, name_start + self.config.max_length)

        candidates = self.scan(filename, name_start, scan_end)
        if scan_end < name_end:
            # A trailing "-GROUP" anchored at the cut is not at the end of the name
            candidates = [
                m for m in candidates
                if not (m.category is MatchCategory.RELEASE_GROUP and m.end == scan_end and m.value.startswith('-'))
            ]
        accepted = self.resolver.resolve(candidates)
        accepted = self.resolver.apply_rules(accepted, name_start, filename)
        logger.debug("%r: %d candidates, %d accepted", filename, len(candidates), len(accepted))

        matches = list(accepted)
        if name_start > 0:
            matches.insert(0, Match(
                start=0, end=name_start, value=filename[:name_start],
                raw=filename[:name_start], category=MatchCategory.OTHER,
            ))
        if split.extension is not None:
            matches.append(Match(
                start=name_end, end=len(filename), value=filename[name_end:],
                raw=split.extension, category=MatchCategory.CONTAINER,
            ))

        holes = self.hole_finder.find_holes(filename, matches)
        return AnalysisResult(
            input=filename,
            name_start=name_start,
            name_end=name_end,
            matches=tuple(matches),
            holes=tuple(holes),
        )

    def parse(self, filename: str) -> ParsedMedia:
        """
        Full parsing pipeline.

        Args:
            filename: File name or path

        Returns:
            ParsedMedia; matches are only included when the config asks for them
        """
        return self._parse(filename, self.config.include_matches)

    def parse_debug(self, filename: str) -> ParsedMedia:
        """Same as parse(), with the accepted matches on the result."""
        return self._parse(filename, True)

    def _parse(self, filename: str, include_matches: bool) -> ParsedMedia:
        analysis = self.analyze(filename)
        container = next((m.raw for m in analysis.matches if m.category is MatchCategory.CONTAINER), None)
        selection = self.title_extractor.process(
            analysis.matches, analysis.holes, analysis.name_start, analysis.name_end,
        )
        return self.assembler.assemble(
            filename,
            analysis.matches,
            analysis.holes,
            selection,
            analysis.name_start,
            analysis.name_end,
            container,
            include_matches=include_matches,
        )


_DEFAULT_PARSER = MediaParser()


def parse(filename: str) -> ParsedMedia:
    """Parse a filename with the default configuration."""
    return _DEFAULT_PARSER.parse(filename)


def parse_debug(filename: str) -> ParsedMedia:
    """Parse a filename with the default configuration, keeping the matches."""
    return _DEFAULT_PARSER.parse_debug(filename)


def _or_dash(value) -> str:
    return '-' if value in (None, '') else str(value)


def format_summary(result: ParsedMedia) -> str:
    """Human-readable, multi-line summary of one result."""
    episode = result.episode_info
    quality = result.quality

    lines = [
        '=' * 60,
        f"File:       {result.original}",
        '=' * 60,
        f"Type:       {result.media_type.value}",
        f"Title:      {_or_dash(result.title)}",
        f"Year:       {_or_dash(result.year)}",
    ]
    if result.media_type is MediaType.EPISODE:
        marker = f"S{episode.season or 0:02d}E{episode.episode or 0:02d}"
        if episode.episode_end is not None:
            marker += f"-E{episode.episode_end:02d}"
        lines.append(f"Episode:    {marker}")
        if episode.episode_title:
            lines.append(f"Ep. title:  {episode.episode_title}")
    lines.extend([
        "Quality:    " + " | ".join(_or_dash(v) for v in (quality.resolution, quality.source, quality.codec, quality.audio)),
        f"Languages:  {', '.join(result.languages) or '-'}",
        f"Group:      {_or_dash(result.release_group)}",
        f"Container:  {_or_dash(result.container)}",
        f"Confidence: {result.confidence}%",
    ])
    if result.matches:
        lines.append("Matches:")
        for m in result.matches:
            lines.append(f"  {m.category.name:<14} [{m.start:>3}..{m.end:<3}] {m.value!r} -> {m.raw!r} ({m.confidence})")
    return "\n".join(lines)


def read_names(stream: Iterable[str]) -> List[str]:
    """Newline-delimited names; blank lines are skipped."""
    names = []
    for line in stream:
        name = line.rstrip('\r\n')
        if name.strip():
            names.append(name)
    return names


def parse_arguments(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog='media-identifier',
        description='Identify movie/episode metadata in media filenames'
    )
    parser.add_argument(
        'filenames',
        nargs='*',
        help='Filenames to parse; "-" or none reads names from stdin, one per line'
    )
    parser.add_argument(
        '--stdin',
        action='store_true',
        help='Read newline-delimited names from stdin'
    )
    parser.add_argument(
        '-d', '--debug',
        action='store_true',
        help='List the accepted matches for every name'
    )
    parser.add_argument(
        '-j', '--json',
        action='store_true',
        help='Print results as pretty JSON'
    )
    parser.add_argument(
        '--config',
        metavar='PATH',
        help='JSON file with parser options'
    )
    parser.add_argument(
        '--report',
        metavar='PATH',
        help='Also write an Excel (.xlsx) report'
    )
    parser.add_argument(
        '--workers',
        type=int,
        default=1,
        help='Parse with N worker threads (default: 1)'
    )
    parser.add_argument(
        '-v', '--verbose',
        action='count',
        default=0,
        help='More logging on stderr (-v info, -vv debug)'
    )

    args = parser.parse_args(argv)
    if args.workers < 1:
        parser.error("--workers must be at least 1")
    return args


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Command line entry point."""
    args = parse_arguments(argv)

    level = logging.WARNING
    if args.verbose == 1:
        level = logging.INFO
    elif args.verbose >= 2:
        level = logging.DEBUG
    logging.basicConfig(level=level, stream=sys.stderr, format='%(levelname)s %(name)s: %(message)s')

    try:
        config = load_config(args.config) if args.config else ParserConfig()
        if args.debug:
            config = dataclasses.replace(config, include_matches=True)
    except ConfigurationError as exc:
        print(f"error: invalid configuration: {exc}", file=sys.stderr)
        return 2

    names = [n for n in args.filenames if n != '-']
    if args.stdin or '-' in args.filenames or not args.filenames:
        names.extend(read_names(sys.stdin))

    media_parser = MediaParser(config)
    if args.workers > 1:
        batch = BatchProcessor(media_parser, max_workers=args.workers).process_parallel(names)
        results = batch.parsed
    else:
        results = [media_parser.parse(name) for name in names]

    for result in results:
        if args.json:
            try:
                print(result.to_json())
            except (TypeError, ValueError) as exc:
                print(f"error: cannot serialize result for {result.original!r}: {exc}", file=sys.stderr)
        else:
            print(format_summary(result))
            print()

    if args.report:
        path = write_report(args.report, results)
        print(f"Report written to {path}", file=sys.stderr)

    return 0


if __name__ == '__main__':
    sys.exit(main())

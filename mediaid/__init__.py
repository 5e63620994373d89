"""
Media identifier modules package.

This package contains the core processing modules:
- tokenizer: Token extraction and extension handling
- trimmer: Title punctuation cleanup
- path_parser: Directory/name/extension split
- models: Matches, holes and the ParsedMedia result
- scanner, marker_scanners, episode_scanner, year_scanner,
  release_group_scanner: Pattern scanners
- resolver: Priority-based conflict resolution and post rules
- holes: Unmatched gaps between matches
- title_extractor: Title and episode title inference
- assembler: Result assembly and confidence scoring
- config, config_loader: Validated parser options
- batch_processor: Concurrent batch parsing
- excel_writer: Excel reports
"""

# Explicit imports make the public API clear and prevent namespace pollution
from .errors import MediaIdError, ConfigurationError
from .models import (
    MediaType,
    MatchCategory,
    Match,
    Hole,
    EpisodeInfo,
    QualityInfo,
    ParsedMedia,
    AnalysisResult,
)
from .tokenizer import Tokenizer, Token
from .trimmer import Trimmer
from .path_parser import PathParser, PathParseResult
from .scanner import Scanner, MarkerScanner
from .marker_scanners import (
    QualityScanner,
    SourceScanner,
    CodecScanner,
    AudioScanner,
    LanguageScanner,
    NoiseScanner,
)
from .episode_scanner import EpisodeScanner
from .year_scanner import YearScanner
from .release_group_scanner import ReleaseGroupScanner
from .resolver import ConflictResolver
from .holes import HoleFinder
from .title_extractor import TitleExtractor, TitleSelection
from .assembler import Assembler, compute_confidence
from .config import ParserConfig, CONFIG_SCHEMA
from .config_loader import load_config
from .batch_processor import BatchProcessor, BatchResult
from .excel_writer import write_report

__all__ = [
    'MediaIdError',
    'ConfigurationError',
    'MediaType',
    'MatchCategory',
    'Match',
    'Hole',
    'EpisodeInfo',
    'QualityInfo',
    'ParsedMedia',
    'AnalysisResult',
    'Tokenizer',
    'Token',
    'Trimmer',
    'PathParser',
    'PathParseResult',
    'Scanner',
    'MarkerScanner',
    'QualityScanner',
    'SourceScanner',
    'CodecScanner',
    'AudioScanner',
    'LanguageScanner',
    'NoiseScanner',
    'EpisodeScanner',
    'YearScanner',
    'ReleaseGroupScanner',
    'ConflictResolver',
    'HoleFinder',
    'TitleExtractor',
    'TitleSelection',
    'Assembler',
    'compute_confidence',
    'ParserConfig',
    'CONFIG_SCHEMA',
    'load_config',
    'BatchProcessor',
    'BatchResult',
    'write_report',
]

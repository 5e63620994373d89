#!/usr/bin/env python3
"""
Parser configuration.

ParserConfig is immutable and validated when it is built, so a parser never
meets a bad option halfway through a filename. Plain mappings (for example a
JSON config file) are checked against CONFIG_SCHEMA with jsonschema first.
"""

from dataclasses import dataclass, fields
from typing import Any, Dict, FrozenSet, List, Mapping

from jsonschema import Draft7Validator

from .constants import (
    DEFAULT_MAX_LENGTH,
    DEFAULT_YEAR_MAX,
    DEFAULT_YEAR_MIN,
    EXTENSIONS,
    KNOWN_TAGS,
)
from .errors import ConfigurationError
from .models import MatchCategory

# Categories produced by scanners; the rest come from the pipeline itself
SCANNER_CATEGORIES: FrozenSet[MatchCategory] = frozenset({
    MatchCategory.SEASON,
    MatchCategory.EPISODE,
    MatchCategory.YEAR,
    MatchCategory.QUALITY,
    MatchCategory.SOURCE,
    MatchCategory.CODEC,
    MatchCategory.AUDIO,
    MatchCategory.LANGUAGE,
    MatchCategory.RELEASE_GROUP,
    MatchCategory.NOISE,
})

CONFIG_SCHEMA: Dict[str, Any] = {
    "$schema": "http://json-schema.org/draft-07/schema#",
    "title": "media-identifier parser configuration",
    "type": "object",
    "additionalProperties": False,
    "properties": {
        "enabled_categories": {
            "type": "array",
            "items": {"enum": sorted(c.value for c in SCANNER_CATEGORIES)},
            "uniqueItems": True,
        },
        "known_tags": {
            "type": "array",
            "items": {"type": "string", "minLength": 1},
        },
        "extensions": {
            "type": "array",
            "items": {"type": "string", "pattern": "^[A-Za-z0-9]{2,4}$"},
        },
        "include_matches": {"type": "boolean"},
        "extract_episode_titles": {"type": "boolean"},
        "smart_tokenize": {"type": "boolean"},
        "year_min": {"type": "integer", "minimum": 1000, "maximum": 9999},
        "year_max": {"type": "integer", "minimum": 1000, "maximum": 9999},
        "max_length": {"type": "integer", "minimum": 1},
    },
}

_VALIDATOR = Draft7Validator(CONFIG_SCHEMA)


def validate_mapping(data: Any) -> List[str]:
    """
    Validate a plain config mapping against CONFIG_SCHEMA.

    Args:
        data: Decoded JSON value

    Returns:
        List of readable error messages, empty when valid
    """
    errors = sorted(_VALIDATOR.iter_errors(data), key=lambda e: [str(p) for p in e.absolute_path])

    messages = []
    for error in errors:
        location = " > ".join(str(p) for p in error.absolute_path) or "root"
        messages.append(f"{location}: {error.message}")
    return messages


@dataclass(frozen=True)
class ParserConfig:
    """Options of a MediaParser."""
    enabled_categories: FrozenSet[MatchCategory] = SCANNER_CATEGORIES
    known_tags: FrozenSet[str] = KNOWN_TAGS
    extensions: FrozenSet[str] = EXTENSIONS
    include_matches: bool = False
    extract_episode_titles: bool = True
    smart_tokenize: bool = True
    year_min: int = DEFAULT_YEAR_MIN
    year_max: int = DEFAULT_YEAR_MAX
    max_length: int = DEFAULT_MAX_LENGTH

    def __post_init__(self):
        # Normalize collections; frozen, so go through object.__setattr__
        try:
            categories = frozenset(MatchCategory(c) for c in self.enabled_categories)
        except ValueError as exc:
            raise ConfigurationError([f"enabled_categories: {exc}"]) from exc
        object.__setattr__(self, 'enabled_categories', categories)
        object.__setattr__(self, 'known_tags', frozenset(t.upper() for t in self.known_tags))
        object.__setattr__(self, 'extensions', frozenset(e.lower() for e in self.extensions))

        messages = []
        unknown = self.enabled_categories - SCANNER_CATEGORIES
        if unknown:
            names = ", ".join(sorted(c.value for c in unknown))
            messages.append(f"enabled_categories: not a scanner category: {names}")
        if self.year_min > self.year_max:
            messages.append(f"year_min ({self.year_min}) is greater than year_max ({self.year_max})")
        if self.max_length < 1:
            messages.append(f"max_length must be positive (got {self.max_length})")
        if messages:
            raise ConfigurationError(messages)

    def is_enabled(self, *categories: MatchCategory) -> bool:
        """True when any of the categories is enabled."""
        return any(c in self.enabled_categories for c in categories)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> 'ParserConfig':
        """
        Build a config from a plain mapping, validating it first.

        Args:
            data: Mapping with any subset of the config options

        Returns:
            ParserConfig

        Raises:
            ConfigurationError: If the mapping does not match CONFIG_SCHEMA
                or the values are inconsistent
        """
        messages = validate_mapping(data)
        if messages:
            raise ConfigurationError(messages)

        return cls(**data)

    def to_dict(self) -> Dict[str, Any]:
        """Plain, JSON-ready mapping accepted by from_dict."""
        data: Dict[str, Any] = {}
        for f in fields(self):
            value = getattr(self, f.name)
            if f.name == 'enabled_categories':
                value = sorted(c.value for c in value)
            elif isinstance(value, frozenset):
                value = sorted(value)
            data[f.name] = value
        return data


#!/usr/bin/env python3
"""
Config loader utility for reading parser options from JSON files.
"""

import json
import logging
from pathlib import Path
from typing import Any, Union

from .config import ParserConfig
from .errors import ConfigurationError

logger = logging.getLogger(__name__)

ENCODINGS = ('utf-8', 'utf-8-sig', 'latin-1')


def read_json(path: Union[str, Path]) -> Any:
    """
    Read a JSON file, trying a few encodings.

    Args:
        path: Path to the JSON file

    Returns:
        Decoded JSON value

    Raises:
        ConfigurationError: If the file is missing, unreadable or not JSON
    """
    path = Path(path)
    last_error = None
    for encoding in ENCODINGS:
        try:
            with open(path, 'r', encoding=encoding) as f:
                return json.load(f)
        except UnicodeDecodeError as exc:
            last_error = exc
            continue
        except json.JSONDecodeError as exc:
            raise ConfigurationError([f"{path}: invalid JSON: {exc}"]) from exc
        except OSError as exc:
            raise ConfigurationError([f"{path}: cannot read config file: {exc.strerror or exc}"]) from exc
    raise ConfigurationError([f"{path}: cannot decode config file: {last_error}"])


def load_config(path: Union[str, Path]) -> ParserConfig:
    """
    Load and validate a ParserConfig from a JSON file.

    Args:
        path: Path to a JSON object with any subset of the config options

    Returns:
        ParserConfig

    Raises:
        ConfigurationError: If the file cannot be read or fails validation
    """
    data = read_json(path)
    logger.debug("loaded config from %s", path)
    return ParserConfig.from_dict(data)

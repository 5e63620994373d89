#!/usr/bin/env python3
"""
Trimmer module for cleaning title candidates.

Removes separator punctuation and unbalanced brackets from both ends of a
string. Used by the title extractor after the smart tokenizer has joined the
title words.
"""

from typing import Iterable, List, Optional

from .constants import TRIMMING_STRINGS

_BRACKET_PAIRS = {'(': ')', '[': ']', '{': '}'}
_CLOSING = {v: k for k, v in _BRACKET_PAIRS.items()}


class Trimmer:
    """Trims unwanted patterns from the beginning and end of strings."""

    def __init__(self, trimming_strings: Optional[Iterable[str]] = None):
        """Initialize trimmer.

        Args:
            trimming_strings: Strings to strip from both ends. Defaults to the
                separator punctuation in constants.TRIMMING_STRINGS.
        """
        self.trimming_strings = list(trimming_strings) if trimming_strings is not None else list(TRIMMING_STRINGS)

    def trim(self, text: str) -> str:
        """
        Trim unwanted patterns from the beginning and end of a string.

        Iteratively removes trimming strings and unbalanced brackets until no
        more changes occur. This handles nested patterns like "- ( -" -> "".

        Args:
            text: String to trim

        Returns:
            Trimmed string

        Example:
            >>> trimmer = Trimmer()
            >>> trimmer.trim("- Dark Matter -")
            "Dark Matter"
            >>> trimmer.trim("(Amelie")
            "Amelie"
            >>> trimmer.trim("Movie (Director's Cut)")
            "Movie (Director's Cut)"
        """
        if not text:
            return text

        trimmed = text

        # Keep trimming until no more changes are made
        changed = True
        while changed:
            changed = False

            for trim_str in self.trimming_strings:
                if trimmed.startswith(trim_str):
                    trimmed = trimmed[len(trim_str):]
                    changed = True

            for trim_str in self.trimming_strings:
                if trimmed.endswith(trim_str):
                    trimmed = trimmed[:-len(trim_str)]
                    changed = True

            # A closing bracket can't open a title, an opening one can't end it
            if trimmed and (trimmed[0] in _CLOSING
                            or (trimmed[0] in _BRACKET_PAIRS and not self._is_closed(trimmed, 0))):
                trimmed = trimmed[1:]
                changed = True

            if trimmed and (trimmed[-1] in _BRACKET_PAIRS
                            or (trimmed[-1] in _CLOSING and not self._is_opened(trimmed, len(trimmed) - 1))):
                trimmed = trimmed[:-1]
                changed = True

        return trimmed

    @staticmethod
    def _is_closed(text: str, pos: int) -> bool:
        # Does the bracket at pos have a matching closing bracket later on
        opening = text[pos]
        closing = _BRACKET_PAIRS[opening]
        depth = 0
        for ch in text[pos:]:
            if ch == opening:
                depth += 1
            elif ch == closing:
                depth -= 1
                if depth == 0:
                    return True
        return False

    @staticmethod
    def _is_opened(text: str, pos: int) -> bool:
        closing = text[pos]
        opening = _CLOSING[closing]
        depth = 0
        for ch in reversed(text[:pos + 1]):
            if ch == closing:
                depth += 1
            elif ch == opening:
                depth -= 1
                if depth == 0:
                    return True
        return False

    def trim_all(self, strings: List[str]) -> List[str]:
        """Trim multiple strings."""
        return [self.trim(s) for s in strings]


if __name__ == '__main__':
    trimmer = Trimmer()

    test_cases = [
        "- Dark Matter -",
        "___Text___",
        "...Name...",
        "(Amelie",
        "Movie (Director's Cut)",
        "[]",
        ".- Combo -.",
    ]

    print("Trimmer Test Cases\n" + "=" * 50)
    for test in test_cases:
        print(f'"{test}" -> "{trimmer.trim(test)}"')

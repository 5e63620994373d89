#!/usr/bin/env python3
"""
Tokenizer module for splitting media filenames into position-tracked tokens.

Tokens are split on the separators '.', ' ', '_' and '-'. Each token records
where it sits in the original string and which separators bounded it. The
smart mode glues hyphenated title fragments back together ("SG-1",
"Spider-Man") unless one side is a known technical tag. The extension helpers
isolate a whitelisted container extension.
"""

from dataclasses import dataclass, replace
from typing import FrozenSet, Iterable, List, Optional, Tuple

from .constants import EXTENSIONS, KNOWN_TAGS, SEPARATORS


@dataclass
class Token:
    """Represents a single token extracted from a filename."""
    value: str
    start: int  # Position in the original string
    end: int
    separator_before: Optional[str] = None
    separator_after: Optional[str] = None


class Tokenizer:
    """Separator-based tokenizer with configurable tag and extension sets."""

    def __init__(self,
                 known_tags: Optional[Iterable[str]] = None,
                 extensions: Optional[Iterable[str]] = None):
        self.known_tags: FrozenSet[str] = (
            frozenset(tag.upper() for tag in known_tags) if known_tags is not None else KNOWN_TAGS
        )
        self.extensions: FrozenSet[str] = (
            frozenset(ext.lower() for ext in extensions) if extensions is not None else EXTENSIONS
        )

    def tokenize(self, text: str) -> List[Token]:
        """
        Split text into tokens on separator characters.

        Args:
            text: The string to split

        Returns:
            List of tokens in order of appearance, with offsets into text
        """
        tokens: List[Token] = []
        current: List[str] = []
        current_start = 0
        last_separator: Optional[str] = None

        for idx, ch in enumerate(text):
            if ch in SEPARATORS:
                if current:
                    tokens.append(Token(
                        value=''.join(current),
                        start=current_start,
                        end=idx,
                        separator_before=last_separator,
                        separator_after=ch,
                    ))
                    current = []
                last_separator = ch
                current_start = idx + 1
            else:
                if not current:
                    current_start = idx
                current.append(ch)

        if current:
            tokens.append(Token(
                value=''.join(current),
                start=current_start,
                end=len(text),
                separator_before=last_separator,
            ))

        return tokens

    def tokenize_smart(self, text: str) -> List[Token]:
        """
        Tokenize, then merge hyphen-joined pairs that form one title fragment.

        A single left-to-right pass: a merged pair is never merged again.

        Args:
            text: The string to split

        Returns:
            List of tokens with "SG-1" style fragments kept whole
        """
        tokens = self.tokenize(text)
        merged: List[Token] = []
        i = 0

        while i < len(tokens):
            token = tokens[i]
            if i + 1 < len(tokens):
                following = tokens[i + 1]
                # Only a single literal dash may sit between the two tokens
                if (token.separator_after == '-'
                        and following.start == token.end + 1
                        and self.should_merge_hyphenated(token.value, following.value)):
                    merged.append(Token(
                        value=f"{token.value}-{following.value}",
                        start=token.start,
                        end=following.end,
                        separator_before=token.separator_before,
                        separator_after=following.separator_after,
                    ))
                    i += 2
                    continue

            merged.append(replace(token))
            i += 1

        return merged

    def is_known_tag(self, value: str) -> bool:
        """Check if a token is a known technical tag (case-insensitive)."""
        return value.upper() in self.known_tags

    def should_merge_hyphenated(self, left: str, right: str) -> bool:
        # Acronym + number: "SG-1"
        if (len(left) <= 3
                and 1 <= len(right) <= 2
                and all(c in '0123456789' for c in right)):
            return True

        # Two capitalised words: "Spider-Man", but not "Movie-X264"
        if (left[:1].isupper() and right[:1].isupper()
                and not self.is_known_tag(left)
                and not self.is_known_tag(right)):
            return True

        return False

    def extract_extension(self, text: str) -> Optional[Tuple[str, int]]:
        """
        Get the whitelisted extension of a filename.

        Args:
            text: Filename, with or without an extension

        Returns:
            Tuple of (lower-cased extension, offset of the dot) or None
        """
        dot_pos = text.rfind('.')
        if dot_pos == -1:
            return None

        ext = text[dot_pos + 1:]
        if not 2 <= len(ext) <= 4 or not (ext.isascii() and ext.isalnum()):
            return None

        ext_lower = ext.lower()
        if ext_lower not in self.extensions:
            return None
        return ext_lower, dot_pos

    def strip_extension(self, text: str) -> str:
        """Remove a whitelisted extension, or return text unchanged."""
        found = self.extract_extension(text)
        if found is None:
            return text
        return text[:found[1]]


_DEFAULT_TOKENIZER = Tokenizer()


def tokenize(text: str) -> List[Token]:
    return _DEFAULT_TOKENIZER.tokenize(text)


def tokenize_smart(text: str) -> List[Token]:
    return _DEFAULT_TOKENIZER.tokenize_smart(text)


def extract_extension(text: str) -> Optional[Tuple[str, int]]:
    return _DEFAULT_TOKENIZER.extract_extension(text)


def strip_extension(text: str) -> str:
    return _DEFAULT_TOKENIZER.strip_extension(text)


if __name__ == '__main__':
    # Simple test
    test_cases = [
        "Dark.Matter.S01E01.720p",
        "Stargate.SG-1.S01E01",
        "The.Amazing.Spider-Man.2012.720p.BluRay.x264",
        "Movie-X264",
    ]

    for test in test_cases:
        print(f"Original: {test}")
        for i, token in enumerate(tokenize_smart(test)):
            print(f"  Token {i}: {token.value} [{token.start}:{token.end}]")
        print()

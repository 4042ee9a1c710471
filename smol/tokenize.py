"""Tokenizers that turn raw text into lazy streams of `Token` objects.

Both tokenizers only deal with English-like text. Offsets are character
offsets into the input string and indices count the tokens emitted so far.
"""
from __future__ import annotations
import re
from typing import Iterator, Pattern

from .types import Token

__all__ = ["RegexTokenizer", "WhitespaceTokenizer", "RegexWordPunctTokenizer"]


class RegexTokenizer:
    """Emits one token for every non-overlapping match of a pattern."""

    pattern: str = r"\S+"

    def __init__(self, pattern: str | None = None) -> None:
        self._regex: Pattern[str] = re.compile(pattern if pattern is not None else self.pattern)

    def tokenize(self, text: str) -> Iterator[Token]:
        for index, match in enumerate(self._regex.finditer(text)):
            yield Token(term=match.group(), offset=match.start(), index=index)


class WhitespaceTokenizer(RegexTokenizer):
    """Splits on runs of whitespace; leading and trailing whitespace produce no tokens."""

    pattern = r"\S+"


class RegexWordPunctTokenizer(RegexTokenizer):
    """Splits text into alphanumeric runs and runs of punctuation."""

    pattern = r"\w+|[^\w\s]+"

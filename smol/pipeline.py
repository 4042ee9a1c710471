from __future__ import annotations
from dataclasses import dataclass
from typing import Generic, Iterable, Iterator, List, Protocol, TypeVar

from .types import TaggedToken, Token

__all__ = ["Tokenizer", "Tagger", "Pipeline"]


class Tokenizer(Protocol):
    """Anything that turns raw text into a stream of tokens."""

    def tokenize(self, text: str) -> Iterator[Token]:
        ...


class Tagger(Protocol):
    """Anything that assigns a tag to every token of a sentence."""

    def tag(self, tokens: Iterable[Token]) -> List[TaggedToken]:
        ...


K = TypeVar("K", bound=Tokenizer)
G = TypeVar("G", bound=Tagger)


@dataclass(frozen=True)
class Pipeline(Generic[K, G]):
    """
    Chains a tokenizer and a tagger.

    Attributes:
        tokenizer: Splits the input text into tokens.
        tagger: Tags the tokens produced by `tokenizer`.
    """
    tokenizer: K
    tagger: G

    def pos(self, text: str) -> List[TaggedToken]:
        """Tokenizes `text` and returns its part-of-speech tagged tokens."""
        return self.tagger.tag(self.tokenizer.tokenize(text))

from __future__ import annotations
from dataclasses import dataclass, fields
from typing import List, Sequence, Tuple

__all__ = ["Token", "TaggedToken", "TaggedSentence"]

@dataclass(frozen=True)
class Token:
    """
    Represents a single token produced by one of the tokenizers.

    Tokens are the unit of exchange between the tokenizers, the tagger and the
    I/O helpers. The tagger never alters a token: normalization happens only
    inside feature building, so the emitted surface text is always the text the
    tokenizer produced.

    Attributes:
        term: The text of the token itself.
        offset: The character offset at which the token starts in the source text.
        index: The ordinal position of the token amongst all tokens of its stream.
    """
    term: str
    offset: int = 0
    index: int = 0

    @classmethod
    def get_field_names(cls) -> set[str]:
        """
        Returns a set of all field names for the Token dataclass.

        Used by the JSON readers to drop unknown keys before building tokens.

        Returns:
            A set of strings, where each string is a field name.
        """
        return {f.name for f in fields(cls)}

    @classmethod
    def from_words(cls, words: Sequence[str]) -> List["Token"]:
        """Builds tokens for pre-split words, counting offsets as if joined by single spaces."""
        out: List[Token] = []
        offset = 0
        for i, word in enumerate(words):
            out.append(cls(term=word, offset=offset, index=i))
            offset += len(word) + 1
        return out


# A token paired with the tag decided for it.
TaggedToken = Tuple[Token, str]

# One training sentence: (word, gold tag) pairs in order.
TaggedSentence = Sequence[Tuple[str, str]]

"""Feature extraction for the perceptron tagger.

This module turns a position inside a sentence into the sparse, string-keyed
feature set scored by the averaged perceptron. It has two parts:

1.  **Word Normalization**: The `normalize` function buckets a word into a
    coarse class (hyphenated words, years, other integers) or lowercases it.
    Normalized words are only used to build the context array; the tagger
    always emits the original surface text.
2.  **Feature Templates**: The `get_features` function applies a fixed set of
    templates to the normalized context, the raw current word and the two
    previously decided tags. Each template contributes a count of 1.0 to its
    key, so a template that fires twice with the same arguments accumulates.
"""
from __future__ import annotations
import re
from typing import Dict, List, Sequence

START = ("-START-", "-START2-")
END = ("-END-", "-END2-")

FeatureSet = Dict[str, float]

_YEAR_RE = re.compile(r"[0-9]{4}")
_INTEGER_RE = re.compile(r"[+-]?[0-9]+")


# --- Word Normalization ---
def normalize(word: str) -> str:
    """Maps a word to the bucketed form used inside feature keys."""
    if "-" in word and not word.startswith("-"):
        return "!HYPHEN"
    if _YEAR_RE.fullmatch(word):
        return "!YEAR"
    if _INTEGER_RE.fullmatch(word):
        return "!DIGIT"
    return word.lower()

def build_context(words: Sequence[str]) -> List[str]:
    """Pads the normalized words with two start and two end sentinels."""
    return [*START, *(normalize(w) for w in words), *END]

def clamp_position(i: int, context: Sequence[str]) -> int:
    """Clamps a context position so that every neighbour lookup stays in bounds."""
    return max(2, min(i, len(context) - 3))


# --- Feature Templates ---
def _add(features: FeatureSet, name: str, *args: str) -> None:
    key = " ".join((name,) + args)
    features[key] = features.get(key, 0.0) + 1.0

def get_features(i: int, context: Sequence[str], word: str, p1: str, p2: str) -> FeatureSet:
    """
    Builds the sparse feature set for a single tagging decision.

    Args:
        i: The position of the current word inside `context`. It is clamped to
           `[2, len(context) - 3]`, so callers pass `word_index + 2`.
        context: The padded, normalized sentence produced by `build_context`.
        word: The raw (un-normalized) current word.
        p1: The tag decided for the previous word.
        p2: The tag decided for the word before that.

    Returns:
        A dictionary mapping each feature key to its count.
    """
    i = clamp_position(i, context)
    features: FeatureSet = {}

    _add(features, "bias")
    _add(features, "i suffix", word[-3:])
    _add(features, "i pref1", word[:1])
    _add(features, "i-1 tag", p1)
    _add(features, "i-2 tag", p2)
    _add(features, "i tag+i-2 tag", p1, p2)
    _add(features, "i word", context[i])
    _add(features, "i-1 tag+i word", p1, context[i])
    _add(features, "i-1 word", context[i - 1])
    _add(features, "i-1 suffix", context[i - 1][-3:])
    _add(features, "i-2 word", context[i - 2])
    _add(features, "i+1 word", context[i + 1])
    # Taken from the previous word, not the next one. Models trained with this
    # key layout depend on it.
    _add(features, "i+1 suffix", context[i - 1][-3:])
    _add(features, "i+2 word", context[i + 2])

    return features

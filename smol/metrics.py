"""String metrics used alongside the tagger."""
from __future__ import annotations

from rapidfuzz.distance import Levenshtein


def edit_distance(a: str, b: str, threshold: int) -> int:
    """
    Calculates the Levenshtein distance between two strings, capped at a threshold.

    The threshold is handed to rapidfuzz as a score cutoff, so comparisons of
    very different strings stop early.

    Args:
        a: The first piece of text.
        b: The second piece of text.
        threshold: The maximum distance worth reporting.

    Returns:
        The edit distance, or `threshold` if the distance is larger.
    """
    if a == b:
        return 0
    return min(Levenshtein.distance(a, b, score_cutoff=threshold), threshold)

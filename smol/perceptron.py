"""The averaged perceptron behind the tagger.

`AveragedPerceptron` keeps a sparse `(feature, class)` weight map and learns it
online, one decision at a time. Averaging is lazy: each weight's running
integral is only brought up to date when that weight changes, and once more
in `average_weights`.
"""
from __future__ import annotations
from decimal import ROUND_HALF_UP, Decimal
from typing import Dict, Iterable, Mapping, Optional, Set, Tuple

from .errors import EmptyModelError

__all__ = ["AveragedPerceptron", "round_average"]

WeightKey = Tuple[str, str]

# Scores are truncated to this precision before comparison; differences
# below it count as ties.
SCORE_PRECISION = 100000
AVERAGE_DECIMALS = 3

def round_average(value: float) -> float:
    """Rounds an averaged weight to three decimals, halves away from zero."""
    scaled = Decimal(value * 10 ** AVERAGE_DECIMALS).quantize(Decimal(1), rounding=ROUND_HALF_UP)
    return float(scaled) / 10 ** AVERAGE_DECIMALS

class AveragedPerceptron:
    """
    An online multi-class linear classifier with lazily averaged weights.

    Weights live in a single sparse map keyed by `(feature, class)`; a missing
    entry means a weight of 0.0. During training every change to a weight
    first folds the weight's value, multiplied by the number of instances it
    has been held for, into `totals`. `average_weights` finalizes those
    integrals once at the end, so no update ever has to touch weights it does
    not change.

    Attributes:
        weights: The live weights, keyed by `(feature, class)`.
        classes: Every class label the model can predict.
        totals: The per-key integral of the weight over elapsed instances.
        stamps: The instance count at which each key was last changed.
        instances: The number of `update` calls seen so far.
    """
    def __init__(self, weights: Optional[Dict[WeightKey, float]] = None, classes: Optional[Iterable[str]] = None):
        self.weights: Dict[WeightKey, float] = dict(weights or {})
        self.classes: Set[str] = set(classes or ())
        self.totals: Dict[WeightKey, float] = {}
        self.stamps: Dict[WeightKey, int] = {}
        self.instances = 0

    def score(self, features: Mapping[str, float]) -> Dict[str, float]:
        """
        Calculates the raw score of every known class for a feature set.

        Features with a zero count contribute nothing and are skipped.

        Args:
            features: A mapping from feature key to its count.

        Returns:
            A dictionary mapping each class to its score. Classes without any
            weight on the given features score 0.0.
        """
        scores = {label: 0.0 for label in self.classes}
        for feat, value in features.items():
            if value == 0:
                continue
            for label in self.classes:
                weight = self.weights.get((feat, label))
                if weight is not None:
                    scores[label] += weight * value
        return scores

    def predict(self, features: Mapping[str, float]) -> str:
        """
        Returns the highest scoring class for a feature set.

        Scores are truncated to a fixed precision before being compared and
        exact ties go to the lexically greatest label, so the result never
        depends on set iteration order.

        Raises:
            EmptyModelError: If the model knows no classes.
        """
        if not self.classes:
            raise EmptyModelError()
        scores = self.score(features)
        return max(self.classes, key=lambda label: (int(scores[label] * SCORE_PRECISION), label))

    def update(self, truth: str, guess: str, features: Iterable[str]) -> None:
        """
        Applies one online learning step.

        The instance counter always advances, even when the guess was right.
        On a mistake every present feature moves +1 towards `truth` and -1
        away from `guess`.

        Args:
            truth: The gold class.
            guess: The class the model predicted.
            features: The feature keys (or feature set) used for the prediction.
        """
        self.instances += 1
        self.classes.add(truth)
        self.classes.add(guess)
        if truth == guess:
            return
        for feat in features:
            self._update_feat(truth, feat, self.weights.get((feat, truth), 0.0), 1.0)
            self._update_feat(guess, feat, self.weights.get((feat, guess), 0.0), -1.0)

    def _update_feat(self, c: str, f: str, v: float, w: float) -> None:
        key = (f, c)
        self.totals[key] = self.totals.get(key, 0.0) + (self.instances - self.stamps.get(key, 0)) * v
        self.stamps[key] = self.instances
        self.weights[key] = v + w

    def average_weights(self) -> None:
        """
        Replaces every live weight by its average over all training instances.

        Averages are rounded to three decimals, halves away from zero, and
        entries that round to exactly 0.0 are dropped, so the weight map
        stays sparse. Nothing happens before the first `update`.
        """
        if self.instances == 0:
            return
        averaged: Dict[WeightKey, float] = {}
        for key, weight in self.weights.items():
            total = self.totals.get(key, 0.0) + (self.instances - self.stamps.get(key, 0)) * weight
            self.totals[key] = total
            self.stamps[key] = self.instances
            value = round_average(total / self.instances)
            if value != 0.0:
                averaged[key] = value
        self.weights = averaged

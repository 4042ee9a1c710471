"""Greedy part-of-speech tagging with an averaged perceptron.

This module hosts `PerceptronTagger`, which owns an `AveragedPerceptron` and a
frequency-based tag dictionary and drives both of them over whole sentences:

1.  **Decoding**: Words are tagged strictly left to right. Each decision sees
    the two tags decided just before it, never gold tags, so training and
    inference build exactly the same feature sets.
2.  **Training**: Every decision made during a training pass is immediately
    followed by a perceptron update. Sentence order is reshuffled between
    epochs with an injected random generator and the weights are averaged once
    at the end.
3.  **Tag Dictionary**: Frequent words that almost always carry the same tag
    are bound to that tag before training and skip the model entirely.
4.  **Persistence**: Models are written as a gzip-compressed JSON document
    holding the weights, the tag dictionary and the classes.
"""
from __future__ import annotations
import gzip
import json
import threading
import zlib
from collections import Counter, defaultdict
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Sequence, Set, Union

import numpy as np
from tqdm import tqdm

from .errors import EmptyModelError, ModelDeserializeError, ModelSerializeError
from .features import START, build_context, get_features
from .perceptron import AveragedPerceptron
from .types import TaggedSentence, TaggedToken, Token

MODEL_FORMAT = "smol-perceptron"
MODEL_VERSION = 1

FREQ_THRESHOLD = 20
AMBIGUITY_THRESHOLD = 0.97

PathLike = Union[str, Path]

class PerceptronTagger:
    """
    Tags token sequences with an averaged perceptron and a tag dictionary.

    A tagger is exclusively owned by one caller at a time: `train` mutates the
    model in place and must not run while `tag` is in flight elsewhere.

    Attributes:
        model: The underlying `AveragedPerceptron`.
        tagdict: Words bound to a fixed tag; these bypass the model. It is
                 built once, by the first `train` call, unless one was passed in.
        rng: The random generator used to shuffle sentences between epochs.
        freq_threshold: Minimum number of occurrences for a word to enter the
                        tag dictionary.
        ambiguity_threshold: Minimum share of its dominant tag for a word to
                             enter the tag dictionary.
    """
    def __init__(
        self,
        model: Optional[AveragedPerceptron] = None,
        tagdict: Optional[Dict[str, str]] = None,
        *,
        rng: Optional[np.random.Generator] = None,
        seed: Optional[int] = None,
        freq_threshold: int = FREQ_THRESHOLD,
        ambiguity_threshold: float = AMBIGUITY_THRESHOLD,
    ):
        self.model = model if model is not None else AveragedPerceptron()
        self.tagdict: Dict[str, str] = dict(tagdict or {})
        self._tagdict_built = tagdict is not None
        self.rng = rng if rng is not None else np.random.default_rng(seed)
        self.freq_threshold = freq_threshold
        self.ambiguity_threshold = ambiguity_threshold

    @property
    def classes(self) -> Set[str]:
        return self.model.classes

    # --- Decoding ---
    def tag(self, tokens: Iterable[Token]) -> List[TaggedToken]:
        """
        Tags a sentence of tokens.

        The token stream is materialized first, since decoding needs random
        access to the whole sentence.

        Args:
            tokens: An iterable of `Token` objects forming one sentence.

        Returns:
            A list of `(token, tag)` pairs in input order. The tokens are the
            ones passed in, untouched.

        Raises:
            EmptyModelError: If the model has no classes (it was never trained
                             or loaded).
        """
        if not self.model.classes:
            raise EmptyModelError()
        tokens = list(tokens)
        tags = self._decode([t.term for t in tokens])
        return list(zip(tokens, tags))

    def tag_words(self, words: Sequence[str]) -> List[str]:
        """Tags a sentence of plain words and returns only the tags."""
        if not self.model.classes:
            raise EmptyModelError()
        return self._decode(list(words))

    def _decode(self, words: List[str], gold: Optional[Sequence[str]] = None) -> List[str]:
        context = build_context(words)
        p1, p2 = START
        tags: List[str] = []
        for i, word in enumerate(words):
            tag = self.tagdict.get(word)
            if tag is None:
                features = get_features(i + 2, context, word, p1, p2)
                tag = self.model.predict(features)
                if gold is not None:
                    self.model.update(gold[i], tag, features)
            tags.append(tag)
            p2, p1 = p1, tag
        return tags

    # --- Training ---
    def train(
        self,
        sentences: Sequence[TaggedSentence],
        epochs: int = 5,
        *,
        progress: bool = True,
        cancel_event: Optional[threading.Event] = None,
    ) -> None:
        """
        Trains the model in place on a tagged corpus.

        Repeated calls continue from the current weights. The tag dictionary
        is only built by the first call, even if that call binds no words, and
        never for a tagger created with a tag dictionary; every call registers
        the corpus tags as classes.

        Args:
            sentences: The corpus, one sequence of `(word, tag)` pairs per sentence.
            epochs: The number of passes over the corpus.
            progress: Show a progress bar and per-epoch accuracy.
            cancel_event: When set by another party, training stops before the
                          next sentence. The weights learned so far are still
                          averaged, so the model stays usable.
        """
        corpus = [list(sentence) for sentence in sentences]
        self._make_tagdict(corpus)

        cancelled = False
        epoch_iter = tqdm(range(epochs), desc="Training Epochs") if progress else range(epochs)
        for epoch in epoch_iter:
            correct = total = 0
            for sentence in corpus:
                if cancel_event is not None and cancel_event.is_set():
                    cancelled = True
                    break
                words = [word for word, _ in sentence]
                gold = [tag for _, tag in sentence]
                guesses = self._decode(words, gold)
                correct += sum(g == t for g, t in zip(guesses, gold))
                total += len(gold)
            if cancelled:
                if progress:
                    print(f"\nTraining cancelled during epoch {epoch + 1}/{epochs}.")
                break
            if progress and total:
                print(f"\nEpoch {epoch + 1}/{epochs} accuracy on training set: {correct / total:.2%}")
            if epoch < epochs - 1:
                order = self.rng.permutation(len(corpus))
                corpus = [corpus[j] for j in order]

        self.model.average_weights()

    def _make_tagdict(self, sentences: Sequence[TaggedSentence]) -> None:
        """Registers every corpus tag and, on first use, binds frequent unambiguous words."""
        counts: Dict[str, Counter] = defaultdict(Counter)
        for sentence in sentences:
            for word, tag in sentence:
                counts[word][tag] += 1
                self.model.classes.add(tag)

        if self._tagdict_built:
            return
        self._tagdict_built = True

        for word, tag_freqs in counts.items():
            tag, mode = max(tag_freqs.items(), key=lambda kv: (kv[1], kv[0]))
            n = sum(tag_freqs.values())
            if n >= self.freq_threshold and mode / n >= self.ambiguity_threshold:
                self.tagdict[word] = tag

    # --- Persistence ---
    def to_dict(self) -> Dict[str, Any]:
        """Returns the JSON-ready model document written by `save`."""
        return {
            "format": MODEL_FORMAT,
            "version": MODEL_VERSION,
            "weights": [[feat, label, weight] for (feat, label), weight in sorted(self.model.weights.items())],
            "tagdict": dict(sorted(self.tagdict.items())),
            "classes": sorted(self.model.classes),
        }

    def save(self, path: PathLike) -> None:
        """
        Writes the weights, tag dictionary and classes to a model file.

        Args:
            path: The destination path of the gzip-compressed model file.

        Raises:
            ModelSerializeError: If the destination cannot be written.
        """
        payload = self.to_dict()
        try:
            with gzip.open(path, "wt", encoding="utf-8") as f:
                json.dump(payload, f, ensure_ascii=False)
        except OSError as e:
            raise ModelSerializeError(f"Could not write model to {path}: {e}") from e

    @classmethod
    def load(cls, path: PathLike, **kwargs: Any) -> "PerceptronTagger":
        """
        Loads a model file written by `save`.

        Args:
            path: The path of the model file.
            **kwargs: Extra keyword arguments for the `PerceptronTagger`
                      constructor (e.g. `seed` for further training).

        Returns:
            A new `PerceptronTagger` that tags exactly like the saved one.

        Raises:
            FileNotFoundError: If no file exists at `path`.
            ModelDeserializeError: If the file is corrupt, truncated or not a
                                   smol model.
        """
        try:
            with gzip.open(path, "rt", encoding="utf-8") as f:
                data = json.load(f)
        except FileNotFoundError:
            raise FileNotFoundError(f"Model file not found at: {path}")
        except (gzip.BadGzipFile, EOFError, zlib.error, ValueError) as e:
            raise ModelDeserializeError(f"Error decoding model from {path}: {e}") from e

        return cls.from_dict(data, source=str(path), **kwargs)

    @classmethod
    def from_dict(cls, data: Any, source: str = "<memory>", **kwargs: Any) -> "PerceptronTagger":
        """Rebuilds a tagger from a model document, validating its structure."""
        if not isinstance(data, dict) or data.get("format") != MODEL_FORMAT:
            raise ModelDeserializeError(f"{source} is not a {MODEL_FORMAT} model.")
        if data.get("version") != MODEL_VERSION:
            raise ModelDeserializeError(
                f"Unsupported model version {data.get('version')!r} in {source}; expected {MODEL_VERSION}."
            )

        raw_weights = data.get("weights")
        tagdict = data.get("tagdict")
        classes = data.get("classes")
        if not isinstance(raw_weights, list) or not isinstance(tagdict, dict) or not isinstance(classes, list):
            raise ModelDeserializeError(f"Model {source} is missing weights, tagdict or classes.")

        weights = {}
        for i, entry in enumerate(raw_weights):
            if (
                not isinstance(entry, list)
                or len(entry) != 3
                or not isinstance(entry[0], str)
                or not isinstance(entry[1], str)
                or isinstance(entry[2], bool)
                or not isinstance(entry[2], (int, float))
            ):
                raise ModelDeserializeError(f"Malformed weight entry at index {i} in {source}.")
            weights[(entry[0], entry[1])] = float(entry[2])

        if not all(isinstance(k, str) and isinstance(v, str) for k, v in tagdict.items()):
            raise ModelDeserializeError(f"Malformed tag dictionary in {source}.")
        if not all(isinstance(c, str) for c in classes):
            raise ModelDeserializeError(f"Malformed class list in {source}.")

        model = AveragedPerceptron(weights, classes)
        # A model without classes was never trained, so its tag dictionary is still open.
        return cls(model, tagdict if classes else None, **kwargs)

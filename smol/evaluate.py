"""Accuracy reporting for a trained tagger against a gold corpus."""
from __future__ import annotations
from typing import Any, Dict, List, Sequence

import pandas as pd

from .tagger import PerceptronTagger
from .types import TaggedSentence

def predictions_frame(tagger: PerceptronTagger, sentences: Sequence[TaggedSentence]) -> pd.DataFrame:
    """
    Tags every gold sentence and collects one row per token.

    Args:
        tagger: A trained tagger.
        sentences: The gold corpus, one sequence of `(word, tag)` pairs per sentence.

    Returns:
        A DataFrame with the columns `sentence`, `index`, `word`, `reference`,
        `predicted` and `correct`.
    """
    rows: List[Dict[str, Any]] = []
    for s_idx, sentence in enumerate(sentences):
        words = [word for word, _ in sentence]
        predicted = tagger.tag_words(words)
        for i, ((word, gold), guess) in enumerate(zip(sentence, predicted)):
            rows.append({
                "sentence": s_idx,
                "index": i,
                "word": word,
                "reference": gold,
                "predicted": guess,
                "correct": gold == guess,
            })
    return pd.DataFrame(rows, columns=["sentence", "index", "word", "reference", "predicted", "correct"])

def compare_tags(tagger: PerceptronTagger, sentences: Sequence[TaggedSentence]) -> Dict[str, Any]:
    """
    Compares the tagger's decisions with the gold tags.

    Returns:
        A dictionary with the overall token `accuracy`, a `per_tag` DataFrame
        (indexed by gold tag, with `count`, `correct` and `accuracy` columns,
        sorted by count) and the `disagreements` as a list of row dictionaries.
    """
    df = predictions_frame(tagger, sentences)
    if df.empty:
        return {"accuracy": 0.0, "per_tag": pd.DataFrame(columns=["count", "correct", "accuracy"]), "disagreements": []}

    per_tag = df.groupby("reference")["correct"].agg(count="size", correct="sum")
    per_tag["accuracy"] = per_tag["correct"] / per_tag["count"]
    per_tag = per_tag.sort_values("count", ascending=False)

    disagreements = df.loc[~df["correct"], ["sentence", "index", "word", "predicted", "reference"]]
    return {
        "accuracy": float(df["correct"].mean()),
        "per_tag": per_tag,
        "disagreements": disagreements.to_dict(orient="records"),
    }

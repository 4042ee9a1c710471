"""Manages the loading and validation of tagger configuration.

This module defines the `TaggerConfig` dataclass, a typed container for the
training and tagging settings shared by the command-line scripts, and the
`load_config` function that reads those settings from a YAML file. Every key is
optional; anything missing falls back to the dataclass defaults.
"""
from __future__ import annotations
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

import yaml

TOKENIZERS = ("whitespace", "regex")

@dataclass
class TaggerConfig:
    """
    A typed configuration object for training and running the tagger.

    Attributes:
        epochs: The number of training passes over the corpus.
        seed: Seed for the generator that shuffles sentences between epochs.
              `None` draws fresh entropy, so runs are not reproducible.
        freq_threshold: Minimum occurrences for a word to enter the tag dictionary.
        ambiguity_threshold: Minimum share of a word's dominant tag for it to
                             enter the tag dictionary.
        tokenizer: The tokenizer used to split raw text, `"whitespace"` or `"regex"`.
        paths: Paths to the model and corpus files, resolved relative to the
               directory of the YAML file they were read from.
    """
    epochs: int = 5
    seed: Optional[int] = None
    freq_threshold: int = 20
    ambiguity_threshold: float = 0.97
    tokenizer: str = "regex"
    paths: dict[str, str] = field(default_factory=dict)

def load_config(path: str = "config.yaml") -> TaggerConfig:
    """
    Loads and validates a YAML configuration file into a `TaggerConfig`.

    Args:
        path: The path to the YAML configuration file.

    Returns:
        A fully populated `TaggerConfig` object.

    Raises:
        FileNotFoundError: If the specified file cannot be found.
        ValueError: If the file is not valid YAML or holds invalid values.
        TypeError: If the root of the YAML file or one of its sections is not
                   a dictionary.
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            y = yaml.safe_load(f)
    except FileNotFoundError:
        raise FileNotFoundError(f"Configuration file not found at: {path}")
    except yaml.YAMLError as e:
        raise ValueError(f"Error parsing YAML file at {path}: {e}")

    if y is None:
        y = {}
    if not isinstance(y, dict):
        raise TypeError(f"Configuration file {path} must be a dictionary.")

    training = y.get("training", {}) or {}
    tagdict = y.get("tagdict", {}) or {}
    paths = y.get("paths", {}) or {}
    for section, value in (("training", training), ("tagdict", tagdict), ("paths", paths)):
        if not isinstance(value, dict):
            raise TypeError(f"Section '{section}' in {path} must be a dictionary.")

    seed = training.get("seed")
    cfg = TaggerConfig(
        epochs=int(training.get("epochs", 5)),
        seed=None if seed is None else int(seed),
        freq_threshold=int(tagdict.get("freq_threshold", 20)),
        ambiguity_threshold=float(tagdict.get("ambiguity_threshold", 0.97)),
        tokenizer=str(y.get("tokenizer", "regex")),
        paths={
            key: str(Path(path).parent / value)
            for key, value in paths.items()
        },
    )

    if cfg.epochs < 1:
        raise ValueError(f"training.epochs must be at least 1 in {path}, got {cfg.epochs}.")
    if not 0.0 < cfg.ambiguity_threshold <= 1.0:
        raise ValueError(f"tagdict.ambiguity_threshold must be in (0, 1] in {path}.")
    if cfg.tokenizer not in TOKENIZERS:
        raise ValueError(f"Unknown tokenizer {cfg.tokenizer!r} in {path}; expected one of {TOKENIZERS}.")

    return cfg

def resolve_model_path(cfg: TaggerConfig, override: Optional[str] = None) -> str:
    """
    Picks the model file path, preferring an explicit override.

    Raises:
        ValueError: If neither `override` nor `paths.model` is set.
    """
    model_path = override or cfg.paths.get("model")
    if not model_path:
        raise ValueError("No model path given; pass --model or set paths.model in the configuration.")
    return model_path

"""Provides utility functions for loading corpora and saving tagged tokens.

Tagged corpora use the common two-column layout: one `word tag` pair per line,
separated by whitespace, with a blank line between sentences. Untagged input
uses one word per line with the same sentence separator. Tagged output is a
JSON document whose "tokens" key holds one object per token.
"""
import json
from pathlib import Path
from typing import Iterable, List, Tuple, Union

from .types import TaggedToken

PathLike = Union[str, Path]

def _read_lines(path: PathLike) -> List[str]:
    try:
        with open(path, "r", encoding="utf-8") as f:
            return f.read().splitlines()
    except FileNotFoundError:
        raise FileNotFoundError(f"Corpus file not found at: {path}")
    except UnicodeDecodeError as e:
        raise ValueError(f"Corpus file {path} is not valid UTF-8: {e}")

def load_tagged_sentences(path: PathLike) -> List[List[Tuple[str, str]]]:
    """
    Loads a two-column tagged corpus.

    Args:
        path: The path to the corpus file.

    Returns:
        A list of sentences, each a list of `(word, tag)` pairs.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If a non-blank line does not hold exactly two columns.
    """
    sentences: List[List[Tuple[str, str]]] = []
    current: List[Tuple[str, str]] = []
    for lineno, line in enumerate(_read_lines(path), start=1):
        parts = line.split()
        if not parts:
            if current:
                sentences.append(current)
                current = []
            continue
        if len(parts) != 2:
            raise ValueError(f"Expected 'word tag' on line {lineno} of {path}, got {line!r}")
        current.append((parts[0], parts[1]))
    if current:
        sentences.append(current)
    return sentences

def load_sentences(path: PathLike) -> List[List[str]]:
    """Loads an untagged corpus with one word per line and blank lines between sentences."""
    sentences: List[List[str]] = []
    current: List[str] = []
    for line in _read_lines(path):
        word = line.strip()
        if not word:
            if current:
                sentences.append(current)
                current = []
            continue
        current.append(word)
    if current:
        sentences.append(current)
    return sentences

def save_tagged_tokens(path: PathLike, tagged: Iterable[TaggedToken]) -> None:
    """
    Saves tagged tokens to a JSON file.

    The root of the JSON document is a dictionary with a single "tokens" key
    holding one `{"term", "offset", "index", "tag"}` object per token.

    Args:
        path: The destination path for the output JSON file.
        tagged: The `(token, tag)` pairs to save.
    """
    token_dicts = [{**token.__dict__, "tag": tag} for token, tag in tagged]
    data = {"tokens": token_dicts}

    with open(path, "w", encoding="utf-8") as f:
        json.dump(data, f, ensure_ascii=False, indent=2)

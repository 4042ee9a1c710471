"""Test configuration helpers for ensuring local imports resolve."""
from __future__ import annotations

import sys
from pathlib import Path
from typing import List, Tuple

import pytest


def _ensure_project_root_on_path() -> None:
    project_root = Path(__file__).resolve().parents[1]
    if str(project_root) not in sys.path:
        sys.path.insert(0, str(project_root))


_ensure_project_root_on_path()


TINY_CORPUS: List[List[Tuple[str, str]]] = [
    [("The", "DET"), ("dog", "NOUN"), ("barks", "VERB"), (".", "PUNCT")],
    [("A", "DET"), ("cat", "NOUN"), ("sleeps", "VERB"), (".", "PUNCT")],
    [("The", "DET"), ("old", "ADJ"), ("dog", "NOUN"), ("sleeps", "VERB"), (".", "PUNCT")],
    [("Dogs", "NOUN"), ("chase", "VERB"), ("the", "DET"), ("cat", "NOUN"), (".", "PUNCT")],
    [("In", "ADP"), ("1990", "NUM"), ("a", "DET"), ("well-known", "ADJ"), ("cat", "NOUN"), ("slept", "VERB"), (".", "PUNCT")],
]


@pytest.fixture
def tiny_corpus() -> List[List[Tuple[str, str]]]:
    return [list(sentence) for sentence in TINY_CORPUS]

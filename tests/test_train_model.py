from pathlib import Path
import sys

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from smol.config import TaggerConfig
from smol.tagger import PerceptronTagger
from scripts.train_model import main, resolve_settings, train_from_corpus


def _write_corpus(path: Path, sentences) -> None:
    blocks = ["\n".join(f"{w} {t}" for w, t in sentence) for sentence in sentences]
    path.write_text("\n\n".join(blocks) + "\n", encoding="utf-8")


def test_resolve_settings_overrides_only_given_values() -> None:
    cfg = resolve_settings(TaggerConfig(epochs=5, seed=1), epochs=9)
    assert cfg.epochs == 9
    assert cfg.seed == 1


def test_train_from_corpus_writes_a_loadable_model(tmp_path: Path, tiny_corpus) -> None:
    corpus = tmp_path / "train.txt"
    model = tmp_path / "tagger.model"
    _write_corpus(corpus, tiny_corpus)

    tagger = train_from_corpus(str(corpus), str(model), TaggerConfig(epochs=3, seed=5), progress=False)

    assert model.exists()
    reloaded = PerceptronTagger.load(model)
    assert reloaded.model.weights == tagger.model.weights
    assert reloaded.tag_words(["The", "dog", "barks", "."]) == tagger.tag_words(["The", "dog", "barks", "."])


def test_train_from_corpus_rejects_empty_corpus(tmp_path: Path) -> None:
    corpus = tmp_path / "empty.txt"
    corpus.write_text("\n\n", encoding="utf-8")

    with pytest.raises(ValueError):
        train_from_corpus(str(corpus), str(tmp_path / "m.model"), TaggerConfig(), progress=False)


def test_main_writes_model_to_configured_path(tmp_path: Path, tiny_corpus, monkeypatch) -> None:
    corpus = tmp_path / "train.txt"
    _write_corpus(corpus, tiny_corpus)
    config = tmp_path / "config.yaml"
    config.write_text("training:\n  epochs: 2\n  seed: 1\npaths:\n  model: models/tagger.model\n", encoding="utf-8")
    monkeypatch.setattr(sys, "argv", ["train_model", "--corpus", str(corpus), "--config", str(config)])

    main()

    model = tmp_path / "models" / "tagger.model"
    assert model.exists()
    assert PerceptronTagger.load(model).classes == {"ADJ", "ADP", "DET", "NOUN", "NUM", "PUNCT", "VERB"}

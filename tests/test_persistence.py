import gzip
import json
from pathlib import Path

import pytest

from smol.errors import EmptyModelError, ModelDeserializeError, ModelSerializeError
from smol.tagger import PerceptronTagger
from smol.types import Token


@pytest.fixture
def trained(tiny_corpus) -> PerceptronTagger:
    tagger = PerceptronTagger(seed=11)
    tagger.train(tiny_corpus, epochs=5, progress=False)
    return tagger


SENTENCES = [
    ["The", "dog", "barks", "."],
    ["A", "well-known", "cat", "sleeps", "in", "1990", "."],
    ["Unseen", "words", "everywhere"],
    ["x"],
]


def test_round_trip_reproduces_tagging(trained, tmp_path: Path):
    path = tmp_path / "tagger.model"
    trained.save(path)

    reloaded = PerceptronTagger.load(path)

    assert reloaded.model.weights == trained.model.weights
    assert reloaded.tagdict == trained.tagdict
    assert reloaded.classes == trained.classes
    for words in SENTENCES:
        tokens = Token.from_words(words)
        assert reloaded.tag(tokens) == trained.tag(tokens)


def test_saved_model_accepts_string_paths(trained, tmp_path: Path):
    path = str(tmp_path / "tagger.model")
    trained.save(path)
    assert PerceptronTagger.load(path).classes == trained.classes


def test_saved_model_is_a_compressed_document(trained, tmp_path: Path):
    path = tmp_path / "tagger.model"
    trained.save(path)

    with gzip.open(path, "rt", encoding="utf-8") as f:
        data = json.load(f)

    assert data["format"] == "smol-perceptron"
    assert data["version"] == 1
    assert data["classes"] == sorted(trained.classes)


def test_load_missing_file(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        PerceptronTagger.load(tmp_path / "missing.model")


def test_load_rejects_garbage(tmp_path: Path):
    path = tmp_path / "garbage.model"
    path.write_bytes(b"definitely not a model")

    with pytest.raises(ModelDeserializeError):
        PerceptronTagger.load(path)


def test_load_rejects_truncated_file(trained, tmp_path: Path):
    path = tmp_path / "tagger.model"
    trained.save(path)
    blob = path.read_bytes()
    path.write_bytes(blob[: len(blob) // 2])

    with pytest.raises(ModelDeserializeError):
        PerceptronTagger.load(path)


@pytest.mark.parametrize(
    "document",
    [
        [],
        {"format": "something-else", "version": 1},
        {"format": "smol-perceptron", "version": 99, "weights": [], "tagdict": {}, "classes": []},
        {"format": "smol-perceptron", "version": 1, "weights": [["f", "A"]], "tagdict": {}, "classes": ["A"]},
        {"format": "smol-perceptron", "version": 1, "weights": [["f", "A", "1.0"]], "tagdict": {}, "classes": ["A"]},
        {"format": "smol-perceptron", "version": 1, "weights": [], "tagdict": {"a": 1}, "classes": ["A"]},
        {"format": "smol-perceptron", "version": 1, "weights": [], "tagdict": {}, "classes": "A"},
    ],
)
def test_load_rejects_incompatible_documents(tmp_path: Path, document):
    path = tmp_path / "bad.model"
    with gzip.open(path, "wt", encoding="utf-8") as f:
        json.dump(document, f)

    with pytest.raises(ModelDeserializeError):
        PerceptronTagger.load(path)


def test_deserialize_error_is_a_value_error(tmp_path: Path):
    path = tmp_path / "garbage.model"
    path.write_bytes(b"\x1f\x8b broken")
    with pytest.raises(ValueError):
        PerceptronTagger.load(path)


def test_save_to_unwritable_destination(trained, tmp_path: Path):
    with pytest.raises(ModelSerializeError) as excinfo:
        trained.save(tmp_path / "no" / "such" / "dir" / "tagger.model")
    assert isinstance(excinfo.value, OSError)


def test_loaded_empty_model_refuses_to_tag(tmp_path: Path):
    path = tmp_path / "empty.model"
    PerceptronTagger().save(path)

    reloaded = PerceptronTagger.load(path)

    with pytest.raises(EmptyModelError):
        reloaded.tag(Token.from_words(["hello"]))


def test_reloaded_model_keeps_its_tag_dictionary_closed(tmp_path: Path):
    tagger = PerceptronTagger(seed=0)
    tagger.train([[("rare", "ADJ")]], epochs=1, progress=False)
    path = tmp_path / "tagger.model"
    tagger.save(path)

    reloaded = PerceptronTagger.load(path, seed=0)
    reloaded.train([[("a", "DET")]] * 20, epochs=1, progress=False)

    assert reloaded.tagdict == {}


def test_reloaded_untrained_model_still_builds_its_tag_dictionary(tmp_path: Path):
    path = tmp_path / "empty.model"
    PerceptronTagger().save(path)

    reloaded = PerceptronTagger.load(path, seed=0)
    reloaded.train([[("a", "DET")]] * 20, epochs=1, progress=False)

    assert reloaded.tagdict == {"a": "DET"}

from smol.evaluate import compare_tags, predictions_frame
from smol.perceptron import AveragedPerceptron
from smol.tagger import PerceptronTagger


def _dictionary_tagger() -> PerceptronTagger:
    model = AveragedPerceptron({}, {"DET", "NOUN"})
    return PerceptronTagger(model, {"the": "DET", "dog": "NOUN"})


def test_compare_tags_reports_accuracy_and_disagreements():
    reference = [[("the", "DET"), ("dog", "VERB")], [("the", "DET")]]

    report = compare_tags(_dictionary_tagger(), reference)

    assert report["accuracy"] == 2 / 3
    assert report["per_tag"].loc["DET", "accuracy"] == 1.0
    assert report["per_tag"].loc["VERB", "accuracy"] == 0.0
    assert report["per_tag"].index[0] == "DET"
    assert report["disagreements"] == [
        {"sentence": 0, "index": 1, "word": "dog", "predicted": "NOUN", "reference": "VERB"}
    ]


def test_predictions_frame_has_one_row_per_token():
    df = predictions_frame(_dictionary_tagger(), [[("the", "DET"), ("dog", "NOUN")]])

    assert list(df.columns) == ["sentence", "index", "word", "reference", "predicted", "correct"]
    assert df["correct"].all()


def test_compare_tags_on_empty_reference():
    report = compare_tags(_dictionary_tagger(), [])
    assert report["accuracy"] == 0.0
    assert report["per_tag"].empty
    assert report["disagreements"] == []

"""smol: a small natural-language toolkit built around a perceptron POS tagger."""
from .errors import EmptyModelError, ModelDeserializeError, ModelSerializeError, SmolError
from .metrics import edit_distance
from .perceptron import AveragedPerceptron
from .pipeline import Pipeline, Tagger, Tokenizer
from .tagger import PerceptronTagger
from .tokenize import RegexWordPunctTokenizer, WhitespaceTokenizer
from .types import Token

__all__ = [
    "AveragedPerceptron",
    "EmptyModelError",
    "ModelDeserializeError",
    "ModelSerializeError",
    "PerceptronTagger",
    "Pipeline",
    "RegexWordPunctTokenizer",
    "SmolError",
    "Tagger",
    "Token",
    "Tokenizer",
    "WhitespaceTokenizer",
    "edit_distance",
]

import argparse
import sys
from pathlib import Path
from typing import Optional

# Add project root to path
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from smol.config import TaggerConfig, load_config, resolve_model_path
from smol.errors import SmolError
from smol.io_utils import load_tagged_sentences
from smol.tagger import PerceptronTagger


def resolve_settings(cfg: TaggerConfig, epochs: Optional[int] = None, seed: Optional[int] = None) -> TaggerConfig:
    """Applies command-line overrides on top of the loaded configuration."""
    if epochs is not None:
        cfg.epochs = epochs
    if seed is not None:
        cfg.seed = seed
    return cfg


def train_from_corpus(corpus_path: str, model_path: str, cfg: TaggerConfig, progress: bool = True) -> PerceptronTagger:
    """
    Trains a tagger on a two-column corpus file and saves it.

    Args:
        corpus_path: Path to the tagged training corpus.
        model_path: Output path for the trained model file.
        cfg: The settings controlling epochs, seeding and the tag dictionary.
        progress: Show progress bars and per-epoch accuracy.

    Returns:
        The trained `PerceptronTagger`.

    Raises:
        ValueError: If the corpus holds no sentences.
    """
    sentences = load_tagged_sentences(corpus_path)
    if not sentences:
        raise ValueError(f"No tagged sentences found in {corpus_path}.")
    print(f"Loaded {len(sentences)} sentences ({sum(len(s) for s in sentences)} tokens) from {corpus_path}.")

    tagger = PerceptronTagger(
        seed=cfg.seed,
        freq_threshold=cfg.freq_threshold,
        ambiguity_threshold=cfg.ambiguity_threshold,
    )
    tagger.train(sentences, epochs=cfg.epochs, progress=progress)
    print(
        f"Learned {len(tagger.model.weights)} weights over {len(tagger.classes)} tags; "
        f"{len(tagger.tagdict)} words in the tag dictionary."
    )

    Path(model_path).parent.mkdir(parents=True, exist_ok=True)
    tagger.save(model_path)
    print(f"Successfully saved model to {model_path}")
    return tagger


def main():
    """
    Main entry point for the command-line training script.

    Loads the configuration (if given), applies the command-line overrides,
    trains an averaged perceptron tagger on the corpus and writes the model.
    """
    parser = argparse.ArgumentParser(
        description="Train an averaged perceptron part-of-speech tagger.",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter
    )
    parser.add_argument("--corpus", type=str, required=True, help="Path to the two-column tagged training corpus.")
    parser.add_argument("--model", type=str, default=None, help="Output path for the trained model file (defaults to paths.model in the config).")
    parser.add_argument("--config", default=None, help="Optional path to a configuration YAML file.")
    parser.add_argument("--epochs", type=int, default=None, help="Number of training epochs (overrides the config).")
    parser.add_argument("--seed", type=int, default=None, help="Seed for the epoch shuffle (overrides the config).")
    args = parser.parse_args()

    try:
        cfg = load_config(args.config) if args.config else TaggerConfig()
        cfg = resolve_settings(cfg, epochs=args.epochs, seed=args.seed)
        train_from_corpus(args.corpus, resolve_model_path(cfg, args.model), cfg)
    except (FileNotFoundError, ValueError, TypeError, SmolError) as e:
        print(f"\n[ERROR] {e}", file=sys.stderr)
        sys.exit(1)

if __name__ == "__main__":
    main()

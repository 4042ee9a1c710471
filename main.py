import argparse
import sys
from pathlib import Path

# Add project root to path for robust execution
project_root = Path(__file__).parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from smol.config import TOKENIZERS, TaggerConfig, load_config, resolve_model_path
from smol.errors import SmolError
from smol.io_utils import save_tagged_tokens
from smol.pipeline import Pipeline
from smol.tagger import PerceptronTagger
from smol.tokenize import RegexWordPunctTokenizer, WhitespaceTokenizer

def build_pipeline(tagger: PerceptronTagger, tokenizer: str) -> Pipeline:
    """Pairs a tagger with the tokenizer named in the configuration."""
    if tokenizer == "whitespace":
        return Pipeline(WhitespaceTokenizer(), tagger)
    return Pipeline(RegexWordPunctTokenizer(), tagger)

def main():
    """
    Main command-line interface for tagging raw text.

    Every non-blank line of the input file is treated as one sentence. The
    line is tokenized, tagged with the trained model, and printed as
    `word/TAG` pairs. With `--output`, the tagged tokens of all lines are also
    written to a JSON file.
    """
    parser = argparse.ArgumentParser(
        description="Tag raw text with a trained perceptron part-of-speech tagger.",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter
    )
    parser.add_argument("--model", default=None, help="Path to the trained model file (defaults to paths.model in the config).")
    parser.add_argument("--input", required=True, help="Path to a UTF-8 text file, one sentence per line.")
    parser.add_argument("--output", help="Optional: Path to write the tagged tokens as JSON.")
    parser.add_argument("--config", default=None, help="Optional path to a configuration YAML file.")
    parser.add_argument("--tokenizer", choices=TOKENIZERS, default=None, help="Tokenizer to split the text with (overrides the config).")
    args = parser.parse_args()

    try:
        cfg = load_config(args.config) if args.config else TaggerConfig()
        tagger = PerceptronTagger.load(resolve_model_path(cfg, args.model))
        pipeline = build_pipeline(tagger, args.tokenizer or cfg.tokenizer)

        with open(args.input, "r", encoding="utf-8") as f:
            lines = [line for line in f.read().splitlines() if line.strip()]

        tagged_all = []
        for line in lines:
            tagged = pipeline.pos(line)
            print(" ".join(f"{token.term}/{tag}" for token, tag in tagged))
            tagged_all.extend(tagged)

        if args.output:
            save_tagged_tokens(args.output, tagged_all)
            print(f"\nSaved {len(tagged_all)} tagged tokens to {args.output}")

    except (FileNotFoundError, ValueError, TypeError, SmolError) as e:
        print(f"\n[ERROR] {e}", file=sys.stderr)
        sys.exit(1)

if __name__ == "__main__":
    main()

"""Command-line script for evaluating a trained tagger against a gold corpus.

The script tags every sentence of a two-column reference corpus with the model
and reports the overall token accuracy together with a per-tag accuracy table.
It can also write every disagreement to a CSV file for error analysis.
"""
import argparse
import csv
import sys
from pathlib import Path

# Add project root to path to allow for package imports
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from smol.errors import SmolError
from smol.evaluate import compare_tags
from smol.io_utils import load_tagged_sentences
from smol.tagger import PerceptronTagger

def main():
    """
    Main entry point for the command-line model evaluation script.

    Loads the model and the reference corpus, prints the token accuracy and
    the per-tag table, and optionally saves the disagreements as CSV.
    """
    parser = argparse.ArgumentParser(
        description="Evaluate part-of-speech tagging accuracy against a reference corpus.",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter
    )
    parser.add_argument("--model", required=True, help="Path to the trained model file.")
    parser.add_argument("--reference", required=True, help="Path to the two-column gold corpus.")
    parser.add_argument("--errors-out", help="Optional: Path to write a CSV of every disagreement.")
    args = parser.parse_args()

    try:
        print("Loading files...")
        tagger = PerceptronTagger.load(args.model)
        reference = load_tagged_sentences(args.reference)

        report = compare_tags(tagger, reference)
        print("\n--- Tagging Accuracy (vs. Reference) ---")
        print(f"Token accuracy: {report['accuracy']:.2%}")
        if not report["per_tag"].empty:
            print(report["per_tag"].to_string(float_format=lambda x: f"{x:.3f}"))

        if args.errors_out and report["disagreements"]:
            Path(args.errors_out).parent.mkdir(parents=True, exist_ok=True)
            print(f"\nWriting {len(report['disagreements'])} disagreements to {args.errors_out}...")
            with open(args.errors_out, "w", newline="", encoding="utf-8") as f:
                writer = csv.DictWriter(f, fieldnames=["sentence", "index", "word", "predicted", "reference"])
                writer.writeheader()
                writer.writerows(report["disagreements"])

    except (FileNotFoundError, ValueError, SmolError) as e:
        print(f"\nError: {e}", file=sys.stderr)
        sys.exit(1)

if __name__ == "__main__":
    main()

"""Command line entry point.

    python -m namevibe train
    python -m namevibe predict <name>

`train` rebuilds both gender models from the Faker name corpus and overwrites
the model files. `predict` loads both models and prints the language
distribution of the name under each of them.
"""

from __future__ import annotations
import argparse
import sys
from typing import List, Sequence
from namecorpus.examples import GENDERS
from .config import VibeSettings
from .console import COLOR_CYAN, COLOR_RED, COLOR_RESET
from .errors import CorruptModelError, ModelNotFoundError
from .normalize import normalize_name
from .store import VibeModel, load_models
from .training import build_corpus, train_and_save


USAGE = "Usage: namevibe train | namevibe predict <name>"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="namevibe",
        description="Guess which languages a first name sounds like.",
    )

    subparsers = parser.add_subparsers(dest="command")

    subparsers.add_parser(
        "train",
        help="Train the male and female models and overwrite the model files.",
    )

    predict = subparsers.add_parser(
        "predict",
        help="Print the language distribution of a name under both models.",
    )

    predict.add_argument(
        "name",
        nargs="*",
        help="Name to classify; several words are joined with spaces.",
    )

    return parser


def format_prediction(model: VibeModel, name: str) -> List[str]:
    normalized = normalize_name(name)
    lines = [f'Prediction for "{name}" ({model.gender}, normalized "{normalized}"):']

    for language, prob in model.rank(name):
        lines.append(f"{language}: {prob:.3f}")

    return lines


def run_train(settings: VibeSettings) -> int:
    print(f"{COLOR_CYAN}Collecting names from Faker locales...{COLOR_RESET}")

    corpus = build_corpus(settings.corpus)

    train_and_save(
        corpus,
        settings.models_dir,
        ngram_size=settings.ngram_size,
        alpha=settings.alpha,
    )

    return 0


def run_predict(name: str, settings: VibeSettings) -> int:
    try:
        models = load_models(settings.models_dir)

    except (ModelNotFoundError, CorruptModelError) as exc:
        print(f"{COLOR_RED}{exc}{COLOR_RESET}", file=sys.stderr)

        return 1

    for i, gender in enumerate(GENDERS):
        if i:
            print()

        print(f"{gender.capitalize()} model:")

        for line in format_prediction(models[gender], name):
            print(line)

    return 0


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        print(USAGE)

        return 0

    settings = VibeSettings.from_env()

    if args.command == "train":
        return run_train(settings)

    name = " ".join(args.name).strip()

    if not name:
        print(f"{COLOR_RED}Please provide a name{COLOR_RESET}", file=sys.stderr)

        return 1

    return run_predict(name, settings)

"""Evaluate a name-vibe model on a held-out split of the name corpus.

Usage (from the project root):

    python -m namevibe.evaluate --gender female \
        --output artifacts/vibe_eval_female.json

The corpus is split once at random (`--test-size`, `--seed`); a model is
trained on the remaining names and scored on the held-out ones. The report
holds accuracy, macro F1, top-3 accuracy and per-language
precision/recall/F1/support.
"""

from __future__ import annotations
import argparse
import json
from pathlib import Path
from typing import Dict, List, Sequence, Tuple
import numpy as np
from sklearn.metrics import accuracy_score, f1_score, precision_recall_fscore_support
from tqdm.auto import tqdm
from namecorpus.examples import GENDERS, Gender, NameExample
from namecorpus.faker_names import collect_names
from namecorpus.table import load_table
from .config import VibeSettings
from .console import COLOR_CYAN, COLOR_GREEN, COLOR_RESET
from .training import train_model


TOP_K = 3


def split_examples(
    examples: Sequence[NameExample], test_size: float, seed: int
) -> Tuple[List[NameExample], List[NameExample]]:
    """Shuffle once and cut off `test_size` of the examples for evaluation."""

    n = len(examples)
    rng = np.random.default_rng(seed)
    perm = rng.permutation(n)
    eval_n = max(1, int(round(n * float(test_size))))

    eval_idx = perm[:eval_n]
    train_idx = perm[eval_n:]

    return [examples[i] for i in train_idx], [examples[i] for i in eval_idx]


def evaluate_split(
    train_examples: Sequence[NameExample],
    eval_examples: Sequence[NameExample],
    gender: Gender,
    ngram_size: int,
    alpha: float,
    top_k: int = TOP_K,
) -> Dict[str, object]:
    model = train_model(train_examples, gender, ngram_size=ngram_size, alpha=alpha)

    y_true: List[str] = []
    y_pred: List[str] = []
    top_hits = 0

    for example in tqdm(
        eval_examples,
        desc=f"{COLOR_CYAN}Evaluating{COLOR_RESET}",
        unit="name",
    ):
        ranked = model.rank(example.text)
        top_languages = [language for language, _ in ranked[:top_k]]

        y_true.append(example.language)
        y_pred.append(top_languages[0])

        if example.language in top_languages:
            top_hits += 1

    labels = list(model.nb.classes)

    precision, recall, f1, support = precision_recall_fscore_support(
        y_true, y_pred, labels=labels, zero_division=0
    )

    per_language: Dict[str, Dict[str, object]] = {}

    for i, language in enumerate(labels):
        per_language[language] = {
            "precision": float(precision[i]),
            "recall": float(recall[i]),
            "f1": float(f1[i]),
            "support": int(support[i]),
        }

    return {
        "accuracy": float(accuracy_score(y_true, y_pred)),
        "macro_f1": float(
            f1_score(y_true, y_pred, labels=labels, average="macro", zero_division=0)
        ),
        f"top{top_k}_accuracy": top_hits / len(eval_examples),
        "per_language": per_language,
    }


def main() -> None:
    parser = argparse.ArgumentParser(
        description="Evaluate a name-vibe model on a held-out split of the name corpus."
    )

    parser.add_argument(
        "--gender",
        type=str,
        choices=list(GENDERS),
        default="male",
        help="Which gender model to evaluate.",
    )

    parser.add_argument(
        "--corpus-path",
        type=str,
        default=None,
        help="Optional corpus table (CSV/TSV/JSON/JSONL/Parquet); defaults to the Faker corpus.",
    )

    parser.add_argument(
        "--test-size",
        type=float,
        default=0.2,
        help="Fraction of names held out for evaluation.",
    )

    parser.add_argument(
        "--seed",
        type=int,
        default=42,
        help="Random seed for the evaluation split.",
    )

    parser.add_argument(
        "--output",
        type=str,
        default=None,
        help="Where to write the metrics JSON (default: artifacts/vibe_eval_<gender>.json).",
    )

    args = parser.parse_args()

    if not (0.0 < args.test_size < 1.0):
        raise SystemExit("test-size must be between 0 and 1")

    settings = VibeSettings.from_env()
    gender: Gender = args.gender

    if args.corpus_path:
        corpus_path = Path(args.corpus_path)

        if not corpus_path.is_file():
            raise SystemExit(f"Corpus file not found: {corpus_path}")

        examples = [e for e in load_table(str(corpus_path)) if e.gender == gender]

    else:
        examples = collect_names(gender, settings.corpus)

    if len(examples) < 2:
        raise SystemExit(f"Not enough {gender} names to evaluate ({len(examples)}).")

    train_examples, eval_examples = split_examples(examples, args.test_size, args.seed)

    if not train_examples:
        raise SystemExit("test-size leaves no names for training.")

    metrics = evaluate_split(
        train_examples,
        eval_examples,
        gender,
        ngram_size=settings.ngram_size,
        alpha=settings.alpha,
    )

    output_path = Path(args.output or f"artifacts/vibe_eval_{gender}.json")
    output_path.parent.mkdir(parents=True, exist_ok=True)

    payload: Dict[str, object] = {
        "model": {
            "gender": gender,
            "ngram_size": int(settings.ngram_size),
            "alpha": float(settings.alpha),
        },
        "split": {
            "seed": int(args.seed),
            "test_size": float(args.test_size),
            "num_rows": len(examples),
            "num_eval": len(eval_examples),
        },
        "metrics": metrics,
    }

    output_path.write_text(json.dumps(payload, indent=2), encoding="utf-8")

    print(f"Evaluated {len(eval_examples)}/{len(examples)} {gender} names.")
    print(
        f"{COLOR_GREEN}accuracy={metrics['accuracy']:.3f}{COLOR_RESET} "
        f"macro_f1={metrics['macro_f1']:.3f} "
        f"top{TOP_K}_accuracy={metrics[f'top{TOP_K}_accuracy']:.3f}"
    )
    print(f"Wrote metrics to {output_path}.")


if __name__ == "__main__":
    main()

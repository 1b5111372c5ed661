"""Write the Faker name corpus to a table file.

Usage (from the project root):

    python -m namecorpus.export --output data/names.jsonl

The output has one row per name with `name`, `language` and `gender` columns
and can be fed back with `python -m namevibe.evaluate --corpus-path ...`.
"""

from __future__ import annotations
import argparse
from pathlib import Path
from typing import List
from namevibe.console import COLOR_CYAN, COLOR_GREEN, COLOR_RESET
from .config import CorpusConfig
from .examples import GENDERS, NameExample
from .faker_names import available_languages, collect_names
from .table import save_table


def main() -> None:
    parser = argparse.ArgumentParser(
        description="Export the Faker first-name corpus to CSV/TSV/JSON/JSONL/Parquet."
    )

    parser.add_argument(
        "--output",
        type=str,
        default="data/names.jsonl",
        help="Path to write the corpus table; the extension picks the format.",
    )

    parser.add_argument(
        "--min-names-per-gender",
        type=int,
        default=CorpusConfig().min_names_per_gender,
        help="Skip locales with fewer male or female names than this.",
    )

    args = parser.parse_args()

    if args.min_names_per_gender < 1:
        raise SystemExit("min-names-per-gender must be positive.")

    config = CorpusConfig(min_names_per_gender=args.min_names_per_gender)
    languages = available_languages(config)

    if not languages:
        raise SystemExit("No Faker locale passes the corpus policy.")

    print(f"{COLOR_CYAN}Collecting names from {len(languages)} locales...{COLOR_RESET}")

    examples: List[NameExample] = []

    for gender in GENDERS:
        names = collect_names(gender, config)
        examples.extend(names)

        print(f"  {gender}: {len(names)} names")

    output_path = Path(args.output)
    save_table(examples, output_path)

    print(f"{COLOR_GREEN}Done.{COLOR_RESET} Wrote {len(examples)} names to {output_path}.")


if __name__ == "__main__":
    main()

"""Load and save name corpora as tables with pandas.

A corpus table has one row per name with the columns `name`, `language`
and `gender`. The format is picked from the file extension.
"""

from __future__ import annotations
from pathlib import Path
from typing import Iterable, List
import pandas as pd
from namevibe.console import COLOR_RESET, COLOR_YELLOW
from .examples import GENDERS, NameExample


COLUMNS: List[str] = ["name", "language", "gender"]


def read_frame(path_str: str) -> pd.DataFrame:
    """Read a corpus table based on file extension.

    The path may point to a local file or any URI pandas/fsspec understands.
    """

    suffix = Path(path_str).suffix.lower()

    if suffix in {".csv", ".tsv"}:
        sep = "," if suffix == ".csv" else "\t"

        return pd.read_csv(path_str, sep=sep, dtype=str, keep_default_na=False)

    if suffix in {".json", ".jsonl"}:
        # JSON lines for .jsonl, a normal JSON array for .json.
        lines = suffix == ".jsonl"

        return pd.read_json(path_str, lines=lines, dtype=False)

    if suffix in {".parquet"}:
        return pd.read_parquet(path_str, columns=COLUMNS)

    raise SystemExit(
        f"Unsupported file extension '{suffix}'. Use CSV, TSV, JSON, JSONL, or Parquet."
    )


def examples_from_frame(df: pd.DataFrame) -> List[NameExample]:
    missing = [col for col in COLUMNS if col not in df.columns]

    if missing:
        raise ValueError(f"Corpus table is missing columns {missing}.")

    examples: List[NameExample] = []
    skipped = 0

    for name, language, gender in df[COLUMNS].itertuples(index=False, name=None):
        if pd.isna(name) or pd.isna(language) or gender not in GENDERS:
            skipped += 1

            continue

        name = str(name).strip()
        language = str(language).strip()

        if not name or not language:
            skipped += 1

            continue

        examples.append(NameExample(text=name, language=language, gender=gender))

    if skipped:
        print(f"{COLOR_YELLOW}[WARN]{COLOR_RESET} Skipped {skipped} invalid corpus rows.")

    return examples


def load_table(path_str: str) -> List[NameExample]:
    """Load every valid `NameExample` from a corpus table."""

    return examples_from_frame(read_frame(path_str))


def save_table(examples: Iterable[NameExample], path: Path) -> None:
    """Write examples to `path`; the extension picks the format."""

    df = pd.DataFrame(
        [(e.text, e.language, e.gender) for e in examples], columns=COLUMNS
    )

    suffix = path.suffix.lower()
    path.parent.mkdir(parents=True, exist_ok=True)

    if suffix in {".csv", ".tsv"}:
        df.to_csv(path, sep="," if suffix == ".csv" else "\t", index=False)

    elif suffix == ".jsonl":
        df.to_json(path, orient="records", lines=True, force_ascii=False)

    elif suffix == ".json":
        df.to_json(path, orient="records", force_ascii=False)

    elif suffix == ".parquet":
        df.to_parquet(path, index=False)

    else:
        raise SystemExit(
            f"Unsupported file extension '{suffix}'. Use CSV, TSV, JSON, JSONL, or Parquet."
        )

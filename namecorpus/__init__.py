"""Name corpus for training the name-vibe models.

This package builds `NameExample` lists per gender, either from the first-name
lists shipped with Faker's locale providers or from a local table file
(CSV/TSV/JSON/JSONL/Parquet) with `name`, `language` and `gender` columns.
Which locales take part is decided by `CorpusConfig`.
"""

from .config import DEFAULT_EXCLUDED_LOCALES, CorpusConfig
from .examples import GENDERS, Gender, NameExample
from .faker_names import available_languages, collect_names

__all__ = [
    "DEFAULT_EXCLUDED_LOCALES",
    "CorpusConfig",
    "GENDERS",
    "Gender",
    "NameExample",
    "available_languages",
    "collect_names",
]

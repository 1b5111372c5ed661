"""First-name lists per locale and gender, read from Faker's person providers.

The lists are read straight from the provider classes rather than sampled
through `Faker().first_name_male()`, so the corpus is the same on every run.
Weighted providers (mappings of name -> frequency) contribute their keys in
declaration order.
"""

from __future__ import annotations
import importlib
from functools import lru_cache
from typing import Dict, List, Mapping, Tuple
from faker.config import AVAILABLE_LOCALES
from .config import CorpusConfig
from .examples import Gender, NameExample


def _as_name_list(names: object) -> Tuple[str, ...]:
    if isinstance(names, Mapping):
        return tuple(str(name) for name in names.keys())

    if isinstance(names, (list, tuple)):
        return tuple(str(name) for name in names)

    return ()


@lru_cache(maxsize=None)
def locale_first_names(locale: str) -> Dict[str, Tuple[str, ...]]:
    """Return `{"male": (...), "female": (...)}` for a Faker locale.

    Locales without a person provider yield empty lists.
    """

    try:
        module = importlib.import_module(f"faker.providers.person.{locale}")

    except ImportError:
        return {"male": (), "female": ()}

    provider = getattr(module, "Provider", None)

    return {
        "male": _as_name_list(getattr(provider, "first_names_male", ())),
        "female": _as_name_list(getattr(provider, "first_names_female", ())),
    }


def available_languages(config: CorpusConfig | None = None) -> List[str]:
    """Locales that pass the corpus policy, in sorted order."""

    config = config or CorpusConfig()
    selected: List[str] = []

    for locale in sorted(AVAILABLE_LOCALES):
        if not config.allows(locale):
            continue

        names = locale_first_names(locale)

        if all(len(names[g]) >= config.min_names_per_gender for g in ("male", "female")):
            selected.append(locale)

    return selected


def collect_names(gender: Gender, config: CorpusConfig | None = None) -> List[NameExample]:
    """Raw name examples of one gender across every selected locale."""

    config = config or CorpusConfig()
    examples: List[NameExample] = []

    for locale in available_languages(config):
        for raw in locale_first_names(locale)[gender]:
            examples.append(NameExample(text=raw, language=locale, gender=gender))

    return examples

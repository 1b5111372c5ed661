"""Name normalization: transliteration, diacritic stripping and case folding.

`normalize_name` maps a display name to the canonical form the n-gram
features are computed on:

1. Cyrillic letters are transliterated with the fixed `CYRILLIC_TO_LATIN`
   table (Russian, Ukrainian, Belarusian, Bulgarian, Serbian, Macedonian).
2. `unidecode` strips diacritics from Latin letters and romanizes whatever
   non-ASCII text is left (Greek, Georgian, Arabic, ...).
3. The result is lowercased.
4. Every character outside `a-z` is dropped, word separators included, so
   the output never contains the n-gram boundary marker `_`.

The function is pure and never raises.
"""

from __future__ import annotations
import re
from typing import Dict
from unidecode import unidecode


CYRILLIC_TO_LATIN: Dict[str, str] = {
    "а": "a",
    "б": "b",
    "в": "v",
    "г": "g",
    "ґ": "g",
    "д": "d",
    "ђ": "dj",
    "ѓ": "gj",
    "е": "e",
    "ё": "e",
    "є": "ye",
    "ж": "zh",
    "з": "z",
    "ѕ": "dz",
    "и": "i",
    "і": "i",
    "ї": "yi",
    "й": "y",
    "ј": "j",
    "к": "k",
    "л": "l",
    "љ": "lj",
    "м": "m",
    "н": "n",
    "њ": "nj",
    "о": "o",
    "п": "p",
    "р": "r",
    "с": "s",
    "т": "t",
    "ћ": "c",
    "ќ": "kj",
    "у": "u",
    "ў": "u",
    "ф": "f",
    "х": "kh",
    "ц": "ts",
    "ч": "ch",
    "џ": "dz",
    "ш": "sh",
    "щ": "shch",
    "ъ": "",
    "ы": "y",
    "ь": "",
    "э": "e",
    "ю": "yu",
    "я": "ya",
}


def _build_translation_table(mapping: Dict[str, str]) -> Dict[int, str]:
    table: Dict[int, str] = {}

    for lower, latin in mapping.items():
        table[ord(lower)] = latin
        table[ord(lower.upper())] = latin.capitalize()

    return table


_CYRILLIC_TABLE = _build_translation_table(CYRILLIC_TO_LATIN)

_NON_LETTER_RE = re.compile(r"[^a-z]")


def transliterate(raw: str) -> str:
    """Replace Cyrillic letters with their Latin spelling; keep everything else."""

    return raw.translate(_CYRILLIC_TABLE)


def strip_diacritics(text: str) -> str:
    return unidecode(text)


def normalize_name(raw: str) -> str:
    """Return the canonical lowercase Latin form of `raw` (possibly empty)."""

    if not raw:
        return ""

    text = strip_diacritics(transliterate(raw)).lower()

    return _NON_LETTER_RE.sub("", text)

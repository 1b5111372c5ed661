"""Character n-gram extraction over boundary-marked names."""

from __future__ import annotations
from typing import List
from .errors import ContractError


BOUNDARY = "_"

DEFAULT_NGRAM_SIZE = 3


def ngrams(text: str, n: int = DEFAULT_NGRAM_SIZE) -> List[str]:
    """Return every length-`n` window of `text` wrapped in boundary markers.

    Windows are produced left to right with stride 1 and repeated n-grams are
    kept, so the result can be counted directly.
    """

    if n < 1:
        raise ContractError(f"n-gram size must be positive, got {n}.")

    marked = f"{BOUNDARY}{text}{BOUNDARY}"

    return [marked[i : i + n] for i in range(len(marked) - n + 1)]

"""Character n-gram vocabulary and count vectorizer."""

from __future__ import annotations
from collections import Counter
from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping
import numpy as np
from scipy import sparse
from .errors import ContractError
from .ngrams import DEFAULT_NGRAM_SIZE, ngrams
from .schema import VectorizerDocument, validate_document


class NgramVectorizer:
    """Maps names to n-gram count vectors over a vocabulary fit on a corpus.

    `fit` assigns indices `0..V-1` to the distinct n-grams of the corpus in
    sorted order, so the same corpus always yields the same vocabulary.
    `transform` ignores n-grams that are not in the vocabulary.
    """

    def __init__(self, n: int = DEFAULT_NGRAM_SIZE) -> None:
        if n < 1:
            raise ContractError(f"n-gram size must be positive, got {n}.")

        self.n = n
        self._vocab: Dict[str, int] = {}

    @property
    def vocabulary(self) -> Mapping[str, int]:
        return MappingProxyType(self._vocab)

    @property
    def vocab_size(self) -> int:
        return len(self._vocab)

    def fit(self, names: Iterable[str]) -> "NgramVectorizer":
        grams = set()

        for name in names:
            grams.update(ngrams(name, self.n))

        # Replaces any previous vocabulary.
        self._vocab = {gram: index for index, gram in enumerate(sorted(grams))}

        return self

    def _indices(self, name: str) -> List[int]:
        indices: List[int] = []

        for gram in ngrams(name, self.n):
            index = self._vocab.get(gram)

            if index is not None:
                indices.append(index)

        return indices

    def transform(self, name: str) -> np.ndarray:
        """Return the length-V count vector of `name`."""

        vec = np.zeros(self.vocab_size, dtype=np.int64)

        for index in self._indices(name):
            vec[index] += 1

        return vec

    def transform_many(self, names: Iterable[str]) -> sparse.csr_matrix:
        """Vectorize a batch of names into a sparse `(N, V)` count matrix.

        Row `i` equals `transform(names[i])`.
        """

        indptr: List[int] = [0]
        indices: List[int] = []
        data: List[int] = []

        for name in names:
            counts = Counter(self._indices(name))

            for index in sorted(counts):
                indices.append(index)
                data.append(counts[index])

            indptr.append(len(indices))

        return sparse.csr_matrix(
            (
                np.asarray(data, dtype=np.int64),
                np.asarray(indices, dtype=np.int64),
                np.asarray(indptr, dtype=np.int64),
            ),
            shape=(len(indptr) - 1, self.vocab_size),
        )

    def to_dict(self) -> Dict[str, object]:
        ordered = sorted(self._vocab.items(), key=lambda item: item[1])

        return {"n": self.n, "vocab": [[gram, index] for gram, index in ordered]}

    @classmethod
    def from_document(cls, doc: VectorizerDocument) -> "NgramVectorizer":
        vectorizer = cls(doc.n)
        vectorizer._vocab = {gram: index for gram, index in doc.vocab}

        return vectorizer

    @classmethod
    def from_dict(cls, obj: object) -> "NgramVectorizer":
        """Rebuild a vectorizer; raises CorruptModelError on a malformed object."""

        doc = validate_document(VectorizerDocument, obj, source="vectorizer")

        return cls.from_document(doc)

"""Multinomial Naive Bayes over n-gram count vectors.

The classifier has two states. Before `fit` it holds no parameters and every
inference call raises `ContractError`. `fit` computes an immutable
`NBParameters` snapshot from the training counts; a later `fit` replaces the
snapshot instead of accumulating into it.

Smoothing:

    class_log_prior[c]     = log((count[c] + 1) / (N + K))
    feature_log_prob[c][j] = log((fc[c][j] + alpha) / (sum_j fc[c][j] + alpha * V))
"""

from __future__ import annotations
import math
from dataclasses import dataclass
from typing import Dict, List, Sequence, Tuple
import numpy as np
from scipy import sparse
from .errors import ContractError
from .schema import NaiveBayesDocument, validate_document


@dataclass(frozen=True, eq=False)
class NBParameters:
    """Trained parameters, one row per class in `classes` order."""

    classes: Tuple[str, ...]
    class_count: np.ndarray
    class_log_prior: np.ndarray
    feature_count: np.ndarray
    feature_log_prob: np.ndarray
    vocab_size: int
    alpha: float

    def __post_init__(self) -> None:
        for array in (
            self.class_count,
            self.class_log_prior,
            self.feature_count,
            self.feature_log_prob,
        ):
            array.setflags(write=False)

    @property
    def class_prior(self) -> Dict[str, float]:
        return {
            cls: math.exp(float(lp))
            for cls, lp in zip(self.classes, self.class_log_prior)
        }


def _as_count_matrix(X: object):
    if sparse.issparse(X):
        matrix = sparse.csr_matrix(X)

        if matrix.nnz and matrix.data.min() < 0:
            raise ContractError("count matrix contains negative values.")

        return matrix

    if not isinstance(X, np.ndarray):
        X = list(X)

        if not X:
            raise ContractError("cannot fit on empty training data.")

        try:
            widths = {len(row) for row in X}

        except TypeError as exc:
            raise ContractError("X must be a sequence of count vectors.") from exc

        if len(widths) > 1:
            raise ContractError(
                f"all count vectors must have the same length, got lengths {sorted(widths)}."
            )

    matrix = np.asarray(X)

    if matrix.ndim != 2:
        raise ContractError(f"X must be 2-dimensional, got shape {matrix.shape}.")

    if not np.issubdtype(matrix.dtype, np.number):
        raise ContractError(f"X must hold numeric counts, got dtype {matrix.dtype}.")

    if matrix.size and (matrix < 0).any():
        raise ContractError("count matrix contains negative values.")

    return matrix


class MultinomialNB:
    """Multinomial Naive Bayes with additive smoothing `alpha`."""

    def __init__(self, alpha: float = 1.0) -> None:
        if not (math.isfinite(alpha) and alpha > 0):
            raise ContractError(f"alpha must be a positive finite number, got {alpha}.")

        self.alpha = float(alpha)
        self._params: NBParameters | None = None

    @property
    def is_fitted(self) -> bool:
        return self._params is not None

    @property
    def params(self) -> NBParameters:
        if self._params is None:
            raise ContractError("classifier is not fitted; call fit() first.")

        return self._params

    @property
    def classes(self) -> Tuple[str, ...]:
        return self.params.classes

    @property
    def vocab_size(self) -> int:
        return self.params.vocab_size

    def fit(self, X, y: Sequence[str]) -> "MultinomialNB":
        """Learn class priors and per-class feature distributions.

        `X` is a 2-D array-like or scipy sparse matrix of non-negative counts
        and `y` holds one label per row.
        """

        labels = list(y)
        matrix = _as_count_matrix(X)
        n_rows, vocab_size = matrix.shape

        if n_rows == 0 or not labels:
            raise ContractError("cannot fit on empty training data.")

        if n_rows != len(labels):
            raise ContractError(
                f"X has {n_rows} rows but y has {len(labels)} labels."
            )

        classes = tuple(dict.fromkeys(labels))
        label_array = np.asarray(labels, dtype=object)

        class_count = np.zeros(len(classes), dtype=np.int64)
        feature_count = np.zeros((len(classes), vocab_size), dtype=np.float64)

        for k, cls in enumerate(classes):
            rows = np.flatnonzero(label_array == cls)
            class_count[k] = rows.size

            if vocab_size:
                feature_count[k] = np.asarray(
                    matrix[rows].sum(axis=0), dtype=np.float64
                ).ravel()

        class_log_prior = np.log((class_count + 1) / (n_rows + len(classes)))

        if vocab_size:
            totals = feature_count.sum(axis=1, keepdims=True)
            feature_log_prob = np.log(
                (feature_count + self.alpha) / (totals + self.alpha * vocab_size)
            )

        else:
            feature_log_prob = np.zeros((len(classes), 0), dtype=np.float64)

        self._params = NBParameters(
            classes=classes,
            class_count=class_count,
            class_log_prior=class_log_prior,
            feature_count=feature_count,
            feature_log_prob=feature_log_prob,
            vocab_size=vocab_size,
            alpha=self.alpha,
        )

        return self

    def joint_log_likelihood(self, vec) -> np.ndarray:
        params = self.params
        counts = np.asarray(vec)

        if counts.ndim != 1 or counts.shape[0] != params.vocab_size:
            raise ContractError(
                f"expected a count vector of length {params.vocab_size}, got shape {counts.shape}."
            )

        nonzero = np.flatnonzero(counts)
        weights = counts[nonzero].astype(np.float64)

        return params.class_log_prior + params.feature_log_prob[:, nonzero] @ weights

    def predict_proba(self, vec) -> Dict[str, float]:
        """Posterior probability of every fitted class for count vector `vec`."""

        jll = self.joint_log_likelihood(vec)
        exps = np.exp(jll - jll.max())
        probs = exps / exps.sum()

        # exp underflows to 0 for classes far behind the best one.
        probs = np.maximum(probs, np.finfo(np.float64).tiny)
        probs = probs / probs.sum()

        return {cls: float(p) for cls, p in zip(self.params.classes, probs)}

    def rank(self, vec) -> List[Tuple[str, float]]:
        """Classes sorted by descending probability; ties keep class order."""

        probs = self.predict_proba(vec)

        return sorted(probs.items(), key=lambda item: item[1], reverse=True)

    def predict(self, vec) -> str:
        return self.rank(vec)[0][0]

    def to_dict(self) -> Dict[str, object]:
        params = self.params
        classes = list(params.classes)

        return {
            "classes": classes,
            "classCount": {
                cls: int(c) for cls, c in zip(classes, params.class_count)
            },
            "classLogPrior": {
                cls: float(lp) for cls, lp in zip(classes, params.class_log_prior)
            },
            "featureCount": {
                cls: row.tolist() for cls, row in zip(classes, params.feature_count)
            },
            "featureLogProb": {
                cls: row.tolist()
                for cls, row in zip(classes, params.feature_log_prob)
            },
            "vocabSize": int(params.vocab_size),
            "alpha": float(params.alpha),
        }

    @classmethod
    def from_document(cls, doc: NaiveBayesDocument) -> "MultinomialNB":
        model = cls(alpha=doc.alpha)
        classes = tuple(doc.classes)
        shape = (len(classes), doc.vocab_size)

        model._params = NBParameters(
            classes=classes,
            class_count=np.asarray(
                [doc.class_count[c] for c in classes], dtype=np.int64
            ),
            class_log_prior=np.asarray(
                [doc.class_log_prior[c] for c in classes], dtype=np.float64
            ),
            feature_count=np.asarray(
                [doc.feature_count[c] for c in classes], dtype=np.float64
            ).reshape(shape),
            feature_log_prob=np.asarray(
                [doc.feature_log_prob[c] for c in classes], dtype=np.float64
            ).reshape(shape),
            vocab_size=doc.vocab_size,
            alpha=doc.alpha,
        )

        return model

    @classmethod
    def from_dict(cls, obj: object) -> "MultinomialNB":
        """Rebuild a fitted classifier; raises CorruptModelError on a malformed object."""

        doc = validate_document(NaiveBayesDocument, obj, source="classifier")

        return cls.from_document(doc)

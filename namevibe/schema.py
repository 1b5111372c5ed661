"""Pydantic contracts for the persisted model document.

Every model file is validated against these models before any parameter is
used, so a malformed file fails loudly at load time instead of silently
producing wrong predictions.
"""

from __future__ import annotations
import math
from typing import Dict, List, Literal, Tuple
from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator
from .errors import CorruptModelError


class _Document(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")


class VectorizerDocument(_Document):
    """Serialized n-gram vocabulary."""

    n: int = Field(ge=1)
    vocab: List[Tuple[str, int]]

    @model_validator(mode="after")
    def _check_vocab(self) -> "VectorizerDocument":
        grams = [gram for gram, _ in self.vocab]
        indices = sorted(index for _, index in self.vocab)

        bad_length = [gram for gram in grams if len(gram) != self.n]

        if bad_length:
            raise ValueError(
                f"n-grams {bad_length[:5]!r} do not have length n={self.n}."
            )

        if len(set(grams)) != len(grams):
            raise ValueError("vocabulary contains duplicate n-grams.")

        if indices != list(range(len(indices))):
            raise ValueError("vocabulary indices must be unique and dense in [0, V).")

        return self


class NaiveBayesDocument(_Document):
    """Serialized multinomial Naive Bayes parameters (camelCase on disk)."""

    classes: List[str] = Field(min_length=1)
    class_count: Dict[str, int] = Field(alias="classCount")
    class_log_prior: Dict[str, float] = Field(alias="classLogPrior")
    feature_count: Dict[str, List[float]] = Field(alias="featureCount")
    feature_log_prob: Dict[str, List[float]] = Field(alias="featureLogProb")
    vocab_size: int = Field(alias="vocabSize", ge=0)
    alpha: float = Field(gt=0)

    @model_validator(mode="after")
    def _check_consistency(self) -> "NaiveBayesDocument":
        expected = set(self.classes)

        if len(expected) != len(self.classes):
            raise ValueError("classes must be unique.")

        per_class = {
            "classCount": self.class_count,
            "classLogPrior": self.class_log_prior,
            "featureCount": self.feature_count,
            "featureLogProb": self.feature_log_prob,
        }

        for field_name, mapping in per_class.items():
            if set(mapping) != expected:
                raise ValueError(f"{field_name} keys do not match classes.")

        if not math.isfinite(self.alpha):
            raise ValueError("alpha must be finite.")

        for cls in self.classes:
            if self.class_count[cls] < 0:
                raise ValueError(f"classCount for {cls!r} is negative.")

            if not math.isfinite(self.class_log_prior[cls]):
                raise ValueError(f"classLogPrior for {cls!r} is not finite.")

            counts = self.feature_count[cls]
            log_probs = self.feature_log_prob[cls]

            if len(counts) != self.vocab_size or len(log_probs) != self.vocab_size:
                raise ValueError(
                    f"feature vectors for {cls!r} do not have length vocabSize={self.vocab_size}."
                )

            if not all(math.isfinite(c) and c >= 0 for c in counts):
                raise ValueError(f"featureCount for {cls!r} has invalid values.")

            if not all(math.isfinite(p) for p in log_probs):
                raise ValueError(f"featureLogProb for {cls!r} is not finite.")

        return self


class MetaDocument(_Document):
    gender: Literal["male", "female"]


class ModelDocument(_Document):
    """A complete model file: vocabulary, classifier and metadata."""

    vectorizer: VectorizerDocument
    nb: NaiveBayesDocument
    meta: MetaDocument

    @model_validator(mode="after")
    def _check_vocab_size(self) -> "ModelDocument":
        if self.nb.vocab_size != len(self.vectorizer.vocab):
            raise ValueError(
                f"nb.vocabSize={self.nb.vocab_size} but the vocabulary has "
                f"{len(self.vectorizer.vocab)} entries."
            )

        return self


def validate_document(model_cls: type[_Document], obj: object, source: str = "model"):
    """Validate `obj` against `model_cls`, turning failures into CorruptModelError."""

    try:
        return model_cls.model_validate(obj)

    except ValidationError as exc:
        raise CorruptModelError(f"Malformed {source}: {exc}") from exc

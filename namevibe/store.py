"""Trained model bundle and its JSON persistence.

One file per gender (`model-male.json`, `model-female.json`) holds the
vectorizer vocabulary, the Naive Bayes parameters and the gender:

    {"vectorizer": {...}, "nb": {...}, "meta": {"gender": "male"}}

Loading validates the whole document (see `namevibe.schema`) and raises
`CorruptModelError` on any inconsistency, or `ModelNotFoundError` when the
file does not exist.
"""

from __future__ import annotations
import json
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Mapping, Tuple
import numpy as np
from namecorpus.examples import GENDERS, Gender
from .errors import CorruptModelError, ModelNotFoundError
from .naive_bayes import MultinomialNB
from .normalize import normalize_name
from .schema import ModelDocument, validate_document
from .vectorizer import NgramVectorizer


MODEL_FILE_TEMPLATE = "model-{gender}.json"


def model_path(models_dir: Path, gender: Gender) -> Path:
    return Path(models_dir) / MODEL_FILE_TEMPLATE.format(gender=gender)


@dataclass(frozen=True, eq=False)
class VibeModel:
    """A fitted vectorizer + classifier pair for one gender."""

    vectorizer: NgramVectorizer
    nb: MultinomialNB
    gender: Gender

    def vectorize(self, name: str) -> np.ndarray:
        return self.vectorizer.transform(normalize_name(name))

    def predict_proba(self, name: str) -> Dict[str, float]:
        return self.nb.predict_proba(self.vectorize(name))

    def rank(self, name: str) -> List[Tuple[str, float]]:
        """Languages for a raw name, most probable first."""

        return self.nb.rank(self.vectorize(name))

    def to_dict(self) -> Dict[str, object]:
        return {
            "vectorizer": self.vectorizer.to_dict(),
            "nb": self.nb.to_dict(),
            "meta": {"gender": self.gender},
        }

    @classmethod
    def from_dict(cls, obj: object) -> "VibeModel":
        doc = validate_document(ModelDocument, obj, source="model document")

        return cls(
            vectorizer=NgramVectorizer.from_document(doc.vectorizer),
            nb=MultinomialNB.from_document(doc.nb),
            gender=doc.meta.gender,
        )


def dumps_model(model: VibeModel) -> str:
    return json.dumps(model.to_dict(), indent=2, ensure_ascii=False, allow_nan=False) + "\n"


def save_model(model: VibeModel, path: Path) -> Path:
    """Write `model` to `path`, replacing any existing file."""

    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(dumps_model(model), encoding="utf-8")

    return path


def load_model(path: Path, gender: Gender | None = None) -> VibeModel:
    """Load and validate one model file.

    When `gender` is given, the file's `meta.gender` must match it.
    """

    path = Path(path)

    if not path.is_file():
        raise ModelNotFoundError(f"Model file not found: {path}. Run `train` first.")

    try:
        obj = json.loads(path.read_text(encoding="utf-8"))

    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise CorruptModelError(f"{path} is not valid JSON: {exc}") from exc

    try:
        model = VibeModel.from_dict(obj)

    except CorruptModelError as exc:
        raise CorruptModelError(f"{path}: {exc}") from exc

    if gender is not None and model.gender != gender:
        raise CorruptModelError(
            f"{path} holds a {model.gender!r} model, expected {gender!r}."
        )

    return model


def save_models(models: Mapping[Gender, VibeModel], models_dir: Path) -> Dict[Gender, Path]:
    return {
        gender: save_model(models[gender], model_path(models_dir, gender))
        for gender in GENDERS
    }


def load_models(models_dir: Path) -> Dict[Gender, VibeModel]:
    """Load both gender models; either file missing is an error."""

    return {
        gender: load_model(model_path(models_dir, gender), gender=gender)
        for gender in GENDERS
    }

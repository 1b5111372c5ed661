"""Training pipeline: name corpus -> one persisted model per gender.

For each gender the raw names are normalized, the vectorizer vocabulary is fit
on the whole gender corpus, every name is vectorized, and the Naive Bayes
classifier is fit on the resulting count matrix with the languages as labels.
"""

from __future__ import annotations
from pathlib import Path
from typing import Dict, List, Mapping, Sequence
from tqdm.auto import tqdm
from namecorpus.config import CorpusConfig
from namecorpus.examples import GENDERS, Gender, NameExample
from namecorpus.faker_names import collect_names
from .console import COLOR_CYAN, COLOR_GREEN, COLOR_RESET
from .errors import ContractError
from .naive_bayes import MultinomialNB
from .ngrams import DEFAULT_NGRAM_SIZE
from .normalize import normalize_name
from .store import VibeModel, model_path, save_model
from .vectorizer import NgramVectorizer


def build_corpus(config: CorpusConfig | None = None) -> Dict[Gender, List[NameExample]]:
    """Collect the raw training names for both genders."""

    return {gender: collect_names(gender, config) for gender in GENDERS}


def train_model(
    examples: Sequence[NameExample],
    gender: Gender,
    ngram_size: int = DEFAULT_NGRAM_SIZE,
    alpha: float = 1.0,
    progress: bool = False,
) -> VibeModel:
    """Fit a vectorizer and classifier on the `gender` examples only."""

    selected = [e for e in examples if e.gender == gender]

    if not selected:
        raise ContractError(f"No {gender} names to train on.")

    names = [normalize_name(e.text) for e in selected]
    labels = [e.language for e in selected]

    vectorizer = NgramVectorizer(ngram_size).fit(names)

    rows = tqdm(
        names,
        desc=f"{COLOR_CYAN}Vectorizing {gender}{COLOR_RESET}",
        unit="name",
        disable=not progress,
    )

    X = vectorizer.transform_many(rows)
    nb = MultinomialNB(alpha=alpha).fit(X, labels)

    return VibeModel(vectorizer=vectorizer, nb=nb, gender=gender)


def train_and_save(
    corpus: Mapping[Gender, Sequence[NameExample]],
    models_dir: Path,
    ngram_size: int = DEFAULT_NGRAM_SIZE,
    alpha: float = 1.0,
    progress: bool = True,
) -> Dict[Gender, Path]:
    """Train both gender models and overwrite their files in `models_dir`."""

    models: Dict[Gender, VibeModel] = {}

    for gender in GENDERS:
        models[gender] = train_model(
            corpus.get(gender, []),
            gender,
            ngram_size=ngram_size,
            alpha=alpha,
            progress=progress,
        )

    # Nothing is written unless every model trained.
    written: Dict[Gender, Path] = {}

    for gender, model in models.items():
        path = save_model(model, model_path(models_dir, gender))
        written[gender] = path

        print(
            f"{COLOR_GREEN}Trained {gender} model{COLOR_RESET} on "
            f"{int(model.nb.params.class_count.sum())} names, "
            f"{len(model.nb.classes)} languages, {model.vectorizer.vocab_size} n-grams; "
            f"saved to {path}"
        )

    return written

"""Runtime settings for training and prediction.

Defaults can be overridden through environment variables:

    NAME_VIBE_MODELS_DIR   directory holding model-male.json / model-female.json
    NAME_VIBE_NGRAM_SIZE   n-gram order used when training
    NAME_VIBE_ALPHA        additive smoothing used when training
"""

from __future__ import annotations
import os
from pathlib import Path
from typing import Dict, Mapping
from pydantic import BaseModel, ConfigDict, Field
from namecorpus.config import CorpusConfig
from .ngrams import DEFAULT_NGRAM_SIZE


ENV_MODELS_DIR = "NAME_VIBE_MODELS_DIR"
ENV_NGRAM_SIZE = "NAME_VIBE_NGRAM_SIZE"
ENV_ALPHA = "NAME_VIBE_ALPHA"


class VibeSettings(BaseModel):
    model_config = ConfigDict(frozen=True)

    models_dir: Path = Path(".")
    ngram_size: int = Field(default=DEFAULT_NGRAM_SIZE, ge=1)
    alpha: float = Field(default=1.0, gt=0)
    corpus: CorpusConfig = Field(default_factory=CorpusConfig)

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "VibeSettings":
        """Build settings from the environment; unset variables keep defaults."""

        env = os.environ if environ is None else environ
        values: Dict[str, object] = {}

        for key, field_name in (
            (ENV_MODELS_DIR, "models_dir"),
            (ENV_NGRAM_SIZE, "ngram_size"),
            (ENV_ALPHA, "alpha"),
        ):
            raw = env.get(key, "").strip()

            if raw:
                values[field_name] = raw

        return cls.model_validate(values)

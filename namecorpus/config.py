"""Corpus selection policy."""

from __future__ import annotations
from typing import FrozenSet
from pydantic import BaseModel, ConfigDict, Field


# Regional variants that duplicate a base locale's names, plus locales whose
# names do not survive romanization well.
DEFAULT_EXCLUDED_LOCALES: FrozenSet[str] = frozenset(
    {
        "de_AT",
        "de_CH",
        "de_LI",
        "de_LU",
        "en_AU",
        "en_BD",
        "en_CA",
        "en_GB",
        "en_IE",
        "en_IN",
        "en_NZ",
        "en_PH",
        "en_PK",
        "en_TH",
        "es_AR",
        "es_CA",
        "es_CL",
        "es_CO",
        "es_MX",
        "fr_BE",
        "fr_CA",
        "fr_CH",
        "fr_QC",
        "it_CH",
        "nl_BE",
        "pt_BR",
        "ro_MD",
        "zh_CN",
        "zh_TW",
        "ja_JP",
        "ko_KR",
        "he_IL",
        "th_TH",
        "vi_VN",
        "yo_NG",
        "zu_ZA",
        "id_ID",
        "uz_UZ",
    }
)


class CorpusConfig(BaseModel):
    """Which locales the corpus collaborator may use.

    A locale is used when it is not in `excluded_locales` and has at least
    `min_names_per_gender` male *and* female first names.
    """

    model_config = ConfigDict(frozen=True)

    excluded_locales: FrozenSet[str] = DEFAULT_EXCLUDED_LOCALES
    min_names_per_gender: int = Field(default=75, ge=1)

    def allows(self, locale: str) -> bool:
        return locale not in self.excluded_locales

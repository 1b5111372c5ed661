from __future__ import annotations
from typing import Literal, Tuple
from pydantic import BaseModel, ConfigDict


Gender = Literal["male", "female"]

GENDERS: Tuple[Gender, ...] = ("male", "female")


class NameExample(BaseModel):
    """One raw first name labeled with its language and gender."""

    model_config = ConfigDict(frozen=True)

    text: str
    language: str
    gender: Gender

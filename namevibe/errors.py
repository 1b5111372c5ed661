"""Error types raised by the name-vibe core and model store."""

from __future__ import annotations


class VibeError(Exception):
    """Base class for every error raised by this package."""


class ContractError(VibeError, ValueError):
    """An input violated the calling contract (shape, length, empty data)."""


class CorruptModelError(VibeError):
    """A persisted model file is malformed and must not be used."""


class ModelNotFoundError(VibeError, FileNotFoundError):
    """A model file required for prediction does not exist."""

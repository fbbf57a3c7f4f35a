"""Engine protocol parsing module."""

from .engine import EngineParser

__all__ = [
    "EngineParser",
]

"""Blank-line shaping of formatting token streams."""

from .intermediary import Intermediary, IntermediaryConfig
from .line_metadata import LineMetadata

__all__ = [
    "Intermediary",
    "IntermediaryConfig",
    "LineMetadata",
]

"""line-shaper: blank-line shaping stage for a Ruby pretty-printer."""

from .exceptions import (
    BufferTooShortError,
    IntermediaryConsumedError,
    LineShapingError,
    NewlineInvariantError,
)
from .pipeline import PipelineConfig, ShapingPipeline, quick_shape
from .shaping import Intermediary, IntermediaryConfig, LineMetadata
from .tokens import BlanklineReason, ShapingResult, Token

__version__ = "0.1.0"

__all__ = [
    # Pipeline
    "ShapingPipeline",
    "PipelineConfig",
    "quick_shape",
    # Shaping
    "Intermediary",
    "IntermediaryConfig",
    "LineMetadata",
    # Models
    "Token",
    "BlanklineReason",
    "ShapingResult",
    # Errors
    "LineShapingError",
    "NewlineInvariantError",
    "BufferTooShortError",
    "IntermediaryConsumedError",
]

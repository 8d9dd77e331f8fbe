"""Token models consumed and produced by the shaping stage."""

from .models import (
    BlanklineReason,
    ClassKeyword,
    Comma,
    Comment,
    ConditionalKeyword,
    DefKeyword,
    Delim,
    DirectPart,
    DoKeyword,
    End,
    HardNewLine,
    Indent,
    Keyword,
    ModuleKeyword,
    ShapingResult,
    SoftNewLine,
    Space,
    Token,
    is_indent,
    is_single_line_breakable_garbage,
)

__all__ = [
    # Structural tokens
    "HardNewLine",
    "Indent",
    "DirectPart",
    "Comment",
    "ModuleKeyword",
    "ClassKeyword",
    "DoKeyword",
    "DefKeyword",
    "End",
    "ConditionalKeyword",
    # Renderer-only tokens
    "Comma",
    "Space",
    "Delim",
    "Keyword",
    "SoftNewLine",
    "Token",
    # Classification
    "is_indent",
    "is_single_line_breakable_garbage",
    # Results
    "BlanklineReason",
    "ShapingResult",
]

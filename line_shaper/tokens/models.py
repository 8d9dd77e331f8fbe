"""Data models for the line-shaping stage."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Union


@dataclass(frozen=True)
class HardNewLine:
    """Ends a logical line."""


@dataclass(frozen=True)
class Indent:
    """Indentation level of the line that is starting."""
    depth: int


@dataclass(frozen=True)
class DirectPart:
    """A literal text fragment."""
    part: str


@dataclass(frozen=True)
class Comment:
    contents: str


@dataclass(frozen=True)
class ModuleKeyword:
    pass


@dataclass(frozen=True)
class ClassKeyword:
    pass


@dataclass(frozen=True)
class DoKeyword:
    pass


@dataclass(frozen=True)
class DefKeyword:
    pass


@dataclass(frozen=True)
class End:
    pass


@dataclass(frozen=True)
class ConditionalKeyword:
    """`if`, `elsif`, `unless` and friends."""
    contents: str


# Renderer-only tokens. They pass through the shaping stage untouched.

@dataclass(frozen=True)
class Comma:
    pass


@dataclass(frozen=True)
class Space:
    pass


@dataclass(frozen=True)
class Delim:
    """An opening or closing delimiter such as `)` or `]`."""
    contents: str


@dataclass(frozen=True)
class Keyword:
    """Any keyword without a blank-line rule of its own."""
    keyword: str


@dataclass(frozen=True)
class SoftNewLine:
    pass


Token = Union[
    HardNewLine,
    Indent,
    DirectPart,
    Comment,
    ModuleKeyword,
    ClassKeyword,
    DoKeyword,
    DefKeyword,
    End,
    ConditionalKeyword,
    Comma,
    Space,
    Delim,
    Keyword,
    SoftNewLine,
]


def is_indent(token: Token) -> bool:
    """Whether the token is an indentation marker."""
    return isinstance(token, Indent)


def is_single_line_breakable_garbage(token: Token) -> bool:
    """Whether the token is filler left behind by a collapsed breakable.

    When a multi-line bracketed construct ends up on one line the upstream
    renderer leaves a trailing comma, a space and an empty fragment in front
    of the closing delimiter.
    """
    if isinstance(token, (Comma, Space)):
        return True
    if isinstance(token, DirectPart):
        return token.part == ""
    return False


class BlanklineReason(Enum):
    """Why a synthetic blank line was inserted."""
    COMES_AFTER_END = "comes_after_end"
    CONDITIONAL = "conditional"
    CLASS_OR_MODULE = "class_or_module"
    DO_KEYWORD = "do_keyword"
    END_OF_REQUIRE_BLOCK = "end_of_require_block"
    COMMENT_AFTER_END = "comment_after_end"


@dataclass
class ShapingResult:
    """Finished token stream of a shaping pass."""
    tokens: list[Token] = field(default_factory=list)
    blankline_reasons: list[BlanklineReason] = field(default_factory=list)

    @property
    def inserted_count(self) -> int:
        """Number of blank lines the pass inserted."""
        return len(self.blankline_reasons)

    def to_dict(self) -> dict:
        return {
            "tokens": [repr(token) for token in self.tokens],
            "blankline_reasons": [reason.value for reason in self.blankline_reasons],
            "inserted_count": self.inserted_count,
        }

"""Token buffer that applies the blank-line policy while it grows."""

import logging
from dataclasses import dataclass
from typing import Optional

from ..exceptions import (
    BufferTooShortError,
    IntermediaryConsumedError,
    NewlineInvariantError,
)
from ..tokens.models import (
    BlanklineReason,
    ClassKeyword,
    Comment,
    ConditionalKeyword,
    DefKeyword,
    DirectPart,
    DoKeyword,
    End,
    HardNewLine,
    Indent,
    ModuleKeyword,
    Token,
    is_indent,
    is_single_line_breakable_garbage,
)
from .line_metadata import LineMetadata


logger = logging.getLogger(__name__)


@dataclass
class IntermediaryConfig:
    """Configuration for the intermediary buffer."""
    # Re-check the newline index after every mutation (off under python -O)
    check_invariants: bool = __debug__
    # Log every synthetic blank line with its reason at DEBUG level
    log_blanklines: bool = True


class Intermediary:
    """Buffers formatting tokens and fixes up blank lines as they arrive.

    Handles:
    - Closing a block of `require` lines with a blank line
    - Separating `class`/`module` openers from preceding statements
    - Separating `if` and `do` from a just-closed conditional or do-block
    - Separating a comment from a directly preceding `end`
    - Never letting more than one blank line through

    Only the previous logical line and the last few tokens are ever looked at.
    """

    def __init__(self, config: Optional[IntermediaryConfig] = None):
        """Initialize an empty buffer.

        Args:
            config: Intermediary configuration options.
        """
        self.config = config or IntermediaryConfig()
        self.tokens: list[Token] = []
        self.index_of_last_hard_newline = 0
        self.current_line_metadata = LineMetadata()
        self.previous_line_metadata: Optional[LineMetadata] = None
        self.blankline_reasons: list[BlanklineReason] = []
        self._consumed = False

    def __len__(self) -> int:
        return len(self.tokens)

    def last_4(self) -> Optional[tuple[Token, Token, Token, Token]]:
        """Return the four most recent tokens, oldest first.

        Returns:
            A 4-tuple, or None while fewer than four tokens are buffered.
        """
        if len(self.tokens) < 4:
            return None
        return (self.tokens[-4], self.tokens[-3], self.tokens[-2], self.tokens[-1])

    def into_tokens(self) -> list[Token]:
        """Hand over the finished token sequence.

        The intermediary cannot be used afterwards.

        Returns:
            The shaped tokens, in order.
        """
        self._ensure_not_consumed()
        self._consumed = True
        tokens = self.tokens
        self.tokens = []
        return tokens

    def push(self, token: Token) -> None:
        """Append a token, inserting or suppressing newlines as policy requires.

        Args:
            token: The next token from the upstream renderer.
        """
        self._ensure_not_consumed()
        self._check_newline_index()
        do_push = True

        if isinstance(token, HardNewLine):
            do_push = self._handle_hard_newline()
        elif isinstance(token, (ModuleKeyword, ClassKeyword)):
            self._handle_class_or_module()
        elif isinstance(token, DoKeyword):
            self._handle_do_keyword()
        elif isinstance(token, ConditionalKeyword):
            self._handle_conditional(token.contents)
        elif isinstance(token, End):
            self.current_line_metadata.set_has_end()
        elif isinstance(token, DefKeyword):
            self.current_line_metadata.set_has_def()
        elif isinstance(token, Indent):
            self._handle_indent(token.depth)
        elif isinstance(token, DirectPart):
            self._handle_direct_part(token.part)
        elif isinstance(token, Comment):
            self._handle_comment()

        if do_push:
            self.tokens.append(token)
        self._check_newline_index()

    def insert_trailing_blankline(self, reason: BlanklineReason) -> None:
        """Insert a blank line after the most recently closed line.

        Nothing happens when a blank line (plain, or holding only an indent)
        already sits there, so repeated calls insert at most one.

        Args:
            reason: Why the blank line is wanted. Only used for diagnostics.
        """
        index = self.index_of_last_hard_newline
        before_previous = self._token_at(index - 2)
        previous = self._token_at(index - 1)
        current = self._token_at(index)

        if (
            isinstance(before_previous, HardNewLine)
            and isinstance(previous, Indent)
            and isinstance(current, HardNewLine)
        ):
            return
        if isinstance(previous, HardNewLine) and isinstance(current, HardNewLine):
            return

        if self.config.log_blanklines:
            logger.debug(f"Inserting blank line at {index}: {reason.name}")
        self.tokens.insert(index, HardNewLine())
        self.index_of_last_hard_newline += 1
        self.blankline_reasons.append(reason)
        self._check_newline_index()

    def clear_breakable_garbage(self) -> None:
        """Drop filler left in front of a collapsed breakable's closing delimiter.

        After a breakable is rendered on one line the buffer ends like
        ``[.., Comma, Space, DirectPart(""), <close delimiter>]``; tokens at
        position ``len - 2`` are removed until that slot holds real content.
        """
        self._ensure_not_consumed()
        if self.config.check_invariants and len(self.tokens) < 2:
            raise BufferTooShortError(len(self.tokens), 2)

        while len(self.tokens) >= 2 and is_single_line_breakable_garbage(self.tokens[-2]):
            del self.tokens[-2]
        self._check_newline_index()

    def _handle_hard_newline(self) -> bool:
        """Close the current line.

        Returns:
            False when the newline would start a second blank line.
        """
        prev = self.previous_line_metadata
        if prev is not None:
            if not self.current_line_metadata.has_require and prev.has_require:
                self.insert_trailing_blankline(BlanklineReason.END_OF_REQUIRE_BLOCK)

        self.previous_line_metadata = self.current_line_metadata
        self.current_line_metadata = LineMetadata()
        self.index_of_last_hard_newline = len(self.tokens)

        if len(self.tokens) >= 2:
            if isinstance(self.tokens[-2], HardNewLine) and isinstance(self.tokens[-1], HardNewLine):
                logger.debug(f"Suppressing newline at {len(self.tokens)}, blank line already present")
                self.index_of_last_hard_newline = len(self.tokens) - 1
                return False
        return True

    def _handle_class_or_module(self) -> None:
        prev = self.previous_line_metadata
        if prev is not None and not prev.gets_indented:
            self.insert_trailing_blankline(BlanklineReason.CLASS_OR_MODULE)

    def _handle_do_keyword(self) -> None:
        self.current_line_metadata.set_has_do_keyword()
        prev = self.previous_line_metadata
        if prev is not None and prev.wants_spacer_for_conditional():
            self.insert_trailing_blankline(BlanklineReason.DO_KEYWORD)

    def _handle_conditional(self, contents: str) -> None:
        self.current_line_metadata.set_has_conditional()
        prev = self.previous_line_metadata
        # Only a fresh `if` is separated; `elsif`, `unless` etc. are not
        if prev is not None and prev.wants_spacer_for_conditional() and contents == "if":
            self.insert_trailing_blankline(BlanklineReason.CONDITIONAL)

    def _handle_indent(self, depth: int) -> None:
        self.current_line_metadata.observe_indent_level(depth)
        prev = self.previous_line_metadata
        if prev is not None and LineMetadata.indent_level_increases_between(
            prev, self.current_line_metadata
        ):
            prev.set_gets_indented()

    def _handle_direct_part(self, part: str) -> None:
        # A line-initial require, not a call nested in an expression
        if part == "require" and self.tokens and is_indent(self.tokens[-1]):
            self.current_line_metadata.set_has_require()

    def _handle_comment(self) -> None:
        last = self.last_4()
        if last is not None and isinstance(last[2], End) and isinstance(last[3], HardNewLine):
            self.insert_trailing_blankline(BlanklineReason.COMMENT_AFTER_END)

    def _token_at(self, index: int) -> Optional[Token]:
        """Buffer slot lookup where out-of-range positions read as None."""
        if 0 <= index < len(self.tokens):
            return self.tokens[index]
        return None

    def _check_newline_index(self) -> None:
        if not self.config.check_invariants or self.index_of_last_hard_newline == 0:
            return
        found = self._token_at(self.index_of_last_hard_newline)
        if not isinstance(found, HardNewLine):
            raise NewlineInvariantError(self.index_of_last_hard_newline, found)

    def _ensure_not_consumed(self) -> None:
        if self._consumed:
            raise IntermediaryConsumedError()

"""Contract-violation exceptions for the shaping stage.

None of these describe a condition a caller can recover from. They signal a
broken invariant inside the intermediary or a caller that used it out of
order, so they derive from AssertionError.

- NewlineInvariantError: the remembered newline index is stale
- BufferTooShortError: cleanup ran on a buffer that cannot hold a delimiter
- IntermediaryConsumedError: the intermediary was used after into_tokens()
"""

from typing import Optional


class LineShapingError(AssertionError):
    """Base class for shaping contract violations."""


class NewlineInvariantError(LineShapingError):
    """
    Raised when index_of_last_hard_newline does not address a HardNewLine.

    Attributes:
        index: The remembered index
        found: The token found at that index, or None past the end
    """

    def __init__(self, index: int, found: Optional[object]) -> None:
        self.index = index
        self.found = found
        super().__init__(
            f"Expected HardNewLine at index {index}, found {found!r}"
        )


class BufferTooShortError(LineShapingError):
    """
    Raised when an operation needs more buffered tokens than exist.

    Attributes:
        length: Current buffer length
        required: Minimum length the operation needs
    """

    def __init__(self, length: int, required: int) -> None:
        self.length = length
        self.required = required
        super().__init__(
            f"Buffer holds {length} tokens, at least {required} required"
        )


class IntermediaryConsumedError(LineShapingError):
    """Raised when an intermediary is used after its tokens were taken."""

    def __init__(self) -> None:
        super().__init__("Intermediary tokens were already taken by into_tokens()")

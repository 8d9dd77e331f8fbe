"""Per-line facts consulted by the blank-line policy."""

from dataclasses import dataclass
from typing import Optional


@dataclass
class LineMetadata:
    """Facts about one logical line.

    Everything except ``gets_indented`` is learned from the line's own
    tokens. ``gets_indented`` is set afterwards, by the next line's indent,
    when that line sits deeper than this one (this line opened a block).
    """
    has_require: bool = False
    has_end: bool = False
    has_def: bool = False
    has_conditional: bool = False
    has_do_keyword: bool = False
    indent_level: Optional[int] = None
    gets_indented: bool = False

    def set_has_require(self) -> None:
        self.has_require = True

    def set_has_end(self) -> None:
        self.has_end = True

    def set_has_def(self) -> None:
        self.has_def = True

    def set_has_conditional(self) -> None:
        self.has_conditional = True

    def set_has_do_keyword(self) -> None:
        self.has_do_keyword = True

    def set_gets_indented(self) -> None:
        self.gets_indented = True

    def observe_indent_level(self, depth: int) -> None:
        self.indent_level = depth

    def wants_spacer_for_conditional(self) -> bool:
        """Whether this line closed a conditional or do-block.

        A following `if` or `do` is then separated from it by a blank line.
        """
        return self.has_end and (self.has_conditional or self.has_do_keyword)

    @staticmethod
    def indent_level_increases_between(prev: "LineMetadata", next_line: "LineMetadata") -> bool:
        """Whether ``next_line`` sits strictly deeper than ``prev``.

        A line without a recorded depth orders below every recorded depth.
        """
        if next_line.indent_level is None:
            return False
        if prev.indent_level is None:
            return True
        return prev.indent_level < next_line.indent_level

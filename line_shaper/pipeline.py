"""Single-pass pipeline running a token stream through the intermediary."""

import logging
from dataclasses import dataclass, field
from typing import Iterable, Optional

from .shaping import Intermediary, IntermediaryConfig
from .tokens import ShapingResult, Token


logger = logging.getLogger(__name__)


@dataclass
class PipelineConfig:
    """Configuration for the shaping pipeline."""
    intermediary_config: IntermediaryConfig = field(default_factory=IntermediaryConfig)

    # Log token and blank-line counts once the pass is done
    log_summary: bool = True


class ShapingPipeline:
    """Feeds an upstream token stream through a fresh intermediary.

    Callers that need to clear breakable garbage mid-stream drive an
    Intermediary directly instead.
    """

    def __init__(self, config: Optional[PipelineConfig] = None):
        """Initialize the pipeline.

        Args:
            config: Pipeline configuration.
        """
        self.config = config or PipelineConfig()

    def shape(self, tokens: Iterable[Token]) -> ShapingResult:
        """Run one shaping pass.

        Args:
            tokens: Tokens in the order the upstream renderer emitted them.

        Returns:
            ShapingResult with the finished tokens and inserted blank lines.
        """
        intermediary = Intermediary(self.config.intermediary_config)
        pushed = 0
        for token in tokens:
            intermediary.push(token)
            pushed += 1

        reasons = list(intermediary.blankline_reasons)
        result = ShapingResult(tokens=intermediary.into_tokens(), blankline_reasons=reasons)

        if self.config.log_summary:
            logger.info(
                f"Shaped {pushed} tokens into {len(result.tokens)}, "
                f"{result.inserted_count} blank lines inserted"
            )
        return result


def quick_shape(tokens: Iterable[Token]) -> list[Token]:
    """Shape a token stream with default settings.

    Args:
        tokens: Tokens from the upstream renderer.

    Returns:
        The shaped token list.
    """
    return ShapingPipeline().shape(tokens).tokens

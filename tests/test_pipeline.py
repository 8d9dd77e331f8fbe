import logging

import pytest
from line_shaper import quick_shape
from line_shaper.pipeline import PipelineConfig, ShapingPipeline
from line_shaper.tokens.models import (
    BlanklineReason,
    ClassKeyword,
    Comment,
    DefKeyword,
    DirectPart,
    End,
    HardNewLine,
    Indent,
)

NL = HardNewLine()


def ruby_file():
    return [
        Indent(0), DirectPart("require"), DirectPart(' "set"'), NL,
        Indent(0), ClassKeyword(), DirectPart(" Foo"), NL,
        Indent(1), DefKeyword(), DirectPart(" bar"), NL,
        Indent(1), End(), NL,
        Indent(0), End(), NL,
        Comment("# done"), NL,
    ]


def test_shape_file():
    result = ShapingPipeline().shape(ruby_file())

    assert result.tokens == [
        Indent(0), DirectPart("require"), DirectPart(' "set"'), NL,
        NL,
        Indent(0), ClassKeyword(), DirectPart(" Foo"), NL,
        Indent(1), DefKeyword(), DirectPart(" bar"), NL,
        Indent(1), End(), NL,
        Indent(0), End(), NL,
        NL,
        Comment("# done"), NL,
    ]
    assert result.blankline_reasons == [
        BlanklineReason.CLASS_OR_MODULE,
        BlanklineReason.COMMENT_AFTER_END,
    ]


def test_shape_accepts_generator():
    result = ShapingPipeline().shape(token for token in ruby_file())
    assert result.inserted_count == 2


def test_quick_shape():
    assert quick_shape(ruby_file()) == ShapingPipeline().shape(ruby_file()).tokens


def test_empty_stream():
    result = ShapingPipeline().shape([])
    assert result.tokens == []
    assert result.inserted_count == 0


def test_summary_is_logged(caplog):
    with caplog.at_level(logging.INFO, logger="line_shaper.pipeline"):
        ShapingPipeline().shape(ruby_file())
    assert "2 blank lines inserted" in caplog.text


def test_summary_can_be_disabled(caplog):
    config = PipelineConfig(log_summary=False)
    with caplog.at_level(logging.INFO, logger="line_shaper.pipeline"):
        ShapingPipeline(config).shape(ruby_file())
    assert "blank lines inserted" not in caplog.text

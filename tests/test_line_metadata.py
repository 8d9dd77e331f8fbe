import pytest
from line_shaper.shaping.line_metadata import LineMetadata


def test_new_line_has_no_facts():
    md = LineMetadata()
    assert not md.has_require
    assert not md.has_end
    assert not md.has_def
    assert not md.has_conditional
    assert not md.has_do_keyword
    assert not md.gets_indented
    assert md.indent_level is None


def test_setters():
    md = LineMetadata()
    md.set_has_require()
    md.set_has_def()
    md.set_gets_indented()
    md.observe_indent_level(2)
    md.observe_indent_level(3)

    assert md.has_require
    assert md.has_def
    assert md.gets_indented
    assert md.indent_level == 3


@pytest.mark.parametrize("has_end, has_conditional, has_do_keyword, expected", [
    (True, True, False, True),
    (True, False, True, True),
    (True, True, True, True),
    (True, False, False, False),
    (False, True, False, False),
    (False, False, True, False),
    (False, False, False, False),
])
def test_wants_spacer_for_conditional(has_end, has_conditional, has_do_keyword, expected):
    md = LineMetadata(
        has_end=has_end,
        has_conditional=has_conditional,
        has_do_keyword=has_do_keyword,
    )
    assert md.wants_spacer_for_conditional() is expected


@pytest.mark.parametrize("prev_level, next_level, expected", [
    (0, 1, True),
    (1, 3, True),
    (1, 1, False),
    (2, 1, False),
    (None, 0, True),
    (0, None, False),
    (None, None, False),
])
def test_indent_level_increases_between(prev_level, next_level, expected):
    prev = LineMetadata(indent_level=prev_level)
    next_line = LineMetadata(indent_level=next_level)
    assert LineMetadata.indent_level_increases_between(prev, next_line) is expected

"""
Unit tests for pdfcr/layout/wrapper.py - tab expansion, line splitting, wrapping
"""
import pytest
from pdfcr.layout.wrapper import expand_tabs, split_logical_lines, wrap_line, wrap_text


class TestExpandTabs:
    """Test expand_tabs."""

    def test_tab_becomes_fixed_spaces(self):
        """Each tab is replaced by exactly tab_width spaces."""
        assert expand_tabs("a\tb", 4) == "a    b"

    def test_tab_not_aligned_to_stops(self):
        """Tabs after text are not padded to the next stop."""
        assert expand_tabs("abc\td", 4) == "abc    d"

    def test_custom_width(self):
        assert expand_tabs("\t\tx", 2) == "    x"

    def test_zero_width_removes_tabs(self):
        assert expand_tabs("a\tb", 0) == "ab"

    def test_no_tabs_unchanged(self):
        assert expand_tabs("plain text", 8) == "plain text"


class TestSplitLogicalLines:
    """Test split_logical_lines."""

    def test_empty_text_has_no_lines(self):
        assert split_logical_lines("") == []

    def test_final_line_without_newline(self):
        assert split_logical_lines("a\nb") == ["a", "b"]

    def test_trailing_newline_adds_no_line(self):
        assert split_logical_lines("a\n") == ["a"]

    def test_blank_lines_kept(self):
        assert split_logical_lines("a\n\nb\n\n") == ["a", "", "b", ""]

    def test_single_newline(self):
        assert split_logical_lines("\n") == [""]

    def test_crlf(self):
        """Windows line endings don't leave carriage returns behind."""
        assert split_logical_lines("a\r\nb\r\n") == ["a", "b"]

    def test_lone_carriage_return_kept(self):
        """A carriage return not followed by a newline is part of the line."""
        assert split_logical_lines("abc\r") == ["abc\r"]
        assert split_logical_lines("a\r\nb\r") == ["a", "b\r"]


class TestWrapLine:
    """Test wrap_line."""

    def test_short_line_single_segment(self):
        assert wrap_line("def main():", 85) == ["def main():"]

    def test_empty_line_one_empty_segment(self):
        assert wrap_line("", 85) == [""]

    def test_whitespace_only_line_one_empty_segment(self):
        assert wrap_line("        ", 85) == [""]

    def test_breaks_at_last_whitespace(self):
        assert wrap_line("aaa bbb ccc", 7) == ["aaa bbb", "ccc"]

    def test_hard_break_without_whitespace(self):
        """A 200 character word is split into 85, 85 and 30."""
        segments = wrap_line("x" * 200, 85)
        assert [len(s) for s in segments] == [85, 85, 30]
        assert "".join(segments) == "x" * 200

    def test_long_word_starts_its_own_segment(self):
        """A word that doesn't fit is not used to fill the previous segment."""
        segments = wrap_line("ab " + "x" * 200, 85)
        assert segments[0] == "ab"
        assert [len(s) for s in segments] == [2, 85, 85, 30]

    def test_leading_indentation_kept(self):
        assert wrap_line("    return value", 85) == ["    return value"]

    @pytest.mark.parametrize("width", [1, 5, 13, 85])
    def test_segments_never_exceed_width(self, width):
        line = "the quick brown fox jumps over the lazy dog " * 5
        assert all(len(s) <= width for s in wrap_line(line, width))


class TestWrapText:
    """Test wrap_text."""

    def test_one_entry_per_logical_line(self):
        wrapped = list(wrap_text("one\n\nthree", 85, 4))
        assert wrapped == [["one"], [""], ["three"]]

    def test_tabs_expanded_before_wrapping(self):
        wrapped = list(wrap_text("\tx", 85, 4))
        assert wrapped == [["    x"]]

    def test_empty_text(self):
        assert list(wrap_text("", 85, 4)) == []

"""
Unit tests for pdfcr/render/builder.py - DocumentBuilder state machine
"""
import pytest
from pdfcr.contracts import LayoutConfig, Line, NewPage, RenderedLine, SourceUnit
from pdfcr.errors import RenderStateError
from pdfcr.layout import layout
from pdfcr.render import BuilderState, DocumentBuilder, render


class TestRender:
    """Test render() against a recording document."""

    def test_single_page_unit(self, cfg, font, recording_doc):
        render(layout(SourceUnit("src/a.py", "a\nb"), cfg), recording_doc, font)

        assert recording_doc.page_count == 1
        assert recording_doc.texts(0) == ["src/a.py", "0 a", "1 b"]
        assert recording_doc.bookmarks == [("src/a.py", 0)]

    def test_header_position(self, cfg, font, recording_doc):
        render(layout(SourceUnit("f", "x"), cfg), recording_doc, font)

        text, used_font, x, y = recording_doc.pages[0][0]
        assert text == "f"
        assert used_font == font
        assert (x, y) == (2.0, 259.0)

    def test_lines_placed_at_computed_positions(self, cfg, font, recording_doc):
        events = list(layout(SourceUnit("f", "a\nb"), cfg))
        render(events, recording_doc, font)

        placed = recording_doc.pages[0][1:]
        expected = [(e.line.text, font, e.line.x, e.line.y) for e in events if isinstance(e, Line)]
        assert placed == expected

    def test_page_then_header_then_bookmark(self, cfg, font, recording_doc):
        render(layout(SourceUnit("f", "a"), cfg), recording_doc, font)
        assert recording_doc.calls[:3] == ["add_page", "place_text", "add_bookmark"]

    def test_empty_unit_gets_header_only_page(self, cfg, font, recording_doc):
        render(layout(SourceUnit("empty.py", ""), cfg), recording_doc, font)

        assert recording_doc.page_count == 1
        assert recording_doc.texts(0) == ["empty.py"]
        assert recording_doc.bookmarks == [("empty.py", 0)]

    def test_continuation_pages_repeat_header_without_bookmark(self, font, recording_doc):
        cfg = LayoutConfig(page_height_lines=2)
        render(layout(SourceUnit("long.txt", "1\n2\n3\n4\n5"), cfg), recording_doc, font)

        assert recording_doc.page_count == 3
        for page in range(3):
            assert recording_doc.texts(page)[0] == "long.txt"
        assert recording_doc.texts(2) == ["long.txt", "4 5"]
        assert recording_doc.bookmarks == [("long.txt", 0)]

    def test_units_bookmark_their_own_first_page(self, font, recording_doc):
        cfg = LayoutConfig(page_height_lines=1)
        render(layout(SourceUnit("a", "1\n2"), cfg), recording_doc, font)
        render(layout(SourceUnit("b", "3"), cfg), recording_doc, font)

        assert recording_doc.page_count == 3
        assert recording_doc.bookmarks == [("a", 0), ("b", 2)]


class TestDocumentBuilder:
    """Test DocumentBuilder states and errors."""

    def test_states(self, cfg, font, recording_doc):
        builder = DocumentBuilder(recording_doc, font)
        assert builder.state is BuilderState.AWAITING_PAGE

        builder.render(layout(SourceUnit("f", "a\nb"), cfg))

        assert builder.state is BuilderState.DONE
        assert builder.pages_opened == 1
        assert builder.lines_drawn == 2

    def test_line_before_page_rejected(self, font, recording_doc):
        line = Line(RenderedLine(content="x", line_number=0, slot=1, y=250.0))
        with pytest.raises(RenderStateError):
            DocumentBuilder(recording_doc, font).render([line])

    def test_builder_is_single_use(self, font, recording_doc):
        builder = DocumentBuilder(recording_doc, font)
        builder.render([NewPage("a")])
        with pytest.raises(RenderStateError):
            builder.render([NewPage("b")])

    def test_unknown_event_rejected(self, font, recording_doc):
        with pytest.raises(RenderStateError):
            DocumentBuilder(recording_doc, font).render([NewPage("a"), "not an event"])

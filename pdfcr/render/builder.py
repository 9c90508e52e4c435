#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Document Builder

Applies one unit's page events to a document: opens pages, redraws the
file name header on each of them, bookmarks the first page and draws every
line at the position the layout engine computed.
"""

from enum import Enum
from typing import Iterable, Set

from config.constants import HEADER_BASELINE_MM, LEFT_MARGIN_MM
from config.logging_config import get_logger
from ..contracts import Line, NewPage, PageEvent
from ..errors import RenderStateError
from .base_document import BaseDocument, FontHandle

logger = get_logger(__name__)


class BuilderState(Enum):
    """Builder states for one event stream"""
    AWAITING_PAGE = "awaiting_page"
    PAGE_OPEN = "page_open"
    DONE = "done"


class DocumentBuilder:
    """
    Renders page events into a BaseDocument.

    One builder handles one event stream. The document is only appended to.

    Usage:
        builder = DocumentBuilder(doc, font)
        builder.render(layout(unit, cfg))
    """

    def __init__(self, doc: BaseDocument, font: FontHandle):
        self.doc = doc
        self.font = font
        self.state = BuilderState.AWAITING_PAGE
        self.pages_opened = 0
        self.lines_drawn = 0
        self._bookmarked: Set[str] = set()

    def render(self, events: Iterable[PageEvent]) -> None:
        """
        Apply every event in order.

        Raises:
            RenderStateError: If a Line arrives before any NewPage, or the
                builder has already finished a stream
        """
        if self.state is BuilderState.DONE:
            raise RenderStateError("Builder already rendered an event stream")

        for event in events:
            if isinstance(event, NewPage):
                self._open_page(event.unit_name)
            elif isinstance(event, Line):
                self._draw_line(event)
            else:
                raise RenderStateError(f"Unknown page event: {event!r}")

        self.state = BuilderState.DONE

    def _open_page(self, unit_name: str) -> None:
        page = self.doc.add_page()
        self.doc.place_text(unit_name, self.font, LEFT_MARGIN_MM, HEADER_BASELINE_MM)

        # Continuation pages get the header but not another bookmark
        if unit_name not in self._bookmarked:
            self.doc.add_bookmark(unit_name, page)
            self._bookmarked.add(unit_name)

        self.pages_opened += 1
        self.state = BuilderState.PAGE_OPEN

    def _draw_line(self, event: Line) -> None:
        if self.state is not BuilderState.PAGE_OPEN:
            raise RenderStateError("Line event received before any NewPage")
        line = event.line
        self.doc.place_text(line.text, self.font, line.x, line.y)
        self.lines_drawn += 1


def render(events: Iterable[PageEvent], doc: BaseDocument, font: FontHandle) -> None:
    """Render one unit's page events into doc"""
    builder = DocumentBuilder(doc, font)
    builder.render(events)
    logger.debug(f"Rendered {builder.lines_drawn} lines on {builder.pages_opened} pages")

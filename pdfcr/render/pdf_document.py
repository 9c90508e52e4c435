#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
PDF Document

ReportLab-backed BaseDocument. Pages are 200 x 264 mm, text is placed at
absolute millimetre coordinates and every bookmark becomes a top-level
outline entry.

Usage:
    doc = PdfDocument(title="My code")
    font = resolve_font(settings.font_name, settings.font_path, 11)
    render(layout(unit, cfg), doc, font)
    doc.save("code.pdf")
"""

import io
from pathlib import Path
from typing import List, Optional, Tuple, Union

from reportlab.lib.units import mm
from reportlab.pdfbase import pdfmetrics
from reportlab.pdfbase.ttfonts import TTFError, TTFont
from reportlab.pdfgen import canvas

from config.constants import (
    CUSTOM_FONT_NAME,
    DEFAULT_FONT_NAME,
    DEFAULT_TITLE,
    FONT_SIZE,
    PAGE_HEIGHT_MM,
    PAGE_WIDTH_MM,
    PDF_CREATOR,
    STANDARD_FONT_ENCODING,
)
from config.logging_config import get_logger
from ..errors import ConfigurationError, OutputWriteError, RenderStateError
from .base_document import BaseDocument, FontHandle

logger = get_logger(__name__)


def resolve_font(
    font_name: str = DEFAULT_FONT_NAME,
    font_path: Optional[Union[str, Path]] = None,
    size: float = FONT_SIZE,
) -> FontHandle:
    """
    Return a handle for the font text is drawn in.

    With font_path, the TrueType file is registered with ReportLab and
    embedded in the output. Otherwise font_name must be one of the
    standard PDF fonts (Courier, Helvetica, Times-Roman, ...). Those only
    cover the WinAnsi (cp1252) character set; sources in other scripts
    need a TrueType font_path.

    Raises:
        ConfigurationError: If the font cannot be loaded
    """
    if font_path:
        try:
            pdfmetrics.registerFont(TTFont(CUSTOM_FONT_NAME, str(font_path)))
        except (TTFError, OSError) as e:
            raise ConfigurationError(f"Font registration failed for {font_path}: {e}") from e
        logger.debug(f"Registered font {font_path} as {CUSTOM_FONT_NAME}")
        return FontHandle(CUSTOM_FONT_NAME, size)

    try:
        pdfmetrics.getFont(font_name)
    except KeyError as e:
        raise ConfigurationError(f"Unknown font: {font_name}") from e
    return FontHandle(font_name, size)


class PdfDocument(BaseDocument):
    """
    PDF output document.

    The whole PDF is built in memory and written to disk in save().
    """

    def __init__(
        self,
        title: str = DEFAULT_TITLE,
        author: str = "",
        page_size: Tuple[float, float] = (PAGE_WIDTH_MM, PAGE_HEIGHT_MM),
    ):
        """
        Args:
            title: Document title stored in the PDF metadata
            author: Document author stored in the PDF metadata
            page_size: (width, height) in millimetres
        """
        self.title = title
        self._buffer = io.BytesIO()
        self._canvas = canvas.Canvas(
            self._buffer,
            pagesize=(page_size[0] * mm, page_size[1] * mm),
        )
        self._canvas.setTitle(title)
        self._canvas.setCreator(PDF_CREATOR)
        if author:
            self._canvas.setAuthor(author)

        self._page_count = 0
        self._bookmarks: List[Tuple[str, int]] = []
        self._saved = False
        self._reported_missing_glyphs = False

    @property
    def page_count(self) -> int:
        return self._page_count

    @property
    def bookmarks(self) -> List[Tuple[str, int]]:
        return list(self._bookmarks)

    def add_page(self) -> int:
        self._check_open()
        # The canvas starts on a blank page; every later page closes the previous one
        if self._page_count > 0:
            self._canvas.showPage()
        self._page_count += 1
        return self._page_count - 1

    def place_text(self, text: str, font: FontHandle, x: float, y: float) -> None:
        self._check_open()
        if self._page_count == 0:
            raise RenderStateError("Cannot place text before the first page is added")
        self._check_encodable(text, font)
        self._canvas.setFont(font.name, font.size)
        self._canvas.drawString(x * mm, y * mm, text)

    def add_bookmark(self, label: str, page: int) -> None:
        self._check_open()
        # ReportLab can only bookmark the page currently being drawn
        if page != self._page_count - 1:
            raise RenderStateError(
                f"Bookmark '{label}' must target the current page "
                f"({self._page_count - 1}), got {page}"
            )
        key = f"unit-{len(self._bookmarks)}"
        self._canvas.bookmarkPage(key)
        self._canvas.addOutlineEntry(label, key, level=0)
        self._bookmarks.append((label, page))

    def save(self, output_path: Union[str, Path]) -> Path:
        """
        Serialize the document and write it to output_path.

        Returns:
            Path to the written file

        Raises:
            OutputWriteError: If the document is empty, already saved, or
                the file cannot be written or read back
        """
        if self._page_count == 0:
            raise OutputWriteError("Document has no pages")
        self._check_open()

        output = Path(output_path)
        if self._bookmarks:
            self._canvas.showOutline()
        # Canvas.save() drops a final page with nothing drawn on it
        self._canvas.showPage()
        self._canvas.save()
        self._saved = True
        data = self._buffer.getvalue()

        try:
            output.write_bytes(data)
        except PermissionError as e:
            raise OutputWriteError(f"Permission denied writing to {output}: {e}") from e
        except OSError as e:
            raise OutputWriteError(f"Could not write {output}: {e}") from e

        self._verify_pdf(output)
        logger.debug(f"Wrote {output} ({len(data) / 1024:.1f} KB, {self._page_count} pages)")
        return output

    def _check_open(self) -> None:
        if self._saved:
            raise OutputWriteError("Document has already been saved")

    def _check_encodable(self, text: str, font: FontHandle) -> None:
        """Warn once when a standard font has no glyphs for some of the text"""
        if self._reported_missing_glyphs or font.name == CUSTOM_FONT_NAME:
            return
        try:
            text.encode(STANDARD_FONT_ENCODING)
        except UnicodeEncodeError as e:
            self._reported_missing_glyphs = True
            logger.warning(
                f"{font.name} has no glyph for {text[e.start:e.end]!r}; "
                f"characters outside {STANDARD_FONT_ENCODING} render as blanks. "
                f"Use --font-path with a TrueType font that covers them"
            )

    def _verify_pdf(self, file_path: Path) -> None:
        """
        Verify the written PDF is readable and has every page

        Raises:
            OutputWriteError: If the PDF is corrupted or incomplete
        """
        from pypdf import PdfReader
        from pypdf.errors import PdfReadError

        try:
            reader = PdfReader(file_path)
            pages = len(reader.pages)
        except (PdfReadError, OSError) as e:
            raise OutputWriteError(f"Failed to verify PDF: {file_path}: {e}") from e

        if pages != self._page_count:
            raise OutputWriteError(
                f"PDF has {pages} pages, expected {self._page_count}: {file_path}"
            )

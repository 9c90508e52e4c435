#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
pdfcr - render source files into a paginated PDF

Usage:
    from pdfcr import LayoutConfig, SourceUnit, layout, render, PdfDocument, resolve_font

    doc = PdfDocument(title="code")
    font = resolve_font()
    render(layout(SourceUnit("main.py", text), LayoutConfig()), doc, font)
    doc.save("code.pdf")
"""

from .contracts import LayoutConfig, Line, NewPage, PageEvent, RenderedLine, SourceUnit
from .errors import (
    ConfigurationError,
    FileReadError,
    OutputWriteError,
    PdfcrError,
    RenderStateError,
)
from .layout import layout
from .render import BaseDocument, FontHandle, PdfDocument, render, resolve_font

__version__ = "1.0.0"

__all__ = [
    "LayoutConfig",
    "Line",
    "NewPage",
    "PageEvent",
    "RenderedLine",
    "SourceUnit",
    "ConfigurationError",
    "FileReadError",
    "OutputWriteError",
    "PdfcrError",
    "RenderStateError",
    "layout",
    "BaseDocument",
    "FontHandle",
    "PdfDocument",
    "render",
    "resolve_font",
]

#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Render Module

Materializes page events into an output document.
"""

from .base_document import BaseDocument, FontHandle
from .builder import BuilderState, DocumentBuilder, render
from .pdf_document import PdfDocument, resolve_font

__all__ = [
    "BaseDocument",
    "FontHandle",
    "BuilderState",
    "DocumentBuilder",
    "render",
    "PdfDocument",
    "resolve_font",
]

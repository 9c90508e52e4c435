#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
pdfcr exceptions

The layout engine itself never raises; these cover configuration, the
input/output collaborators and misuse of the document builder.
"""


class PdfcrError(Exception):
    """Base exception for pdfcr errors"""
    pass


class ConfigurationError(PdfcrError):
    """Layout or settings values that cannot produce a valid layout"""
    pass


class FileReadError(PdfcrError):
    """An input file could not be read as text"""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Could not read '{path}': {reason}")


class OutputWriteError(PdfcrError):
    """The output document could not be serialized or written"""
    pass


class RenderStateError(PdfcrError):
    """Page events arrived in an order the document builder cannot apply"""
    pass

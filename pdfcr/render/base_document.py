#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Base Document Interface

The capability set the document builder draws through. The builder only
appends pages, text and bookmarks; it never reads earlier pages back.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List, Tuple


@dataclass(frozen=True)
class FontHandle:
    """A font registered with the document, at the size text is drawn in"""
    name: str
    size: float


class BaseDocument(ABC):
    """
    Abstract base class for page-based output documents.

    All documents must implement:
    - add_page(): open a new page and return its 0-based index
    - place_text(): draw text on the current page
    - add_bookmark(): register a navigation entry for a page
    """

    @abstractmethod
    def add_page(self) -> int:
        """Open a new page after the current one and return its index"""
        pass

    @abstractmethod
    def place_text(self, text: str, font: FontHandle, x: float, y: float) -> None:
        """
        Draw text on the current page.

        Args:
            text: Text to draw, on one baseline
            font: Font and size
            x: Left edge in millimetres from the page's left side
            y: Baseline in millimetres from the page's bottom
        """
        pass

    @abstractmethod
    def add_bookmark(self, label: str, page: int) -> None:
        """Register an outline entry labelled label pointing at page"""
        pass

    @property
    @abstractmethod
    def page_count(self) -> int:
        """Number of pages opened so far"""
        pass

    @property
    @abstractmethod
    def bookmarks(self) -> List[Tuple[str, int]]:
        """(label, page index) pairs in registration order"""
        pass

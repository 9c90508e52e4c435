#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Layout Contracts

Types passed between file discovery, the layout engine and the document
builder:

- SourceUnit: one file's display name and text
- LayoutConfig: wrapping, paging and spacing options
- RenderedLine: one positioned piece of text
- NewPage / Line: the page events the layout engine emits

Usage:
    from pdfcr.contracts import SourceUnit, LayoutConfig
    from pdfcr.layout import layout

    cfg = LayoutConfig(wrap_width=80)
    for event in layout(SourceUnit("main.py", text), cfg):
        ...
"""

from dataclasses import dataclass
from typing import List, Optional, Union, TYPE_CHECKING

from config.constants import (
    FONT_SIZE,
    LEFT_MARGIN_MM,
    LINE_SPACING_DIVISOR,
    PAGE_HEIGHT_LINES,
    TAB_WIDTH,
    WRAP_WIDTH,
)
from .errors import ConfigurationError

if TYPE_CHECKING:
    from config.settings import Settings


@dataclass(frozen=True)
class SourceUnit:
    """A file's display name (usually its path) and full text"""
    name: str
    text: str


@dataclass(frozen=True)
class LayoutConfig:
    """
    Layout options for one run.

    line_spacing defaults to font_size / 2.1 when not given.
    """
    page_height_lines: int = PAGE_HEIGHT_LINES
    wrap_width: int = WRAP_WIDTH
    tab_width: int = TAB_WIDTH
    font_size: float = FONT_SIZE
    line_spacing: Optional[float] = None
    show_line_numbers: bool = True

    def __post_init__(self):
        if self.line_spacing is None:
            object.__setattr__(self, "line_spacing", self.font_size / LINE_SPACING_DIVISOR)

        errors = self.validate()
        if errors:
            raise ConfigurationError(f"Invalid layout configuration: {'; '.join(errors)}")

    def validate(self) -> List[str]:
        """Return a list of problems (empty if valid)"""
        errors = []
        if self.page_height_lines <= 0:
            errors.append(f"page_height_lines must be > 0, got {self.page_height_lines}")
        if self.wrap_width <= 0:
            errors.append(f"wrap_width must be > 0, got {self.wrap_width}")
        if self.tab_width < 0:
            errors.append(f"tab_width must be >= 0, got {self.tab_width}")
        if self.font_size <= 0:
            errors.append(f"font_size must be > 0, got {self.font_size}")
        if self.line_spacing is not None and self.line_spacing <= 0:
            errors.append(f"line_spacing must be > 0, got {self.line_spacing}")
        return errors

    @classmethod
    def from_settings(cls, settings: 'Settings') -> 'LayoutConfig':
        """Build a LayoutConfig from application settings"""
        return cls(
            page_height_lines=settings.page_height_lines,
            wrap_width=settings.wrap_width,
            tab_width=settings.tab_width,
            font_size=settings.font_size,
            show_line_numbers=settings.line_numbers,
        )


@dataclass(frozen=True)
class RenderedLine:
    """
    One wrapped segment placed on a page.

    label is the logical line number for the first segment of a line when
    line numbers are on, otherwise None. slot is 1-based within the page.
    """
    content: str
    line_number: int
    slot: int
    y: float
    label: Optional[str] = None
    first_on_page: bool = False
    x: float = LEFT_MARGIN_MM

    @property
    def text(self) -> str:
        """Text as drawn on the page"""
        if self.label is None:
            return self.content
        return f"{self.label} {self.content}"


@dataclass(frozen=True)
class NewPage:
    """Start a new page for the named unit"""
    unit_name: str


@dataclass(frozen=True)
class Line:
    """Draw a line on the current page"""
    line: RenderedLine


PageEvent = Union[NewPage, Line]

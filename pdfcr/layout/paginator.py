#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Paginator

Second layout phase: packs wrapped segments into fixed-height pages and
computes where each one is drawn.
"""

from typing import Iterable, Iterator, List

from config.constants import PAGE_HEIGHT_MM, LEFT_MARGIN_MM
from ..contracts import LayoutConfig, Line, NewPage, PageEvent, RenderedLine


def slot_y(slot: int, line_spacing: float) -> float:
    """Baseline of a body slot; slots pack downward from the top of the page"""
    return PAGE_HEIGHT_MM - line_spacing * slot - line_spacing


def paginate(
    unit_name: str,
    wrapped_lines: Iterable[List[str]],
    cfg: LayoutConfig,
) -> Iterator[PageEvent]:
    """
    Turn wrapped logical lines into page events.

    The first event is always NewPage, even with no lines. A page holds at
    most cfg.page_height_lines segments; the next segment opens a new page.
    Line numbers count logical lines, so every segment of a wrapped line
    shares one number and only the first segment is labelled.
    """
    yield NewPage(unit_name)

    slot = 0
    line_number = 0
    for segments in wrapped_lines:
        for index, segment in enumerate(segments):
            if slot >= cfg.page_height_lines:
                yield NewPage(unit_name)
                slot = 0
            slot += 1

            label = None
            if index == 0 and cfg.show_line_numbers:
                label = str(line_number)

            yield Line(RenderedLine(
                content=segment,
                line_number=line_number,
                slot=slot,
                y=slot_y(slot, cfg.line_spacing),
                label=label,
                first_on_page=slot == 1,
                x=LEFT_MARGIN_MM,
            ))
        line_number += 1

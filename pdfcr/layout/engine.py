#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Layout Engine

Composes the wrap and paginate phases. Pure: no I/O and no state outside a
single call, so units can be laid out in any order or in parallel.
"""

from typing import Iterator, List

from ..contracts import LayoutConfig, PageEvent, SourceUnit
from .paginator import paginate
from .wrapper import wrap_text


def layout(unit: SourceUnit, cfg: LayoutConfig) -> Iterator[PageEvent]:
    """
    Lay out one unit.

    Returns a single-pass iterator of NewPage / Line events. Never raises
    for any text.
    """
    return paginate(unit.name, wrap_text(unit.text, cfg.wrap_width, cfg.tab_width), cfg)


def layout_to_list(unit: SourceUnit, cfg: LayoutConfig) -> List[PageEvent]:
    """Materialize layout() so it can cross a thread boundary or be replayed"""
    return list(layout(unit, cfg))

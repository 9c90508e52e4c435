#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Layout Module

Text-to-geometry transformation: wrapping, pagination and placement.
"""

from .engine import layout, layout_to_list
from .paginator import paginate, slot_y
from .wrapper import expand_tabs, split_logical_lines, wrap_line, wrap_text

__all__ = [
    "layout",
    "layout_to_list",
    "paginate",
    "slot_y",
    "expand_tabs",
    "split_logical_lines",
    "wrap_line",
    "wrap_text",
]

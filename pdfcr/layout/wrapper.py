#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Line Wrapper

First layout phase: turns raw file text into logical lines, each split into
segments no wider than the wrap width.

Tabs are replaced by a fixed number of spaces before the text is split, not
expanded to tab stops.
"""

import textwrap
from typing import Iterator, List


def expand_tabs(text: str, tab_width: int) -> str:
    """Replace every tab with tab_width spaces"""
    return text.replace("\t", " " * tab_width)


def split_logical_lines(text: str) -> List[str]:
    """
    Split text on newlines.

    A trailing newline does not produce an extra empty line and a final line
    without one still counts. "\r\n" endings count as one newline; a "\r"
    that is not followed by "\n" stays in the line. Empty text has no lines.
    """
    lines = text.split("\n")
    last = lines.pop()
    lines = [line[:-1] if line.endswith("\r") else line for line in lines]
    if last:
        lines.append(last)
    return lines


def wrap_line(line: str, width: int) -> List[str]:
    """
    Greedy-wrap one logical line into segments of at most width characters.

    Breaks at the last whitespace that fits. A word longer than width gets
    lines of its own, cut every width characters, rather than filling the
    end of the previous line. Blank lines give one empty segment so they
    still take up a slot.
    """
    segments = []
    for segment in textwrap.wrap(line, width=width, break_long_words=False):
        if len(segment) <= width:
            segments.append(segment)
            continue
        segments.extend(segment[i:i + width] for i in range(0, len(segment), width))
    return segments or [""]


def wrap_text(text: str, wrap_width: int, tab_width: int) -> Iterator[List[str]]:
    """Yield the wrapped segments of each logical line, in order"""
    for line in split_logical_lines(expand_tabs(text, tab_width)):
        yield wrap_line(line, wrap_width)

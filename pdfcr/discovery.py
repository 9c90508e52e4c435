#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Source Discovery

Expands command-line inputs into files and loads them as SourceUnits.
Directories are walked depth-first with the entries of every directory
sorted by name, so the same tree always renders in the same order.
"""

import os
from pathlib import Path
from typing import Callable, Iterable, Iterator, Optional, Union

from config.logging_config import get_logger
from .contracts import SourceUnit
from .errors import FileReadError

logger = get_logger(__name__)

ErrorHandler = Callable[[FileReadError], None]


def walk_input(
    path: Union[str, Path],
    on_error: Optional[ErrorHandler] = None,
) -> Iterator[str]:
    """
    Yield every file under path, or path itself if it is a file.

    Yielded paths keep the input's spelling as a prefix (``src`` gives
    ``src/main.py``). Symlinked directories are not descended into.

    Args:
        path: File or directory
        on_error: Called with the error for a missing path or unlistable
            directory; the walk then continues with the next entry. Without
            it the error is raised.

    Raises:
        FileReadError: If path does not exist or a directory can't be
            listed, and no on_error handler is given
    """
    path = os.fspath(path)
    if not os.path.exists(path):
        _report(FileReadError(path, "No such file or directory"), on_error)
        return
    if not os.path.isdir(path):
        yield path
        return
    yield from _walk_dir(path, on_error)


def _walk_dir(directory: str, on_error: Optional[ErrorHandler]) -> Iterator[str]:
    try:
        with os.scandir(directory) as it:
            entries = sorted(it, key=lambda e: e.name)
    except OSError as e:
        _report(FileReadError(directory, e.strerror or str(e)), on_error)
        return

    for entry in entries:
        child = os.path.join(directory, entry.name)
        if entry.is_dir(follow_symlinks=False):
            yield from _walk_dir(child, on_error)
        elif entry.is_dir():
            logger.debug(f"Not following symlinked directory {child}")
        else:
            yield child


def _report(error: FileReadError, on_error: Optional[ErrorHandler]) -> None:
    if on_error is None:
        raise error
    on_error(error)


def discover(
    inputs: Iterable[Union[str, Path]],
    on_error: Optional[ErrorHandler] = None,
) -> Iterator[str]:
    """Yield the files of every input, inputs in the order given"""
    for item in inputs:
        yield from walk_input(item, on_error)


def load_unit(path: Union[str, Path]) -> SourceUnit:
    """
    Read a file as UTF-8 text.

    Raises:
        FileReadError: If the file can't be read or isn't valid UTF-8
    """
    name = os.fspath(path)
    try:
        data = Path(name).read_bytes()
    except OSError as e:
        raise FileReadError(name, e.strerror or str(e)) from e

    try:
        text = data.decode("utf-8")
    except UnicodeDecodeError as e:
        raise FileReadError(name, f"it is not valid UTF-8 text ({e.reason} at byte {e.start})") from e

    return SourceUnit(name=name, text=text)

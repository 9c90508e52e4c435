#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Settings - Centralized configuration management
"""

from pathlib import Path
from typing import Optional
from pydantic_settings import BaseSettings, SettingsConfigDict

from .constants import (
    DEFAULT_TITLE,
    DEFAULT_FONT_NAME,
    DEFAULT_WORKERS,
    FONT_SIZE,
    LOG_LEVEL,
    PAGE_HEIGHT_LINES,
    TAB_WIDTH,
    WRAP_WIDTH,
)


# Base directory
BASE_DIR = Path(__file__).resolve().parent.parent


class Settings(BaseSettings):
    """Application settings, read from PDFCR_* environment variables or .env"""

    model_config = SettingsConfigDict(
        env_prefix="PDFCR_",
        env_file=str(BASE_DIR / ".env"),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",  # Allow extra fields from .env that aren't defined in model
    )

    # ========== Document ==========
    title: str = DEFAULT_TITLE
    author: str = ""

    # ========== Layout ==========
    page_height_lines: int = PAGE_HEIGHT_LINES
    wrap_width: int = WRAP_WIDTH
    tab_width: int = TAB_WIDTH
    font_size: float = FONT_SIZE
    line_numbers: bool = True

    # ========== Font ==========
    font_name: str = DEFAULT_FONT_NAME
    font_path: Optional[Path] = None  # TrueType font to embed instead of font_name

    # ========== Input handling ==========
    stop_on_bad_file: bool = False  # abort instead of skipping unreadable files

    # ========== Performance ==========
    workers: int = DEFAULT_WORKERS
    show_progress: bool = False

    # ========== Logging ==========
    log_level: str = LOG_LEVEL
    log_file: Optional[Path] = None

    def summary(self) -> dict:
        """Settings that affect the rendered output, for debug logging"""
        return {
            "title": self.title,
            "page_height_lines": self.page_height_lines,
            "wrap_width": self.wrap_width,
            "tab_width": self.tab_width,
            "font_size": self.font_size,
            "line_numbers": self.line_numbers,
            "font": str(self.font_path) if self.font_path else self.font_name,
            "workers": self.workers,
        }

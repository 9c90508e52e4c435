"""
Pytest configuration and shared fixtures for pdfcr tests.
"""
import os
import sys
import pytest
import tempfile
import shutil
from pathlib import Path
from typing import Generator, List, Tuple

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from pdfcr.contracts import LayoutConfig
from pdfcr.render.base_document import BaseDocument, FontHandle


# ============================================================================
# Recording document
# ============================================================================

class RecordingDocument(BaseDocument):
    """In-memory BaseDocument that records every call."""

    def __init__(self):
        self.pages: List[List[Tuple[str, FontHandle, float, float]]] = []
        self._bookmarks: List[Tuple[str, int]] = []
        self.calls: List[str] = []

    def add_page(self) -> int:
        self.pages.append([])
        self.calls.append("add_page")
        return len(self.pages) - 1

    def place_text(self, text, font, x, y) -> None:
        self.pages[-1].append((text, font, x, y))
        self.calls.append("place_text")

    def add_bookmark(self, label, page) -> None:
        self._bookmarks.append((label, page))
        self.calls.append("add_bookmark")

    @property
    def page_count(self) -> int:
        return len(self.pages)

    @property
    def bookmarks(self):
        return list(self._bookmarks)

    def texts(self, page: int) -> List[str]:
        return [item[0] for item in self.pages[page]]


# ============================================================================
# Fixtures: Configuration
# ============================================================================

@pytest.fixture
def cfg() -> LayoutConfig:
    """Default layout configuration."""
    return LayoutConfig()


@pytest.fixture
def font() -> FontHandle:
    """Built-in monospaced font at the default size."""
    return FontHandle("Courier", 11.0)


@pytest.fixture
def recording_doc() -> RecordingDocument:
    """Fresh recording document."""
    return RecordingDocument()


@pytest.fixture
def document_factory():
    """Factory for extra recording documents."""
    return RecordingDocument


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep PDFCR_* variables from the developer's shell out of tests."""
    for key in list(os.environ):
        if key.upper().startswith("PDFCR_"):
            monkeypatch.delenv(key, raising=False)


# ============================================================================
# Fixtures: Files
# ============================================================================

@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for test files."""
    temp_path = Path(tempfile.mkdtemp())
    yield temp_path
    shutil.rmtree(temp_path, ignore_errors=True)


@pytest.fixture
def source_tree(temp_dir: Path) -> Path:
    """
    A small project:

        project/
            b.py
            a.txt
            pkg/
                mod.py
                empty.py
            z_binary.bin   (not UTF-8)
    """
    root = temp_dir / "project"
    (root / "pkg").mkdir(parents=True)
    (root / "b.py").write_text("print('b')\n", encoding="utf-8")
    (root / "a.txt").write_text("alpha\n\tbeta\n", encoding="utf-8")
    (root / "pkg" / "mod.py").write_text("def f():\n    return 1\n", encoding="utf-8")
    (root / "pkg" / "empty.py").write_text("", encoding="utf-8")
    (root / "z_binary.bin").write_bytes(b"\x89PNG\r\n\x1a\n\xff\xfe\x00\x00")
    return root

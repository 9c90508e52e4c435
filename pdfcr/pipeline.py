#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Render Pipeline

discover files -> load -> lay out -> render into one document -> save

Layout is pure and may run on a thread pool; results are always applied to
the document in discovery order, so page order and bookmark targets do not
depend on the number of workers.

Usage:
    pipeline = RenderPipeline(Settings(title="My code"))
    report = pipeline.run(["src", "setup.py"], "code.pdf")
"""

from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Iterable, Iterator, List, Optional, Sequence, Union

from tqdm import tqdm

from config.logging_config import get_logger
from config.settings import Settings
from .contracts import LayoutConfig, PageEvent, SourceUnit
from .discovery import discover, load_unit
from .errors import FileReadError
from .layout import layout, layout_to_list
from .render import BaseDocument, DocumentBuilder, FontHandle, PdfDocument, resolve_font

logger = get_logger(__name__)


class BadFilePolicy(Enum):
    """What to do with an input that can't be read as text"""
    SKIP = "skip"     # log and continue
    ABORT = "abort"   # log and stop before anything is saved


@dataclass
class RenderReport:
    """Outcome of a pipeline run"""
    rendered: List[str] = field(default_factory=list)
    skipped: List[str] = field(default_factory=list)
    pages: int = 0
    output_path: Optional[Path] = None


def layout_units(
    units: Sequence[SourceUnit],
    cfg: LayoutConfig,
    workers: int = 1,
) -> Iterator[Iterable[PageEvent]]:
    """
    Lay out units, yielding each unit's events in input order.

    With workers > 1 the layouts are computed on a thread pool and
    materialized as lists; with one worker they are lazy generators.
    """
    if workers <= 1 or len(units) <= 1:
        for unit in units:
            yield layout(unit, cfg)
        return

    with ThreadPoolExecutor(max_workers=workers) as executor:
        # map() yields in submission order regardless of completion order
        yield from executor.map(lambda unit: layout_to_list(unit, cfg), units)


class RenderPipeline:
    """Renders source files into a single document"""

    def __init__(
        self,
        settings: Optional[Settings] = None,
        policy: Optional[BadFilePolicy] = None,
        font: Optional[FontHandle] = None,
    ):
        """
        Args:
            settings: Application settings (defaults from environment)
            policy: Bad-file policy; derived from settings.stop_on_bad_file
                when not given
            font: Font handle; resolved from settings when not given

        Raises:
            ConfigurationError: If the layout settings or font are invalid
        """
        self.settings = settings or Settings()
        self.config = LayoutConfig.from_settings(self.settings)
        if policy is None:
            policy = BadFilePolicy.ABORT if self.settings.stop_on_bad_file else BadFilePolicy.SKIP
        self.policy = policy
        self.font = font or resolve_font(
            self.settings.font_name,
            self.settings.font_path,
            self.config.font_size,
        )
        self._report = RenderReport()

    def collect_units(self, inputs: Iterable[Union[str, Path]]) -> List[SourceUnit]:
        """
        Discover and load every input file.

        Raises:
            FileReadError: Under BadFilePolicy.ABORT, for the first bad input
        """
        units = []
        for path in discover(inputs, on_error=self._handle_bad_file):
            try:
                units.append(load_unit(path))
            except FileReadError as e:
                self._handle_bad_file(e)
        return units

    def render_to(self, inputs: Iterable[Union[str, Path]], doc: BaseDocument) -> RenderReport:
        """
        Render every input file into doc, in discovery order.

        Raises:
            FileReadError: Under BadFilePolicy.ABORT; nothing has been
                rendered into doc when this is raised
        """
        self._report = RenderReport()
        units = self.collect_units(inputs)
        logger.debug(f"Laying out {len(units)} files with {self.settings.workers} worker(s)")

        layouts = layout_units(units, self.config, self.settings.workers)
        progress = tqdm(total=len(units), desc="Rendering", unit="file",
                        disable=not self.settings.show_progress)
        try:
            for unit, events in zip(units, layouts):
                DocumentBuilder(doc, self.font).render(events)
                self._report.rendered.append(unit.name)
                logger.info(f"Rendered: {unit.name}")
                progress.update(1)
        finally:
            progress.close()

        self._report.pages = doc.page_count
        return self._report

    def run(self, inputs: Iterable[Union[str, Path]], output_path: Union[str, Path]) -> RenderReport:
        """
        Render inputs into a new PDF and save it to output_path.

        Raises:
            FileReadError: Under BadFilePolicy.ABORT
            OutputWriteError: If the PDF can't be saved
        """
        logger.debug(f"Settings: {self.settings.summary()}")
        doc = PdfDocument(title=self.settings.title, author=self.settings.author)
        report = self.render_to(inputs, doc)

        logger.info("saving document...")
        report.output_path = doc.save(output_path)
        logger.info(f"Saved into: {report.output_path}")
        return report

    def _handle_bad_file(self, error: FileReadError) -> None:
        if self.policy is BadFilePolicy.ABORT:
            logger.error(f"Could not render file '{error.path}' because {error.reason}, aborting")
            raise error
        logger.warning(f"Could not render file '{error.path}' because {error.reason}, skipping it")
        self._report.skipped.append(error.path)

"""Generation pipeline: read -> parse all sections -> write all sections"""

import asyncio
import logging
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Optional

from txtventure.config import Settings
from txtventure.core.art import read_art
from txtventure.core.models import Section, WriteReport
from txtventure.core.paths import PathMapping, PathResolver, build_mapping
from txtventure.core.sections import parse_section
from txtventure.core.split import split_text
from txtventure.core.writer import write_sections


logger = logging.getLogger(__name__)


class GenerationError(RuntimeError):
    """The source document could not be read; nothing was parsed or written."""


class Generator:
    """Split one document into linked plain-text rooms and write them out.

    Settings are taken once at construction; each generate() call is an
    independent run. The parsed sections are always returned, whatever
    happens while writing; the write outcome is logged and kept on
    `last_report`.
    """

    def __init__(self, settings: Settings, mapping: Optional[PathMapping] = None) -> None:
        self.settings = settings
        self.resolver = PathResolver(
            hostname=settings.hostname,
            destination=settings.destination,
            base_path=settings.base_path,
            mapping=mapping or build_mapping(settings.path_map),
            verbose=settings.logging,
        )
        self.last_report: Optional[WriteReport] = None

    def _log(self, msg: str, *args, level: int = logging.INFO) -> None:
        if self.settings.logging:
            logger.log(level, msg, *args)

    # --- read ---

    def read(self, text: Optional[str] = None, filename: Optional[str] = None, encoding: Optional[str] = None) -> str:
        """Return the supplied text, else the contents of filename (falls back to settings)."""
        if text:
            return text
        filename = filename or self.settings.filename
        if not filename:
            raise GenerationError("No source text or filename given")
        self._log("Reading file '%s'...", filename)
        try:
            return Path(filename).read_text(encoding=encoding or self.settings.encoding)
        except (OSError, UnicodeDecodeError, LookupError) as e:
            raise GenerationError(f"Failed to read {filename}: {e}") from e

    # --- parse ---

    def art_for(self, section_id: str) -> Optional[str]:
        art = read_art(section_id, self.settings.art_path)
        if art:
            self._log("  Found art for '%s'!", section_id)
        return art

    def parse_all(self, text: str) -> list[Section]:
        """Split text and parse every block, preserving document order."""
        sections = [
            parse_section(block, self.resolver.url_for, self.resolver.filename_for, art=self.art_for)
            for block in split_text(text)
        ]
        self._log("[%d sections parsed]", len(sections))
        return sections

    # --- write ---

    async def awrite_all(self, sections: list[Section]) -> WriteReport:
        self._log("Writing files...")
        report = await write_sections(sections)
        for outcome in report.outcomes:
            if outcome.ok:
                self._log("  Wrote %s", outcome.path)
            else:
                self._log("  Error writing '%s' to %s: %s", outcome.section_id, outcome.path,
                          outcome.error, level=logging.ERROR)
        if report.ok:
            self._log("[%d files written]", report.written)
        else:
            self._log("[%d files written, %d failed]", report.written, report.failed, level=logging.ERROR)
        self.last_report = report
        return report

    def write_all(self, sections: list[Section]) -> WriteReport:
        """Run the concurrent write phase to completion and return its settled report.

        Safe to call from inside a running event loop: the phase then gets its
        own loop on a worker thread. Async callers can await awrite_all instead.
        """
        try:
            asyncio.get_running_loop()
        except RuntimeError:
            return asyncio.run(self.awrite_all(sections))
        with ThreadPoolExecutor(max_workers=1) as pool:
            return pool.submit(asyncio.run, self.awrite_all(sections)).result()

    # --- run ---

    def generate(
        self,
        text: Optional[str] = None,
        filename: Optional[str] = None,
        encoding: Optional[str] = None,
        write: bool = True,
        ) -> list[Section]:
        """Read, parse and (optionally) write; returns the parsed sections in document order."""
        self._log("Generating Textventure...")
        self.last_report = None
        sections = self.parse_all(self.read(text, filename, encoding))
        if write:
            self.write_all(sections)
        else:
            self._log("Parsing complete.")
        return sections

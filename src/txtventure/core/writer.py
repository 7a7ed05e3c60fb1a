"""Section writer: per-file writes and the concurrent settle-all write phase"""

import asyncio
import os
from pathlib import Path
from typing import Iterable, Optional

from txtventure.core.models import Section, WriteOutcome, WriteReport


FILE_MODE = 0o644


def write_section(section: Section, encoding: str = 'utf-8') -> Optional[Path]:
    """Write section.body to its destination; None (and no I/O) when it has none."""
    if not section.destination_path:
        return None
    path = Path(section.destination_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(section.body, encoding=encoding)
    os.chmod(path, FILE_MODE)
    return path


async def write_sections(sections: Iterable[Section], encoding: str = 'utf-8') -> WriteReport:
    """Write every section with a destination concurrently and wait for all to settle.

    One failure never cancels or hides the others; each dispatched write gets
    its own WriteOutcome in the report, in section order.
    """
    pending = [s for s in sections if s.destination_path]
    results = await asyncio.gather(
        *(asyncio.to_thread(write_section, s, encoding) for s in pending),
        return_exceptions=True,
    )

    report = WriteReport()
    for section, result in zip(pending, results):
        error = result if isinstance(result, BaseException) else None
        report.outcomes.append(WriteOutcome(section.id, Path(section.destination_path), error))
    return report

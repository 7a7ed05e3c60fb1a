"""ASCII art lookup by section id"""

from pathlib import Path
from typing import Optional


def read_art(section_id: str, art_path: str, encoding: str = 'utf-8') -> Optional[str]:
    """Return the text of art_path/<id>.txt, or None when there is no art for the id.

    A missing or unreadable file is the normal case and yields None; decode
    errors and other I/O failures propagate.
    """
    if not art_path or not section_id:
        return None
    try:
        return (Path(art_path) / f"{section_id}.txt").read_text(encoding=encoding)
    except (FileNotFoundError, NotADirectoryError, IsADirectoryError, PermissionError):
        return None

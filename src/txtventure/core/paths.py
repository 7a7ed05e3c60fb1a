"""Path mapping strategies and URL / filename resolution for section ids"""

import logging
import re
from dataclasses import dataclass, field
from pathlib import Path, PurePosixPath
from typing import Callable, Optional, Protocol, Union
from urllib.parse import urljoin


logger = logging.getLogger(__name__)

SCHEME_RE = re.compile(r'^(?:f|ht)tps?://', re.IGNORECASE)
DEFAULT_KEY = 'default'

PathFunc = Callable[[str, str], str]
TableEntry = Union[PathFunc, str]


def default_path_mapping(section_id: str, destination: str) -> str:
    """destination/<id>.txt, joined with forward slashes so it is also a URL path."""
    return str(PurePosixPath(destination) / f"{section_id}.txt")


def _from_template(template: str) -> PathFunc:
    """Wrap a '{destination}/{id}.txt' style string as a path function."""
    return lambda section_id, destination: template.format(id=section_id, destination=destination)


class PathMapping(Protocol):
    """Anything that picks the path function for a section id."""

    def resolve(self, section_id: str) -> PathFunc: ...


@dataclass(frozen=True)
class UniformMapping:
    """One path function applied to every id."""
    func: PathFunc = default_path_mapping

    def resolve(self, section_id: str) -> PathFunc:
        return self.func


@dataclass(frozen=True)
class TableMapping:
    """Per-id overrides with a fallback for ids that have no entry.

    Entries are path functions or template strings; a "default" entry doubles
    as the fallback when no explicit default is given.
    """
    entries: dict[str, TableEntry] = field(default_factory=dict)
    default: Optional[TableEntry] = None

    def resolve(self, section_id: str) -> PathFunc:
        entry = self.entries.get(section_id)
        if entry is None:
            entry = self.default if self.default is not None else self.entries.get(DEFAULT_KEY)
        if entry is None:
            return default_path_mapping
        return _from_template(entry) if isinstance(entry, str) else entry


def build_mapping(path_map: Optional[dict[str, TableEntry]] = None) -> PathMapping:
    """Choose the mapping variant for a configured path_map (empty -> uniform default)."""
    if not path_map:
        return UniformMapping()
    return TableMapping(entries=dict(path_map))


def normalize_hostname(hostname: str) -> str:
    """Prefix http:// unless the hostname already carries an http(s)/ftp(s) scheme."""
    if not SCHEME_RE.match(hostname):
        return f"http://{hostname}"
    return hostname


class PathResolver:
    """Resolve section ids to public URLs and on-disk filenames through one mapping."""

    def __init__(
        self,
        hostname: str,
        destination: str = '',
        base_path: str = '',
        mapping: Optional[PathMapping] = None,
        verbose: bool = False,
        ) -> None:
        self.hostname = normalize_hostname(hostname)
        self.destination = destination
        self.base_path = base_path
        self.mapping = mapping or UniformMapping()
        self.verbose = verbose

    def fragment(self, section_id: str) -> str:
        return self.mapping.resolve(section_id)(section_id, self.destination)

    def url_for(self, section_id: str) -> str:
        url = urljoin(self.hostname, self.fragment(section_id))
        if self.verbose:
            logger.info("  Section '%s' will link to '%s'", section_id, url)
        return url

    def filename_for(self, section_id: str) -> str:
        if not section_id:
            return ''
        # A root-relative fragment ("/humans.txt") still lands under base_path.
        filename = str(Path(self.base_path, self.fragment(section_id).lstrip('/')))
        if self.verbose:
            logger.info("  Section '%s' will be written to '%s'", section_id, filename)
        return filename

"""Data models for parsed sections and write results"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ConfigDict


class Section(BaseModel):
    """One parsed room of the narrative."""
    model_config = ConfigDict(frozen=True)

    id: str                     # normalized header id; "" when the block has no header
    destination_path: str       # "" means the section is not written
    body: str                   # links resolved, trimmed, single trailing newline


@dataclass
class WriteOutcome:
    """Result of one dispatched write."""
    section_id:  str
    path:        Path
    error:       Optional[BaseException] = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass
class WriteReport:
    """Settled outcomes of a Write-All phase, one entry per dispatched write."""
    outcomes: list[WriteOutcome] = field(default_factory=list)

    @property
    def written(self) -> int:
        return sum(1 for o in self.outcomes if o.ok)

    @property
    def failed(self) -> int:
        return len(self.outcomes) - self.written

    @property
    def ok(self) -> bool:
        return self.failed == 0

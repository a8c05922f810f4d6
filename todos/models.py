"""Central data models for the TODO scanner using Pydantic.

Keeping every report shape in one module avoids circular imports between the
tracker, the report renderer and the CLI.
"""

import time
from typing import Dict, List

from pydantic import BaseModel, ConfigDict, Field, computed_field


# --- Core models -----------------------------------------------------------

class CommentRecord(BaseModel):
    """A comment block tagged with the file it came from."""

    model_config = ConfigDict(frozen=True)

    file_path: str
    starting_line: int
    text: str

    @computed_field  # type: ignore[misc]
    @property
    def location(self) -> str:
        return f"line {self.starting_line}"


# --- Report models ---------------------------------------------------------

class ReportMetadata(BaseModel):
    report_version: str = "1.0"
    timestamp: str = Field(default_factory=lambda: time.strftime("%Y-%m-%dT%H:%M:%SZ"))
    root: str
    files_scanned: int = 0
    scan_duration_seconds: float = 0.0


class LabelGroup(BaseModel):
    label: str
    count: int = 0
    comments: List[CommentRecord] = Field(default_factory=list)


class ScanSummary(BaseModel):
    counts: Dict[str, int] = Field(default_factory=dict)
    total: int = 0


class TodoReport(BaseModel):
    metadata: ReportMetadata
    groups: List[LabelGroup] = Field(default_factory=list)
    summary: ScanSummary = Field(default_factory=ScanSummary)


__all__ = [
    "CommentRecord",
    "ReportMetadata",
    "LabelGroup",
    "ScanSummary",
    "TodoReport",
]

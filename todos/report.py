"""Rendering of the accumulated label index.

Two formats are supported: the plain-text listing printed by default and a
JSON document built from :class:`~todos.models.TodoReport`.
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, List

from .extractor import split_lines
from .models import (
    CommentRecord,
    LabelGroup,
    ReportMetadata,
    ScanSummary,
    TodoReport,
)
from .tracker import LabelTracker

__all__ = ["build_report", "render_text", "summarize"]


def summarize(index: Dict[str, List[CommentRecord]]) -> ScanSummary:
    """Return per-label counts plus the grand total across all labels."""
    counts = {label: len(records) for label, records in sorted(index.items())}
    return ScanSummary(counts=counts, total=sum(counts.values()))


def build_report(
    tracker: LabelTracker,
    *,
    root: Path,
    files_scanned: int = 0,
    duration: float = 0.0,
) -> TodoReport:
    index = tracker.labels()
    groups = [
        LabelGroup(label=label, count=len(records), comments=records)
        for label, records in index.items()
    ]
    metadata = ReportMetadata(
        root=str(root),
        files_scanned=files_scanned,
        scan_duration_seconds=round(duration, 2),
    )
    return TodoReport(metadata=metadata, groups=groups, summary=summarize(index))


def render_text(index: Dict[str, List[CommentRecord]]) -> str:
    """Render *index* as the grouped listing followed by a summary."""

    out: List[str] = []
    for label, records in sorted(index.items()):
        out.append(f'comments with "{label}": {len(records)}')
        for record in records:
            out.append(
                f'  found "{label}" in file {record.file_path} {record.location}'
            )
            out.extend(f"    {line}" for line in split_lines(record.text))
            out.append("")

    summary = summarize(index)
    out.append("SUMMARY:")
    out.append("")
    for label, count in summary.counts.items():
        out.append(f'comments with "{label}": {count}')
    out.append(f"total comments found: {summary.total}")
    return "\n".join(out) + "\n"

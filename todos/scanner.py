"""Per-file entry point: read a source file and feed its comments to a tracker.

Failures are contained at the granularity of one walk entry or one file: they
are raised as :class:`~todos.errors.RecoverableTraversalError` or
:class:`~todos.errors.RecoverableFileError` and :func:`scan_tree` turns them
into warnings before moving on to the next entry.
"""

from __future__ import annotations

import logging
import stat
from pathlib import Path
from typing import Iterable, Sequence, Tuple, Union

from .errors import RecoverableFileError, RecoverableTraversalError, TodosError
from .extractor import extract_comments
from .tracker import LabelTracker
from .walk import DEFAULT_SKIP_ROOT_DIRS, WalkEntry, walk_tree

logger = logging.getLogger(__name__)

DEFAULT_EXTENSIONS = (".rs",)

__all__ = [
    "DEFAULT_EXTENSIONS",
    "normalize_extensions",
    "process_entry",
    "process_file",
    "scan_sources",
    "scan_tree",
]


def normalize_extensions(extensions: Iterable[str]) -> Tuple[str, ...]:
    """Return *extensions* with a leading dot, e.g. ``rs`` -> ``.rs``."""
    return tuple(
        ext.strip() if ext.strip().startswith(".") else f".{ext.strip()}"
        for ext in extensions
        if ext.strip()
    )


def scan_sources(
    tracker: LabelTracker, sources: Iterable[Tuple[Union[str, Path], str]]
) -> None:
    """Feed already-read ``(path, text)`` pairs to *tracker*, in order."""
    for path, contents in sources:
        for block in extract_comments(contents, source=str(path)):
            tracker.observe(block.text, str(path), block.starting_line)


def process_file(
    tracker: LabelTracker,
    path: Path,
    extensions: Sequence[str] = DEFAULT_EXTENSIONS,
) -> bool:
    """Scan one file.  Returns ``True`` if the file was read.

    Files with other suffixes and anything that is not a regular file are
    skipped silently.
    """

    if path.suffix not in extensions:
        return False

    try:
        metadata = path.stat()
    except OSError as exc:
        raise RecoverableFileError("metadata for", path, exc) from exc
    if not stat.S_ISREG(metadata.st_mode):
        return False

    logger.debug("reading %s", path)
    try:
        with path.open("r", encoding="utf-8") as fp:
            contents = fp.read()
    except UnicodeDecodeError as exc:
        raise RecoverableFileError("read", path, exc) from exc
    except OSError as exc:
        raise RecoverableFileError("open", path, exc) from exc

    scan_sources(tracker, [(path, contents)])
    return True


def process_entry(
    tracker: LabelTracker,
    entry: WalkEntry,
    extensions: Sequence[str] = DEFAULT_EXTENSIONS,
) -> bool:
    if entry.error is not None:
        filename = getattr(entry.error, "filename", None)
        raise RecoverableTraversalError(
            entry.error, Path(filename) if filename else None
        )
    if entry.path is None:
        return False
    return process_file(tracker, entry.path, extensions)


def scan_tree(
    root_path: Path,
    tracker: LabelTracker,
    *,
    extensions: Sequence[str] = DEFAULT_EXTENSIONS,
    skip_root_dirs: Sequence[str] = DEFAULT_SKIP_ROOT_DIRS,
    respect_gitignore: bool = False,
) -> int:
    """Walk *root_path* and record every TODO-like comment in *tracker*.

    Returns the number of files that were actually read.  Per-entry failures
    are logged as warnings and never abort the scan.
    """

    extensions = normalize_extensions(extensions)
    scanned = 0
    for entry in walk_tree(
        root_path,
        skip_root_dirs=skip_root_dirs,
        respect_gitignore=respect_gitignore,
    ):
        try:
            if process_entry(tracker, entry, extensions):
                scanned += 1
        except TodosError as exc:
            logger.warning("%s", exc)
    return scanned

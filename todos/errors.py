"""Exception hierarchy for the TODO scanner.

Errors are raised at the granularity of a single walk entry or file and are
converted into warnings by :func:`todos.scanner.scan_tree`.  Command-line
usage errors are left to typer.
"""

from pathlib import Path
from typing import Optional


class TodosError(Exception):
    """Base class for every error raised by this package."""


class RecoverableTraversalError(TodosError):
    """A directory-walk entry could not be resolved."""

    def __init__(self, cause: OSError, path: Optional[Path] = None):
        self.cause = cause
        self.path = path
        where = f" at {str(path)!r}" if path is not None else ""
        super().__init__(f"walking tree{where}: {cause}")


class RecoverableFileError(TodosError):
    """A candidate file could not be opened, stat'ed or read as text."""

    def __init__(self, action: str, path: Path, cause: Exception):
        self.action = action
        self.path = path
        self.cause = cause
        super().__init__(f"{action} {str(path)!r}: {cause}")


__all__ = [
    "TodosError",
    "RecoverableTraversalError",
    "RecoverableFileError",
]

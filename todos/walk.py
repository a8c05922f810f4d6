import logging
import os
from pathlib import Path
from typing import Callable, Iterator, List, NamedTuple, Optional, Sequence

from gitignore_parser import parse_gitignore

logger = logging.getLogger(__name__)

# Build output directories directly under the root are never scanned.
DEFAULT_SKIP_ROOT_DIRS = ("target",)

__all__ = ["WalkEntry", "walk_tree", "DEFAULT_SKIP_ROOT_DIRS"]


class WalkEntry(NamedTuple):
    """One item produced by :func:`walk_tree`: either a path or an error."""

    path: Optional[Path]
    error: Optional[OSError] = None


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _compile_ignore(root: Path) -> Callable[[str], bool]:
    """Return a callable that determines whether a path is gitignored."""

    gitignore = Path(os.path.abspath(root)) / ".gitignore"
    if gitignore.is_file():
        try:
            return parse_gitignore(str(gitignore))
        except OSError as exc:
            logger.warning("could not read %s: %s", gitignore, exc)
    return lambda _p: False


def _skip_at_root(name: str, skip_root_dirs: Sequence[str], path: Path) -> bool:
    if name in skip_root_dirs:
        logger.info('skipping "%s" (looks like "%s" directory)', path, name)
        return True
    return False


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def walk_tree(
    root_path: Path,
    *,
    skip_root_dirs: Sequence[str] = DEFAULT_SKIP_ROOT_DIRS,
    respect_gitignore: bool = False,
) -> Iterator[WalkEntry]:
    """Yield every file below *root_path* in a deterministic order.

    Symlinked directories are not followed.  Entries at depth 1 whose name is
    in *skip_root_dirs* are skipped; the same names deeper in the tree are
    walked normally.  Directories that cannot be listed are reported as
    :class:`WalkEntry` items carrying the ``OSError`` and the walk carries on.
    """

    root_path = Path(root_path)
    if not root_path.is_dir():
        # A single file (or a broken path) is its own tree.
        yield WalkEntry(root_path)
        return

    is_ignored = _compile_ignore(root_path) if respect_gitignore else (lambda _p: False)
    errors: List[OSError] = []

    for dirpath_str, dirnames, filenames in os.walk(
        root_path, topdown=True, onerror=errors.append, followlinks=False
    ):
        while errors:
            yield WalkEntry(None, errors.pop(0))

        current_dir = Path(dirpath_str)
        at_root = current_dir == root_path

        # Prune in place so os.walk never descends into skipped directories.
        dirnames[:] = sorted(
            d for d in dirnames
            if not (at_root and _skip_at_root(d, skip_root_dirs, current_dir / d))
            and not is_ignored(os.path.abspath(current_dir / d))
        )

        for f_name in sorted(filenames):
            file_path = current_dir / f_name
            if at_root and _skip_at_root(f_name, skip_root_dirs, file_path):
                continue
            if is_ignored(os.path.abspath(file_path)):
                continue
            yield WalkEntry(file_path)

    while errors:
        yield WalkEntry(None, errors.pop(0))

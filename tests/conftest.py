"""Pytest configuration: local package import plus shared fixtures."""

import sys
from pathlib import Path
from typing import Callable, Dict

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    # Prepend so it has priority over any globally installed package version
    sys.path.insert(0, str(PROJECT_ROOT))


@pytest.fixture
def make_tree(tmp_path: Path) -> Callable[[Dict[str, str]], Path]:
    """Create files from a ``{relative_path: contents}`` mapping under tmp_path."""

    def _make(files: Dict[str, str]) -> Path:
        for rel, contents in files.items():
            target = tmp_path / rel
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(contents)
        return tmp_path

    return _make

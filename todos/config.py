"""Configuration loading and merging utilities for the TODO scanner.

Per-repository defaults live in a `.todos.yaml` file placed at the root of
the tree being scanned.  The `scan` section accepts the same settings as the
command line::

    scan:
      extensions: [".rs", ".c"]
      markers: ["TODO", "FIXME", "XXX", "HACK"]
      skip_root_dirs: ["target"]
      respect_gitignore: false

Command-line values always take precedence over the configuration file, which
in turn takes precedence over the built-in defaults.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from .scanner import DEFAULT_EXTENSIONS, normalize_extensions
from .tracker import DEFAULT_MARKERS
from .walk import DEFAULT_SKIP_ROOT_DIRS

logger = logging.getLogger(__name__)

CONFIG_FILENAME = ".todos.yaml"


def load_config(repo_path: Path) -> Dict[str, Any]:
    """Load `.todos.yaml` from *repo_path*.

    A missing file yields an empty ``dict``.  An unreadable or malformed file
    is reported as a warning and also yields an empty ``dict``; configuration
    never stops a scan.
    """
    repo_path = Path(repo_path)
    if repo_path.is_file():
        repo_path = repo_path.parent
    config_file = repo_path / CONFIG_FILENAME
    if not config_file.is_file():
        return {}

    try:
        with config_file.open("r", encoding="utf-8") as fp:
            data = yaml.safe_load(fp) or {}
    except (yaml.YAMLError, OSError) as exc:
        logger.warning("ignoring %s: %s", config_file, exc)
        return {}

    if not isinstance(data, dict):
        logger.warning("ignoring %s: expected a mapping at top level", config_file)
        return {}
    return data


def merge_options(
    config: Dict[str, Any],
    command: str,
    cli_args: Dict[str, Any],
) -> Dict[str, Any]:
    """Merge *cli_args* with config file entries for *command*.

    Any value in ``cli_args`` other than ``None`` or an empty list overrides
    the config file.
    """
    merged: Dict[str, Any] = {}

    command_cfg = config.get(command, {})
    if isinstance(command_cfg, dict):
        merged.update(command_cfg)

    for key, value in cli_args.items():
        if value not in (None, [], ()):
            merged[key] = value

    return merged


def _as_list(raw: Any) -> Optional[List[str]]:
    if raw is None:
        return None
    if isinstance(raw, str):
        return [item.strip() for item in raw.split(",") if item.strip()]
    return [
        str(item).strip()
        for item in raw
        if item is not None and str(item).strip()
    ]


def get_scan_settings(
    config: Dict[str, Any],
    *,
    extensions: Optional[List[str]] = None,
    markers: Optional[List[str]] = None,
    respect_gitignore: Optional[bool] = None,
) -> Dict[str, Any]:
    """Return the effective settings for a scan, defaults filled in."""

    merged = merge_options(
        config,
        "scan",
        {
            "extensions": extensions,
            "markers": markers,
            "respect_gitignore": respect_gitignore,
        },
    )
    # An explicit empty list disables the root-level skip.
    skip_root_dirs = _as_list(merged.get("skip_root_dirs"))

    return {
        "extensions": normalize_extensions(
            _as_list(merged.get("extensions")) or DEFAULT_EXTENSIONS
        ),
        "markers": tuple(_as_list(merged.get("markers")) or DEFAULT_MARKERS),
        "skip_root_dirs": tuple(skip_root_dirs)
        if skip_root_dirs is not None
        else DEFAULT_SKIP_ROOT_DIRS,
        "respect_gitignore": bool(merged.get("respect_gitignore", False)),
    }


__all__ = [
    "CONFIG_FILENAME",
    "load_config",
    "merge_options",
    "get_scan_settings",
]

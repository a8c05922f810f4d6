# """Command-line interface: summarize TODO-like comments in a source tree."""

import logging
import time
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

from . import __version__
from .config import get_scan_settings, load_config
from .report import build_report, render_text
from .scanner import scan_tree
from .tracker import LabelTracker

USAGE = "usage: todos path/to/file/tree"

HELP = (
    "Scans Rust files in the given tree for TODO-like comments and then "
    "prints all such comments, grouped by the TODO-like label "
    "(e.g., TODO-security)."
)

# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------

_handler: Optional[RichHandler] = None


def _configure_logging(verbose: bool) -> None:
    """Route the package's log records to stderr through rich."""

    global _handler
    package_logger = logging.getLogger("todos")
    if _handler is None:
        _handler = RichHandler(
            console=Console(stderr=True),
            show_time=False,
            show_path=False,
            markup=False,
        )
        _handler.setFormatter(logging.Formatter("%(message)s"))
        package_logger.addHandler(_handler)
    package_logger.setLevel(logging.DEBUG if verbose else logging.INFO)


# ---------------------------------------------------------------------------
# CLI application
# ---------------------------------------------------------------------------

def version_callback(value: bool):
    if value:
        typer.echo(f"todos version: {__version__}")
        raise typer.Exit()


app = typer.Typer(
    help=HELP,
    context_settings={"help_option_names": ["-h", "--help"]},
    add_completion=False,
)


@app.command(help=HELP)
def main(
    ctx: typer.Context,
    path: Path = typer.Argument(..., help="Root of the file tree to scan."),
    extensions: Optional[List[str]] = typer.Option(
        None, "-e", "--ext", help="Source file suffix to scan (repeatable). Default: .rs"
    ),
    markers: Optional[List[str]] = typer.Option(
        None, "-m", "--marker", help="Marker prefix (repeatable). Default: XXX, FIXME, TODO"
    ),
    respect_gitignore: Optional[bool] = typer.Option(
        None,
        "--respect-gitignore/--no-respect-gitignore",
        help="Skip files matched by the root .gitignore.",
    ),
    as_json: bool = typer.Option(False, "--json", help="Emit a JSON report instead of text."),
    output_file: Optional[Path] = typer.Option(None, "-o", "--output", help="Save the report here."),
    verbose: bool = typer.Option(False, "-v", "--verbose", help="Log every file read."),
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        help="Show the application's version and exit.",
        callback=version_callback,
        is_eager=True,
    ),
):
    """Scan *path* and print every TODO-like comment grouped by label."""

    if str(path) == "?":
        typer.echo(USAGE, err=True)
        typer.echo(ctx.get_help(), err=True)
        raise typer.Exit()

    if not path.exists():
        raise typer.BadParameter(f"{str(path)!r} does not exist. {USAGE}", param_hint="'PATH'")

    _configure_logging(verbose)

    settings = get_scan_settings(
        load_config(path),
        extensions=extensions,
        markers=markers,
        respect_gitignore=respect_gitignore,
    )

    start = time.time()
    tracker = LabelTracker(settings["markers"])
    files_scanned = scan_tree(
        path,
        tracker,
        extensions=settings["extensions"],
        skip_root_dirs=settings["skip_root_dirs"],
        respect_gitignore=settings["respect_gitignore"],
    )
    duration = time.time() - start

    if as_json:
        report = build_report(
            tracker, root=path, files_scanned=files_scanned, duration=duration
        )
        out_text = report.model_dump_json(indent=2) + "\n"
    else:
        out_text = render_text(tracker.labels())

    if output_file:
        output_file.parent.mkdir(parents=True, exist_ok=True)
        output_file.write_text(out_text, encoding="utf-8")
        typer.echo(f"Report saved to: {output_file}", err=True)
    else:
        typer.echo(out_text, nl=False)


if __name__ == "__main__":  # pragma: no cover
    app()

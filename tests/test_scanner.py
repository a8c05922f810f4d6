import logging
from pathlib import Path

import pytest

from todos.errors import RecoverableFileError, RecoverableTraversalError
from todos.scanner import (
    normalize_extensions,
    process_entry,
    process_file,
    scan_sources,
    scan_tree,
)
from todos.tracker import LabelTracker
from todos.walk import WalkEntry


def test_two_files_two_labels(make_tree):
    root = make_tree({
        "a.rs": "fn a() {}\n\n// TODO: fix this\n",
        "b.rs": "\n" * 9 + "// XXX nope\n",
    })
    tracker = LabelTracker()

    scanned = scan_tree(root, tracker)

    index = tracker.labels()
    assert scanned == 2
    assert list(index) == ["TODO", "XXX"]
    assert index["TODO"][0].location == "line 3"
    assert index["XXX"][0].location == "line 10"
    assert tracker.total() == 2


def test_other_extensions_are_ignored(make_tree):
    root = make_tree({"notes.txt": "// TODO not rust", "main.rs": "// FIXME rust"})
    tracker = LabelTracker()

    assert scan_tree(root, tracker) == 1
    assert list(tracker.labels()) == ["FIXME"]


def test_custom_extensions(make_tree):
    root = make_tree({"main.c": "// TODO c code", "main.rs": "// TODO rust"})
    tracker = LabelTracker()

    scan_tree(root, tracker, extensions=["c"])

    assert [r.file_path for r in tracker.labels()["TODO"]] == [str(root / "main.c")]


def test_unterminated_comment_is_still_classified(make_tree, caplog):
    caplog.set_level(logging.WARNING, logger="todos")
    root = make_tree({"lib.rs": "/* FIXME unfinished\n"})
    tracker = LabelTracker()

    scan_tree(root, tracker)

    assert list(tracker.labels()) == ["FIXME"]
    assert str(root / "lib.rs") in caplog.text


def test_unreadable_file_is_skipped_with_warning(make_tree, caplog):
    caplog.set_level(logging.WARNING, logger="todos")
    root = make_tree({"ok.rs": "// TODO fine\n"})
    (root / "bad.rs").write_bytes(b"// TODO \xff\xfe broken\n")
    (root / "dangling.rs").symlink_to(root / "missing.rs")
    tracker = LabelTracker()

    scanned = scan_tree(root, tracker)

    assert scanned == 1
    assert [r.file_path for r in tracker.labels()["TODO"]] == [str(root / "ok.rs")]
    assert "bad.rs" in caplog.text
    assert "dangling.rs" in caplog.text


def test_process_file_raises_recoverable_error(tmp_path: Path):
    with pytest.raises(RecoverableFileError) as excinfo:
        process_file(LabelTracker(), tmp_path / "gone.rs")

    assert excinfo.value.path == tmp_path / "gone.rs"


def test_process_file_skips_non_regular_files(tmp_path: Path):
    directory = tmp_path / "weird.rs"
    directory.mkdir()

    assert process_file(LabelTracker(), directory) is False


def test_traversal_error_is_raised_for_error_entries():
    entry = WalkEntry(None, PermissionError(13, "Permission denied", "/locked"))

    with pytest.raises(RecoverableTraversalError) as excinfo:
        process_entry(LabelTracker(), entry)

    assert excinfo.value.path == Path("/locked")


def test_scan_sources_preserves_order():
    tracker = LabelTracker()

    scan_sources(tracker, [("z.rs", "// TODO z\n"), ("a.rs", "// TODO a\n")])

    assert [r.file_path for r in tracker.labels()["TODO"]] == ["z.rs", "a.rs"]


def test_normalize_extensions():
    assert normalize_extensions(["rs", ".c", " ", " py "]) == (".rs", ".c", ".py")


def test_entry_without_path_or_error_is_skipped():
    assert process_entry(LabelTracker(), WalkEntry(None)) is False

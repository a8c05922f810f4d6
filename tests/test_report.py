from pathlib import Path

from todos.report import build_report, render_text, summarize
from todos.tracker import LabelTracker


def _tracker() -> LabelTracker:
    tracker = LabelTracker()
    tracker.observe("// TODO-security check\n// TODO-coverage test\n", "src/a.rs", 3)
    tracker.observe("// XXX nope\n", "src/b.rs", 10)
    return tracker


def test_render_text_lists_groups_and_summary():
    text = render_text(_tracker().labels())

    assert text.splitlines() == [
        'comments with "TODO-coverage": 1',
        '  found "TODO-coverage" in file src/a.rs line 3',
        "    // TODO-security check",
        "    // TODO-coverage test",
        "",
        'comments with "TODO-security": 1',
        '  found "TODO-security" in file src/a.rs line 3',
        "    // TODO-security check",
        "    // TODO-coverage test",
        "",
        'comments with "XXX": 1',
        '  found "XXX" in file src/b.rs line 10',
        "    // XXX nope",
        "",
        "SUMMARY:",
        "",
        'comments with "TODO-coverage": 1',
        'comments with "TODO-security": 1',
        'comments with "XXX": 1',
        "total comments found: 3",
    ]


def test_empty_index_still_prints_summary():
    assert render_text({}) == "SUMMARY:\n\ntotal comments found: 0\n"


def test_total_counts_a_comment_once_per_label():
    summary = summarize(_tracker().labels())

    assert summary.counts == {"TODO-coverage": 1, "TODO-security": 1, "XXX": 1}
    assert summary.total == 3


def test_build_report_serializes_to_json():
    report = build_report(_tracker(), root=Path("proj"), files_scanned=2, duration=0.123)

    data = report.model_dump()
    assert data["metadata"]["root"] == "proj"
    assert data["metadata"]["files_scanned"] == 2
    assert [g["label"] for g in data["groups"]] == ["TODO-coverage", "TODO-security", "XXX"]
    assert data["groups"][2]["comments"][0]["location"] == "line 10"
    assert data["summary"]["total"] == 3
    assert '"location": "line 10"' in report.model_dump_json(indent=2)

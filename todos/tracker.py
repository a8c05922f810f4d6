# file: todos/tracker.py

from typing import Dict, Iterable, List, Sequence, Set

from .extractor import split_lines
from .models import CommentRecord

# Marker prefixes are matched case-sensitively against the start of a word,
# so "TODO", "TODO:", "TODO-security" and even "TODOist" all count.
DEFAULT_MARKERS = ("XXX", "FIXME", "TODO")

# "TODO" and "TODO:" are used interchangeably; only one trailing ":" is
# dropped.  A trailing "-" is kept, so "TODO-" is its own label.
LABEL_SUFFIX = ":"


def normalize_label(word: str) -> str:
    """Return the grouping label for a marker *word*."""
    if word.endswith(LABEL_SUFFIX):
        return word[:-1]
    return word


def find_labels(text: str, markers: Sequence[str] = DEFAULT_MARKERS) -> List[str]:
    """Return the sorted, distinct labels found anywhere in *text*."""
    prefixes = tuple(markers)
    found: Set[str] = set()
    for line in split_lines(text):
        for word in line.split():
            if word.startswith(prefixes):
                found.add(normalize_label(word))
    return sorted(found)


class LabelTracker:
    """Accumulates TODO-like comments grouped by label.

    A comment with no marker is ignored.  A comment with several distinct
    markers (say "TODO-security" and "TODO-coverage") is recorded once under
    each of them; repeating the same marker inside one comment does not
    produce duplicates.
    """

    def __init__(self, markers: Iterable[str] = DEFAULT_MARKERS):
        self.markers = tuple(markers)
        if any(not marker for marker in self.markers):
            raise ValueError("marker prefixes must be non-empty")
        self._comments_by_label: Dict[str, List[CommentRecord]] = {}

    def observe(self, comment_text: str, file_path: str, starting_line: int) -> None:
        labels = find_labels(comment_text, self.markers)
        if not labels:
            return
        record = CommentRecord(
            file_path=str(file_path),
            starting_line=starting_line,
            text=comment_text,
        )
        for label in labels:
            self._comments_by_label.setdefault(label, []).append(record)

    def labels(self) -> Dict[str, List[CommentRecord]]:
        """Return the label index with keys in lexicographic order."""
        return {
            label: list(self._comments_by_label[label])
            for label in sorted(self._comments_by_label)
        }

    def total(self) -> int:
        # A comment filed under two labels counts twice.
        return sum(len(records) for records in self._comments_by_label.values())

    def __len__(self) -> int:
        return len(self._comments_by_label)


__all__ = ["DEFAULT_MARKERS", "LabelTracker", "find_labels", "normalize_label"]

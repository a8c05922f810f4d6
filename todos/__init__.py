"""Summarize TODO-like comments in a tree of source files."""

__version__ = "1.0.0"

from .extractor import CommentBlock, extract_comments
from .models import CommentRecord
from .tracker import LabelTracker, find_labels

__all__ = [
    "__version__",
    "CommentBlock",
    "CommentRecord",
    "LabelTracker",
    "extract_comments",
    "find_labels",
]

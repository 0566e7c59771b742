"""Compare freshly converted rsx against files already on disk."""

from __future__ import annotations

import difflib
from pathlib import Path


def diff_output(expected_path: Path, actual_text: str) -> str:
    """Return a unified diff from the file on disk to the new text, or ""."""
    if expected_path.exists():
        expected = expected_path.read_text(encoding="utf-8").splitlines(keepends=True)
    else:
        expected = []
    actual = actual_text.splitlines(keepends=True)
    if expected == actual:
        return ""
    diff = difflib.unified_diff(
        expected,
        actual,
        fromfile=str(expected_path),
        tofile=f"{expected_path} (converted)",
    )
    return "".join(diff)

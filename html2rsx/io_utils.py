"""Utility helpers for text IO and logging."""

from __future__ import annotations

import sys
from pathlib import Path


def read_markup(path: Path) -> str:
    """Read an HTML file as UTF-8, turning decode failures into SystemExit."""
    try:
        return path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise SystemExit(f"{path}: not valid UTF-8 ({exc.reason} at byte {exc.start})") from exc


def write_text_stable(path: Path, text: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8", newline="\n")


def warn(msg: str) -> None:
    print(msg, file=sys.stderr)

"""Convert HTML markup into rsx text."""

from __future__ import annotations

from .errors import MarkupParseError
from .renderer import render
from .source_tree import parse_markup


def convert(markup: str) -> str:
    """Convert HTML into rsx.

    Leading and trailing whitespace is stripped before parsing. Raises
    MarkupParseError if the markup cannot be parsed.
    """
    return render(parse_markup(markup.strip()))


__all__ = ["MarkupParseError", "convert"]

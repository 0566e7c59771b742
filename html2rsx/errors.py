"""Errors raised by the html2rsx core."""

from __future__ import annotations


class MarkupParseError(Exception):
    """The input could not be parsed into a node tree."""

    def __init__(self, source_error: BaseException | None = None) -> None:
        super().__init__("failed to parse html")
        self.source_error = source_error

    def __str__(self) -> str:
        if self.source_error is None:
            return self.args[0]
        return f"{self.args[0]}: {self.source_error}"


__all__ = ["MarkupParseError"]

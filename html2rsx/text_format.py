"""String helpers shared by the rsx renderer."""

from __future__ import annotations

COMMENT_OPEN = "<!-- "
COMMENT_CLOSE = " -->"


def escape_string(raw: str) -> str:
    # Backslash goes first so later escapes are not escaped again.
    return (
        raw.replace("\\", "\\\\")
        .replace('"', '\\"')
        .replace("\n", "\\n")
        .replace("\r", "\\r")
        .replace("\t", "\\t")
    )


def quote(raw: str) -> str:
    """Wrap text in double quotes as an escaped string literal."""
    return f'"{escape_string(raw)}"'


def normalize_name(raw: str) -> str:
    """Turn a camelCase or PascalCase attribute name into snake_case.

    The first character is lower-cased before the underscore rule runs, so
    ``SomeAttribute`` becomes ``some_attribute`` rather than
    ``_some_attribute``. Characters unaffected by lower-casing (digits,
    hyphens, already lower-case letters) pass through unchanged.
    """
    parts: list[str] = []
    for index, char in enumerate(raw):
        if index == 0:
            char = char.lower()
        lowered = char.lower()
        parts.append(char if lowered == char else f"_{lowered}")
    return "".join(parts)


def strip_comment_delimiters(raw: str) -> str:
    """Remove one layer of ``<!-- `` / `` -->`` around a comment body."""
    return raw.removeprefix(COMMENT_OPEN).removesuffix(COMMENT_CLOSE)


__all__ = ["escape_string", "normalize_name", "quote", "strip_comment_delimiters"]

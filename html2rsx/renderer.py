"""Render a source node tree as rsx text.

The walk is depth-first and pre-order but uses an explicit work deque instead
of recursion. An element with children pushes a ``CloseBlock`` marker followed
by its children (in reverse, so the first child ends up at the front); the
marker is reached once every descendant has been emitted.
"""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Deque, Iterable, List

from .source_tree import SourceAttribute, SourceComment, SourceElement, SourceNode, SourceText
from .text_format import normalize_name, quote, strip_comment_delimiters

INDENT_WIDTH = 4


@dataclass(frozen=True)
class Visit:
    node: SourceNode


@dataclass(frozen=True)
class CloseBlock:
    pass


WorkItem = Visit | CloseBlock

CLOSE_BLOCK = CloseBlock()


def _indent(depth: int) -> str:
    return " " * (depth * INDENT_WIDTH)


def _attribute_sort_key(attribute: SourceAttribute) -> tuple[str, bool, str]:
    return (attribute.name, attribute.value is not None, attribute.value or "")


def format_attribute_value(attribute: SourceAttribute) -> str:
    if attribute.value is None:
        return "true"
    return quote(attribute.value)


def _open_element(out: List[str], element: SourceElement, depth: int) -> None:
    out.append(f"{_indent(depth)}{element.name} {{")
    for attribute in sorted(element.attributes, key=_attribute_sort_key):
        out.append(
            f"\n{_indent(depth + 1)}{normalize_name(attribute.name)}: "
            f"{format_attribute_value(attribute)},"
        )
    if not element.has_children and element.has_attributes:
        out.append(f"\n{_indent(depth)}")


def render(nodes: Iterable[SourceNode]) -> str:
    """Render top-level nodes in document order; empty input gives ""."""
    pending: Deque[WorkItem] = deque(Visit(node) for node in nodes)
    out: List[str] = []
    depth = 0

    while pending:
        work = pending.popleft()

        if isinstance(work, CloseBlock):
            if depth == 0:
                raise RuntimeError("CloseBlock popped at depth 0")
            depth -= 1
            out.append(f"{_indent(depth)}}}\n")
            continue

        node = work.node
        if isinstance(node, SourceElement):
            _open_element(out, node, depth)
            if not node.has_children:
                out.append("}\n")
                continue
            out.append("\n")
            pending.appendleft(CLOSE_BLOCK)
            for child in reversed(node.children):
                pending.appendleft(Visit(child))
            depth += 1
        elif isinstance(node, SourceText):
            out.append(f"{_indent(depth)}{quote(node.content)}\n")
        elif isinstance(node, SourceComment):
            out.append(f"{_indent(depth)}// {strip_comment_delimiters(node.raw)}\n")
        else:
            raise TypeError(f"unsupported source node: {node!r}")

    return "".join(out)


__all__ = ["CLOSE_BLOCK", "CloseBlock", "INDENT_WIDTH", "Visit", "format_attribute_value", "render"]

"""Closed node model for parsed markup, built with BeautifulSoup."""

from __future__ import annotations

import re
import warnings
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple

from bs4 import BeautifulSoup, MarkupResemblesLocatorWarning, ParserRejectedMarkup
from bs4.builder import HTMLParserTreeBuilder
from bs4.builder._htmlparser import BeautifulSoupHTMLParser
from bs4.element import CData, Comment, NavigableString, PreformattedString, Tag

from .errors import MarkupParseError
from .io_utils import warn


@dataclass(frozen=True)
class SourceAttribute:
    name: str
    value: str | None = None

    @property
    def is_solo(self) -> bool:
        return self.value is None


@dataclass
class SourceElement:
    name: str
    attributes: List[SourceAttribute] = field(default_factory=list)
    children: List["SourceNode"] = field(default_factory=list)

    @property
    def has_attributes(self) -> bool:
        return bool(self.attributes)

    @property
    def has_children(self) -> bool:
        return bool(self.children)


@dataclass(frozen=True)
class SourceText:
    content: str


@dataclass(frozen=True)
class SourceComment:
    """Comment body, still wrapped in ``<!--`` and ``-->``."""

    raw: str


SourceNode = SourceElement | SourceText | SourceComment


# Bookkeeping entries added to each tag's attribute dict. Parsed attribute
# names never contain whitespace, so these keys cannot collide with them.
_AUTHORED_NAME_KEY = " html2rsx-name"
_SOLO_NAMES_KEY = " html2rsx-solo"

_TAG_OPEN_RE = re.compile(r"<([^\s/>]+)")
_ATTRIBUTE_RE = re.compile(r"""([^\s/>=][^\s/>=]*)(?:\s*=\s*(?:"[^"]*"|'[^']*'|[^\s>]*))?""")


def _authored_tag_name(start_tag: str, name: str) -> str:
    """Return the element name as written, falling back to the parsed name."""
    opening = _TAG_OPEN_RE.match(start_tag)
    if opening is None or opening.group(1).lower() != name:
        return name
    return opening.group(1)


def _authored_names(start_tag: str, attrs: Sequence[Tuple[str, Optional[str]]]) -> list[str] | None:
    """Recover attribute names as written, or None if the tag text disagrees."""
    opening = _TAG_OPEN_RE.match(start_tag)
    if opening is None:
        return None
    names = [match.group(1) for match in _ATTRIBUTE_RE.finditer(start_tag, opening.end())]
    if len(names) != len(attrs):
        return None
    if any(name.lower() != key for name, (key, _) in zip(names, attrs)):
        return None
    return names


class _SourceHTMLParser(BeautifulSoupHTMLParser):
    """html.parser bridge that keeps solo attributes and authored name casing.

    BeautifulSoup stores valueless attributes as "" and may swap values for
    its own string subclasses (meta charset), so solo names are recorded
    separately. The lower-cased tag name still drives end-tag matching.
    """

    def handle_starttag(self, name, attrs, handle_empty_element=True):
        start_tag = self.get_starttag_text() or ""
        authored = _authored_names(start_tag, attrs)
        renamed = []
        solo: dict[str, bool] = {}
        for index, (key, value) in enumerate(attrs):
            if authored is not None:
                key = authored[index]
            renamed.append((key, value))
            # Duplicates keep the last value, so the last occurrence decides.
            solo[key] = value is None
        renamed.append((_AUTHORED_NAME_KEY, _authored_tag_name(start_tag, name)))
        renamed.append((_SOLO_NAMES_KEY, " ".join(key for key, is_solo in solo.items() if is_solo)))
        return super().handle_starttag(name, renamed, handle_empty_element=handle_empty_element)


class _SourceTreeBuilder(HTMLParserTreeBuilder):
    # Mirrors HTMLParserTreeBuilder.feed from beautifulsoup4 4.13/4.14, where the
    # parser takes the soup as its first argument.
    def feed(self, markup):
        args, kwargs = self.parser_args
        parser = _SourceHTMLParser(self.soup, *args, **kwargs)
        try:
            parser.feed(markup)
            parser.close()
        except AssertionError as exc:
            raise ParserRejectedMarkup(exc) from exc
        parser.already_closed_empty_element = []


def _make_soup(markup: str) -> BeautifulSoup:
    with warnings.catch_warnings():
        warnings.simplefilter("ignore", MarkupResemblesLocatorWarning)
        return BeautifulSoup(markup, builder=_SourceTreeBuilder(multi_valued_attributes=None))


def _convert_attributes(tag: Tag) -> list[SourceAttribute]:
    solo_names = set(str(tag.attrs.get(_SOLO_NAMES_KEY, "")).split())
    attributes: list[SourceAttribute] = []
    for name, value in tag.attrs.items():
        if name in (_AUTHORED_NAME_KEY, _SOLO_NAMES_KEY):
            continue
        if name in solo_names:
            attributes.append(SourceAttribute(name))
        else:
            attributes.append(SourceAttribute(name, str(value)))
    return attributes


def _convert_node(node) -> SourceNode | None:
    if isinstance(node, Tag):
        name = str(node.attrs.get(_AUTHORED_NAME_KEY, node.name))
        return SourceElement(name, _convert_attributes(node))
    if isinstance(node, Comment):
        return SourceComment(node.output_ready())
    if isinstance(node, CData):
        return SourceText(str(node))
    if isinstance(node, PreformattedString):
        warn(f"html2rsx: skipping {type(node).__name__.lower()} {node.output_ready()!r}")
        return None
    if isinstance(node, NavigableString):
        return SourceText(str(node))
    return None


def parse_markup(markup: str) -> list[SourceNode]:
    """Parse markup into top-level source nodes in document order.

    Raises MarkupParseError when the parser rejects the input.
    """
    try:
        soup = _make_soup(markup)
    except ParserRejectedMarkup as exc:
        raise MarkupParseError(exc) from exc

    roots: list[SourceNode] = []
    pending = [(node, roots) for node in reversed(soup.contents)]
    while pending:
        node, siblings = pending.pop()
        converted = _convert_node(node)
        if converted is None:
            continue
        siblings.append(converted)
        if isinstance(converted, SourceElement):
            pending.extend((child, converted.children) for child in reversed(node.contents))
    return roots


__all__ = [
    "SourceAttribute",
    "SourceComment",
    "SourceElement",
    "SourceNode",
    "SourceText",
    "parse_markup",
]

"""Wrap converted rsx in a paste-ready Rust snippet."""

from __future__ import annotations

import textwrap
from pathlib import Path
from typing import Literal, Optional

from jinja2 import Environment, FileSystemLoader, StrictUndefined

WrapMode = Literal["none", "rsx", "component"]

TEMPLATES_DIR = Path(__file__).parent / "templates"

# Body indentation inside each template.
_BODY_INDENT = {"rsx": 4, "component": 8}


def jinja_env() -> Environment:
    return Environment(
        loader=FileSystemLoader(str(TEMPLATES_DIR)),
        autoescape=False,
        keep_trailing_newline=True,
        trim_blocks=True,
        lstrip_blocks=True,
        undefined=StrictUndefined,
    )


def wrap_output(body: str, *, wrap: WrapMode = "none", component_name: Optional[str] = None) -> str:
    """Render rsx text bare, inside ``rsx! {}``, or as a component function."""
    if wrap == "none":
        return body
    if wrap not in _BODY_INDENT:
        raise ValueError(f"unknown wrap mode: {wrap}")
    if wrap == "component" and not component_name:
        raise ValueError("component wrapping needs a component name")

    context = {"body": textwrap.indent(body, " " * _BODY_INDENT[wrap])}
    if wrap == "component":
        context["component_name"] = component_name
    template = jinja_env().get_template(f"{wrap}.jinja")
    return template.render(**context)


__all__ = ["WrapMode", "wrap_output"]

import pytest

from html2rsx.renderer import render
from html2rsx.source_tree import SourceAttribute, SourceComment, SourceElement, SourceText


def test_empty_input_renders_empty_string() -> None:
    assert render([]) == ""


def test_element_without_attributes_or_children() -> None:
    assert render([SourceElement("div")]) == "div {}\n"


def test_attributes_only_element_closes_under_the_element() -> None:
    element = SourceElement(
        "div",
        [SourceAttribute("id", "main"), SourceAttribute("class", "wide")],
    )
    assert render([element]) == 'div {\n    class: "wide",\n    id: "main",\n}\n'


def test_attribute_order_does_not_change_output() -> None:
    forward = SourceElement("div", [SourceAttribute("a", "1"), SourceAttribute("b", "2")])
    backward = SourceElement("div", [SourceAttribute("b", "2"), SourceAttribute("a", "1")])
    assert render([forward]) == render([backward]) == 'div {\n    a: "1",\n    b: "2",\n}\n'


def test_attributes_sort_by_authored_name_not_normalized_name() -> None:
    element = SourceElement("svg", [SourceAttribute("viewBox", "0 0 1 1"), SourceAttribute("version", "1.1")])
    assert render([element]) == 'svg {\n    version: "1.1",\n    view_box: "0 0 1 1",\n}\n'


def test_duplicate_attributes_are_kept_and_ordered_by_value() -> None:
    element = SourceElement(
        "a",
        [SourceAttribute("x", "2"), SourceAttribute("x", None), SourceAttribute("x", "1")],
    )
    assert render([element]) == 'a {\n    x: true,\n    x: "1",\n    x: "2",\n}\n'


def test_solo_attribute_renders_bare_true() -> None:
    element = SourceElement("input", [SourceAttribute("disabled")])
    assert render([element]) == "input {\n    disabled: true,\n}\n"


def test_children_follow_attributes_and_close_at_parent_depth() -> None:
    tree = SourceElement(
        "p",
        [SourceAttribute("class", "bold")],
        [SourceText("This is a paragraph.")],
    )
    assert render([tree]) == 'p {\n    class: "bold",\n    "This is a paragraph."\n}\n'


def test_nested_document_order_and_indentation() -> None:
    tree = SourceElement(
        "ul",
        children=[
            SourceElement("li", children=[SourceText("one")]),
            SourceElement("li", children=[SourceElement("b", children=[SourceText("two")])]),
            SourceComment("<!-- end -->"),
        ],
    )
    expected = (
        "ul {\n"
        "    li {\n"
        '        "one"\n'
        "    }\n"
        "    li {\n"
        "        b {\n"
        '            "two"\n'
        "        }\n"
        "    }\n"
        "    // end\n"
        "}\n"
    )
    assert render([tree, SourceText("after")]) == expected + '"after"\n'


def test_empty_and_whitespace_text_is_not_suppressed() -> None:
    assert render([SourceText(""), SourceText("  ")]) == '""\n"  "\n'


def test_comment_at_top_level() -> None:
    assert render([SourceComment("<!-- y -->")]) == "// y\n"


def test_deep_nesting_does_not_recurse() -> None:
    depth = 3000
    root = SourceElement("div")
    current = root
    for _ in range(depth - 1):
        child = SourceElement("div")
        current.children.append(child)
        current = child

    output = render([root])

    lines = output.splitlines()
    assert len(lines) == 2 * depth - 1
    assert lines[depth - 1] == " " * (4 * (depth - 1)) + "div {}"
    assert lines[-1] == "}"


def test_braces_balance_with_matching_indentation() -> None:
    tree = SourceElement(
        "html",
        children=[
            SourceElement("head", children=[SourceElement("title", children=[SourceText("t")])]),
            SourceElement(
                "body",
                [SourceAttribute("id", "body")],
                [SourceElement("br"), SourceElement("img", [SourceAttribute("alt", "")])],
            ),
        ],
    )
    output = render([tree])

    assert output.count("{") == output.count("}") == 6
    opened: list[int] = []
    for line in output.splitlines():
        stripped = line.lstrip(" ")
        indent = len(line) - len(stripped)
        if stripped.endswith("{}"):
            continue
        if stripped.endswith("{"):
            opened.append(indent)
        elif stripped == "}":
            assert opened.pop() == indent
    assert opened == []


def test_unknown_node_type_is_rejected() -> None:
    with pytest.raises(TypeError):
        render(["not a node"])  # type: ignore[list-item]

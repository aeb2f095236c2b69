"""Write a standalone SVG document from a drawing tree."""

from __future__ import annotations

from typing import Any
from xml.sax.saxutils import escape, quoteattr

from kittenstudio.svg.primitives import Node, Svg, format_number

XML_PROLOG = '<?xml version="1.0" encoding="UTF-8"?>'
SVG_NS = "http://www.w3.org/2000/svg"
XLINK_NS = "http://www.w3.org/1999/xlink"

_INDENT = "  "


def _attr_value(value: Any) -> str:
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return format_number(value)
    return str(value)


def _attr_str(attrs: dict[str, Any]) -> str:
    # quoteattr escapes &, <, > and picks a safe quote character
    return "".join(f" {k}={quoteattr(_attr_value(v))}" for k, v in attrs.items())


def _write_node(node: Node, depth: int, lines: list[str]) -> None:
    pad = _INDENT * depth
    attrs = _attr_str(node.attributes())
    text = node.text
    children = node.children

    if text is not None:
        lines.append(f"{pad}<{node.tag}{attrs}>{escape(text)}</{node.tag}>")
    elif children:
        lines.append(f"{pad}<{node.tag}{attrs}>")
        for child in children:
            _write_node(child, depth + 1, lines)
        lines.append(f"{pad}</{node.tag}>")
    else:
        lines.append(f"{pad}<{node.tag}{attrs} />")


def serialize_svg(tree: Svg, title: str = "") -> str:
    """Generate a self-contained SVG document (prolog + namespaces) from ``tree``.

    ``title`` becomes the accessible <title> element, escaped as text.
    """
    root_attrs = {"xmlns": SVG_NS, "xmlns:xlink": XLINK_NS}
    root_attrs.update(tree.attributes())

    lines = [XML_PROLOG, f"<svg{_attr_str(root_attrs)}>"]

    if title:
        lines.append(f"{_INDENT}<title>{escape(title)}</title>")

    if tree.defs:
        lines.append(f"{_INDENT}<defs>")
        for d in tree.defs:
            _write_node(d, 2, lines)
        lines.append(f"{_INDENT}</defs>")

    for child in tree.children:
        _write_node(child, 1, lines)

    lines.append("</svg>")
    return "\n".join(lines) + "\n"

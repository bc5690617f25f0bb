"""HTML serialization of the rendered document tree."""

from __future__ import annotations

import html
from typing import Dict, List

from .models import Node

DOCTYPE = "<!DOCTYPE html>"
HEAD_KINDS = {"meta", "style"}
CONTAINER_TAGS = {"container": "div", "paragraph": "p"}


def to_html(document: Node, lang: str = "en") -> str:
    if document.kind != "document":
        raise ValueError(f"expected a document node, got {document.kind!r}")

    head: List[str] = []
    body: List[str] = []
    for child in document.children:
        if child.kind in HEAD_KINDS:
            head.extend(_render_node(child, 1))
        else:
            body.extend(_render_node(child, 1))

    lines = [DOCTYPE, f'<html lang="{_attr(lang)}">', "<head>"]
    lines.extend(head[:1])
    lines.append(f"  <title>{html.escape(document.text)}</title>")
    lines.extend(head[1:])
    lines.append("</head>")
    lines.append("<body>")
    lines.extend(body)
    lines.append("</body>")
    lines.append("</html>")
    return "\n".join(lines) + "\n"


def _render_node(node: Node, depth: int) -> List[str]:
    pad = "  " * depth
    if node.kind == "meta":
        return [f"{pad}<meta{_attrs(node.attrs)}>"]
    if node.kind == "style":
        # CSS is emitted verbatim; it never carries user input.
        return [f"{pad}<style>{node.text}</style>"]
    if node.kind == "heading":
        level = node.attrs.get("level", "1")
        return [f"{pad}<h{level}>{html.escape(node.text)}</h{level}>"]
    if node.kind == "link":
        return [f"{pad}<a{_attrs(node.attrs)}>{html.escape(node.text)}</a>"]
    if node.kind == "paragraph" and len(node.children) == 1 and node.children[0].kind == "link":
        inner = _render_node(node.children[0], 0)[0]
        return [f"{pad}<p{_attrs(node.attrs)}>{inner}</p>"]
    tag = CONTAINER_TAGS.get(node.kind)
    if tag is None:
        raise ValueError(f"cannot serialize node kind {node.kind!r}")
    lines = [f"{pad}<{tag}{_attrs(node.attrs)}>"]
    for child in node.children:
        lines.extend(_render_node(child, depth + 1))
    lines.append(f"{pad}</{tag}>")
    return lines


def _attrs(attrs: Dict[str, str]) -> str:
    return "".join(f' {name}="{_attr(value)}"' for name, value in attrs.items())


def _attr(value: str) -> str:
    return html.escape(str(value), quote=True)

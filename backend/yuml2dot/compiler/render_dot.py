# backend/yuml2dot/compiler/render_dot.py
"""
DOT Document Renderer

Serializes a compiled GraphModel into a Graphviz document:
- header defaults for graph / node / edge (light or dark palette)
- caller overrides merged last
- nodes and edges in emission order

Docs: https://graphviz.org/doc/info/lang.html
"""

import html
import re
from typing import Any, Dict, Optional

from yuml2dot.ir.graph import GraphEdge, GraphModel, GraphNode

DEFAULT_FONT = "Helvetica"

DEFAULT_HEADER = {
    "graph": {},
    "node": {"shape": "none", "margin": 0},
    "edge": {},
}

DARK_HEADER = {
    "graph": {"bgcolor": "transparent"},
    "node": {"color": "white", "fontcolor": "white"},
    "edge": {"color": "white", "fontcolor": "white"},
}

_PORTS_ONLY_RE = re.compile(r"^<[^>]+>(\|<[^>]+>)*$")
_DOT_ESCAPE_RE = re.compile(r"(\\.)")


class HtmlLabel(str):
    """Label emitted as a Graphviz HTML-like label: <...> instead of "..."."""


def render_dot(
    model: GraphModel,
    is_dark: bool = False,
    overrides: Optional[Dict[str, Dict[str, Any]]] = None,
) -> str:
    lines = [render_header(is_dark, overrides)]
    lines.append(f"\tranksep={_format_value(model.ranksep)}")
    lines.append(f"\trankdir={model.rankdir}")

    for element in model.elements:
        if isinstance(element, GraphNode):
            lines.append(_render_node(element))
        else:
            lines.append(_render_edge(element))

    lines.append("}")
    return "\n".join(lines) + "\n"


def render_empty_dot(is_dark: bool = False, overrides=None) -> str:
    return render_header(is_dark, overrides) + "\n}\n"


def render_header(is_dark: bool = False, overrides: Optional[Dict[str, Dict[str, Any]]] = None) -> str:
    overrides = overrides or {}
    lines = ["digraph G {"]

    for element_type, defaults in DEFAULT_HEADER.items():
        attrs: Dict[str, Any] = {"fontname": DEFAULT_FONT}
        attrs.update(defaults)
        if is_dark:
            attrs.update(DARK_HEADER[element_type])
        attrs.update(overrides.get(element_type) or {})
        lines.append(f"\t{element_type} [{_attr_list(attrs, sep=',')}]")

    return "\n".join(lines)


# ---------- elements ----------

def _render_node(node: GraphNode) -> str:
    attrs = node.dot_attrs()

    if attrs["shape"] == "record" and not _PORTS_ONLY_RE.match(attrs["label"]):
        if "|" in attrs["label"]:
            attrs = _record_as_table(attrs)
        else:
            # records misbehave with labelled edges between same-rank nodes
            attrs["shape"] = "rectangle"

    return f"\t{node.id} [{_attr_list(attrs)}]"


def _render_edge(edge: GraphEdge) -> str:
    statement = f"{edge.source} -> {edge.target_ref} [{_attr_list(edge.dot_attrs())}]"
    if edge.same_rank:
        return f"\t{{ rank=same; {statement};}}"
    return f"\t{statement}"


def _record_as_table(attrs: Dict[str, Any]) -> Dict[str, Any]:
    rows = "".join(
        f"<TR><TD>{_to_html_text(field)}</TD></TR>" for field in attrs["label"].split("|")
    )
    table = HtmlLabel(
        '<TABLE BORDER="0" CELLBORDER="1" CELLSPACING="0" CELLPADDING="9">'
        + rows
        + "</TABLE>"
    )
    out = dict(attrs)
    out["shape"] = "none"
    out["margin"] = 0
    out["label"] = table
    return out


def _to_html_text(text: str) -> str:
    """Undo the label escapes and re-escape for an HTML-like label."""
    parts = []
    for chunk in _DOT_ESCAPE_RE.split(text):
        if len(chunk) == 2 and chunk[0] == "\\":
            parts.append("<BR/>" if chunk[1] == "n" else html.escape(chunk[1]))
        elif chunk:
            parts.append(html.escape(chunk))
    return "".join(parts)


# ---------- attributes ----------

def _attr_list(attrs: Dict[str, Any], sep: str = " , ") -> str:
    return sep.join(f"{key}={_format_value(value)}" for key, value in attrs.items())


def _format_value(value: Any) -> str:
    if isinstance(value, HtmlLabel):
        return f"<{value}>"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return str(value)
    text = str(value).replace('"', '\\"')
    return f'"{text}"'

"""
State diagrams, built on the activity grammar without decisions or bars.

    Start            (start)
    End              (end)
    State            (Find Products)
    Transition       (start)->(Find Products)
    Labelled         (Simulator running)Pause->(Simulator paused|do/wait)
    Note             (Simulator paused)-(note: waits for the user)
"""

import re
from typing import Optional

from yuml2dot.compiler.labels import format_label
from yuml2dot.dialects.activity_diagram import parse_flow, terminal_node
from yuml2dot.dialects.base import GraphDialect, apply_colors, strip_brackets
from yuml2dot.dsl.expressions import Expression, extract_bg_and_note
from yuml2dot.ir.graph import GraphModel, GraphNode

_STATE_RE = re.compile(r"^\(.*\)$")


class StateDialect(GraphDialect):
    name = "state"
    brackets = "("

    def parse_token(self, token: str) -> Optional[Expression]:
        if _STATE_RE.match(token):
            return extract_bg_and_note(strip_brackets(token), True)
        return parse_flow(token)

    def build_node(self, uid: str, expr: Expression, model: GraphModel) -> GraphNode:
        if not expr.is_note and expr.label in ("start", "end"):
            return terminal_node(uid, expr.label)

        node = GraphNode(
            id=uid,
            shape="note" if expr.is_note else "record",
            label=format_label(expr.label, self.wrap, True),
            style="rounded",
            attrs={"height": 0.5, "fontsize": 10, "margin": "0.20,0.05"},
        )
        apply_colors(node, expr, base_style="rounded")
        return node

"""
Activity diagrams.

    Start               (start)
    End                 (end)
    Activity            (Find Products)
    Flow                (start)->(Find Products)
    Multiple assoc.     (start)->(Find Products)->(end)
    Decisions           (start)-><d1>
    Decisions w/label   (start)-><d1>logged in->(Show Dashboard), <d1>not logged in->(Show Login Page)
    Parallel            (Action1)->|a|,(Action 2)->|a|
    Note                (Action1)-(note: A note message here)
"""

import re
from typing import Optional

from yuml2dot.compiler.labels import escape_label
from yuml2dot.dialects.base import GraphDialect, apply_colors, strip_brackets
from yuml2dot.dsl.expressions import (
    BarExpr,
    DecisionExpr,
    EdgeExpr,
    Expression,
    NodeExpr,
    extract_bg_and_note,
)
from yuml2dot.ir.graph import GraphEdge, GraphModel, GraphNode

_ACTIVITY_RE = re.compile(r"^\(.*\)$")
_DECISION_RE = re.compile(r"^<.*>$")
_BAR_RE = re.compile(r"^\|.*\|$")

FLOW_MARKER = "->"
NOTE_CONNECTOR = "-"

# where fan-in edges enter a parallel bar, per layout direction
HEADPORTS = {"TB": "n", "LR": "w", "RL": "e"}


def terminal_node(uid: str, label: str) -> GraphNode:
    """Filled circle for ``start``, double circle for ``end``."""
    return GraphNode(
        id=uid,
        shape="circle" if label == "start" else "doublecircle",
        attrs={"height": 0.3, "width": 0.3, "margin": "0,0"},
    )


def parse_flow(token: str) -> Optional[EdgeExpr]:
    if token.endswith(FLOW_MARKER):
        return EdgeExpr(tail="none", head="vee", label=token[:-len(FLOW_MARKER)].strip())
    if token == NOTE_CONNECTOR:
        return EdgeExpr(tail="none", head="none")
    return None


class ActivityDialect(GraphDialect):
    name = "activity"
    brackets = "(<|"
    labeldistance = 1

    def parse_token(self, token: str) -> Optional[Expression]:
        if _ACTIVITY_RE.match(token):
            return extract_bg_and_note(strip_brackets(token), True)
        if _DECISION_RE.match(token):
            return DecisionExpr(strip_brackets(token))
        if _BAR_RE.match(token):
            return BarExpr(strip_brackets(token))
        return parse_flow(token)

    def build_node(self, uid: str, expr: Expression, model: GraphModel) -> GraphNode:
        if isinstance(expr, DecisionExpr):
            return GraphNode(
                id=uid,
                shape="diamond",
                attrs={"height": 0.5, "width": 0.5, "margin": "0,0"},
            )

        if isinstance(expr, BarExpr):
            vertical = model.rankdir != "TB"
            return GraphNode(
                id=uid,
                shape="record",
                style="filled",
                attrs={
                    "height": 0.5 if vertical else 0.05,
                    "width": 0.05 if vertical else 0.5,
                    "margin": "0,0",
                    "fontsize": 1,
                    "penwidth": 4,
                },
            )

        if isinstance(expr, NodeExpr) and not expr.is_note and expr.label in ("start", "end"):
            return terminal_node(uid, expr.label)

        node = GraphNode(
            id=uid,
            shape="note" if expr.is_note else "record",
            label=escape_label(expr.label),
            style="rounded",
            attrs={"height": 0.5, "fontsize": 10, "margin": "0.20,0.05"},
        )
        apply_colors(node, expr, base_style="rounded")
        return node

    def build_edge(self, left, edge, right, uids, model) -> GraphEdge:
        graph_edge = super().build_edge(left, edge, right, uids, model)

        if isinstance(right, BarExpr):
            graph_edge.target_port = model.add_bar_port(graph_edge.target)
            graph_edge.target_compass = HEADPORTS[model.rankdir]

        return graph_edge

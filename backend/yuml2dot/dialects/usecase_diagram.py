"""
Use-case diagrams.

    Use case            (Login)
    Actor               [Customer]
    <<extend>>          (Login)<(Forgot Password)
    <<include>>         (Register)>(Confirm Email)
    Actor inheritance   [Admin]^[User]
    Notes               [Admin]^[User],[Admin]-(note: Most privileged user)
"""

import re
from typing import Optional

from yuml2dot.compiler.labels import format_label
from yuml2dot.dialects.base import GraphDialect, apply_colors, strip_brackets
from yuml2dot.dsl.expressions import ActorExpr, EdgeExpr, Expression, extract_bg_and_note, is_note
from yuml2dot.ir.graph import GraphModel, GraphNode

_USECASE_RE = re.compile(r"^\(.*\)$")
_ACTOR_RE = re.compile(r"^\[.*\]$")

# image marker swapped for a stick figure once the SVG is rendered
ACTOR_IMAGE = "{img:actor} "

_CONNECTORS = {
    "<": EdgeExpr(tail="vee", head="none", label="<<extend>>", style="dashed"),
    ">": EdgeExpr(tail="none", head="vee", label="<<include>>", style="dashed"),
    "-": EdgeExpr(tail="none", head="none"),
    "^": EdgeExpr(tail="none", head="empty"),
}


class UseCaseDialect(GraphDialect):
    name = "usecase"
    brackets = "[("
    ranksep = 0.7

    def parse_token(self, token: str) -> Optional[Expression]:
        if _USECASE_RE.match(token):
            return extract_bg_and_note(strip_brackets(token), True)
        if _ACTOR_RE.match(token):
            return ActorExpr(strip_brackets(token))
        return _CONNECTORS.get(token)

    def build_node(self, uid: str, expr: Expression, model: GraphModel) -> GraphNode:
        label = format_label(expr.label, self.wrap, False)

        if isinstance(expr, ActorExpr):
            return GraphNode(
                id=uid,
                shape="none",
                label=ACTOR_IMAGE + label,
                attrs={"fontsize": 10, "margin": "0.05,0.05", "height": 1},
            )

        node = GraphNode(
            id=uid,
            shape="note" if is_note(expr) else "ellipse",
            label=label,
            attrs={"fontsize": 10, "margin": "0.20,0.05", "height": 0.5},
        )
        apply_colors(node, expr)
        return node

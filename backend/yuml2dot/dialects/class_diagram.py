"""
Class diagrams.

    Class           [Customer]
    Directional     [Customer]->[Order]
    Bidirectional   [Customer]<->[Order]
    Aggregation     [Customer]+-[Order] or [Customer]<>-[Order]
    Composition     [Customer]++-[Order]
    Inheritance     [Customer]^[Cool Customer]
    Dependencies    [Customer]uses-.->[PaymentStrategy]
    Cardinality     [Customer]<1-1..2>[Address]
    Labels          [Person]customer-billingAddress[Address]
    Notes           [Person]-[Address],[Address]-[note: Value Object]
    Full class      [Customer|Forename;Surname;Email|Save()]
    Color splash    [Customer{bg:orange}]<>1->*[Order{bg:green}]
    Assoc. class    [Student]-[Course][Enrollment]
"""

import re
from typing import Optional, Tuple

from yuml2dot.dialects.base import GraphDialect, Statement, edge_style, strip_brackets
from yuml2dot.dsl.expressions import EdgeExpr, Expression, NodeExpr, extract_bg_and_note, is_note
from yuml2dot.ir.graph import GraphEdge, GraphModel, GraphNode
from yuml2dot.ir.identity import UidRegistry

_NODE_RE = re.compile(r"^\[.*\]$")

DASHED_MARKER = "-.-"
SOLID_MARKER = "-"


def _left_end(text: str) -> Tuple[str, str]:
    """Arrow style and cardinality text at the tail of an association."""
    if text.startswith("<>"):
        return "odiamond", text[2:]
    if text.startswith("++"):
        return "diamond", text[2:]
    if text.startswith("+"):
        return "odiamond", text[1:]
    if text.startswith("<"):
        return "vee", text[1:]
    if text.endswith(">"):
        return "vee", text[:-1]
    if text.startswith("^"):
        return "empty", text[1:]
    return "none", text


def _right_end(text: str) -> Tuple[str, str]:
    """Arrow style and cardinality text at the head of an association."""
    if text.endswith("<>"):
        return "odiamond", text[:-2]
    if text.endswith("++"):
        return "diamond", text[:-2]
    if text.endswith("+"):
        return "odiamond", text[:-1]
    if text.endswith(">"):
        return "vee", text[:-1]
    if text.endswith("^"):
        return "empty", text[:-1]
    if text.startswith(">"):
        return "vee", text[1:]
    return _left_end(text)


class ClassDialect(GraphDialect):
    name = "class"
    brackets = "["
    ranksep = 0.7
    node_shape = "record"

    def parse_token(self, token: str) -> Optional[Expression]:
        if _NODE_RE.match(token):
            return extract_bg_and_note(strip_brackets(token), True)

        if token == "^":
            return EdgeExpr(tail="empty", head="none")

        if SOLID_MARKER not in token:
            return None

        if DASHED_MARKER in token:
            style = "dashed"
            ends = token.split(DASHED_MARKER)
        else:
            style = "solid"
            ends = token.split(SOLID_MARKER)

        if len(ends) != 2:
            return None

        tail, tail_label = _left_end(ends[0])
        head, head_label = _right_end(ends[1])
        return EdgeExpr(
            tail=tail,
            head=head,
            style=style,
            tail_label=tail_label,
            head_label=head_label,
        )

    def emit_edges(self, statement: Statement, uids: UidRegistry, model: GraphModel):
        if _is_association_class(statement):
            self._emit_association_class(statement, uids, model)
        else:
            super().emit_edges(statement, uids, model)

    def build_edge(self, left, edge, right, uids, model) -> GraphEdge:
        return GraphEdge(
            source=uids.get_uid(left.label),
            target=uids.get_uid(right.label),
            arrowtail=edge.tail,
            arrowhead=edge.head,
            style=edge_style(left, edge, right),
            taillabel=edge.tail_label,
            headlabel=edge.head_label,
            same_rank=is_note(left) or is_note(right),
            attrs={"labeldistance": self.labeldistance, "fontsize": 10},
        )

    def _emit_association_class(self, statement: Statement, uids: UidRegistry, model: GraphModel):
        left, edge, right, assoc = statement
        left_uid = uids.get_uid(left.label)
        right_uid = uids.get_uid(right.label)

        junction = f"{left_uid}J{right_uid}"
        model.add(
            GraphNode(
                id=junction,
                shape="point",
                style="invis",
                attrs={"height": 0.01, "width": 0.01},
            )
        )

        common = {"labeldistance": self.labeldistance, "fontsize": 10}
        model.add(
            GraphEdge(
                source=left_uid,
                target=junction,
                arrowtail=edge.tail,
                arrowhead="none",
                style=edge.style,
                taillabel=edge.tail_label,
                attrs=dict(common),
            )
        )
        model.add(
            GraphEdge(
                source=junction,
                target=right_uid,
                arrowtail="none",
                arrowhead=edge.head,
                style=edge.style,
                headlabel=edge.head_label,
                attrs=dict(common),
            )
        )
        model.add(
            GraphEdge(
                source=uids.get_uid(assoc.label),
                target=junction,
                arrowtail="none",
                arrowhead="vee",
                style="dashed",
                same_rank=True,
                attrs={"labeldistance": self.labeldistance},
            )
        )


def _is_association_class(statement: Statement) -> bool:
    if len(statement) != 4:
        return False
    left, edge, right, assoc = statement
    return (
        isinstance(edge, EdgeExpr)
        and all(isinstance(e, NodeExpr) and not e.is_note for e in (left, right, assoc))
    )

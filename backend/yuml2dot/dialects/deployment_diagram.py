"""
Deployment diagrams.

    Node            [node1]
    Association     [node1]-[node2]
    Labeled assoc   [node1]label-[node2]
    Note            [node1]-[note: a note here]
"""

import re
from typing import Optional

from yuml2dot.dialects.base import GraphDialect, strip_brackets
from yuml2dot.dsl.expressions import EdgeExpr, Expression, extract_bg_and_note

_NODE_RE = re.compile(r"^\[.*\]$")


class DeploymentDialect(GraphDialect):
    name = "deployment"
    brackets = "["
    node_shape = "box3d"

    def parse_token(self, token: str) -> Optional[Expression]:
        if _NODE_RE.match(token):
            return extract_bg_and_note(strip_brackets(token), True)
        if token.endswith("-"):
            return EdgeExpr(tail="none", head="none", label=token[:-1].strip())
        return None

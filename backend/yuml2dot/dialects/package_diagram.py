"""
Package diagrams. Every association is a dashed dependency.

    Package         [package1]
    Association     [package1]->[package2]
    Labeled assoc   [package1]label->[package2]
    Note            [package1]-[note: a note here]
"""

import re
from typing import Optional

from yuml2dot.dialects.base import GraphDialect, strip_brackets
from yuml2dot.dsl.expressions import EdgeExpr, Expression, extract_bg_and_note

_NODE_RE = re.compile(r"^\[.*\]$")


class PackageDialect(GraphDialect):
    name = "package"
    brackets = "["
    node_shape = "tab"

    def parse_token(self, token: str) -> Optional[Expression]:
        if _NODE_RE.match(token):
            return extract_bg_and_note(strip_brackets(token), True)
        if token == "-":
            return EdgeExpr(tail="none", head="none", style="dashed")
        if token.endswith("->"):
            return EdgeExpr(tail="none", head="vee", label=token[:-2].strip(), style="dashed")
        return None

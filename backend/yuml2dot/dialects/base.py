from abc import ABC, abstractmethod
from typing import Iterable, List, Optional, Sequence, Union

from yuml2dot.compiler.labels import format_label
from yuml2dot.config import WRAP_WIDTH
from yuml2dot.dsl.expressions import EdgeExpr, Expression, NodeExpr, is_connector, is_note
from yuml2dot.dsl.tokenizer import iter_yuml_tokens
from yuml2dot.ir.errors import GrammarError
from yuml2dot.ir.graph import GraphEdge, GraphModel, GraphNode
from yuml2dot.ir.identity import UidRegistry
from yuml2dot.ir.sequence import SequenceModel

Statement = List[Expression]

STATEMENT_SEPARATOR = ","


class Dialect(ABC):
    """
    One yUML diagram flavour: a token grammar plus a compiler.

    Dialects hold no per-document state; everything a pass accumulates
    lives in objects created inside ``compile``.
    """

    name: str
    brackets: str

    def parse_line(self, line: str) -> List[Statement]:
        """
        Tokenize one line and classify every token.
        A bare comma splits the line into independent statements.
        """
        statements: List[Statement] = [[]]
        for token in iter_yuml_tokens(line, self.brackets):
            if not token:
                continue
            if token == STATEMENT_SEPARATOR:
                statements.append([])
                continue
            expr = self.parse_token(token)
            if expr is None:
                raise GrammarError(token, line)
            statements[-1].append(expr)
        return [s for s in statements if s]

    @abstractmethod
    def parse_token(self, token: str) -> Optional[Expression]:
        """Return the record for ``token``, or None when no rule matches."""

    @abstractmethod
    def compile(self, lines: Sequence[str], rankdir: str) -> Union[GraphModel, SequenceModel]:
        pass


class GraphDialect(Dialect):
    """
    Shared two-pass fold for the Graphviz-backed dialects: register and
    emit new nodes, then connect every edge sandwiched between two nodes.
    """

    ranksep: float = 0.5
    wrap: int = WRAP_WIDTH
    labeldistance: float = 2
    node_shape: str = "record"

    def compile(self, lines: Sequence[str], rankdir: str) -> GraphModel:
        model = GraphModel(rankdir=rankdir, ranksep=self.ranksep)
        uids = UidRegistry()

        for line_number, line in enumerate(lines, start=1):
            try:
                statements = self.parse_line(line)
            except GrammarError as exc:
                raise GrammarError(exc.token, line, line_number) from None

            for statement in statements:
                self.emit_nodes(statement, uids, model)
                self.emit_edges(statement, uids, model)

        return model

    # ---------- nodes ----------

    def emit_nodes(self, statement: Statement, uids: UidRegistry, model: GraphModel):
        for expr in statement:
            if is_connector(expr):
                continue
            uid = uids.create_uid(expr.label)
            if uid is None:
                continue
            model.add(self.build_node(uid, expr, model))

    def build_node(self, uid: str, expr: Expression, model: GraphModel) -> GraphNode:
        node = GraphNode(
            id=uid,
            shape="note" if is_note(expr) else self.node_shape,
            label=format_label(expr.label, self.wrap, True),
            attrs={"height": 0.5, "fontsize": 10, "margin": "0.20,0.05"},
        )
        apply_colors(node, expr)
        return node

    # ---------- edges ----------

    def emit_edges(self, statement: Statement, uids: UidRegistry, model: GraphModel):
        for k in iter_sandwiched_edges(statement):
            model.add(
                self.build_edge(statement[k - 1], statement[k], statement[k + 1], uids, model)
            )

    def build_edge(
        self,
        left: Expression,
        edge: EdgeExpr,
        right: Expression,
        uids: UidRegistry,
        model: GraphModel,
    ) -> GraphEdge:
        return GraphEdge(
            source=uids.get_uid(left.label),
            target=uids.get_uid(right.label),
            arrowtail=edge.tail,
            arrowhead=edge.head,
            style=edge_style(left, edge, right),
            label=edge.label,
            attrs={"labeldistance": self.labeldistance, "fontsize": 10},
        )


def iter_sandwiched_edges(statement: Statement) -> Iterable[int]:
    """Indexes of edge records with a non-edge record on both sides."""
    for k in range(1, len(statement) - 1):
        if (
            isinstance(statement[k], EdgeExpr)
            and not is_connector(statement[k - 1])
            and not is_connector(statement[k + 1])
        ):
            yield k


def edge_style(left: Expression, edge: EdgeExpr, right: Expression) -> str:
    """Edges touching a note are always dashed."""
    if is_note(left) or is_note(right):
        return "dashed"
    return edge.style


def apply_colors(node: GraphNode, expr: Expression, base_style: Optional[str] = None):
    if not isinstance(expr, NodeExpr):
        return
    if expr.bg:
        node.style = f"{base_style},filled" if base_style else "filled"
        node.fillcolor = expr.bg
    if expr.fontcolor:
        node.fontcolor = expr.fontcolor


def strip_brackets(token: str) -> str:
    return token[1:-1]

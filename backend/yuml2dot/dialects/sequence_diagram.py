"""
Sequence diagrams.

    Object                    [Patron]
    Message                   [Patron]order food>[Waiter]
    Response                  [Waiter]serve wine.>[Patron]
    Asynchronous message      [Patron]order food>>[Waiter]
    Note                      [Actor]-[note: a note message]
    Open activation (source)  [Source](message>[Dest]
    Open activation (dest)    [Source]message>([Dest]
    Close activation (dest)   [Source]message>)[Dest]
    Close activation (source) [Source])message>[Dest]

Compiles to a SequenceModel instead of a graph; the renderer lays it out.
"""

import re
from typing import Optional, Sequence

from yuml2dot.compiler.labels import wordwrap
from yuml2dot.config import WRAP_WIDTH
from yuml2dot.dialects.base import Dialect, strip_brackets
from yuml2dot.dsl.expressions import (
    EdgeExpr,
    Expression,
    NodeExpr,
    SignalExpr,
    extract_bg_and_note,
    is_connector,
)
from yuml2dot.ir.errors import GrammarError
from yuml2dot.ir.identity import UidRegistry
from yuml2dot.ir.sequence import Note, SequenceActor, SequenceModel, Signal

_OBJECT_RE = re.compile(r"^\[.*\]$")
_ARROW_RE = re.compile(r"[.>]?>[()]?$")

ACTIVATION_MARKERS = "()"
NOTE_CONNECTOR = "-"

# message style -> (line type, arrow marker)
SIGNAL_STYLES = {
    "solid": ("solid", "arrow-filled"),
    "dashed": ("dashed", "arrow-filled"),
    "async": ("solid", "arrow-open"),
}


def parse_signal(token: str) -> Optional[SignalExpr]:
    if ">>" in token:
        style = "async"
    elif ".>" in token:
        style = "dashed"
    else:
        style = "solid"

    arrow = _ARROW_RE.search(token)
    if arrow is None:
        return None

    prefix = token[0] if token[0] in ACTIVATION_MARKERS else ""
    suffix = token[-1] if token[-1] in ACTIVATION_MARKERS else ""
    message = token[len(prefix):arrow.start()].strip()

    return SignalExpr(message=message, style=style, prefix=prefix, suffix=suffix)


class SequenceDialect(Dialect):
    name = "sequence"
    brackets = "["
    wrap = WRAP_WIDTH

    def parse_token(self, token: str) -> Optional[Expression]:
        if _OBJECT_RE.match(token):
            return extract_bg_and_note(strip_brackets(token), True)
        if ">" in token:
            return parse_signal(token)
        if token == NOTE_CONNECTOR:
            return EdgeExpr()
        return None

    def compile(self, lines: Sequence[str], rankdir: str) -> SequenceModel:
        model = SequenceModel()
        uids = UidRegistry()
        actors = {}

        for line_number, line in enumerate(lines, start=1):
            try:
                statements = self.parse_line(line)
            except GrammarError as exc:
                raise GrammarError(exc.token, line, line_number) from None

            for statement in statements:
                for expr in statement:
                    if isinstance(expr, NodeExpr) and not expr.is_note:
                        uid = uids.create_uid(expr.label)
                        if uid is None:
                            continue
                        actor = SequenceActor(
                            uid=uid,
                            label=wordwrap(expr.label, self.wrap, "\n"),
                            index=len(model.actors),
                        )
                        actors[uid] = actor
                        model.actors.append(actor)

                if len(statement) != 3:
                    continue
                source, connector, target = statement
                if not (
                    isinstance(source, NodeExpr)
                    and not source.is_note
                    and is_connector(connector)
                    and isinstance(target, NodeExpr)
                ):
                    continue

                actor_a = actors[uids.get_uid(source.label)]
                if target.is_note:
                    model.signals.append(
                        Note(
                            actor=actor_a,
                            message=wordwrap(target.label, self.wrap, "\n"),
                            bgcolor=target.bg or None,
                            fontcolor=target.fontcolor,
                        )
                    )
                elif isinstance(connector, SignalExpr):
                    linetype, arrowtype = SIGNAL_STYLES[connector.style]
                    model.signals.append(
                        Signal(
                            actor_a=actor_a,
                            actor_b=actors[uids.get_uid(target.label)],
                            message=connector.message,
                            linetype=linetype,
                            arrowtype=arrowtype,
                            activation_start=connector.prefix,
                            activation_end=connector.suffix,
                        )
                    )

        return model

"""
Typed expression records produced by the dialect parsers.

One record per token; records live only while their line is compiled.
"""

import re
from dataclasses import dataclass
from typing import Optional, Union

from yuml2dot.compiler.colors import resolve_color

NOTE_PREFIX = "note:"

_BG_RE = re.compile(r"^(.*)\{ *bg *: *([a-zA-Z]+\d*|#[0-9a-fA-F]{6}) *\}$")


@dataclass(frozen=True)
class NodeExpr:
    label: str
    bg: str = ""
    fontcolor: Optional[str] = None
    is_note: bool = False

    @property
    def kind(self) -> str:
        return "note" if self.is_note else "node"


@dataclass(frozen=True)
class ActorExpr:
    label: str
    kind: str = "actor"


@dataclass(frozen=True)
class DecisionExpr:
    label: str
    kind: str = "decision"


@dataclass(frozen=True)
class BarExpr:
    label: str
    kind: str = "bar"


@dataclass(frozen=True)
class EdgeExpr:
    tail: str = "none"
    head: str = "none"
    label: str = ""
    style: str = "solid"
    tail_label: str = ""
    head_label: str = ""
    kind: str = "edge"


@dataclass(frozen=True)
class SignalExpr:
    message: str
    style: str = "solid"        # solid | dashed | async
    prefix: str = ""
    suffix: str = ""
    kind: str = "signal"


Expression = Union[NodeExpr, ActorExpr, DecisionExpr, BarExpr, EdgeExpr, SignalExpr]


def is_connector(expr: Expression) -> bool:
    return isinstance(expr, (EdgeExpr, SignalExpr))


def is_note(expr: Expression) -> bool:
    return isinstance(expr, NodeExpr) and expr.is_note


def extract_bg_and_note(part: str, allow_note: bool) -> NodeExpr:
    """
    Build a node record from bracket contents, honouring a trailing
    ``{bg:color}`` and a leading ``note:`` marker.
    """
    bg = ""
    fontcolor = None
    text = part.strip()

    match = _BG_RE.match(part)
    if match:
        text = match.group(1).strip()
        color = resolve_color(match.group(2))
        if color is not None:
            bg = color.value
            fontcolor = color.fontcolor

    is_note = False
    if allow_note and part.startswith(NOTE_PREFIX):
        text = text[len(NOTE_PREFIX):].strip()
        is_note = True

    return NodeExpr(label=text, bg=bg, fontcolor=fontcolor, is_note=is_note)

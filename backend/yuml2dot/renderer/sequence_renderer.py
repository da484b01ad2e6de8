"""
Sequence diagram layout and SVG drawing.

Actors sit in a row, left to right in first-seen order; every message or
note takes one band below them. Text is measured with a fixed-width
estimate rather than real font metrics.
"""

import html
from typing import List, Optional

from yuml2dot.ir.sequence import Note, SequenceActor, SequenceModel, Signal

DIAGRAM_MARGIN = 10
ACTOR_MARGIN = 10      # around an actor box
ACTOR_PADDING = 10     # inside an actor box
SIGNAL_MARGIN = 5
SIGNAL_PADDING = 5
NOTE_MARGIN = 10
NOTE_PADDING = 5
SELF_SIGNAL_WIDTH = 20

CHAR_WIDTH = 8.5
LINE_HEIGHT = 18


def text_size(text: str):
    lines = text.split("\n")
    width = max(CHAR_WIDTH * len(line) for line in lines)
    return width, LINE_HEIGHT * len(lines)


def _num(value: float) -> str:
    return f"{value:g}"


class SequenceRenderer:
    def __init__(self, model: SequenceModel, is_dark: bool = False):
        self.model = model
        self.stroke = "white" if is_dark else "black"
        self.svg: List[str] = []
        self.width = 0.0
        self.height = 0.0
        self._actors_height = 0.0
        self._signals_height = 0.0

    # ---------- layout ----------

    def layout(self):
        actors = self.model.actors
        distances = {a.index: {} for a in actors}

        for a in actors:
            w, h = text_size(a.label)
            a.x = 0.0
            a.y = 0.0
            a.width = w + (ACTOR_PADDING + ACTOR_MARGIN) * 2
            a.height = h + (ACTOR_PADDING + ACTOR_MARGIN) * 2
            a.padding_right = 0.0
            self._actors_height = max(a.height, self._actors_height)

        def ensure_distance(left: int, right: int, distance: float):
            if right >= len(actors):
                actors[left].padding_right = max(distance, actors[left].padding_right)
            else:
                distances[left][right] = max(distance, distances[left].get(right, 0.0))

        for s in self.model.signals:
            w, h = text_size(s.message)
            s.width, s.height = w, h
            extra_width = 0.0

            if isinstance(s, Signal):
                s.width += (SIGNAL_MARGIN + SIGNAL_PADDING) * 2
                s.height += (SIGNAL_MARGIN + SIGNAL_PADDING) * 2
                if s.is_self:
                    left = s.actor_a.index
                    right = left + 1
                    s.width += SELF_SIGNAL_WIDTH
                else:
                    left = min(s.actor_a.index, s.actor_b.index)
                    right = max(s.actor_a.index, s.actor_b.index)
            else:
                s.width += (NOTE_MARGIN + NOTE_PADDING) * 2
                s.height += (NOTE_MARGIN + NOTE_PADDING) * 2
                extra_width = 2 * ACTOR_MARGIN
                left = s.actor.index
                right = left + 1

            ensure_distance(left, right, s.width + extra_width)
            self._signals_height += s.height

        actors_x = 0.0
        for a in actors:
            a.x = max(actors_x, a.x)
            for right, distance in sorted(distances[a.index].items()):
                b = actors[right]
                distance = max(distance, a.width / 2, b.width / 2)
                b.x = max(b.x, a.x + a.width / 2 + distance - b.width / 2)
            actors_x = a.x + a.width + a.padding_right

        self.width = 2 * DIAGRAM_MARGIN + actors_x
        self.height = 2 * DIAGRAM_MARGIN + 2 * self._actors_height + self._signals_height

    # ---------- drawing ----------

    def render(self) -> str:
        self.layout()
        self.svg = [
            f'<svg xmlns="http://www.w3.org/2000/svg" '
            f'width="{_num(self.width)}" height="{_num(self.height)}">'
        ]
        self._draw_markers()

        y = DIAGRAM_MARGIN
        self._draw_actors(y)
        self._draw_signals(y + self._actors_height)

        self.svg.append("</svg>")
        return "\n".join(self.svg)

    def _draw_markers(self):
        self.svg.append(
            "<defs>"
            '<marker id="arrow-filled" refX="6" refY="3" markerWidth="6" markerHeight="6" orient="auto">'
            f'<path d="M0,0 6,3 0,6z" style="stroke: none; fill: {self.stroke};"/></marker>'
            '<marker id="arrow-open" refX="6" refY="3" markerWidth="6" markerHeight="6" orient="auto">'
            f'<path d="M0,0 6,3 0,6" style="stroke-width: 1; fill: none; stroke: {self.stroke};"/></marker>'
            "</defs>"
        )

    def _draw_actors(self, offset_y: float):
        for a in self.model.actors:
            self._draw_text_box(a, offset_y)
            self._draw_text_box(a, offset_y + self._actors_height + self._signals_height)

            # lifeline
            self._path(
                f"M{_num(a.x + a.width / 2)},{_num(offset_y + self._actors_height - ACTOR_MARGIN)} "
                f"v{_num(2 * ACTOR_MARGIN + self._signals_height)}"
            )

    def _draw_signals(self, offset_y: float):
        y = offset_y
        for s in self.model.signals:
            if isinstance(s, Note):
                self._draw_note(s, y)
            elif s.is_self:
                self._draw_self_signal(s, y)
            else:
                self._draw_signal(s, y)
            y += s.height

    def _draw_signal(self, signal: Signal, offset_y: float):
        a_x = _center_x(signal.actor_a)
        b_x = _center_x(signal.actor_b)

        x = (b_x - a_x) / 2 + a_x
        y = offset_y + SIGNAL_MARGIN + 2 * SIGNAL_PADDING
        self._text(x, y, signal.message)

        y = offset_y + signal.height - SIGNAL_MARGIN - SIGNAL_PADDING
        self._path(
            f"M{_num(a_x)},{_num(y)} h{_num(b_x - a_x)}",
            signal.linetype,
            marker=signal.arrowtype,
        )

    def _draw_self_signal(self, signal: Signal, offset_y: float):
        a_x = _center_x(signal.actor_a)
        text_width, _ = text_size(signal.message)

        x = a_x + SELF_SIGNAL_WIDTH + SIGNAL_PADDING + text_width / 2
        y = offset_y + signal.height / 2
        self._text(x, y, signal.message)

        top = offset_y + SIGNAL_MARGIN
        bottom = offset_y + signal.height
        loop_x = a_x + SELF_SIGNAL_WIDTH * 2
        self._path(
            f"M{_num(a_x)},{_num(top)} C{_num(loop_x)},{_num(top)} "
            f"{_num(loop_x)},{_num(bottom)} {_num(a_x)},{_num(bottom)}",
            signal.linetype,
            marker=signal.arrowtype,
        )

    def _draw_note(self, note: Note, offset_y: float):
        margin = NOTE_MARGIN
        note.x = _center_x(note.actor) + ACTOR_MARGIN
        note.y = offset_y

        left = note.x + margin
        right = note.x - margin + note.width
        top = note.y + margin
        bottom = note.y - margin + note.height
        fold = right - 7

        self._path(
            f"M{_num(fold)},{_num(top)} L{_num(fold)},{_num(top + 7)} L{_num(right)},{_num(top + 7)} "
            f"L{_num(fold)},{_num(top)} L{_num(left)},{_num(top)} L{_num(left)},{_num(bottom)} "
            f"L{_num(right)},{_num(bottom)} L{_num(right)},{_num(top + 7)} Z",
            fill=note.bgcolor,
        )
        self._text(note.x + note.width / 2, note.y + note.height / 2, note.message, note.fontcolor)

    def _draw_text_box(self, actor: SequenceActor, offset_y: float):
        actor.y = offset_y
        actor.height = self._actors_height
        w = actor.width - 2 * ACTOR_MARGIN
        h = actor.height - 2 * ACTOR_MARGIN

        self.svg.append(
            f'<rect x="{_num(actor.x + ACTOR_MARGIN)}" y="{_num(actor.y + ACTOR_MARGIN)}" '
            f'width="{_num(w)}" height="{_num(h)}" '
            f'style="stroke-width: 1; fill: none; stroke: {self.stroke};"/>'
        )
        self._text(_center_x(actor), actor.y + actor.height / 2, actor.label)

    # ---------- primitives ----------

    def _text(self, x: float, y: float, message: str, color: Optional[str] = None):
        lines = message.split("\n")
        fill = color or self.stroke
        y -= (len(lines) - 1) / 2 * LINE_HEIGHT

        self.svg.append("<g>")
        for line in lines:
            self.svg.append(
                f'<text x="{_num(x)}" y="{_num(y)}" fill="{fill}" '
                f'style="text-anchor: middle; alignment-baseline: central;">'
                f"{html.escape(line)}</text>"
            )
            y += LINE_HEIGHT
        self.svg.append("</g>")

    def _path(self, d: str, linetype: str = "solid", marker: Optional[str] = None, fill: Optional[str] = None):
        attrs = [
            f'd="{d}"',
            f'style="stroke-width: 1; fill: {fill or "none"}; stroke: {self.stroke};"',
        ]
        if linetype == "dashed":
            attrs.append('stroke-dasharray="7,4"')
        if marker:
            attrs.append(f'marker-end="url(#{marker})"')
        self.svg.append(f"<path {' '.join(attrs)}/>")


def _center_x(box) -> float:
    return box.x + box.width / 2


def render_sequence_svg(model: SequenceModel, is_dark: bool = False) -> str:
    return SequenceRenderer(model, is_dark).render()

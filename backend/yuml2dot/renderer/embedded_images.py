"""
Swap ``{img:name}`` markers in rendered SVG text for inline drawings.

Use-case actors are emitted as plain-text nodes whose label starts with
``{img:actor}``; after layout the marker becomes a stick figure placed at
the text position and the text is pushed below it.
"""

import re

# name -> (svg body, text x offset, text y offset)
SHAPES = {
    "actor": (
        '<circle cx="0" cy="-20" r="7.5" />'
        '<line x1="0" y1="-12.5" x2="0" y2="5" />'
        '<line x1="-15" y1="-5" x2="15" y2="-5" />'
        '<line x1="0" y1="5" x2="-15" y2="17" />'
        '<line x1="0" y1="5" x2="15" y2="17" />',
        0,
        25,
    ),
}

_TEXT_RE = re.compile(r"<text\s([^>]*)>\{img:([^}]*)\}(.*?)</text>")
_X_RE = re.compile(r'\bx="(-?[0-9.]+)"')
_Y_RE = re.compile(r'\by="(-?[0-9.]+)"')


def _num(value: float) -> str:
    return f"{value:g}"


def process_embedded_images(svg: str, is_dark: bool = False) -> str:
    stroke = "white" if is_dark else "black"

    def replace(match: re.Match) -> str:
        attrs, name, text = match.group(1), match.group(2), match.group(3).strip()
        shape = SHAPES.get(name)
        x_match = _X_RE.search(attrs)
        y_match = _Y_RE.search(attrs)

        if shape is None or x_match is None or y_match is None:
            return f"<text {attrs}>{text}</text>"

        body, dx, dy = shape
        x, y = float(x_match.group(1)), float(y_match.group(1))
        moved = _X_RE.sub(f'x="{_num(x + dx)}"', attrs, count=1)
        moved = _Y_RE.sub(f'y="{_num(y + dy)}"', moved, count=1)

        return (
            f'<g transform="translate({x_match.group(1)}, {y_match.group(1)})" '
            f'style="fill:none;stroke:{stroke};stroke-width:1px">{body}</g>\n'
            f"<text {moved}>{text}</text>"
        )

    return _TEXT_RE.sub(replace, svg)

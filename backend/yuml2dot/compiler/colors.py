"""
Fill colour resolution and label contrast.

Named colours come from matplotlib's CSS4 table (a superset of the
common X11 names used in yUML documents). The table is built on first
use and never mutated afterwards.
"""

import re
from dataclasses import dataclass
from functools import lru_cache
from types import MappingProxyType
from typing import Mapping, Optional, Tuple

from matplotlib.colors import CSS4_COLORS, to_rgb

# Rec. 709 luma; anything darker than this gets white text.
LUMA_THRESHOLD = 128.0

_HEX_RE = re.compile(r"^#[0-9a-fA-F]{6}$")


@dataclass(frozen=True)
class ResolvedColor:
    value: str                  # hex triple when known, raw name otherwise
    luma: Optional[float] = None

    @property
    def fontcolor(self) -> Optional[str]:
        if self.luma is None:
            return None
        return "white" if self.luma < LUMA_THRESHOLD else "black"


def _luma(rgb: Tuple[float, float, float]) -> float:
    r, g, b = (channel * 255 for channel in rgb)
    return 0.2126 * r + 0.7152 * g + 0.0722 * b


@lru_cache(maxsize=1)
def color_table() -> Mapping[str, Tuple[str, float]]:
    """name -> (hex, luma), read-only."""
    table = {}
    for name, hex_value in CSS4_COLORS.items():
        table[name.lower()] = (hex_value.lower(), _luma(to_rgb(hex_value)))
    return MappingProxyType(table)


def resolve_color(color: str) -> Optional[ResolvedColor]:
    color = color.strip().lower()
    if not color:
        return None

    if _HEX_RE.match(color):
        return ResolvedColor(color, _luma(to_rgb(color)))

    known = color_table().get(color)
    if known is not None:
        return ResolvedColor(*known)

    # Graphviz knows more X11 names (e.g. "red3") than the table does
    return ResolvedColor(color)

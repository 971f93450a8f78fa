"""Label colours shared by every frontend.

The first eight labels use fixed pastel colours; larger boards get
evenly spaced hues so neighbouring labels stay distinguishable.
"""

from __future__ import annotations

import colorsys

BASE_COLORS: tuple[str, ...] = (
    "#FFB6C1",  # pink
    "#87CEEB",  # sky blue
    "#98FB98",  # pale green
    "#DDA0DD",  # plum
    "#F0E68C",  # khaki
    "#E6E6FA",  # lavender
    "#FFA07A",  # light salmon
    "#B0C4DE",  # light steel blue
)

_GOLDEN = 0.618033988749895


def label_hex(label: int) -> str:
    """Return a ``#RRGGBB`` colour for *label*."""
    if label < len(BASE_COLORS):
        return BASE_COLORS[label]
    hue = (label * _GOLDEN) % 1.0
    r, g, b = colorsys.hls_to_rgb(hue, 0.78, 0.65)
    return f"#{int(r * 255):02X}{int(g * 255):02X}{int(b * 255):02X}"


def label_rgb(label: int) -> tuple[int, int, int]:
    h = label_hex(label)
    return int(h[1:3], 16), int(h[3:5], 16), int(h[5:7], 16)

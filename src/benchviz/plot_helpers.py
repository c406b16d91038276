"""Helper functions shared by the comparison and violin pipelines.

Byte-size tick labels, the comparison color palette, text escaping for
Plotly labels, and axis-scale mapping.
"""

from __future__ import annotations

import html

from benchviz.plot_config import AxisScale

DEFAULT_FONT = "Helvetica"
SIZE = (1280, 720)
LINEWIDTH = 2.0
# gnuplot-style point size 0.75 on an 8px marker
POINT_SIZE = 0.75 * 8
KDE_POINTS = 500

VIOLIN_WIDTH = 1280
VIOLIN_BASE_HEIGHT = 200
VIOLIN_LANE_HEIGHT = 25
# Half-width of a violin band relative to a unit lane; keeps lanes apart.
VIOLIN_HALF_WIDTH = 0.45

DARK_BLUE = "rgb(31, 120, 180)"

COMPARISON_COLORS = [
    "rgb(178, 34, 34)",
    "rgb(46, 139, 87)",
    "rgb(0, 139, 139)",
    "rgb(255, 215, 0)",
    "rgb(0, 0, 139)",
    "rgb(220, 20, 60)",
    "rgb(139, 0, 139)",
    "rgb(0, 255, 127)",
    "rgb(0, 50, 255)",
]
NUM_COLORS = len(COMPARISON_COLORS)

_KB = 1024
_MB = 1024 * 1024
_GB = 1024 * 1024 * 1024


def color_for(index: int) -> str:
    """Palette color for the group at position index (cycles every NUM_COLORS)."""
    return COMPARISON_COLORS[index % NUM_COLORS]


def format_bytes(num_bytes: int) -> str:
    """Format a byte count in the largest of b/Kb/Mb/Gb that keeps it >= 1.

    >>> format_bytes(2048)
    '2Kb'
    """
    if num_bytes < _KB:
        return f"{num_bytes:.0f}b"
    if num_bytes < _MB:
        return f"{num_bytes / _KB:.0f}Kb"
    if num_bytes < _GB:
        return f"{num_bytes / _MB:.0f}Mb"
    return f"{num_bytes / _GB:.0f}Gb"


def escape_text(text: str) -> str:
    """Escape free text for Plotly labels, which accept a subset of HTML."""
    return html.escape(text, quote=False)


def to_plotly_axis_type(scale: AxisScale) -> str:
    """Map an AxisScale to Plotly's layout axis ``type``."""
    if scale == AxisScale.LOGARITHMIC:
        return "log"
    return "linear"

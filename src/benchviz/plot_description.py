"""Backend-agnostic plot description.

A PlotDescription is everything a renderer needs: title, canvas, axes and
an ordered list of series. The pipelines in benchviz.summary build one per
call and hand it to a Renderer.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional

from benchviz.plot_config import AxisScale


class SeriesShape(Enum):
    """How a series is drawn."""
    LINE = "line"
    POINTS = "points"
    FILLED_BAND = "filled_band"


@dataclass
class Series:
    """One drawable unit.

    For FILLED_BAND series, y is the upper edge and y2 the lower edge.
    """
    x: list[float]
    y: list[float]
    shape: SeriesShape
    color: str
    label: Optional[str] = None
    y2: Optional[list[float]] = None
    line_width: float = 2.0
    point_size: float = 6.0

    def to_dict(self) -> dict[str, Any]:
        return {
            "x": list(self.x),
            "y": list(self.y),
            "y2": None if self.y2 is None else list(self.y2),
            "shape": self.shape.value,
            "color": self.color,
            "label": self.label,
            "line_width": self.line_width,
            "point_size": self.point_size,
        }


@dataclass
class Axis:
    """Axis label, scale, optional range and ticks, grid visibility."""
    label: str = ""
    scale: AxisScale = AxisScale.LINEAR
    range: Optional[tuple[float, float]] = None
    tick_positions: list[float] = field(default_factory=list)
    tick_labels: list[str] = field(default_factory=list)
    grid_major: bool = False
    grid_minor: bool = False

    def to_dict(self) -> dict[str, Any]:
        return {
            "label": self.label,
            "scale": self.scale.value,
            "range": None if self.range is None else list(self.range),
            "tick_positions": list(self.tick_positions),
            "tick_labels": list(self.tick_labels),
            "grid_major": self.grid_major,
            "grid_minor": self.grid_minor,
        }


@dataclass
class Legend:
    """Legend placement. outside=True puts it right of the plot area, top aligned."""
    visible: bool = True
    outside: bool = False


@dataclass
class PlotDescription:
    """Complete description of one plot, ready for a renderer."""
    title: str
    output: str
    width: int
    height: int
    x_axis: Axis
    y_axis: Axis
    series: list[Series] = field(default_factory=list)
    font_family: str = "Helvetica"
    legend: Legend = field(default_factory=Legend)

    def to_dict(self) -> dict[str, Any]:
        """JSON-friendly dictionary; used for debug logging."""
        return {
            "title": self.title,
            "output": self.output,
            "width": self.width,
            "height": self.height,
            "font_family": self.font_family,
            "legend": {"visible": self.legend.visible, "outside": self.legend.outside},
            "x_axis": self.x_axis.to_dict(),
            "y_axis": self.y_axis.to_dict(),
            "series": [s.to_dict() for s in self.series],
        }

"""Plot configuration for comparison plots.

This module defines the AxisScale enum and PlotConfiguration dataclass that
callers use to override labels, axis scales, grids and speedup mode.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional

from benchviz.utils.logging import get_logger

logger = get_logger(__name__)


class AxisScale(Enum):
    """Axis scale: linear or logarithmic."""
    LINEAR = "linear"
    LOGARITHMIC = "logarithmic"


@dataclass
class PlotConfiguration:
    """Configuration for a single comparison plot.

    Empty strings mean "use the default" for x_label, y_label and label.
    """
    x_label: str = ""
    y_label: str = ""
    label: str = ""                    # explicit title; replaces "<title>: Comparison"
    x_scale: AxisScale = AxisScale.LINEAR
    y_scale: AxisScale = AxisScale.LINEAR
    x_grid_major: bool = False
    x_grid_minor: bool = False
    y_grid_major: bool = False
    y_grid_minor: bool = False
    tics: list[int] = field(default_factory=list)  # byte positions for the x axis
    speedup: bool = False
    speedup_id: Optional[str] = None   # baseline function identity

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a JSON-friendly dictionary (enums as strings)."""
        return {
            "x_label": self.x_label,
            "y_label": self.y_label,
            "label": self.label,
            "x_scale": self.x_scale.value,
            "y_scale": self.y_scale.value,
            "x_grid_major": self.x_grid_major,
            "x_grid_minor": self.x_grid_minor,
            "y_grid_major": self.y_grid_major,
            "y_grid_minor": self.y_grid_minor,
            "tics": list(self.tics),
            "speedup": self.speedup,
            "speedup_id": self.speedup_id,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "PlotConfiguration":
        """Deserialize from a dictionary.

        Missing keys take their defaults; unknown keys are ignored with a warning.

        Raises:
            ValueError: If x_scale or y_scale is not a known AxisScale value.
        """
        known = set(cls.__dataclass_fields__)
        unknown = sorted(set(data) - known)
        if unknown:
            logger.warning(f"PlotConfiguration.from_dict: ignoring unknown keys {unknown}")
        speedup_id = data.get("speedup_id")
        return cls(
            x_label=str(data.get("x_label", "")),
            y_label=str(data.get("y_label", "")),
            label=str(data.get("label", "")),
            x_scale=AxisScale(data.get("x_scale", AxisScale.LINEAR.value)),
            y_scale=AxisScale(data.get("y_scale", AxisScale.LINEAR.value)),
            x_grid_major=bool(data.get("x_grid_major", False)),
            x_grid_minor=bool(data.get("x_grid_minor", False)),
            y_grid_major=bool(data.get("y_grid_major", False)),
            y_grid_minor=bool(data.get("y_grid_minor", False)),
            tics=[int(t) for t in data.get("tics", [])],
            speedup=bool(data.get("speedup", False)),
            speedup_id=None if speedup_id is None else str(speedup_id),
        )

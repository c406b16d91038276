"""Value formatters: pick a human-scale unit for measured values.

A formatter looks at one representative value, chooses a unit, rescales a
buffer of values in place and returns the unit's short label.
"""

from __future__ import annotations

from typing import MutableSequence, Protocol, Union

import numpy as np

Values = Union[np.ndarray, MutableSequence[float]]


class ValueFormatter(Protocol):
    """Unit-formatter collaborator used by the plot pipelines."""

    def scale_values(self, typical_value: float, values: Values) -> str:
        """Multiply values in place by the chosen unit factor; return the unit label."""
        ...


def _scale_in_place(values: Values, factor: float) -> None:
    if isinstance(values, np.ndarray):
        values *= factor
        return
    for i, v in enumerate(values):
        values[i] = v * factor


class DurationFormatter:
    """Formats durations measured in nanoseconds as ns, µs, ms or s."""

    def scale_factor(self, typical_value: float) -> tuple[float, str]:
        """Return (factor, unit) for a representative nanosecond value.

        NaN falls through to seconds.
        """
        if typical_value < 1e3:
            return 1.0, "ns"
        if typical_value < 1e6:
            return 1e-3, "µs"
        if typical_value < 1e9:
            return 1e-6, "ms"
        return 1e-9, "s"

    def scale_values(self, typical_value: float, values: Values) -> str:
        factor, unit = self.scale_factor(typical_value)
        _scale_in_place(values, factor)
        return unit

"""
Speedup normalization against a baseline function.

For every parameter value x (rounded to an integer key) exactly one curve
from the baseline function and one curve from another function must be
present. The speedup at x is baseline_mean / comparison_mean, whatever
order the two curves arrive in.

Anything else at a given x (a missing side, a second baseline, a third
function) is reported as a SpeedupConflictError rather than resolved
silently.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Sequence

import numpy as np

from benchviz.errors import EmptyInputError, SpeedupConflictError
from benchviz.algorithms.grouping import CurveGroup, function_identity, numeric_parameter
from benchviz.utils.logging import get_logger

logger = get_logger(__name__)


@dataclass
class SpeedupPoint:
    """Means observed at one parameter value."""
    baseline_mean: Optional[float] = None
    comparison_mean: Optional[float] = None
    contributors: list[str] = field(default_factory=list)

    def add(self, function_id: str, mean: float, baseline_id: Optional[str]) -> None:
        """Record one curve's mean.

        Raises:
            SpeedupConflictError: If this side of the point is already filled.
        """
        self.contributors.append(function_id)
        if function_id == baseline_id:
            if self.baseline_mean is not None:
                raise SpeedupConflictError(
                    f"More than one baseline mean at the same input (contributors: {self.contributors})"
                )
            self.baseline_mean = mean
        else:
            if self.comparison_mean is not None:
                raise SpeedupConflictError(
                    "More than two functions contribute at the same input "
                    f"(contributors: {self.contributors})"
                )
            self.comparison_mean = mean

    @property
    def ratio(self) -> float:
        """baseline_mean / comparison_mean; NaN when the comparison mean is zero."""
        if self.baseline_mean is None or self.comparison_mean is None:
            raise SpeedupConflictError(
                f"Speedup needs a baseline and a comparison mean (contributors: {self.contributors})"
            )
        if self.comparison_mean == 0.0:
            return float("nan")
        return self.baseline_mean / self.comparison_mean


@dataclass
class SpeedupResult:
    """Speedup series. max_mean is the largest raw mean seen; informational only."""
    xs: np.ndarray
    ratios: np.ndarray
    max_mean: float


def accumulate_speedup(groups: Sequence[CurveGroup], baseline_id: Optional[str]) -> SpeedupResult:
    """Collapse all groups into one speedup series keyed by integer parameter.

    Ratios are unitless and are not rescaled. The largest raw mean is
    reported in SpeedupResult.max_mean for logging only.

    Raises:
        EmptyInputError: If there are no curves.
        MissingFunctionIdError: If a curve has no function identity.
        NonNumericParameterError: If a curve has no finite numeric parameter.
        SpeedupConflictError: If some x lacks a baseline or comparison, or has extra contributors.
    """
    points: dict[int, SpeedupPoint] = {}
    max_mean = -np.inf
    for group in groups:
        for curve in group.curves:
            func = function_identity(curve.id)
            key = int(round(numeric_parameter(curve.id)))
            mean = curve.mean()
            points.setdefault(key, SpeedupPoint()).add(func, mean, baseline_id)
            max_mean = max(max_mean, mean)

    if not points:
        raise EmptyInputError("No curves to compute a speedup from")

    keys = sorted(points)
    ratios = np.array([points[k].ratio for k in keys], dtype=float)
    n_zero = int(np.isnan(ratios).sum())
    if n_zero:
        logger.warning(f"accumulate_speedup: {n_zero} point(s) have a zero comparison mean; plotted as gaps")
    return SpeedupResult(
        xs=np.array(keys, dtype=float),
        ratios=ratios,
        max_mean=float(max_mean),
    )

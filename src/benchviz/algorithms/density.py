"""
Density estimation and violin lane layout.

estimate() sweeps a Gaussian KDE (scipy) over the sample range padded by
three bandwidths. normalize_peak() scales each density so its peak is 1.0,
and violin_lanes() turns normalized densities into symmetric bands around
lane centers at index + 0.5, never wider than VIOLIN_HALF_WIDTH per side.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

import numpy as np
from scipy.stats import gaussian_kde

from benchviz.errors import CallerContractError, EmptyInputError
from benchviz.plot_helpers import VIOLIN_HALF_WIDTH
from benchviz.utils.logging import get_logger

logger = get_logger(__name__)


def estimate(
    sample: Sequence[float],
    point_count: int,
    bandwidth: Optional[float] = None,
) -> tuple[np.ndarray, np.ndarray]:
    """Evaluate a Gaussian KDE of sample on point_count evenly spaced points.

    Args:
        sample: Raw measured values.
        point_count: Number of sweep points (>= 2).
        bandwidth: Kernel standard deviation. Defaults to Silverman's rule.

    Returns:
        (x, y): sweep positions and density values, both of length point_count.
        A sample without finite spread yields a sweep around its value with zero density.

    Raises:
        EmptyInputError: If sample is empty.
        CallerContractError: If point_count < 2 or bandwidth is not positive.
    """
    data = np.asarray(sample, dtype=float)
    if data.size == 0:
        raise EmptyInputError("Cannot estimate the density of an empty sample")
    if point_count < 2:
        raise CallerContractError(f"point_count must be >= 2, got {point_count}")
    if bandwidth is not None and not bandwidth > 0:
        raise CallerContractError(f"bandwidth must be positive, got {bandwidth}")

    with np.errstate(over="ignore", invalid="ignore"):
        std = float(np.std(data, ddof=1)) if data.size > 1 else 0.0
    if std == 0.0 or not np.isfinite(std):
        center = float(data[0])
        span = abs(center) * 0.01 or 1.0
        logger.debug(f"estimate: sample of {data.size} value(s) has no usable spread (std={std}); zero density")
        return np.linspace(center - span, center + span, point_count), np.zeros(point_count)

    bw_method = "silverman" if bandwidth is None else bandwidth / std
    kde = gaussian_kde(data, bw_method=bw_method)
    h = float(np.sqrt(kde.covariance[0, 0]))
    x = np.linspace(data.min() - 3.0 * h, data.max() + 3.0 * h, point_count)
    return x, kde(x)


def normalize_peak(y: np.ndarray) -> np.ndarray:
    """Divide y by its maximum so the peak is 1.0.

    A zero or non-finite peak returns all zeros (no visible band).
    """
    y = np.asarray(y, dtype=float)
    y_max = float(np.max(y)) if y.size else 0.0
    if not np.isfinite(y_max) or y_max <= 0.0:
        return np.zeros_like(y)
    return y / y_max


def positive_range(xs: Sequence[np.ndarray]) -> Optional[tuple[float, float]]:
    """(min, max) over the strictly positive values of all xs, or None if there are none."""
    flat = np.concatenate([np.asarray(x, dtype=float) for x in xs]) if xs else np.array([])
    pos = flat[flat > 0.0]
    if pos.size == 0:
        return None
    return float(pos.min()), float(pos.max())


@dataclass
class ViolinLane:
    """One benchmark's band: x positions and upper/lower y edges around center."""
    center: float
    x: np.ndarray
    upper: np.ndarray
    lower: np.ndarray


def violin_lanes(
    densities: Sequence[tuple[np.ndarray, np.ndarray]],
    x_factor: float = 1.0,
) -> list[ViolinLane]:
    """Lay out normalized densities as bands at center index + 0.5.

    Args:
        densities: (x, normalized y) per curve, already in plot order.
        x_factor: Unit scale applied to x.
    """
    lanes = []
    for i, (x, y) in enumerate(densities):
        center = i + 0.5
        half = np.asarray(y, dtype=float) * VIOLIN_HALF_WIDTH
        lanes.append(ViolinLane(
            center=center,
            x=np.asarray(x, dtype=float) * x_factor,
            upper=center + half,
            lower=center - half,
        ))
    return lanes

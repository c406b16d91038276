"""Summary plots across benchmark variants.

This module provides the SummaryPlotter class, which builds the two summary
plots from raw benchmark samples and hands them to a renderer:

- line comparison: mean value vs input parameter, one curve per function,
  or a single speedup curve against a baseline function
- violin: side-by-side value distributions, one density lane per variant
"""

from __future__ import annotations

from concurrent.futures import Future
from typing import Optional, Sequence

import numpy as np

from benchviz.algorithms.density import (
    estimate,
    normalize_peak,
    positive_range,
    violin_lanes,
)
from benchviz.algorithms.grouping import check_contiguous, group_consecutive, sorted_points
from benchviz.algorithms.speedup import accumulate_speedup
from benchviz.errors import CallerContractError, EmptyInputError
from benchviz.formatters import ValueFormatter
from benchviz.model import Curve, ValueType
from benchviz.plot_config import AxisScale, PlotConfiguration
from benchviz.plot_description import Axis, Legend, PlotDescription, Series, SeriesShape
from benchviz.plot_helpers import (
    DARK_BLUE,
    DEFAULT_FONT,
    KDE_POINTS,
    LINEWIDTH,
    POINT_SIZE,
    SIZE,
    VIOLIN_BASE_HEIGHT,
    VIOLIN_LANE_HEIGHT,
    VIOLIN_WIDTH,
    color_for,
    escape_text,
    format_bytes,
)
from benchviz.renderer import Renderer
from benchviz.utils.logging import get_logger, log_plot_description

logger = get_logger(__name__)

_INPUT_LABELS = {
    ValueType.BYTES: "Input size (Bytes)",
    ValueType.ELEMENTS: "Input size (Elements)",
    ValueType.VALUE: "Input",
}


def _line_and_points(
    xs: np.ndarray, ys: np.ndarray, color: str, label: Optional[str]
) -> list[Series]:
    """A labeled line plus unlabeled markers at the same coordinates."""
    x = [float(v) for v in xs]
    y = [float(v) for v in ys]
    return [
        Series(x=x, y=y, shape=SeriesShape.LINE, color=color, label=label, line_width=LINEWIDTH),
        Series(x=x, y=y, shape=SeriesShape.POINTS, color=color, point_size=POINT_SIZE),
    ]


class SummaryPlotter:
    """Builds comparison and violin plot descriptions and dispatches them.

    Attributes:
        formatter: Picks the display unit for measured values.
        renderer: Turns a PlotDescription into a rendering job.
        kde_points: Number of points in each density sweep.
    """

    def __init__(
        self,
        formatter: ValueFormatter,
        renderer: Renderer,
        *,
        kde_points: int = KDE_POINTS,
    ) -> None:
        self.formatter = formatter
        self.renderer = renderer
        self.kde_points = kde_points

    # ------------------------------------------------------------------
    # Line comparison
    # ------------------------------------------------------------------

    def build_line_comparison(
        self,
        title: str,
        curves: Sequence[Curve],
        output: str,
        value_type: ValueType,
        conf: PlotConfiguration,
    ) -> PlotDescription:
        """Build the comparison plot description.

        Args:
            title: Benchmark group title; escaped into "<title>: Comparison" unless conf.label is set.
            curves: Curves ordered so that equal function ids are adjacent.
            output: Output path or identifier passed through to the renderer.
            value_type: What the input parameter counts; picks the default x label.
            conf: Labels, scales, grids, tics and speedup settings.

        Raises:
            EmptyInputError: If curves is empty or a sample is empty.
            NonContiguousGroupError: If equal function ids are not adjacent.
            NonNumericParameterError: If a curve has no numeric parameter.
            MissingFunctionIdError: In speedup mode, if a curve has no function id.
            SpeedupConflictError: In speedup mode, if some input lacks a baseline/comparison pair.
        """
        check_contiguous(curves)
        if conf.speedup and conf.speedup_id is None:
            raise CallerContractError("Speedup mode requires speedup_id (the baseline function id)")

        logger.info(
            f"SummaryPlotter.build_line_comparison: title={title!r}, curves={len(curves)}, "
            f"value_type={value_type.value}, speedup={conf.speedup}"
        )

        x_label = conf.x_label or _INPUT_LABELS[value_type]
        title_label = conf.label or f"{escape_text(title)}: Comparison"

        max_mean = float(np.nanmax([c.mean() for c in curves]))
        unit = self.formatter.scale_values(max_mean, [1.0])
        if conf.y_label:
            y_label = conf.y_label
        elif conf.speedup:
            y_label = "Speedup"
        else:
            y_label = f"Average time ({unit})"

        groups = group_consecutive(curves)
        series: list[Series] = []
        if conf.speedup:
            result = accumulate_speedup(groups, conf.speedup_id)
            logger.debug(
                f"speedup: {len(result.xs)} points against {conf.speedup_id!r}, "
                f"max mean={result.max_mean}"
            )
            # Ratios are unitless; only the time axis is rescaled.
            series.extend(_line_and_points(result.xs, result.ratios, color_for(0), "Speedup"))
        else:
            for i, group in enumerate(groups):
                xs, ys = sorted_points(group)
                self.formatter.scale_values(max_mean, ys)
                label = None if group.key is None else escape_text(group.key)
                series.extend(_line_and_points(xs, ys, color_for(i), label))

        description = PlotDescription(
            title=title_label,
            output=str(output),
            width=SIZE[0],
            height=SIZE[1],
            font_family=DEFAULT_FONT,
            legend=Legend(visible=True, outside=True),
            x_axis=Axis(
                label=x_label,
                scale=conf.x_scale,
                tick_positions=[float(t) for t in conf.tics],
                tick_labels=[format_bytes(t) for t in conf.tics],
                grid_major=conf.x_grid_major,
                grid_minor=conf.x_grid_minor,
            ),
            y_axis=Axis(
                label=y_label,
                scale=conf.y_scale,
                grid_major=conf.y_grid_major,
                grid_minor=conf.y_grid_minor,
            ),
            series=series,
        )
        log_plot_description(logger, "Comparison", description)
        return description

    def line_comparison(
        self,
        title: str,
        curves: Sequence[Curve],
        output: str,
        value_type: ValueType,
        conf: PlotConfiguration,
    ) -> Future:
        """Build the comparison plot and dispatch it; returns the rendering job handle."""
        description = self.build_line_comparison(title, curves, output, value_type, conf)
        return self.renderer.render(description)

    # ------------------------------------------------------------------
    # Violin
    # ------------------------------------------------------------------

    def build_violin(
        self,
        title: str,
        curves: Sequence[Curve],
        output: str,
        axis_scale: AxisScale = AxisScale.LINEAR,
    ) -> PlotDescription:
        """Build the violin plot description.

        The first curve is drawn in the top lane.

        Raises:
            EmptyInputError: If curves is empty or a sample is empty.
        """
        if not curves:
            raise EmptyInputError("No curves to plot")
        logger.info(f"SummaryPlotter.build_violin: title={title!r}, curves={len(curves)}")

        ordered = list(reversed(curves))
        densities = []
        for curve in ordered:
            x, y = estimate(curve.values(), self.kde_points)
            densities.append((x, normalize_peak(y)))

        x_range = positive_range([x for x, _ in densities])
        if x_range is None:
            logger.warning(f"Violin plot {title!r}: no positive values; using default axis scale")
            x_min, x_max = 1.0, 1.0
        else:
            x_min, x_max = x_range

        # Use the middle of the range as the typical value for picking a unit.
        one = [1.0]
        unit = self.formatter.scale_values((x_min + x_max) / 2.0, one)
        factor = one[0]

        series = []
        for i, lane in enumerate(violin_lanes(densities, factor)):
            series.append(Series(
                x=lane.x.tolist(),
                y=lane.upper.tolist(),
                y2=lane.lower.tolist(),
                shape=SeriesShape.FILLED_BAND,
                color=DARK_BLUE,
                label="PDF" if i == 0 else None,
            ))

        n = len(ordered)
        description = PlotDescription(
            title=f"{escape_text(title)}: Violin plot",
            output=str(output),
            width=VIOLIN_WIDTH,
            height=VIOLIN_BASE_HEIGHT + VIOLIN_LANE_HEIGHT * n,
            font_family=DEFAULT_FONT,
            x_axis=Axis(
                label=f"Average time ({unit})",
                scale=axis_scale,
                range=(0.0, x_max * factor),
                grid_major=True,
                grid_minor=False,
            ),
            y_axis=Axis(
                label="Input",
                range=(0.0, float(n)),
                tick_positions=[i + 0.5 for i in range(n)],
                tick_labels=[escape_text(c.id.as_title()) for c in ordered],
            ),
            series=series,
        )
        log_plot_description(logger, "Violin", description)
        return description

    def violin(
        self,
        title: str,
        curves: Sequence[Curve],
        output: str,
        axis_scale: AxisScale = AxisScale.LINEAR,
    ) -> Future:
        """Build the violin plot and dispatch it; returns the rendering job handle."""
        description = self.build_violin(title, curves, output, axis_scale)
        return self.renderer.render(description)

"""Plotly rendering backend.

PlotlyRenderer turns a PlotDescription into a plotly Figure on the
caller's thread, then writes it to disk on a worker thread. render()
returns the concurrent.futures.Future for that write without waiting on it.
"""

from __future__ import annotations

import math
from concurrent.futures import Executor, Future, ThreadPoolExecutor
from pathlib import Path
from typing import Any, Optional, Protocol

import plotly.graph_objects as go

from benchviz.errors import RenderError
from benchviz.plot_config import AxisScale
from benchviz.plot_description import Axis, PlotDescription, Series, SeriesShape
from benchviz.plot_helpers import to_plotly_axis_type
from benchviz.utils.logging import get_logger

logger = get_logger(__name__)


class Renderer(Protocol):
    """Rendering collaborator: dispatch a plot description, return a job handle."""

    def render(self, description: PlotDescription) -> Future:
        ...


def _trace(series: Series) -> go.Scatter:
    """Build the Plotly trace for one series."""
    showlegend = series.label is not None
    if series.shape == SeriesShape.LINE:
        return go.Scatter(
            x=series.x,
            y=series.y,
            mode="lines",
            name=series.label,
            showlegend=showlegend,
            line=dict(color=series.color, width=series.line_width, dash="solid"),
        )
    if series.shape == SeriesShape.POINTS:
        return go.Scatter(
            x=series.x,
            y=series.y,
            mode="markers",
            name=series.label,
            showlegend=showlegend,
            marker=dict(symbol="circle", size=series.point_size, color=series.color),
        )
    if series.y2 is None:
        raise RenderError(f"Filled band {series.label!r} has no lower edge")
    # Closed polygon: along the upper edge, back along the lower edge.
    return go.Scatter(
        x=list(series.x) + list(series.x)[::-1],
        y=list(series.y) + list(series.y2)[::-1],
        mode="lines",
        fill="toself",
        fillcolor=series.color,
        line=dict(color=series.color, width=0),
        name=series.label,
        showlegend=showlegend,
    )


def _axis_layout(axis: Axis) -> dict[str, Any]:
    layout: dict[str, Any] = dict(
        title=dict(text=axis.label),
        type=to_plotly_axis_type(axis.scale),
        showgrid=axis.grid_major,
        minor=dict(showgrid=axis.grid_minor),
    )
    if axis.range is not None:
        lo, hi = axis.range
        if axis.scale == AxisScale.LOGARITHMIC:
            # Plotly log axes take log10 limits; a non-positive bound leaves autorange on.
            if lo > 0 and hi > 0:
                layout["range"] = [math.log10(lo), math.log10(hi)]
        else:
            layout["range"] = [lo, hi]
    if axis.tick_positions:
        layout["tickmode"] = "array"
        layout["tickvals"] = list(axis.tick_positions)
        layout["ticktext"] = list(axis.tick_labels)
    return layout


def build_figure(description: PlotDescription) -> go.Figure:
    """Convert a PlotDescription to a Plotly Figure."""
    fig = go.Figure()
    for series in description.series:
        fig.add_trace(_trace(series))

    legend: dict[str, Any] = {}
    if description.legend.outside:
        legend = dict(x=1.02, y=1.0, xanchor="left", yanchor="top", traceorder="normal")
    fig.update_layout(
        title=dict(text=description.title),
        font=dict(family=description.font_family),
        width=description.width,
        height=description.height,
        showlegend=description.legend.visible,
        legend=legend,
        xaxis=_axis_layout(description.x_axis),
        yaxis=_axis_layout(description.y_axis),
        margin=dict(l=80, r=40, t=60, b=60),
    )
    return fig


def _write(fig: go.Figure, output: Path, width: int, height: int) -> Path:
    output.parent.mkdir(parents=True, exist_ok=True)
    if output.suffix.lower() == ".html":
        fig.write_html(output, include_plotlyjs="cdn", full_html=True)
    else:
        # Static formats need the optional kaleido package.
        fig.write_image(output, width=width, height=height)
    logger.debug(f"Wrote {output}")
    return output


class PlotlyRenderer:
    """Renders plot descriptions to files with Plotly.

    Attributes:
        executor: Executor that runs the file writes.
    """

    def __init__(self, executor: Optional[Executor] = None, max_workers: int = 1) -> None:
        """Initialize the renderer.

        Args:
            executor: Executor for write jobs. A private ThreadPoolExecutor is created when None.
            max_workers: Worker count for the private executor.
        """
        self._owns_executor = executor is None
        self.executor = executor or ThreadPoolExecutor(
            max_workers=max_workers, thread_name_prefix="benchviz-render"
        )

    def figure_dict(self, description: PlotDescription) -> dict:
        """Return the Plotly figure dictionary for description."""
        return build_figure(description).to_dict()

    def render(self, description: PlotDescription) -> Future:
        """Build the figure now and schedule the write; returns the write's Future.

        Raises:
            RenderError: If the description cannot be converted or the job cannot be submitted.
        """
        try:
            fig = build_figure(description)
        except RenderError:
            raise
        except Exception as exc:
            raise RenderError(f"Could not build figure {description.title!r}: {exc}") from exc
        try:
            return self.executor.submit(
                _write, fig, Path(description.output), description.width, description.height
            )
        except RuntimeError as exc:
            raise RenderError(f"Could not schedule rendering of {description.output!r}: {exc}") from exc

    def shutdown(self, wait: bool = True) -> None:
        """Shut down the private executor (no-op for a caller-supplied one)."""
        if self._owns_executor:
            self.executor.shutdown(wait=wait)

    def __enter__(self) -> "PlotlyRenderer":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.shutdown(wait=True)

"""Tests for SummaryPlotter line comparison plots."""

import pytest

from benchviz.errors import CallerContractError, NonContiguousGroupError, NonNumericParameterError
from benchviz.model import Throughput, ValueType
from benchviz.plot_config import AxisScale, PlotConfiguration
from benchviz.plot_description import SeriesShape
from benchviz.plot_helpers import color_for


@pytest.fixture
def sort_curves(make_curve):
    """Two functions, parameters deliberately out of order within each."""
    return [
        make_curve("quick", "2000", [100_000.0, 104_000.0]),
        make_curve("quick", "1000", [50_000.0, 52_000.0]),
        make_curve("merge", "1000", [60_000.0]),
        make_curve("merge", "2000", [120_000.0]),
    ]


def test_one_line_and_points_per_group(plotter, sort_curves):
    desc = plotter.build_line_comparison("sort", sort_curves, "out.html", ValueType.VALUE, PlotConfiguration())
    shapes = [s.shape for s in desc.series]
    assert shapes == [SeriesShape.LINE, SeriesShape.POINTS] * 2
    assert [s.label for s in desc.series] == ["quick", None, "merge", None]
    assert desc.series[0].color == desc.series[1].color == color_for(0)
    assert desc.series[2].color == color_for(1)


def test_xs_sorted_and_ys_scaled_to_unit(plotter, sort_curves):
    """Means are rescaled by the unit chosen for the largest mean (µs here)."""
    desc = plotter.build_line_comparison("sort", sort_curves, "out.html", ValueType.VALUE, PlotConfiguration())
    quick = desc.series[0]
    assert quick.x == [1000.0, 2000.0]
    assert quick.y == pytest.approx([51.0, 102.0])
    assert desc.y_axis.label == "Average time (µs)"


def test_default_labels_and_canvas(plotter, sort_curves):
    desc = plotter.build_line_comparison("a<b>", sort_curves, "out.html", ValueType.BYTES, PlotConfiguration())
    assert desc.title == "a&lt;b&gt;: Comparison"
    assert desc.x_axis.label == "Input size (Bytes)"
    assert (desc.width, desc.height) == (1280, 720)
    assert desc.legend.outside
    assert desc.output == "out.html"


def test_configuration_overrides(plotter, sort_curves):
    conf = PlotConfiguration(
        x_label="Items",
        y_label="Latency",
        label="Custom title",
        x_scale=AxisScale.LOGARITHMIC,
        y_grid_major=True,
        x_grid_minor=True,
        tics=[1024, 2048],
    )
    desc = plotter.build_line_comparison("sort", sort_curves, "out.html", ValueType.ELEMENTS, conf)
    assert desc.title == "Custom title"
    assert desc.x_axis.label == "Items"
    assert desc.y_axis.label == "Latency"
    assert desc.x_axis.scale == AxisScale.LOGARITHMIC
    assert desc.x_axis.grid_minor and not desc.x_axis.grid_major
    assert desc.y_axis.grid_major
    assert desc.x_axis.tick_positions == [1024.0, 2048.0]
    assert desc.x_axis.tick_labels == ["1Kb", "2Kb"]


def test_elements_label(plotter, sort_curves):
    desc = plotter.build_line_comparison("sort", sort_curves, "o", ValueType.ELEMENTS, PlotConfiguration())
    assert desc.x_axis.label == "Input size (Elements)"


def test_throughput_parameter(plotter, make_curve):
    curves = [
        make_curve("copy", "x", [10.0], throughput=Throughput(ValueType.BYTES, 4096)),
        make_curve("copy", "y", [5.0], throughput=Throughput(ValueType.BYTES, 1024)),
    ]
    desc = plotter.build_line_comparison("copy", curves, "o", ValueType.BYTES, PlotConfiguration())
    assert desc.series[0].x == [1024.0, 4096.0]


def test_unsorted_functions_rejected(plotter, make_curve):
    """Split runs of one function are a caller error, not two legend entries."""
    curves = [make_curve(f, str(i), [1.0]) for i, f in enumerate("AABBA")]
    with pytest.raises(NonContiguousGroupError):
        plotter.build_line_comparison("t", curves, "o", ValueType.VALUE, PlotConfiguration())


def test_non_numeric_parameter_rejected(plotter, make_curve):
    curves = [make_curve("A", "small", [1.0])]
    with pytest.raises(NonNumericParameterError):
        plotter.build_line_comparison("t", curves, "o", ValueType.VALUE, PlotConfiguration())


def test_empty_curves_rejected(plotter):
    with pytest.raises(CallerContractError):
        plotter.build_line_comparison("t", [], "o", ValueType.VALUE, PlotConfiguration())


def test_color_cycles_after_nine_groups(plotter, make_curve):
    """With 11 groups, group 9 reuses group 0's color."""
    curves = [make_curve(f"f{i:02d}", "1", [1.0]) for i in range(11)]
    desc = plotter.build_line_comparison("t", curves, "o", ValueType.VALUE, PlotConfiguration())
    lines = [s for s in desc.series if s.shape == SeriesShape.LINE]
    assert len(lines) == 11
    assert lines[9].color == lines[0].color
    assert lines[10].color == lines[1].color
    assert len({s.color for s in lines[:9]}) == 9


def test_none_function_id_is_unlabeled(plotter, make_curve):
    curves = [make_curve(None, "1", [1.0]), make_curve(None, "2", [2.0])]
    desc = plotter.build_line_comparison("t", curves, "o", ValueType.VALUE, PlotConfiguration())
    assert desc.series[0].label is None


def test_speedup_series(plotter, make_curve):
    """Speedup mode emits a single unitless series relative to the baseline."""
    curves = [
        make_curve("base", "10", [2_000_000.0]),
        make_curve("base", "20", [6_000_000.0]),
        make_curve("simd", "20", [2_000_000.0]),
        make_curve("simd", "10", [4_000_000.0]),
    ]
    conf = PlotConfiguration(speedup=True, speedup_id="base")
    desc = plotter.build_line_comparison("t", curves, "o", ValueType.VALUE, conf)
    assert [s.shape for s in desc.series] == [SeriesShape.LINE, SeriesShape.POINTS]
    assert desc.series[0].label == "Speedup"
    assert desc.series[0].x == [10.0, 20.0]
    assert desc.series[0].y == pytest.approx([0.5, 3.0])
    assert desc.y_axis.label == "Speedup"


def test_speedup_requires_baseline_id(plotter, make_curve):
    curves = [make_curve("base", "10", [1.0])]
    with pytest.raises(CallerContractError):
        plotter.build_line_comparison("t", curves, "o", ValueType.VALUE, PlotConfiguration(speedup=True))


def test_line_comparison_dispatches_to_renderer(plotter, renderer, sort_curves):
    """line_comparison returns the renderer's job handle for the built description."""
    job = plotter.line_comparison("sort", sort_curves, "out.html", ValueType.VALUE, PlotConfiguration())
    assert len(renderer.descriptions) == 1
    assert job.result() is renderer.descriptions[0]


def test_renderer_failure_propagates(make_curve):
    from benchviz.errors import RenderError
    from benchviz.formatters import DurationFormatter
    from benchviz.summary import SummaryPlotter

    class FailingRenderer:
        def render(self, description):
            raise RenderError("backend unavailable")

    plotter = SummaryPlotter(DurationFormatter(), FailingRenderer())
    with pytest.raises(RenderError):
        plotter.line_comparison("t", [make_curve("A", "1", [1.0])], "o", ValueType.VALUE, PlotConfiguration())


@pytest.mark.parametrize("speedup", [False, True])
def test_non_finite_parameter_rejected_in_both_modes(plotter, make_curve, speedup):
    curves = [make_curve("base", "1", [1.0]), make_curve("fast", "nan", [2.0])]
    conf = PlotConfiguration(speedup=speedup, speedup_id="base")
    with pytest.raises(CallerContractError):
        plotter.build_line_comparison("t", curves, "o", ValueType.VALUE, conf)

"""Unit tests for byte formatting, palette and escaping helpers."""

import pytest

from benchviz.plot_config import AxisScale
from benchviz.plot_helpers import (
    COMPARISON_COLORS,
    NUM_COLORS,
    color_for,
    escape_text,
    format_bytes,
    to_plotly_axis_type,
)


@pytest.mark.parametrize(
    "num_bytes, expected",
    [
        (512, "512b"),
        (2048, "2Kb"),
        (5 * 1024 * 1024, "5Mb"),
        (3 * 1024**3, "3Gb"),
        (0, "0b"),
        (1023, "1023b"),
    ],
)
def test_format_bytes(num_bytes, expected):
    assert format_bytes(num_bytes) == expected


def test_palette_has_nine_distinct_colors():
    assert NUM_COLORS == 9
    assert len(set(COMPARISON_COLORS)) == 9


def test_color_for_cycles():
    """Group index 9 reuses the color of group 0."""
    assert color_for(9) == color_for(0)
    assert color_for(10) == color_for(1)
    assert color_for(8) != color_for(0)


def test_escape_text_escapes_markup():
    assert escape_text("a<b>&c") == "a&lt;b&gt;&amp;c"
    assert escape_text("plain_name") == "plain_name"


def test_to_plotly_axis_type():
    assert to_plotly_axis_type(AxisScale.LINEAR) == "linear"
    assert to_plotly_axis_type(AxisScale.LOGARITHMIC) == "log"

"""
benchviz: summary plots for benchmark measurements.

This package provides:
- SummaryPlotter: comparison (mean vs input, or speedup) and violin plots
- PlotlyRenderer: writes plot descriptions to HTML or image files
- DurationFormatter: picks ns/µs/ms/s for measured times
- Logging utilities for library and script use

For log output in scripts:
    ```python
    from benchviz.utils.logging import configure_logging
    configure_logging(level="DEBUG")
    ```
"""

import logging

from benchviz.utils.logging import configure_logging, get_logger

from benchviz.errors import BenchvizError, CallerContractError, RenderError
from benchviz.formatters import DurationFormatter, ValueFormatter
from benchviz.model import BenchmarkId, Curve, Throughput, ValueType
from benchviz.plot_config import AxisScale, PlotConfiguration
from benchviz.plot_description import PlotDescription
from benchviz.renderer import PlotlyRenderer, Renderer
from benchviz.summary import SummaryPlotter

# NullHandler so library logs don't reach root unless an application configures logging.
_logger = logging.getLogger("benchviz")
if not _logger.handlers:
    _logger.addHandler(logging.NullHandler())

__all__ = [
    "AxisScale",
    "BenchmarkId",
    "BenchvizError",
    "CallerContractError",
    "Curve",
    "DurationFormatter",
    "PlotConfiguration",
    "PlotDescription",
    "PlotlyRenderer",
    "RenderError",
    "Renderer",
    "SummaryPlotter",
    "Throughput",
    "ValueFormatter",
    "ValueType",
    "configure_logging",
    "get_logger",
]

__version__ = "0.1.0"

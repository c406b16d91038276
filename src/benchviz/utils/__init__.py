"""Utility functions for benchviz."""

from .logging import configure_logging, get_logger, log_plot_description

__all__ = [
    "configure_logging",
    "get_logger",
    "log_plot_description",
]

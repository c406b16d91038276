"""Exception types raised by the plot pipelines.

Caller-contract violations derive from ValueError so hosts that already
catch bad input keep working; rendering failures derive from RuntimeError.
"""

from __future__ import annotations


class BenchvizError(Exception):
    """Base class for every error raised by benchviz."""


class CallerContractError(BenchvizError, ValueError):
    """The caller handed the pipeline input it promised not to."""


class EmptyInputError(CallerContractError):
    """No curves, or a curve with an empty sample."""


class NonNumericParameterError(CallerContractError):
    """A benchmark id has no numeric parameter where one is required."""


class MissingFunctionIdError(CallerContractError):
    """A benchmark id has no function identity where one is required."""


class NonContiguousGroupError(CallerContractError):
    """Curves sharing a function identity are not adjacent in the input."""


class SpeedupConflictError(CallerContractError):
    """A speedup point does not have exactly one baseline and one comparison."""


class RenderError(BenchvizError, RuntimeError):
    """The rendering backend could not turn a plot description into output."""

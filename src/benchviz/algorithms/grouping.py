"""
Grouping and ordering of curves for comparison plots.

Curves are grouped by *consecutive* runs of equal function identity, so
an input of A, A, B, B, A yields three groups. Callers must therefore
pass curves already ordered by function identity; check_contiguous()
turns a violation of that precondition into a NonContiguousGroupError
instead of a silently split legend entry.

Within a group, points are (numeric parameter, mean of sample) sorted by
ascending parameter.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from itertools import groupby
from typing import Optional, Sequence

import numpy as np
import pandas as pd

from benchviz.errors import (
    EmptyInputError,
    MissingFunctionIdError,
    NonContiguousGroupError,
    NonNumericParameterError,
)
from benchviz.model import BenchmarkId, Curve


@dataclass
class CurveGroup:
    """A run of adjacent curves sharing one function identity."""
    key: Optional[str]
    curves: list[Curve]


def function_identity(bid: BenchmarkId) -> str:
    """Function identity of bid.

    Raises:
        MissingFunctionIdError: If bid has no function identity.
    """
    if bid.function_id is None:
        raise MissingFunctionIdError(f"Benchmark {bid.as_title()!r} has no function id")
    return bid.function_id


def numeric_parameter(bid: BenchmarkId) -> float:
    """Numeric parameter value of bid.

    Raises:
        NonNumericParameterError: If the parameter is missing, not a number, or not finite.
    """
    x = bid.as_number()
    if x is None or not math.isfinite(x):
        raise NonNumericParameterError(
            f"Benchmark {bid.as_title()!r} has no numeric parameter "
            f"(value_str={bid.value_str!r}, throughput={bid.throughput!r})"
        )
    return x


def group_consecutive(curves: Sequence[Curve]) -> list[CurveGroup]:
    """Split curves into runs of equal function identity (None is its own key)."""
    return [
        CurveGroup(key=key, curves=list(run))
        for key, run in groupby(curves, key=lambda c: c.id.function_id)
    ]


def check_contiguous(curves: Sequence[Curve]) -> None:
    """Require every function identity to appear in a single run.

    Raises:
        EmptyInputError: If curves is empty.
        NonContiguousGroupError: If an identity reappears after another one.
    """
    if not curves:
        raise EmptyInputError("No curves to plot")
    seen: set[Optional[str]] = set()
    for group in group_consecutive(curves):
        if group.key in seen:
            raise NonContiguousGroupError(
                f"Curves for function {group.key!r} are not adjacent; "
                "sort curves by function id before plotting"
            )
        seen.add(group.key)


def sorted_points(group: CurveGroup) -> tuple[np.ndarray, np.ndarray]:
    """Return (xs, ys) for a group: parameter vs sample mean, ascending by parameter."""
    tmp = pd.DataFrame({
        "x": [numeric_parameter(c.id) for c in group.curves],
        "y": [c.mean() for c in group.curves],
    })
    tmp = tmp.sort_values("x", kind="stable")
    # Copies, so callers may rescale ys in place.
    return np.array(tmp["x"], dtype=float), np.array(tmp["y"], dtype=float)

"""Benchmark identities and sample curves consumed by the plot pipelines."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Sequence

import numpy as np

from benchviz.errors import EmptyInputError


class ValueType(Enum):
    """What the benchmark parameter counts."""
    BYTES = "bytes"
    ELEMENTS = "elements"
    VALUE = "value"


@dataclass(frozen=True)
class Throughput:
    """Amount of work per iteration, in bytes or elements."""
    kind: ValueType
    amount: int

    def __post_init__(self) -> None:
        if self.kind == ValueType.VALUE:
            raise ValueError("Throughput kind must be BYTES or ELEMENTS")


@dataclass(frozen=True)
class BenchmarkId:
    """Identifies one measured variant.

    function_id is the grouping key for comparison plots. The numeric
    parameter comes from throughput when present, otherwise from value_str.
    """
    group_id: str
    function_id: Optional[str] = None
    value_str: Optional[str] = None
    throughput: Optional[Throughput] = None
    title: Optional[str] = None

    def as_number(self) -> Optional[float]:
        """Numeric parameter value, or None if there is none."""
        if self.throughput is not None:
            return float(self.throughput.amount)
        if self.value_str is None:
            return None
        try:
            return float(self.value_str)
        except ValueError:
            return None

    def as_title(self) -> str:
        if self.title:
            return self.title
        parts = [self.group_id, self.function_id, self.value_str]
        return "/".join(p for p in parts if p)


@dataclass(frozen=True)
class Curve:
    """One benchmark id paired with its raw measured sample."""
    id: BenchmarkId
    sample: Sequence[float]

    def values(self) -> np.ndarray:
        """Sample as a float array.

        Raises:
            EmptyInputError: If the sample is empty.
        """
        arr = np.asarray(self.sample, dtype=float)
        if arr.size == 0:
            raise EmptyInputError(f"Curve {self.id.as_title()!r} has an empty sample")
        return arr

    def mean(self) -> float:
        return float(np.mean(self.values()))

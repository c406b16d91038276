# tests/conftest.py
"""Shared pytest fixtures for benchviz tests."""
from __future__ import annotations

import sys
from concurrent.futures import Future
from pathlib import Path

import pytest


def pytest_configure() -> None:
    # Ensure benchviz is importable when running tests from the repo root.
    repo_root = Path(__file__).resolve().parents[1]
    src_dir = repo_root / "src"
    if src_dir.exists() and str(src_dir) not in sys.path:
        sys.path.insert(0, str(src_dir))


class RecordingRenderer:
    """Renderer stand-in: keeps every description and returns a finished Future."""

    def __init__(self) -> None:
        self.descriptions = []

    def render(self, description):
        self.descriptions.append(description)
        fut: Future = Future()
        fut.set_result(description)
        return fut


@pytest.fixture
def renderer():
    return RecordingRenderer()


@pytest.fixture
def plotter(renderer):
    from benchviz.formatters import DurationFormatter
    from benchviz.summary import SummaryPlotter

    return SummaryPlotter(DurationFormatter(), renderer, kde_points=200)


@pytest.fixture
def make_curve():
    """Factory: make_curve(function_id, value_str, sample, **id_kwargs) -> Curve."""
    from benchviz.model import BenchmarkId, Curve

    def _make(function_id, value_str, sample, group_id="bench", **kwargs):
        return Curve(BenchmarkId(group_id, function_id, value_str, **kwargs), list(sample))

    return _make

"""Algorithms behind the summary plots.

Pure numpy/pandas/scipy steps used by SummaryPlotter: grouping curves by
function, speedup normalization, and density estimation for violin lanes.
"""

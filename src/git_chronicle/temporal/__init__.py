"""Temporal aggregation: calendar-bucketed and commit-ordered growth series."""

from .buckets import bucket_key, bucket_start, resolve_granularity
from .series import (
    CategoryBreakdown,
    LinearSeriesPoint,
    TimeSeriesPoint,
    build_linear_series,
    build_time_series,
)

__all__ = [
    "CategoryBreakdown",
    "LinearSeriesPoint",
    "TimeSeriesPoint",
    "bucket_key",
    "bucket_start",
    "build_linear_series",
    "build_time_series",
    "resolve_granularity",
]

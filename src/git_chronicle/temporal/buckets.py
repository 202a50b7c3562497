"""Calendar bucketing for the time series (UTC throughout)."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

BUCKET_GRANULARITIES = ("hour", "day", "week", "month")


def resolve_granularity(granularity: str, span_hours: float, hourly_threshold_hours: int) -> str:
    """Turn "auto" into a concrete granularity.

    Histories shorter than the threshold are bucketed by hour, everything
    else by day.
    """
    if granularity == "auto":
        return "hour" if span_hours < hourly_threshold_hours else "day"
    if granularity not in BUCKET_GRANULARITIES:
        raise ValueError(f"Unknown granularity: {granularity}")
    return granularity


def bucket_start(timestamp: int, granularity: str) -> datetime:
    dt = datetime.fromtimestamp(timestamp, tz=timezone.utc)
    if granularity == "hour":
        return dt.replace(minute=0, second=0, microsecond=0)
    day = dt.replace(hour=0, minute=0, second=0, microsecond=0)
    if granularity == "day":
        return day
    if granularity == "week":
        # ISO weeks start on Monday
        return day - timedelta(days=day.weekday())
    if granularity == "month":
        return day.replace(day=1)
    raise ValueError(f"Unknown granularity: {granularity}")


def next_bucket(start: datetime, granularity: str) -> datetime:
    if granularity == "hour":
        return start + timedelta(hours=1)
    if granularity == "day":
        return start + timedelta(days=1)
    if granularity == "week":
        return start + timedelta(weeks=1)
    if granularity == "month":
        if start.month == 12:
            return start.replace(year=start.year + 1, month=1)
        return start.replace(month=start.month + 1)
    raise ValueError(f"Unknown granularity: {granularity}")


def previous_bucket(start: datetime, granularity: str) -> datetime:
    if granularity == "hour":
        return start - timedelta(hours=1)
    if granularity == "day":
        return start - timedelta(days=1)
    if granularity == "week":
        return start - timedelta(weeks=1)
    if granularity == "month":
        if start.month == 1:
            return start.replace(year=start.year - 1, month=12)
        return start.replace(month=start.month - 1)
    raise ValueError(f"Unknown granularity: {granularity}")


def bucket_key(start: datetime, granularity: str) -> str:
    """Stable, lexically sortable label for a bucket."""
    if granularity == "hour":
        return start.strftime("%Y-%m-%dT%H:00:00")
    if granularity == "month":
        return start.strftime("%Y-%m")
    return start.strftime("%Y-%m-%d")

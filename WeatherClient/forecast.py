"""Collapse 3-hour forecast samples into per-day summaries."""
from dataclasses import replace
from datetime import date, datetime, tzinfo
from typing import Dict, Iterable, Optional, Tuple

from weather_data import DailySummary, ForecastSample

MAX_FORECAST_DAYS = 7


def calendar_day(timestamp: int, tz: Optional[tzinfo] = None) -> date:
    """Calendar date of a UNIX timestamp in ``tz`` (host local time when None)."""
    return datetime.fromtimestamp(timestamp, tz).date()


def _seed(sample: ForecastSample) -> DailySummary:
    return DailySummary(
        timestamp=sample.timestamp,
        temp=sample.temp,
        temp_min=sample.temp_min,
        temp_max=sample.temp_max,
        humidity=sample.humidity,
        conditions=sample.conditions,
        wind=sample.wind,
        pop=sample.pop,
    )


def _merge(day: DailySummary, sample: ForecastSample) -> DailySummary:
    # temp and conditions stay with the day's first sample
    return replace(
        day,
        temp_min=min(day.temp_min, sample.temp_min),
        temp_max=max(day.temp_max, sample.temp_max),
        humidity=sample.humidity,
        wind=sample.wind,
        pop=max(day.pop, sample.pop),
    )


def aggregate_daily(
    samples: Iterable[ForecastSample],
    max_days: int = MAX_FORECAST_DAYS,
    tz: Optional[tzinfo] = None,
) -> Tuple[DailySummary, ...]:
    """
    Group forecast samples by calendar day and summarize each day.

    The first sample seen for a day seeds its summary: its timestamp,
    temperature and conditions represent the day. Later samples for the same
    day widen temp_min/temp_max, raise pop to the running maximum, and
    overwrite humidity and wind, so those reflect the last sample in input
    order.

    Args:
        samples: Forecast samples, normally in chronological order
        max_days: Maximum number of days to return
        tz: Timezone used to decide calendar days (host local time when None)

    Returns:
        Tuple of DailySummary sorted by timestamp, at most max_days long
    """
    days: Dict[date, DailySummary] = {}
    for sample in samples:
        key = calendar_day(sample.timestamp, tz)
        existing = days.get(key)
        days[key] = _seed(sample) if existing is None else _merge(existing, sample)

    ordered = sorted(days.values(), key=lambda day: day.timestamp)
    return tuple(ordered[:max_days])

"""
Stage Trend Detection for Rising/Falling Limb Analysis

Identifies whether a river gauge is on a rising limb, falling limb, or
stable, from its recent observed stage history.
"""

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

import numpy as np

from floodwatch.utils.config import config
from .models import GaugeObservationPoint

logger = logging.getLogger(__name__)


@dataclass
class TrendResult:
    """Result of trend analysis for a single gauge."""
    trend: str                      # "rising" | "falling" | "stable" | "unknown"
    trend_rate: float               # feet per hour
    hours_since_peak: Optional[float]  # Hours since recent peak (if falling)
    data_points: int                # Number of readings used


def calculate_stage_trend(
    stage_history: list[tuple[datetime, float]],
    rising_threshold: Optional[float] = None,
    falling_threshold: Optional[float] = None,
    min_data_points: Optional[int] = None
) -> TrendResult:
    """
    Calculate the stage trend using linear regression.

    Algorithm:
    1. Linear regression: stage = slope * hours + intercept
    2. trend_rate = slope (feet per hour)
    3. total change = slope * observation window
    4. Classify: rising (>= threshold), falling (<= threshold), stable (between)
    5. For falling gauges, hours since the highest stage

    Args:
        stage_history: List of (timestamp, stage) tuples, sorted by time
        rising_threshold: Feet of total change for rising (default: from config)
        falling_threshold: Feet of total change for falling (default: from config)
        min_data_points: Minimum readings required (default: from config)

    Returns:
        TrendResult with trend classification and metrics.
    """
    if rising_threshold is None:
        rising_threshold = config.trend.rising_threshold
    if falling_threshold is None:
        falling_threshold = config.trend.falling_threshold
    if min_data_points is None:
        min_data_points = config.trend.min_data_points

    data_points = len(stage_history)

    if data_points < min_data_points:
        return TrendResult(trend="unknown", trend_rate=0.0, hours_since_peak=None, data_points=data_points)

    timestamps = [t for t, _ in stage_history]
    stages = np.array([s for _, s in stage_history], dtype=float)

    if np.std(stages) < 1e-10:
        return TrendResult(trend="stable", trend_rate=0.0, hours_since_peak=None, data_points=data_points)

    base_time = timestamps[0]
    hours_from_start = np.array([
        (t - base_time).total_seconds() / 3600.0 for t in timestamps
    ])

    total_hours = hours_from_start[-1] - hours_from_start[0]
    if total_hours < 0.1:  # Less than 6 minutes of data
        return TrendResult(trend="unknown", trend_rate=0.0, hours_since_peak=None, data_points=data_points)

    slope, _ = np.polyfit(hours_from_start, stages, 1)
    trend_rate = float(slope)
    total_change = trend_rate * total_hours

    peak_idx = int(np.argmax(stages))
    hours_since_peak = (timestamps[-1] - timestamps[peak_idx]).total_seconds() / 3600.0

    if total_change >= rising_threshold:
        trend = "rising"
        hours_since_peak_result = None
    elif total_change <= falling_threshold:
        trend = "falling"
        hours_since_peak_result = hours_since_peak if hours_since_peak > 0.5 else None
    else:
        trend = "stable"
        hours_since_peak_result = None

    return TrendResult(
        trend=trend,
        trend_rate=round(trend_rate, 3),
        hours_since_peak=round(hours_since_peak_result, 1) if hours_since_peak_result else None,
        data_points=data_points
    )


def trend_for_history(observed_history: list[GaugeObservationPoint]) -> TrendResult:
    """Stage trend of a gauge's observed history."""
    return calculate_stage_trend([(p.timestamp, p.stage) for p in observed_history])

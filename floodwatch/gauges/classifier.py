"""
Flood stage classification and flood alerts.

Maps a gauge stage onto the NWS flood categories (Action Stage, Minor,
Moderate and Major Flood) using the gauge's thresholds. The same function
classifies observed and forecast points.
"""

import logging
import math
from datetime import datetime, timedelta, timezone
from typing import Iterable, Optional

from .models import FloodAlert, FloodCategory, FloodThresholds, Gauge, GaugeObservationPoint, is_missing

logger = logging.getLogger(__name__)

# Window (hours ahead) counted as "flood predicted within 24 hours"
FORECAST_24H_WINDOW = (20, 28)


def classify_stage(stage: Optional[float], thresholds: FloodThresholds) -> FloodCategory:
    """
    Determine the flood category for a stage value.

    Checks from most severe to least severe. Missing thresholds are skipped.
    Threshold sets that are not non-decreasing (action <= flood <= moderate
    <= major) cannot be interpreted and classify as NONE.

    Args:
        stage: Gauge stage (feet)
        thresholds: Gauge flood thresholds

    Returns:
        FloodCategory for the stage.
    """
    if is_missing(stage):
        return FloodCategory.NONE

    if not thresholds.is_ordered():
        logger.warning(f"Flood thresholds out of order, not classifying: {thresholds}")
        return FloodCategory.NONE

    for category, threshold in reversed(thresholds.as_ordered()):
        if not is_missing(threshold) and stage >= threshold:
            return category

    return FloodCategory.NONE


def build_observation_points(
    readings: Iterable[tuple[datetime, float]],
    thresholds: FloodThresholds
) -> list[GaugeObservationPoint]:
    """
    Classify a stage series.

    Args:
        readings: (timestamp, stage) pairs
        thresholds: Gauge flood thresholds

    Returns:
        GaugeObservationPoints sorted by timestamp.
    """
    points = [
        GaugeObservationPoint(
            timestamp=timestamp,
            stage=stage,
            flood_category=classify_stage(stage, thresholds)
        )
        for timestamp, stage in readings
    ]
    points.sort(key=lambda p: p.timestamp)
    return points


def _hours_between(now: datetime, timestamp: datetime) -> float:
    return (timestamp - now) / timedelta(hours=1)


def _round_hours(hours: float) -> int:
    """Round half up to the nearest whole hour."""
    return math.floor(hours + 0.5)


def _alert_severity(category: FloodCategory) -> FloodCategory:
    """Severity of a stage already known to be at or above flood stage.

    Thresholds that cannot be interpreted classify as NONE; the alert still
    stands and is reported as minor.
    """
    return category if category.rank >= FloodCategory.MINOR.rank else FloodCategory.MINOR


def build_flood_alerts(gauge: Gauge, now: Optional[datetime] = None) -> list[FloodAlert]:
    """
    Build the current and forecast flood alerts for a gauge.

    At most one of each: a current alert when the gauge is at or above flood
    stage now, and a forecast alert for the first forecast point at or above
    flood stage. Whether to alert depends on flood stage alone; the other
    thresholds only set the severity.

    Args:
        gauge: Gauge with thresholds and forecast
        now: Reference time for hours_until (default: current UTC time)

    Returns:
        List of 0-2 FloodAlerts.
    """
    if now is None:
        now = datetime.now(timezone.utc)

    flood_stage = gauge.thresholds.flood_stage
    if is_missing(flood_stage):
        return []

    alerts = []

    if not is_missing(gauge.current_stage) and gauge.current_stage >= flood_stage:
        severity = _alert_severity(classify_stage(gauge.current_stage, gauge.thresholds))
        alerts.append(FloodAlert(
            id=f"current-{gauge.gauge_id}",
            type="current",
            location=gauge.name,
            severity=severity,
            stage=gauge.current_stage,
            flood_stage=flood_stage,
            message=(
                f"{gauge.name} is currently in {severity.value} flood stage "
                f"at {gauge.current_stage:.1f} feet."
            ),
        ))

    future_flood = next(
        (p for p in sorted(gauge.forecast, key=lambda p: p.timestamp) if p.stage >= flood_stage),
        None
    )
    if future_flood is not None:
        severity = _alert_severity(future_flood.flood_category)
        hours_until = _round_hours(_hours_between(now, future_flood.timestamp))
        alerts.append(FloodAlert(
            id=f"forecast-{gauge.gauge_id}",
            type="forecast",
            location=gauge.name,
            severity=severity,
            stage=future_flood.stage,
            flood_stage=flood_stage,
            hours_until=hours_until,
            message=(
                f"{gauge.name} is forecast to reach {severity.value} "
                f"flood stage in {hours_until} hours."
            ),
        ))

    return alerts


def summarize_forecasts(gauges: list[Gauge], now: Optional[datetime] = None) -> dict:
    """
    Dashboard summary of flood conditions across gauges.

    Args:
        gauges: Gauges with current stage and forecast
        now: Reference time (default: current UTC time)

    Returns:
        Dict with total_gauges, in_flood, predicted_24h and predicted_7d counts.
    """
    if now is None:
        now = datetime.now(timezone.utc)

    in_flood = 0
    predicted_24h = 0
    predicted_7d = 0
    window_start, window_end = FORECAST_24H_WINDOW

    for gauge in gauges:
        flood_stage = gauge.thresholds.flood_stage
        if is_missing(flood_stage):
            continue

        if not is_missing(gauge.current_stage) and gauge.current_stage >= flood_stage:
            in_flood += 1

        point_24h = next(
            (p for p in gauge.forecast if window_start <= _hours_between(now, p.timestamp) <= window_end),
            None
        )
        if point_24h is not None and point_24h.stage >= flood_stage:
            predicted_24h += 1

        if any(p.stage >= flood_stage for p in gauge.forecast):
            predicted_7d += 1

    return {
        "total_gauges": len(gauges),
        "in_flood": in_flood,
        "predicted_24h": predicted_24h,
        "predicted_7d": predicted_7d,
    }


def _active_threshold(thresholds: FloodThresholds) -> Optional[float]:
    """Action stage, or the lowest published threshold when action stage is missing."""
    if not is_missing(thresholds.action_stage):
        return thresholds.action_stage
    present = [value for _, value in thresholds.as_ordered() if not is_missing(value)]
    return min(present) if present else None


def filter_active_gauges(gauges: list[Gauge]) -> list[Gauge]:
    """Gauges at or above action stage now or anywhere in their forecast."""
    active = []
    for gauge in gauges:
        threshold = _active_threshold(gauge.thresholds)
        if threshold is None:
            continue
        currently_active = not is_missing(gauge.current_stage) and gauge.current_stage >= threshold
        if currently_active or any(p.stage >= threshold for p in gauge.forecast):
            active.append(gauge)
    return active

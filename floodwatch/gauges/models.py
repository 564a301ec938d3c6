"""
Data model for river gauges, flood thresholds and flood alerts.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Optional

import pandas as pd


class FloodCategory(str, Enum):
    """NWS flood severity category, in increasing order of severity."""

    NONE = "none"
    ACTION = "action"
    MINOR = "minor"
    MODERATE = "moderate"
    MAJOR = "major"

    @property
    def rank(self) -> int:
        return _CATEGORY_RANK[self]


_CATEGORY_RANK = {
    FloodCategory.NONE: 0,
    FloodCategory.ACTION: 1,
    FloodCategory.MINOR: 2,
    FloodCategory.MODERATE: 3,
    FloodCategory.MAJOR: 4,
}


@dataclass(frozen=True)
class FloodThresholds:
    """Stage thresholds for a gauge, in the gauge's stage unit (feet).

    Any threshold may be missing (None or NaN) when the source does not
    publish it.
    """
    action_stage: Optional[float] = None
    flood_stage: Optional[float] = None
    moderate_flood_stage: Optional[float] = None
    major_flood_stage: Optional[float] = None

    def as_ordered(self) -> list[tuple["FloodCategory", Optional[float]]]:
        """(category, threshold) pairs from least to most severe."""
        return [
            (FloodCategory.ACTION, self.action_stage),
            (FloodCategory.MINOR, self.flood_stage),
            (FloodCategory.MODERATE, self.moderate_flood_stage),
            (FloodCategory.MAJOR, self.major_flood_stage),
        ]

    def is_ordered(self) -> bool:
        """Whether the published thresholds are non-decreasing in severity."""
        present = [value for _, value in self.as_ordered() if not is_missing(value)]
        return all(lower <= upper for lower, upper in zip(present, present[1:]))


@dataclass(frozen=True)
class GaugeObservationPoint:
    """Observed or forecast stage at one time."""
    timestamp: datetime
    stage: float
    flood_category: FloodCategory

    def to_dict(self) -> dict[str, Any]:
        return {
            "timestamp": self.timestamp.isoformat(),
            "stage": self.stage,
            "floodCategory": self.flood_category.value,
        }


@dataclass
class Gauge:
    """A forecast gauge with its thresholds and stage series."""
    gauge_id: str
    name: str
    state: str
    latitude: Optional[float]
    longitude: Optional[float]
    current_stage: Optional[float]
    thresholds: FloodThresholds
    forecast: list[GaugeObservationPoint] = field(default_factory=list)
    observed_history: list[GaugeObservationPoint] = field(default_factory=list)
    river: Optional[str] = None
    usgs_id: Optional[str] = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "gageId": self.gauge_id,
            "name": self.name,
            "state": self.state,
            "river": self.river,
            "latitude": self.latitude,
            "longitude": self.longitude,
            "currentStage": self.current_stage,
            "actionStage": self.thresholds.action_stage,
            "floodStage": self.thresholds.flood_stage,
            "moderateFloodStage": self.thresholds.moderate_flood_stage,
            "majorFloodStage": self.thresholds.major_flood_stage,
            "forecast": [p.to_dict() for p in self.forecast],
            "observedHistory": [p.to_dict() for p in self.observed_history],
        }


@dataclass(frozen=True)
class FloodAlert:
    """Current or forecast flood alert for one gauge."""
    id: str
    type: str  # "current" | "forecast"
    location: str
    severity: FloodCategory
    stage: float
    flood_stage: float
    message: str
    hours_until: Optional[int] = None

    def to_dict(self) -> dict[str, Any]:
        result = {
            "id": self.id,
            "type": self.type,
            "location": self.location,
            "severity": self.severity.value,
            "stage": self.stage,
            "floodStage": self.flood_stage,
            "message": self.message,
        }
        if self.hours_until is not None:
            result["hoursUntil"] = self.hours_until
        return result


def is_missing(value: Optional[float]) -> bool:
    """True for None and NaN."""
    return value is None or pd.isna(value)

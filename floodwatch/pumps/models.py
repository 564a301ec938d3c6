"""
Data model for flood-control pump stations.

Station records arrive from the store in snake_case and leave for the
dashboard in camelCase (see InfrastructureStation.to_dict).
"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any, Optional

from floodwatch.utils.timestamps import parse_timestamp


class PumpType(str, Enum):
    """Infrastructure classification; selects the heuristic branch."""

    STORMWATER = "stormwater"
    DRAINAGE_BASIN = "drainage_basin"
    COASTAL_DEFENSE = "coastal_defense"
    RIVER_MANAGEMENT = "river_management"


class PumpStatus(str, Enum):
    """Operational status shown for a station."""

    OPERATIONAL = "operational"
    PUMPING = "pumping"
    STANDBY = "standby"
    MAINTENANCE = "maintenance"
    OFFLINE = "offline"
    NO_DATA = "no_data"


@dataclass(frozen=True)
class StatusEntry:
    """One entry of a real-time status map, keyed by station code."""
    status: PumpStatus
    last_updated: datetime


@dataclass(frozen=True)
class InfrastructureStation:
    """A pump station from the catalog, with its most recently computed status."""
    id: str
    code: str
    name: str
    city: str
    state: str
    latitude: float
    longitude: float
    pump_type: PumpType
    status: PumpStatus
    last_updated: Optional[datetime] = None
    capacity_gpm: Optional[float] = None
    operator: Optional[str] = None
    contact_info: Optional[str] = None
    dashboard_url: Optional[str] = None
    notes: Optional[str] = None
    created_at: Optional[datetime] = None

    @classmethod
    def from_record(cls, record: dict) -> "InfrastructureStation":
        """
        Build a station from a raw store record.

        Args:
            record: Store item with snake_case keys (pump_type, capacity_gpm, ...)

        Returns:
            InfrastructureStation instance.

        Raises:
            ValueError: If the record has no code or an unknown pump_type.
        """
        code = record.get("code")
        if not code:
            raise ValueError(f"Station record without code: {record.get('id')}")

        pump_type = PumpType(record.get("pump_type"))

        return cls(
            id=str(record.get("id", code)),
            code=str(code),
            name=record.get("name", ""),
            city=record.get("city", ""),
            state=record.get("state", ""),
            latitude=_safe_float(record.get("latitude")),
            longitude=_safe_float(record.get("longitude")),
            pump_type=pump_type,
            status=parse_status(record.get("status")),
            last_updated=parse_timestamp(record.get("last_updated")),
            capacity_gpm=_safe_float(record.get("capacity_gpm")),
            operator=record.get("operator"),
            contact_info=record.get("contact_info"),
            dashboard_url=record.get("dashboard_url"),
            notes=record.get("notes"),
            created_at=parse_timestamp(record.get("created_at")),
        )

    def to_dict(self) -> dict[str, Any]:
        """Presentation payload with camelCase keys and ISO-8601 timestamps."""
        return {
            "id": self.id,
            "code": self.code,
            "name": self.name,
            "city": self.city,
            "state": self.state,
            "latitude": self.latitude,
            "longitude": self.longitude,
            "pumpType": self.pump_type.value,
            "status": self.status.value,
            "capacityGpm": self.capacity_gpm,
            "operator": self.operator,
            "contactInfo": self.contact_info,
            "dashboardUrl": self.dashboard_url,
            "notes": self.notes,
            "lastUpdated": _format_timestamp(self.last_updated),
            "createdAt": _format_timestamp(self.created_at),
        }


def parse_status(value: Any) -> PumpStatus:
    """Map a stored status value onto PumpStatus; unknown or empty values become NO_DATA."""
    try:
        return PumpStatus(value)
    except ValueError:
        return PumpStatus.NO_DATA


def _safe_float(value: Any) -> Optional[float]:
    """Safely convert a value (including DynamoDB Decimal) to float."""
    if value is None:
        return None
    try:
        return float(value)
    except (ValueError, TypeError):
        return None


def _format_timestamp(value: Optional[datetime]) -> Optional[str]:
    if value is None:
        return None
    return value.isoformat()

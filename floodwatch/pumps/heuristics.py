"""
Estimated pump status for stations without live telemetry.

Status is derived from pump type, time of day and day of week. The tide
windows are a coarse twice-daily approximation, not tidal predictions.
"""

import random
from datetime import datetime
from typing import Optional

from .models import InfrastructureStation, PumpStatus, PumpType
from .weather import WeatherSignal

# Hours (inclusive, local time) treated as high tide
HIGH_TIDE_WINDOWS = ((5, 8), (17, 20))

# Overnight maintenance hours (inclusive, local time)
MAINTENANCE_HOURS = (2, 6)

# datetime.weekday() value for Sunday
SUNDAY = 6

# Chance that a drainage basin pump is down for maintenance inside the window
MAINTENANCE_PROBABILITY = 0.05

_default_rng = random.Random()


def is_high_tide(hour: int) -> bool:
    """Whether the hour falls in one of the approximate high tide windows."""
    return any(start <= hour <= end for start, end in HIGH_TIDE_WINDOWS)


def is_maintenance_window(hour: int, day_of_week: int) -> bool:
    """Overnight hours every day, plus Sunday mornings."""
    start, end = MAINTENANCE_HOURS
    return start <= hour <= end or (day_of_week == SUNDAY and hour < 12)


def estimate_pump_status(
    pump_type: PumpType,
    weather: WeatherSignal,
    hour: int,
    day_of_week: int,
    rng: Optional[random.Random] = None
) -> PumpStatus:
    """
    Estimate a station's status from its type and the current time.

    Rules are evaluated in order, first match wins:
    1. coastal_defense: pumping at high tide, otherwise operational
    2. drainage_basin: occasional maintenance inside the maintenance window,
       otherwise standby
    3. stormwater: operational
    4. river_management: pumping
    5. anything else: operational

    Args:
        pump_type: Station pump type
        weather: Current weather at the station (not read by the generic rules;
            city overrides use it)
        hour: Local hour (0-23)
        day_of_week: datetime.weekday() value (Monday=0, Sunday=6)
        rng: Random source for the maintenance draw (default: module-level Random)

    Returns:
        Estimated PumpStatus.
    """
    if rng is None:
        rng = _default_rng

    if pump_type == PumpType.COASTAL_DEFENSE:
        return PumpStatus.PUMPING if is_high_tide(hour) else PumpStatus.OPERATIONAL

    if pump_type == PumpType.DRAINAGE_BASIN:
        if is_maintenance_window(hour, day_of_week) and rng.random() < MAINTENANCE_PROBABILITY:
            return PumpStatus.MAINTENANCE
        return PumpStatus.STANDBY

    if pump_type == PumpType.STORMWATER:
        return PumpStatus.OPERATIONAL

    if pump_type == PumpType.RIVER_MANAGEMENT:
        return PumpStatus.PUMPING

    return PumpStatus.OPERATIONAL


def estimate_for_station(
    station: InfrastructureStation,
    weather: WeatherSignal,
    now: datetime,
    rng: Optional[random.Random] = None
) -> PumpStatus:
    """Apply the generic rules to a station at the local time of `now`."""
    return estimate_pump_status(
        station.pump_type,
        weather,
        hour=now.hour,
        day_of_week=now.weekday(),
        rng=rng
    )

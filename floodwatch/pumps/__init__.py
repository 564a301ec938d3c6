"""
Pump Status: Resolution Pass (Poll-driven)

Determines the operational status of flood-control pump stations from the
station catalog, city override rules and generic weather/time heuristics.
"""

from .models import InfrastructureStation, PumpStatus, PumpType, StatusEntry
from .weather import WeatherSignal, NEUTRAL_WEATHER, fetch_weather_signal
from .heuristics import estimate_pump_status, is_high_tide, is_maintenance_window
from .city_overrides import CITY_OVERRIDES, CityOverride, evaluate_city_override
from .catalog import StationCatalog
from .resolution import resolve_station_statuses, fetch_realtime_statuses, apply_status, get_station_stats

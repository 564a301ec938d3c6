"""
Tests for the pump status resolution pass.
"""

import time
from datetime import datetime, timedelta
from unittest.mock import Mock

import pytest

from floodwatch.pumps.catalog import StationCatalog
from floodwatch.pumps.city_overrides import CityOverride, always
from floodwatch.pumps.models import InfrastructureStation, PumpStatus, PumpType, StatusEntry
from floodwatch.pumps.resolution import (
    apply_status,
    fetch_realtime_statuses,
    get_station_stats,
    resolve_station_statuses,
)
from floodwatch.pumps.weather import NEUTRAL_WEATHER


def _station(code, pump_type=PumpType.STORMWATER, city="Houston", state="TX", status=PumpStatus.NO_DATA):
    return InfrastructureStation(
        id=code.lower(),
        code=code,
        name=f"{code} Pump Station",
        city=city,
        state=state,
        latitude=29.76,
        longitude=-95.37,
        pump_type=pump_type,
        status=status,
    )


@pytest.fixture
def now():
    # Wednesday 12:00 local
    return datetime(2026, 10, 14, 12, 0).astimezone()


@pytest.fixture
def catalog():
    catalog = Mock(spec=StationCatalog)
    catalog.load.return_value = [
        _station("MIA-STA-A", PumpType.COASTAL_DEFENSE, city="Miami Beach", state="FL"),
        _station("HTX-BRAYS", PumpType.DRAINAGE_BASIN),
        _station("GAL-SW-01", PumpType.RIVER_MANAGEMENT, city="Galveston"),
    ]
    return catalog


class TestApplyStatus:
    """Test apply_status."""

    def test_status_map_entry_used_verbatim(self, now):
        stamped = now - timedelta(minutes=3)
        status_map = {"MIA-STA-A": StatusEntry(status=PumpStatus.OFFLINE, last_updated=stamped)}

        station = apply_status(_station("MIA-STA-A", PumpType.COASTAL_DEFENSE), status_map, now)

        assert station.status == PumpStatus.OFFLINE
        assert station.last_updated == stamped

    def test_absent_station_estimated(self, now):
        station = apply_status(_station("GAL-SW-01", PumpType.RIVER_MANAGEMENT), {}, now)

        assert station.status == PumpStatus.PUMPING
        assert station.last_updated == now


class TestFetchRealtimeStatuses:
    """Test fetch_realtime_statuses."""

    def test_merges_cities(self, now):
        overrides = {
            "a": CityOverride(name="A", rules={"A-1": always(PumpStatus.PUMPING)}),
            "b": CityOverride(name="B", rules={"B-1": always(PumpStatus.STANDBY)}),
        }

        statuses = fetch_realtime_statuses(now, overrides=overrides)

        assert statuses["A-1"].status == PumpStatus.PUMPING
        assert statuses["B-1"].status == PumpStatus.STANDBY

    def test_slow_city_dropped(self, now):
        def slow_weather(latitude, longitude):
            time.sleep(2)
            return NEUTRAL_WEATHER

        overrides = {
            "fast": CityOverride(name="Fast", rules={"F-1": always(PumpStatus.PUMPING)}),
            "slow": CityOverride(name="Slow", latitude=1.0, longitude=1.0, rules={"S-1": always(PumpStatus.PUMPING)}),
        }

        statuses = fetch_realtime_statuses(now, overrides=overrides, fetch_weather=slow_weather, timeout=0.2)

        assert set(statuses) == {"F-1"}

    def test_every_city_gets_full_timeout(self, now):
        """More cities than the configured worker count still all start at once."""
        def weather(latitude, longitude):
            time.sleep(0.4)
            return NEUTRAL_WEATHER

        overrides = {
            f"city_{i}": CityOverride(
                name=f"City {i}", latitude=1.0, longitude=1.0, rules={f"C-{i}": always(PumpStatus.PUMPING)}
            )
            for i in range(25)
        }

        statuses = fetch_realtime_statuses(now, overrides=overrides, fetch_weather=weather, timeout=1.5)

        assert set(statuses) == {f"C-{i}" for i in range(25)}

    def test_no_overrides(self, now):
        assert fetch_realtime_statuses(now, overrides={}) == {}


class TestResolveStationStatuses:
    """Test resolve_station_statuses."""

    def test_merge_real_time_and_estimates(self, catalog, now):
        stamped = now - timedelta(minutes=1)
        status_source = Mock(return_value={"MIA-STA-A": StatusEntry(PumpStatus.PUMPING, stamped)})

        stations = resolve_station_statuses(
            catalog=catalog,
            now=now,
            status_source=status_source,
            fetch_weather=lambda lat, lon: NEUTRAL_WEATHER,
        )

        by_code = {s.code: s for s in stations}
        assert [s.code for s in stations] == ["MIA-STA-A", "HTX-BRAYS", "GAL-SW-01"]
        assert by_code["MIA-STA-A"].status == PumpStatus.PUMPING
        assert by_code["MIA-STA-A"].last_updated == stamped
        assert by_code["HTX-BRAYS"].status == PumpStatus.STANDBY
        assert by_code["GAL-SW-01"].status == PumpStatus.PUMPING
        status_source.assert_called_once_with(now)

    def test_weather_fetched_only_for_estimated_stations(self, catalog, now):
        fetch_weather = Mock(return_value=NEUTRAL_WEATHER)
        status_source = Mock(return_value={"MIA-STA-A": StatusEntry(PumpStatus.PUMPING, now)})

        resolve_station_statuses(catalog=catalog, now=now, status_source=status_source, fetch_weather=fetch_weather)

        assert fetch_weather.call_count == 2

    def test_status_source_failure_estimates_everything(self, catalog, now):
        status_source = Mock(side_effect=RuntimeError("feed down"))

        stations = resolve_station_statuses(
            catalog=catalog,
            now=now,
            status_source=status_source,
            fetch_weather=lambda lat, lon: NEUTRAL_WEATHER,
        )

        assert len(stations) == 3
        assert all(s.last_updated == now for s in stations)
        assert all(s.status != PumpStatus.NO_DATA for s in stations)

    def test_weather_failure_does_not_block(self, catalog, now):
        def failing_weather(latitude, longitude):
            raise ConnectionError("no network")

        stations = resolve_station_statuses(
            catalog=catalog,
            now=now,
            status_source=lambda at: {},
            fetch_weather=failing_weather,
        )

        assert [s.status for s in stations] == [PumpStatus.OPERATIONAL, PumpStatus.STANDBY, PumpStatus.PUMPING]

    def test_filters_passed_to_catalog(self, catalog, now):
        resolve_station_statuses(
            catalog=catalog,
            city="Houston",
            state="TX",
            limit=5,
            now=now,
            status_source=lambda at: {},
            fetch_weather=lambda lat, lon: NEUTRAL_WEATHER,
        )

        catalog.load.assert_called_once_with(city="Houston", state="TX", status=None, limit=5)

    def test_default_source_runs_city_overrides(self, catalog, now):
        stations = resolve_station_statuses(catalog=catalog, now=now, fetch_weather=lambda lat, lon: NEUTRAL_WEATHER)

        by_code = {s.code: s for s in stations}
        # Miami Beach override beats the coastal heuristic (operational at noon)
        assert by_code["MIA-STA-A"].status == PumpStatus.PUMPING
        assert by_code["HTX-BRAYS"].status == PumpStatus.STANDBY


class TestGetStationStats:
    """Test get_station_stats."""

    def test_counts(self):
        stations = [
            _station("A", status=PumpStatus.OPERATIONAL),
            _station("B", status=PumpStatus.PUMPING, city="Chicago", state="IL"),
            _station("C", status=PumpStatus.MAINTENANCE),
            _station("D", status=PumpStatus.NO_DATA, pump_type=PumpType.COASTAL_DEFENSE),
        ]

        stats = get_station_stats(stations)

        assert stats["total"] == 4
        assert stats["operational"] == 2
        assert stats["offline"] == 1
        assert stats["no_data"] == 1
        assert stats["by_city"] == {"Chicago, IL": 1, "Houston, TX": 3}
        assert stats["by_type"] == {"coastal_defense": 1, "stormwater": 3}

    def test_empty(self):
        stats = get_station_stats([])
        assert stats["total"] == 0
        assert stats["by_city"] == {}

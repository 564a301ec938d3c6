"""
Tests for city-specific pump status overrides.
"""

from datetime import datetime
from unittest.mock import Mock

import pytest

from floodwatch.pumps.city_overrides import (
    CITY_OVERRIDES,
    CityOverride,
    evaluate_city_override,
    night_maintenance,
    pumping_while_raining,
    standby_unless_raining,
)
from floodwatch.pumps.models import PumpStatus
from floodwatch.pumps.weather import NEUTRAL_WEATHER, WeatherSignal

RAINING = WeatherSignal(is_raining=True, precipitation=0.3)


@pytest.fixture
def noon():
    return datetime(2026, 10, 14, 12, 0).astimezone()


class TestRules:
    """Test individual override rules."""

    def test_rain_rules(self, noon):
        assert pumping_while_raining(RAINING, noon) == PumpStatus.PUMPING
        assert pumping_while_raining(NEUTRAL_WEATHER, noon) == PumpStatus.OPERATIONAL
        assert standby_unless_raining(RAINING, noon) == PumpStatus.PUMPING
        assert standby_unless_raining(NEUTRAL_WEATHER, noon) == PumpStatus.STANDBY

    def test_night_maintenance(self):
        three_am = datetime(2026, 10, 14, 3, 0).astimezone()
        assert night_maintenance(RAINING, three_am) == PumpStatus.MAINTENANCE


class TestEvaluateCityOverride:
    """Test evaluate_city_override."""

    def test_miami_beach_always_pumping(self, noon):
        """Miami Beach main stations pump regardless of weather and tide."""
        for weather in (NEUTRAL_WEATHER, RAINING):
            statuses = evaluate_city_override(CITY_OVERRIDES["miami_beach"], noon, fetch_weather=lambda lat, lon: weather)

            for code in ("MIA-STA-A", "MIA-STA-B", "MIA-STA-C", "MIA-SUNSET"):
                assert statuses[code].status == PumpStatus.PUMPING
                assert statuses[code].last_updated == noon

    def test_houston_follows_rain(self, noon):
        dry = evaluate_city_override(CITY_OVERRIDES["houston"], noon, fetch_weather=lambda lat, lon: NEUTRAL_WEATHER)
        wet = evaluate_city_override(CITY_OVERRIDES["houston"], noon, fetch_weather=lambda lat, lon: RAINING)

        assert {entry.status for entry in dry.values()} == {PumpStatus.STANDBY}
        assert {entry.status for entry in wet.values()} == {PumpStatus.PUMPING}

    def test_weather_at_city_coordinate(self, noon):
        fetch_weather = Mock(return_value=NEUTRAL_WEATHER)

        evaluate_city_override(CITY_OVERRIDES["new_orleans"], noon, fetch_weather=fetch_weather)

        fetch_weather.assert_called_once_with(29.9511, -90.0715)

    def test_tide_only_city_skips_weather(self, noon):
        fetch_weather = Mock(return_value=NEUTRAL_WEATHER)

        statuses = evaluate_city_override(CITY_OVERRIDES["norfolk"], noon, fetch_weather=fetch_weather)

        fetch_weather.assert_not_called()
        assert statuses["NFK-HAGUE"].status == PumpStatus.OPERATIONAL

    def test_failure_returns_empty_map(self, noon):
        """A failing weather lookup never escapes the city evaluation."""
        fetch_weather = Mock(side_effect=RuntimeError("weather service exploded"))

        assert evaluate_city_override(CITY_OVERRIDES["chicago"], noon, fetch_weather=fetch_weather) == {}

    def test_failing_rule_returns_empty_map(self, noon):
        def broken(weather, now):
            raise KeyError("missing")

        override = CityOverride(name="Broken", rules={"X-1": broken})

        assert evaluate_city_override(override, noon) == {}


class TestRegistry:
    """Test the override registry."""

    def test_codes_unique_across_cities(self):
        codes = [code for override in CITY_OVERRIDES.values() for code in override.rules]
        assert len(codes) == len(set(codes))

    def test_weather_cities_have_both_coordinates(self):
        for override in CITY_OVERRIDES.values():
            assert (override.latitude is None) == (override.longitude is None)

"""
Tests for the current precipitation lookup.
"""

from unittest.mock import Mock

import requests

from floodwatch.pumps.weather import NEUTRAL_WEATHER, WeatherSignal, fetch_weather_signal


def _session_returning(status_code=200, payload=None):
    response = Mock()
    response.status_code = status_code
    response.json.return_value = payload
    session = Mock()
    session.get.return_value = response
    return session


class TestFetchWeatherSignal:
    """Test fetch_weather_signal."""

    def test_raining(self):
        session = _session_returning(payload={"current": {"precipitation": 0.02}})

        signal = fetch_weather_signal(29.95, -90.07, session=session)

        assert signal == WeatherSignal(is_raining=True, precipitation=0.02)

    def test_threshold_is_exclusive(self):
        """Exactly 0.01 inches does not count as rain."""
        session = _session_returning(payload={"current": {"precipitation": 0.01}})

        signal = fetch_weather_signal(29.95, -90.07, session=session)

        assert signal.is_raining is False
        assert signal.precipitation == 0.01

    def test_request_parameters(self):
        session = _session_returning(payload={"current": {"precipitation": 0.0}})

        fetch_weather_signal(25.79, -80.13, session=session, timeout=3)

        _, kwargs = session.get.call_args
        assert kwargs["params"]["latitude"] == 25.79
        assert kwargs["params"]["longitude"] == -80.13
        assert kwargs["params"]["current"] == "precipitation"
        assert kwargs["params"]["precipitation_unit"] == "inch"
        assert kwargs["timeout"] == 3

    def test_missing_precipitation_is_dry(self):
        session = _session_returning(payload={"current": {}})

        assert fetch_weather_signal(0.0, 0.0, session=session) == NEUTRAL_WEATHER

    def test_connection_error_is_neutral(self):
        """A failed lookup yields the neutral signal instead of raising."""
        session = Mock()
        session.get.side_effect = requests.exceptions.ConnectionError("network down")

        assert fetch_weather_signal(29.95, -90.07, session=session) == NEUTRAL_WEATHER

    def test_timeout_is_neutral(self):
        session = Mock()
        session.get.side_effect = requests.exceptions.Timeout()

        assert fetch_weather_signal(29.95, -90.07, session=session) == NEUTRAL_WEATHER

    def test_http_error_is_neutral(self):
        session = _session_returning(status_code=503, payload={"current": {"precipitation": 1.0}})

        assert fetch_weather_signal(29.95, -90.07, session=session) == NEUTRAL_WEATHER

    def test_invalid_json_is_neutral(self):
        session = _session_returning()
        session.get.return_value.json.side_effect = ValueError("not json")

        assert fetch_weather_signal(29.95, -90.07, session=session) == NEUTRAL_WEATHER

    def test_unexpected_shape_is_neutral(self):
        session = _session_returning(payload=["not", "a", "dict"])

        assert fetch_weather_signal(29.95, -90.07, session=session) == NEUTRAL_WEATHER

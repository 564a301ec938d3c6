"""
Current precipitation lookup used as a heuristic input for pump status.

Queries the Open-Meteo forecast API for the current precipitation at a
coordinate. The lookup fails open: any network or payload problem yields
NEUTRAL_WEATHER so that status computation is never blocked by missing
weather data.
"""

import logging
from dataclasses import dataclass
from typing import Optional

import requests

from floodwatch.utils.config import config

logger = logging.getLogger(__name__)

# Precipitation (inches) above which a location counts as raining
RAIN_THRESHOLD_INCHES = 0.01


@dataclass(frozen=True)
class WeatherSignal:
    """Precipitation signal for one coordinate."""
    is_raining: bool
    precipitation: float  # inches over the current accumulation window


NEUTRAL_WEATHER = WeatherSignal(is_raining=False, precipitation=0.0)


def fetch_weather_signal(
    latitude: float,
    longitude: float,
    session: Optional[requests.Session] = None,
    timeout: Optional[float] = None
) -> WeatherSignal:
    """
    Fetch the current precipitation for a coordinate.

    Args:
        latitude: Decimal degrees
        longitude: Decimal degrees
        session: Optional requests session (default: module-level requests)
        timeout: Request timeout in seconds (default: from config)

    Returns:
        WeatherSignal for the coordinate, or NEUTRAL_WEATHER if the lookup fails.
    """
    if timeout is None:
        timeout = config.weather.timeout_seconds

    params = {
        "latitude": latitude,
        "longitude": longitude,
        "current": "precipitation",
        "precipitation_unit": "inch",
        "timezone": "auto",
    }

    http = session or requests

    try:
        response = http.get(config.weather.base_url, params=params, timeout=timeout)

        if response.status_code != 200:
            logger.warning(f"Weather lookup for ({latitude}, {longitude}) returned HTTP {response.status_code}")
            return NEUTRAL_WEATHER

        data = response.json()
        precipitation = float((data.get("current") or {}).get("precipitation") or 0.0)

    except requests.exceptions.Timeout:
        logger.warning(f"Timeout fetching weather for ({latitude}, {longitude})")
        return NEUTRAL_WEATHER
    except requests.exceptions.RequestException as e:
        logger.warning(f"Error fetching weather for ({latitude}, {longitude}): {e}")
        return NEUTRAL_WEATHER
    except (ValueError, TypeError, AttributeError) as e:
        logger.warning(f"Malformed weather response for ({latitude}, {longitude}): {e}")
        return NEUTRAL_WEATHER

    return WeatherSignal(
        is_raining=precipitation > RAIN_THRESHOLD_INCHES,
        precipitation=precipitation
    )

"""
Pump status resolution pass.

Produces the dashboard-ready station list for one poll:
1. Load stations from the catalog (store or fallback)
2. Obtain the real-time status map (code -> StatusEntry) from the status source
3. Stations in the map adopt its entry verbatim; the rest get the generic
   heuristic estimate for the current time
4. Return the merged list

The pass is total: upstream failures narrow its inputs but never raise.
No telemetry feed exists today, so the default status source runs the city
override rules; a real feed plugs in as `status_source`.
"""

import logging
import random
from concurrent.futures import ThreadPoolExecutor, as_completed, wait
from dataclasses import replace
from datetime import datetime
from typing import Callable, Optional

import pandas as pd

from floodwatch.utils.config import config
from .catalog import StationCatalog
from .city_overrides import CITY_OVERRIDES, CityOverride, WeatherFetcher, evaluate_city_override
from .heuristics import estimate_for_station
from .models import InfrastructureStation, PumpStatus, StatusEntry
from .weather import NEUTRAL_WEATHER, WeatherSignal, fetch_weather_signal

logger = logging.getLogger(__name__)

StatusSource = Callable[[datetime], dict[str, StatusEntry]]

# Statuses counted as working / out of service in station stats
ACTIVE_STATUSES = [PumpStatus.OPERATIONAL.value, PumpStatus.PUMPING.value, PumpStatus.STANDBY.value]
DOWN_STATUSES = [PumpStatus.OFFLINE.value, PumpStatus.MAINTENANCE.value]


def fetch_realtime_statuses(
    now: datetime,
    overrides: Optional[dict[str, CityOverride]] = None,
    fetch_weather: WeatherFetcher = fetch_weather_signal,
    timeout: Optional[float] = None
) -> dict[str, StatusEntry]:
    """
    Evaluate every city override concurrently and merge the results.

    Every city gets its own worker thread, so all cities start at once and
    each is bounded by `timeout` from the start of the pass. Cities that do
    not finish in time are logged and contribute nothing. Later cities in
    registry order win on duplicate codes.

    Args:
        now: Local time of the resolution pass
        overrides: City registry (default: CITY_OVERRIDES)
        fetch_weather: Weather lookup passed to each city
        timeout: Seconds each city may take (default: from config)

    Returns:
        Dict mapping station code to StatusEntry.
    """
    if overrides is None:
        overrides = CITY_OVERRIDES
    if timeout is None:
        timeout = config.resolution.city_timeout_seconds

    if not overrides:
        return {}

    executor = ThreadPoolExecutor(max_workers=len(overrides))
    try:
        futures = {
            city_key: executor.submit(evaluate_city_override, override, now, fetch_weather)
            for city_key, override in overrides.items()
        }
        wait(futures.values(), timeout=timeout)
    finally:
        # Pure reads: unfinished city lookups are abandoned, not awaited
        executor.shutdown(wait=False, cancel_futures=True)

    combined: dict[str, StatusEntry] = {}
    for city_key, future in futures.items():
        if not future.done() or future.cancelled():
            logger.warning(f"Timed out computing pump status for {city_key} after {timeout}s")
            continue
        try:
            combined.update(future.result())
        except Exception as e:
            logger.error(f"Error computing pump status for {city_key}: {e}")

    logger.info(f"Real-time status available for {len(combined)} stations")
    return combined


def apply_status(
    station: InfrastructureStation,
    status_map: dict[str, StatusEntry],
    now: datetime,
    weather: WeatherSignal = NEUTRAL_WEATHER,
    rng: Optional[random.Random] = None
) -> InfrastructureStation:
    """
    Set a station's status from the status map, or estimate it.

    Args:
        station: Catalog station
        status_map: Real-time statuses keyed by station code
        now: Local time of the resolution pass
        weather: Current weather at the station
        rng: Random source for the generic heuristics

    Returns:
        New InfrastructureStation with status and last_updated set.
    """
    entry = status_map.get(station.code)
    if entry is not None:
        return replace(station, status=entry.status, last_updated=entry.last_updated)

    return replace(
        station,
        status=estimate_for_station(station, weather, now, rng=rng),
        last_updated=now
    )


def _fetch_station_weather(
    stations: list[InfrastructureStation],
    fetch_weather: WeatherFetcher,
    max_workers: int
) -> dict[str, WeatherSignal]:
    """Fetch current weather for each station's own coordinate."""
    if not stations:
        return {}

    results = {}

    with ThreadPoolExecutor(max_workers=max_workers) as executor:
        futures = {
            executor.submit(fetch_weather, station.latitude, station.longitude): station.code
            for station in stations
        }

        for future in as_completed(futures):
            code = futures[future]
            try:
                results[code] = future.result()
            except Exception as e:
                logger.warning(f"Weather lookup failed for station {code}: {e}")
                results[code] = NEUTRAL_WEATHER

    return results


def resolve_station_statuses(
    catalog: Optional[StationCatalog] = None,
    city: Optional[str] = None,
    state: Optional[str] = None,
    status: Optional[str] = None,
    limit: Optional[int] = None,
    now: Optional[datetime] = None,
    status_source: Optional[StatusSource] = None,
    fetch_weather: WeatherFetcher = fetch_weather_signal,
    rng: Optional[random.Random] = None,
    max_workers: Optional[int] = None
) -> list[InfrastructureStation]:
    """
    Run one resolution pass.

    Args:
        catalog: Station catalog (default: StationCatalog())
        city: Catalog filter
        state: Catalog filter
        status: Catalog filter on stored status
        limit: Maximum number of stations
        now: Local time of the pass (default: current local time)
        status_source: Callable returning the real-time status map for `now`
            (default: city overrides via fetch_realtime_statuses)
        fetch_weather: Weather lookup for stations outside the status map
        rng: Random source for the generic heuristics
        max_workers: Thread pool size (default: from config)

    Returns:
        List of InfrastructureStation with status resolved for every station.
    """
    if catalog is None:
        catalog = StationCatalog()
    if now is None:
        now = datetime.now().astimezone()
    if max_workers is None:
        max_workers = config.max_workers
    if status_source is None:
        def status_source(at: datetime) -> dict[str, StatusEntry]:
            return fetch_realtime_statuses(at, fetch_weather=fetch_weather)

    stations = catalog.load(city=city, state=state, status=status, limit=limit)

    try:
        status_map = status_source(now)
    except Exception as e:
        logger.error(f"Real-time status source failed, estimating all stations: {e}")
        status_map = {}

    unmatched = [s for s in stations if s.code not in status_map]
    weather_by_code = _fetch_station_weather(unmatched, fetch_weather, max_workers)

    resolved = []
    for station in stations:
        try:
            resolved.append(apply_status(
                station,
                status_map,
                now,
                weather=weather_by_code.get(station.code, NEUTRAL_WEATHER),
                rng=rng
            ))
        except Exception:
            logger.exception(f"Could not resolve status for station {station.code}")
            resolved.append(replace(station, status=PumpStatus.NO_DATA, last_updated=now))

    logger.info(
        f"Resolved {len(resolved)} stations: {len(resolved) - len(unmatched)} from real-time map, "
        f"{len(unmatched)} estimated"
    )
    return resolved


def get_station_stats(stations: list[InfrastructureStation]) -> dict:
    """
    Summary counts for the dashboard.

    Args:
        stations: Resolved stations

    Returns:
        Dict with total, operational, offline, no_data, by_city and by_type.
    """
    if not stations:
        return {"total": 0, "operational": 0, "offline": 0, "no_data": 0, "by_city": {}, "by_type": {}}

    df = pd.DataFrame([
        {
            "status": s.status.value,
            "city_key": f"{s.city}, {s.state}",
            "pump_type": s.pump_type.value,
        }
        for s in stations
    ])

    return {
        "total": len(df),
        "operational": int(df["status"].isin(ACTIVE_STATUSES).sum()),
        "offline": int(df["status"].isin(DOWN_STATUSES).sum()),
        "no_data": int((df["status"] == PumpStatus.NO_DATA.value).sum()),
        "by_city": {k: int(v) for k, v in df["city_key"].value_counts().sort_index().items()},
        "by_type": {k: int(v) for k, v in df["pump_type"].value_counts().sort_index().items()},
    }

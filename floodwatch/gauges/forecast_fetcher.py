"""
NOAA National Water Prediction Service (NWPS) gauge fetcher.

Fetches flood stage thresholds, recent observations and the official stage
forecast for river gauges. Gauges without a published forecast get an empty
forecast list; nothing is synthesized.
"""

import logging
from concurrent.futures import ThreadPoolExecutor, as_completed
from datetime import datetime
from typing import Any, Optional

import requests
from requests.adapters import HTTPAdapter
from tqdm import tqdm
from urllib3.util.retry import Retry

from floodwatch.utils.config import config
from floodwatch.utils.timestamps import parse_timestamp
from .classifier import build_observation_points
from .models import FloodThresholds, Gauge
from .usgs_levels import fetch_latest_gage_height

logger = logging.getLogger(__name__)

# NWPS reports unavailable values as -999 (or -9999 for flow)
MISSING_VALUE = -999

# Retry configuration
MAX_RETRIES = 3
RETRY_BACKOFF_FACTOR = 1.0  # 1s, 2s, 4s between retries
RETRY_STATUS_CODES = [500, 502, 503, 504]

# Monitored forecast gauges in high-risk flood zones
MAJOR_FORECAST_GAUGES = {
    "NORL1": {"name": "New Orleans, LA", "river": "Mississippi River"},
    "BTRL1": {"name": "Baton Rouge, LA", "river": "Mississippi River"},
    "VCKM6": {"name": "Vicksburg, MS", "river": "Mississippi River"},
    "KCMO": {"name": "Kansas City, MO", "river": "Missouri River"},
    "EADM7": {"name": "St. Louis, MO", "river": "Mississippi River"},
    "CNDO1": {"name": "Cincinnati, OH", "river": "Ohio River"},
    "HGAT2": {"name": "Houston, TX", "river": "Buffalo Bayou"},
    "FGON8": {"name": "Fargo, ND", "river": "Red River"},
    "SACC1": {"name": "Sacramento, CA", "river": "Sacramento River"},
    "PTSP1": {"name": "Pittsburgh, PA", "river": "Ohio River"},
    "DSMI4": {"name": "Des Moines, IA", "river": "Des Moines River"},
    "CHTN1": {"name": "Chattanooga, TN", "river": "Tennessee River"},
    "KINQ7": {"name": "Kinston, NC", "river": "Neuse River"},
}


def _create_session() -> requests.Session:
    """Create a requests session with retry logic and connection pooling."""
    session = requests.Session()

    retry_strategy = Retry(
        total=MAX_RETRIES,
        backoff_factor=RETRY_BACKOFF_FACTOR,
        status_forcelist=RETRY_STATUS_CODES,
        allowed_methods=["GET"],
        raise_on_status=False
    )

    adapter = HTTPAdapter(
        max_retries=retry_strategy,
        pool_connections=10,
        pool_maxsize=10
    )

    session.mount("https://", adapter)
    session.mount("http://", adapter)

    return session


def _get_json(session: requests.Session, url: str, gauge_id: str) -> Optional[dict]:
    """GET a JSON document, returning None for 404s and failures."""
    try:
        response = session.get(url, timeout=config.nwps.timeout_seconds)

        if response.status_code == 404:
            # Gauge not in NWPS
            return None

        response.raise_for_status()
        return response.json()

    except requests.exceptions.Timeout:
        logger.warning(f"Timeout fetching NWPS data for {gauge_id}")
        return None
    except requests.exceptions.RequestException as e:
        logger.debug(f"Error fetching NWPS data for {gauge_id}: {e}")
        return None
    except ValueError as e:
        logger.warning(f"Invalid JSON from NWPS for {gauge_id}: {e}")
        return None


def _value(raw: Any) -> Optional[float]:
    """Numeric value, or None for missing/sentinel values."""
    if raw is None:
        return None
    try:
        value = float(raw)
    except (ValueError, TypeError):
        return None
    return None if value <= MISSING_VALUE else value


def _parse_series(series: Optional[dict]) -> list[tuple[datetime, float]]:
    """Extract (timestamp, stage) pairs from an NWPS stageflow series."""
    readings = []
    for point in (series or {}).get("data", []) or []:
        timestamp = parse_timestamp(point.get("validTime"))
        stage = _value(point.get("primary"))
        if timestamp is None or stage is None:
            continue
        readings.append((timestamp, stage))
    readings.sort(key=lambda r: r[0])
    return readings


def parse_thresholds(metadata: dict) -> FloodThresholds:
    """Flood thresholds from an NWPS gauge document; unpublished stages stay None."""
    categories = (metadata.get("flood") or {}).get("categories") or {}

    def stage(name: str) -> Optional[float]:
        return _value((categories.get(name) or {}).get("stage"))

    return FloodThresholds(
        action_stage=stage("action"),
        flood_stage=stage("minor"),
        moderate_flood_stage=stage("moderate"),
        major_flood_stage=stage("major"),
    )


def parse_gauge_data(
    gauge_id: str,
    metadata: dict,
    stageflow: Optional[dict],
    observed_points: Optional[int] = None
) -> Gauge:
    """
    Build a Gauge from NWPS gauge metadata and its stageflow document.

    Args:
        gauge_id: NWPS location identifier (e.g., "NORL1")
        metadata: /gauges/{id} document
        stageflow: /gauges/{id}/stageflow document (None if unavailable)
        observed_points: Number of most recent observations to keep (default: from config)

    Returns:
        Gauge with thresholds, observed history and forecast.
    """
    if observed_points is None:
        observed_points = config.nwps.observed_history_points

    info = MAJOR_FORECAST_GAUGES.get(gauge_id, {})
    thresholds = parse_thresholds(metadata)

    stageflow = stageflow or {}
    observed = _parse_series(stageflow.get("observed"))[-observed_points:]
    forecast = _parse_series(stageflow.get("forecast"))

    observed_status = (metadata.get("status") or {}).get("observed") or {}
    current_stage = _value(observed_status.get("primary"))
    if current_stage is None and observed:
        current_stage = observed[-1][1]

    state = metadata.get("state")
    if isinstance(state, dict):
        state = state.get("abbreviation", "")

    return Gauge(
        gauge_id=gauge_id,
        name=info.get("name") or metadata.get("name") or gauge_id,
        state=state or "",
        latitude=_value(metadata.get("latitude")),
        longitude=_value(metadata.get("longitude")),
        current_stage=current_stage,
        thresholds=thresholds,
        forecast=build_observation_points(forecast, thresholds),
        observed_history=build_observation_points(observed, thresholds),
        river=info.get("river"),
        usgs_id=metadata.get("usgsId") or None,
    )


def fetch_gauge_forecast(gauge_id: str, session: Optional[requests.Session] = None) -> Optional[Gauge]:
    """
    Fetch thresholds, observations and forecast for a single gauge.

    When NWPS has no current observation, the latest USGS gage height for the
    gauge's USGS site is used as the current stage.

    Args:
        gauge_id: NWPS location identifier
        session: Optional requests session (default: new session with retries)

    Returns:
        Gauge, or None if the gauge metadata is not available.
    """
    owns_session = session is None
    if owns_session:
        session = _create_session()

    try:
        base_url = config.nwps.base_url
        metadata = _get_json(session, f"{base_url}/gauges/{gauge_id}", gauge_id)
        if metadata is None:
            return None

        stageflow = _get_json(session, f"{base_url}/gauges/{gauge_id}/stageflow", gauge_id)
        gauge = parse_gauge_data(gauge_id, metadata, stageflow)

        if gauge.current_stage is None and gauge.usgs_id:
            gauge.current_stage = fetch_latest_gage_height(gauge.usgs_id)

        return gauge

    finally:
        if owns_session:
            session.close()


def fetch_multiple_gauge_forecasts(
    gauge_ids: Optional[list[str]] = None,
    max_workers: Optional[int] = None
) -> list[Gauge]:
    """
    Fetch forecasts for several gauges in parallel.

    Args:
        gauge_ids: NWPS identifiers (default: MAJOR_FORECAST_GAUGES)
        max_workers: Number of parallel workers (default: from config)

    Returns:
        List of Gauges that could be fetched, in request order.
    """
    if gauge_ids is None:
        gauge_ids = list(MAJOR_FORECAST_GAUGES)
    if max_workers is None:
        max_workers = config.nwps.max_workers

    logger.info(f"Fetching flood forecasts for {len(gauge_ids)} gauges...")

    results: dict[str, Gauge] = {}
    session = _create_session()

    try:
        with ThreadPoolExecutor(max_workers=max_workers) as executor:
            futures = {executor.submit(fetch_gauge_forecast, gauge_id, session): gauge_id for gauge_id in gauge_ids}

            for future in tqdm(as_completed(futures), total=len(futures), desc="Fetching flood forecasts"):
                gauge_id = futures[future]
                try:
                    gauge = future.result()
                    if gauge is not None:
                        results[gauge_id] = gauge
                except Exception as e:
                    logger.error(f"Error fetching flood forecast for {gauge_id}: {e}")
    finally:
        session.close()

    logger.info(f"Fetched flood forecasts for {len(results)} of {len(gauge_ids)} gauges")
    return [results[gauge_id] for gauge_id in gauge_ids if gauge_id in results]

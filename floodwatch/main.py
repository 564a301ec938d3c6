#!/usr/bin/env python3
"""
Master Orchestrator Script

Main entry point for the Floodwatch status engine.

Usage:
    python -m floodwatch.main --mode=pumps                  # Resolve pump station status
    python -m floodwatch.main --mode=gauges                 # Flood stage forecasts and alerts
    python -m floodwatch.main --mode=all --dry-run          # Both, without uploading to S3
    python -m floodwatch.main --mode=pumps --city=Houston   # Stations in one city
"""

import argparse
import logging
import sys
import time
from datetime import datetime, timezone
from typing import Optional

from floodwatch.gauges.classifier import build_flood_alerts, filter_active_gauges, summarize_forecasts
from floodwatch.gauges.forecast_fetcher import fetch_multiple_gauge_forecasts
from floodwatch.gauges.trend import trend_for_history
from floodwatch.pumps.models import InfrastructureStation
from floodwatch.pumps.resolution import get_station_stats, resolve_station_statuses
from floodwatch.utils.s3_client import S3Client

logger = logging.getLogger(__name__)


def _utc_now_iso() -> str:
    return datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")


def build_station_payload(stations: list[InfrastructureStation]) -> dict:
    """Snapshot document for resolved pump stations, keyed by station code."""
    return {
        "generated_at": _utc_now_iso(),
        "station_count": len(stations),
        "stats": get_station_stats(stations),
        "stations": {s.code: s.to_dict() for s in stations},
    }


def run_pump_status(
    city: Optional[str] = None,
    state: Optional[str] = None,
    status: Optional[str] = None,
    limit: Optional[int] = None
) -> dict:
    """Run one pump status resolution pass and build its snapshot."""
    stations = resolve_station_statuses(city=city, state=state, status=status, limit=limit)
    payload = build_station_payload(stations)

    stats = payload["stats"]
    logger.info(
        f"Pump status: {stats['total']} stations, {stats['operational']} operational, "
        f"{stats['offline']} offline, {stats['no_data']} without data"
    )
    return payload


def run_flood_forecast(gauge_ids: Optional[list[str]] = None) -> dict:
    """Fetch gauge forecasts and build the alerts/summary snapshot."""
    now = datetime.now(timezone.utc)
    gauges = fetch_multiple_gauge_forecasts(gauge_ids)

    alerts = []
    forecasts = []
    for gauge in filter_active_gauges(gauges):
        entry = gauge.to_dict()
        trend = trend_for_history(gauge.observed_history)
        entry["trend"] = trend.trend
        entry["trendRate"] = trend.trend_rate
        forecasts.append(entry)

    for gauge in gauges:
        alerts.extend(alert.to_dict() for alert in build_flood_alerts(gauge, now))

    summary = summarize_forecasts(gauges, now)
    logger.info(
        f"Flood forecast: {summary['total_gauges']} gauges, {summary['in_flood']} in flood, "
        f"{summary['predicted_7d']} forecast to flood, {len(alerts)} alerts"
    )

    return {
        "generated_at": _utc_now_iso(),
        "forecasts": forecasts,
        "alerts": alerts,
        "summary": summary,
    }


def parse_args() -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Floodwatch pump status and flood stage engine",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    # Resolve pump station status for every station
    python -m floodwatch.main --mode=pumps

    # Flood forecasts for specific gauges
    python -m floodwatch.main --mode=gauges --gauges=NORL1,BTRL1

    # Everything, without uploading
    python -m floodwatch.main --mode=all --dry-run
        """
    )

    parser.add_argument(
        "--mode",
        required=True,
        choices=["pumps", "gauges", "all"],
        help="'pumps' for pump station status, 'gauges' for flood forecasts, 'all' for both"
    )

    parser.add_argument("--city", type=str, default=None, help="Only pump stations in this city")
    parser.add_argument("--state", type=str, default=None, help="Only pump stations in this state (e.g., LA)")
    parser.add_argument("--status", type=str, default=None, help="Only pump stations with this stored status")
    parser.add_argument("--limit", type=int, default=None, help="Maximum number of pump stations")

    parser.add_argument(
        "--gauges",
        type=str,
        default=None,
        help="Comma-separated list of NWPS gauge IDs (default: all monitored gauges)"
    )

    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Run without uploading to S3"
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose (debug) logging"
    )

    return parser.parse_args()


def main() -> int:
    """Main entry point."""
    args = parse_args()

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[
            logging.StreamHandler(sys.stdout),
            logging.FileHandler(f"floodwatch_{datetime.now().strftime('%Y%m%d')}.log")
        ]
    )

    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    gauge_ids: Optional[list[str]] = None
    if args.gauges:
        gauge_ids = [g.strip().upper() for g in args.gauges.split(",")]

    logger.info(f"Starting Floodwatch in {args.mode} mode")

    start_time = time.time()

    try:
        s3_client = None if args.dry_run else S3Client()

        if args.mode in ("pumps", "all"):
            logger.info("Running pump status resolution")
            payload = run_pump_status(city=args.city, state=args.state, status=args.status, limit=args.limit)
            if s3_client:
                s3_client.upload_station_snapshot(payload)

        if args.mode in ("gauges", "all"):
            logger.info("Running flood stage forecast")
            payload = run_flood_forecast(gauge_ids)
            if s3_client:
                s3_client.upload_gauge_snapshot(payload)

        execution_time = time.time() - start_time
        logger.info(f"Execution time: {execution_time:.1f} seconds")

        if s3_client:
            s3_client.put_metrics([("ExecutionTimeSeconds", execution_time)], unit="Seconds", mode=args.mode)

        return 0

    except Exception as e:
        logger.exception(f"Error running Floodwatch: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())

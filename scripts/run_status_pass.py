#!/usr/bin/env python3
"""
Run a Floodwatch status pass and save the snapshots locally.

Resolves pump station statuses and/or flood stage forecasts and writes the
same JSON documents the S3 upload produces into output/.

Usage:
    python scripts/run_status_pass.py                          # Pumps and gauges, local only
    python scripts/run_status_pass.py --mode pumps --city Houston
    python scripts/run_status_pass.py --mode gauges --gauges NORL1,BTRL1
    python scripts/run_status_pass.py --upload                 # Also upload to S3
"""

import argparse
import json
import logging
import sys
from collections import Counter
from datetime import datetime
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from floodwatch.main import run_flood_forecast, run_pump_status
from floodwatch.utils.s3_client import S3Client

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)

OUTPUT_DIR = Path(__file__).parent.parent / "output"


def save_local_output(output: dict, output_path: Path) -> dict:
    """Save a snapshot document to a local JSON file."""
    output_path.parent.mkdir(exist_ok=True)
    with open(output_path, "w") as f:
        json.dump(output, f, indent=2)
    return output


def print_pump_summary(output: dict, output_path: Path):
    stats = output["stats"]

    print("\n" + "=" * 60)
    print("PUMP STATUS SUMMARY")
    print("=" * 60)
    print(f"Generated at: {output['generated_at']}")
    print(f"Stations: {output['station_count']}")
    print(f"  Operational/pumping: {stats['operational']}")
    print(f"  Offline/maintenance: {stats['offline']}")
    print(f"  No data: {stats['no_data']}")

    status_counts = Counter(s["status"] for s in output["stations"].values())
    print("\nStatus breakdown:")
    for status, count in status_counts.most_common():
        print(f"  {status}: {count}")

    if stats["by_city"]:
        print(f"\nCities: {dict(list(stats['by_city'].items())[:5])}")

    print("\nSample stations (first 3):")
    for code, data in list(output["stations"].items())[:3]:
        print(f"  {code}: {data['name']} ({data['pumpType']}) -> {data['status']}")

    print(f"\nLocal output saved to: {output_path}")


def print_gauge_summary(output: dict, output_path: Path):
    summary = output["summary"]

    print("\n" + "=" * 60)
    print("FLOOD FORECAST SUMMARY")
    print("=" * 60)
    print(f"Generated at: {output['generated_at']}")
    print(f"Gauges: {summary['total_gauges']}")
    print(f"  In flood now: {summary['in_flood']}")
    print(f"  Forecast to flood within 24h: {summary['predicted_24h']}")
    print(f"  Forecast to flood within 7 days: {summary['predicted_7d']}")
    print(f"Active gauges (at or above action stage): {len(output['forecasts'])}")

    print(f"\nAlerts ({len(output['alerts'])}):")
    for alert in output["alerts"][:10]:
        print(f"  [{alert['severity']}] {alert['message']}")

    print(f"\nLocal output saved to: {output_path}")


def run_pass(mode: str, city=None, state=None, status=None, limit=None, gauge_ids=None, upload: bool = False):
    """
    Run the requested status pass and save the results.

    Args:
        mode: 'pumps', 'gauges' or 'all'
        city, state, status, limit: Pump station filters
        gauge_ids: NWPS gauge IDs (None = all monitored gauges)
        upload: Whether to also upload to S3
    """
    start_time = datetime.now()

    logger.info("=" * 60)
    logger.info(f"FLOODWATCH STATUS PASS ({mode})")
    logger.info("=" * 60)
    logger.info(f"Upload to S3: {upload}")

    s3_client = S3Client() if upload else None

    if mode in ("pumps", "all"):
        output = run_pump_status(city=city, state=state, status=status, limit=limit)
        output_path = OUTPUT_DIR / "current_status.json"
        save_local_output(output, output_path)
        print_pump_summary(output, output_path)
        if s3_client:
            s3_client.upload_station_snapshot(output)

    if mode in ("gauges", "all"):
        output = run_flood_forecast(gauge_ids)
        output_path = OUTPUT_DIR / "current_forecast.json"
        save_local_output(output, output_path)
        print_gauge_summary(output, output_path)
        if s3_client:
            s3_client.upload_gauge_snapshot(output)

    elapsed = (datetime.now() - start_time).total_seconds()
    print(f"\nTotal time: {elapsed:.1f}s")
    print("=" * 60)


def main():
    parser = argparse.ArgumentParser(
        description="Run a Floodwatch status pass with local JSON output",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    # Everything, local only
    python scripts/run_status_pass.py

    # One state's pump stations
    python scripts/run_status_pass.py --mode pumps --state LA

    # Selected gauges, uploaded to S3 as well
    python scripts/run_status_pass.py --mode gauges --gauges NORL1,HGAT2 --upload
        """
    )
    parser.add_argument("--mode", choices=["pumps", "gauges", "all"], default="all")
    parser.add_argument("--city", type=str, default=None)
    parser.add_argument("--state", type=str, default=None)
    parser.add_argument("--status", type=str, default=None)
    parser.add_argument("--limit", type=int, default=None)
    parser.add_argument(
        "--gauges",
        type=str,
        default=None,
        help="Comma-separated list of NWPS gauge IDs (default: all monitored gauges)"
    )
    parser.add_argument(
        "--upload",
        action="store_true",
        help="Also upload snapshots to S3"
    )

    args = parser.parse_args()

    gauge_ids = None
    if args.gauges:
        gauge_ids = [g.strip().upper() for g in args.gauges.split(",")]

    run_pass(
        mode=args.mode,
        city=args.city,
        state=args.state,
        status=args.status,
        limit=args.limit,
        gauge_ids=gauge_ids,
        upload=args.upload
    )


if __name__ == "__main__":
    main()

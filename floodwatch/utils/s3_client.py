"""
S3 Client

Publishes pump status and flood forecast snapshots for the dashboard.
"""

import json
import logging
import os
from datetime import datetime, timezone
from typing import Optional

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from .config import config

logger = logging.getLogger(__name__)


class S3Client:
    """Client for S3 snapshot uploads and CloudWatch metrics."""

    def __init__(self, bucket_name: Optional[str] = None):
        """
        Initialize S3 client.

        Args:
            bucket_name: S3 bucket name (default: from config)
        """
        region = os.getenv("AWS_REGION", "us-west-1")
        self.s3 = boto3.client("s3", region_name=region)
        self.cloudwatch = boto3.client("cloudwatch", region_name=region)
        self.bucket = bucket_name or config.s3.bucket_name

    def _put_snapshot(self, prefix: str, current_name: str, output: dict) -> bool:
        """Upload a JSON snapshot as the current document and into history."""
        timestamp = datetime.now(timezone.utc)
        current_key = f"{prefix}/{current_name}"
        history_key = f"{prefix}/history/{timestamp.strftime('%Y-%m-%dT%H%M')}.json"

        json_data = json.dumps(output, separators=(",", ":"))  # Compact JSON

        try:
            self.s3.put_object(
                Bucket=self.bucket,
                Key=current_key,
                Body=json_data,
                ContentType="application/json",
                CacheControl="max-age=300",  # 5 minute cache
            )
            self.s3.put_object(
                Bucket=self.bucket,
                Key=history_key,
                Body=json_data,
                ContentType="application/json"
            )
        except (ClientError, BotoCoreError) as e:
            logger.error(f"Failed to upload s3://{self.bucket}/{current_key}: {e}")
            return False

        logger.info(f"Uploaded snapshot to s3://{self.bucket}/{current_key}")
        return True

    def upload_station_snapshot(self, station_payload: dict) -> bool:
        """
        Upload the resolved pump station list.

        Payload format (keyed by station code for frontend lookups):
        {
            "generated_at": "2026-01-15T14:00:00Z",
            "station_count": 40,
            "stats": {...},
            "stations": {"DPS-01": {...}, ...}
        }

        Args:
            station_payload: Snapshot document

        Returns:
            True if upload successful, False otherwise.
        """
        uploaded = self._put_snapshot(config.s3.station_output_prefix, "current_status.json", station_payload)
        if uploaded:
            stats = station_payload.get("stats", {})
            self.put_metrics([
                ("StationsResolved", station_payload.get("station_count", 0)),
                ("StationsOffline", stats.get("offline", 0)),
            ])
        return uploaded

    def upload_gauge_snapshot(self, gauge_payload: dict) -> bool:
        """
        Upload flood forecasts, alerts and summary.

        Args:
            gauge_payload: Snapshot document with forecasts, alerts and summary

        Returns:
            True if upload successful, False otherwise.
        """
        uploaded = self._put_snapshot(config.s3.gauge_output_prefix, "current_forecast.json", gauge_payload)
        if uploaded:
            summary = gauge_payload.get("summary", {})
            self.put_metrics([
                ("GaugesInFlood", summary.get("in_flood", 0)),
                ("FloodAlerts", len(gauge_payload.get("alerts", []))),
            ])
        return uploaded

    def put_metrics(self, metrics: list[tuple[str, float]], unit: str = "Count", mode: Optional[str] = None) -> None:
        """Publish custom CloudWatch metrics; failures are logged only."""
        dimensions = [{"Name": "Environment", "Value": os.getenv("ENVIRONMENT", "dev")}]
        if mode:
            dimensions.append({"Name": "Mode", "Value": mode})

        try:
            self.cloudwatch.put_metric_data(
                Namespace="Floodwatch/Pipeline",
                MetricData=[
                    {
                        "MetricName": name,
                        "Value": value,
                        "Unit": unit,
                        "Dimensions": dimensions,
                    }
                    for name, value in metrics
                ]
            )
            logger.debug(f"Published CloudWatch metrics: {metrics}")
        except Exception as cw_err:
            logger.warning(f"Failed to publish CloudWatch metrics: {cw_err}")

"""
DynamoDB client for the pump station inventory.

Station items are stored with snake_case attributes (code, pump_type,
capacity_gpm, last_updated, ...). Queries scan the table with optional
attribute filters and return raw records ordered by city.
"""

import logging
from typing import Optional

import boto3
from boto3.dynamodb.conditions import Attr
from botocore.exceptions import BotoCoreError, ClientError

from .config import config

logger = logging.getLogger(__name__)


class StationStoreError(Exception):
    """Error reading the station inventory from DynamoDB."""

    pass


class StationStore:
    """Read access to the station inventory table."""

    def __init__(self, table_name: Optional[str] = None, region: Optional[str] = None, table=None):
        """
        Initialize the store.

        Args:
            table_name: DynamoDB table name (default: from config)
            region: AWS region of the table (default: from config)
            table: Pre-built boto3 Table resource (used as-is when given)
        """
        self.table_name = table_name or config.store.table_name
        self.region = region or config.store.region
        self._table = table

    @property
    def table(self):
        if self._table is None:
            dynamodb = boto3.resource("dynamodb", region_name=self.region)
            self._table = dynamodb.Table(self.table_name)
        return self._table

    def fetch_records(
        self,
        city: Optional[str] = None,
        state: Optional[str] = None,
        status: Optional[str] = None,
        limit: Optional[int] = None
    ) -> list[dict]:
        """
        Fetch station records, optionally filtered.

        Args:
            city: Only stations in this city
            state: Only stations in this state (two-letter code)
            status: Only stations whose stored status matches
            limit: Maximum number of records to return

        Returns:
            List of raw station records sorted by city ascending.

        Raises:
            StationStoreError: If the table cannot be read.
        """
        filter_expression = None
        for attribute, value in (("city", city), ("state", state), ("status", status)):
            if value is None:
                continue
            condition = Attr(attribute).eq(value)
            filter_expression = condition if filter_expression is None else filter_expression & condition

        scan_kwargs = {}
        if filter_expression is not None:
            scan_kwargs["FilterExpression"] = filter_expression

        records = []
        page_count = 0

        try:
            while True:
                page_count += 1
                response = self.table.scan(**scan_kwargs)
                records.extend(response.get("Items", []))

                last_evaluated_key = response.get("LastEvaluatedKey")
                if not last_evaluated_key:
                    break
                scan_kwargs["ExclusiveStartKey"] = last_evaluated_key

        except (ClientError, BotoCoreError) as e:
            raise StationStoreError(f"Failed to scan {self.table_name}: {e}") from e

        logger.debug(f"Scanned {len(records)} station records in {page_count} pages from {self.table_name}")

        records.sort(key=lambda r: r.get("city", ""))
        if limit:
            records = records[:limit]

        return records

"""
Station catalog: the set of pump stations for one resolution pass.

Loads stations from the DynamoDB store. If the store fails or returns
nothing, the catalog serves the fixed fallback inventory instead, so the
dashboard always has stations to render. A single load never mixes store
rows with fallback rows.
"""

import logging
import random
from datetime import datetime
from typing import Optional

from floodwatch.utils.config import config
from floodwatch.utils.dynamodb_client import StationStore, StationStoreError
from .fallback_stations import FALLBACK_STATIONS
from .models import InfrastructureStation, PumpStatus

logger = logging.getLogger(__name__)


class StationCatalog:
    """Store-first station inventory with a fixed fallback list."""

    def __init__(
        self,
        store: Optional[StationStore] = None,
        fallback_records: Optional[list[dict]] = None,
        rng: Optional[random.Random] = None,
        fallback_limit: Optional[int] = None
    ):
        """
        Args:
            store: Station store (default: StationStore from config)
            fallback_records: Raw records served when the store is unavailable
                (default: FALLBACK_STATIONS)
            rng: Random source for placeholder statuses
            fallback_limit: Default number of fallback stations (default: from config)
        """
        self.store = store if store is not None else StationStore()
        self.fallback_records = fallback_records if fallback_records is not None else FALLBACK_STATIONS
        self.rng = rng or random.Random()
        self.fallback_limit = fallback_limit or config.resolution.fallback_limit

    def load(
        self,
        city: Optional[str] = None,
        state: Optional[str] = None,
        status: Optional[str] = None,
        limit: Optional[int] = None
    ) -> list[InfrastructureStation]:
        """
        Load the stations for a resolution pass.

        Args:
            city: Only stations in this city (store only)
            state: Only stations in this state (store only)
            status: Only stations with this stored status (store only)
            limit: Maximum number of stations

        Returns:
            List of InfrastructureStation, from the store or the fallback list.
        """
        try:
            records = self.store.fetch_records(city=city, state=state, status=status, limit=limit)
        except StationStoreError as e:
            logger.error(f"Error fetching pump stations from store: {e}")
            return self.fallback(limit)

        if not records:
            logger.warning("No pump stations in store, using fallback")
            return self.fallback(limit)

        stations = []
        for record in records:
            try:
                stations.append(InfrastructureStation.from_record(record))
            except ValueError as e:
                logger.warning(f"Skipping invalid station record {record.get('code')}: {e}")

        logger.info(f"Fetched {len(stations)} pump stations from store")
        return stations

    def fallback(self, limit: Optional[int] = None) -> list[InfrastructureStation]:
        """
        Build the fallback inventory.

        Statuses are random placeholders and carry no information; the
        resolution pass replaces them.

        Args:
            limit: Maximum number of stations (default: fallback_limit)

        Returns:
            List of InfrastructureStation from the fallback records.
        """
        now = datetime.now().astimezone()
        statuses = list(PumpStatus)

        stations = []
        for record in self.fallback_records[:limit or self.fallback_limit]:
            stations.append(InfrastructureStation.from_record({
                **record,
                "status": self.rng.choice(statuses).value,
                "last_updated": now,
                "created_at": now,
            }))

        logger.info(f"Using {len(stations)} fallback pump stations")
        return stations

"""
Tests for the station catalog and the DynamoDB station store.
"""

import random
from decimal import Decimal
from unittest.mock import Mock

import pytest
from botocore.exceptions import ClientError

from floodwatch.pumps.catalog import StationCatalog
from floodwatch.pumps.fallback_stations import FALLBACK_STATIONS
from floodwatch.pumps.models import InfrastructureStation, PumpStatus, PumpType
from floodwatch.utils.dynamodb_client import StationStore, StationStoreError


def _record(code, city="Houston", state="TX", pump_type="stormwater", **extra):
    return {
        "id": code.lower(),
        "code": code,
        "name": f"{code} Pump Station",
        "city": city,
        "state": state,
        "latitude": Decimal("29.7604"),
        "longitude": Decimal("-95.3698"),
        "pump_type": pump_type,
        "status": "operational",
        **extra,
    }


@pytest.fixture
def store():
    return Mock(spec=StationStore)


class TestStationCatalog:
    """Test StationCatalog."""

    def test_empty_store_uses_fallback(self, store):
        """An empty store yields the fixed fallback inventory."""
        store.fetch_records.return_value = []
        catalog = StationCatalog(store=store, rng=random.Random(7))

        stations = catalog.load()

        assert [s.code for s in stations] == [r["code"] for r in FALLBACK_STATIONS][:50]

    def test_store_error_uses_fallback(self, store):
        store.fetch_records.side_effect = StationStoreError("table missing")
        catalog = StationCatalog(store=store, rng=random.Random(7))

        stations = catalog.load(city="Houston")

        assert [s.code for s in stations] == [r["code"] for r in FALLBACK_STATIONS][:50]

    def test_fallback_respects_limit(self, store):
        store.fetch_records.return_value = []
        catalog = StationCatalog(store=store, rng=random.Random(7))

        stations = catalog.load(limit=3)

        assert [s.code for s in stations] == ["CHI-TARP-01", "CHI-TARP-02", "CHI-LAKE-01"]

    def test_fallback_status_is_placeholder(self, store):
        store.fetch_records.return_value = []
        rng = Mock()
        rng.choice.return_value = PumpStatus.OFFLINE
        catalog = StationCatalog(store=store, rng=rng)

        stations = catalog.load(limit=2)

        assert all(s.status == PumpStatus.OFFLINE for s in stations)
        assert all(s.last_updated is not None and s.created_at is not None for s in stations)
        rng.choice.assert_called_with(list(PumpStatus))

    def test_store_rows_not_mixed_with_fallback(self, store):
        store.fetch_records.return_value = [_record("HTX-BRAYS")]
        catalog = StationCatalog(store=store)

        stations = catalog.load(city="Houston", limit=5)

        assert [s.code for s in stations] == ["HTX-BRAYS"]
        store.fetch_records.assert_called_once_with(city="Houston", state=None, status=None, limit=5)

    def test_invalid_record_skipped(self, store):
        store.fetch_records.return_value = [
            _record("HTX-BRAYS"),
            _record("HTX-BAD", pump_type="windmill"),
            {"id": "no-code", "pump_type": "stormwater"},
        ]
        catalog = StationCatalog(store=store)

        assert [s.code for s in catalog.load()] == ["HTX-BRAYS"]

    def test_custom_fallback_records(self, store):
        store.fetch_records.return_value = []
        catalog = StationCatalog(store=store, fallback_records=[_record("TEST-01")], rng=random.Random(1))

        assert [s.code for s in catalog.load()] == ["TEST-01"]


class TestInfrastructureStation:
    """Test record mapping."""

    def test_from_record_maps_snake_case(self):
        station = InfrastructureStation.from_record(_record(
            "HTX-SIMS",
            capacity_gpm=Decimal("250000"),
            contact_info="hcfcd@example.org",
            dashboard_url="https://example.org/sims",
            last_updated="2026-10-14T12:00:00Z",
        ))

        assert station.pump_type == PumpType.STORMWATER
        assert station.status == PumpStatus.OPERATIONAL
        assert station.latitude == 29.7604
        assert station.capacity_gpm == 250000.0
        assert station.last_updated.utcoffset().total_seconds() == 0

    def test_to_dict_is_camel_case(self):
        station = InfrastructureStation.from_record(_record("HTX-SIMS", capacity_gpm=100, dashboard_url="u"))

        payload = station.to_dict()

        assert payload["pumpType"] == "stormwater"
        assert payload["capacityGpm"] == 100.0
        assert payload["dashboardUrl"] == "u"
        assert "pump_type" not in payload

    def test_unknown_status_is_no_data(self):
        station = InfrastructureStation.from_record(_record("HTX-SIMS", status="exploded"))
        assert station.status == PumpStatus.NO_DATA


class TestStationStore:
    """Test StationStore against a mocked DynamoDB table."""

    def test_paginates_and_sorts_by_city(self):
        table = Mock()
        table.scan.side_effect = [
            {"Items": [_record("SEA-SOUTH", city="Seattle")], "LastEvaluatedKey": {"id": "sea-south"}},
            {"Items": [_record("BOS-ALEWIFE", city="Boston")]},
        ]
        store = StationStore(table_name="PumpStations", table=table)

        records = store.fetch_records()

        assert [r["code"] for r in records] == ["BOS-ALEWIFE", "SEA-SOUTH"]
        assert table.scan.call_count == 2
        assert table.scan.call_args_list[1].kwargs["ExclusiveStartKey"] == {"id": "sea-south"}

    def test_filters_and_limit(self):
        table = Mock()
        table.scan.return_value = {"Items": [_record("A-1"), _record("A-2"), _record("A-3")]}
        store = StationStore(table=table)

        records = store.fetch_records(city="Houston", state="TX", limit=2)

        assert len(records) == 2
        assert "FilterExpression" in table.scan.call_args.kwargs

    def test_no_filter_expression_without_filters(self):
        table = Mock()
        table.scan.return_value = {"Items": []}
        store = StationStore(table=table)

        store.fetch_records()

        assert "FilterExpression" not in table.scan.call_args.kwargs

    def test_client_error_raises_store_error(self):
        table = Mock()
        table.scan.side_effect = ClientError(
            {"Error": {"Code": "ResourceNotFoundException", "Message": "no table"}}, "Scan"
        )
        store = StationStore(table_name="Missing", table=table)

        with pytest.raises(StationStoreError):
            store.fetch_records()

"""Unit tests for the logistics aggregation heuristics."""

from datetime import datetime, timedelta, timezone

import pytest

from core.domain.models import TravelInfo
from core.services.logistics_service import (
    LogisticsService,
    aggregate,
    count_by_day,
    count_by_method,
    day_label,
    luggage_units,
    transport_bucket,
    vehicle_advice,
)
from tests.conftest import FakeTravelRepository

UTC8 = timezone(timedelta(hours=8))


def at(month, day, hour=10):
    return datetime(2025, month, day, hour, 0, tzinfo=UTC8)


def test_day_label_has_no_padding():
    assert day_label(at(10, 3)) == "10/3"
    assert day_label(datetime(2025, 1, 9, 12)) == "1/9"


def test_day_label_converts_to_display_timezone():
    late_utc = datetime(2025, 10, 2, 20, 0, tzinfo=timezone.utc)
    assert day_label(late_utc, UTC8) == "10/3"
    assert day_label(late_utc) == "10/2"


def test_count_by_day_is_chronological():
    records = [
        TravelInfo(arrival_time=at(10, 12), departure_time=at(10, 15)),
        TravelInfo(arrival_time=at(10, 9)),
        TravelInfo(arrival_time=at(10, 12)),
    ]

    days = count_by_day(records)

    assert [d.day for d in days] == ["10/9", "10/12", "10/15"]
    assert [(d.arrival, d.departure) for d in days] == [(1, 0), (2, 0), (0, 1)]


def test_two_arrival_days_give_two_buckets():
    records = [TravelInfo(arrival_time=at(10, 3)), TravelInfo(arrival_time=at(10, 4))]
    assert len(count_by_day(records)) == 2


@pytest.mark.parametrize("method,bucket", [
    ("飞机", "飞机"),
    ("乘坐飞机 CA1234", "飞机"),
    ("高铁", "火车/高铁"),
    ("火车", "火车/高铁"),
    ("组委会包车", "组委会包车"),
    ("自驾", "自行抵达"),
    ("步行", "其他"),
    (None, "其他"),
])
def test_transport_bucket(method, bucket):
    assert transport_bucket(method) == bucket


def test_count_by_method_lists_every_bucket():
    counts = count_by_method([TravelInfo(arrival_method="飞机"), TravelInfo(arrival_method="飞机")])
    assert counts == {"飞机": 2, "火车/高铁": 0, "组委会包车": 0, "自行抵达": 0, "其他": 0}


@pytest.mark.parametrize("description,units", [
    ("2个自行车箱", 2),
    ("背包", 0),
    ("箱子", 1),
    ("3 bikes", 3),
    ("Bike box x4", 4),
    (None, 0),
])
def test_luggage_units(description, units):
    assert luggage_units(description) == units


def test_vehicle_advice_threshold():
    assert vehicle_advice(50) == 0
    assert vehicle_advice(51) == 2
    assert vehicle_advice(101) == 3


def test_aggregate_sums_luggage():
    records = [TravelInfo(luggage_info="30个自行车箱"), TravelInfo(luggage_info="25 bike boxes")]

    summary = aggregate(records)

    assert summary.luggage_units == 55
    assert summary.vans_needed == 2


@pytest.mark.asyncio
async def test_service_summary_uses_timezone():
    repo = FakeTravelRepository([
        TravelInfo(arrival_method="飞机", arrival_time=datetime(2025, 10, 2, 20, tzinfo=timezone.utc)),
    ])

    summary = await LogisticsService(repo, tz=UTC8).summary()

    assert [d.day for d in summary.days] == ["10/3"]
    assert summary.methods["飞机"] == 1

"""
Logistics service - arrival/departure tallies for the travel overview.

All matching here is heuristic: transport buckets come from substrings of a
free-text method and luggage units from the first number in a free-text
description. Counts are indicative, not authoritative.
"""

import logging
import math
import re
from datetime import datetime, tzinfo
from typing import Dict, Iterable, List, Optional

from core.domain.constants import (
    LUGGAGE_KEYWORDS,
    LUGGAGE_UNITS_PER_VAN,
    TRANSPORT_OTHER,
    TRANSPORT_RULES,
)
from core.domain.errors import ServiceError, describe
from core.domain.models import DayBucket, LogisticsSummary, TravelInfo
from core.interfaces.repositories import ITravelRepository

logger = logging.getLogger(__name__)

_FIRST_INT = re.compile(r"\d+")


def day_label(moment: datetime, tz: Optional[tzinfo] = None) -> str:
    """'M/D' without zero padding, in tz when the timestamp is aware"""
    if tz is not None and moment.tzinfo is not None:
        moment = moment.astimezone(tz)
    return f"{moment.month}/{moment.day}"


def _day_key(label: str):
    month, day = (int(part) for part in label.split("/"))
    return month, day


def count_by_day(records: Iterable[TravelInfo], tz: Optional[tzinfo] = None) -> List[DayBucket]:
    buckets: Dict[str, DayBucket] = {}
    for item in records:
        if item.arrival_time:
            label = day_label(item.arrival_time, tz)
            buckets.setdefault(label, DayBucket(day=label)).arrival += 1
        if item.departure_time:
            label = day_label(item.departure_time, tz)
            buckets.setdefault(label, DayBucket(day=label)).departure += 1
    return sorted(buckets.values(), key=lambda b: _day_key(b.day))


def transport_bucket(method: Optional[str]) -> str:
    text = method or TRANSPORT_OTHER
    for bucket, needles in TRANSPORT_RULES:
        if any(needle in text for needle in needles):
            return bucket
    return TRANSPORT_OTHER


def count_by_method(records: Iterable[TravelInfo]) -> Dict[str, int]:
    counts = {bucket: 0 for bucket, _ in TRANSPORT_RULES}
    counts[TRANSPORT_OTHER] = 0
    for item in records:
        counts[transport_bucket(item.arrival_method)] += 1
    return counts


def luggage_units(description: Optional[str]) -> int:
    """First integer in a bike/box description, 1 if none; 0 if no keyword"""
    info = (description or "").lower()
    if not any(keyword in info for keyword in LUGGAGE_KEYWORDS):
        return 0
    match = _FIRST_INT.search(info)
    return int(match.group(0)) if match else 1


def vehicle_advice(units: int) -> int:
    """Cargo vans to book; 0 when regular shuttles are enough"""
    if units > LUGGAGE_UNITS_PER_VAN:
        return math.ceil(units / LUGGAGE_UNITS_PER_VAN)
    return 0


def aggregate(records: List[TravelInfo], tz: Optional[tzinfo] = None) -> LogisticsSummary:
    units = sum(luggage_units(item.luggage_info) for item in records)
    return LogisticsSummary(
        days=count_by_day(records, tz),
        methods=count_by_method(records),
        luggage_units=units,
        vans_needed=vehicle_advice(units),
    )


class LogisticsService:
    """Service for the travel/logistics overview"""

    def __init__(self, travel_repo: ITravelRepository, tz: Optional[tzinfo] = None):
        self.travel_repo = travel_repo
        self.tz = tz

    async def summary(self) -> LogisticsSummary:
        try:
            records = await self.travel_repo.list_all()
        except Exception as e:
            logger.error(f"[LOGISTICS] Fetch failed: {e}")
            raise ServiceError(describe(e), title="加载失败") from e
        return aggregate(records, self.tz)

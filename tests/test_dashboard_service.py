"""Unit tests for dashboard statistics."""

from datetime import datetime, timezone

import pytest

from core.domain.models import RegistrationStatus
from core.services.dashboard_service import DashboardService, group_stats, recent_activity
from tests.conftest import FakeRegistrationRepository, make_registration


def test_group_stats_keep_athlete_zero_counts(registrations):
    stats = {s.label: s for s in group_stats(registrations)}

    athletes = stats["运动员"]
    assert athletes.total == 3
    assert len(athletes.details) == 4
    assert {d.key: d.count for d in athletes.details}["Wrong data"] == 0

    officials = stats["随队官员"]
    assert officials.total == 0
    assert officials.details == []


def test_recent_activity_prefers_updated_at():
    older = make_registration("a", "甲", updated_at=datetime(2025, 10, 5, tzinfo=timezone.utc))
    newer = make_registration("b", "乙", created_at=datetime(2025, 10, 6, tzinfo=timezone.utc))
    undated = make_registration("c", "丙", created_at=None)

    assert [r.id for r in recent_activity([undated, older, newer])] == ["b", "a", "c"]


def test_recent_activity_is_capped():
    people = [make_registration(str(i), f"人{i}") for i in range(8)]
    assert len(recent_activity(people)) == 5


@pytest.mark.asyncio
async def test_overview(registrations):
    service = DashboardService(FakeRegistrationRepository(registrations))

    stats, recent = await service.overview()

    assert [s.label for s in stats] == ["运动员", "随队官员", "技术官员"]
    assert len(recent) == 5
    assert recent[0].status in set(RegistrationStatus)

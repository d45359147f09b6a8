"""
Dashboard service - registration monitoring by group and recent activity.
"""

import logging
from datetime import datetime, timezone
from typing import List, Tuple

from core.domain.constants import (
    DASHBOARD_GROUPS,
    DASHBOARD_GROUP_COLORS,
    RECENT_ACTIVITY_LIMIT,
    ROLE_ATHLETE,
)
from core.domain.errors import ServiceError, describe
from core.domain.models import GroupStat, Registration, RegistrationStatus, StatusCount
from core.interfaces.repositories import IRegistrationRepository

logger = logging.getLogger(__name__)

STATUS_LABELS = [
    ("已接受", RegistrationStatus.ACCEPTED),
    ("处理中", RegistrationStatus.IN_PROCESS),
    ("数据错误", RegistrationStatus.WRONG_DATA),
    ("已发送", RegistrationStatus.SENT),
]

_EPOCH = datetime.min.replace(tzinfo=timezone.utc)


def group_stats(registrations: List[Registration]) -> List[GroupStat]:
    """Per-group totals; zero status counts are dropped except for athletes"""
    stats = []
    for group, color in zip(DASHBOARD_GROUPS, DASHBOARD_GROUP_COLORS):
        rows = [r for r in registrations if r.function == group]
        details = [
            StatusCount(status=label, key=status.value, count=sum(1 for r in rows if r.status == status))
            for label, status in STATUS_LABELS
        ]
        if group != ROLE_ATHLETE:
            details = [d for d in details if d.count > 0]
        stats.append(GroupStat(label=group, total=len(rows), color=color, details=details))
    return stats


def _updated_key(registration: Registration) -> datetime:
    moment = registration.updated_at or registration.created_at
    if moment is None:
        return _EPOCH
    if moment.tzinfo is None:
        return moment.replace(tzinfo=timezone.utc)
    return moment


def recent_activity(registrations: List[Registration],
                    limit: int = RECENT_ACTIVITY_LIMIT) -> List[Registration]:
    return sorted(registrations, key=_updated_key, reverse=True)[:limit]


class DashboardService:

    def __init__(self, registration_repo: IRegistrationRepository):
        self.registration_repo = registration_repo

    async def overview(self) -> Tuple[List[GroupStat], List[Registration]]:
        try:
            registrations = await self.registration_repo.list_all()
        except Exception as e:
            logger.error(f"[DASHBOARD] Fetch failed: {e}")
            raise ServiceError(describe(e), title="加载失败") from e
        return group_stats(registrations), recent_activity(registrations)

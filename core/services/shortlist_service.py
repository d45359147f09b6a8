"""
Shortlist service - per-event selection of accepted athletes.

The long list is every accepted athlete; the short list is the subset
confirmed for one event. Saving replaces the event's whole set with
delete-then-insert. Those are two requests, not a transaction: if the
insert fails after the delete succeeded, the event is left with an
empty shortlist. That outcome is reported explicitly to the caller.
"""

import logging
from typing import Iterable, List, Optional, Set

from core.domain.constants import ROLE_ATHLETE
from core.domain.errors import ServiceError, ValidationError, describe
from core.domain.models import Registration, RegistrationStatus, SportEvent
from core.interfaces.repositories import (
    IRegistrationRepository,
    IShortlistRepository,
    ISportEventRepository,
)
from core.utils.spreadsheet import entry_list_workbook

logger = logging.getLogger(__name__)


def toggle(working_set: Set[str], registration_id: str) -> Set[str]:
    """Flip membership in local state only (returns a new set)"""
    updated = set(working_set)
    if registration_id in updated:
        updated.discard(registration_id)
    else:
        updated.add(registration_id)
    return updated


def search(long_list: List[Registration], text: str) -> List[Registration]:
    needle = text.strip().lower()
    if not needle:
        return list(long_list)
    return [
        p for p in long_list
        if needle in p.full_name.lower() or needle in p.organization.lower()
    ]


def selected(long_list: List[Registration], working_set: Iterable[str]) -> List[Registration]:
    """Long-list people currently in the working set, long-list order"""
    ids = set(working_set)
    return [p for p in long_list if p.id in ids]


class ShortlistService:
    """Service for sport-entry shortlisting"""

    def __init__(
        self,
        registration_repo: IRegistrationRepository,
        event_repo: ISportEventRepository,
        shortlist_repo: IShortlistRepository,
    ):
        self.registration_repo = registration_repo
        self.event_repo = event_repo
        self.shortlist_repo = shortlist_repo

    async def list_events(self) -> List[SportEvent]:
        try:
            return await self.event_repo.list_all()
        except Exception as e:
            raise ServiceError(describe(e), title="加载失败") from e

    async def get_event(self, event_id: str) -> Optional[SportEvent]:
        try:
            return await self.event_repo.get_by_id(event_id)
        except Exception as e:
            raise ServiceError(describe(e), title="加载失败") from e

    async def load_long_list(self) -> List[Registration]:
        """Accepted athletes eligible for any event"""
        try:
            return await self.registration_repo.list_by(
                status=RegistrationStatus.ACCEPTED, function=ROLE_ATHLETE
            )
        except Exception as e:
            raise ServiceError(describe(e), title="加载失败") from e

    async def load_shortlist(self, event_id: str) -> Set[str]:
        try:
            return await self.shortlist_repo.get_member_ids(event_id)
        except Exception as e:
            raise ServiceError(describe(e), title="加载失败") from e

    async def save(self, event_id: str, working_set: Iterable[str]) -> Set[str]:
        """
        Replace the event's shortlist with working_set.

        Re-running with the same set gives the same final state.
        """
        members = sorted(set(working_set))

        try:
            await self.shortlist_repo.delete_for_event(event_id)
        except Exception as e:
            logger.error(f"[SHORTLIST] Delete failed for event {event_id}: {e}")
            raise ServiceError(describe(e), title="保存失败") from e

        if members:
            try:
                await self.shortlist_repo.insert_many(event_id, members)
            except Exception as e:
                # Delete already went through: the event now has no entries
                logger.error(
                    f"[SHORTLIST] Insert failed after delete for event {event_id}; "
                    f"shortlist is now EMPTY ({len(members)} selections lost): {e}"
                )
                raise ServiceError(
                    f"{describe(e)}（原名单已清空，请重新保存）",
                    title="保存失败",
                ) from e

        logger.info(f"[SHORTLIST] Event {event_id} saved with {len(members)} entries")
        return set(members)

    async def export(self, event: SportEvent, working_set: Iterable[str]) -> bytes:
        """Entry-list workbook for the current selection (not the stored one)"""
        people = selected(await self.load_long_list(), working_set)
        if not people:
            raise ValidationError("当前项目短名单为空，请先勾选参赛人员。", title="导出失败")
        return entry_list_workbook(event, people)

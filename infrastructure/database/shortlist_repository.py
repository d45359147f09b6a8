"""
Supabase implementation of Shortlist repository.
"""

import logging
from typing import List, Set

from supabase import Client

from core.interfaces.repositories import IShortlistRepository
from infrastructure.database.supabase_client import run_sync

logger = logging.getLogger(__name__)


class SupabaseShortlistRepository(IShortlistRepository):
    """Per-event shortlist rows: (event_id, registration_id)"""

    TABLE = "shortlists"

    def __init__(self, client: Client):
        self._client = client

    @run_sync
    def _get_member_ids_sync(self, event_id: str) -> List[dict]:
        response = self._client.table(self.TABLE)\
            .select("registration_id")\
            .eq("event_id", event_id)\
            .execute()
        return response.data or []

    async def get_member_ids(self, event_id: str) -> Set[str]:
        rows = await self._get_member_ids_sync(event_id)
        return {str(r["registration_id"]) for r in rows}

    @run_sync
    def _delete_for_event_sync(self, event_id: str):
        self._client.table(self.TABLE).delete().eq("event_id", event_id).execute()

    async def delete_for_event(self, event_id: str) -> None:
        await self._delete_for_event_sync(event_id)

    @run_sync
    def _insert_many_sync(self, rows: List[dict]):
        self._client.table(self.TABLE).insert(rows).execute()

    async def insert_many(self, event_id: str, registration_ids: List[str]) -> None:
        rows = [{"event_id": event_id, "registration_id": rid} for rid in registration_ids]
        logger.debug(f"[SHORTLIST_REPO] Inserting {len(rows)} rows for event {event_id}")
        await self._insert_many_sync(rows)

"""
Supabase implementation of SportEvent repository (read-only).
"""

from typing import Optional, List

from supabase import Client

from core.domain.models import SportEvent
from core.interfaces.repositories import ISportEventRepository
from infrastructure.database.supabase_client import run_sync


class SupabaseSportEventRepository(ISportEventRepository):
    """Supabase implementation of sport event repository"""

    def __init__(self, client: Client):
        self._client = client

    def _to_model(self, data: dict) -> SportEvent:
        return SportEvent(
            id=str(data["id"]),
            event_name=data.get("event_name") or "",
            category=data.get("category"),
            entrants=data.get("entrants"),
            vacancies=data.get("vacancies"),
        )

    @run_sync
    def _list_all_sync(self) -> List[dict]:
        response = self._client.table("sport_events").select("*").execute()
        return response.data or []

    async def list_all(self) -> List[SportEvent]:
        data = await self._list_all_sync()
        return [self._to_model(d) for d in data]

    @run_sync
    def _get_by_id_sync(self, event_id: str) -> Optional[dict]:
        response = self._client.table("sport_events").select("*").eq("id", event_id).execute()
        return response.data[0] if response.data else None

    async def get_by_id(self, event_id: str) -> Optional[SportEvent]:
        data = await self._get_by_id_sync(event_id)
        return self._to_model(data) if data else None

"""
Supabase implementation of Competition repository.
"""

from typing import Optional

from supabase import Client

from core.domain.models import Competition
from core.interfaces.repositories import ICompetitionRepository
from infrastructure.database.supabase_client import run_sync


class SupabaseCompetitionRepository(ICompetitionRepository):

    def __init__(self, client: Client):
        self._client = client

    @run_sync
    def _get_active_sync(self) -> Optional[dict]:
        response = self._client.table("competitions").select("*")\
            .order("created_at", desc=True)\
            .limit(1)\
            .execute()
        return response.data[0] if response.data else None

    async def get_active(self) -> Optional[Competition]:
        data = await self._get_active_sync()
        if not data:
            return None
        return Competition(id=str(data["id"]), name=data.get("name"), created_at=data.get("created_at"))

"""
Supabase implementation of TravelInfo repository (read-only aggregate input).
"""

from typing import List

from supabase import Client

from core.domain.models import TravelInfo
from core.interfaces.repositories import ITravelRepository
from infrastructure.database.supabase_client import run_sync

_COLUMNS = "arrival_method, arrival_time, arrival_point, departure_time, departure_point, luggage_info"


class SupabaseTravelRepository(ITravelRepository):

    def __init__(self, client: Client):
        self._client = client

    @run_sync
    def _list_all_sync(self) -> List[dict]:
        response = self._client.table("travel_info").select(_COLUMNS).execute()
        return response.data or []

    async def list_all(self) -> List[TravelInfo]:
        data = await self._list_all_sync()
        return [TravelInfo(**d) for d in data]

"""
Notification outbox: rows are written on audit decisions and never read back here.
"""

from supabase import Client

from core.domain.models import NotificationCreate
from core.interfaces.repositories import INotificationRepository
from infrastructure.database.supabase_client import run_sync


class SupabaseNotificationRepository(INotificationRepository):

    def __init__(self, client: Client):
        self._client = client

    @run_sync
    def _create_sync(self, data: dict):
        self._client.table("notifications").insert([data]).execute()

    async def create(self, data: NotificationCreate) -> None:
        await self._create_sync(data.model_dump())

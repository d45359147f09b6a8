"""
Supabase implementation of Document repository.
"""

from typing import List

from supabase import Client

from core.domain.models import DocumentItem, DocumentCreate
from core.interfaces.repositories import IDocumentRepository
from infrastructure.database.supabase_client import run_sync


class SupabaseDocumentRepository(IDocumentRepository):
    """Document metadata rows; files themselves live in object storage"""

    def __init__(self, client: Client):
        self._client = client

    def _to_model(self, data: dict) -> DocumentItem:
        return DocumentItem(
            id=str(data["id"]),
            competition_id=data.get("competition_id"),
            title=data.get("title") or "",
            category=data.get("category") or "",
            file_url=data.get("file_url") or "",
            visible_to_roles=data.get("visible_to_roles") or [],
            created_at=data.get("created_at"),
        )

    @run_sync
    def _list_all_sync(self) -> List[dict]:
        response = self._client.table("documents").select("*")\
            .order("created_at", desc=True)\
            .execute()
        return response.data or []

    async def list_all(self) -> List[DocumentItem]:
        data = await self._list_all_sync()
        return [self._to_model(d) for d in data]

    @run_sync
    def _create_sync(self, data: dict) -> dict:
        response = self._client.table("documents").insert([data]).execute()
        return response.data[0]

    async def create(self, data: DocumentCreate) -> DocumentItem:
        row = await self._create_sync(data.model_dump())
        return self._to_model(row)

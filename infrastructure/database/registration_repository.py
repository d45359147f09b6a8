"""
Supabase implementation of Registration repository.
"""

import logging
from typing import Optional, List

from supabase import Client

from core.domain.models import Registration, RegistrationCreate, RegistrationStatus
from core.interfaces.repositories import IRegistrationRepository
from infrastructure.database.supabase_client import run_sync

logger = logging.getLogger(__name__)


def _parse_status(value) -> RegistrationStatus:
    """Unknown/missing status values are shown as 'In process'"""
    try:
        return RegistrationStatus(value)
    except ValueError:
        logger.warning(f"[REG_REPO] Unknown registration status: {value!r}")
        return RegistrationStatus.IN_PROCESS


class SupabaseRegistrationRepository(IRegistrationRepository):
    """Supabase implementation of registration repository"""

    TABLE = "registrations"

    def __init__(self, client: Client):
        self._client = client

    def _to_model(self, data: dict) -> Registration:
        """Convert database row to Registration model"""
        return Registration(
            id=str(data["id"]),
            competition_id=data.get("competition_id"),
            full_name=data.get("full_name") or "",
            gender=data.get("gender"),
            birth_date=data.get("birth_date"),
            id_number=data.get("id_number"),
            organization=data.get("organization") or "",
            function=data.get("function") or "",
            contact_phone=data.get("contact_phone"),
            contact_email=data.get("contact_email"),
            client_group=data.get("client_group"),
            photo_url=data.get("photo_url"),
            status=_parse_status(data.get("status")),
            remarks=data.get("remarks"),
            created_at=data.get("created_at"),
            updated_at=data.get("updated_at"),
        )

    @run_sync
    def _get_by_id_sync(self, registration_id: str) -> Optional[dict]:
        response = self._client.table(self.TABLE).select("*").eq("id", registration_id).execute()
        return response.data[0] if response.data else None

    async def get_by_id(self, registration_id: str) -> Optional[Registration]:
        data = await self._get_by_id_sync(registration_id)
        return self._to_model(data) if data else None

    @run_sync
    def _list_all_sync(self) -> List[dict]:
        response = self._client.table(self.TABLE).select("*")\
            .order("created_at", desc=True)\
            .execute()
        return response.data or []

    async def list_all(self) -> List[Registration]:
        data = await self._list_all_sync()
        return [self._to_model(d) for d in data]

    @run_sync
    def _list_by_sync(self, status: Optional[str], function: Optional[str]) -> List[dict]:
        query = self._client.table(self.TABLE).select("*")
        if status:
            query = query.eq("status", status)
        if function:
            query = query.eq("function", function)
        response = query.order("created_at", desc=True).execute()
        return response.data or []

    async def list_by(self, status: Optional[RegistrationStatus] = None,
                      function: Optional[str] = None) -> List[Registration]:
        data = await self._list_by_sync(status.value if status else None, function)
        return [self._to_model(d) for d in data]

    @run_sync
    def _create_sync(self, payload: RegistrationCreate) -> dict:
        data = {
            "competition_id": payload.competition_id,
            "full_name": payload.full_name,
            "gender": payload.gender,
            "birth_date": payload.birth_date,
            "id_number": payload.id_number,
            "organization": payload.organization,
            "function": payload.function,
            "contact_phone": payload.contact_phone,
            "contact_email": payload.contact_email,
            "photo_url": payload.photo_url,
            "status": payload.status.value,
        }
        response = self._client.table(self.TABLE).insert(data).execute()
        return response.data[0]

    async def create(self, data: RegistrationCreate) -> Registration:
        row = await self._create_sync(data)
        return self._to_model(row)

    @run_sync
    def _set_status_sync(self, registration_id: str, status: str, remarks: Optional[str]) -> Optional[dict]:
        # remarks is written even when None so that accepting clears it
        response = self._client.table(self.TABLE)\
            .update({"status": status, "remarks": remarks})\
            .eq("id", registration_id)\
            .execute()
        return response.data[0] if response.data else None

    async def set_status(self, registration_id: str, status: RegistrationStatus,
                         remarks: Optional[str]) -> Optional[Registration]:
        data = await self._set_status_sync(registration_id, status.value, remarks)
        return self._to_model(data) if data else None

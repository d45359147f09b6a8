"""
Supabase Storage implementation of object storage.
"""

import logging
from typing import Optional

from supabase import Client

from core.interfaces.platform import IObjectStorage
from infrastructure.database.supabase_client import run_sync

logger = logging.getLogger(__name__)


class SupabaseObjectStorage(IObjectStorage):
    """Bucket uploads and public URLs"""

    def __init__(self, client: Client):
        self._client = client

    @run_sync
    def _upload_sync(self, bucket: str, path: str, content: bytes, content_type: Optional[str]):
        file_options = {"content-type": content_type} if content_type else None
        self._client.storage.from_(bucket).upload(path=path, file=content, file_options=file_options)

    async def upload(self, bucket: str, path: str, content: bytes,
                     content_type: Optional[str] = None) -> None:
        logger.info(f"[STORAGE] Uploading {len(content)} bytes to {bucket}/{path}")
        await self._upload_sync(bucket, path, content, content_type)

    def public_url(self, bucket: str, path: str) -> str:
        # Pure URL construction in the SDK, no request
        return self._client.storage.from_(bucket).get_public_url(path)

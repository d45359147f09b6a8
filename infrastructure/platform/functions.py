"""
Supabase Edge Functions implementation of remote functions.
"""

import json
import logging
from typing import Any, Dict

from supabase import Client

from core.interfaces.platform import IRemoteFunctions
from infrastructure.database.supabase_client import run_sync

logger = logging.getLogger(__name__)


def _parse_body(raw) -> Dict[str, Any]:
    """Functions may answer with parsed JSON, bytes or text"""
    if isinstance(raw, dict):
        return raw
    if isinstance(raw, (bytes, bytearray)):
        raw = raw.decode("utf-8")
    if isinstance(raw, str):
        return json.loads(raw) if raw.strip() else {}
    return {}


class SupabaseRemoteFunctions(IRemoteFunctions):

    def __init__(self, client: Client):
        self._client = client

    @run_sync
    def _invoke_sync(self, name: str, body: Dict[str, Any]):
        return self._client.functions.invoke(
            name,
            invoke_options={"body": body, "responseType": "json"},
        )

    async def invoke(self, name: str, body: Dict[str, Any]) -> Dict[str, Any]:
        logger.info(f"[FUNCTIONS] Invoking {name}")
        raw = await self._invoke_sync(name, body)
        return _parse_body(raw)

"""
Supabase Auth implementation of the one-time-code login flow.
"""

import logging
from typing import Optional

from supabase import Client

from core.domain.errors import ServiceError, describe
from core.domain.models import ConsoleSession
from core.interfaces.platform import IAuthGateway
from infrastructure.database.supabase_client import run_sync

logger = logging.getLogger(__name__)


def _role_of(user, default_role: str) -> str:
    metadata = getattr(user, "user_metadata", None) or {}
    return metadata.get("role") or default_role


class SupabaseAuthGateway(IAuthGateway):
    """Passwordless email OTP via Supabase Auth"""

    def __init__(self, client: Client, default_role: str = "Leader"):
        self._client = client
        self._default_role = default_role

    @run_sync
    def _send_code_sync(self, email: str, redirect_to: str):
        self._client.auth.sign_in_with_otp({
            "email": email,
            "options": {"email_redirect_to": redirect_to},
        })

    async def send_code(self, email: str, redirect_to: str) -> None:
        await self._send_code_sync(email, redirect_to)

    @run_sync
    def _verify_code_sync(self, email: str, code: str):
        return self._client.auth.verify_otp({"email": email, "token": code, "type": "email"})

    async def verify_code(self, email: str, code: str) -> ConsoleSession:
        response = await self._verify_code_sync(email, code)
        session = getattr(response, "session", None)
        if session is None:
            raise ServiceError("验证码无效或已过期", title="验证失败")
        user = getattr(response, "user", None) or getattr(session, "user", None)
        return ConsoleSession(
            access_token=session.access_token,
            email=getattr(user, "email", None) or email,
            role=_role_of(user, self._default_role),
            user_id=getattr(user, "id", None),
        )

    @run_sync
    def _get_user_sync(self, access_token: str):
        return self._client.auth.get_user(access_token)

    async def get_session(self, access_token: str) -> Optional[ConsoleSession]:
        try:
            response = await self._get_user_sync(access_token)
        except Exception as e:
            logger.info(f"[AUTH] Session rejected: {describe(e)}")
            return None
        user = getattr(response, "user", None)
        if user is None:
            return None
        return ConsoleSession(
            access_token=access_token,
            email=getattr(user, "email", None),
            role=_role_of(user, self._default_role),
            user_id=getattr(user, "id", None),
        )

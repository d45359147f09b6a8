"""
Auth service - email one-time-code login for console operators.
"""

import logging
import re
from typing import Optional

from core.domain.errors import ServiceError, ValidationError, describe
from core.domain.models import ConsoleSession
from core.interfaces.platform import IAuthGateway

logger = logging.getLogger(__name__)

_EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")
CODE_LENGTH = 6


class AuthService:

    def __init__(self, gateway: IAuthGateway, callback_url: str):
        self.gateway = gateway
        self.callback_url = callback_url

    async def request_code(self, email: str) -> None:
        email = email.strip()
        if not _EMAIL_RE.match(email):
            raise ValidationError("请输入有效的电子邮箱地址", title="错误", field="email")
        try:
            await self.gateway.send_code(email, self.callback_url)
        except Exception as e:
            logger.warning(f"[AUTH] OTP request for {email} failed: {e}")
            raise ServiceError(describe(e), title="错误") from e
        logger.info(f"[AUTH] OTP sent to {email}")

    async def verify_code(self, email: str, code: str) -> ConsoleSession:
        code = code.strip()
        if not code.isdigit() or len(code) != CODE_LENGTH:
            raise ValidationError("请输入 6 位验证码", title="验证失败", field="code")
        try:
            session = await self.gateway.verify_code(email.strip(), code)
        except ServiceError:
            raise
        except Exception as e:
            logger.warning(f"[AUTH] OTP verification for {email} failed: {e}")
            raise ServiceError(describe(e), title="验证失败") from e
        logger.info(f"[AUTH] {session.email} signed in as {session.role}")
        return session

    async def resolve(self, access_token: Optional[str]) -> Optional[ConsoleSession]:
        if not access_token:
            return None
        return await self.gateway.get_session(access_token)

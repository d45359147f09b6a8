"""
Platform interfaces - object storage, remote functions and auth.
Implemented on top of Supabase in infrastructure.platform.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Optional
from core.domain.models import ConsoleSession


class IObjectStorage(ABC):
    """Interface for bucket uploads"""

    @abstractmethod
    async def upload(self, bucket: str, path: str, content: bytes,
                     content_type: Optional[str] = None) -> None:
        """Upload bytes under path; raises on failure"""
        pass

    @abstractmethod
    def public_url(self, bucket: str, path: str) -> str:
        """Public reference for an uploaded object"""
        pass


class IRemoteFunctions(ABC):
    """Interface for invoking serverless functions"""

    @abstractmethod
    async def invoke(self, name: str, body: Dict[str, Any]) -> Dict[str, Any]:
        """Invoke function with a JSON body, return the JSON response"""
        pass


class IAuthGateway(ABC):
    """Interface for the passwordless one-time-code flow"""

    @abstractmethod
    async def send_code(self, email: str, redirect_to: str) -> None:
        pass

    @abstractmethod
    async def verify_code(self, email: str, code: str) -> ConsoleSession:
        pass

    @abstractmethod
    async def get_session(self, access_token: str) -> Optional[ConsoleSession]:
        """Resolve a stored access token, None if expired/invalid"""
        pass

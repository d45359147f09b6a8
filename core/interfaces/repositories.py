"""
Repository interfaces - abstractions for data access.
This allows swapping implementations (Supabase -> PostgreSQL -> in-memory fakes, etc.)
"""

from abc import ABC, abstractmethod
from typing import Optional, List, Set
from core.domain.models import (
    Competition,
    Registration, RegistrationCreate, RegistrationStatus,
    SportEvent,
    NotificationCreate,
    DocumentItem, DocumentCreate,
    TravelInfo,
)


class ICompetitionRepository(ABC):
    """Interface for competition lookups"""

    @abstractmethod
    async def get_active(self) -> Optional[Competition]:
        """Most recently created competition"""
        pass


class IRegistrationRepository(ABC):
    """Interface for registration data access"""

    @abstractmethod
    async def get_by_id(self, registration_id: str) -> Optional[Registration]:
        """Get registration by ID"""
        pass

    @abstractmethod
    async def list_all(self) -> List[Registration]:
        """All registrations, newest first"""
        pass

    @abstractmethod
    async def list_by(self, status: Optional[RegistrationStatus] = None,
                      function: Optional[str] = None) -> List[Registration]:
        """Registrations filtered server-side by exact status / function"""
        pass

    @abstractmethod
    async def create(self, data: RegistrationCreate) -> Registration:
        """Insert a submitted registration"""
        pass

    @abstractmethod
    async def set_status(self, registration_id: str, status: RegistrationStatus,
                         remarks: Optional[str]) -> Optional[Registration]:
        """Write status and remarks (None clears remarks)"""
        pass


class INotificationRepository(ABC):
    """Interface for the write-only notification outbox"""

    @abstractmethod
    async def create(self, data: NotificationCreate) -> None:
        pass


class ISportEventRepository(ABC):

    @abstractmethod
    async def list_all(self) -> List[SportEvent]:
        pass

    @abstractmethod
    async def get_by_id(self, event_id: str) -> Optional[SportEvent]:
        pass


class IShortlistRepository(ABC):
    """Interface for per-event shortlist membership"""

    @abstractmethod
    async def get_member_ids(self, event_id: str) -> Set[str]:
        """Registration ids confirmed for the event"""
        pass

    @abstractmethod
    async def delete_for_event(self, event_id: str) -> None:
        """Remove every entry of the event"""
        pass

    @abstractmethod
    async def insert_many(self, event_id: str, registration_ids: List[str]) -> None:
        """Bulk insert entries for the event"""
        pass


class IDocumentRepository(ABC):

    @abstractmethod
    async def list_all(self) -> List[DocumentItem]:
        """All documents, newest first"""
        pass

    @abstractmethod
    async def create(self, data: DocumentCreate) -> DocumentItem:
        pass


class ITravelRepository(ABC):

    @abstractmethod
    async def list_all(self) -> List[TravelInfo]:
        pass

"""Pytest configuration and fixtures - in-memory stand-ins for the platform."""

from datetime import datetime, timezone
from typing import Dict, List, Optional, Set

import pytest

from config.settings import load_settings
from core.domain.models import (
    Competition,
    ConsoleSession,
    DocumentCreate,
    DocumentItem,
    NotificationCreate,
    Registration,
    RegistrationCreate,
    RegistrationStatus,
    SportEvent,
    TravelInfo,
)
from core.interfaces import (
    IAuthGateway,
    ICompetitionRepository,
    IDocumentRepository,
    INotificationRepository,
    IObjectStorage,
    IRegistrationRepository,
    IRemoteFunctions,
    IShortlistRepository,
    ISportEventRepository,
    ITravelRepository,
)


class FakeCompetitionRepository(ICompetitionRepository):
    def __init__(self, competition: Optional[Competition] = None):
        self.competition = competition
        self.calls = 0

    async def get_active(self) -> Optional[Competition]:
        self.calls += 1
        return self.competition


class FakeRegistrationRepository(IRegistrationRepository):
    def __init__(self, registrations: Optional[List[Registration]] = None):
        self.rows: Dict[str, Registration] = {r.id: r for r in registrations or []}
        self.calls: List[str] = []
        self.created: List[RegistrationCreate] = []

    async def get_by_id(self, registration_id: str) -> Optional[Registration]:
        self.calls.append("get_by_id")
        return self.rows.get(registration_id)

    async def list_all(self) -> List[Registration]:
        self.calls.append("list_all")
        return list(self.rows.values())

    async def list_by(self, status=None, function=None) -> List[Registration]:
        self.calls.append("list_by")
        return [
            r for r in self.rows.values()
            if (status is None or r.status == status) and (function is None or r.function == function)
        ]

    async def create(self, data: RegistrationCreate) -> Registration:
        self.calls.append("create")
        self.created.append(data)
        reg = Registration(id=f"reg-{len(self.rows) + 1}", **data.model_dump())
        self.rows[reg.id] = reg
        return reg

    async def set_status(self, registration_id: str, status: RegistrationStatus,
                         remarks: Optional[str] = None) -> Optional[Registration]:
        self.calls.append("set_status")
        current = self.rows.get(registration_id)
        if current is None:
            return None
        updated = current.model_copy(update={"status": status, "remarks": remarks})
        self.rows[registration_id] = updated
        return updated


class FakeNotificationRepository(INotificationRepository):
    def __init__(self, fail: bool = False):
        self.sent: List[NotificationCreate] = []
        self.fail = fail

    async def create(self, data: NotificationCreate) -> None:
        if self.fail:
            raise RuntimeError("notifications table unavailable")
        self.sent.append(data)


class FakeSportEventRepository(ISportEventRepository):
    def __init__(self, events: Optional[List[SportEvent]] = None):
        self.events = list(events or [])

    async def list_all(self) -> List[SportEvent]:
        return list(self.events)

    async def get_by_id(self, event_id: str) -> Optional[SportEvent]:
        return next((e for e in self.events if e.id == event_id), None)


class FakeShortlistRepository(IShortlistRepository):
    def __init__(self, fail_insert: bool = False):
        self.entries: Dict[str, Set[str]] = {}
        self.fail_insert = fail_insert
        self.calls: List[str] = []

    async def get_member_ids(self, event_id: str) -> Set[str]:
        return set(self.entries.get(event_id, set()))

    async def delete_for_event(self, event_id: str) -> None:
        self.calls.append("delete")
        self.entries.pop(event_id, None)

    async def insert_many(self, event_id: str, registration_ids: List[str]) -> None:
        self.calls.append("insert")
        if self.fail_insert:
            raise RuntimeError("insert rejected")
        self.entries[event_id] = set(registration_ids)


class FakeDocumentRepository(IDocumentRepository):
    def __init__(self, documents: Optional[List[DocumentItem]] = None, fail_create: bool = False):
        self.documents = list(documents or [])
        self.fail_create = fail_create

    async def list_all(self) -> List[DocumentItem]:
        return list(self.documents)

    async def create(self, data: DocumentCreate) -> DocumentItem:
        if self.fail_create:
            raise RuntimeError("row-level security violation")
        doc = DocumentItem(id=f"doc-{len(self.documents) + 1}", **data.model_dump())
        self.documents.append(doc)
        return doc


class FakeTravelRepository(ITravelRepository):
    def __init__(self, records: Optional[List[TravelInfo]] = None):
        self.records = list(records or [])

    async def list_all(self) -> List[TravelInfo]:
        return list(self.records)


class FakeStorage(IObjectStorage):
    def __init__(self, fail: bool = False):
        self.objects: Dict[str, bytes] = {}
        self.fail = fail

    async def upload(self, bucket: str, path: str, content: bytes,
                     content_type: Optional[str] = None) -> None:
        if self.fail:
            raise RuntimeError("bucket not found")
        self.objects[f"{bucket}/{path}"] = content

    def public_url(self, bucket: str, path: str) -> str:
        return f"https://storage.test/{bucket}/{path}"


class FakeFunctions(IRemoteFunctions):
    def __init__(self, response: Optional[dict] = None, error: Optional[Exception] = None):
        self.response = response or {}
        self.error = error
        self.invocations: List[tuple] = []

    async def invoke(self, name: str, body: dict) -> dict:
        self.invocations.append((name, body))
        if self.error is not None:
            raise self.error
        return self.response


class FakeAuthGateway(IAuthGateway):
    """Accepts code 123456 and any token starting with 'token-'"""

    def __init__(self, role: str = "Leader"):
        self.role = role
        self.codes_sent: List[str] = []

    async def send_code(self, email: str, redirect_to: str) -> None:
        self.codes_sent.append(email)

    async def verify_code(self, email: str, code: str) -> ConsoleSession:
        if code != "123456":
            raise RuntimeError("Token has expired or is invalid")
        return ConsoleSession(access_token=f"token-{email}", email=email, role=self.role)

    async def get_session(self, access_token: str) -> Optional[ConsoleSession]:
        if not access_token.startswith("token-"):
            return None
        return ConsoleSession(access_token=access_token, email=access_token[6:], role=self.role)


def make_registration(id: str, full_name: str, function: str = "运动员",
                      status: RegistrationStatus = RegistrationStatus.SENT, **extra) -> Registration:
    data = {
        "organization": "北京大学",
        "created_at": datetime(2025, 10, 1, 8, 0, tzinfo=timezone.utc),
    }
    data.update(extra)
    return Registration(id=id, full_name=full_name, function=function, status=status, **data)


@pytest.fixture
def settings():
    return load_settings(
        supabase_url="https://example.supabase.co",
        supabase_key="anon",
        toast_ttl_seconds=5.0,
    )


@pytest.fixture
def competition():
    return Competition(id="comp-1", name="CUCC 2025")


@pytest.fixture
def registrations():
    return [
        make_registration("r1", "张伟", status=RegistrationStatus.ACCEPTED, organization="北京大学"),
        make_registration("r2", "李娜", status=RegistrationStatus.ACCEPTED, organization="清华大学"),
        make_registration("r3", "王强", function="教练员", status=RegistrationStatus.ACCEPTED),
        make_registration("r4", "赵敏", status=RegistrationStatus.SENT, organization="复旦大学"),
        make_registration("r5", "Media Pool", function="Media", status=RegistrationStatus.ACCEPTED),
    ]


@pytest.fixture
def registration_repo(registrations):
    return FakeRegistrationRepository(registrations)


@pytest.fixture
def notification_repo():
    return FakeNotificationRepository()


@pytest.fixture
def competition_repo(competition):
    return FakeCompetitionRepository(competition)


@pytest.fixture
def storage():
    return FakeStorage()

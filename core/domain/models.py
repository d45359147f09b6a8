"""
Domain models - the core of business logic.
These models are transport-agnostic (work with the web console, scripts, tests).
"""

from pydantic import BaseModel, Field
from typing import Optional, List, Dict
from datetime import datetime
from uuid import UUID
from enum import Enum


# === ENUMS ===

class RegistrationStatus(str, Enum):
    IN_PROCESS = "In process"
    SENT = "Sent"
    ACCEPTED = "Accepted"
    WRONG_DATA = "Wrong data"


class AuditDecision(str, Enum):
    """Outcome of reviewing a submitted registration"""
    ACCEPT = "accept"
    REJECT = "reject"

    @property
    def status(self) -> RegistrationStatus:
        if self is AuditDecision.ACCEPT:
            return RegistrationStatus.ACCEPTED
        return RegistrationStatus.WRONG_DATA


class ToastType(str, Enum):
    SUCCESS = "success"
    ERROR = "error"
    WARNING = "warning"
    INFO = "info"


class LogLevel(str, Enum):
    INFO = "info"
    SUCCESS = "success"
    ERROR = "error"


# === COMPETITION ===

class Competition(BaseModel):
    id: str
    name: Optional[str] = None
    created_at: Optional[datetime] = None


# === REGISTRATION ===

class RegistrationBase(BaseModel):
    """Base registration data as entered on the intake form"""
    full_name: str
    gender: Optional[str] = None
    birth_date: Optional[str] = None
    id_number: Optional[str] = None
    organization: str = ""
    function: str = ""
    contact_phone: Optional[str] = None
    contact_email: Optional[str] = None


class RegistrationCreate(RegistrationBase):
    """Data for creating a new registration"""
    competition_id: str
    photo_url: Optional[str] = None
    status: RegistrationStatus = RegistrationStatus.SENT


class Registration(RegistrationBase):
    """Full registration model"""
    id: str
    competition_id: Optional[str] = None
    client_group: Optional[str] = None
    photo_url: Optional[str] = None
    status: RegistrationStatus = RegistrationStatus.IN_PROCESS
    remarks: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class RegistrationFilter(BaseModel):
    """Registry filter - empty or 'all' fields are ignored"""
    text: str = ""
    status: str = ""
    role: str = ""


class RegistrationForm(BaseModel):
    """Raw intake form input, validated by core.domain.validators"""
    full_name: str = ""
    gender: str = "male"
    birth_date: str = ""
    id_number: str = ""
    organization: str = ""
    function: str = ""
    phone: str = ""
    email: str = ""


# === SPORT EVENTS / SHORTLISTS ===

class SportEvent(BaseModel):
    id: str
    event_name: str
    category: Optional[str] = None
    entrants: Optional[int] = None
    vacancies: Optional[int] = None


# === NOTIFICATIONS ===

class NotificationCreate(BaseModel):
    registration_id: str
    type: str = "system"
    title: str
    content: str
    status: str = "sent"
    recipient: Optional[str] = None


# === DOCUMENTS ===

class DocumentItem(BaseModel):
    id: str
    competition_id: Optional[str] = None
    title: str
    category: str
    file_url: str
    visible_to_roles: List[str] = Field(default_factory=list)
    created_at: Optional[datetime] = None


class DocumentCreate(BaseModel):
    competition_id: str
    title: str
    category: str
    file_url: str
    visible_to_roles: List[str] = Field(default_factory=list)


class UploadFile(BaseModel):
    """A file received from the browser"""
    filename: str
    content: bytes
    content_type: Optional[str] = None

    @property
    def extension(self) -> str:
        return self.filename.rsplit(".", 1)[-1].lower() if "." in self.filename else ""

    @property
    def size(self) -> int:
        return len(self.content)


# === LOGISTICS ===

class TravelInfo(BaseModel):
    arrival_method: Optional[str] = None
    arrival_time: Optional[datetime] = None
    arrival_point: Optional[str] = None
    departure_time: Optional[datetime] = None
    departure_point: Optional[str] = None
    luggage_info: Optional[str] = None


class DayBucket(BaseModel):
    day: str  # "M/D"
    arrival: int = 0
    departure: int = 0


class LogisticsSummary(BaseModel):
    days: List[DayBucket] = Field(default_factory=list)
    methods: Dict[str, int] = Field(default_factory=dict)
    luggage_units: int = 0
    vans_needed: int = 0


# === ACCREDITATION ===

class BadgeCategory(BaseModel):
    id: str
    label: str
    role_code: str
    color: str  # hex


class Badge(BaseModel):
    registration_id: str
    full_name: str
    organization: str
    function: str
    photo_url: Optional[str] = None
    role_code: str
    color: str
    zone: str = "ALL"


# === IMPORT ===

class ImportLogLine(BaseModel):
    level: LogLevel = LogLevel.INFO
    message: str


class ImportReport(BaseModel):
    ok: bool = False
    success_count: int = 0
    error_count: int = 0
    logs: List[ImportLogLine] = Field(default_factory=list)

    def log(self, level: LogLevel, message: str) -> None:
        self.logs.append(ImportLogLine(level=level, message=message))


# === DASHBOARD ===

class StatusCount(BaseModel):
    status: str
    key: str
    count: int


class GroupStat(BaseModel):
    label: str
    total: int
    color: str
    details: List[StatusCount] = Field(default_factory=list)


# === AUTH ===

class ConsoleSession(BaseModel):
    access_token: str
    email: Optional[str] = None
    role: str = "Leader"
    user_id: Optional[UUID] = None


# === UI ===

class Toast(BaseModel):
    id: str
    type: ToastType
    title: str
    message: Optional[str] = None

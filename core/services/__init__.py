from core.services.registration_service import RegistrationService
from core.services.shortlist_service import ShortlistService
from core.services.accreditation_service import AccreditationService, categorize
from core.services.logistics_service import LogisticsService, aggregate
from core.services.document_service import DocumentService, is_visible, toggle_role
from core.services.import_service import ImportService
from core.services.auth_service import AuthService
from core.services.dashboard_service import DashboardService

__all__ = [
    "RegistrationService",
    "ShortlistService",
    "AccreditationService",
    "categorize",
    "LogisticsService",
    "aggregate",
    "DocumentService",
    "is_visible",
    "toggle_role",
    "ImportService",
    "AuthService",
    "DashboardService",
]

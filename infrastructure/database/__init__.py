from infrastructure.database.registration_repository import SupabaseRegistrationRepository
from infrastructure.database.notification_repository import SupabaseNotificationRepository
from infrastructure.database.sport_event_repository import SupabaseSportEventRepository
from infrastructure.database.shortlist_repository import SupabaseShortlistRepository
from infrastructure.database.document_repository import SupabaseDocumentRepository
from infrastructure.database.travel_repository import SupabaseTravelRepository
from infrastructure.database.competition_repository import SupabaseCompetitionRepository

__all__ = [
    "SupabaseRegistrationRepository",
    "SupabaseNotificationRepository",
    "SupabaseSportEventRepository",
    "SupabaseShortlistRepository",
    "SupabaseDocumentRepository",
    "SupabaseTravelRepository",
    "SupabaseCompetitionRepository",
]

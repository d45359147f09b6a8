"""
Console loader - builds repositories, gateways and services from settings.
Everything is constructed explicitly and handed to the web app; nothing here
is a module-level singleton.
"""

from dataclasses import dataclass
from datetime import timedelta, timezone
from typing import Optional

from aiohttp import web

from config.features import features
from config.settings import Settings

# Infrastructure
from infrastructure.database.supabase_client import create_supabase_client
from infrastructure.database import (
    SupabaseRegistrationRepository,
    SupabaseNotificationRepository,
    SupabaseSportEventRepository,
    SupabaseShortlistRepository,
    SupabaseDocumentRepository,
    SupabaseTravelRepository,
    SupabaseCompetitionRepository,
)
from infrastructure.platform import (
    SupabaseObjectStorage,
    SupabaseRemoteFunctions,
    SupabaseAuthGateway,
    PhotoFetcher,
)

# Core services
from core.services import (
    RegistrationService,
    ShortlistService,
    AccreditationService,
    LogisticsService,
    DocumentService,
    ImportService,
    AuthService,
    DashboardService,
)
from core.utils.toasts import ToastCenter


@dataclass
class Container:
    """Everything a request handler may need"""
    settings: Settings
    auth_service: AuthService
    registration_service: RegistrationService
    shortlist_service: ShortlistService
    accreditation_service: AccreditationService
    logistics_service: LogisticsService
    document_service: DocumentService
    import_service: ImportService
    dashboard_service: DashboardService
    toasts: ToastCenter


CONTAINER_KEY = web.AppKey("container", Container)


def build_container(settings: Settings, data_client=None, auth_client=None) -> Container:
    """Wire the console on top of Supabase clients (created from settings if not given)."""
    # === CLIENTS ===
    data_client = data_client or create_supabase_client(settings)
    auth_client = auth_client or create_supabase_client(settings, key=settings.supabase_key or None)

    # === REPOSITORIES ===
    registration_repo = SupabaseRegistrationRepository(data_client)
    notification_repo = SupabaseNotificationRepository(data_client)
    event_repo = SupabaseSportEventRepository(data_client)
    shortlist_repo = SupabaseShortlistRepository(data_client)
    document_repo = SupabaseDocumentRepository(data_client)
    travel_repo = SupabaseTravelRepository(data_client)
    competition_repo = SupabaseCompetitionRepository(data_client)

    # === PLATFORM ===
    storage = SupabaseObjectStorage(data_client)
    functions = SupabaseRemoteFunctions(data_client)
    auth_gateway = SupabaseAuthGateway(auth_client, default_role=settings.default_viewer_role)

    return Container(
        settings=settings,
        auth_service=AuthService(auth_gateway, callback_url=settings.callback_url),
        registration_service=RegistrationService(
            registration_repo=registration_repo,
            notification_repo=notification_repo,
            competition_repo=competition_repo,
            storage=storage,
            photos_bucket=settings.photos_bucket,
            max_photo_bytes=settings.max_photo_bytes,
        ),
        shortlist_service=ShortlistService(
            registration_repo=registration_repo,
            event_repo=event_repo,
            shortlist_repo=shortlist_repo,
        ),
        accreditation_service=AccreditationService(
            registration_repo=registration_repo,
            photo_fetcher=PhotoFetcher(),
            competition_title=settings.competition_title,
            with_qr=features.BADGE_QR_ENABLED,
        ),
        logistics_service=LogisticsService(travel_repo, tz=display_timezone(settings.display_utc_offset_hours)),
        document_service=DocumentService(
            document_repo=document_repo,
            competition_repo=competition_repo,
            storage=storage,
            bucket=settings.documents_bucket,
        ),
        import_service=ImportService(
            functions=functions,
            function_name=settings.batch_import_function,
            competition_id=settings.default_competition_id,
        ),
        dashboard_service=DashboardService(registration_repo),
        toasts=ToastCenter(ttl_seconds=settings.toast_ttl_seconds),
    )


def display_timezone(offset_hours: Optional[float]):
    if offset_hours is None:
        return None
    return timezone(timedelta(hours=offset_hours))

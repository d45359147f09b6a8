from core.interfaces.repositories import (
    ICompetitionRepository,
    IRegistrationRepository,
    INotificationRepository,
    ISportEventRepository,
    IShortlistRepository,
    IDocumentRepository,
    ITravelRepository,
)
from core.interfaces.platform import IObjectStorage, IRemoteFunctions, IAuthGateway

__all__ = [
    # Repositories
    "ICompetitionRepository",
    "IRegistrationRepository",
    "INotificationRepository",
    "ISportEventRepository",
    "IShortlistRepository",
    "IDocumentRepository",
    "ITravelRepository",
    # Platform
    "IObjectStorage",
    "IRemoteFunctions",
    "IAuthGateway",
]

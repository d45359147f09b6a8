from infrastructure.platform.object_storage import SupabaseObjectStorage
from infrastructure.platform.functions import SupabaseRemoteFunctions
from infrastructure.platform.auth_gateway import SupabaseAuthGateway
from infrastructure.platform.photo_fetcher import PhotoFetcher

__all__ = [
    "SupabaseObjectStorage",
    "SupabaseRemoteFunctions",
    "SupabaseAuthGateway",
    "PhotoFetcher",
]

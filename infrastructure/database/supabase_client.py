"""
Supabase client construction.
The client is built once at startup and passed to every repository/gateway.
"""

from supabase import create_client, Client
import asyncio
import concurrent.futures
import logging
from functools import wraps
from typing import Optional

from config.settings import Settings

logger = logging.getLogger(__name__)


class SupabaseConfigError(RuntimeError):
    """Raised when credentials are missing at startup"""


def create_supabase_client(settings: Settings, key: Optional[str] = None) -> Client:
    """Create a Supabase client for the configured project and schema.

    Data access uses the service key by default. The auth gateway gets its own
    client (anon key) because signing in rebinds the client's auth header.
    """
    url = settings.supabase_url
    key = key or settings.service_key

    if not url or not key:
        logger.error(
            "Supabase credentials not configured! "
            f"SUPABASE_URL: {'set' if url else 'MISSING'}, "
            f"SUPABASE_KEY: {'set' if key else 'MISSING'}"
        )
        raise SupabaseConfigError("Required env vars: SUPABASE_URL, SUPABASE_SERVICE_KEY (or SUPABASE_KEY)")

    # Schema isolation: staging may use a separate schema, production uses public
    if settings.db_schema != "public":
        from supabase.lib.client_options import ClientOptions
        return create_client(url, key, options=ClientOptions(schema=settings.db_schema))
    return create_client(url, key)


# Dedicated bounded thread pool for DB operations; prevents exhausting the
# default executor when many Supabase calls run concurrently.
_db_executor = concurrent.futures.ThreadPoolExecutor(
    max_workers=10,
    thread_name_prefix="supabase-db",
)


def run_sync(func):
    """
    Decorator to run synchronous Supabase operations in async context.
    Supabase Python SDK is synchronous, so we need this wrapper.
    Uses a dedicated bounded thread pool instead of the default executor.
    """
    @wraps(func)
    async def wrapper(*args, **kwargs):
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(_db_executor, lambda: func(*args, **kwargs))
    return wrapper

"""
Console web app - aiohttp application factory.
"""

import logging

from aiohttp import web

from adapters.web.handlers import route_tables
from adapters.web.handlers.auth import auth_callback
from adapters.web.loader import CONTAINER_KEY, Container
from adapters.web.middleware import auth_middleware, error_middleware

logger = logging.getLogger(__name__)


def create_console_app(container: Container) -> web.Application:
    """Create the console app around an already wired container."""
    settings = container.settings
    app = web.Application(
        middlewares=[error_middleware, auth_middleware],
        client_max_size=settings.max_upload_bytes,
    )
    app[CONTAINER_KEY] = container

    app.router.add_get(settings.auth_callback_path, auth_callback)
    for routes in route_tables:
        app.router.add_routes(routes)

    logger.info(f"Console app ready with {len(app.router.routes())} routes")
    return app

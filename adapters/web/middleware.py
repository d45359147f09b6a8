"""
Middleware for the console web app.

- error_middleware: top-level error boundary, renders a recovery page
- auth_middleware: resolves the session cookie, redirects to /login without one
"""

import logging
import traceback

from aiohttp import web

from adapters.web.layout import SESSION_KEY, esc, get_container, get_lang, page
from config.features import features
from locales import t

logger = logging.getLogger(__name__)

# Reachable without a session
PUBLIC_PATHS = {"/login", "/login/send", "/login/verify", "/logout", "/healthz"}


def is_public(path: str, callback_path: str) -> bool:
    return path in PUBLIC_PATHS or path == callback_path


def error_page(lang: str, detail: str = "") -> web.Response:
    details = f"<pre class=\"muted\">{esc(detail)}</pre>" if detail else ""
    body = f"""
<div class="card">
  <h1>{esc(t("error_title", lang))}</h1>
  <p>{esc(t("error_body", lang))}</p>
  {details}
  <p>
    <a href="javascript:location.reload()">{esc(t("error_reload", lang))}</a>
    &middot;
    <a href="/">{esc(t("error_home", lang))}</a>
  </p>
</div>"""
    return page(t("error_title", lang), body, status=500)


@web.middleware
async def error_middleware(request: web.Request, handler):
    """Anything a handler did not turn into a response ends up here"""
    try:
        return await handler(request)
    except web.HTTPException:
        raise
    except Exception as e:
        logger.error(f"[WEB] Unhandled error on {request.method} {request.path}: {e}", exc_info=True)
        detail = traceback.format_exc() if features.SHOW_ERROR_DETAILS else ""
        return error_page(get_lang(request), detail)


@web.middleware
async def auth_middleware(request: web.Request, handler):
    """Only an authenticated session reaches console pages"""
    container = get_container(request)
    settings = container.settings
    if is_public(request.path, settings.auth_callback_path):
        return await handler(request)

    token = request.cookies.get(settings.session_cookie_name)
    session = await container.auth_service.resolve(token)
    if session is None:
        if token:
            logger.info(f"[AUTH] Stale session cookie on {request.path}, redirecting to login")
        raise web.HTTPFound("/login")

    request[SESSION_KEY] = session
    return await handler(request)

"""
Auth handlers - email one-time-code sign-in, magic link callback and logout.
"""

import logging
from urllib.parse import urlencode

from aiohttp import web

from adapters.web.forms import text_field
from adapters.web.layout import esc, get_container, get_lang, page
from core.domain.errors import ConsoleError
from core.domain.models import ConsoleSession
from locales import t

logger = logging.getLogger(__name__)

routes = web.RouteTableDef()


def login_page(lang: str, email: str = "", error: str = "", notice: str = "") -> web.Response:
    error_html = f'<p class="error">{esc(error)}</p>' if error else ""
    notice_html = f'<p class="muted">{esc(notice)}</p>' if notice else ""

    if email:
        # Step 2: code entry
        form = f"""
<form method="post" action="/login/verify">
  <input type="hidden" name="email" value="{esc(email)}">
  <p><strong>{esc(email)}</strong></p>
  <label>{esc(t("login_code", lang))}
    <input name="code" inputmode="numeric" maxlength="6" autofocus required></label>
  <button>{esc(t("login_submit", lang))}</button>
</form>
<p><a href="/login">{esc(t("login_back", lang))}</a></p>"""
    else:
        form = f"""
<form method="post" action="/login/send">
  <label>{esc(t("login_email", lang))}
    <input name="email" type="email" autofocus required></label>
  <button>{esc(t("login_send_code", lang))}</button>
</form>"""

    body = f"""
<div class="card" style="max-width:420px;margin:64px auto">
  <h1>{esc(t("app_name", lang))}</h1>
  {notice_html}
  {error_html}
  {form}
</div>"""
    return page(t("app_name", lang), body)


def sign_in(request: web.Request, session: ConsoleSession, location: str = "/") -> web.HTTPFound:
    settings = get_container(request).settings
    response = web.HTTPFound(location)
    response.set_cookie(
        settings.session_cookie_name,
        session.access_token,
        httponly=True,
        secure=settings.cookie_secure,
        samesite="Lax",
    )
    return response


@routes.get("/login")
async def login(request: web.Request) -> web.Response:
    lang = get_lang(request)
    email = request.query.get("email", "")
    notice = t("login_code_sent", lang) if email else ""
    return login_page(lang, email=email, notice=notice)


@routes.post("/login/send")
async def send_code(request: web.Request) -> web.Response:
    lang = get_lang(request)
    form = await request.post()
    email = text_field(form, "email").strip()
    try:
        await get_container(request).auth_service.request_code(email)
    except ConsoleError as e:
        return login_page(lang, error=e.message)
    raise web.HTTPFound("/login?" + urlencode({"email": email}))


@routes.post("/login/verify")
async def verify_code(request: web.Request) -> web.Response:
    lang = get_lang(request)
    form = await request.post()
    email = text_field(form, "email").strip()
    code = text_field(form, "code")
    try:
        session = await get_container(request).auth_service.verify_code(email, code)
    except ConsoleError as e:
        return login_page(lang, email=email, error=e.message)
    raise sign_in(request, session)


CALLBACK_BRIDGE = """
<p class="muted">...</p>
<script>
  var params = new URLSearchParams(location.hash.slice(1));
  var token = params.get("access_token");
  location.replace(token ? location.pathname + "?access_token=" + encodeURIComponent(token) : "/login");
</script>"""


async def auth_callback(request: web.Request) -> web.Response:
    """
    Magic link landing page.

    The platform puts tokens in the URL fragment, which never reaches the
    server, so a tiny page hands the access token back as a query param.
    """
    token = request.query.get("access_token")
    if not token:
        return page(t("app_name", get_lang(request)), CALLBACK_BRIDGE)

    session = await get_container(request).auth_service.resolve(token)
    if session is None:
        logger.warning("[AUTH] Magic link callback with an invalid token")
        raise web.HTTPFound("/login")
    raise sign_in(request, session)


@routes.post("/logout")
async def logout(request: web.Request) -> web.Response:
    response = web.HTTPFound("/login")
    response.del_cookie(get_container(request).settings.session_cookie_name)
    raise response

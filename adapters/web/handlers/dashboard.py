"""
Dashboard - registration counts per monitoring group and recent activity.
"""

import logging

from aiohttp import web

from adapters.web.forms import text_field
from adapters.web.layout import esc, get_container, get_lang, render_page, safe_next, session_key, status_label
from core.domain.constants import get_role_display
from core.domain.errors import ConsoleError
from locales import t

logger = logging.getLogger(__name__)

routes = web.RouteTableDef()


@routes.get("/")
async def dashboard(request: web.Request) -> web.Response:
    container = get_container(request)
    lang = get_lang(request)

    try:
        stats, recent = await container.dashboard_service.overview()
    except ConsoleError as e:
        container.toasts.error(session_key(request), e.title, e.message)
        stats, recent = [], []

    cards = ""
    for stat in stats:
        rows = "".join(
            f'<div class="row"><span class="muted">{esc(d.status)}</span> <strong>{d.count}</strong></div>'
            for d in stat.details
        )
        cards += (
            f'<div class="card" style="border-top:4px solid {esc(stat.color)}">'
            f'<div class="muted">{esc(get_role_display(stat.label, lang))}</div>'
            f'<div class="big">{stat.total}</div>{rows}</div>\n'
        )

    activity = ""
    for reg in recent:
        moment = reg.updated_at or reg.created_at
        when = moment.strftime("%Y-%m-%d %H:%M") if moment else ""
        activity += (
            f'<tr><td><a href="/registrations/{esc(reg.id)}/audit">{esc(reg.full_name)}</a></td>'
            f'<td>{esc(reg.organization)}</td><td>{esc(reg.function)}</td>'
            f'<td>{status_label(reg.status)}</td><td class="muted">{esc(when)}</td></tr>\n'
        )

    body = f"""
<h1>{esc(t("nav_dashboard", lang))}</h1>
<div class="grid">{cards}</div>
<div class="card">
  <table>{activity}</table>
</div>"""
    return render_page(request, t("nav_dashboard", lang), body, active="/")


@routes.post("/toasts/{toast_id}/dismiss")
async def dismiss_toast(request: web.Request) -> web.Response:
    form = await request.post()
    get_container(request).toasts.dismiss(session_key(request), request.match_info["toast_id"])
    raise web.HTTPFound(safe_next(text_field(form, "next")))


@routes.get("/healthz")
async def healthz(request: web.Request) -> web.Response:
    return web.json_response({"status": "ok"})

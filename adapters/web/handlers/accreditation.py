"""
Accreditation - badge previews per category and printable PDF export.
"""

import logging
from urllib.parse import quote

from aiohttp import web

from adapters.web.layout import esc, get_container, get_lang, render_page, session_key
from core.domain.errors import ConsoleError
from core.services.accreditation_service import CATEGORIES, get_category
from locales import t

logger = logging.getLogger(__name__)

routes = web.RouteTableDef()


def badge_card(badge) -> str:
    photo = (
        f'<img src="{esc(badge.photo_url)}" style="width:80px;height:100px;object-fit:cover">'
        if badge.photo_url else '<div style="width:80px;height:100px;background:#e2e8f0"></div>'
    )
    return f"""
<div class="badge">
  <div class="band" style="background:{esc(badge.color)}">{esc(badge.role_code)}</div>
  <div class="body">
    {photo}
    <div><strong>{esc(badge.full_name)}</strong></div>
    <div class="muted">{esc(badge.organization)}</div>
    <div class="muted">ROLE {esc(badge.role_code)} &middot; ZONE {esc(badge.zone)}</div>
  </div>
</div>"""


@routes.get("/accreditation")
async def accreditation(request: web.Request) -> web.Response:
    container = get_container(request)
    lang = get_lang(request)
    category = get_category(request.query.get("category"))

    try:
        badges = await container.accreditation_service.badges_for(category)
    except ConsoleError as e:
        container.toasts.error(session_key(request), e.title, e.message)
        badges = []

    tabs = ""
    for cat in CATEGORIES:
        weight = "bold" if cat.id == category.id else "normal"
        tabs += (
            f'<a href="/accreditation?category={quote(cat.id)}" '
            f'style="font-weight:{weight};color:{esc(cat.color)}">{esc(cat.label)}</a> '
        )

    cards = "".join(badge_card(b) for b in badges)
    if not cards:
        cards = f'<div class="muted">{esc(t("acc_empty", lang))}</div>'

    body = f"""
<h1>{esc(t("acc_title", lang))}</h1>
<div class="card">
  {tabs}
  <p>{esc(t("acc_count", lang))}: <strong>{len(badges)}</strong>
    &middot; <a href="/accreditation/pdf?category={quote(category.id)}">{esc(t("acc_download", lang))}</a></p>
</div>
<div class="grid">{cards}</div>"""
    return render_page(request, t("acc_title", lang), body, active="/accreditation")


@routes.get("/accreditation/pdf")
async def accreditation_pdf(request: web.Request) -> web.Response:
    container = get_container(request)
    lang = get_lang(request)
    category = get_category(request.query.get("category"))

    try:
        badges = await container.accreditation_service.badges_for(category)
        if not badges:
            container.toasts.warning(session_key(request), t("export_failed", lang), t("acc_empty", lang))
            raise web.HTTPFound(f"/accreditation?category={quote(category.id)}")
        content = await container.accreditation_service.export_pdf(badges)
    except ConsoleError as e:
        container.toasts.error(session_key(request), e.title, e.message)
        raise web.HTTPFound("/accreditation")

    filename = f"{container.settings.export_prefix}_Badges_{category.role_code}.pdf"
    logger.info(f"[ACCREDITATION] {filename}: {len(badges)} badges")
    return web.Response(
        body=content,
        content_type="application/pdf",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )

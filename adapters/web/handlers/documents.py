"""
Documents - role-filtered document center and publishing.
"""

import logging
from typing import Iterable, List
from urllib.parse import quote

from aiohttp import web

from adapters.web.forms import read_upload, text_field
from adapters.web.layout import current_session, esc, get_container, get_lang, render_page, session_key
from core.domain.constants import (
    DEFAULT_DOCUMENT_CATEGORY,
    DEFAULT_DOCUMENT_ROLES,
    DOCUMENT_CATEGORIES,
    DOCUMENT_ROLES,
    VISIBILITY_PUBLIC,
    get_document_category_display,
    get_document_role_display,
)
from core.domain.errors import ConsoleError
from core.services.document_service import category_counts, filter_documents, toggle_role
from locales import t

logger = logging.getLogger(__name__)

routes = web.RouteTableDef()


def roles_from_form(checked: Iterable[str]) -> List[str]:
    """Replay the picked roles as clicks; the public sentinel goes last so it wins"""
    picked = [r for r in checked if r in DOCUMENT_ROLES]
    selection: List[str] = []
    for role in sorted(picked, key=lambda r: r == VISIBILITY_PUBLIC):
        selection = toggle_role(selection, role)
    return selection


@routes.get("/documents")
async def documents(request: web.Request) -> web.Response:
    container = get_container(request)
    lang = get_lang(request)
    session = current_session(request)
    viewer_role = session.role if session else container.settings.default_viewer_role
    text = request.query.get("q", "")
    category = request.query.get("category", VISIBILITY_PUBLIC)

    try:
        everything = await container.document_service.list_all()
    except ConsoleError as e:
        container.toasts.error(session_key(request), e.title, e.message)
        everything = []

    readable = filter_documents(everything, viewer_role)
    counts = category_counts(readable)
    shown = filter_documents(readable, viewer_role, text, category)

    tabs = f'<a href="/documents?q={quote(text)}">{esc(t("doc_all", lang))} ({counts[VISIBILITY_PUBLIC]})</a> '
    for cat in DOCUMENT_CATEGORIES:
        weight = "bold" if cat == category else "normal"
        tabs += (
            f'<a href="/documents?category={quote(cat)}&q={quote(text)}" style="font-weight:{weight}">'
            f'{esc(get_document_category_display(cat, lang))} ({counts[cat]})</a> '
        )

    rows = ""
    for doc in shown:
        roles = ", ".join(get_document_role_display(r, lang) for r in doc.visible_to_roles)
        when = doc.created_at.strftime("%Y-%m-%d") if doc.created_at else ""
        rows += (
            f'<tr><td><a href="{esc(doc.file_url)}" target="_blank">{esc(doc.title)}</a></td>'
            f'<td>{esc(get_document_category_display(doc.category, lang))}</td>'
            f'<td class="muted">{esc(roles)}</td><td class="muted">{esc(when)}</td></tr>\n'
        )
    if not rows:
        rows = f'<tr><td colspan="4" class="muted">{esc(t("doc_empty", lang))}</td></tr>'

    category_options = "".join(
        f'<option value="{esc(cat)}"{" selected" if cat == DEFAULT_DOCUMENT_CATEGORY else ""}>'
        f'{esc(get_document_category_display(cat, lang))}</option>'
        for cat in DOCUMENT_CATEGORIES
    )
    role_boxes = "".join(
        f'<label><input type="checkbox" name="roles" value="{esc(role)}"'
        f'{" checked" if role in DEFAULT_DOCUMENT_ROLES else ""}> {esc(get_document_role_display(role, lang))}</label> '
        for role in DOCUMENT_ROLES
    )

    body = f"""
<h1>{esc(t("doc_title", lang))}</h1>
<div class="card">
  <form method="get" action="/documents">
    <input type="hidden" name="category" value="{esc(category)}">
    <input name="q" value="{esc(text)}"><button>&#128269;</button>
  </form>
  <p>{tabs}</p>
</div>
<div class="card"><table>{rows}</table></div>
<form class="card" method="post" action="/documents/upload" enctype="multipart/form-data">
  <h2>{esc(t("doc_upload", lang))}</h2>
  <p><input name="title" required> <select name="category">{category_options}</select></p>
  <p>{role_boxes}</p>
  <p class="muted">{esc(t("doc_roles_hint", lang))}</p>
  <p><input type="file" name="file" required> <button>{esc(t("doc_upload", lang))}</button></p>
</form>"""
    return render_page(request, t("doc_title", lang), body, active="/documents")


@routes.post("/documents/upload")
async def upload_document(request: web.Request) -> web.Response:
    container = get_container(request)
    lang = get_lang(request)
    data = await request.post()

    try:
        document = await container.document_service.publish(
            file=read_upload(data.get("file")),
            title=text_field(data, "title"),
            category=text_field(data, "category", DEFAULT_DOCUMENT_CATEGORY),
            visible_roles=roles_from_form(data.getall("roles", [])),
        )
    except ConsoleError as e:
        container.toasts.error(session_key(request), e.title, e.message)
        raise web.HTTPFound("/documents")

    container.toasts.success(
        session_key(request), t("doc_published", lang), t("doc_published_desc", lang, title=document.title)
    )
    raise web.HTTPFound("/documents")

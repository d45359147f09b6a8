"""
Sport entry - pick athletes from the accepted long list into an event shortlist.

The working selection lives in the form's checkboxes; "save" replaces the
stored shortlist and "export" downloads the entry list of the current
selection.
"""

import logging
from datetime import date
from urllib.parse import quote

from aiohttp import web

from adapters.web.layout import esc, get_container, get_lang, render_page, session_key
from core.domain.errors import ConsoleError, ValidationError
from core.services.shortlist_service import search
from core.utils.spreadsheet import XLSX_MIME, export_filename
from locales import t

logger = logging.getLogger(__name__)

routes = web.RouteTableDef()


def entry_url(event_id: str) -> str:
    return f"/sport-entry/{event_id}"


@routes.get("/sport-entry")
async def sport_entry_index(request: web.Request) -> web.Response:
    container = get_container(request)
    try:
        events = await container.shortlist_service.list_events()
    except ConsoleError as e:
        container.toasts.error(session_key(request), e.title, e.message)
        events = []
    if events:
        raise web.HTTPFound(entry_url(events[0].id))

    lang = get_lang(request)
    body = f'<h1>{esc(t("entry_title", lang))}</h1><div class="card muted">{esc(t("entry_no_events", lang))}</div>'
    return render_page(request, t("entry_title", lang), body, active="/sport-entry")


@routes.get("/sport-entry/{event_id}")
async def sport_entry(request: web.Request) -> web.Response:
    container = get_container(request)
    lang = get_lang(request)
    event_id = request.match_info["event_id"]
    text = request.query.get("q", "")

    try:
        events = await container.shortlist_service.list_events()
        long_list = await container.shortlist_service.load_long_list()
        members = await container.shortlist_service.load_shortlist(event_id)
    except ConsoleError as e:
        container.toasts.error(session_key(request), e.title, e.message)
        raise web.HTTPFound("/")

    event = next((e for e in events if e.id == event_id), None)
    if event is None:
        raise web.HTTPNotFound(text=t("not_found", lang))

    sidebar = ""
    for ev in events:
        weight = "bold" if ev.id == event_id else "normal"
        sidebar += (
            f'<div><a href="{entry_url(ev.id)}" style="font-weight:{weight}">{esc(ev.event_name)}</a> '
            f'<span class="muted">{esc(ev.category)}</span></div>\n'
        )

    visible = search(long_list, text)
    visible_ids = {p.id for p in visible}
    rows = ""
    for person in visible:
        checked = " checked" if person.id in members else ""
        rows += (
            f'<tr><td><input type="checkbox" name="member" value="{esc(person.id)}"{checked}></td>'
            f'<td>{esc(person.full_name)}</td><td>{esc(person.organization)}</td></tr>\n'
        )
    # Selections hidden by the search still belong to the working set
    hidden = "".join(
        f'<input type="hidden" name="member" value="{esc(member)}">'
        for member in sorted(members - visible_ids)
    )

    body = f"""
<h1>{esc(t("entry_title", lang))}</h1>
<div style="display:flex;gap:16px">
  <div class="card" style="min-width:200px">{sidebar}</div>
  <div style="flex:1">
    <div class="card">
      <h2>{esc(event.event_name)} <span class="muted">{len(members)} / {len(long_list)}</span></h2>
      <form method="get" action="{entry_url(event_id)}">
        <input name="q" value="{esc(text)}" placeholder="{esc(t("reg_search", lang))}"><button>&#128269;</button>
      </form>
    </div>
    <form class="card" method="post" action="{entry_url(event_id)}">
      <h3>{esc(t("entry_long_list", lang))}</h3>
      {hidden}
      <table>{rows}</table>
      <button name="action" value="save">{esc(t("entry_save", lang))}</button>
      <button name="action" value="export">{esc(t("reg_export", lang))}</button>
    </form>
  </div>
</div>"""
    return render_page(request, t("entry_title", lang), body, active="/sport-entry")


@routes.post("/sport-entry/{event_id}")
async def save_or_export(request: web.Request) -> web.Response:
    container = get_container(request)
    lang = get_lang(request)
    event_id = request.match_info["event_id"]
    form = await request.post()
    working_set = set(form.getall("member", []))

    try:
        event = await container.shortlist_service.get_event(event_id)
    except ConsoleError as e:
        container.toasts.error(session_key(request), e.title, e.message)
        raise web.HTTPFound(entry_url(event_id))
    if event is None:
        raise web.HTTPNotFound(text=t("not_found", lang))

    if form.get("action") == "export":
        return await export_entry_list(request, event, working_set)

    try:
        await container.shortlist_service.save(event_id, working_set)
    except ConsoleError as e:
        container.toasts.error(session_key(request), e.title, e.message)
        raise web.HTTPFound(entry_url(event_id))

    container.toasts.success(
        session_key(request), t("entry_saved", lang), t("entry_saved_desc", lang, event=event.event_name)
    )
    raise web.HTTPFound(entry_url(event_id))


async def export_entry_list(request: web.Request, event, working_set) -> web.Response:
    container = get_container(request)

    try:
        content = await container.shortlist_service.export(event, working_set)
    except ValidationError as e:
        container.toasts.warning(session_key(request), e.title, e.message)
        raise web.HTTPFound(entry_url(event.id))
    except ConsoleError as e:
        container.toasts.error(session_key(request), e.title, e.message)
        raise web.HTTPFound(entry_url(event.id))

    filename = export_filename(
        container.settings.export_prefix, "Entry_List", date.today(), extra=event.event_name
    )
    logger.info(f"[EXPORT] {filename}: {len(working_set)} athletes")
    return web.Response(
        body=content,
        content_type=XLSX_MIME,
        headers={"Content-Disposition": f"attachment; filename*=UTF-8''{quote(filename)}"},
    )

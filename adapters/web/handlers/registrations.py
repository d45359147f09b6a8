"""
Registrations - registry list, audit decisions, Excel export and intake form.
"""

import logging
from datetime import date

from aiohttp import web

from adapters.web.forms import read_upload, text_field
from adapters.web.layout import (
    esc,
    get_container,
    get_lang,
    render_page,
    session_key,
    status_label,
)
from core.domain.constants import FILTER_ALL, FILTER_ROLES, GENDERS, REGISTRATION_ROLES, get_role_display
from core.domain.errors import ConsoleError, ValidationError
from core.domain.validators import form_errors
from core.domain.models import (
    AuditDecision,
    RegistrationFilter,
    RegistrationForm,
    RegistrationStatus,
)
from core.utils.spreadsheet import XLSX_MIME, export_filename, status_display
from locales import t

logger = logging.getLogger(__name__)

routes = web.RouteTableDef()


def filter_from_query(request: web.Request) -> RegistrationFilter:
    return RegistrationFilter(
        text=request.query.get("q", ""),
        status=request.query.get("status", FILTER_ALL),
        role=request.query.get("role", FILTER_ALL),
    )


def _options(pairs, current: str) -> str:
    html = ""
    for value, label in pairs:
        selected = " selected" if value == current else ""
        html += f'<option value="{esc(value)}"{selected}>{esc(label)}</option>'
    return html


@routes.get("/registrations")
async def registration_list(request: web.Request) -> web.Response:
    container = get_container(request)
    lang = get_lang(request)
    flt = filter_from_query(request)

    try:
        registrations = await container.registration_service.list(flt)
    except ConsoleError as e:
        container.toasts.error(session_key(request), e.title, e.message)
        registrations = []

    status_options = _options(
        [(FILTER_ALL, t("reg_all_status", lang))] + [(s.value, status_display(s)) for s in RegistrationStatus],
        flt.status,
    )
    role_options = _options(
        [(FILTER_ALL, t("reg_all_roles", lang))] + [(r, get_role_display(r, lang)) for r in FILTER_ROLES],
        flt.role,
    )

    rows = ""
    for reg in registrations:
        rows += (
            f'<tr><td><a href="/registrations/{esc(reg.id)}/audit">{esc(reg.full_name)}</a></td>'
            f'<td>{esc(reg.organization)}</td>'
            f'<td>{esc(get_role_display(reg.function, lang))}</td>'
            f'<td>{status_label(reg.status)}</td>'
            f'<td class="muted">{esc(reg.remarks)}</td></tr>\n'
        )
    if not rows:
        rows = f'<tr><td colspan="5" class="muted">{esc(t("reg_empty", lang))}</td></tr>'

    body = f"""
<h1>{esc(t("reg_title", lang))}</h1>
<div class="card">
  <form method="get" action="/registrations">
    <input name="q" value="{esc(flt.text)}" placeholder="{esc(t("reg_search", lang))}">
    <select name="status">{status_options}</select>
    <select name="role">{role_options}</select>
    <button>&#128269;</button>
  </form>
  <p>
    <a href="/registrations/export?{esc(request.query_string)}">{esc(t("reg_export", lang))}</a>
    &middot; <a href="/registrations/new">{esc(t("reg_new", lang))}</a>
    &middot; <a href="/registrations/import">{esc(t("reg_import", lang))}</a>
  </p>
</div>
<div class="card">
  <table>{rows}</table>
</div>"""
    return render_page(request, t("reg_title", lang), body, active="/registrations")


@routes.get("/registrations/export")
async def export_registrations(request: web.Request) -> web.Response:
    """Styled workbook of the currently filtered registry"""
    container = get_container(request)
    lang = get_lang(request)
    try:
        content = await container.registration_service.export(filter_from_query(request))
    except ConsoleError as e:
        logger.error(f"[EXPORT] Registration export failed: {e.message}")
        container.toasts.error(session_key(request), t("export_failed", lang), e.message)
        raise web.HTTPFound("/registrations")

    filename = export_filename(container.settings.export_prefix, "Registration_Export", date.today())
    container.toasts.success(session_key(request), t("export_done", lang), t("export_done_desc", lang))
    logger.info(f"[EXPORT] {filename}")
    return web.Response(
        body=content,
        content_type=XLSX_MIME,
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )


# === AUDIT ===

@routes.get("/registrations/{registration_id}/audit")
async def audit_page(request: web.Request) -> web.Response:
    container = get_container(request)
    lang = get_lang(request)
    registration_id = request.match_info["registration_id"]

    try:
        reg = await container.registration_service.get(registration_id)
    except ConsoleError as e:
        container.toasts.error(session_key(request), e.title, e.message)
        raise web.HTTPFound("/registrations")
    if reg is None:
        raise web.HTTPNotFound(text=t("not_found", lang))

    photo = f'<img src="{esc(reg.photo_url)}" style="max-width:160px">' if reg.photo_url else ""
    body = f"""
<h1>{esc(t("reg_audit", lang))}</h1>
<div class="card">
  {photo}
  <h2>{esc(reg.full_name)} {status_label(reg.status)}</h2>
  <table>
    <tr><th>{esc(t("login_email", lang))}</th><td>{esc(reg.contact_email)}</td></tr>
    <tr><th>ID</th><td>{esc(reg.id_number)}</td></tr>
    <tr><th>&#9742;</th><td>{esc(reg.contact_phone)}</td></tr>
    <tr><th>&#127970;</th><td>{esc(reg.organization)}</td></tr>
    <tr><th>&#127941;</th><td>{esc(get_role_display(reg.function, lang))}</td></tr>
    <tr><th>{esc(t("reg_remarks", lang))}</th><td>{esc(reg.remarks)}</td></tr>
  </table>
</div>
<div class="card">
  <h2>{esc(t("reg_decision", lang))}</h2>
  <form method="post" action="/registrations/{esc(reg.id)}/audit">
    <textarea name="remarks" rows="3" cols="60" placeholder="{esc(t("reg_remarks", lang))}"></textarea><br>
    <button name="decision" value="{AuditDecision.REJECT.value}">{esc(t("reg_reject", lang))}</button>
    <button name="decision" value="{AuditDecision.ACCEPT.value}">{esc(t("reg_accept", lang))}</button>
  </form>
</div>"""
    return render_page(request, t("reg_audit", lang), body, active="/registrations")


@routes.post("/registrations/{registration_id}/audit")
async def submit_audit(request: web.Request) -> web.Response:
    container = get_container(request)
    lang = get_lang(request)
    registration_id = request.match_info["registration_id"]
    form = await request.post()

    try:
        decision = AuditDecision(text_field(form, "decision"))
    except ValueError:
        raise web.HTTPBadRequest(text="unknown decision")

    try:
        updated = await container.registration_service.audit(
            registration_id, decision, text_field(form, "remarks")
        )
    except ConsoleError as e:
        container.toasts.error(session_key(request), e.title, e.message)
        raise web.HTTPFound(f"/registrations/{registration_id}/audit")

    title = t("audit_accepted" if decision is AuditDecision.ACCEPT else "audit_rejected", lang)
    container.toasts.success(session_key(request), title, t("audit_updated", lang, name=updated.full_name))
    raise web.HTTPFound("/registrations")


# === INTAKE ===

def intake_page(request: web.Request, form: RegistrationForm, errors: dict) -> web.Response:
    lang = get_lang(request)

    def field(name: str, label: str, value: str, kind: str = "text") -> str:
        error = f'<span class="error">{esc(errors[name])}</span>' if name in errors else ""
        return (
            f'<p><label>{esc(label)}<br>'
            f'<input type="{kind}" name="{name}" value="{esc(value)}"></label> {error}</p>'
        )

    gender_options = _options([(g, meta[f"label_{lang}"] if f"label_{lang}" in meta else meta["label_en"])
                               for g, meta in GENDERS.items()], form.gender)
    role_options = _options([("", "-")] + [(r, get_role_display(r, lang)) for r in REGISTRATION_ROLES],
                            form.function)
    function_error = f'<span class="error">{esc(errors["function"])}</span>' if "function" in errors else ""
    photo_error = f'<span class="error">{esc(errors["photo"])}</span>' if "photo" in errors else ""

    body = f"""
<h1>{esc(t("reg_new", lang))}</h1>
<form class="card" method="post" action="/registrations/new" enctype="multipart/form-data">
  {field("full_name", "姓名 / Name", form.full_name)}
  <p><label>性别 / Gender<br><select name="gender">{gender_options}</select></label></p>
  {field("birth_date", "出生日期 / Birth date", form.birth_date, "date")}
  {field("id_number", "身份证号 / ID number", form.id_number)}
  {field("organization", "所属单位 / Organization", form.organization)}
  <p><label>职能 / Function<br><select name="function">{role_options}</select></label> {function_error}</p>
  {field("phone", "手机号 / Phone", form.phone, "tel")}
  {field("email", "邮箱 / Email", form.email, "email")}
  <p><label>证件照 / Photo<br><input type="file" name="photo" accept="image/*"></label> {photo_error}</p>
  <button name="action" value="draft">{esc(t("reg_draft", lang))}</button>
  <button name="action" value="submit">{esc(t("reg_submit", lang))}</button>
</form>"""
    return render_page(request, t("reg_new", lang), body, active="/registrations")


@routes.get("/registrations/new")
async def new_registration(request: web.Request) -> web.Response:
    return intake_page(request, RegistrationForm(), {})


@routes.post("/registrations/new")
async def submit_registration(request: web.Request) -> web.Response:
    container = get_container(request)
    lang = get_lang(request)
    data = await request.post()

    form = RegistrationForm(**{
        name: text_field(data, name)
        for name in RegistrationForm.model_fields
        if name in data
    })
    photo = read_upload(data.get("photo"))
    draft = text_field(data, "action") == "draft"

    try:
        await container.registration_service.submit(form, photo, draft=draft)
    except ValidationError as e:
        container.toasts.error(session_key(request), e.title, e.message)
        errors = form_errors(form)
        if e.field and e.field not in errors:
            errors[e.field] = e.message
        return intake_page(request, form, errors)
    except ConsoleError as e:
        container.toasts.error(session_key(request), e.title, e.message)
        return intake_page(request, form, {})

    if draft:
        container.toasts.success(session_key(request), t("intake_draft", lang), t("intake_draft_desc", lang))
    else:
        container.toasts.success(session_key(request), t("intake_sent", lang), t("intake_sent_desc", lang))
    raise web.HTTPFound("/registrations")

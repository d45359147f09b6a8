"""
Batch import - upload a .zip of registrations and show the run log.
"""

import logging
from typing import Optional

from aiohttp import web

from adapters.web.forms import read_upload
from adapters.web.layout import esc, get_container, get_lang, render_page, session_key
from core.domain.errors import ValidationError
from core.domain.models import ImportReport, LogLevel
from locales import t

logger = logging.getLogger(__name__)

routes = web.RouteTableDef()

LOG_COLORS = {
    LogLevel.INFO: "#64748b",
    LogLevel.SUCCESS: "#10b981",
    LogLevel.ERROR: "#ef4444",
}


def import_page(request: web.Request, report: Optional[ImportReport] = None) -> web.Response:
    lang = get_lang(request)

    log_html = ""
    if report is not None:
        lines = "".join(
            f'<div style="color:{LOG_COLORS[line.level]}">{esc(line.message)}</div>'
            for line in report.logs
        )
        log_html = f'<div class="card"><pre>{lines}</pre></div>'

    body = f"""
<h1>{esc(t("imp_title", lang))}</h1>
<form class="card" method="post" action="/registrations/import" enctype="multipart/form-data">
  <input type="file" name="archive" accept=".zip" required>
  <button>{esc(t("imp_start", lang))}</button>
</form>
{log_html}"""
    return render_page(request, t("imp_title", lang), body, active="/registrations")


@routes.get("/registrations/import")
async def import_form(request: web.Request) -> web.Response:
    return import_page(request)


@routes.post("/registrations/import")
async def run_import(request: web.Request) -> web.Response:
    container = get_container(request)
    data = await request.post()
    archive = read_upload(data.get("archive"))
    if archive is None:
        container.toasts.error(session_key(request), "文件格式错误", "请选择要导入的 .zip 文件")
        return import_page(request)

    try:
        report = await container.import_service.import_archive(archive)
    except ValidationError as e:
        container.toasts.error(session_key(request), e.title, e.message)
        return import_page(request)

    if report.ok:
        container.toasts.success(session_key(request), t("imp_title", get_lang(request)), report.logs[-1].message)
    else:
        container.toasts.error(session_key(request), t("imp_title", get_lang(request)), report.logs[-1].message)
    return import_page(request, report)

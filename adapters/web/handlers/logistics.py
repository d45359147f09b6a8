"""
Logistics - arrivals/departures per day, transport mix and luggage advice.
"""

import logging

from aiohttp import web

from adapters.web.layout import esc, get_container, get_lang, render_page, session_key
from core.domain.errors import ConsoleError
from core.domain.models import LogisticsSummary
from locales import t

logger = logging.getLogger(__name__)

routes = web.RouteTableDef()


def _bar(count: int, peak: int, color: str) -> str:
    width = round(count / peak * 100) if peak else 0
    return f'<div class="bar" style="width:{width}%;background:{color}"></div>'


@routes.get("/logistics")
async def logistics(request: web.Request) -> web.Response:
    container = get_container(request)
    lang = get_lang(request)

    try:
        summary = await container.logistics_service.summary()
    except ConsoleError as e:
        container.toasts.error(session_key(request), e.title, e.message)
        summary = LogisticsSummary()

    if not summary.days and not any(summary.methods.values()):
        body = f'<h1>{esc(t("log_title", lang))}</h1><div class="card muted">{esc(t("log_empty", lang))}</div>'
        return render_page(request, t("log_title", lang), body, active="/logistics")

    peak = max([max(d.arrival, d.departure) for d in summary.days] or [0])
    day_rows = ""
    for day in summary.days:
        day_rows += (
            f'<tr><td>{esc(day.day)}</td>'
            f'<td>{day.arrival}{_bar(day.arrival, peak, "#2563eb")}</td>'
            f'<td>{day.departure}{_bar(day.departure, peak, "#f59e0b")}</td></tr>\n'
        )

    method_rows = "".join(
        f'<div class="row"><span>{esc(method)}</span> <strong>{count}</strong></div>'
        for method, count in summary.methods.items()
    )

    if summary.vans_needed:
        advice = f'<p class="error">{esc(t("log_vans", lang, count=summary.vans_needed))}</p>'
    else:
        advice = f'<p class="muted">{esc(t("log_vans_ok", lang))}</p>'

    body = f"""
<h1>{esc(t("log_title", lang))}</h1>
<div class="card">
  <table>
    <tr><th></th><th>Arrival</th><th>Departure</th></tr>
    {day_rows}
  </table>
</div>
<div class="grid">
  <div class="card">{method_rows}</div>
  <div class="card">
    <div class="muted">{esc(t("log_luggage", lang))}</div>
    <div class="big">{summary.luggage_units}</div>
    {advice}
  </div>
</div>"""
    return render_page(request, t("log_title", lang), body, active="/logistics")

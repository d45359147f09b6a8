"""
HTML shell for console pages - navigation, toasts and shared styles.
"""

from html import escape
from typing import List, Optional

from aiohttp import web

from adapters.web.loader import CONTAINER_KEY, Container
from config.features import features
from core.domain.models import ConsoleSession, RegistrationStatus, Toast
from core.utils.spreadsheet import status_display
from locales import t

SESSION_KEY = web.RequestKey("session", ConsoleSession)
ANONYMOUS = "anonymous"

STYLE = """
  body { font-family: -apple-system, BlinkMacSystemFont, "PingFang SC", sans-serif; margin: 0; background: #f8fafc; color: #0f172a; }
  header { background: #0f172a; color: #fff; padding: 12px 24px; display: flex; align-items: center; gap: 24px; }
  header a { color: #cbd5e1; text-decoration: none; }
  header a.active { color: #fff; font-weight: bold; }
  header .spacer { flex: 1; }
  main { max-width: 1100px; margin: 0 auto; padding: 24px; }
  h1 { font-size: 1.4em; }
  .card { background: #fff; border: 1px solid #e2e8f0; border-radius: 8px; padding: 16px; margin-bottom: 12px; }
  .grid { display: grid; grid-template-columns: repeat(auto-fill, minmax(220px, 1fr)); gap: 12px; }
  .big { font-size: 2em; font-weight: bold; }
  .muted { color: #64748b; font-size: 0.85em; }
  table { width: 100%; border-collapse: collapse; }
  th, td { text-align: left; padding: 6px 8px; border-bottom: 1px solid #e2e8f0; }
  th { color: #64748b; font-weight: normal; }
  .status-accepted { color: #10b981; }
  .status-wrong-data { color: #ef4444; }
  .status-sent { color: #2563eb; }
  .status-in-process { color: #64748b; }
  .toast-info { background: #2563eb; }
  .toasts { position: fixed; top: 64px; right: 16px; width: 320px; }
  .toast { padding: 12px; border-radius: 8px; margin-bottom: 8px; color: #fff; }
  .toast-success { background: #10b981; }
  .toast-error { background: #ef4444; }
  .toast-warning { background: #f59e0b; }
  .toast form { display: inline; float: right; }
  .toast button { background: none; border: none; color: #fff; cursor: pointer; }
  .error { color: #ef4444; }
  .bar { background: #2563eb; height: 10px; border-radius: 4px; }
  .badge { border-radius: 8px; overflow: hidden; border: 1px solid #e2e8f0; background: #fff; }
  .badge .band { color: #fff; padding: 8px; font-weight: bold; }
  .badge .body { padding: 8px; }
"""


def esc(value) -> str:
    if value is None:
        return ""
    return escape(str(value))


def get_container(request: web.Request) -> Container:
    return request.app[CONTAINER_KEY]


def current_session(request: web.Request) -> Optional[ConsoleSession]:
    return request.get(SESSION_KEY)


def session_key(request: web.Request) -> str:
    session = current_session(request)
    return session.access_token if session else ANONYMOUS


def get_lang(request: web.Request) -> str:
    return get_container(request).settings.language


def nav_items() -> List[tuple]:
    items = [
        ("/", "nav_dashboard"),
        ("/registrations", "nav_registrations"),
    ]
    if features.LOGISTICS_ENABLED:
        items.append(("/logistics", "nav_logistics"))
    items.append(("/sport-entry", "nav_sport_entry"))
    items.append(("/accreditation", "nav_accreditation"))
    if features.DOCUMENTS_ENABLED:
        items.append(("/documents", "nav_documents"))
    return items


def render_toasts(toasts: List[Toast], next_path: str = "/") -> str:
    html = ""
    for toast in toasts:
        message = f"<div>{esc(toast.message)}</div>" if toast.message else ""
        html += (
            f'<div class="toast toast-{toast.type.value}">'
            f'<form method="post" action="/toasts/{esc(toast.id)}/dismiss"><input type="hidden" name="next" value="{esc(next_path)}"><button>&times;</button></form>'
            f'<strong>{esc(toast.title)}</strong>{message}</div>\n'
        )
    return f'<div class="toasts">{html}</div>' if html else ""


def page(title: str, body: str, header: str = "", toasts: str = "", status: int = 200) -> web.Response:
    html = f"""<!DOCTYPE html>
<html><head>
<meta charset="utf-8">
<meta name="viewport" content="width=device-width, initial-scale=1">
<title>{esc(title)}</title>
<style>{STYLE}</style>
</head><body>
{header}
{toasts}
<main>
{body}
</main>
</body></html>"""
    return web.Response(text=html, content_type="text/html", status=status)


def render_page(request: web.Request, title: str, body: str, active: str = "",
                status: int = 200) -> web.Response:
    """Full console page with navigation and the session's pending toasts"""
    lang = get_lang(request)
    session = current_session(request)

    links = ""
    for href, key in nav_items():
        css = ' class="active"' if href == active else ""
        links += f'<a href="{href}"{css}>{esc(t(key, lang))}</a>\n'

    who = ""
    if session is not None:
        who = (
            f'<span class="muted">{esc(session.email)} ({esc(session.role)})</span>'
            f'<form method="post" action="/logout" style="display:inline">'
            f'<button>{esc(t("logout", lang))}</button></form>'
        )

    header = (
        f'<header><strong>{esc(t("app_name", lang))}</strong>\n{links}'
        f'<span class="spacer"></span>{who}</header>'
    )
    toasts = render_toasts(get_container(request).toasts.current(session_key(request)), request.path_qs)
    return page(title, body, header=header, toasts=toasts, status=status)


def safe_next(value: Optional[str], fallback: str = "/") -> str:
    """Local path to return to after a POST"""
    if value and value.startswith("/") and not value.startswith("//"):
        return value
    return fallback


def status_label(status: RegistrationStatus) -> str:
    css = "status-" + status.value.lower().replace(" ", "-")
    return f'<span class="{css}">{esc(status_display(status))}</span>'

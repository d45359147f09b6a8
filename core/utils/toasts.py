"""
Transient operator notices.

Each browser session gets a small list of toasts; every toast is removed by
a timer on the running event loop after a fixed delay, or when dismissed.
"""

import asyncio
import logging
import secrets
from collections import defaultdict
from typing import Dict, List, Optional

from core.domain.models import Toast, ToastType

logger = logging.getLogger(__name__)


class ToastCenter:
    """Per-session toast lists with auto-dismiss"""

    def __init__(self, ttl_seconds: float = 5.0):
        self.ttl_seconds = ttl_seconds
        self._toasts: Dict[str, List[Toast]] = defaultdict(list)
        self._timers: Dict[str, asyncio.TimerHandle] = {}

    def show(self, session_key: str, type: ToastType, title: str,
             message: Optional[str] = None) -> Toast:
        toast = Toast(id=secrets.token_hex(4), type=type, title=title, message=message)
        self._toasts[session_key].append(toast)
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            # no loop (scripts): toast stays until dismissed
            return toast
        self._timers[toast.id] = loop.call_later(self.ttl_seconds, self.dismiss, session_key, toast.id)
        return toast

    def success(self, session_key: str, title: str, message: Optional[str] = None) -> Toast:
        return self.show(session_key, ToastType.SUCCESS, title, message)

    def error(self, session_key: str, title: str, message: Optional[str] = None) -> Toast:
        return self.show(session_key, ToastType.ERROR, title, message)

    def warning(self, session_key: str, title: str, message: Optional[str] = None) -> Toast:
        return self.show(session_key, ToastType.WARNING, title, message)

    def dismiss(self, session_key: str, toast_id: str) -> None:
        timer = self._timers.pop(toast_id, None)
        if timer is not None:
            timer.cancel()
        remaining = [t for t in self._toasts.get(session_key, []) if t.id != toast_id]
        if remaining:
            self._toasts[session_key] = remaining
        else:
            self._toasts.pop(session_key, None)

    def current(self, session_key: str) -> List[Toast]:
        return list(self._toasts.get(session_key, []))

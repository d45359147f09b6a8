"""
Console error taxonomy.

ValidationError - refused locally, before any request is issued.
ServiceError    - a platform call failed; carries one readable message.
Anything else is unexpected and handled by the web error boundary.
"""

from typing import Optional


class ConsoleError(Exception):
    """Base class for errors shown to the operator"""

    def __init__(self, message: str, title: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.title = title


class ValidationError(ConsoleError):
    """Input rejected before contacting the platform"""

    def __init__(self, message: str, title: Optional[str] = None, field: Optional[str] = None):
        super().__init__(message, title)
        self.field = field


class ServiceError(ConsoleError):
    """A platform request (table, bucket, function, auth) failed"""


def describe(exc: BaseException) -> str:
    """Best readable message from a platform SDK exception"""
    message = getattr(exc, "message", None)
    if isinstance(message, str) and message:
        return message
    text = str(exc)
    return text or exc.__class__.__name__

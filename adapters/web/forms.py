"""Request body helpers shared by handlers."""

from typing import Optional

from aiohttp import web

from core.domain.models import UploadFile


def read_upload(field) -> Optional[UploadFile]:
    """Turn a multipart file field into an UploadFile (None when nothing was picked)"""
    if not isinstance(field, web.FileField) or not field.filename:
        return None
    content = field.file.read()
    if not content:
        return None
    return UploadFile(filename=field.filename, content=content, content_type=field.content_type)


def text_field(form, name: str, default: str = "") -> str:
    value = form.get(name, default)
    return value if isinstance(value, str) else default

"""
Intake form validation.
Rules match the registration form: all checks run before any upload or insert.
"""

import re
from typing import Dict, Optional

from core.domain.constants import GENDERS, MIN_NAME_LENGTH, MAX_NAME_LENGTH, MAX_REMARKS_LENGTH
from core.domain.errors import ValidationError
from core.domain.models import RegistrationForm, UploadFile

ID_NUMBER_RE = re.compile(r"(^\d{15}$)|(^\d{18}$)|(^\d{17}(\d|X|x)$)")
PHONE_RE = re.compile(r"^1[3-9]\d{9}$")
EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")

PHOTO_EXTENSIONS = {"jpg", "jpeg", "png", "webp"}


def form_errors(form: RegistrationForm) -> Dict[str, str]:
    """Return {field: message} for every invalid field (empty dict if valid)"""
    errors: Dict[str, str] = {}

    name = form.full_name.strip()
    if len(name) < MIN_NAME_LENGTH:
        errors["full_name"] = f"姓名至少需要 {MIN_NAME_LENGTH} 个字符"
    elif len(name) > MAX_NAME_LENGTH:
        errors["full_name"] = f"姓名不能超过 {MAX_NAME_LENGTH} 个字符"

    if form.gender not in GENDERS:
        errors["gender"] = "请选择性别"

    if not form.birth_date.strip():
        errors["birth_date"] = "请选择出生日期"

    if not ID_NUMBER_RE.match(form.id_number.strip()):
        errors["id_number"] = "请输入有效的 15 位或 18 位身份证号码"

    if not form.organization.strip():
        errors["organization"] = "所属高校不能为空"

    if not form.function.strip():
        errors["function"] = "请选择系统职能"

    phone = form.phone.strip()
    if phone and not PHONE_RE.match(phone):
        errors["phone"] = "请输入有效的 11 位手机号码"

    email = form.email.strip()
    if email and not EMAIL_RE.match(email):
        errors["email"] = "请输入有效的电子邮箱地址"

    return errors


def validate_form(form: RegistrationForm) -> None:
    errors = form_errors(form)
    if errors:
        field, message = next(iter(errors.items()))
        raise ValidationError(message, title="资料格式有误", field=field)


def validate_photo(photo: Optional[UploadFile], max_bytes: int) -> None:
    """Photos are optional; when present they must be a small image"""
    if photo is None:
        return
    if photo.size > max_bytes:
        limit_mb = max_bytes // (1024 * 1024)
        raise ValidationError(f"照片文件不能超过 {limit_mb}MB", title="文件过大", field="photo")
    if photo.extension not in PHOTO_EXTENSIONS:
        raise ValidationError("仅支持 JPG / PNG / WEBP 格式的照片", title="文件格式错误", field="photo")


def require_rejection_reason(remarks: Optional[str]) -> str:
    reason = (remarks or "").strip()
    if not reason:
        raise ValidationError("请填写具体驳回理由以告知申请人。", title="驳回原因必填", field="remarks")
    if len(reason) > MAX_REMARKS_LENGTH:
        raise ValidationError(f"驳回理由不能超过 {MAX_REMARKS_LENGTH} 个字符", title="驳回原因过长", field="remarks")
    return reason

"""
Registration service - registry listing, audit decisions and intake.
"""

import logging
import secrets
import string
import time
from typing import Optional, List

from core.domain.constants import FILTER_ALL, NOTIFICATION_STATUS_SENT, NOTIFICATION_TYPE_SYSTEM
from core.domain.errors import ServiceError, describe
from core.domain.models import (
    AuditDecision,
    NotificationCreate,
    Registration,
    RegistrationCreate,
    RegistrationFilter,
    RegistrationForm,
    RegistrationStatus,
    UploadFile,
)
from core.domain.validators import require_rejection_reason, validate_form, validate_photo
from core.interfaces.platform import IObjectStorage
from core.interfaces.repositories import (
    ICompetitionRepository,
    INotificationRepository,
    IRegistrationRepository,
)
from core.utils.spreadsheet import registrations_workbook

logger = logging.getLogger(__name__)


def _is_set(value: Optional[str]) -> bool:
    return bool(value) and value != FILTER_ALL


def matches_filter(registration: Registration, flt: RegistrationFilter) -> bool:
    """All non-empty predicates must hold"""
    text = flt.text.strip().lower()
    if text:
        name = registration.full_name.lower()
        org = registration.organization.lower()
        if text not in name and text not in org:
            return False
    if _is_set(flt.status) and registration.status.value != flt.status:
        return False
    if _is_set(flt.role) and registration.function != flt.role:
        return False
    return True


def filter_registrations(registrations: List[Registration], flt: RegistrationFilter) -> List[Registration]:
    return [r for r in registrations if matches_filter(r, flt)]


def audit_notification(registration: Registration, decision: AuditDecision,
                       remarks: Optional[str]) -> NotificationCreate:
    """Message addressed to the subject of an audit decision"""
    if decision is AuditDecision.ACCEPT:
        title = "报名审核已通过"
        content = "恭喜，您的参赛报名已审核通过。"
    else:
        title = "报名资料需要修正"
        content = f"您的报名申请被驳回，原因：{remarks}"
    return NotificationCreate(
        registration_id=registration.id,
        type=NOTIFICATION_TYPE_SYSTEM,
        title=title,
        content=content,
        status=NOTIFICATION_STATUS_SENT,
        recipient=registration.full_name,
    )


def _random_suffix(length: int = 7) -> str:
    alphabet = string.ascii_lowercase + string.digits
    return ''.join(secrets.choice(alphabet) for _ in range(length))


class RegistrationService:
    """Service for registry and audit operations"""

    def __init__(
        self,
        registration_repo: IRegistrationRepository,
        notification_repo: INotificationRepository,
        competition_repo: ICompetitionRepository,
        storage: IObjectStorage,
        photos_bucket: str = "photos",
        max_photo_bytes: int = 2 * 1024 * 1024,
    ):
        self.registration_repo = registration_repo
        self.notification_repo = notification_repo
        self.competition_repo = competition_repo
        self.storage = storage
        self.photos_bucket = photos_bucket
        self.max_photo_bytes = max_photo_bytes

    async def list(self, flt: Optional[RegistrationFilter] = None) -> List[Registration]:
        """Registrations matching the filter, newest first"""
        try:
            registrations = await self.registration_repo.list_all()
        except Exception as e:
            logger.error(f"[REGISTRY] Fetch failed: {e}")
            raise ServiceError(describe(e), title="加载失败") from e
        if flt is None:
            return registrations
        return filter_registrations(registrations, flt)

    async def export(self, flt: Optional[RegistrationFilter] = None) -> bytes:
        """Styled workbook of the filtered registry"""
        return registrations_workbook(await self.list(flt))

    async def get(self, registration_id: str) -> Optional[Registration]:
        try:
            return await self.registration_repo.get_by_id(registration_id)
        except Exception as e:
            raise ServiceError(describe(e), title="加载失败") from e

    async def audit(
        self,
        registration_id: str,
        decision: AuditDecision,
        remarks: Optional[str] = None,
    ) -> Registration:
        """
        Accept or reject a registration.

        Rejection without a reason is refused before any request is made.
        Accepting clears remarks. A notification row is written after the
        status update; if that insert fails the decision is still returned.
        """
        if decision is AuditDecision.REJECT:
            stored_remarks = require_rejection_reason(remarks)
        else:
            stored_remarks = None

        try:
            registration = await self.registration_repo.get_by_id(registration_id)
            if registration is None:
                raise ServiceError("未找到该报名记录", title="操作失败")

            updated = await self.registration_repo.set_status(
                registration_id, decision.status, stored_remarks
            )
            if updated is None:
                raise ServiceError("状态更新未生效", title="操作失败")
        except ServiceError:
            raise
        except Exception as e:
            logger.error(f"[AUDIT] {registration_id} -> {decision.value} failed: {e}")
            raise ServiceError(describe(e), title="操作失败") from e

        logger.info(f"[AUDIT] {registration_id} -> {decision.status.value}")

        # Notice failures are logged only; the stored decision stands
        try:
            await self.notification_repo.create(
                audit_notification(registration, decision, stored_remarks)
            )
        except Exception as e:
            logger.error(f"[AUDIT] Notification for {registration_id} was not sent: {e}", exc_info=True)
        return updated

    async def submit(
        self,
        form: RegistrationForm,
        photo: Optional[UploadFile] = None,
        draft: bool = False,
    ) -> Registration:
        """Validate and store an intake form (status Sent, or In process for drafts)"""
        validate_form(form)
        validate_photo(photo, self.max_photo_bytes)

        try:
            competition = await self.competition_repo.get_active()
        except Exception as e:
            raise ServiceError(describe(e), title="提交失败") from e
        if competition is None:
            raise ServiceError("未找到当前竞赛项目 ID，请刷新页面。", title="系统错误")

        photo_url = None
        if photo is not None:
            path = f"{competition.id}/{int(time.time() * 1000)}-{_random_suffix()}.{photo.extension}"
            try:
                await self.storage.upload(self.photos_bucket, path, photo.content, photo.content_type)
            except Exception as e:
                raise ServiceError(f"照片上传失败: {describe(e)}", title="提交失败") from e
            photo_url = self.storage.public_url(self.photos_bucket, path)

        payload = RegistrationCreate(
            competition_id=competition.id,
            full_name=form.full_name.strip(),
            gender=form.gender,
            birth_date=form.birth_date,
            id_number=form.id_number.strip(),
            organization=form.organization.strip(),
            function=form.function,
            contact_phone=form.phone.strip(),
            contact_email=form.email.strip(),
            photo_url=photo_url,
            status=RegistrationStatus.IN_PROCESS if draft else RegistrationStatus.SENT,
        )
        try:
            registration = await self.registration_repo.create(payload)
        except Exception as e:
            raise ServiceError(f"数据保存失败: {describe(e)}", title="提交失败") from e

        logger.info(f"[INTAKE] Registration {registration.id} stored as {payload.status.value}")
        return registration

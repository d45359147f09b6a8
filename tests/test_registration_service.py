"""Unit tests for RegistrationService: filtering, audit decisions and intake."""

import pytest

from core.domain.constants import MAX_REMARKS_LENGTH
from core.domain.errors import ServiceError, ValidationError
from core.domain.models import (
    AuditDecision,
    RegistrationFilter,
    RegistrationForm,
    RegistrationStatus,
    UploadFile,
)
from core.services.registration_service import RegistrationService, filter_registrations
from tests.conftest import (
    FakeCompetitionRepository,
    FakeNotificationRepository,
    FakeRegistrationRepository,
    make_registration,
)


def make_service(registration_repo, notification_repo, competition_repo, storage):
    return RegistrationService(
        registration_repo=registration_repo,
        notification_repo=notification_repo,
        competition_repo=competition_repo,
        storage=storage,
        photos_bucket="photos",
        max_photo_bytes=2 * 1024 * 1024,
    )


def valid_form(**overrides) -> RegistrationForm:
    data = {
        "full_name": "陈晨",
        "gender": "female",
        "birth_date": "2003-05-01",
        "id_number": "11010120030501002X",
        "organization": "浙江大学",
        "function": "运动员",
        "phone": "13800138000",
        "email": "chen@example.com",
    }
    data.update(overrides)
    return RegistrationForm(**data)


# === FILTER ===

def test_filter_text_matches_name_or_organization(registrations):
    result = filter_registrations(registrations, RegistrationFilter(text="清华"))
    assert [r.id for r in result] == ["r2"]

    result = filter_registrations(registrations, RegistrationFilter(text="张"))
    assert [r.id for r in result] == ["r1"]


def test_filter_all_sentinel_is_no_predicate(registrations):
    result = filter_registrations(registrations, RegistrationFilter(status="all", role="all"))
    assert len(result) == len(registrations)


def test_filter_predicates_are_conjunctive(registrations):
    flt = RegistrationFilter(status=RegistrationStatus.ACCEPTED.value, role="运动员")
    result = filter_registrations(registrations, flt)
    assert {r.id for r in result} == {"r1", "r2"}


def test_filter_text_is_case_insensitive(registrations):
    result = filter_registrations(registrations, RegistrationFilter(text="media"))
    assert [r.id for r in result] == ["r5"]


# === AUDIT ===

@pytest.mark.asyncio
async def test_reject_without_remarks_makes_no_request(registration_repo, notification_repo,
                                                       competition_repo, storage):
    service = make_service(registration_repo, notification_repo, competition_repo, storage)

    with pytest.raises(ValidationError) as exc:
        await service.audit("r4", AuditDecision.REJECT, "   ")

    assert exc.value.title == "驳回原因必填"
    assert registration_repo.calls == []
    assert notification_repo.sent == []


@pytest.mark.asyncio
async def test_reject_stores_reason_and_notifies(registration_repo, notification_repo,
                                                 competition_repo, storage):
    service = make_service(registration_repo, notification_repo, competition_repo, storage)

    updated = await service.audit("r4", AuditDecision.REJECT, "照片模糊")

    assert updated.status == RegistrationStatus.WRONG_DATA
    assert updated.remarks == "照片模糊"
    assert len(notification_repo.sent) == 1
    note = notification_repo.sent[0]
    assert note.registration_id == "r4"
    assert note.title == "报名资料需要修正"
    assert "照片模糊" in note.content


@pytest.mark.asyncio
async def test_accept_clears_remarks(notification_repo, competition_repo, storage):
    repo = FakeRegistrationRepository([
        make_registration("x1", "孙丽", status=RegistrationStatus.WRONG_DATA, remarks="证件号错误"),
    ])
    service = make_service(repo, notification_repo, competition_repo, storage)

    updated = await service.audit("x1", AuditDecision.ACCEPT, "ignored")

    assert updated.status == RegistrationStatus.ACCEPTED
    assert updated.remarks is None
    assert notification_repo.sent[0].title == "报名审核已通过"


@pytest.mark.asyncio
async def test_audit_unknown_registration_is_service_error(registration_repo, notification_repo,
                                                           competition_repo, storage):
    service = make_service(registration_repo, notification_repo, competition_repo, storage)

    with pytest.raises(ServiceError):
        await service.audit("missing", AuditDecision.ACCEPT)
    assert notification_repo.sent == []


@pytest.mark.asyncio
async def test_failed_notice_keeps_audit_decision(registration_repo, competition_repo, storage):
    service = make_service(registration_repo, FakeNotificationRepository(fail=True), competition_repo, storage)

    updated = await service.audit("r4", AuditDecision.ACCEPT)

    assert updated.status == RegistrationStatus.ACCEPTED
    assert registration_repo.rows["r4"].status == RegistrationStatus.ACCEPTED


@pytest.mark.asyncio
async def test_overlong_rejection_reason_is_refused(registration_repo, notification_repo,
                                                    competition_repo, storage):
    service = make_service(registration_repo, notification_repo, competition_repo, storage)

    with pytest.raises(ValidationError) as exc:
        await service.audit("r4", AuditDecision.REJECT, "x" * (MAX_REMARKS_LENGTH + 1))

    assert exc.value.field == "remarks"
    assert registration_repo.calls == []


# === INTAKE ===

@pytest.mark.asyncio
async def test_submit_sends_registration_with_photo(registration_repo, notification_repo,
                                                    competition_repo, storage):
    service = make_service(registration_repo, notification_repo, competition_repo, storage)
    photo = UploadFile(filename="me.PNG", content=b"\x89PNG....", content_type="image/png")

    reg = await service.submit(valid_form(), photo)

    assert reg.status == RegistrationStatus.SENT
    assert reg.competition_id == "comp-1"
    assert reg.photo_url.startswith("https://storage.test/photos/comp-1/")
    assert reg.photo_url.endswith(".png")
    assert len(storage.objects) == 1


@pytest.mark.asyncio
async def test_draft_is_saved_in_process(registration_repo, notification_repo, competition_repo, storage):
    service = make_service(registration_repo, notification_repo, competition_repo, storage)

    reg = await service.submit(valid_form(), draft=True)

    assert reg.status == RegistrationStatus.IN_PROCESS
    assert reg.photo_url is None


@pytest.mark.asyncio
async def test_invalid_form_is_rejected_before_any_request(registration_repo, notification_repo,
                                                           competition_repo, storage):
    service = make_service(registration_repo, notification_repo, competition_repo, storage)

    with pytest.raises(ValidationError) as exc:
        await service.submit(valid_form(id_number="12345"))

    assert exc.value.field == "id_number"
    assert competition_repo.calls == 0
    assert registration_repo.created == []


@pytest.mark.asyncio
async def test_oversized_photo_is_rejected(registration_repo, notification_repo, competition_repo, storage):
    service = make_service(registration_repo, notification_repo, competition_repo, storage)
    photo = UploadFile(filename="big.jpg", content=b"0" * (2 * 1024 * 1024 + 1))

    with pytest.raises(ValidationError) as exc:
        await service.submit(valid_form(), photo)

    assert exc.value.title == "文件过大"
    assert storage.objects == {}


@pytest.mark.asyncio
async def test_submit_without_competition_fails(registration_repo, notification_repo, storage):
    service = make_service(registration_repo, notification_repo, FakeCompetitionRepository(None), storage)

    with pytest.raises(ServiceError):
        await service.submit(valid_form())
    assert registration_repo.created == []

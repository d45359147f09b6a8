"""Unit tests for sport-entry shortlisting."""

from io import BytesIO

import pytest
from openpyxl import load_workbook

from core.domain.errors import ServiceError, ValidationError
from core.domain.models import SportEvent
from core.services.shortlist_service import ShortlistService, search, selected, toggle
from tests.conftest import FakeShortlistRepository, FakeSportEventRepository


@pytest.fixture
def event_repo():
    return FakeSportEventRepository([
        SportEvent(id="ev-1", event_name="男子公路赛", category="男子组"),
        SportEvent(id="ev-2", event_name="女子场地赛", category="女子组"),
    ])


def test_toggle_flips_membership_without_mutating():
    original = {"a"}
    added = toggle(original, "b")
    removed = toggle(added, "a")

    assert added == {"a", "b"}
    assert removed == {"b"}
    assert original == {"a"}


def test_toggle_twice_is_identity():
    assert toggle(toggle({"a"}, "b"), "b") == {"a"}


def test_search_and_selected_keep_long_list_order(registrations):
    assert [p.id for p in search(registrations, "大学")] == [p.id for p in registrations]
    assert [p.id for p in selected(registrations, {"r4", "r1"})] == ["r1", "r4"]


@pytest.mark.asyncio
async def test_long_list_is_accepted_athletes_only(registration_repo, event_repo):
    service = ShortlistService(registration_repo, event_repo, FakeShortlistRepository())

    long_list = await service.load_long_list()

    assert {p.id for p in long_list} == {"r1", "r2"}


@pytest.mark.asyncio
async def test_save_replaces_existing_entries(registration_repo, event_repo):
    shortlist_repo = FakeShortlistRepository()
    shortlist_repo.entries["ev-1"] = {"r1", "r2"}
    service = ShortlistService(registration_repo, event_repo, shortlist_repo)

    await service.save("ev-1", {"r2"})

    assert await service.load_shortlist("ev-1") == {"r2"}


@pytest.mark.asyncio
async def test_save_is_idempotent(registration_repo, event_repo):
    shortlist_repo = FakeShortlistRepository()
    service = ShortlistService(registration_repo, event_repo, shortlist_repo)

    await service.save("ev-1", {"r1", "r2"})
    await service.save("ev-1", {"r1", "r2"})

    assert await service.load_shortlist("ev-1") == {"r1", "r2"}


@pytest.mark.asyncio
async def test_empty_save_leaves_no_entries_and_skips_insert(registration_repo, event_repo):
    shortlist_repo = FakeShortlistRepository()
    shortlist_repo.entries["ev-1"] = {"r1"}
    service = ShortlistService(registration_repo, event_repo, shortlist_repo)

    await service.save("ev-1", set())

    assert await service.load_shortlist("ev-1") == set()
    assert shortlist_repo.calls == ["delete"]


@pytest.mark.asyncio
async def test_insert_failure_after_delete_reports_emptied_list(registration_repo, event_repo):
    shortlist_repo = FakeShortlistRepository(fail_insert=True)
    shortlist_repo.entries["ev-1"] = {"r1"}
    service = ShortlistService(registration_repo, event_repo, shortlist_repo)

    with pytest.raises(ServiceError) as exc:
        await service.save("ev-1", {"r2"})

    assert "原名单已清空" in exc.value.message
    assert await service.load_shortlist("ev-1") == set()


@pytest.mark.asyncio
async def test_other_events_are_untouched(registration_repo, event_repo):
    shortlist_repo = FakeShortlistRepository()
    shortlist_repo.entries["ev-2"] = {"r2"}
    service = ShortlistService(registration_repo, event_repo, shortlist_repo)

    await service.save("ev-1", {"r1"})

    assert await service.load_shortlist("ev-2") == {"r2"}


@pytest.mark.asyncio
async def test_export_uses_working_set(registration_repo, event_repo):
    service = ShortlistService(registration_repo, event_repo, FakeShortlistRepository())
    event = await service.get_event("ev-1")

    content = await service.export(event, {"r2", "r4"})

    ws = load_workbook(BytesIO(content)).active
    # r4 is not accepted, so only r2 is on the long list
    assert ws.max_row == 2
    assert ws.cell(row=2, column=2).value == "李娜"


@pytest.mark.asyncio
async def test_export_empty_selection_is_validation_error(registration_repo, event_repo):
    service = ShortlistService(registration_repo, event_repo, FakeShortlistRepository())
    event = await service.get_event("ev-1")

    with pytest.raises(ValidationError):
        await service.export(event, set())

"""Unit tests for badge categorisation, rendering and PDF export."""

import pytest

from core.services.accreditation_service import (
    ATHLETE,
    CATEGORIES,
    COACH_OFFICIAL,
    MEDIA,
    TECH_OFFICIAL,
    AccreditationService,
    categorize,
    filter_by_category,
    get_category,
    render,
)
from core.utils.qr_generator import badge_payload, generate_badge_qr


class FakePhotoFetcher:
    def __init__(self, photos=None):
        self.photos = photos or {}
        self.batches = []

    async def fetch_many(self, urls):
        urls = list(urls)
        self.batches.append(urls)
        return {u: self.photos[u] for u in urls if u in self.photos}


@pytest.mark.parametrize("role,expected", [
    ("运动员", ATHLETE),
    ("教练员", COACH_OFFICIAL),
    ("随队官员", COACH_OFFICIAL),
    ("队医", COACH_OFFICIAL),
    ("ITO", TECH_OFFICIAL),
    ("Media", MEDIA),
])
def test_categorize_known_roles(role, expected):
    assert categorize(role) == expected


@pytest.mark.parametrize("role", ["", None, "志愿者", "unknown"])
def test_categorize_is_total(role):
    assert categorize(role) in CATEGORIES
    assert categorize(role) == COACH_OFFICIAL


def test_get_category_falls_back_to_first():
    assert get_category("ITO") == TECH_OFFICIAL
    assert get_category("nope") == CATEGORIES[0]


def test_filter_by_category_is_strict(registrations):
    assert {p.id for p in filter_by_category(registrations, MEDIA)} == {"r5"}
    assert {p.id for p in filter_by_category(registrations, COACH_OFFICIAL)} == {"r3"}


def test_render_one_badge_per_person(registrations):
    badges = render(registrations)

    assert len(badges) == len(registrations)
    by_id = {b.registration_id: b for b in badges}
    assert by_id["r1"].role_code == "ATH"
    assert by_id["r3"].role_code == "OFF"
    assert by_id["r5"].color == MEDIA.color
    assert all(b.zone == "ALL" for b in badges)


def test_render_is_pure(registrations):
    assert render(registrations) == render(registrations)


def test_badge_qr_is_png():
    assert badge_payload("r1") == "GMS-ACC:r1"
    assert generate_badge_qr("r1").startswith(b"\x89PNG")


@pytest.mark.asyncio
async def test_badges_for_uses_accepted_people_only(registration_repo):
    service = AccreditationService(registration_repo)

    badges = await service.badges_for(ATHLETE)

    assert {b.registration_id for b in badges} == {"r1", "r2"}


@pytest.mark.asyncio
async def test_export_pdf_produces_pdf_bytes(registration_repo):
    fetcher = FakePhotoFetcher()
    service = AccreditationService(registration_repo, photo_fetcher=fetcher,
                                   competition_title="CUCC 2025", with_qr=True)
    badges = await service.badges_for(ATHLETE)
    badges[0] = badges[0].model_copy(update={"photo_url": "https://storage.test/p.jpg"})

    content = await service.export_pdf(badges)

    assert content.startswith(b"%PDF")
    assert len(fetcher.batches) == 1
    assert "https://storage.test/p.jpg" in fetcher.batches[0]


@pytest.mark.asyncio
async def test_export_pdf_spans_pages(registration_repo):
    service = AccreditationService(registration_repo, with_qr=False)
    badges = render(await service.load_accepted()) * 3

    content = await service.export_pdf(badges)

    assert content.startswith(b"%PDF")


@pytest.mark.asyncio
async def test_export_pdf_fetches_all_photos_in_one_batch(registration_repo):
    fetcher = FakePhotoFetcher({"https://storage.test/team.jpg": b"not-an-image"})
    service = AccreditationService(registration_repo, photo_fetcher=fetcher, with_qr=False)
    badges = [
        b.model_copy(update={"photo_url": "https://storage.test/team.jpg"})
        for b in await service.badges_for(ATHLETE)
    ]

    content = await service.export_pdf(badges)

    assert content.startswith(b"%PDF")
    assert len(fetcher.batches) == 1
    assert fetcher.batches[0] == ["https://storage.test/team.jpg"] * len(badges)

"""
Accreditation service - badge categories, previews and printable PDFs.
"""

import logging
from typing import Callable, List, Optional, Tuple

from core.domain.constants import (
    BADGE_ZONE_ALL,
    ROLE_ATHLETE,
    ROLE_COACH,
    ROLE_ITO,
    ROLE_MEDIA,
    ROLE_TEAM_DOCTOR,
    ROLE_TEAM_OFFICIAL,
)
from core.domain.errors import ServiceError, describe
from core.domain.models import Badge, BadgeCategory, Registration, RegistrationStatus
from core.interfaces.repositories import IRegistrationRepository
from core.utils.badge_pdf import render_badges_pdf

logger = logging.getLogger(__name__)


ATHLETE = BadgeCategory(id=ROLE_ATHLETE, label="运动员 (Athlete)", role_code="ATH", color="#2563eb")
COACH_OFFICIAL = BadgeCategory(id=ROLE_COACH, label="教练员 (Coach/Official)", role_code="OFF", color="#4f46e5")
TECH_OFFICIAL = BadgeCategory(id=ROLE_ITO, label="技术官员 (ITO/NTO)", role_code="ITO", color="#059669")
MEDIA = BadgeCategory(id=ROLE_MEDIA, label="媒体 (Media)", role_code="MED", color="#d97706")

CATEGORIES: List[BadgeCategory] = [ATHLETE, COACH_OFFICIAL, TECH_OFFICIAL, MEDIA]

DEFAULT_CATEGORY = COACH_OFFICIAL

# Ordered: the first predicate that accepts the role decides the category
CATEGORY_RULES: List[Tuple[BadgeCategory, Callable[[str], bool]]] = [
    (ATHLETE, lambda role: role == ROLE_ATHLETE),
    (COACH_OFFICIAL, lambda role: role in (ROLE_COACH, ROLE_TEAM_OFFICIAL, ROLE_TEAM_DOCTOR)),
    (TECH_OFFICIAL, lambda role: role == ROLE_ITO),
    (MEDIA, lambda role: role == ROLE_MEDIA),
]


def categorize(role: Optional[str]) -> BadgeCategory:
    """Map any role string to exactly one badge category"""
    value = role or ""
    for category, accepts in CATEGORY_RULES:
        if accepts(value):
            return category
    return DEFAULT_CATEGORY


def in_category(person: Registration, category: BadgeCategory) -> bool:
    """Strict membership: unmatched roles fall back on badges, not in lists"""
    for rule_category, accepts in CATEGORY_RULES:
        if rule_category.id == category.id:
            return accepts(person.function)
    return False


def get_category(category_id: Optional[str]) -> BadgeCategory:
    for category in CATEGORIES:
        if category.id == category_id:
            return category
    return CATEGORIES[0]


def filter_by_category(people: List[Registration], category: BadgeCategory) -> List[Registration]:
    return [p for p in people if in_category(p, category)]


def render(people: List[Registration]) -> List[Badge]:
    """One badge per person; pure function of the input list"""
    badges = []
    for person in people:
        category = categorize(person.function)
        badges.append(Badge(
            registration_id=person.id,
            full_name=person.full_name,
            organization=person.organization,
            function=person.function,
            photo_url=person.photo_url,
            role_code=category.role_code,
            color=category.color,
            zone=BADGE_ZONE_ALL,
        ))
    return badges


class AccreditationService:
    """Service for badge previews and exports"""

    def __init__(self, registration_repo: IRegistrationRepository, photo_fetcher=None,
                 competition_title: str = "", with_qr: bool = True):
        self.registration_repo = registration_repo
        self.photo_fetcher = photo_fetcher
        self.competition_title = competition_title
        self.with_qr = with_qr

    async def load_accepted(self) -> List[Registration]:
        try:
            return await self.registration_repo.list_by(status=RegistrationStatus.ACCEPTED)
        except Exception as e:
            logger.error(f"[ACCREDITATION] Fetch failed: {e}")
            raise ServiceError(describe(e), title="加载失败") from e

    async def badges_for(self, category: BadgeCategory) -> List[Badge]:
        people = await self.load_accepted()
        return render(filter_by_category(people, category))

    async def export_pdf(self, badges: List[Badge]) -> bytes:
        """Printable A4 sheet of badge cards"""
        photos = {}
        if self.photo_fetcher is not None:
            by_url = await self.photo_fetcher.fetch_many(b.photo_url for b in badges)
            photos = {b.registration_id: by_url[b.photo_url] for b in badges if b.photo_url in by_url}
        return render_badges_pdf(
            badges,
            title=self.competition_title,
            photos=photos,
            with_qr=self.with_qr,
        )

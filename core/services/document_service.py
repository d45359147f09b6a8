"""
Document service - publishing files with role-based visibility.
"""

import logging
import time
from typing import Dict, List, Optional

from core.domain.constants import (
    DOCUMENT_CATEGORIES,
    VIEWER_ROLE_ADMIN,
    VISIBILITY_PUBLIC,
)
from core.domain.errors import ServiceError, ValidationError, describe
from core.domain.models import DocumentCreate, DocumentItem, UploadFile
from core.interfaces.platform import IObjectStorage
from core.interfaces.repositories import ICompetitionRepository, IDocumentRepository

logger = logging.getLogger(__name__)


def toggle_role(selection: List[str], role: str) -> List[str]:
    """
    Apply one click on the role picker.

    Picking the public sentinel replaces everything else; picking any
    other role drops the sentinel and flips that role.
    """
    if role == VISIBILITY_PUBLIC:
        return [VISIBILITY_PUBLIC]
    current = [r for r in selection if r != VISIBILITY_PUBLIC]
    if role in current:
        return [r for r in current if r != role]
    return current + [role]


def is_visible(document: DocumentItem, viewer_role: str) -> bool:
    roles = document.visible_to_roles
    return (
        VISIBILITY_PUBLIC in roles
        or viewer_role in roles
        or viewer_role == VIEWER_ROLE_ADMIN
    )


def filter_documents(documents: List[DocumentItem], viewer_role: str,
                     text: str = "", category: str = VISIBILITY_PUBLIC) -> List[DocumentItem]:
    needle = text.strip().lower()
    result = []
    for doc in documents:
        if needle and needle not in doc.title.lower():
            continue
        if category and category != VISIBILITY_PUBLIC and doc.category != category:
            continue
        if not is_visible(doc, viewer_role):
            continue
        result.append(doc)
    return result


def category_counts(documents: List[DocumentItem]) -> Dict[str, int]:
    counts = {VISIBILITY_PUBLIC: len(documents)}
    for category in DOCUMENT_CATEGORIES:
        counts[category] = sum(1 for d in documents if d.category == category)
    return counts


class DocumentService:
    """Service for the document center"""

    def __init__(
        self,
        document_repo: IDocumentRepository,
        competition_repo: ICompetitionRepository,
        storage: IObjectStorage,
        bucket: str = "official-documents",
    ):
        self.document_repo = document_repo
        self.competition_repo = competition_repo
        self.storage = storage
        self.bucket = bucket

    async def list_all(self) -> List[DocumentItem]:
        try:
            return await self.document_repo.list_all()
        except Exception as e:
            logger.error(f"[DOCUMENTS] Fetch failed: {e}")
            raise ServiceError(describe(e), title="加载失败") from e

    async def list(self, viewer_role: str, text: str = "",
                   category: str = VISIBILITY_PUBLIC) -> List[DocumentItem]:
        return filter_documents(await self.list_all(), viewer_role, text, category)

    async def publish(
        self,
        file: Optional[UploadFile],
        title: str,
        category: str,
        visible_roles: List[str],
    ) -> DocumentItem:
        """
        Upload the file, then insert its metadata row.

        Any failure is reported once. An upload whose insert fails is left
        in the bucket.
        """
        if file is None or not file.content:
            raise ValidationError("请选择要上传的文件", title="文件发布失败", field="file")
        if not title.strip():
            raise ValidationError("请填写文件标题", title="文件发布失败", field="title")
        if category not in DOCUMENT_CATEGORIES:
            raise ValidationError("未知的文件类别", title="文件发布失败", field="category")

        try:
            competition = await self.competition_repo.get_active()
            if competition is None:
                raise ServiceError("No competition found", title="文件发布失败")

            suffix = f".{file.extension}" if file.extension else ""
            path = f"{competition.id}/{int(time.time() * 1000)}{suffix}"
            await self.storage.upload(self.bucket, path, file.content, file.content_type)
            public_url = self.storage.public_url(self.bucket, path)

            document = await self.document_repo.create(DocumentCreate(
                competition_id=competition.id,
                title=title.strip(),
                category=category,
                file_url=public_url,
                visible_to_roles=list(visible_roles),
            ))
        except ServiceError:
            raise
        except Exception as e:
            logger.error(f"[DOCUMENTS] Publish of '{title}' failed: {e}")
            raise ServiceError(describe(e), title="文件发布失败") from e

        logger.info(f"[DOCUMENTS] Published '{document.title}' to {visible_roles}")
        return document

"""
Import service - forwards registration archives to the batch-import function.
Archive contents are validated remotely, not here.
"""

import base64
import logging

from core.domain.constants import (
    IMPORT_ARCHIVE_SUFFIX,
    IMPORT_STATUS_ERROR,
    IMPORT_STATUS_SUCCESS,
)
from core.domain.errors import ValidationError, describe
from core.domain.models import ImportReport, LogLevel, UploadFile
from core.interfaces.platform import IRemoteFunctions

logger = logging.getLogger(__name__)


def summarize(report: ImportReport, results: list) -> ImportReport:
    """Count per-entry outcomes returned by the remote function"""
    statuses = [r.get("status") for r in results if isinstance(r, dict)]
    report.success_count = statuses.count(IMPORT_STATUS_SUCCESS)
    report.error_count = statuses.count(IMPORT_STATUS_ERROR)
    report.log(
        LogLevel.SUCCESS,
        f"导入结束。成功: {report.success_count}，失败: {report.error_count}",
    )
    report.ok = True
    return report


class ImportService:
    """Service for batch registration import"""

    def __init__(self, functions: IRemoteFunctions, function_name: str, competition_id: str = "default"):
        self.functions = functions
        self.function_name = function_name
        self.competition_id = competition_id

    def check_archive(self, archive: UploadFile) -> None:
        if not archive.filename.lower().endswith(IMPORT_ARCHIVE_SUFFIX):
            raise ValidationError("请上传 .zip 格式的文件", title="文件格式错误", field="archive")

    async def import_archive(self, archive: UploadFile) -> ImportReport:
        self.check_archive(archive)

        report = ImportReport()
        report.log(LogLevel.INFO, f"准备上传: {archive.filename}")
        report.log(LogLevel.INFO, "正在读取并转换文件...")
        encoded = base64.b64encode(archive.content).decode("ascii")

        report.log(LogLevel.INFO, "正在向服务器发送请求...")
        try:
            data = await self.functions.invoke(self.function_name, {
                "zipBase64": encoded,
                "competitionId": self.competition_id,
            })
        except Exception as e:
            logger.error(f"[IMPORT] {archive.filename} failed: {e}")
            report.log(LogLevel.ERROR, f"导入失败: {describe(e)}")
            return report

        results = data.get("results") or []
        summarize(report, results)
        logger.info(
            f"[IMPORT] {archive.filename}: {report.success_count} ok, {report.error_count} failed"
        )
        return report

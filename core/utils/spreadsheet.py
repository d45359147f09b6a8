"""
Styled Excel exports for the registry and the per-event entry lists.
"""

from datetime import date
from io import BytesIO
from typing import List, Optional, Sequence, Tuple

from openpyxl import Workbook
from openpyxl.styles import Alignment, Border, Font, PatternFill, Side
from openpyxl.utils import get_column_letter

from core.domain.models import Registration, RegistrationStatus, SportEvent

XLSX_MIME = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"

STATUS_DISPLAY = {
    RegistrationStatus.ACCEPTED: "已接受",
    RegistrationStatus.WRONG_DATA: "数据错误",
}
STATUS_DISPLAY_DEFAULT = "处理中"

# Font colour by displayed status value
STATUS_COLORS = {
    "已接受": "10B981",
    "数据错误": "EF4444",
}

REGISTRY_COLUMNS: List[Tuple[str, int]] = [
    ("姓名", 15),
    ("性别", 6),
    ("出生日期", 12),
    ("证件号码", 22),
    ("所属单位", 25),
    ("人员职能", 12),
    ("客户群组", 12),
    ("审核状态", 12),
    ("联系电话", 15),
    ("联系邮箱", 25),
    ("备注", 30),
]

ENTRY_COLUMNS: List[Tuple[str, int]] = [
    ("序号", 8),
    ("姓名", 15),
    ("所属单位", 30),
    ("项目名称", 25),
    ("组别", 15),
    ("确认状态", 12),
]


def status_display(status: RegistrationStatus) -> str:
    return STATUS_DISPLAY.get(status, STATUS_DISPLAY_DEFAULT)


def _write_sheet(
    title: str,
    columns: Sequence[Tuple[str, int]],
    rows: List[list],
    header_color: str,
    header_border: str,
    status_column: Optional[int] = None,
    center_first_column: bool = False,
    row_border_color: Optional[str] = None,
) -> bytes:
    wb = Workbook()
    ws = wb.active
    ws.title = title

    header_fill = PatternFill(start_color=header_color, end_color=header_color, fill_type="solid")
    header_font = Font(bold=True, color="FFFFFF", size=12)
    edge = Side(style=header_border, color="000000")

    for col, (name, width) in enumerate(columns, start=1):
        cell = ws.cell(row=1, column=col, value=name)
        cell.fill = header_fill
        cell.font = header_font
        cell.alignment = Alignment(horizontal="center", vertical="center")
        cell.border = Border(top=edge, bottom=edge)
        ws.column_dimensions[get_column_letter(col)].width = width

    row_border = Border(bottom=Side(style="thin", color=row_border_color)) if row_border_color else None

    for r, values in enumerate(rows, start=2):
        for c, value in enumerate(values, start=1):
            cell = ws.cell(row=r, column=c, value=value)
            horizontal = "center" if center_first_column and c == 1 else None
            cell.alignment = Alignment(vertical="center", horizontal=horizontal)
            color = STATUS_COLORS.get(value) if status_column == c else None
            cell.font = Font(size=10, color=color)
            if row_border is not None:
                cell.border = row_border

    buffer = BytesIO()
    wb.save(buffer)
    return buffer.getvalue()


def registrations_workbook(registrations: List[Registration]) -> bytes:
    rows = [
        [
            reg.full_name,
            reg.gender,
            reg.birth_date,
            reg.id_number,
            reg.organization,
            reg.function,
            reg.client_group or "未分配",
            status_display(reg.status),
            reg.contact_phone or "N/A",
            reg.contact_email or "N/A",
            reg.remarks or "",
        ]
        for reg in registrations
    ]
    # Status is the 8th column
    return _write_sheet(
        "报名表 (Registrations)", REGISTRY_COLUMNS, rows,
        header_color="2563EB", header_border="thin", status_column=8,
    )


def entry_list_workbook(event: SportEvent, people: List[Registration]) -> bytes:
    rows = [
        [idx, p.full_name, p.organization, event.event_name, event.category, "正选"]
        for idx, p in enumerate(people, start=1)
    ]
    return _write_sheet(
        "参赛确认名单", ENTRY_COLUMNS, rows,
        header_color="D97706", header_border="medium",
        center_first_column=True, row_border_color="E2E8F0",
    )


def export_filename(prefix: str, kind: str, today: date, extra: Optional[str] = None) -> str:
    """e.g. CUCC_Registration_Export_2025-10-01.xlsx"""
    parts: List[str] = [prefix, kind]
    if extra:
        parts.append(extra)
    parts.append(today.isoformat())
    return "_".join(parts) + ".xlsx"


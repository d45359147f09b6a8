"""Tests for the styled Excel exports."""

from datetime import date
from io import BytesIO

from openpyxl import load_workbook

from core.domain.models import RegistrationStatus, SportEvent
from core.utils.spreadsheet import (
    ENTRY_COLUMNS,
    REGISTRY_COLUMNS,
    entry_list_workbook,
    export_filename,
    registrations_workbook,
)
from tests.conftest import make_registration


def open_sheet(content: bytes):
    return load_workbook(BytesIO(content)).active


def test_registry_export_headers_and_status_colours():
    people = [
        make_registration("r1", "张伟", status=RegistrationStatus.ACCEPTED),
        make_registration("r2", "李娜", status=RegistrationStatus.WRONG_DATA, remarks="照片模糊"),
        make_registration("r3", "赵敏", status=RegistrationStatus.SENT),
    ]

    ws = open_sheet(registrations_workbook(people))

    assert [c.value for c in ws[1]] == [name for name, _ in REGISTRY_COLUMNS]
    assert ws.cell(row=1, column=1).fill.start_color.rgb.endswith("2563EB")
    assert ws.cell(row=1, column=1).font.bold
    assert ws.cell(row=2, column=8).value == "已接受"
    assert ws.cell(row=2, column=8).font.color.rgb.endswith("10B981")
    assert ws.cell(row=3, column=8).value == "数据错误"
    assert ws.cell(row=3, column=8).font.color.rgb.endswith("EF4444")
    assert ws.cell(row=4, column=8).value == "处理中"
    assert ws.cell(row=3, column=11).value == "照片模糊"
    assert ws.cell(row=2, column=7).value == "未分配"
    assert ws.cell(row=2, column=9).value == "N/A"
    assert ws.column_dimensions["D"].width == 22


def test_entry_list_export():
    event = SportEvent(id="ev-1", event_name="男子公路赛", category="男子组")
    people = [make_registration("r1", "张伟"), make_registration("r2", "李娜", organization="清华大学")]

    ws = open_sheet(entry_list_workbook(event, people))

    assert [c.value for c in ws[1]] == [name for name, _ in ENTRY_COLUMNS]
    assert ws.cell(row=1, column=1).fill.start_color.rgb.endswith("D97706")
    assert [c.value for c in ws[3]] == [2, "李娜", "清华大学", "男子公路赛", "男子组", "正选"]
    assert ws.max_row == 3


def test_export_filenames():
    today = date(2025, 10, 1)
    assert export_filename("CUCC", "Registration_Export", today) == "CUCC_Registration_Export_2025-10-01.xlsx"
    assert export_filename("CUCC", "Entry_List", today, "男子公路赛") == "CUCC_Entry_List_男子公路赛_2025-10-01.xlsx"

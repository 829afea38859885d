"""Export tests."""

import json
from io import BytesIO

from openpyxl import load_workbook

from gradetrack.schemas.exam import ExportFormat
from gradetrack.services.export import EXCEL_COLUMNS, export_exams, export_excel, export_json
from gradetrack.services.seed import SEED_EXAMS

from .conftest import make_exam


class TestJsonExport:
    def test_contains_collection_unmodified(self):
        payload = json.loads(export_json(SEED_EXAMS))
        assert payload == [e.model_dump(mode="json", by_alias=True) for e in SEED_EXAMS]

    def test_is_indented(self):
        assert export_json([make_exam()]).startswith(b'[\n  {\n    "id"')

    def test_empty_collection(self):
        assert json.loads(export_json([])) == []


class TestExcelExport:
    def test_header_and_rows(self):
        exams = [make_exam(id="a", title="Alpha"), make_exam(id="b", title="Beta", visible=False)]
        wb = load_workbook(BytesIO(export_excel(exams)))
        ws = wb.active

        assert ws.title == "Exams"
        assert [c.value for c in ws[1]] == [header for header, _, _ in EXCEL_COLUMNS]
        assert ws.max_row == 3
        assert ws.cell(row=2, column=1).value == "a"
        assert ws.cell(row=3, column=2).value == "Beta"
        assert ws.cell(row=3, column=11).value == "No"

    def test_dispatch_by_format(self):
        assert export_exams([make_exam()], ExportFormat.JSON) == export_json([make_exam()])
        assert export_exams([make_exam()], ExportFormat.XLSX)[:2] == b"PK"

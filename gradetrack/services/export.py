"""Exam collection export as JSON or Excel."""

from collections.abc import Sequence
from io import BytesIO

from openpyxl import Workbook
from openpyxl.styles import Alignment, Border, Font, PatternFill, Side
from openpyxl.utils import get_column_letter

from gradetrack.schemas.exam import Exam, ExportFormat
from gradetrack.services.persistence import serialize_exams

MEDIA_TYPES = {
    ExportFormat.JSON: "application/json",
    ExportFormat.XLSX: "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
}

# (header, attribute, column width)
EXCEL_COLUMNS = [
    ("ID", "id", 14),
    ("Title", "title", 38),
    ("Year", "year", 8),
    ("Course", "course", 18),
    ("Date Created", "date_created", 20),
    ("Date Due", "date_due", 20),
    ("Weight", "weight", 10),
    ("Max Points", "max_points", 12),
    ("Passing Threshold (%)", "passing_threshold", 20),
    ("Status", "status", 16),
    ("Visible", "visible", 10),
    ("Description", "description", 45),
]


def export_json(exams: Sequence[Exam]) -> bytes:
    """The collection as an indented JSON array, unmodified."""
    return serialize_exams(exams, indent=2).encode("utf-8")


def export_excel(exams: Sequence[Exam]) -> bytes:
    """The collection as a single-sheet workbook, one row per exam."""
    wb = Workbook()
    ws = wb.active
    ws.title = "Exams"

    header_font = Font(bold=True, color="FFFFFF")
    header_fill = PatternFill(start_color="4472C4", end_color="4472C4", fill_type="solid")
    thin_border = Border(
        left=Side(style='thin'),
        right=Side(style='thin'),
        top=Side(style='thin'),
        bottom=Side(style='thin')
    )
    center_align = Alignment(horizontal='center', vertical='center')

    for col_idx, (header, _, width) in enumerate(EXCEL_COLUMNS, start=1):
        cell = ws.cell(row=1, column=col_idx, value=header)
        cell.font = header_font
        cell.fill = header_fill
        cell.border = thin_border
        cell.alignment = center_align
        ws.column_dimensions[get_column_letter(col_idx)].width = width

    for row_idx, exam in enumerate(exams, start=2):
        for col_idx, (_, attribute, _) in enumerate(EXCEL_COLUMNS, start=1):
            value = getattr(exam, attribute)
            if isinstance(value, bool):
                value = "Yes" if value else "No"
            ws.cell(row=row_idx, column=col_idx, value=value).border = thin_border

    ws.freeze_panes = "A2"

    output = BytesIO()
    wb.save(output)
    output.seek(0)
    return output.getvalue()


def export_exams(exams: Sequence[Exam], fmt: ExportFormat) -> bytes:
    if fmt is ExportFormat.XLSX:
        return export_excel(exams)
    return export_json(exams)

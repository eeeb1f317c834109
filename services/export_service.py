# services/export_service.py
"""
Report export to PDF (reportlab) and spreadsheet (openpyxl).

Both formats carry the same content: a (label, value) table of the headline
metrics and a (month, amount) table of the six-month trend.
"""
from io import BytesIO
from typing import List, Tuple

from openpyxl import Workbook
from openpyxl.styles import Font
from reportlab.lib import colors
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import getSampleStyleSheet
from reportlab.platypus import Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle

from config import REPORT_CURRENCY
from services.metrics_service import MONTHS

PDF_MEDIA_TYPE = "application/pdf"
XLSX_MEDIA_TYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"


def report_filename(month: int, year: int, ext: str) -> str:
     """report-<Mon>-<year>.<ext>, e.g. report-Mar-2026.pdf"""
     return f"report-{MONTHS[month - 1]}-{year}.{ext}"


def _money(value: float) -> str:
     return f"{REPORT_CURRENCY} {value:,.2f}"


def summary_rows(report: dict) -> List[Tuple[str, str]]:
     return [
          ("Report Period", report["period_label"]),
          ("Total Collected", _money(report["total_collected"])),
          ("Expected Revenue", _money(report["expected_revenue"])),
          ("Outstanding Balance", _money(report["outstanding_balance"])),
          ("Collection Rate", f"{report['collection_rate']}%"),
     ]


def trend_rows(report: dict) -> List[Tuple[str, float]]:
     return [(point["label"], point["value"]) for point in report["monthly_trend"]]


def build_report_pdf(report: dict) -> bytes:
     buffer = BytesIO()
     styles = getSampleStyleSheet()
     table_style = TableStyle([
          ("BACKGROUND", (0, 0), (-1, 0), colors.HexColor("#2563eb")),
          ("TEXTCOLOR", (0, 0), (-1, 0), colors.white),
          ("GRID", (0, 0), (-1, -1), 0.5, colors.grey),
          ("ALIGN", (1, 1), (-1, -1), "RIGHT"),
     ])

     story = [
          Paragraph(f"<b>Payment Report - {report['period_label']}</b>", styles["Title"]),
          Spacer(1, 12),
     ]

     metrics_table = Table([["Metric", "Value"]] + [list(row) for row in summary_rows(report)[1:]])
     metrics_table.setStyle(table_style)
     story += [metrics_table, Spacer(1, 18)]

     trend_table = Table(
          [["Month", f"Revenue ({REPORT_CURRENCY})"]]
          + [[label, f"{value:,.2f}"] for label, value in trend_rows(report)]
     )
     trend_table.setStyle(table_style)
     story.append(trend_table)

     SimpleDocTemplate(buffer, pagesize=A4, title=f"Payment Report {report['period_label']}").build(story)
     return buffer.getvalue()


def build_report_xlsx(report: dict) -> bytes:
     workbook = Workbook()
     sheet = workbook.active
     sheet.title = "Report"

     for label, value in summary_rows(report):
          sheet.append([label, value])
     sheet.append([])
     sheet.append(["Month", f"Revenue ({REPORT_CURRENCY})"])
     sheet.cell(row=sheet.max_row, column=1).font = Font(bold=True)
     sheet.cell(row=sheet.max_row, column=2).font = Font(bold=True)
     for label, value in trend_rows(report):
          sheet.append([label, value])

     sheet.column_dimensions["A"].width = 22
     sheet.column_dimensions["B"].width = 22

     buffer = BytesIO()
     workbook.save(buffer)
     return buffer.getvalue()

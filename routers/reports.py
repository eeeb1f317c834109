# routers/reports.py
"""
Report API routes: the monthly report and its PDF / spreadsheet downloads.
"""
from typing import Optional

from fastapi import APIRouter, Depends, Query
from fastapi.responses import Response

from dependencies import get_record_store, verify_token
from models import User
from routers.payments import resolve_period
from schemas.report import ReportResponse
from services import export_service
from services.record_store import RecordStore
from services.report_service import build_report

router = APIRouter(prefix="/api/reports", tags=["reports"])


def _load_report(store: RecordStore, month: Optional[int], year: Optional[int]) -> dict:
     year, month = resolve_period(month, year)
     return build_report(store.list("payments"), store.list("units"), year, month)


def _attachment(content: bytes, media_type: str, filename: str) -> Response:
     return Response(
          content=content,
          media_type=media_type,
          headers={"Content-Disposition": f'attachment; filename="{filename}"'},
     )


@router.get("", response_model=ReportResponse, summary="Monthly payment report")
def get_report(
     month: Optional[int] = Query(None, ge=1, le=12),
     year: Optional[int] = Query(None, ge=2000, le=2100),
     store: RecordStore = Depends(get_record_store),
     user: User = Depends(verify_token),
):
     return _load_report(store, month, year)


@router.get("/export/pdf", summary="Download the monthly report as PDF")
def export_pdf(
     month: Optional[int] = Query(None, ge=1, le=12),
     year: Optional[int] = Query(None, ge=2000, le=2100),
     store: RecordStore = Depends(get_record_store),
     user: User = Depends(verify_token),
):
     report = _load_report(store, month, year)
     filename = export_service.report_filename(report["month"], report["year"], "pdf")
     return _attachment(export_service.build_report_pdf(report), export_service.PDF_MEDIA_TYPE, filename)


@router.get("/export/xlsx", summary="Download the monthly report as a spreadsheet")
def export_xlsx(
     month: Optional[int] = Query(None, ge=1, le=12),
     year: Optional[int] = Query(None, ge=2000, le=2100),
     store: RecordStore = Depends(get_record_store),
     user: User = Depends(verify_token),
):
     report = _load_report(store, month, year)
     filename = export_service.report_filename(report["month"], report["year"], "xlsx")
     return _attachment(export_service.build_report_xlsx(report), export_service.XLSX_MEDIA_TYPE, filename)

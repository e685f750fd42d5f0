# FILE: admission_reports/api/routes_reports.py
from __future__ import annotations

import logging

from fastapi import APIRouter
from fastapi.responses import HTMLResponse, Response

from admission_reports.api.response import NO_RECORDS, PDF_FAILED, UNKNOWN_REPORT, ok, report_error
from admission_reports.schemas.records import ReportRequest
from admission_reports.services.pdf import generate_pdf
from admission_reports.services.reports.registry import (
    ReportSpec,
    build_pdf_filename,
    get_report,
    list_reports,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/reports", tags=["Reports"])


def _report_or_404(report_type: str) -> ReportSpec:
    report = get_report(report_type)
    if not report:
        raise report_error(404, f"Unknown report type: {report_type}", UNKNOWN_REPORT)
    return report


def _render(report: ReportSpec, body: ReportRequest) -> str:
    return report.generator(body.patient, body.admission, body.hospital)


@router.get("")
def get_report_types():
    reports = list_reports()
    return ok(reports, meta={"count": len(reports)})


@router.post("/{report_type}/html", response_class=HTMLResponse)
def render_report_html(report_type: str, body: ReportRequest):
    report = _report_or_404(report_type)
    return HTMLResponse(content=_render(report, body))


@router.post("/{report_type}/pdf")
def render_report_pdf(report_type: str, body: ReportRequest):
    report = _report_or_404(report_type)

    if not report.has_data(body.admission):
        raise report_error(404, report.empty_message, NO_RECORDS)

    html = _render(report, body)
    try:
        pdf_bytes, engine = generate_pdf(html)
    except Exception as e:
        logger.exception("Failed to generate %s PDF", report.type)
        raise report_error(500, f"Failed to generate {report.label} PDF", PDF_FAILED, details=str(e))

    filename = build_pdf_filename(report, body.patient, body.admission)
    logger.info("Generated %s (%d bytes, %s)", filename, len(pdf_bytes), engine)
    return Response(
        content=pdf_bytes,
        media_type="application/pdf",
        headers={"Content-Disposition": f'inline; filename="{filename}"'},
    )

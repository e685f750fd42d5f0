# FILE: admission_reports/services/reports/registry.py
from __future__ import annotations

import re
from dataclasses import dataclass, field as dc_field
from datetime import date, datetime, timezone
from typing import Any, Callable, Dict, List, Optional, Tuple

from admission_reports.services.reports import (
    generate_2hr_followup_html,
    generate_4hr_followup_html,
    generate_combined_followup_html,
    generate_consulting_html,
    generate_diagnosis_html,
    generate_doctor_notes_html,
    generate_prescriptions_html,
    generate_symptoms_html,
    generate_vitals_graph_html,
    generate_vitals_html,
)
from admission_reports.services.reports.engine import _present, field, items

Generator = Callable[..., str]

# Content-Disposition headers are latin-1, so keep filenames plain ASCII
_UNSAFE_FILENAME = re.compile(r"[^A-Za-z0-9_.\-]+")


@dataclass(frozen=True)
class ReportSpec:
    type: str
    label: str
    generator: Generator
    file_prefix: str
    # PDF export needs at least one of these collections to be non-empty
    requires_any: Tuple[str, ...] = dc_field(default=())
    empty_message: str = ""

    def has_data(self, record: Any) -> bool:
        if not self.requires_any:
            return True
        return any(items(record, name) for name in self.requires_any)


REPORTS: Dict[str, ReportSpec] = {
    report.type: report
    for report in (
        ReportSpec("symptoms", "Symptoms Report", generate_symptoms_html, "Symptoms"),
        ReportSpec("vitals", "Vital Signs Report", generate_vitals_html, "Vitals"),
        ReportSpec("diagnosis", "Diagnosis Report", generate_diagnosis_html, "Diagnosis"),
        ReportSpec("prescriptions", "Prescriptions Report", generate_prescriptions_html, "Prescriptions"),
        ReportSpec("consulting", "Consulting Report", generate_consulting_html, "Consulting"),
        ReportSpec("doctor-notes", "Doctor Notes Report", generate_doctor_notes_html, "Doctor_Notes"),
        ReportSpec(
            "followup-2hr", "2-Hour Follow-Up Report", generate_2hr_followup_html, "2HR_FollowUp",
            requires_any=("followUps",),
            empty_message="No 2-hour follow-up records found for this admission",
        ),
        ReportSpec(
            "followup-4hr", "4-Hour Follow-Up Report", generate_4hr_followup_html, "4HR_FollowUp",
            requires_any=("fourHrFollowUpSchema",),
            empty_message="No 4-hour follow-up records found for this admission",
        ),
        ReportSpec(
            "followup-combined", "Complete Follow-Up Report", generate_combined_followup_html, "Combined_FollowUp",
            requires_any=("followUps", "fourHrFollowUpSchema"),
            empty_message="No follow-up records found for this admission",
        ),
        ReportSpec("vitals-graph", "Vital Signs Graph Report", generate_vitals_graph_html, "Vitals_Graph"),
    )
}


def get_report(report_type: str) -> Optional[ReportSpec]:
    return REPORTS.get((report_type or "").strip().lower())


def list_reports() -> List[Dict[str, Any]]:
    return [
        {"type": s.type, "label": s.label, "requires": list(s.requires_any)}
        for s in REPORTS.values()
    ]


def _safe(part: Any, default: str) -> str:
    if not _present(part):
        return default
    return _UNSAFE_FILENAME.sub("_", str(part)).strip("_") or default


def build_pdf_filename(report: ReportSpec, patient: Any, record: Any, on: Optional[date] = None) -> str:
    """<prefix>_<patient name>_<OPD or IPD number>_<YYYY-MM-DD>.pdf"""
    on = on or datetime.now(timezone.utc).date()
    name = field(patient, "name")
    number = field(record, "opdNumber")
    if not _present(number):
        number = field(record, "ipdNumber")
    parts = [
        report.file_prefix,
        _safe(name, "patient"),
        _safe(number, "NA"),
        on.isoformat(),
    ]
    return "_".join(parts) + ".pdf"

# FILE: admission_reports/services/reports/symptoms.py
from __future__ import annotations

from typing import Any, Optional

from admission_reports.core.config import HospitalConfig
from admission_reports.services.reports.engine import (
    NA,
    _h,
    _present,
    admission_rows,
    doctor_name,
    field,
    info_row,
    items,
    no_data,
    or_na,
    patient_rows,
    section_table,
    standard_report,
)
from admission_reports.services.reports.entries import parse_symptom_entry


def _css() -> str:
    return """
    .symptoms-table {
        width: 100%;
        border-collapse: collapse;
        border: 2px solid #000;
        margin-bottom: 20px;
        font-size: 11px;
    }
    .symptoms-table th {
        background-color: #28a745;
        color: white;
        padding: 10px;
        text-align: center;
        font-weight: bold;
        border: 1px solid #000;
        font-size: 12px;
    }
    .symptoms-table td {
        padding: 8px;
        border: 1px solid #000;
        text-align: left;
        font-size: 11px;
    }
    .symptom-text { font-weight: bold; color: #2c5aa0; }
    .symptom-date { color: #666; font-size: 10px; }
    .symptom-entry {
        margin-bottom: 8px;
        padding: 8px;
        background-color: #f9f9f9;
        border-left: 4px solid #28a745;
        border-radius: 3px;
    }
    """


def _doctor_symptom_rows(record: Any) -> str:
    entries = items(record, "symptomsByDoctor")
    if not entries:
        return no_data("No additional symptoms recorded by doctor", colspan=3)

    rows = ""
    for i, entry in enumerate(entries, start=1):
        symptom, date_time = parse_symptom_entry(entry)
        rows += f"""
            <tr>
                <td style="text-align: center;">{i}</td>
                <td class="symptom-text">{_h(symptom)}</td>
                <td class="symptom-date">{_h(date_time)}</td>
            </tr>
        """
    return rows


def _chief_complaints(record: Any) -> str:
    out = ""
    for c in items(record, "doctorConsulting"):
        complaint = field(c, "cheifComplaint", "chiefComplaint")
        if _present(complaint):
            out += f'<div class="symptom-entry"><strong>Chief Complaint:</strong> {_h(complaint)}</div>'
    return out or no_data("No chief complaints recorded")


def generate_symptoms_html(patient: Any, record: Any, hospital: Optional[HospitalConfig] = None) -> str:
    initial = field(record, "symptoms")
    initial_html = (
        f'<div class="symptom-entry">{_h(initial)}</div>'
        if _present(initial) else no_data("No initial symptoms recorded")
    )

    content = f"""
    {section_table("INITIAL SYMPTOMS AT ADMISSION", initial_html)}

    <table class="symptoms-table">
        <thead>
            <tr><th colspan="3">SYMPTOMS RECORDED BY DOCTOR</th></tr>
            <tr>
                <th style="width: 10%;">Sr. No.</th>
                <th style="width: 60%;">Symptom</th>
                <th style="width: 30%;">Date &amp; Time</th>
            </tr>
        </thead>
        <tbody>
            {_doctor_symptom_rows(record)}
        </tbody>
    </table>

    {section_table("CHIEF COMPLAINTS", _chief_complaints(record))}
    """

    rows = patient_rows(patient) + [
        info_row(("Address", or_na(field(patient, "address")))),
    ] + admission_rows(record) + [
        info_row(("Attending Doctor", doctor_name(record))),
    ]

    return standard_report(
        hospital=hospital,
        doc_title=f"Symptoms Report - {field(patient, 'name') or NA}",
        report_title="SYMPTOMS REPORT",
        info_rows=rows,
        content=content,
        extra_css=_css(),
    )

# FILE: admission_reports/services/reports/diagnosis.py
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
    multiline,
    no_data,
    or_na,
    patient_rows,
    section_table,
    standard_report,
)
from admission_reports.services.reports.entries import parse_diagnosis_entry

# (consultation field, heading) shown under MEDICAL HISTORY
_HISTORY_FIELDS = (
    ("historyOfPresentIllness", "History of Present Illness"),
    ("pastMedicalHistory", "Past Medical History"),
    ("familyHistory", "Family History"),
)


def _css() -> str:
    return """
    .diagnosis-table, .diagnosis-records-table {
        width: 100%;
        border-collapse: collapse;
        border: 2px solid #000;
        margin-bottom: 20px;
    }
    .diagnosis-table th {
        background-color: #dc3545;
        color: white;
        padding: 10px;
        text-align: center;
        font-weight: bold;
        border: 1px solid #000;
        font-size: 14px;
    }
    .diagnosis-table td {
        padding: 12px;
        border: 1px solid #000;
        vertical-align: top;
    }
    .diagnosis-records-table { font-size: 11px; }
    .diagnosis-records-table th {
        background-color: #6f42c1;
        color: white;
        padding: 10px;
        text-align: center;
        font-weight: bold;
        border: 1px solid #000;
        font-size: 12px;
    }
    .diagnosis-records-table td {
        padding: 8px;
        border: 1px solid #000;
        text-align: left;
    }
    .diagnosis-text { font-weight: bold; color: #6f42c1; }
    .diagnosis-date { color: #666; font-size: 10px; }
    .diagnosis-entry {
        margin-bottom: 8px;
        padding: 8px;
        background-color: #f9f9f9;
        border-left: 4px solid #dc3545;
        border-radius: 3px;
    }
    .initial-diagnosis {
        border-left-color: #2c5aa0;
        font-weight: bold;
    }
    """


def _doctor_diagnosis_rows(record: Any) -> str:
    entries = items(record, "diagnosisByDoctor")
    if not entries:
        return no_data("No additional diagnosis recorded by doctor", colspan=3)

    rows = ""
    for i, entry in enumerate(entries, start=1):
        diagnosis, date_time = parse_diagnosis_entry(entry)
        rows += f"""
            <tr>
                <td style="text-align: center;">{i}</td>
                <td class="diagnosis-text">{_h(diagnosis)}</td>
                <td class="diagnosis-date">{_h(date_time)}</td>
            </tr>
        """
    return rows


def _medical_history(record: Any) -> str:
    out = ""
    for c in items(record, "doctorConsulting"):
        for key, heading in _HISTORY_FIELDS:
            v = field(c, key)
            if _present(v):
                out += f'<div class="diagnosis-entry"><strong>{heading}:</strong><br>{multiline(v)}</div>'
    return out or no_data("No medical history recorded")


def generate_diagnosis_html(patient: Any, record: Any, hospital: Optional[HospitalConfig] = None) -> str:
    initial = field(record, "initialDiagnosis")
    initial_html = (
        f'<div class="diagnosis-entry initial-diagnosis">{_h(initial)}</div>'
        if _present(initial) else no_data("No initial diagnosis recorded")
    )

    discharge = field(record, "conditionAtDischarge")
    discharge_html = (
        f'<div class="diagnosis-entry"><strong>Status:</strong> {_h(discharge)}</div>'
        if _present(discharge) else no_data("Discharge condition not recorded")
    )

    content = f"""
    {section_table("INITIAL DIAGNOSIS AT ADMISSION", initial_html, css_class="diagnosis-table")}

    <table class="diagnosis-records-table">
        <thead>
            <tr><th colspan="3">DOCTOR'S DIAGNOSIS</th></tr>
            <tr>
                <th style="width: 10%;">Sr. No.</th>
                <th style="width: 65%;">Diagnosis</th>
                <th style="width: 25%;">Date &amp; Time</th>
            </tr>
        </thead>
        <tbody>
            {_doctor_diagnosis_rows(record)}
        </tbody>
    </table>

    {section_table("MEDICAL HISTORY", _medical_history(record), css_class="diagnosis-table")}
    {section_table("CONDITION AT DISCHARGE", discharge_html, css_class="diagnosis-table")}
    """

    rows = patient_rows(patient) + [
        info_row(("Address", or_na(field(patient, "address")))),
    ] + admission_rows(record) + [
        info_row(("Attending Doctor", doctor_name(record))),
    ]

    return standard_report(
        hospital=hospital,
        doc_title=f"Diagnosis Report - {field(patient, 'name') or NA}",
        report_title="DIAGNOSIS REPORT",
        info_rows=rows,
        content=content,
        extra_css=_css(),
    )

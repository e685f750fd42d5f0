# FILE: admission_reports/services/reports/vitals.py
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
    fmt_dt_or_na,
    info_row,
    items,
    no_data,
    or_na,
    patient_rows,
    standard_report,
)


def _css() -> str:
    return """
    .vitals-table {
        width: 100%;
        border-collapse: collapse;
        border: 2px solid #000;
        margin-bottom: 20px;
        font-size: 11px;
    }
    .vitals-table th {
        background-color: #f0f0f0;
        padding: 8px;
        text-align: center;
        font-weight: bold;
        border: 1px solid #000;
    }
    .vitals-table td {
        padding: 8px;
        border: 1px solid #000;
        text-align: center;
    }
    .vitals-table .section-row th {
        background-color: #2c5aa0;
        color: white;
        font-size: 14px;
        padding: 10px;
    }
    .vital-other {
        background-color: #f8f9fa;
        font-style: italic;
        text-align: left !important;
    }
    """


def weight_text(record: Any) -> str:
    w = field(record, "weight")
    return f"{_h(w)} kg" if _present(w) else NA


def _vital_rows(record: Any) -> str:
    vitals = items(record, "vitals")
    if not vitals:
        return no_data("No vital signs recorded", colspan=6)

    rows = ""
    for i, v in enumerate(vitals, start=1):
        rows += f"""
            <tr>
                <td>{i}</td>
                <td>{or_na(field(v, "temperature"), "-")}</td>
                <td>{or_na(field(v, "pulse"), "-")}</td>
                <td>{or_na(field(v, "bloodPressure"), "-")}</td>
                <td>{or_na(field(v, "bloodSugarLevel"), "-")}</td>
                <td>{fmt_dt_or_na(field(v, "recordedAt"))}</td>
            </tr>
        """
        other = field(v, "other")
        if _present(other):
            rows += f'<tr><td colspan="6" class="vital-other">Other: {_h(other)}</td></tr>'
    return rows


def generate_vitals_html(patient: Any, record: Any, hospital: Optional[HospitalConfig] = None) -> str:
    content = f"""
    <table class="vitals-table">
        <thead>
            <tr class="section-row"><th colspan="6">RECORDED VITAL SIGNS</th></tr>
            <tr>
                <th>Record #</th>
                <th>Temperature</th>
                <th>Pulse</th>
                <th>Blood Pressure</th>
                <th>Blood Sugar</th>
                <th>Recorded Date/Time</th>
            </tr>
        </thead>
        <tbody>
            {_vital_rows(record)}
        </tbody>
    </table>
    """

    rows = patient_rows(patient) + [
        info_row(("Weight", weight_text(record)), ("Attending Doctor", doctor_name(record))),
    ] + admission_rows(record)

    return standard_report(
        hospital=hospital,
        doc_title=f"Vital Signs Report - {field(patient, 'name') or NA}",
        report_title="VITAL SIGNS REPORT",
        info_rows=rows,
        content=content,
        extra_css=_css(),
    )

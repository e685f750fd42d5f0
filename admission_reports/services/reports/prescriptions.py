# FILE: admission_reports/services/reports/prescriptions.py
from __future__ import annotations

from typing import Any, List, Optional, Sequence, Tuple

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
    standard_report,
)
from admission_reports.services.reports.vitals import weight_text
from admission_reports.utils.timezone import fmt_date_ist

# (heading, width)
Columns = Sequence[Tuple[str, str]]


def _css() -> str:
    return """
    .prescription-table {
        width: 100%;
        border-collapse: collapse;
        border: 2px solid #000;
        margin-bottom: 20px;
        font-size: 11px;
    }
    .prescription-table th {
        background-color: #f0f0f0;
        padding: 8px;
        text-align: center;
        font-weight: bold;
        border: 1px solid #000;
    }
    .prescription-table th.section-header {
        background-color: #2c5aa0;
        color: white;
        font-size: 14px;
        padding: 10px;
    }
    .prescription-table td {
        padding: 8px;
        border: 1px solid #000;
        text-align: center;
        vertical-align: top;
    }
    .medicine-name {
        font-weight: bold;
        text-align: left !important;
        color: #2c5aa0;
    }
    """


def _table(title: str, columns: Columns, body: str) -> str:
    head = "".join(f'<th style="width: {w};">{_h(label)}</th>' for label, w in columns)
    return f"""
    <table class="prescription-table">
        <thead>
            <tr><th colspan="{len(columns)}" class="section-header">{_h(title)}</th></tr>
            <tr>{head}</tr>
        </thead>
        <tbody>
            {body}
        </tbody>
    </table>
    """


def _prescription_rows(record: Any) -> str:
    prescriptions = items(record, "doctorPrescriptions")
    if not prescriptions:
        return no_data("No prescriptions recorded", colspan=6)

    rows = ""
    for p in prescriptions:
        med = field(p, "medicine")
        name = field(med, "name")
        date = field(med, "date")
        rows += f"""
            <tr>
                <td class="medicine-name">{_h(name) if _present(name) else "Medicine name not specified"}</td>
                <td>{or_na(field(med, "morning"), "-")}</td>
                <td>{or_na(field(med, "afternoon"), "-")}</td>
                <td>{or_na(field(med, "night"), "-")}</td>
                <td>{_h(fmt_date_ist(date)) if _present(date) else NA}</td>
                <td>{or_na(field(med, "comment"), "-")}</td>
            </tr>
        """
    return rows


def _simple_rows(entries: List[Any], keys: Sequence[str]) -> str:
    rows = ""
    for e in entries:
        name_key, *rest = keys
        cells = "".join(f"<td>{or_na(field(e, k), '-')}</td>" for k in rest)
        rows += f'<tr><td class="medicine-name">{or_na(field(e, name_key), "-")}</td>{cells}</tr>'
    return rows


def generate_prescriptions_html(patient: Any, record: Any, hospital: Optional[HospitalConfig] = None) -> str:
    parts = [
        _table(
            "DOCTOR PRESCRIPTIONS",
            [("Medicine Name", "25%"), ("Morning", "15%"), ("Afternoon", "15%"),
             ("Night", "15%"), ("Prescribed Date", "15%"), ("Instructions", "15%")],
            _prescription_rows(record),
        )
    ]

    medications = items(record, "medications")
    if medications:
        parts.append(_table(
            "ADDITIONAL MEDICATIONS",
            [("Medication Name", "30%"), ("Dosage", "20%"), ("Type", "15%"),
             ("Date", "20%"), ("Time", "15%")],
            _simple_rows(medications, ("name", "dosage", "type", "date", "time")),
        ))

    iv_fluids = items(record, "ivFluids")
    if iv_fluids:
        parts.append(_table(
            "IV FLUIDS",
            [("Fluid Name", "30%"), ("Quantity", "20%"), ("Duration", "20%"),
             ("Date", "15%"), ("Time", "15%")],
            _simple_rows(iv_fluids, ("name", "quantity", "duration", "date", "time")),
        ))

    rows = patient_rows(patient) + [
        info_row(("Weight", weight_text(record)), ("Attending Doctor", doctor_name(record))),
    ] + admission_rows(record)

    return standard_report(
        hospital=hospital,
        doc_title=f"Prescriptions Report - {field(patient, 'name') or NA}",
        report_title="PRESCRIPTIONS REPORT",
        info_rows=rows,
        content="\n".join(parts),
        extra_css=_css(),
        footer_notes=[
            "<p><strong>&#9888; This prescription is for reference only. "
            "Please consult your healthcare provider for any modifications.</strong></p>"
        ],
    )

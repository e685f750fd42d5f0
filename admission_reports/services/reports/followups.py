# FILE: admission_reports/services/reports/followups.py
"""
Nursing follow-up reports (2-hour, 4-hour and both combined).

Unlike the other reports these print one record per page: every record
after the first carries an inline `page-break-before: always;` style, and
a shared compact patient table sits at the top of the document.
"""
from __future__ import annotations

import logging
from typing import Any, List, NamedTuple, Optional, Sequence, Tuple

from admission_reports.core.config import HospitalConfig
from admission_reports.services.reports.engine import (
    NA,
    _attr,
    _h,
    _present,
    field,
    items,
    multiline,
    no_data,
    or_na,
    render_document,
    resolve_hospital,
    shown,
)
from admission_reports.utils.timezone import fmt_date_ist, fmt_datetime_ist

logger = logging.getLogger(__name__)

PAGE_BREAK = "page-break-before: always;"
NOT_RECORDED = "Not recorded"
NOT_ASSIGNED = "Not assigned"

# (label, field)
Cell = Tuple[str, str]


class Row(NamedTuple):
    cells: Tuple[Cell, ...]
    optional: bool = False      # only rendered when its field is present
    highlight: bool = False     # first value cell highlighted


class Subsection(NamedTuple):
    title: str
    rows: Tuple[Row, ...]

    def keys(self) -> List[str]:
        return [key for row in self.rows for _, key in row.cells]


# -----------------------------
# Layouts
# -----------------------------
VITALS_2HR = Subsection("Vital Signs", (
    Row((("Temperature", "temperature"), ("Pulse", "pulse"))),
    Row((("Respiration Rate", "respirationRate"), ("Blood Pressure", "bloodPressure"))),
    Row((("Oxygen Saturation", "oxygenSaturation"), ("Blood Sugar Level", "bloodSugarLevel"))),
    Row((("Other Vitals", "otherVitals"),), optional=True),
))

INTAKE_OUTPUT_2HR = Subsection("Intake & Output Data", (
    Row((("IV Fluid", "ivFluid"), ("Urine", "urine"))),
    Row((("Nasogastric", "nasogastric"), ("Stool", "stool"))),
    Row((("RT Feed/Oral", "rtFeedOral"), ("RT Aspirate", "rtAspirate"))),
    Row((("Total Intake", "totalIntake"), ("Other Output", "otherOutput")), highlight=True),
    Row((("CVP", "cvp"),)),
))

VENTILATOR_2HR = Subsection("Ventilator Data", (
    Row((("Mode", "ventyMode"), ("Set Rate", "setRate"))),
    Row((("FiO2", "fiO2"), ("PIP", "pip"))),
    Row((("PEEP/CPAP", "peepCpap"), ("I:E Ratio", "ieRatio"))),
    Row((("Other", "otherVentilator"),), optional=True),
))

# combined report prints the 2-hour records in a shorter form
VITALS_2HR_COMPACT = Subsection("Vital Signs", VITALS_2HR.rows[:3])

INTAKE_OUTPUT_2HR_COMPACT = Subsection("Intake & Output", (
    Row((("IV Fluid", "ivFluid"), ("Urine", "urine"))),
    Row((("Nasogastric", "nasogastric"), ("Stool", "stool"))),
    Row((("Total Intake", "totalIntake"), ("RT Aspirate", "rtAspirate")), highlight=True),
))

VITALS_4HR = Subsection("4-Hour Vital Signs", (
    Row((("Pulse", "fourhrpulse"), ("Blood Pressure", "fourhrbloodPressure"))),
    Row((("Temperature", "fourhrTemperature"), ("Oxygen Saturation", "fourhroxygenSaturation"))),
    Row((("Blood Sugar Level", "fourhrbloodSugarLevel"), ("Other Vitals", "fourhrotherVitals"))),
))

FLUIDS_4HR = Subsection("Fluid Management", (
    Row((("IV Fluid (Input)", "fourhrivFluid"), ("Urine (Output)", "fourhrurine"))),
))

FULL_2HR = (VITALS_2HR, INTAKE_OUTPUT_2HR, VENTILATOR_2HR)
COMPACT_2HR = (VITALS_2HR_COMPACT, INTAKE_OUTPUT_2HR_COMPACT)
FULL_4HR = (VITALS_4HR, FLUIDS_4HR)


def followup_css() -> str:
    return """
    body {
        font-family: Arial, sans-serif;
        margin: 0;
        padding: 15px;
        line-height: 1.4;
        color: #333;
        font-size: 12px;
    }
    .banner { text-align: center; margin-bottom: 15px; }
    .banner img { max-width: 100%; height: auto; max-height: 80px; }
    .banner .hospital-name { font-weight: bold; font-size: 15px; }
    .main-title {
        text-align: center;
        color: #2c5aa0;
        margin-bottom: 15px;
        font-size: 20px;
        font-weight: bold;
    }

    .patient-table {
        width: 100%;
        border-collapse: collapse;
        margin-bottom: 20px;
        page-break-inside: avoid;
    }
    .patient-header {
        background-color: #060607;
        color: white;
        text-align: center;
        padding: 8px;
        font-size: 14px;
        font-weight: bold;
    }
    .patient-table td, .patient-table th {
        border: 1px solid #ddd;
        padding: 6px 8px;
        text-align: left;
        vertical-align: top;
    }

    .follow-up-record { margin-bottom: 20px; page-break-inside: avoid; }
    .section-header {
        display: flex;
        justify-content: space-between;
        align-items: center;
        background-color: #f8f9fa;
        padding: 10px 15px;
        border: 1px solid #ddd;
        margin-bottom: 10px;
        page-break-inside: avoid;
        page-break-after: avoid;
    }
    .section-header h2 { margin: 0; font-size: 16px; color: #2c5aa0; }
    .record-date { font-size: 11px; color: black; font-style: italic; }

    .data-table {
        width: 100%;
        border-collapse: collapse;
        margin-bottom: 15px;
        page-break-inside: avoid;
    }
    .data-table th, .data-table td {
        border: 1px solid #ddd;
        padding: 6px 8px;
        text-align: left;
        vertical-align: top;
    }
    .section-title {
        background-color: #e9ecef;
        font-weight: bold;
        text-align: center;
        color: #495057;
        font-size: 13px;
    }
    .data-table td:nth-child(odd) { width: 20%; background-color: #f8f9fa; }
    .data-table td:nth-child(even) { width: 30%; }
    .highlight {
        background-color: #fff3cd !important;
        font-weight: bold;
        color: #856404;
    }
    .no-data {
        text-align: center;
        font-style: italic;
        color: #666;
        padding: 20px;
    }

    @media print {
        body { font-size: 11px; }
    }
    @page {
        margin: 0.5in;
        size: A4;
    }
    """


def followup_patient_table(patient: Any, record: Any) -> str:
    admission_date = field(record, "admissionDate")
    doctor = field(field(record, "doctor"), "name")

    def cell(label: str, value: str) -> str:
        return f"<td><strong>{label}:</strong></td><td>{value}</td>"

    return f"""
    <table class="patient-table">
        <thead>
            <tr><th colspan="6" class="patient-header">Patient Information - {shown(field(patient, "patientId"))}</th></tr>
        </thead>
        <tbody>
            <tr>{cell("Name", shown(field(patient, "name")))}{cell("Age", shown(field(patient, "age")))}{cell("Gender", shown(field(patient, "gender")))}</tr>
            <tr>{cell("Contact", or_na(field(patient, "contact")))}{cell("DOB", or_na(field(patient, "dob")))}{cell("Address", or_na(field(patient, "address")))}</tr>
            <tr>{cell("OPD No", or_na(field(record, "opdNumber")))}{cell("IPD No", or_na(field(record, "ipdNumber")))}{cell("Status", or_na(field(record, "status")))}</tr>
            <tr>{cell("Admission", _h(fmt_date_ist(admission_date)) if _present(admission_date) else NA)}{cell("Section", or_na(field(field(record, "section"), "name")))}{cell("Bed", or_na(field(record, "bedNumber")))}</tr>
            <tr><td><strong>Doctor:</strong></td><td colspan="5">{or_na(doctor, NOT_ASSIGNED)}</td></tr>
        </tbody>
    </table>
    """


# -----------------------------
# Record rendering
# -----------------------------
def _subsection(entry: Any, sub: Subsection) -> str:
    if not any(_present(field(entry, key)) for key in sub.keys()):
        return ""

    body = ""
    for row in sub.rows:
        if row.optional and not any(_present(field(entry, key)) for _, key in row.cells):
            continue
        tds = ""
        for i, (label, key) in enumerate(row.cells):
            cls = ' class="highlight"' if row.highlight and i == 0 else ""
            span = ' colspan="3"' if len(row.cells) == 1 else ""
            tds += f"<td><strong>{_h(label)}:</strong></td><td{cls}{span}>{or_na(field(entry, key))}</td>"
        body += f"<tr>{tds}</tr>"

    return f"""
    <table class="data-table">
        <thead><tr><th colspan="4" class="section-title">{_h(sub.title)}</th></tr></thead>
        <tbody>{body}</tbody>
    </table>
    """


def _notes(entry: Any, title: str) -> str:
    rows = ""
    for label, key in (("Notes", "notes"), ("Observations", "observations")):
        v = field(entry, key)
        if _present(v):
            rows += f'<tr><td width="20%"><strong>{label}:</strong></td><td>{multiline(v)}</td></tr>'
    if not rows:
        return ""
    return f"""
    <table class="data-table">
        <thead><tr><th colspan="2" class="section-title">{_h(title)}</th></tr></thead>
        <tbody>{rows}</tbody>
    </table>
    """


def _record(
    entry: Any,
    heading: str,
    page_break: bool,
    subsections: Sequence[Subsection],
    notes_title: str,
) -> str:
    date = fmt_datetime_ist(field(entry, "date"), default=NOT_RECORDED)
    nurse = or_na(field(entry, "nurseName"), NOT_ASSIGNED)
    style = PAGE_BREAK if page_break else ""
    sections = "".join(_subsection(entry, s) for s in subsections)
    return f"""
    <div class="follow-up-record" style="{style}">
        <div class="section-header">
            <h2>{_h(heading)}</h2>
            <span class="record-date">{_h(date)} | Nurse: {nurse}</span>
        </div>
        {sections}
        {_notes(entry, notes_title)}
    </div>
    """


def _banner(hospital: HospitalConfig) -> str:
    if hospital.banner_url:
        inner = f'<img src="{_attr(hospital.banner_url)}" alt="Hospital Banner" />'
    elif hospital.name:
        inner = f'<div class="hospital-name">{_h(hospital.name)}</div>'
    else:
        inner = ""
    return f'<div class="banner">{inner}</div>'


def _document(title: str, patient: Any, record: Any, hospital: Optional[HospitalConfig], records: str) -> str:
    body = f"""
    {_banner(resolve_hospital(hospital))}
    <h1 class="main-title">{_h(title)}</h1>
    {followup_patient_table(patient, record)}
    {records}
    """
    return render_document(title=title, css=followup_css(), body=body)


# -----------------------------
# Public generators
# -----------------------------
def generate_2hr_followup_html(patient: Any, record: Any, hospital: Optional[HospitalConfig] = None) -> str:
    follow_ups = items(record, "followUps")
    records = "".join(
        _record(f, f"Follow-Up Record {i} - 2HR", i > 1, FULL_2HR, "Clinical Notes & Observations")
        for i, f in enumerate(follow_ups, start=1)
    ) or no_data("No 2-hour follow-up records found")
    return _document("2-Hour Follow-Up Report", patient, record, hospital, records)


def generate_4hr_followup_html(patient: Any, record: Any, hospital: Optional[HospitalConfig] = None) -> str:
    follow_ups = items(record, "fourHrFollowUpSchema")
    records = "".join(
        _record(f, f"4-Hour Follow-Up Record {i}", i > 1, FULL_4HR, "Clinical Notes & Observations")
        for i, f in enumerate(follow_ups, start=1)
    ) or no_data("No 4-hour follow-up records found")
    return _document("4-Hour Follow-Up Report", patient, record, hospital, records)


def generate_combined_followup_html(patient: Any, record: Any, hospital: Optional[HospitalConfig] = None) -> str:
    two_hour = items(record, "followUps")
    four_hour = items(record, "fourHrFollowUpSchema")

    parts: List[str] = []
    count = 0
    for i, f in enumerate(two_hour, start=1):
        parts.append(_record(f, f"2-Hour Follow-Up Record {i}", count > 0, COMPACT_2HR, "Notes & Observations"))
        count += 1
    for i, f in enumerate(four_hour, start=1):
        parts.append(_record(f, f"4-Hour Follow-Up Record {i}", count > 0, FULL_4HR, "Notes & Observations"))
        count += 1

    logger.debug("Combined follow-up report: %d two-hour, %d four-hour records", len(two_hour), len(four_hour))
    records = "".join(parts) or no_data("No follow-up records found")
    return _document("Complete Follow-Up Report", patient, record, hospital, records)

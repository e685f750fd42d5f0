# FILE: admission_reports/services/reports/consulting.py
from __future__ import annotations

from typing import Any, Optional, Sequence, Tuple

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
    or_na,
    patient_rows,
    standard_report,
)

# (label, consultation field names tried in order)
FieldGroup = Sequence[Tuple[str, Tuple[str, ...]]]

HISTORY_GROUP: FieldGroup = (
    ("Chief Complaint", ("cheifComplaint", "chiefComplaint")),
    ("Present Illness History", ("historyOfPresentIllness",)),
    ("Past Medical History", ("pastMedicalHistory",)),
    ("Family History", ("familyHistory",)),
    ("Personal Habits", ("personalHabits",)),
    ("Menstrual History", ("menstrualHistory",)),
    ("Immunization History", ("immunizationHistory",)),
)

EXAMINATION_GROUP: FieldGroup = (
    ("Pulse Rate", ("pulse",)),
    ("Blood Pressure", ("bloodPressure",)),
    ("Temperature", ("temperature",)),
    ("Oxygen Saturation", ("oxygenSaturation",)),
    ("Respiratory System", ("respiratorySystem",)),
    ("Cardiovascular System", ("cardiovascularSystem",)),
    ("Gastrointestinal System", ("gastrointestinalSystem",)),
    ("Genitourinary System", ("genitourinarySystem",)),
)

NEURO_GROUP: FieldGroup = (
    ("Neurological System", ("neurologicalSystem",)),
    ("Musculoskeletal System", ("musculoskeletalSystem",)),
    ("Endocrine System", ("endocrineSystem",)),
)

ASSESSMENT_GROUP: FieldGroup = (
    ("Known Allergies", ("allergies",)),
    ("Allergy Description", ("describeAllergies",)),
    ("Clinical Diagnosis", ("clinicalDiagnosis",)),
    ("Previous Investigations", ("relevantPreviousInvestigations",)),
)

PAIN_GROUP: FieldGroup = (
    ("Wong Baker Pain Scale", ("wongBaker",)),
    ("Visual Analogue Scale", ("visualAnalogue",)),
)


def _css() -> str:
    return """
    .consultation-container {
        margin-bottom: 20px;
        border: 2px solid #000;
        page-break-inside: avoid;
        break-inside: avoid;
        orphans: 3;
        widows: 3;
    }
    .consultation-header {
        background-color: #2c5aa0;
        color: white;
        font-weight: bold;
        padding: 8px 10px;
        text-align: center;
        font-size: 12px;
        text-transform: uppercase;
        page-break-after: avoid;
    }
    .section-grid {
        display: table;
        width: 100%;
        table-layout: fixed;
    }
    .section-row { display: table-row; }
    .section-column {
        display: table-cell;
        width: 50%;
        border-right: 1px solid #000;
        vertical-align: top;
    }
    .section-column:last-child { border-right: none; }
    .section-header {
        background-color: #e9ecef;
        font-weight: bold;
        padding: 6px 8px;
        text-align: center;
        font-size: 10px;
        border-bottom: 1px solid #000;
        text-transform: uppercase;
    }
    .field-table { width: 100%; border-collapse: collapse; }
    .field-row { border-bottom: 1px solid #ddd; page-break-inside: avoid; }
    .field-label {
        font-weight: bold;
        background-color: #f8f9fa;
        padding: 6px 8px;
        border-right: 1px solid #ddd;
        width: 40%;
        vertical-align: top;
        font-size: 10px;
    }
    .field-content {
        padding: 6px 8px;
        vertical-align: top;
        font-size: 10px;
        line-height: 1.4;
        word-wrap: break-word;
        width: 60%;
    }
    .full-width-section { border-top: 1px solid #000; margin-top: 8px; }
    .pain-assessment-table { width: 100%; border-collapse: collapse; }
    .pain-assessment-table .field-label { width: 20%; }
    .pain-assessment-table .field-content { width: 30%; }
    """


def _field_cells(consultation: Any, group: FieldGroup):
    for label, names in group:
        v = field(consultation, *names)
        if _present(v):
            yield (
                f'<td class="field-label">{_h(label)}</td>'
                f'<td class="field-content">{multiline(v)}</td>'
            )


def _column(title: str, consultation: Any, group: FieldGroup) -> str:
    rows = "".join(f'<tr class="field-row">{cells}</tr>' for cells in _field_cells(consultation, group))
    return f"""
        <div class="section-column">
            <div class="section-header">{_h(title)}</div>
            <table class="field-table">{rows}</table>
        </div>
    """


def _grid(consultation: Any, left: Tuple[str, FieldGroup], right: Tuple[str, FieldGroup]) -> str:
    return f"""
    <div class="section-grid">
        <div class="section-row">
            {_column(left[0], consultation, left[1])}
            {_column(right[0], consultation, right[1])}
        </div>
    </div>
    """


def _pain_section(consultation: Any) -> str:
    cells = "".join(_field_cells(consultation, PAIN_GROUP))
    if not cells:
        return ""
    return f"""
    <div class="full-width-section">
        <div class="section-header">PAIN ASSESSMENT</div>
        <table class="pain-assessment-table"><tr class="field-row">{cells}</tr></table>
    </div>
    """


def consultation_block(index: int, consultation: Any) -> str:
    date = field(consultation, "date")
    heading = f"CONSULTATION RECORD #{index} - {date if _present(date) else 'Date not recorded'}"
    return f"""
    <div class="consultation-container">
        <div class="consultation-header">{_h(heading)}</div>
        {_grid(consultation, ("PATIENT HISTORY & SYMPTOMS", HISTORY_GROUP),
               ("VITAL SIGNS & EXAMINATION", EXAMINATION_GROUP))}
        {_grid(consultation, ("NEUROLOGICAL & MUSCULOSKELETAL", NEURO_GROUP),
               ("ALLERGIES & CLINICAL ASSESSMENT", ASSESSMENT_GROUP))}
        {_pain_section(consultation)}
    </div>
    """


def generate_consulting_html(patient: Any, record: Any, hospital: Optional[HospitalConfig] = None) -> str:
    consultations = items(record, "doctorConsulting")
    if consultations:
        blocks = "".join(consultation_block(i, c) for i, c in enumerate(consultations, start=1))
    else:
        blocks = """
        <div class="consultation-container">
            <div class="consultation-header">CONSULTATION RECORDS</div>
            <div class="no-data">
                <strong>No consultation records found</strong><br>
                <small>No consultation data has been recorded for this patient's admission.</small>
            </div>
        </div>
        """

    rows = patient_rows(patient) + [
        info_row(("Date of Birth", or_na(field(patient, "dob"))), ("Attending Doctor", doctor_name(record))),
    ] + admission_rows(record)

    return standard_report(
        hospital=hospital,
        doc_title=f"Consulting Report - {field(patient, 'name') or NA}",
        report_title="CONSULTING REPORT",
        info_rows=rows,
        content=f'<div class="content-section">{blocks}</div>',
        extra_css=_css(),
    )

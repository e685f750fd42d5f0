# FILE: admission_reports/services/reports/doctor_notes.py
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


def _css() -> str:
    return """
    .notes-table td { font-size: 11px; }
    .note-entry {
        margin-bottom: 15px;
        padding: 10px;
        background-color: #f9f9f9;
        border-left: 4px solid #6f42c1;
        border-radius: 3px;
    }
    .note-header {
        font-weight: bold;
        color: #2c5aa0;
        margin-bottom: 5px;
        display: flex;
        justify-content: space-between;
    }
    .note-datetime {
        font-size: 10px;
        color: #666;
        background: #e9ecef;
        padding: 2px 6px;
        border-radius: 8px;
    }
    .procedure-entry {
        background-color: #e8f5e8;
        border-left-color: #28a745;
    }
    .instruction-entry {
        background-color: #fff3cd;
        border-left-color: #ffc107;
    }
    """


def _when(entry: Any, missing: str) -> str:
    date = field(entry, "date")
    time = field(entry, "time")
    out = _h(date) if _present(date) else missing
    if _present(time):
        out += f" at {_h(time)}"
    return out


def _entry(title: str, when: str, body: str, css_class: str = "") -> str:
    cls = f"note-entry {css_class}".strip()
    return f"""
    <div class="{cls}">
        <div class="note-header">
            <span>{title}</span>
            <span class="note-datetime">{when}</span>
        </div>
        {body}
    </div>
    """


def _clinical_notes(record: Any) -> str:
    notes = items(record, "doctorNotes")
    if not notes:
        return no_data("No doctor notes recorded")
    out = ""
    for note in notes:
        text = field(note, "text")
        out += _entry(
            f"Dr. {or_na(field(note, 'doctorName'), 'Doctor')}",
            _when(note, "Date not recorded"),
            f"<div>{multiline(text) if _present(text) else 'No note content'}</div>",
        )
    return out


def _admission_notes(record: Any) -> str:
    notes = field(record, "admitNotes")
    if not _present(notes):
        return no_data("No admission notes recorded")
    return f'<div class="note-entry">{multiline(notes)}</div>'


def _procedures(record: Any) -> str:
    procedures = items(record, "procedures")
    if not procedures:
        return no_data("No procedures recorded")
    out = ""
    for p in procedures:
        frequency = field(p, "frequency")
        body = f"<div><strong>Frequency:</strong> {_h(frequency)}</div>" if _present(frequency) else ""
        out += _entry(
            f"<strong>{or_na(field(p, 'name'), 'Procedure')}</strong>",
            _when(p, "Date not specified"),
            body,
            "procedure-entry",
        )
    return out


def _special_instructions(record: Any) -> str:
    instructions = items(record, "specialInstructions")
    if not instructions:
        return no_data("No special instructions recorded")
    out = ""
    for i, ins in enumerate(instructions, start=1):
        out += _entry(
            f"Special Instruction #{i}",
            _when(ins, "Date not specified"),
            f"<div>{or_na(field(ins, 'instruction'))}</div>",
            "instruction-entry",
        )
    return out


def generate_doctor_notes_html(patient: Any, record: Any, hospital: Optional[HospitalConfig] = None) -> str:
    content = "".join([
        section_table("DOCTOR'S CLINICAL NOTES", _clinical_notes(record), css_class="content-table notes-table"),
        section_table("ADMISSION NOTES", _admission_notes(record), css_class="content-table notes-table"),
        section_table("PROCEDURES PERFORMED", _procedures(record), css_class="content-table notes-table"),
        section_table("SPECIAL INSTRUCTIONS", _special_instructions(record), css_class="content-table notes-table"),
    ])

    rows = patient_rows(patient) + [
        info_row(("Section", or_na(field(field(record, "section"), "name"))),
                 ("Attending Doctor", doctor_name(record))),
    ] + admission_rows(record)

    return standard_report(
        hospital=hospital,
        doc_title=f"Doctor Notes Report - {field(patient, 'name') or NA}",
        report_title="DOCTOR NOTES REPORT",
        info_rows=rows,
        content=content,
        extra_css=_css(),
    )

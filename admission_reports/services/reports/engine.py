# FILE: admission_reports/services/reports/engine.py
from __future__ import annotations

import html as _html
import logging
import re
from collections.abc import Mapping
from typing import Any, Iterable, List, Optional, Sequence, Tuple

from admission_reports.core.config import HospitalConfig, get_hospital_config
from admission_reports.utils.timezone import fmt_datetime_ist, today_ist, DATE_FMT

logger = logging.getLogger(__name__)

NA = "N/A"

_CAMEL_RE = re.compile(r"(?<!^)(?=[A-Z])")


# -----------------------------
# Field access (dicts from the data layer OR attribute objects)
# -----------------------------
def _snake(name: str) -> str:
    return _CAMEL_RE.sub("_", name).lower()


def field(obj: Any, *names: str, default: Any = None) -> Any:
    """
    First non-None value among `names`.
    Each name is tried as given (camelCase key) and then in snake_case.
    """
    if obj is None:
        return default
    for name in names:
        for key in (name, _snake(name)):
            if isinstance(obj, Mapping):
                v = obj.get(key)
            else:
                v = getattr(obj, key, None)
            if v is not None:
                return v
    return default


def items(obj: Any, *names: str) -> list:
    v = field(obj, *names)
    if not v or isinstance(v, (str, bytes, Mapping)):
        return []
    try:
        return list(v)
    except TypeError:
        return []


def resolve_hospital(hospital: Optional[HospitalConfig]) -> HospitalConfig:
    return hospital if hospital is not None else get_hospital_config()


# -----------------------------
# Text helpers
# -----------------------------
def _h(x: Any) -> str:
    s = "" if x is None else str(x)
    return _html.escape(s, quote=False)


def _attr(x: Any) -> str:
    s = "" if x is None else str(x)
    return _html.escape(s, quote=True)


def _present(v: Any) -> bool:
    if v is None or v is False:
        return False
    if isinstance(v, (int, float)):
        return v == v and v != 0
    return bool(str(v).strip())


def shown(v: Any) -> str:
    """Escaped value; only None / blank count as missing (0 is a real age)."""
    return NA if v is None or not str(v).strip() else _h(v)


def or_na(v: Any, placeholder: str = NA) -> str:
    """Escaped value, or `placeholder` for missing / empty / zero."""
    return _h(v) if _present(v) else placeholder


def multiline(v: Any) -> str:
    return _h(v).replace("\n", "<br>")


def fmt_dt_or_na(v: Any) -> str:
    return _h(fmt_datetime_ist(v)) if _present(v) else NA


# -----------------------------
# Shared CSS (standard A4 report shell)
# -----------------------------
def base_css() -> str:
    return """
    * { margin: 0; padding: 0; box-sizing: border-box; }

    body {
        font-family: Arial, sans-serif;
        font-size: 12px;
        line-height: 1.4;
        color: #000;
    }

    .container {
        max-width: 210mm;
        margin: 0 auto;
        padding: 15mm;
        min-height: 297mm;
    }

    .header {
        text-align: center;
        margin-bottom: 15px;
        page-break-after: avoid;
        border-bottom: 2px solid #000;
        padding-bottom: 10px;
    }
    .hospital-banner {
        width: 100%;
        max-height: 80px;
        object-fit: contain;
        margin-bottom: 8px;
    }
    .hospital-name {
        font-weight: bold;
        font-size: 15px;
        margin-bottom: 4px;
    }
    .hospital-info {
        font-size: 11px;
        margin-bottom: 5px;
    }
    .report-title {
        font-weight: bold;
        font-size: 18px;
        margin-bottom: 10px;
        color: #2c5aa0;
    }

    .patient-info-table {
        width: 100%;
        border-collapse: collapse;
        margin-bottom: 15px;
        font-size: 11px;
        border: 2px solid #000;
    }
    .patient-info-table th {
        background-color: #f0f0f0;
        padding: 8px;
        text-align: left;
        font-weight: bold;
        border: 1px solid #000;
        width: 25%;
    }
    .patient-info-table td {
        padding: 8px;
        border: 1px solid #000;
        width: 25%;
    }

    .content-table {
        width: 100%;
        border-collapse: collapse;
        border: 2px solid #000;
        margin-bottom: 20px;
    }
    .content-table th {
        background-color: #2c5aa0;
        color: white;
        padding: 10px;
        text-align: center;
        font-weight: bold;
        border: 1px solid #000;
        font-size: 14px;
    }
    .content-table td {
        padding: 12px;
        border: 1px solid #000;
        vertical-align: top;
        font-size: 12px;
    }

    .no-data {
        text-align: center;
        font-style: italic;
        color: #666;
        padding: 20px;
    }

    .footer {
        margin-top: 20px;
        text-align: center;
        font-size: 10px;
        border-top: 1px solid #000;
        padding-top: 5px;
    }

    @media print {
        .container {
            padding: 10mm;
            max-width: none;
        }
    }
    @page {
        margin: 15mm 10mm;
        size: A4;
    }
    """


# -----------------------------
# Building blocks
# -----------------------------
def brand_header_html(hospital: HospitalConfig, report_title: str, *, date_label: str = "Date") -> str:
    lines: List[str] = []
    if hospital.banner_url:
        lines.append(
            f'<img src="{_attr(hospital.banner_url)}" alt="Hospital Banner" '
            f'class="hospital-banner" onerror="this.style.display=\'none\'">'
        )
    if hospital.name:
        lines.append(f'<div class="hospital-name">{_h(hospital.name)}</div>')
    if hospital.address:
        lines.append(f'<div class="hospital-info">{_h(hospital.address)}</div>')
    if hospital.phone:
        lines.append(f'<div class="hospital-info">{_h(hospital.phone)}</div>')
    lines.append(f'<div class="hospital-info">{_h(date_label)}: {today_ist().strftime(DATE_FMT)}</div>')
    lines.append(f'<div class="report-title">{_h(report_title)}</div>')
    return '<div class="header">' + "\n".join(lines) + "</div>"


InfoCell = Tuple[str, str]


def info_row(*cells: InfoCell) -> str:
    """
    One patient-info row. Values are already-escaped HTML.
    A single cell spans the remaining three columns.
    """
    if len(cells) == 1:
        label, value = cells[0]
        return f"<tr><th>{_h(label)}</th><td colspan=\"3\">{value}</td></tr>"
    return "<tr>" + "".join(f"<th>{_h(label)}</th><td>{value}</td>" for label, value in cells) + "</tr>"


def patient_rows(patient: Any) -> List[str]:
    age = field(patient, "age")
    gender = field(patient, "gender")
    return [
        info_row(("Patient ID", shown(field(patient, "patientId"))),
                 ("Patient Name", shown(field(patient, "name")))),
        info_row(("Age/Gender", f"{shown(age)} Years / {shown(gender)}"),
                 ("Contact", or_na(field(patient, "contact")))),
    ]


def admission_rows(record: Any) -> List[str]:
    return [
        info_row(("OPD Number", or_na(field(record, "opdNumber"))),
                 ("IPD Number", or_na(field(record, "ipdNumber")))),
        info_row(("Admission Date", fmt_dt_or_na(field(record, "admissionDate"))),
                 ("Discharge Date", fmt_dt_or_na(field(record, "dischargeDate")))),
    ]


def doctor_name(record: Any) -> str:
    return or_na(field(field(record, "doctor"), "name"))


def patient_info_table(rows: Iterable[str]) -> str:
    return '<table class="patient-info-table">' + "".join(rows) + "</table>"


def section_table(title: str, body: str, *, css_class: str = "content-table") -> str:
    """Single-column titled table wrapping one block of content."""
    return f"""
    <table class="{css_class}">
        <thead><tr><th>{_h(title)}</th></tr></thead>
        <tbody><tr><td>{body}</td></tr></tbody>
    </table>
    """


def no_data(message: str, *, colspan: Optional[int] = None) -> str:
    if colspan:
        return f'<tr><td colspan="{colspan}" class="no-data">{_h(message)}</td></tr>'
    return f'<div class="no-data">{_h(message)}</div>'


def footer_html(notes: Sequence[str] = ()) -> str:
    parts = [
        f"<p>Report generated on {today_ist().strftime(DATE_FMT)} | This is a computer-generated document</p>"
    ]
    parts.extend(notes or ["<p><strong>Confidential Medical Record - For Healthcare Professionals Only</strong></p>"])
    return '<div class="footer">' + "".join(parts) + "</div>"


def render_document(*, title: str, css: str, body: str, head_extra: str = "", scripts: str = "") -> str:
    return f"""<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>{_h(title)}</title>
    {head_extra}
    <style>
    {css}
    </style>
</head>
<body>
{body}
{scripts}
</body>
</html>
"""


def standard_report(
    *,
    hospital: Optional[HospitalConfig],
    doc_title: str,
    report_title: str,
    info_rows: Iterable[str],
    content: str,
    extra_css: str = "",
    footer_notes: Sequence[str] = (),
    date_label: str = "Date",
    head_extra: str = "",
    scripts: str = "",
) -> str:
    """Header + patient info + content + footer inside the A4 container."""
    branding = resolve_hospital(hospital)
    body = f"""
<div class="container">
    {brand_header_html(branding, report_title, date_label=date_label)}
    {patient_info_table(info_rows)}
    {content}
    {footer_html(footer_notes)}
</div>
"""
    return render_document(
        title=doc_title,
        css=base_css() + extra_css,
        body=body,
        head_extra=head_extra,
        scripts=scripts,
    )

# FILE: admission_reports/services/reports/vitals_graph.py
"""
Vital signs trend report.

Readings are reduced to numeric series in Python (stats, range flags);
the charts themselves are drawn client-side by Chart.js from an inline
JSON configuration, so nothing is rendered server-side.
"""
from __future__ import annotations

import json
import logging
import math
import re
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Dict, List, Optional, Sequence, Union

from admission_reports.core.config import HospitalConfig, settings
from admission_reports.services.reports.engine import (
    NA,
    _attr,
    _h,
    _present,
    admission_rows,
    doctor_name,
    field,
    info_row,
    items,
    or_na,
    patient_rows,
    standard_report,
)
from admission_reports.utils.timezone import fmt_date_ist, fmt_time_ist

logger = logging.getLogger(__name__)

_LEADING_NUMBER = re.compile(r"^\s*[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")

# reference ranges used for the raw-data flags
TEMPERATURE_RANGE = (97.0, 99.0)
PULSE_RANGE = (60.0, 100.0)
SYSTOLIC_MAX = 120.0
SUGAR_RANGE = (70.0, 140.0)

Number = Optional[float]


def parse_number(value: Any) -> Number:
    """
    Leading-number parse ("98.6 F" -> 98.6).
    Zero, non-numeric and absent values give None.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        n = float(value)
    else:
        m = _LEADING_NUMBER.match(str(value))
        if not m:
            return None
        n = float(m.group(0))
    if math.isnan(n) or math.isinf(n) or n == 0:
        return None
    return n


def _split_bp(value: Any) -> tuple:
    if not _present(value):
        return None, None
    parts = str(value).split("/")
    systolic = parse_number(parts[0])
    diastolic = parse_number(parts[1]) if len(parts) > 1 else None
    return systolic, diastolic


def fmt_number(v: Union[float, str, None]) -> str:
    """Whole numbers print without a decimal point."""
    if v is None:
        return NA
    if isinstance(v, str):
        return v
    if float(v).is_integer():
        return str(int(v))
    return repr(float(v))


@dataclass
class SeriesStats:
    min: Union[float, str] = NA
    avg: Union[float, str] = NA
    max: Union[float, str] = NA

    @property
    def avg_text(self) -> str:
        return self.avg if isinstance(self.avg, str) else f"{self.avg:.1f}"


def round_half_up(value: float, places: int = 1) -> float:
    """Halves round away from zero, as the charts' toFixed() does (99.25 -> 99.3)."""
    step = Decimal(1).scaleb(-places)
    return float(Decimal(value).quantize(step, rounding=ROUND_HALF_UP))


def compute_series_stats(values: Sequence[Number]) -> SeriesStats:
    valid = [v for v in values if v is not None and not math.isnan(v)]
    if not valid:
        return SeriesStats()
    return SeriesStats(
        min=min(valid),
        avg=round_half_up(sum(valid) / len(valid)),
        max=max(valid),
    )


@dataclass
class VitalPoint:
    index: int
    date: str
    time: str
    temperature: Number
    pulse: Number
    systolic: Number
    diastolic: Number
    blood_sugar: Number
    blood_pressure_raw: Any
    other: Any

    @property
    def label(self) -> str:
        return f"{self.date}\n{self.time}"


def vital_points(record: Any) -> List[VitalPoint]:
    points: List[VitalPoint] = []
    for i, v in enumerate(items(record, "vitals"), start=1):
        recorded = field(v, "recordedAt")
        bp = field(v, "bloodPressure")
        systolic, diastolic = _split_bp(bp)
        points.append(VitalPoint(
            index=i,
            date=fmt_date_ist(recorded) if _present(recorded) else f"Record {i}",
            time=fmt_time_ist(recorded) if _present(recorded) else "",
            temperature=parse_number(field(v, "temperature")),
            pulse=parse_number(field(v, "pulse")),
            systolic=systolic,
            diastolic=diastolic,
            blood_sugar=parse_number(field(v, "bloodSugarLevel")),
            blood_pressure_raw=bp,
            other=field(v, "other"),
        ))
    return points


def chart_series(points: Sequence[VitalPoint]) -> Dict[str, list]:
    return {
        "labels": [p.label for p in points],
        "temperature": [p.temperature for p in points],
        "pulse": [p.pulse for p in points],
        "systolic": [p.systolic for p in points],
        "diastolic": [p.diastolic for p in points],
        "bloodSugar": [p.blood_sugar for p in points],
    }


# -----------------------------
# Chart.js configuration
# -----------------------------
def _dataset(label: str, data: list, color: str, rgb: str, *, fill: bool = True) -> Dict[str, Any]:
    return {
        "label": label,
        "data": data,
        "borderColor": color,
        "backgroundColor": f"rgba({rgb}, 0.1)",
        "borderWidth": 3,
        "fill": fill,
        "tension": 0.4,
        "pointBackgroundColor": color,
        "pointBorderColor": "#fff",
        "pointBorderWidth": 2,
        "pointRadius": 6,
    }


def _line_chart(labels: list, datasets: list, y_title: str, **y_extra: Any) -> Dict[str, Any]:
    y_axis = {"beginAtZero": False, "grid": {"color": "#e0e0e0"}, **y_extra,
              "title": {"display": True, "text": y_title}}
    return {
        "type": "line",
        "data": {"labels": labels, "datasets": datasets},
        "options": {
            "responsive": True,
            "maintainAspectRatio": False,
            "plugins": {"legend": {"display": True, "position": "top"}},
            "scales": {"y": y_axis, "x": {"grid": {"color": "#e0e0e0"}}},
        },
    }


def chart_configs(series: Dict[str, list]) -> Dict[str, Dict[str, Any]]:
    """canvas id -> Chart.js config"""
    labels = series["labels"]
    return {
        "temperatureChart": _line_chart(
            labels,
            [_dataset("Temperature (°F)", series["temperature"], "#ff6b6b", "255, 107, 107")],
            "Temperature (°F)", min=95, max=105,
        ),
        "pulseChart": _line_chart(
            labels,
            [_dataset("Pulse Rate (BPM)", series["pulse"], "#4ecdc4", "78, 205, 196")],
            "Pulse Rate (BPM)",
        ),
        "bpChart": _line_chart(
            labels,
            [
                _dataset("Systolic", series["systolic"], "#ff7675", "255, 118, 117", fill=False),
                _dataset("Diastolic", series["diastolic"], "#74b9ff", "116, 185, 255", fill=False),
            ],
            "Blood Pressure (mmHg)",
        ),
        "bloodSugarChart": _line_chart(
            labels,
            [_dataset("Blood Sugar (mg/dL)", series["bloodSugar"], "#fdcb6e", "253, 203, 110")],
            "Blood Sugar (mg/dL)",
        ),
    }


def _js(obj: Any) -> str:
    # safe inside <script>
    return json.dumps(obj, ensure_ascii=False).replace("</", "<\\/")


def chart_script(series: Dict[str, list]) -> str:
    lines = [
        f"new Chart(document.getElementById('{canvas}'), {_js(config)});"
        for canvas, config in chart_configs(series).items()
    ]
    return "<script>\n" + "\n".join(lines) + "\n</script>"


# -----------------------------
# HTML
# -----------------------------
def _css() -> str:
    return """
    .stats-container {
        display: grid;
        grid-template-columns: repeat(auto-fit, minmax(200px, 1fr));
        gap: 15px;
        margin-bottom: 30px;
    }
    .stat-card {
        background: linear-gradient(135deg, #f8f9fa, #e9ecef);
        border: 2px solid #dee2e6;
        border-radius: 12px;
        padding: 15px;
        text-align: center;
    }
    .stat-card h3 {
        color: #2c5aa0;
        font-size: 14px;
        margin-bottom: 10px;
        text-transform: uppercase;
    }
    .stat-values { display: flex; justify-content: space-around; font-size: 11px; }
    .stat-item { text-align: center; }
    .stat-label { color: #666; font-weight: bold; margin-bottom: 2px; }
    .stat-value { color: #2c5aa0; font-size: 14px; font-weight: bold; }

    .chart-container {
        margin-bottom: 40px;
        page-break-inside: avoid;
        border: 2px solid #e9ecef;
        border-radius: 12px;
        padding: 20px;
    }
    .chart-title {
        font-size: 16px;
        font-weight: bold;
        color: #2c5aa0;
        margin-bottom: 15px;
        text-align: center;
        text-transform: uppercase;
        border-bottom: 2px solid #2c5aa0;
        padding-bottom: 8px;
    }
    .chart-canvas { width: 100% !important; height: 300px !important; margin: 15px 0; }

    .data-table {
        width: 100%;
        border-collapse: collapse;
        margin-top: 30px;
        border: 2px solid #2c5aa0;
    }
    .data-table th {
        background-color: #2c5aa0;
        color: white;
        padding: 12px 8px;
        text-align: center;
        font-weight: bold;
        font-size: 11px;
        border: 1px solid #1e4080;
    }
    .data-table td {
        padding: 10px 8px;
        border: 1px solid #ddd;
        text-align: center;
        font-size: 10px;
    }
    .data-table tr:nth-child(even) { background-color: #f8f9fa; }
    .normal-range { color: #28a745; font-weight: bold; }
    .warning-range { color: #ffc107; font-weight: bold; }

    .reference-ranges {
        background: #f8f9fa;
        border: 2px solid #dee2e6;
        border-radius: 8px;
        padding: 15px;
        margin: 20px 0;
    }
    .reference-ranges h4 { color: #2c5aa0; margin-bottom: 10px; text-align: center; }
    .ranges-grid {
        display: grid;
        grid-template-columns: repeat(auto-fit, minmax(200px, 1fr));
        gap: 10px;
        font-size: 10px;
    }
    .range-item {
        background: white;
        padding: 8px;
        border-radius: 4px;
        border-left: 4px solid #2c5aa0;
    }
    """


def _stat_card(title: str, values: Sequence[tuple]) -> str:
    cells = "".join(
        f'<div class="stat-item"><div class="stat-label">{label}</div>'
        f'<div class="stat-value">{_h(value)}</div></div>'
        for label, value in values
    )
    return f'<div class="stat-card"><h3>{_h(title)}</h3><div class="stat-values">{cells}</div></div>'


def _min_avg_max(stats: SeriesStats) -> list:
    return [("MIN", fmt_number(stats.min)), ("AVG", stats.avg_text), ("MAX", fmt_number(stats.max))]


def _stats_section(series: Dict[str, list]) -> str:
    temperature = compute_series_stats(series["temperature"])
    pulse = compute_series_stats(series["pulse"])
    systolic = compute_series_stats(series["systolic"])
    diastolic = compute_series_stats(series["diastolic"])
    sugar = compute_series_stats(series["bloodSugar"])
    return '<div class="stats-container">' + "".join([
        _stat_card("Temperature (°F)", _min_avg_max(temperature)),
        _stat_card("Pulse (BPM)", _min_avg_max(pulse)),
        _stat_card("Blood Pressure", [("SYS", systolic.avg_text), ("DIA", diastolic.avg_text)]),
        _stat_card("Blood Sugar", _min_avg_max(sugar)),
    ]) + "</div>"


def _reference_ranges() -> str:
    return f"""
    <div class="reference-ranges">
        <h4>Normal Reference Ranges</h4>
        <div class="ranges-grid">
            <div class="range-item"><strong>Temperature:</strong> {TEMPERATURE_RANGE[0]:.1f}°F - {TEMPERATURE_RANGE[1]:.1f}°F</div>
            <div class="range-item"><strong>Pulse:</strong> {PULSE_RANGE[0]:.0f} - {PULSE_RANGE[1]:.0f} BPM</div>
            <div class="range-item"><strong>Blood Pressure:</strong> &lt;{SYSTOLIC_MAX:.0f}/80 mmHg</div>
            <div class="range-item"><strong>Blood Sugar:</strong> {SUGAR_RANGE[0]:.0f} - {SUGAR_RANGE[1]:.0f} mg/dL</div>
        </div>
    </div>
    """


def _charts() -> str:
    charts = (
        ("Temperature Trend", "temperatureChart"),
        ("Pulse Rate Trend", "pulseChart"),
        ("Blood Pressure Trend", "bpChart"),
        ("Blood Sugar Trend", "bloodSugarChart"),
    )
    return '<div class="charts-section">' + "".join(
        f'<div class="chart-container"><div class="chart-title">{title}</div>'
        f'<canvas id="{canvas}" class="chart-canvas"></canvas></div>'
        for title, canvas in charts
    ) + "</div>"


def _outside(v: Number, low: float, high: float) -> bool:
    return v is not None and (v < low or v > high)


def range_class(flagged: bool) -> str:
    return "warning-range" if flagged else "normal-range"


def _data_rows(points: Sequence[VitalPoint]) -> str:
    if not points:
        return '<tr><td colspan="7" class="no-data">No vital signs recorded</td></tr>'
    rows = ""
    for p in points:
        rows += f"""
            <tr>
                <td>{p.index}</td>
                <td>{_h(p.date)}<br><small>{_h(p.time)}</small></td>
                <td class="{range_class(_outside(p.temperature, *TEMPERATURE_RANGE))}">{fmt_number(p.temperature)}</td>
                <td class="{range_class(_outside(p.pulse, *PULSE_RANGE))}">{fmt_number(p.pulse)}</td>
                <td class="{range_class(p.systolic is not None and p.systolic > SYSTOLIC_MAX)}">{or_na(p.blood_pressure_raw)}</td>
                <td class="{range_class(_outside(p.blood_sugar, *SUGAR_RANGE))}">{fmt_number(p.blood_sugar)}</td>
                <td>{or_na(p.other)}</td>
            </tr>
        """
    return rows


def _data_table(points: Sequence[VitalPoint]) -> str:
    return f"""
    <table class="data-table">
        <thead>
            <tr>
                <th>Record #</th>
                <th>Date &amp; Time</th>
                <th>Temperature (°F)</th>
                <th>Pulse (BPM)</th>
                <th>Blood Pressure</th>
                <th>Blood Sugar</th>
                <th>Other</th>
            </tr>
        </thead>
        <tbody>
            {_data_rows(points)}
        </tbody>
    </table>
    """


def generate_vitals_graph_html(patient: Any, record: Any, hospital: Optional[HospitalConfig] = None) -> str:
    points = vital_points(record)
    series = chart_series(points)
    logger.debug("Vitals graph: %d readings", len(points))

    content = _stats_section(series) + _reference_ranges() + _charts() + _data_table(points)

    rows = patient_rows(patient) + admission_rows(record) + [
        info_row(("Attending Doctor", doctor_name(record))),
    ]

    return standard_report(
        hospital=hospital,
        doc_title=f"Vital Signs Graph Report - {field(patient, 'name') or NA}",
        report_title="Vital Signs Graph Report",
        info_rows=rows,
        content=content,
        extra_css=_css(),
        date_label="Generated",
        head_extra=f'<script src="{_attr(settings.CHARTJS_CDN_URL)}"></script>',
        scripts=chart_script(series),
        footer_notes=[
            "<p>Visual trends help in better understanding patient's health progression</p>",
            "<p><strong>Confidential Medical Record - For Healthcare Professionals Only</strong></p>",
        ],
    )

# FILE: admission_reports/services/reports/entries.py
"""
History entries recorded by doctors.

The data layer stores each symptom / diagnosis as one free-text string with
the timestamp appended after a separator ("Fever - 12/05/2024, 10:00 AM",
"Pneumonia Date: 01/01/2024"). The parsers split them back for display and
keep the exact split rules the stored data relies on. Structured entries
({"text": ..., "recordedAt": ...}) are read directly.
"""
from __future__ import annotations

from collections.abc import Mapping
from typing import Any, NamedTuple

from admission_reports.utils.timezone import fmt_datetime_ist

SYMPTOM_SEPARATOR = " - "
DIAGNOSIS_SEPARATOR = " Date: "


class SymptomEntry(NamedTuple):
    symptom: str
    date_time: str


class DiagnosisEntry(NamedTuple):
    diagnosis: str
    date_time: str


def _structured(entry: Any):
    if isinstance(entry, Mapping) and "text" in entry:
        recorded = entry.get("recordedAt") or entry.get("recorded_at")
        return str(entry.get("text") or ""), (fmt_datetime_ist(recorded) if recorded else "N/A")
    return None


def parse_symptom_entry(entry: Any) -> SymptomEntry:
    s = _structured(entry)
    if s:
        return SymptomEntry(*s)
    text = "" if entry is None else str(entry)
    parts = text.split(SYMPTOM_SEPARATOR)
    if len(parts) >= 2:
        return SymptomEntry(parts[0], SYMPTOM_SEPARATOR.join(parts[1:]))
    return SymptomEntry(text, "N/A")


def parse_diagnosis_entry(entry: Any) -> DiagnosisEntry:
    s = _structured(entry)
    if s:
        return DiagnosisEntry(*s)
    text = "" if entry is None else str(entry)
    parts = text.split(DIAGNOSIS_SEPARATOR)
    if len(parts) >= 2:
        # anything after a second separator is dropped
        return DiagnosisEntry(parts[0], parts[1])
    return DiagnosisEntry(text, "N/A")

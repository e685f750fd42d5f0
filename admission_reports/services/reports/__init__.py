# FILE: admission_reports/services/reports/__init__.py
from admission_reports.services.reports.consulting import generate_consulting_html
from admission_reports.services.reports.diagnosis import generate_diagnosis_html
from admission_reports.services.reports.doctor_notes import generate_doctor_notes_html
from admission_reports.services.reports.entries import parse_diagnosis_entry, parse_symptom_entry
from admission_reports.services.reports.followups import (
    followup_css,
    followup_patient_table,
    generate_2hr_followup_html,
    generate_4hr_followup_html,
    generate_combined_followup_html,
)
from admission_reports.services.reports.prescriptions import generate_prescriptions_html
from admission_reports.services.reports.symptoms import generate_symptoms_html
from admission_reports.services.reports.vitals import generate_vitals_html
from admission_reports.services.reports.vitals_graph import compute_series_stats, generate_vitals_graph_html

__all__ = [
    "generate_symptoms_html",
    "generate_vitals_html",
    "generate_diagnosis_html",
    "generate_prescriptions_html",
    "generate_consulting_html",
    "generate_doctor_notes_html",
    "generate_2hr_followup_html",
    "generate_4hr_followup_html",
    "generate_combined_followup_html",
    "generate_vitals_graph_html",
    "followup_patient_table",
    "followup_css",
    "parse_symptom_entry",
    "parse_diagnosis_entry",
    "compute_series_stats",
]

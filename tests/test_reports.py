"""
Standard A4 reports: patient identity, placeholders and section content.
"""
import pytest

from admission_reports.core.config import HospitalConfig
from admission_reports.schemas.records import ReportRequest
from admission_reports.services.reports import (
    generate_2hr_followup_html,
    generate_4hr_followup_html,
    generate_combined_followup_html,
    generate_consulting_html,
    generate_diagnosis_html,
    generate_doctor_notes_html,
    generate_prescriptions_html,
    generate_symptoms_html,
    generate_vitals_graph_html,
    generate_vitals_html,
)

ALL_GENERATORS = [
    generate_symptoms_html,
    generate_vitals_html,
    generate_diagnosis_html,
    generate_prescriptions_html,
    generate_consulting_html,
    generate_doctor_notes_html,
    generate_2hr_followup_html,
    generate_4hr_followup_html,
    generate_combined_followup_html,
    generate_vitals_graph_html,
]


@pytest.mark.parametrize("generate", ALL_GENERATORS)
class TestEveryReport:
    def test_is_complete_document(self, generate, patient, admission, hospital):
        html = generate(patient, admission, hospital)
        assert html.startswith("<!DOCTYPE html>")
        assert "<style>" in html
        assert html.rstrip().endswith("</html>")

    def test_patient_identity_verbatim(self, generate, patient, admission, hospital):
        html = generate(patient, admission, hospital)
        for value in ("P-1001", "Asha Rao", "45", "Female"):
            assert value in html

    def test_patient_identity_escaped(self, generate, admission, hospital):
        patient = {"name": "O'Brien & <Sons>", "patientId": "P<1>", "age": "45", "gender": "Female"}
        html = generate(patient, admission, hospital)
        assert "O'Brien &amp; &lt;Sons&gt;" in html
        assert "P&lt;1&gt;" in html
        assert "<Sons>" not in html

    def test_empty_admission_does_not_raise(self, generate, patient):
        html = generate(patient, {})
        assert "Asha Rao" in html
        assert "no-data" in html or "N/A" in html

    def test_out_of_range_dates_print_raw(self, generate, patient):
        far = "9999-12-31T23:00:00Z"
        record = {
            "admissionDate": far,
            "dischargeDate": far,
            "vitals": [{"temperature": "99", "recordedAt": far}],
            "doctorPrescriptions": [{"medicine": {"name": "Paracetamol", "date": far}}],
            "doctorConsulting": [{"date": far, "cheifComplaint": "Fever"}],
            "doctorNotes": [{"date": far, "text": "Stable"}],
            "followUps": [{"date": far, "nurseName": "Kavya"}],
            "fourHrFollowUpSchema": [{"date": far, "nurseName": "Kavya"}],
        }
        html = generate(patient, record)
        assert "Asha Rao" in html
        assert html.rstrip().endswith("</html>")

    def test_none_inputs(self, generate):
        html = generate(None, None)
        assert "<!DOCTYPE html>" in html

    def test_same_input_same_output(self, generate, patient, admission, hospital):
        assert generate(patient, admission, hospital) == generate(patient, admission, hospital)

    def test_accepts_request_models(self, generate, patient, admission):
        body = ReportRequest.model_validate({"patient": patient, "admission": admission})
        html = generate(body.patient, body.admission)
        assert "P-1001" in html
        assert "Asha Rao" in html

    def test_default_hospital_from_settings(self, generate, patient, admission):
        html = generate(patient, admission)
        assert "Test General Hospital" in html or "Hospital Banner" in html


class TestHeader:
    def test_hospital_branding(self, patient, admission, hospital):
        html = generate_symptoms_html(patient, admission, hospital)
        assert "Sunrise Clinic" in html
        assert 'src="https://example.org/banner.png"' in html
        assert "12 Hill Street" in html

    def test_blank_branding_lines_are_omitted(self, patient, admission):
        html = generate_vitals_html(patient, admission, HospitalConfig(name="Only Name"))
        assert "Only Name" in html
        assert "hospital-banner" not in html.split("<body>")[1]

    def test_markup_in_data_is_escaped(self, admission, hospital):
        html = generate_symptoms_html({"name": "<b>Eve</b>", "patientId": "X"}, admission, hospital)
        assert "&lt;b&gt;Eve&lt;/b&gt;" in html
        assert "<b>Eve</b>" not in html

    def test_zero_age_is_shown(self, admission, hospital):
        html = generate_vitals_html({"name": "Baby", "age": 0, "gender": "Male"}, admission, hospital)
        assert "0 Years / Male" in html


class TestSymptoms:
    def test_sections(self, patient, admission, hospital):
        html = generate_symptoms_html(patient, admission, hospital)
        assert "SYMPTOMS REPORT" in html
        assert "High fever and cough" in html
        assert "12/05/2024, 10:00 AM" in html
        assert "Fever for 3 days" in html
        assert "Mehta" in html

    def test_placeholders(self, patient, hospital):
        html = generate_symptoms_html(patient, {}, hospital)
        assert "No initial symptoms recorded" in html
        assert "No additional symptoms recorded by doctor" in html
        assert "No chief complaints recorded" in html


class TestVitals:
    def test_rows(self, patient, admission, hospital):
        html = generate_vitals_html(patient, admission, hospital)
        assert "118/76" in html
        assert "Other: Mild headache" in html
        assert "62 kg" in html
        assert "12/05/2024, 10:30 AM" in html

    def test_placeholder(self, patient, hospital):
        html = generate_vitals_html(patient, {"vitals": []}, hospital)
        assert "No vital signs recorded" in html


class TestDiagnosis:
    def test_sections(self, patient, admission, hospital):
        html = generate_diagnosis_html(patient, admission, hospital)
        assert "Viral fever" in html
        assert "Pneumonia" in html
        assert "01/01/2024" in html
        assert "Started with chills" in html
        assert "Discharge condition not recorded" in html

    def test_placeholders(self, patient, hospital):
        html = generate_diagnosis_html(patient, {}, hospital)
        assert "No initial diagnosis recorded" in html
        assert "No additional diagnosis recorded by doctor" in html
        assert "No medical history recorded" in html


class TestPrescriptions:
    def test_tables(self, patient, admission, hospital):
        html = generate_prescriptions_html(patient, admission, hospital)
        assert "Paracetamol" in html
        assert "After food" in html
        assert "IV FLUIDS" in html
        assert "500ml" in html
        # empty medications list -> no table
        assert "ADDITIONAL MEDICATIONS" not in html
        assert "for reference only" in html

    def test_missing_medicine_name(self, patient, hospital):
        html = generate_prescriptions_html(patient, {"doctorPrescriptions": [{"medicine": {}}]}, hospital)
        assert "Medicine name not specified" in html

    def test_placeholder(self, patient, hospital):
        assert "No prescriptions recorded" in generate_prescriptions_html(patient, {}, hospital)


class TestConsulting:
    def test_block(self, patient, admission, hospital):
        html = generate_consulting_html(patient, admission, hospital)
        assert "CONSULTING REPORT" in html
        assert "CONSULTATION RECORD #1 - 12/05/2024" in html
        assert "Chief Complaint" in html
        assert "None known" in html
        assert "PAIN ASSESSMENT" in html
        assert "Wong Baker Pain Scale" in html
        # absent fields have no row
        assert "Menstrual History" not in html
        assert "Visual Analogue Scale" not in html

    def test_no_pain_section_without_scores(self, patient, hospital):
        html = generate_consulting_html(patient, {"doctorConsulting": [{"cheifComplaint": "Cough"}]}, hospital)
        assert "PAIN ASSESSMENT" not in html
        assert "Date not recorded" in html

    def test_placeholder(self, patient, hospital):
        html = generate_consulting_html(patient, {}, hospital)
        assert "No consultation records found" in html


class TestDoctorNotes:
    def test_sections(self, patient, admission, hospital):
        html = generate_doctor_notes_html(patient, admission, hospital)
        assert "Dr. Mehta" in html
        assert "12/05/2024 at 10:30 AM" in html
        assert "Admitted for observation" in html
        assert "Nebulisation" in html
        assert "Frequency:" in html
        assert "No special instructions recorded" in html
        assert "General Ward" in html

    def test_placeholders(self, patient, hospital):
        html = generate_doctor_notes_html(patient, {}, hospital)
        assert "No doctor notes recorded" in html
        assert "No admission notes recorded" in html
        assert "No procedures recorded" in html

    def test_note_defaults(self, patient, hospital):
        html = generate_doctor_notes_html(patient, {"doctorNotes": [{}]}, hospital)
        assert "Dr. Doctor" in html
        assert "Date not recorded" in html
        assert "No note content" in html

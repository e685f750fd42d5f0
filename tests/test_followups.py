"""Follow-up reports: one record per page, subsections only when filled in."""
from admission_reports.services.reports import (
    followup_css,
    followup_patient_table,
    generate_2hr_followup_html,
    generate_4hr_followup_html,
    generate_combined_followup_html,
)

PAGE_BREAK = "page-break-before: always;"


def _records(n, **values):
    return [dict({"date": f"2024-05-12T0{i}:00:00Z"}, **values) for i in range(n)]


class TestPageBreaks:
    def test_2hr_n_minus_one(self, patient):
        html = generate_2hr_followup_html(patient, {"followUps": _records(3, pulse="80")})
        assert html.count(PAGE_BREAK) == 2
        assert html.count('class="follow-up-record"') == 3

    def test_single_record_has_no_break(self, patient):
        html = generate_4hr_followup_html(patient, {"fourHrFollowUpSchema": _records(1)})
        assert PAGE_BREAK not in html

    def test_combined_shares_one_counter(self, patient):
        record = {"followUps": _records(2), "fourHrFollowUpSchema": _records(3)}
        html = generate_combined_followup_html(patient, record)
        assert html.count(PAGE_BREAK) == 4

    def test_combined_with_only_4hr(self, patient):
        html = generate_combined_followup_html(patient, {"fourHrFollowUpSchema": _records(2)})
        assert html.count(PAGE_BREAK) == 1

    def test_stylesheet_has_no_forced_break(self):
        assert PAGE_BREAK not in followup_css()


class TestRecords:
    def test_headings_in_order(self, patient, admission):
        html = generate_combined_followup_html(patient, admission)
        first = html.index("2-Hour Follow-Up Record 1")
        second = html.index("2-Hour Follow-Up Record 2")
        four = html.index("4-Hour Follow-Up Record 1")
        assert first < second < four

    def test_2hr_heading_and_nurse(self, patient, admission):
        html = generate_2hr_followup_html(patient, admission)
        assert "Follow-Up Record 1 - 2HR" in html
        assert "12/05/2024, 11:30 AM | Nurse: Kavya" in html
        assert "Nurse: Not assigned" in html

    def test_missing_date(self, patient):
        html = generate_2hr_followup_html(patient, {"followUps": [{"pulse": "70"}]})
        assert "Not recorded | Nurse:" in html

    def test_empty_subsections_are_skipped(self, patient):
        html = generate_2hr_followup_html(patient, {"followUps": [{"pulse": "70"}]})
        assert "Vital Signs" in html
        assert "Intake &amp; Output Data" not in html
        assert "Ventilator Data" not in html
        assert "Clinical Notes" not in html

    def test_optional_rows(self, patient):
        rec = {"followUps": [{"ventyMode": "SIMV", "otherVentilator": "Weaning"}]}
        html = generate_2hr_followup_html(patient, rec)
        assert "Ventilator Data" in html
        assert "Weaning" in html
        assert "Other Vitals" not in html

    def test_notes(self, patient, admission):
        html = generate_2hr_followup_html(patient, admission)
        assert "Clinical Notes &amp; Observations" in html
        assert "Comfortable" in html

    def test_combined_uses_compact_layout(self, patient):
        rec = {"followUps": [{"ventyMode": "SIMV", "pulse": "70", "notes": "ok"}]}
        html = generate_combined_followup_html(patient, rec)
        assert "Ventilator Data" not in html
        assert "Notes &amp; Observations" in html
        assert "Clinical Notes" not in html

    def test_4hr_fields(self, patient, admission):
        html = generate_4hr_followup_html(patient, admission)
        assert "4-Hour Vital Signs" in html
        assert "78" in html
        assert "Fluid Management" not in html


class TestEmpty:
    def test_2hr(self, patient):
        assert "No 2-hour follow-up records found" in generate_2hr_followup_html(patient, {})

    def test_4hr(self, patient):
        assert "No 4-hour follow-up records found" in generate_4hr_followup_html(patient, {"fourHrFollowUpSchema": None})

    def test_combined(self, patient):
        html = generate_combined_followup_html(patient, {"followUps": [], "fourHrFollowUpSchema": []})
        assert "No follow-up records found" in html
        assert PAGE_BREAK not in html


class TestPatientTable:
    def test_fields(self, patient, admission):
        html = followup_patient_table(patient, admission)
        assert "Patient Information - P-1001" in html
        assert "OPD-77" in html and "IPD-12" in html
        assert "Admitted" in html
        assert "12/05/2024" in html
        assert "General Ward" in html
        assert "B-4" in html
        assert "Mehta" in html

    def test_doctor_not_assigned(self, patient):
        assert "Not assigned" in followup_patient_table(patient, {})

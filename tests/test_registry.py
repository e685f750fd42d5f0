from datetime import date

import pytest

from admission_reports.services.reports.registry import (
    REPORTS,
    build_pdf_filename,
    get_report,
    list_reports,
)

EXPECTED_TYPES = {
    "symptoms", "vitals", "diagnosis", "prescriptions", "consulting", "doctor-notes",
    "followup-2hr", "followup-4hr", "followup-combined", "vitals-graph",
}


def test_all_report_types_registered():
    assert set(REPORTS) == EXPECTED_TYPES
    assert {r["type"] for r in list_reports()} == EXPECTED_TYPES


def test_lookup_is_case_insensitive():
    assert get_report("Symptoms") is REPORTS["symptoms"]
    assert get_report("nope") is None


class TestHasData:
    def test_plain_reports_always_render(self):
        assert REPORTS["vitals"].has_data({})

    def test_2hr_needs_follow_ups(self):
        report = REPORTS["followup-2hr"]
        assert not report.has_data({"followUps": []})
        assert report.has_data({"followUps": [{}]})

    def test_combined_needs_either(self):
        report = REPORTS["followup-combined"]
        assert not report.has_data({})
        assert report.has_data({"fourHrFollowUpSchema": [{}]})


class TestFilename:
    def test_followup_convention(self, patient):
        name = build_pdf_filename(REPORTS["followup-2hr"], patient, {"opdNumber": "OPD-77", "ipdNumber": "IPD-12"},
                                  on=date(2024, 5, 12))
        assert name == "2HR_FollowUp_Asha_Rao_OPD-77_2024-05-12.pdf"

    def test_falls_back_to_ipd(self, patient):
        name = build_pdf_filename(REPORTS["followup-combined"], patient, {"ipdNumber": "IPD-12"},
                                  on=date(2024, 5, 12))
        assert name == "Combined_FollowUp_Asha_Rao_IPD-12_2024-05-12.pdf"

    @pytest.mark.parametrize("patient_name", ['a/b"c', None])
    def test_unsafe_or_missing_name(self, patient_name):
        name = build_pdf_filename(REPORTS["vitals"], {"name": patient_name}, {}, on=date(2024, 1, 2))
        assert "/" not in name and '"' not in name
        assert name.endswith("_NA_2024-01-02.pdf")

    @pytest.mark.parametrize("patient_name, expected", [
        ("आशा राव", "Vitals_patient_NA_2024-01-02.pdf"),
        ("José Núñez", "Vitals_Jos_N_ez_NA_2024-01-02.pdf"),
    ])
    def test_non_ascii_name_gives_ascii_filename(self, patient_name, expected):
        name = build_pdf_filename(REPORTS["vitals"], {"name": patient_name}, {}, on=date(2024, 1, 2))
        assert name == expected
        name.encode("latin-1")

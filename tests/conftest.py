import os

import pytest
from fastapi.testclient import TestClient

# Fixed branding, no banner fetches during tests
os.environ["HOSPITAL_NAME"] = "Test General Hospital"
os.environ["HOSPITAL_BANNER_URL"] = ""
os.environ["HOSPITAL_ADDRESS"] = "1 Test Road"
os.environ["HOSPITAL_PHONE"] = "Phone No. 000"
os.environ["PDF_RENDERER"] = ""

from admission_reports.core.config import HospitalConfig
from admission_reports.main import app


@pytest.fixture
def hospital():
    return HospitalConfig(name="Sunrise Clinic", banner_url="https://example.org/banner.png",
                          address="12 Hill Street", phone="Phone No. 12345")


@pytest.fixture
def patient():
    return {
        "patientId": "P-1001",
        "name": "Asha Rao",
        "age": 45,
        "gender": "Female",
        "contact": "9876543210",
        "address": "Pune",
        "dob": "01/01/1980",
    }


@pytest.fixture
def admission():
    """A fully populated admission record as the data layer returns it."""
    return {
        "opdNumber": "OPD-77",
        "ipdNumber": "IPD-12",
        "admissionDate": "2024-05-12T04:30:00Z",
        "dischargeDate": None,
        "status": "Admitted",
        "bedNumber": "B-4",
        "weight": 62,
        "doctor": {"name": "Mehta"},
        "section": {"name": "General Ward"},
        "symptoms": "High fever and cough",
        "initialDiagnosis": "Viral fever",
        "conditionAtDischarge": "",
        "admitNotes": "Admitted for observation",
        "vitals": [
            {"temperature": "98", "pulse": "72", "bloodPressure": "118/76",
             "bloodSugarLevel": "110", "recordedAt": "2024-05-12T05:00:00Z"},
            {"temperature": "", "pulse": "110", "bloodPressure": "130/85",
             "bloodSugarLevel": "150", "other": "Mild headache"},
            {"temperature": "101 F", "pulse": "88", "bloodPressure": "",
             "bloodSugarLevel": None, "recordedAt": "2024-05-13T05:00:00Z"},
        ],
        "symptomsByDoctor": ["Fever - 12/05/2024, 10:00 AM", "Cough"],
        "diagnosisByDoctor": ["Pneumonia Date: 01/01/2024"],
        "doctorPrescriptions": [
            {"medicine": {"name": "Paracetamol", "morning": "1", "afternoon": "0",
                          "night": "1", "date": "2024-05-12T06:00:00Z", "comment": "After food"}},
        ],
        "medications": [],
        "ivFluids": [{"name": "NS", "quantity": "500ml", "duration": "4h",
                      "date": "12/05/2024", "time": "11:00 AM"}],
        "doctorConsulting": [
            {"date": "12/05/2024", "cheifComplaint": "Fever for 3 days",
             "historyOfPresentIllness": "Started with chills", "allergies": "None known",
             "wongBaker": "4"},
        ],
        "doctorNotes": [
            {"doctorName": "Mehta", "date": "12/05/2024", "time": "10:30 AM", "text": "Stable"},
        ],
        "procedures": [{"name": "Nebulisation", "date": "12/05/2024", "frequency": "BD"}],
        "specialInstructions": [],
        "followUps": [
            {"date": "2024-05-12T06:00:00Z", "nurseName": "Kavya", "temperature": "99",
             "pulse": "80", "notes": "Comfortable"},
            {"date": "2024-05-12T08:00:00Z", "ivFluid": "100ml", "urine": "200ml"},
        ],
        "fourHrFollowUpSchema": [
            {"date": "2024-05-12T10:00:00Z", "nurseName": "Kavya", "fourhrpulse": "78"},
        ],
    }


@pytest.fixture
def client():
    return TestClient(app)

# FILE: admission_reports/schemas/records.py
"""
Request models for the report endpoints.

These parse, they do not validate: every field is optional, unknown keys
are kept (readable as attributes), and numbers sent for text fields are
turned into strings. Bodies use the data layer's camelCase keys.
"""
from __future__ import annotations

from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from admission_reports.core.config import HospitalConfig


class RecordModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="allow",
        coerce_numbers_to_str=True,
    )


class NamedRef(RecordModel):
    name: Optional[str] = None


class PatientIn(RecordModel):
    patient_id: Optional[str] = None
    name: Optional[str] = None
    age: Optional[str] = None
    gender: Optional[str] = None
    contact: Optional[str] = None
    address: Optional[str] = None
    dob: Optional[str] = None


class VitalIn(RecordModel):
    temperature: Optional[str] = None
    pulse: Optional[str] = None
    blood_pressure: Optional[str] = None
    blood_sugar_level: Optional[str] = None
    other: Optional[str] = None
    recorded_at: Any = None


class MedicineIn(RecordModel):
    name: Optional[str] = None
    morning: Optional[str] = None
    afternoon: Optional[str] = None
    night: Optional[str] = None
    comment: Optional[str] = None
    date: Any = None


class PrescriptionIn(RecordModel):
    medicine: Optional[MedicineIn] = None


class TwoHourFollowUpIn(RecordModel):
    date: Any = None
    nurse_name: Optional[str] = None
    notes: Optional[str] = None
    observations: Optional[str] = None
    # vitals, intake/output and ventilator readings arrive as extra fields


class FourHourFollowUpIn(RecordModel):
    date: Any = None
    nurse_name: Optional[str] = None
    notes: Optional[str] = None
    observations: Optional[str] = None


class AdmissionIn(RecordModel):
    opd_number: Optional[str] = None
    ipd_number: Optional[str] = None
    admission_date: Any = None
    discharge_date: Any = None
    status: Optional[str] = None
    bed_number: Optional[str] = None
    weight: Optional[str] = None
    doctor: Optional[NamedRef] = None
    section: Optional[NamedRef] = None

    symptoms: Optional[str] = None
    initial_diagnosis: Optional[str] = None
    condition_at_discharge: Optional[str] = None
    admit_notes: Optional[str] = None

    vitals: List[VitalIn] = Field(default_factory=list)
    # plain strings ("Fever - 12/05/2024, 10:00 AM") or {"text", "recordedAt"}
    symptoms_by_doctor: List[Any] = Field(default_factory=list)
    diagnosis_by_doctor: List[Any] = Field(default_factory=list)
    doctor_prescriptions: List[PrescriptionIn] = Field(default_factory=list)
    medications: List[RecordModel] = Field(default_factory=list)
    iv_fluids: List[RecordModel] = Field(default_factory=list)
    doctor_consulting: List[RecordModel] = Field(default_factory=list)
    doctor_notes: List[RecordModel] = Field(default_factory=list)
    procedures: List[RecordModel] = Field(default_factory=list)
    special_instructions: List[RecordModel] = Field(default_factory=list)
    follow_ups: List[TwoHourFollowUpIn] = Field(default_factory=list)
    four_hr_follow_up_schema: List[FourHourFollowUpIn] = Field(default_factory=list)


class ReportRequest(BaseModel):
    patient: PatientIn = Field(default_factory=PatientIn)
    admission: AdmissionIn = Field(default_factory=AdmissionIn)
    hospital: Optional[HospitalConfig] = None

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, Optional

from ..common.validators import to_number
from ..core.enums import EmployeeStatus, Gender

# snake_case attribute -> persisted camelCase key
_JSON_KEYS = {
    "id": "id",
    "name": "name",
    "designation": "designation",
    "gender": "gender",
    "basic_salary": "basicSalary",
    "joining_date": "joiningDate",
    "contact": "contact",
    "alternate_contact": "alternateContact",
    "email": "email",
    "father_name": "fatherName",
    "mother_name": "motherName",
    "address": "address",
    "aadhaar": "aadhaar",
    "bank_name": "bankName",
    "account_no": "accountNo",
    "ifsc": "ifsc",
    "blood_group": "bloodGroup",
    "religion": "religion",
    "category": "category",
    "marital_status": "maritalStatus",
    "qualification": "qualification",
    "experience": "experience",
    "samagra_id": "samagraId",
    "teacher_code": "teacherCode",
    "subject": "subject",
    "branch": "branch",
    "photo": "photo",
    "shift": "shift",
    "work_location": "workLocation",
    "status": "status",
    "status_change_date": "statusChangeDate",
    "leaving_date": "leavingDate",
    "leaving_reason": "leavingReason",
    "height": "height",
    "weight": "weight",
    "chest": "chest",
    "gun_license_no": "gunLicenseNo",
    "license_expiry": "licenseExpiry",
    "police_verification": "policeVerification",
    "training_cert_no": "trainingCertNo",
}


@dataclass(frozen=True)
class Employee:
    """Domain entity: one person in the registry.

    Contact, bank and identity fields are free-form strings and are never
    validated beyond being carried through.
    """

    id: str
    name: str
    designation: str = ""
    gender: Gender = Gender.MALE
    basic_salary: float = 0.0
    joining_date: str = ""
    contact: str = ""
    alternate_contact: Optional[str] = None
    email: str = ""
    father_name: str = ""
    mother_name: str = ""
    address: str = ""
    aadhaar: str = ""
    bank_name: str = ""
    account_no: str = ""
    ifsc: str = ""
    blood_group: str = ""
    religion: str = ""
    category: str = ""
    marital_status: str = ""
    qualification: str = ""
    experience: str = ""
    samagra_id: Optional[str] = None
    teacher_code: Optional[str] = None
    subject: Optional[str] = None
    branch: Optional[str] = None
    photo: Optional[str] = None
    shift: str = "Day"
    work_location: str = ""
    status: EmployeeStatus = EmployeeStatus.ACTIVE
    status_change_date: str = ""
    leaving_date: Optional[str] = None
    leaving_reason: Optional[str] = None
    height: Optional[str] = None
    weight: Optional[str] = None
    chest: Optional[str] = None
    gun_license_no: Optional[str] = None
    license_expiry: Optional[str] = None
    police_verification: Optional[str] = None
    training_cert_no: Optional[str] = None

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> "Employee":
        kwargs: dict[str, Any] = {}
        for f in fields(cls):
            key = _JSON_KEYS[f.name]
            if key in data and data[key] is not None:
                kwargs[f.name] = data[key]

        kwargs["id"] = str(kwargs.get("id", ""))
        kwargs["name"] = str(kwargs.get("name", ""))
        kwargs["basic_salary"] = to_number(kwargs.get("basic_salary"))
        try:
            kwargs["gender"] = Gender(kwargs.get("gender", Gender.MALE.value))
        except ValueError:
            kwargs["gender"] = Gender.MALE
        try:
            kwargs["status"] = EmployeeStatus(kwargs.get("status", EmployeeStatus.ACTIVE.value))
        except ValueError:
            kwargs["status"] = EmployeeStatus.ACTIVE
        return cls(**kwargs)

    def to_json(self, *, include_photo: bool = True) -> dict[str, Any]:
        out: dict[str, Any] = {}
        for f in fields(self):
            if f.name == "photo" and not include_photo:
                continue
            value = getattr(self, f.name)
            if value is None:
                continue
            if isinstance(value, (Gender, EmployeeStatus)):
                value = value.value
            out[_JSON_KEYS[f.name]] = value
        return out

    @property
    def is_active(self) -> bool:
        return self.status == EmployeeStatus.ACTIVE

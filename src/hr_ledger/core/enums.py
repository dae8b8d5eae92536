from __future__ import annotations

from enum import Enum


class AttendanceStatus(str, Enum):
    """Day status codes as stored in the attendance day map."""

    PRESENT = "P"
    ABSENT = "A"
    HALF_DAY = "HD"
    LEAVE = "L"
    OFF = "OFF"
    HOLIDAY = "H"
    UNSET = ""


class EmployeeStatus(str, Enum):
    ACTIVE = "Active"
    INACTIVE = "Inactive"


class Gender(str, Enum):
    MALE = "Male"
    FEMALE = "Female"


class TransactionType(str, Enum):
    SALARY = "Salary"
    ADVANCE = "Advance"
    PF = "PF"
    DUES = "Dues"
    ALLOWANCE = "Allowance"


class PaymentMode(str, Enum):
    CASH = "Cash"
    BANK = "Bank"
    PHONEPE = "PhonePe"
    GPAY = "GPay"
    UPI = "UPI"
    CHEQUE = "Cheque"
    DEBIT_CARD = "Debit Card"
    CREDIT_CARD = "Credit Card"
    BHIM_UPI = "Bhim UPI"
    PAYTM = "Paytm"


class HolidayType(str, Enum):
    COMPANY = "Company"
    NATIONAL = "National"
    FESTIVAL = "Festival"

"""Domain models - pure Python dataclasses representing business entities"""

import uuid
from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from enum import Enum
from typing import List, Optional


class EmploymentStatus(str, Enum):
    UNEMPLOYED = "unemployed"
    SELF_EMPLOYED = "self_employed"
    EMPLOYED = "employed"
    BUSINESS_OWNER = "business_owner"


class Position(str, Enum):
    WORKER = "worker"
    MID_MANAGER = "mid_manager"
    TOP_MANAGER = "top_manager"
    OWNER = "owner"


class MaritalStatus(str, Enum):
    MARRIED = "married"
    DIVORCED = "divorced"
    SINGLE = "single"
    WIDOW_WIDOWER = "widow_widower"


class Gender(str, Enum):
    MALE = "male"
    FEMALE = "female"
    NON_BINARY = "non_binary"


@dataclass(frozen=True)
class RateConfiguration:
    """Rate parameters shared by every calculation, read-only after startup"""

    base_rate: Decimal
    insurance_discount: Decimal
    salary_client_discount: Decimal
    insurance_cost: Decimal


@dataclass(frozen=True)
class LoanRequest:
    """Preliminary request used to quote offers"""

    amount: Decimal
    term: int
    first_name: str
    last_name: str
    email: str
    birth_date: date
    passport_series: str
    passport_number: str
    middle_name: Optional[str] = None


@dataclass(frozen=True)
class LoanOffer:
    """Non-binding quote for one insurance/salary-client combination"""

    requested_amount: Decimal
    total_amount: Decimal
    term: int
    monthly_payment: Decimal
    rate: Decimal
    is_insurance_enabled: bool
    is_salary_client: bool
    statement_id: uuid.UUID = field(default_factory=uuid.uuid4)


@dataclass(frozen=True)
class Employment:
    employment_status: EmploymentStatus
    employer_inn: str
    salary: Decimal
    position: Position
    work_experience_total: int  # months
    work_experience_current: int  # months


@dataclass(frozen=True)
class ScoringInput:
    """Full borrower data submitted for scoring"""

    amount: Decimal
    term: int
    first_name: str
    last_name: str
    gender: Gender
    birth_date: date
    passport_series: str
    passport_number: str
    marital_status: MaritalStatus
    dependent_amount: int
    employment: Employment
    account_number: str
    is_insurance_enabled: bool
    is_salary_client: bool
    middle_name: Optional[str] = None
    passport_issue_date: Optional[date] = None
    passport_issue_branch: Optional[str] = None


@dataclass(frozen=True)
class PaymentScheduleEntry:
    """Single monthly payment in an amortization schedule"""

    number: int
    date: date
    total_payment: Decimal
    interest_payment: Decimal
    debt_payment: Decimal
    remaining_debt: Decimal


@dataclass(frozen=True)
class CreditResult:
    """Priced credit with its full repayment schedule"""

    amount: Decimal
    term: int
    monthly_payment: Decimal
    rate: Decimal
    psk: Decimal
    is_insurance_enabled: bool
    is_salary_client: bool
    payment_schedule: List[PaymentScheduleEntry]

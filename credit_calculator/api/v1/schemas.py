"""Pydantic schemas for API request/response validation"""

import datetime
from datetime import date
from decimal import Decimal
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, UUID4

from credit_calculator.domain.models import (
    Employment,
    EmploymentStatus,
    Gender,
    LoanRequest,
    MaritalStatus,
    Position,
    ScoringInput,
)

# Lending rules (minimum amount, age, ...) are enforced by the domain so the
# caller gets their specific reason; schemas only check shape, types and that
# amounts are whole cents.


class LoanRequestSchema(BaseModel):
    """Request body for POST /calculator/offers"""

    amount: Decimal = Field(..., decimal_places=2)
    term: int
    first_name: str
    last_name: str
    middle_name: Optional[str] = None
    email: str
    birth_date: date
    passport_series: str
    passport_number: str

    def to_domain(self) -> LoanRequest:
        return LoanRequest(**self.model_dump())


class LoanOfferSchema(BaseModel):
    """Single offer in the response of POST /calculator/offers"""

    model_config = ConfigDict(from_attributes=True)

    statement_id: UUID4
    requested_amount: Decimal
    total_amount: Decimal
    term: int
    monthly_payment: Decimal
    rate: Decimal
    is_insurance_enabled: bool
    is_salary_client: bool


class EmploymentSchema(BaseModel):
    employment_status: EmploymentStatus
    employer_inn: str
    salary: Decimal
    position: Position
    work_experience_total: int
    work_experience_current: int


class ScoringDataSchema(BaseModel):
    """Request body for POST /calculator/calc"""

    amount: Decimal = Field(..., decimal_places=2)
    term: int
    first_name: str
    last_name: str
    middle_name: Optional[str] = None
    gender: Gender
    birth_date: date
    passport_series: str
    passport_number: str
    passport_issue_date: Optional[date] = None
    passport_issue_branch: Optional[str] = None
    marital_status: MaritalStatus
    dependent_amount: int
    employment: EmploymentSchema
    account_number: str
    is_insurance_enabled: bool
    is_salary_client: bool

    def to_domain(self) -> ScoringInput:
        data = self.model_dump()
        data["employment"] = Employment(**data["employment"])
        return ScoringInput(**data)


class PaymentScheduleEntrySchema(BaseModel):
    """Single month in a payment schedule"""

    model_config = ConfigDict(from_attributes=True)

    number: int
    date: datetime.date
    total_payment: Decimal
    interest_payment: Decimal
    debt_payment: Decimal
    remaining_debt: Decimal


class CreditSchema(BaseModel):
    """Response for POST /calculator/calc"""

    model_config = ConfigDict(from_attributes=True)

    amount: Decimal
    term: int
    monthly_payment: Decimal
    rate: Decimal
    psk: Decimal
    is_insurance_enabled: bool
    is_salary_client: bool
    payment_schedule: List[PaymentScheduleEntrySchema]

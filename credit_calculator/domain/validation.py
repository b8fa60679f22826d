"""Lending rules checked before offers are quoted and before a credit is priced"""

import re
from datetime import date
from decimal import Decimal
from typing import Callable, List, Optional, Tuple

from credit_calculator.domain.models import EmploymentStatus, LoanRequest, ScoringInput
from credit_calculator.domain.exceptions import ValidationError
from credit_calculator.utils.date_utils import full_years_between

EMAIL_PATTERN = re.compile(r"^[a-z0-9A-Z_!#$%&'*+/=?`{|}~^.-]+@[a-z0-9A-Z.-]+$")

MIN_AMOUNT = Decimal("20000")
MIN_TERM_MONTHS = 6
MIN_PRESCORING_AGE = 18

MIN_SCORING_AGE = 20
MAX_SCORING_AGE = 65
MIN_TOTAL_EXPERIENCE_MONTHS = 18
MIN_CURRENT_EXPERIENCE_MONTHS = 3
MAX_SALARY_MULTIPLIER = 24
SMALLEST_AMOUNT = Decimal("0.01")

# (rule code, predicate that holds for valid input, reason)
Rule = Tuple[str, Callable[..., bool], str]

PRESCORING_RULES: List[Rule] = [
    (
        "amount_too_small",
        lambda req, age: req.amount >= MIN_AMOUNT,
        "Loan amount must be at least 20000.",
    ),
    (
        "term_too_short",
        lambda req, age: req.term >= MIN_TERM_MONTHS,
        "Loan term must be at least 6 months.",
    ),
    (
        "invalid_email",
        lambda req, age: EMAIL_PATTERN.match(req.email) is not None,
        "Invalid email format.",
    ),
    (
        "invalid_passport",
        lambda req, age: len(req.passport_series) == 4 and len(req.passport_number) == 6,
        "Invalid passport details.",
    ),
    (
        "borrower_too_young",
        lambda req, age: age >= MIN_PRESCORING_AGE,
        "Borrower must be at least 18 years old.",
    ),
]

SCORING_RULES: List[Rule] = [
    (
        "amount_not_positive",
        lambda data, age: data.amount >= SMALLEST_AMOUNT,
        "Amount must be greater than zero.",
    ),
    (
        "term_not_positive",
        lambda data, age: data.term > 0,
        "Term must be greater than zero.",
    ),
    (
        "age_out_of_range",
        lambda data, age: MIN_SCORING_AGE <= age <= MAX_SCORING_AGE,
        "Borrower age must be between 20 and 65 years.",
    ),
    (
        "insufficient_experience",
        lambda data, age: (
            data.employment.work_experience_total >= MIN_TOTAL_EXPERIENCE_MONTHS
            and data.employment.work_experience_current >= MIN_CURRENT_EXPERIENCE_MONTHS
        ),
        "Insufficient work experience.",
    ),
    (
        "amount_exceeds_income",
        lambda data, age: data.amount <= data.employment.salary * MAX_SALARY_MULTIPLIER,
        "Loan amount exceeds 24 times monthly income.",
    ),
    (
        "unemployed",
        lambda data, age: data.employment.employment_status != EmploymentStatus.UNEMPLOYED,
        "Loan cannot be issued to unemployed borrowers.",
    ),
]


def first_violation(rules: List[Rule], subject, age: int) -> Optional[ValidationError]:
    """Return the first broken rule as a ValidationError, or None if all hold"""
    for code, holds, reason in rules:
        if not holds(subject, age):
            return ValidationError(code, reason)
    return None


def validate_prescoring(request: LoanRequest, today: date | None = None) -> None:
    """
    Check a preliminary loan request.

    Raises:
        ValidationError: for the first rule the request breaks
    """
    age = full_years_between(request.birth_date, today or date.today())
    error = first_violation(PRESCORING_RULES, request, age)
    if error is not None:
        raise error


def validate_scoring(scoring_data: ScoringInput, today: date | None = None) -> None:
    """
    Check full scoring data.

    Raises:
        ValidationError: for the first rule the borrower breaks
    """
    age = full_years_between(scoring_data.birth_date, today or date.today())
    error = first_violation(SCORING_RULES, scoring_data, age)
    if error is not None:
        raise error

"""Rate derivation - offer discounts and the multi-factor scoring policy"""

import logging
from datetime import date
from decimal import Decimal, ROUND_HALF_UP
from enum import Enum
from typing import Dict, Type

from credit_calculator.domain.models import (
    EmploymentStatus,
    Gender,
    MaritalStatus,
    Position,
    RateConfiguration,
    ScoringInput,
)
from credit_calculator.utils.date_utils import full_years_between

logger = logging.getLogger(__name__)

RATE_QUANTUM = Decimal("0.01")

EMPLOYMENT_STATUS_ADJUSTMENT: Dict[EmploymentStatus, Decimal] = {
    EmploymentStatus.UNEMPLOYED: Decimal("0"),  # rejected during validation
    EmploymentStatus.SELF_EMPLOYED: Decimal("2"),
    EmploymentStatus.EMPLOYED: Decimal("0"),
    EmploymentStatus.BUSINESS_OWNER: Decimal("1"),
}

POSITION_ADJUSTMENT: Dict[Position, Decimal] = {
    Position.WORKER: Decimal("0"),
    Position.MID_MANAGER: Decimal("-2"),
    Position.TOP_MANAGER: Decimal("-3"),
    Position.OWNER: Decimal("0"),
}

MARITAL_STATUS_ADJUSTMENT: Dict[MaritalStatus, Decimal] = {
    MaritalStatus.MARRIED: Decimal("-3"),
    MaritalStatus.DIVORCED: Decimal("1"),
    MaritalStatus.SINGLE: Decimal("0"),
    MaritalStatus.WIDOW_WIDOWER: Decimal("0"),
}

# Inclusive age bands that earn the age/gender discount
DISCOUNTED_AGE_BANDS: Dict[Gender, tuple[int, int]] = {
    Gender.FEMALE: (32, 60),
    Gender.MALE: (30, 55),
}
AGE_GENDER_DISCOUNT = Decimal("-3")
NON_BINARY_SURCHARGE = Decimal("7")


def _require_exhaustive(table: Dict, enum_type: Type[Enum]) -> None:
    missing = set(enum_type) - set(table)
    if missing:
        raise RuntimeError(
            f"{enum_type.__name__} adjustment table is missing {sorted(m.value for m in missing)}"
        )


_require_exhaustive(EMPLOYMENT_STATUS_ADJUSTMENT, EmploymentStatus)
_require_exhaustive(POSITION_ADJUSTMENT, Position)
_require_exhaustive(MARITAL_STATUS_ADJUSTMENT, MaritalStatus)


def determine_offer_rate(
    config: RateConfiguration,
    is_insurance_enabled: bool,
    is_salary_client: bool,
) -> Decimal:
    """Base rate less the insurance and salary-client discounts (no rounding)"""
    rate = config.base_rate
    if is_insurance_enabled:
        rate -= config.insurance_discount
    if is_salary_client:
        rate -= config.salary_client_discount
    return rate


def age_gender_adjustment(gender: Gender, age: int) -> Decimal:
    """
    Discount for borrowers in the low-risk age band of their gender,
    surcharge for non-binary borrowers regardless of age.
    """
    if gender == Gender.NON_BINARY:
        return NON_BINARY_SURCHARGE
    if gender not in DISCOUNTED_AGE_BANDS:
        raise ValueError(f"Unsupported gender: {gender!r}")

    low, high = DISCOUNTED_AGE_BANDS[gender]
    if low <= age <= high:
        return AGE_GENDER_DISCOUNT
    return Decimal("0")


def determine_credit_rate(
    config: RateConfiguration,
    scoring_data: ScoringInput,
    today: date | None = None,
) -> Decimal:
    """
    Final credit rate from the base rate and the borrower's profile.

    Adjustments are applied in order and are all additive:
    1. employment status
    2. position
    3. marital status
    4. age and gender

    The result is rounded half-up to 2 decimals. It is not clamped.
    """
    employment = scoring_data.employment
    age = full_years_between(scoring_data.birth_date, today or date.today())

    rate = config.base_rate
    rate += EMPLOYMENT_STATUS_ADJUSTMENT[employment.employment_status]
    rate += POSITION_ADJUSTMENT[employment.position]
    rate += MARITAL_STATUS_ADJUSTMENT[scoring_data.marital_status]
    rate += age_gender_adjustment(scoring_data.gender, age)

    rate = rate.quantize(RATE_QUANTUM, rounding=ROUND_HALF_UP)
    logger.debug("Determined credit rate", extra={"rate": str(rate), "age": age})
    return rate

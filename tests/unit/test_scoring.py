"""Unit tests for rate derivation"""

import pytest
from dataclasses import replace
from decimal import Decimal
from dateutil.relativedelta import relativedelta
from credit_calculator.domain.models import (
    EmploymentStatus,
    Gender,
    MaritalStatus,
    Position,
)
from credit_calculator.domain.scoring import (
    EMPLOYMENT_STATUS_ADJUSTMENT,
    MARITAL_STATUS_ADJUSTMENT,
    POSITION_ADJUSTMENT,
    age_gender_adjustment,
    determine_credit_rate,
    determine_offer_rate,
)


def _neutral(scoring_input, today):
    """Borrower whose profile earns no adjustment at all (male aged 25)"""
    return replace(scoring_input, birth_date=today - relativedelta(years=25))


def test_offer_rate_without_options_is_base_rate(rate_config):
    assert determine_offer_rate(rate_config, False, False) == rate_config.base_rate


def test_offer_rate_discounts(rate_config):
    assert determine_offer_rate(rate_config, True, False) == Decimal("12.00")
    assert determine_offer_rate(rate_config, False, True) == Decimal("14.00")
    assert determine_offer_rate(rate_config, True, True) == Decimal("11.00")


def test_offer_rate_discounts_are_additive(rate_config):
    base = determine_offer_rate(rate_config, False, False)
    insurance_only = determine_offer_rate(rate_config, True, False)
    salary_only = determine_offer_rate(rate_config, False, True)
    both = determine_offer_rate(rate_config, True, True)

    assert base - insurance_only == rate_config.insurance_discount
    assert base - salary_only == rate_config.salary_client_discount
    assert base - both == (base - insurance_only) + (base - salary_only)


def test_offer_rate_is_not_rounded(rate_config):
    config = replace(rate_config, base_rate=Decimal("15.125"), insurance_discount=Decimal("0.0005"))
    assert determine_offer_rate(config, True, False) == Decimal("15.1245")


def test_credit_rate_male_in_discount_band(rate_config, scoring_input, today):
    """Employed worker, single, male aged 34: only the age/gender discount"""
    assert determine_credit_rate(rate_config, scoring_input, today) == Decimal("12.00")


def test_credit_rate_neutral_profile_is_base_rate(rate_config, scoring_input, today):
    assert determine_credit_rate(rate_config, _neutral(scoring_input, today), today) == Decimal("15.00")


def test_credit_rate_non_binary_surcharge(rate_config, scoring_input, today):
    non_binary = replace(scoring_input, gender=Gender.NON_BINARY)
    assert determine_credit_rate(rate_config, non_binary, today) == Decimal("22.00")


@pytest.mark.parametrize(
    "status, expected",
    [
        (EmploymentStatus.SELF_EMPLOYED, Decimal("17.00")),
        (EmploymentStatus.BUSINESS_OWNER, Decimal("16.00")),
        (EmploymentStatus.EMPLOYED, Decimal("15.00")),
    ],
)
def test_credit_rate_employment_status(rate_config, scoring_input, today, status, expected):
    data = _neutral(scoring_input, today)
    data = replace(data, employment=replace(data.employment, employment_status=status))
    assert determine_credit_rate(rate_config, data, today) == expected


@pytest.mark.parametrize(
    "position, expected",
    [
        (Position.MID_MANAGER, Decimal("13.00")),
        (Position.TOP_MANAGER, Decimal("12.00")),
        (Position.WORKER, Decimal("15.00")),
        (Position.OWNER, Decimal("15.00")),
    ],
)
def test_credit_rate_position(rate_config, scoring_input, today, position, expected):
    data = _neutral(scoring_input, today)
    data = replace(data, employment=replace(data.employment, position=position))
    assert determine_credit_rate(rate_config, data, today) == expected


@pytest.mark.parametrize(
    "marital_status, expected",
    [
        (MaritalStatus.MARRIED, Decimal("12.00")),
        (MaritalStatus.DIVORCED, Decimal("16.00")),
        (MaritalStatus.SINGLE, Decimal("15.00")),
        (MaritalStatus.WIDOW_WIDOWER, Decimal("15.00")),
    ],
)
def test_credit_rate_marital_status(rate_config, scoring_input, today, marital_status, expected):
    data = replace(_neutral(scoring_input, today), marital_status=marital_status)
    assert determine_credit_rate(rate_config, data, today) == expected


def test_credit_rate_adjustments_stack(rate_config, scoring_input, today):
    """Self-employed top manager, married woman aged 40"""
    data = replace(
        scoring_input,
        gender=Gender.FEMALE,
        birth_date=today - relativedelta(years=40),
        marital_status=MaritalStatus.MARRIED,
        employment=replace(
            scoring_input.employment,
            employment_status=EmploymentStatus.SELF_EMPLOYED,
            position=Position.TOP_MANAGER,
        ),
    )
    # 15 + 2 - 3 - 3 - 3
    assert determine_credit_rate(rate_config, data, today) == Decimal("8.00")


def test_credit_rate_is_not_clamped(rate_config, scoring_input, today):
    config = replace(rate_config, base_rate=Decimal("2"))
    data = replace(
        scoring_input,
        marital_status=MaritalStatus.MARRIED,
        employment=replace(scoring_input.employment, position=Position.TOP_MANAGER),
    )
    # 2 - 3 - 3 - 3
    assert determine_credit_rate(config, data, today) == Decimal("-7.00")


def test_credit_rate_rounds_half_up(rate_config, scoring_input, today):
    config = replace(rate_config, base_rate=Decimal("15.005"))
    assert determine_credit_rate(config, _neutral(scoring_input, today), today) == Decimal("15.01")


@pytest.mark.parametrize(
    "gender, age, expected",
    [
        (Gender.FEMALE, 31, Decimal("0")),
        (Gender.FEMALE, 32, Decimal("-3")),
        (Gender.FEMALE, 60, Decimal("-3")),
        (Gender.FEMALE, 61, Decimal("0")),
        (Gender.MALE, 29, Decimal("0")),
        (Gender.MALE, 30, Decimal("-3")),
        (Gender.MALE, 55, Decimal("-3")),
        (Gender.MALE, 56, Decimal("0")),
        (Gender.NON_BINARY, 25, Decimal("7")),
        (Gender.NON_BINARY, 45, Decimal("7")),
    ],
)
def test_age_gender_adjustment_bands(gender, age, expected):
    assert age_gender_adjustment(gender, age) == expected


@pytest.mark.parametrize(
    "table, enum_type",
    [
        (EMPLOYMENT_STATUS_ADJUSTMENT, EmploymentStatus),
        (POSITION_ADJUSTMENT, Position),
        (MARITAL_STATUS_ADJUSTMENT, MaritalStatus),
    ],
)
def test_adjustment_tables_cover_every_member(table, enum_type):
    assert set(table) == set(enum_type)

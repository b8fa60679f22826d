"""Pytest fixtures for testing"""

import pytest
from datetime import date
from decimal import Decimal
from dateutil.relativedelta import relativedelta
from fastapi.testclient import TestClient
from credit_calculator.api.main import create_app
from credit_calculator.domain.calculator import CreditCalculator
from credit_calculator.domain.models import (
    Employment,
    EmploymentStatus,
    Gender,
    LoanRequest,
    MaritalStatus,
    Position,
    RateConfiguration,
    ScoringInput,
)


@pytest.fixture
def today() -> date:
    """Fixed calculation date so ages and schedule dates are reproducible"""
    return date(2024, 6, 1)


@pytest.fixture
def rate_config() -> RateConfiguration:
    return RateConfiguration(
        base_rate=Decimal("15.00"),
        insurance_discount=Decimal("3.00"),
        salary_client_discount=Decimal("1.00"),
        insurance_cost=Decimal("10000.00"),
    )


@pytest.fixture
def calculator(rate_config: RateConfiguration) -> CreditCalculator:
    return CreditCalculator(rate_config)


@pytest.fixture
def loan_request() -> LoanRequest:
    """Preliminary request that passes every prescoring rule"""
    return LoanRequest(
        amount=Decimal("100000"),
        term=12,
        first_name="Ivan",
        last_name="Petrov",
        middle_name="Sergeevich",
        email="test@example.com",
        birth_date=date(1990, 1, 1),
        passport_series="1234",
        passport_number="123456",
    )


@pytest.fixture
def scoring_input() -> ScoringInput:
    """
    Scoring data that passes every rule and earns no adjustment except the
    male 30-55 discount (age 34 on the `today` fixture)
    """
    return ScoringInput(
        amount=Decimal("100000"),
        term=12,
        first_name="Ivan",
        last_name="Petrov",
        middle_name="Sergeevich",
        gender=Gender.MALE,
        birth_date=date(1990, 1, 1),
        passport_series="1234",
        passport_number="123456",
        passport_issue_date=date(2010, 2, 1),
        passport_issue_branch="Central branch",
        marital_status=MaritalStatus.SINGLE,
        dependent_amount=0,
        employment=Employment(
            employment_status=EmploymentStatus.EMPLOYED,
            employer_inn="7707083893",
            salary=Decimal("50000"),
            position=Position.WORKER,
            work_experience_total=20,
            work_experience_current=5,
        ),
        account_number="40817810099910004312",
        is_insurance_enabled=True,
        is_salary_client=True,
    )


@pytest.fixture
def client(rate_config: RateConfiguration) -> TestClient:
    """Create FastAPI test client with a known rate configuration"""
    app = create_app(rate_config)
    return TestClient(app)


@pytest.fixture
def offer_payload() -> dict:
    """Valid JSON body for POST /calculator/offers"""
    return {
        "amount": "100000",
        "term": 12,
        "first_name": "Ivan",
        "last_name": "Petrov",
        "email": "test@example.com",
        "birth_date": (date.today() - relativedelta(years=34)).isoformat(),
        "passport_series": "1234",
        "passport_number": "123456",
    }


@pytest.fixture
def scoring_payload() -> dict:
    """Valid JSON body for POST /calculator/calc (male aged 34)"""
    return {
        "amount": "100000",
        "term": 12,
        "first_name": "Ivan",
        "last_name": "Petrov",
        "gender": "male",
        "birth_date": (date.today() - relativedelta(years=34)).isoformat(),
        "passport_series": "1234",
        "passport_number": "123456",
        "marital_status": "single",
        "dependent_amount": 0,
        "employment": {
            "employment_status": "employed",
            "employer_inn": "7707083893",
            "salary": "50000",
            "position": "worker",
            "work_experience_total": 20,
            "work_experience_current": 5,
        },
        "account_number": "40817810099910004312",
        "is_insurance_enabled": False,
        "is_salary_client": False,
    }

"""Credit calculator - offer generation and full credit pricing"""

import itertools
import logging
from datetime import date
from typing import List

from credit_calculator.domain.models import (
    CreditResult,
    LoanOffer,
    LoanRequest,
    RateConfiguration,
    ScoringInput,
)
from credit_calculator.domain.payments import calculate_monthly_payment, calculate_psk, to_cents
from credit_calculator.domain.schedule import generate_payment_schedule
from credit_calculator.domain.scoring import determine_credit_rate, determine_offer_rate
from credit_calculator.domain.validation import validate_prescoring, validate_scoring

logger = logging.getLogger(__name__)

OPTION_VALUES = (False, True)


class CreditCalculator:
    """
    Prices loans against a fixed rate configuration.

    Holds no state besides the configuration, so one instance can serve
    concurrent requests.
    """

    def __init__(self, config: RateConfiguration):
        self.config = config

    def generate_offers(self, request: LoanRequest, today: date | None = None) -> List[LoanOffer]:
        """
        Quote one offer per insurance/salary-client combination.

        Raises:
            ValidationError: if the request breaks a prescoring rule

        Returns:
            Four offers sorted by ascending rate (ties keep generation order)
        """
        logger.debug("Generating loan offers", extra={"amount": str(request.amount), "term": request.term})
        validate_prescoring(request, today)

        offers = [
            self._create_offer(request, is_insurance_enabled, is_salary_client)
            for is_insurance_enabled, is_salary_client in itertools.product(OPTION_VALUES, OPTION_VALUES)
        ]
        # sorted() is stable
        return sorted(offers, key=lambda offer: offer.rate)

    def _create_offer(self, request: LoanRequest, is_insurance_enabled: bool, is_salary_client: bool) -> LoanOffer:
        rate = determine_offer_rate(self.config, is_insurance_enabled, is_salary_client)

        requested_amount = to_cents(request.amount)
        total_amount = requested_amount
        if is_insurance_enabled:
            total_amount += self.config.insurance_cost

        offer = LoanOffer(
            requested_amount=requested_amount,
            total_amount=total_amount,
            term=request.term,
            monthly_payment=calculate_monthly_payment(total_amount, rate, request.term),
            rate=rate,
            is_insurance_enabled=is_insurance_enabled,
            is_salary_client=is_salary_client,
        )
        logger.debug("Created loan offer", extra={"statement_id": str(offer.statement_id), "rate": str(rate)})
        return offer

    def calculate_credit(self, scoring_data: ScoringInput, today: date | None = None) -> CreditResult:
        """
        Score the borrower and price the credit.

        Raises:
            ValidationError: if the borrower breaks a scoring rule

        Returns:
            CreditResult with final rate, PSK and full payment schedule
        """
        if today is None:
            today = date.today()

        validate_scoring(scoring_data, today)

        rate = determine_credit_rate(self.config, scoring_data, today)
        # Schedule principal portions must add up to the credited amount
        amount, term = to_cents(scoring_data.amount), scoring_data.term

        credit = CreditResult(
            amount=amount,
            term=term,
            monthly_payment=calculate_monthly_payment(amount, rate, term),
            rate=rate,
            psk=calculate_psk(amount, rate, term),
            is_insurance_enabled=scoring_data.is_insurance_enabled,
            is_salary_client=scoring_data.is_salary_client,
            payment_schedule=generate_payment_schedule(amount, rate, term, start_date=today),
        )
        logger.info(
            "Calculated credit",
            extra={"rate": str(credit.rate), "psk": str(credit.psk), "term": term},
        )
        return credit

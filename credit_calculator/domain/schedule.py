"""Amortization schedule generation for annuity credits"""

import logging
from datetime import date
from decimal import Decimal
from typing import List

from credit_calculator.domain.models import PaymentScheduleEntry
from credit_calculator.domain.payments import calculate_monthly_payment, monthly_rate, to_cents
from credit_calculator.utils.date_utils import add_months

logger = logging.getLogger(__name__)


def generate_payment_schedule(
    amount: Decimal,
    annual_rate: Decimal,
    term: int,
    start_date: date | None = None,
) -> List[PaymentScheduleEntry]:
    """
    Generate the month-by-month repayment schedule of an annuity credit.

    Requirements:
    - One entry per month, numbered 1..term
    - Every amount is rounded to cents before it feeds the next month
    - Last installment is remaining debt plus its interest, so the
      schedule always closes at exactly 0.00

    Args:
        amount: Credit principal, rounded to cents before the first month
        annual_rate: Annual interest rate in percent
        term: Number of monthly payments
        start_date: Date the schedule counts from (default: today)

    Returns:
        List of PaymentScheduleEntry, entry i due start_date + i months

    Example:
        100000 at 12% over 12 months → flat payment 8884.88, the twelfth
        payment shifted by whatever cents the rounding left over
    """
    if start_date is None:
        start_date = date.today()

    amount = to_cents(amount)
    m = monthly_rate(annual_rate)
    flat_payment = calculate_monthly_payment(amount, annual_rate, term)
    remaining_debt = amount

    schedule = []
    for number in range(1, term + 1):
        interest_payment = to_cents(remaining_debt * m)

        # Last installment clears whatever rounding left on the balance
        if number == term:
            total_payment = to_cents(remaining_debt + interest_payment)
        else:
            total_payment = flat_payment

        debt_payment = to_cents(total_payment - interest_payment)
        remaining_debt = to_cents(remaining_debt - debt_payment)

        entry = PaymentScheduleEntry(
            number=number,
            date=add_months(start_date, number),
            total_payment=total_payment,
            interest_payment=interest_payment,
            debt_payment=debt_payment,
            remaining_debt=remaining_debt,
        )
        logger.debug(
            "Generated payment schedule entry",
            extra={"number": number, "remaining_debt": str(remaining_debt)},
        )
        schedule.append(entry)

    return schedule

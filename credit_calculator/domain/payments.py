"""Annuity payment formula and effective cost of credit (PSK)"""

import logging
from decimal import Decimal, ROUND_HALF_UP, localcontext

logger = logging.getLogger(__name__)

CENT = Decimal("0.01")
RATE_SCALE = Decimal("1E-10")  # 10 fractional digits for intermediate ratios
MONTHS_PER_YEAR_PERCENT = Decimal("1200")
POWER_PRECISION = 34  # significant digits, as in IEEE decimal128
DIVISION_PRECISION = 50


def to_cents(value: Decimal) -> Decimal:
    return value.quantize(CENT, rounding=ROUND_HALF_UP)


def monthly_rate(annual_rate: Decimal) -> Decimal:
    """Annual percentage rate to monthly fraction, 10 decimals half-up"""
    with localcontext() as ctx:
        ctx.prec = DIVISION_PRECISION
        return (annual_rate / MONTHS_PER_YEAR_PERCENT).quantize(RATE_SCALE, rounding=ROUND_HALF_UP)


def calculate_monthly_payment(principal: Decimal, annual_rate: Decimal, term: int) -> Decimal:
    """
    Fixed annuity payment that repays `principal` over `term` months.

    payment = m * P / (1 - (1 + m) ^ -N), m = annual_rate / 1200

    With a zero rate the formula degenerates to 0/0 and the principal is
    split evenly instead.

    Returns:
        Monthly payment rounded half-up to cents
    """
    if term <= 0:
        raise ValueError(f"Term must be positive, got {term}")

    m = monthly_rate(annual_rate)
    with localcontext() as ctx:
        ctx.prec = DIVISION_PRECISION
        if m == 0:
            payment = principal / term
        else:
            ctx.prec = POWER_PRECISION
            denominator = Decimal(1) - (Decimal(1) + m) ** -term
            ctx.prec = DIVISION_PRECISION
            payment = (m * principal) / denominator
        payment = to_cents(payment)

    logger.debug("Calculated monthly payment", extra={"monthly_payment": str(payment)})
    return payment


def calculate_psk(principal: Decimal, annual_rate: Decimal, term: int) -> Decimal:
    """
    Effective cost of credit as a percentage of the principal.

    Uses the flat annuity payment for every month, not the reconciled last
    installment of the schedule.
    """
    total_paid = calculate_monthly_payment(principal, annual_rate, term) * term
    with localcontext() as ctx:
        ctx.prec = DIVISION_PRECISION
        overshoot = ((total_paid - principal) / principal).quantize(RATE_SCALE, rounding=ROUND_HALF_UP)
    psk = (overshoot * 100).quantize(CENT, rounding=ROUND_HALF_UP)

    logger.debug("Calculated PSK", extra={"psk": str(psk)})
    return psk

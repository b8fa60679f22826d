"""POST /calculator/calc - scoring and full credit pricing endpoint"""

import time
import logging

from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.responses import JSONResponse

from credit_calculator.api.v1.schemas import ScoringDataSchema, CreditSchema
from credit_calculator.api.dependencies import get_calculator, get_request_id
from credit_calculator.domain.calculator import CreditCalculator
from credit_calculator.domain.exceptions import ValidationError
from credit_calculator.infrastructure.observability.metrics import record_credit, record_rejection, record_error
from credit_calculator.infrastructure.observability.logging import log_credit, log_rejection

router = APIRouter()


@router.post("/calc", response_model=CreditSchema)
def calculate_credit(
    request_body: ScoringDataSchema,
    request: Request,
    calculator: CreditCalculator = Depends(get_calculator),
):
    """
    Score the borrower and price the credit.

    Returns:
        Final rate, monthly payment, PSK and the month-by-month schedule
    """
    start_time = time.time()
    request_id = get_request_id(request)

    try:
        credit = calculator.calculate_credit(request_body.to_domain())

    except ValidationError as e:
        record_rejection("credit", e.rule)
        log_rejection(request_id, "credit", e.rule, e.reason)
        return JSONResponse(status_code=400, content={"detail": e.reason, "rule": e.rule})

    except Exception as e:
        record_error("credit")
        logging.error(f"Unexpected error: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=500, detail="Internal server error")

    duration_ms = (time.time() - start_time) * 1000
    record_credit(credit.rate)
    log_credit(request_id, str(credit.rate), str(credit.psk), credit.term, duration_ms)

    return CreditSchema.model_validate(credit)

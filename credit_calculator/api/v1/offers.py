"""POST /calculator/offers - preliminary loan offers endpoint"""

import time
import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.responses import JSONResponse

from credit_calculator.api.v1.schemas import LoanRequestSchema, LoanOfferSchema
from credit_calculator.api.dependencies import get_calculator, get_request_id
from credit_calculator.domain.calculator import CreditCalculator
from credit_calculator.domain.exceptions import ValidationError
from credit_calculator.infrastructure.observability.metrics import record_offers, record_rejection, record_error
from credit_calculator.infrastructure.observability.logging import log_offers, log_rejection

router = APIRouter()


@router.post("/offers", response_model=List[LoanOfferSchema])
def generate_offers(
    request_body: LoanRequestSchema,
    request: Request,
    calculator: CreditCalculator = Depends(get_calculator),
):
    """
    Quote four loan offers for every insurance/salary-client combination.

    Flow:
    1. Check prescoring rules (amount, term, email, passport, age)
    2. Price each combination
    3. Return offers sorted by ascending rate
    """
    start_time = time.time()
    request_id = get_request_id(request)

    try:
        offers = calculator.generate_offers(request_body.to_domain())

    except ValidationError as e:
        record_rejection("offers", e.rule)
        log_rejection(request_id, "offers", e.rule, e.reason)
        return JSONResponse(status_code=400, content={"detail": e.reason, "rule": e.rule})

    except Exception as e:
        record_error("offers")
        logging.error(f"Unexpected error: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=500, detail="Internal server error")

    duration_ms = (time.time() - start_time) * 1000
    record_offers()
    log_offers(request_id, len(offers), str(offers[0].rate), duration_ms)

    return [LoanOfferSchema.model_validate(offer) for offer in offers]

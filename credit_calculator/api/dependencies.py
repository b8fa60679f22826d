"""Dependency injection for FastAPI endpoints"""

from fastapi import Request

from credit_calculator.domain.calculator import CreditCalculator


def get_request_id(request: Request) -> str:
    """Extract request ID from request state"""
    return getattr(request.state, "request_id", "unknown")


def get_calculator(request: Request) -> CreditCalculator:
    """Provide the calculator built at application startup"""
    return request.app.state.calculator

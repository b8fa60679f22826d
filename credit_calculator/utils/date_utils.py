"""Date manipulation utilities"""

from datetime import date

from dateutil.relativedelta import relativedelta


def add_months(from_date: date, months: int) -> date:
    """Add calendar months, clamping to the last day of shorter months"""
    return from_date + relativedelta(months=months)


def full_years_between(start: date, end: date) -> int:
    """Number of complete years from start to end (age on `end`)"""
    return relativedelta(end, start).years

"""Input validation for loan parameters.

Checks run in a fixed order and the first failing check wins. The error is
returned to the caller, never raised.
"""
import math
import numbers
from typing import Optional

from mortgage_calc.config import MAX_INTEREST_RATE, MIN_INTEREST_RATE
from mortgage_calc.data_structures import LoanInputs
from mortgage_calc.exceptions import ValidationError


INVALID_INTEREST_RATE = "Please enter a valid interest rate (0 or greater)"
INVALID_LOAN_AMOUNT = "Please enter a valid loan amount (greater than 0)"
INVALID_LOAN_DURATION = "Please enter a valid loan duration (whole number of years, greater than 0)"
INTEREST_RATE_TOO_HIGH = (
    f"Interest rate seems too high. Please enter a rate between "
    f"{MIN_INTEREST_RATE} and {MAX_INTEREST_RATE}%"
)
INVALID_LOT_FEES = "Please enter a valid lot fees amount (0 or greater)"


def _is_real(value) -> bool:
    # bool is an Integral subclass but never a meaningful amount
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        return False
    return math.isfinite(value)


def _is_whole(value) -> bool:
    if isinstance(value, numbers.Integral):
        return True
    return float(value).is_integer()


def validate(interest_rate, principal, term_years, fees) -> Optional[ValidationError]:
    """Validate raw loan parameters.
    
    Args:
        interest_rate: Annual rate in percent.
        principal: Loan amount.
        term_years: Loan duration in years.
        fees: Monthly lot fees.
        
    Returns:
        The first ValidationError found, or None if all inputs are valid.
    """
    if not _is_real(interest_rate) or interest_rate < MIN_INTEREST_RATE:
        return ValidationError(INVALID_INTEREST_RATE, "interest_rate")
    if not _is_real(principal) or principal <= 0:
        return ValidationError(INVALID_LOAN_AMOUNT, "principal")
    if not _is_real(term_years) or term_years <= 0 or not _is_whole(term_years):
        return ValidationError(INVALID_LOAN_DURATION, "term_years")
    if interest_rate > MAX_INTEREST_RATE:
        return ValidationError(INTEREST_RATE_TOO_HIGH, "interest_rate")
    if not _is_real(fees) or fees < 0:
        return ValidationError(INVALID_LOT_FEES, "fees")
    return None


def validate_inputs(inputs: LoanInputs) -> Optional[ValidationError]:
    return validate(inputs.interest_rate, inputs.principal, inputs.term_years, inputs.fees)

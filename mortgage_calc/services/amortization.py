"""Amortization engine for the Mortgage Calculator.

Pure functions that turn validated loan parameters into payment totals:
- Fixed-rate monthly payment (standard amortization formula)
- Straight-line repayment when the interest rate is zero
- Monthly fee composition

All arithmetic is plain float; nothing is rounded before display.
"""
import math

from mortgage_calc.config import MONTHS_PER_YEAR
from mortgage_calc.data_structures import AmortizationResult, LoanInputs


def compute_payment(principal, annual_rate_percent, term_years) -> AmortizationResult:
    """Compute the fee-free monthly payment and loan totals.
    
    Uses M = P * r(1+r)^n / ((1+r)^n - 1) with r the monthly rate and n the
    number of monthly payments, evaluated as P * r / (1 - (1+r)^-n) through
    log1p/expm1 so that very small rates and very long terms stay finite.
    A zero rate divides the principal evenly.
    
    Args:
        principal: Loan amount.
        annual_rate_percent: Annual interest rate as a percentage (6.5 for 6.5%).
        term_years: Loan duration in whole years.
        
    Returns:
        AmortizationResult without fees.
    """
    monthly_rate = annual_rate_percent / 100 / MONTHS_PER_YEAR
    payment_count = int(term_years) * MONTHS_PER_YEAR
    
    if monthly_rate == 0:
        monthly_payment = principal / payment_count
    else:
        discount = -math.expm1(-payment_count * math.log1p(monthly_rate))
        monthly_payment = principal * monthly_rate / discount
    
    total_amount = monthly_payment * payment_count
    total_interest = total_amount - principal
    
    return AmortizationResult(
        monthly_payment=monthly_payment,
        total_interest=total_interest,
        total_amount=total_amount,
        payment_count=payment_count,
    )


def apply_fees(result: AmortizationResult, monthly_fees) -> AmortizationResult:
    """Add a flat monthly fee on top of a computed payment.
    
    Fees are a pass-through cost: they raise the monthly payment and the
    total amount, while total interest stays the fee-free loan interest.
    """
    monthly_payment = result.monthly_payment + monthly_fees
    return AmortizationResult(
        monthly_payment=monthly_payment,
        total_interest=result.total_interest,
        total_amount=monthly_payment * result.payment_count,
        payment_count=result.payment_count,
    )


def calculate(inputs: LoanInputs) -> AmortizationResult:
    """Full fees-inclusive result for a set of validated inputs."""
    base = compute_payment(inputs.principal, inputs.interest_rate, inputs.term_years)
    return apply_fees(base, inputs.fees)

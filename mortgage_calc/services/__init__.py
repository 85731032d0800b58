"""Services package for the Mortgage Calculator business logic.

This package contains the calculation engine, input validation and the
comparison store used by the calculator controller.
"""

from .amortization import compute_payment, apply_fees, calculate
from .validation import validate, validate_inputs
from .comparison_store import ComparisonStore

__all__ = ['compute_payment', 'apply_fees', 'calculate',
           'validate', 'validate_inputs', 'ComparisonStore']

"""Tests for loan input validation.

Checks run in a fixed order; the first failing check decides the message.
"""
import math
import unittest

from mortgage_calc.data_structures import LoanInputs
from mortgage_calc.exceptions import ValidationError, MortgageCalcError
from mortgage_calc.services.validation import (
    validate,
    validate_inputs,
    INVALID_INTEREST_RATE,
    INVALID_LOAN_AMOUNT,
    INVALID_LOAN_DURATION,
    INTEREST_RATE_TOO_HIGH,
    INVALID_LOT_FEES,
)


class TestValidate(unittest.TestCase):

    def test_valid_inputs(self):
        self.assertIsNone(validate(5, 100000, 30, 0))
        self.assertIsNone(validate(0, 1, 1, 0))
        self.assertIsNone(validate(100, 100000, 30, 250.5))

    def test_negative_rate(self):
        err = validate(-1, 100000, 30, 0)
        self.assertIsInstance(err, ValidationError)
        self.assertEqual(err.message, INVALID_INTEREST_RATE)
        self.assertEqual(err.field, "interest_rate")

    def test_zero_principal(self):
        err = validate(5, 0, 30, 0)
        self.assertEqual(err.message, INVALID_LOAN_AMOUNT)
        self.assertEqual(err.field, "principal")

    def test_zero_duration(self):
        err = validate(5, 100000, 0, 0)
        self.assertEqual(err.message, INVALID_LOAN_DURATION)

    def test_fractional_duration(self):
        """Test that fractional years are rejected."""
        err = validate(5, 100000, 2.5, 0)
        self.assertEqual(err.message, INVALID_LOAN_DURATION)

    def test_whole_float_duration_accepted(self):
        self.assertIsNone(validate(5, 100000, 30.0, 0))

    def test_negative_fees(self):
        err = validate(5, 100000, 30, -10)
        self.assertEqual(err.message, INVALID_LOT_FEES)
        self.assertEqual(err.field, "fees")

    def test_rate_too_high(self):
        err = validate(150, 100000, 30, 0)
        self.assertEqual(err.message, INTEREST_RATE_TOO_HIGH)
        self.assertIn("too high", err.message)

    def test_messages(self):
        self.assertEqual(INVALID_INTEREST_RATE, "Please enter a valid interest rate (0 or greater)")
        self.assertEqual(INTEREST_RATE_TOO_HIGH,
                         "Interest rate seems too high. Please enter a rate between 0 and 100%")

    def test_nan_values(self):
        self.assertEqual(validate(math.nan, 100000, 30, 0).message, INVALID_INTEREST_RATE)
        self.assertEqual(validate(5, math.nan, 30, 0).message, INVALID_LOAN_AMOUNT)
        self.assertEqual(validate(5, 100000, math.nan, 0).message, INVALID_LOAN_DURATION)
        self.assertEqual(validate(5, 100000, 30, math.nan).message, INVALID_LOT_FEES)

    def test_infinite_values_rejected(self):
        self.assertEqual(validate(5, math.inf, 30, 0).message, INVALID_LOAN_AMOUNT)
        self.assertEqual(validate(5, 100000, 30, math.inf).message, INVALID_LOT_FEES)

    def test_non_numeric_values(self):
        self.assertEqual(validate("5", 100000, 30, 0).message, INVALID_INTEREST_RATE)
        self.assertEqual(validate(5, None, 30, 0).message, INVALID_LOAN_AMOUNT)
        self.assertEqual(validate(5, 100000, True, 0).message, INVALID_LOAN_DURATION)

    def test_order_rate_before_amount(self):
        """Test that the first failing check wins."""
        err = validate(-1, 0, 0, -1)
        self.assertEqual(err.message, INVALID_INTEREST_RATE)

    def test_order_duration_before_ceiling(self):
        err = validate(150, 100000, 0, 0)
        self.assertEqual(err.message, INVALID_LOAN_DURATION)

    def test_order_ceiling_before_fees(self):
        err = validate(150, 100000, 30, -5)
        self.assertEqual(err.message, INTEREST_RATE_TOO_HIGH)

    def test_error_is_returned_not_raised(self):
        err = validate(5, -100, 30, 0)
        self.assertIsInstance(err, MortgageCalcError)
        self.assertEqual(str(err), INVALID_LOAN_AMOUNT)


class TestValidateInputs(unittest.TestCase):

    def test_wraps_validate(self):
        self.assertIsNone(validate_inputs(LoanInputs(6.5, 300000, 30, 0)))
        err = validate_inputs(LoanInputs(6.5, 300000, 30, -1))
        self.assertEqual(err, ValidationError(INVALID_LOT_FEES, "fees"))


if __name__ == '__main__':
    unittest.main()

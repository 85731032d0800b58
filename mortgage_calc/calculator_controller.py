"""Calculator Controller for the Mortgage Calculator.

This module provides the controller behind the calculator window's buttons:
calculate, add to comparison and remove from comparison. It holds no Qt
objects; the view registers callbacks to redraw itself.
"""
import math
from typing import Callable, Optional

from mortgage_calc.data_structures import AmortizationResult, LoanInputs
from mortgage_calc.formatting import parse_raw_inputs
from mortgage_calc.result import Result, ErrorType
from mortgage_calc.services import ComparisonStore, calculate, validate
from mortgage_calc.ui_state_manager import CalculatorState


NO_CALCULATION_MESSAGE = "Please calculate a mortgage first before adding to comparison"
RESULT_OUT_OF_RANGE_MESSAGE = "The result is too large to display. Please enter a smaller loan amount or lot fees"


def _is_finite(result: AmortizationResult) -> bool:
    return all(math.isfinite(value) for value in
               (result.monthly_payment, result.total_interest, result.total_amount))


class CalculatorController:
    """Controller for calculator actions.
    
    Parses and validates raw field text, runs the amortization engine and
    manages the comparison store on behalf of the view.
    
    Attributes:
        store: ComparisonStore holding the saved scenarios.
        state: CalculatorState with the result or error on display.
        on_result: Callback with (inputs, result) after a successful calculation.
        on_error: Callback with (message, field) after a failed action; field
            names the input to focus, or is None.
        on_comparison_changed: Callback after the store changes.
    """
    
    def __init__(self, store: ComparisonStore = None, state: CalculatorState = None,
                 on_result: Callable[[LoanInputs, AmortizationResult], None] = None,
                 on_error: Callable[[str, Optional[str]], None] = None,
                 on_comparison_changed: Callable[[ComparisonStore], None] = None):
        """Initialize CalculatorController.
        
        Args:
            store: Optional ComparisonStore; a new empty store by default.
            state: Optional CalculatorState; a new one by default.
            on_result: Callback to display a new result.
            on_error: Callback to display an error message and focus its field.
            on_comparison_changed: Callback to redraw the comparison table.
        """
        self.store = store if store is not None else ComparisonStore()
        self.state = state if state is not None else CalculatorState()
        self.on_result = on_result
        self.on_error = on_error
        self.on_comparison_changed = on_comparison_changed
    
    def _fail(self, message: str, error_type: str, field: str = None) -> Result:
        self.state.record_error(message, field)
        if self.on_error:
            self.on_error(message, field)
        return Result.fail(message, error_type)
    
    def calculate(self, rate_text, principal_text, term_text, fees_text="") -> Result:
        """Validate the raw field text and compute the mortgage.
        
        Args:
            rate_text: Interest rate field text (percent).
            principal_text: Loan amount field text, may be comma-grouped.
            term_text: Loan duration field text (years).
            fees_text: Monthly lot fees field text, may be empty.
            
        Returns:
            Result with the fees-inclusive AmortizationResult, or the
            validation message on failure. Results too large to represent
            fail with RESULT_OUT_OF_RANGE_MESSAGE.
        """
        interest_rate, principal, term_years, fees = parse_raw_inputs(
            rate_text, principal_text, term_text, fees_text
        )
        error = validate(interest_rate, principal, term_years, fees)
        if error:
            return self._fail(error.message, ErrorType.VALIDATION, error.field)
        
        inputs = LoanInputs(
            interest_rate=interest_rate,
            principal=principal,
            term_years=int(term_years),
            fees=fees,
        )
        result = calculate(inputs)
        if not _is_finite(result):
            field = "fees" if not math.isfinite(fees * result.payment_count) else "principal"
            return self._fail(RESULT_OUT_OF_RANGE_MESSAGE, ErrorType.OUT_OF_RANGE, field)

        self.state.record_result(inputs, result)
        if self.on_result:
            self.on_result(inputs, result)
        return Result.ok(result)
    
    def add_to_comparison(self) -> Result:
        """Save the calculation on display to the comparison store.
        
        Returns:
            Result with the new ComparisonEntry, or a failure if nothing
            has been calculated yet.
        """
        if not self.state.has_result():
            return self._fail(NO_CALCULATION_MESSAGE, ErrorType.NO_CALCULATION)
        
        entry = self.store.add(self.state.last_inputs)
        self.state.clear_error()
        self._comparison_changed()
        return Result.ok(entry)
    
    def remove_from_comparison(self, entry_id) -> None:
        """Remove an entry from the comparison store by id."""
        self.store.remove(entry_id)
        self._comparison_changed()
    
    def comparison_entries(self):
        return self.store.list()
    
    def comparison_visible(self) -> bool:
        """Check if the comparison section should be shown."""
        return self.store.count() > 0
    
    def _comparison_changed(self) -> None:
        if self.on_comparison_changed:
            self.on_comparison_changed(self.store)

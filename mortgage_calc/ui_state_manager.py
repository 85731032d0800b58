"""UI State Manager for the calculator window.

This module provides centralized state for the calculator screen: the most
recently validated inputs, the result currently on display and the error
currently shown.
"""
from typing import Optional, Callable

from mortgage_calc.data_structures import AmortizationResult, LoanInputs


class CalculatorState:
    """Holds what the calculator screen is currently showing.
    
    At most one of a result or an error is shown at a time. Recording an
    error hides the previous result, so the add-to-comparison action is only
    available right after a successful calculation.
    
    Attributes:
        last_inputs: Inputs of the result on display.
        last_result: Fees-inclusive result on display.
        last_error: Error message on display.
        last_error_field: Name of the input the error is about, if any.
        on_state_changed: Callback when the state changes.
    """
    
    def __init__(self, on_state_changed: Callable[['CalculatorState'], None] = None):
        """Initialize CalculatorState.
        
        Args:
            on_state_changed: Optional callback invoked after every change.
        """
        self._last_inputs: Optional[LoanInputs] = None
        self._last_result: Optional[AmortizationResult] = None
        self._last_error: Optional[str] = None
        self._last_error_field: Optional[str] = None
        self.on_state_changed = on_state_changed
    
    @property
    def last_inputs(self) -> Optional[LoanInputs]:
        return self._last_inputs
    
    @property
    def last_result(self) -> Optional[AmortizationResult]:
        return self._last_result
    
    @property
    def last_error(self) -> Optional[str]:
        return self._last_error
    
    @property
    def last_error_field(self) -> Optional[str]:
        return self._last_error_field
    
    def has_result(self) -> bool:
        """Check if a calculation is on display."""
        return self._last_inputs is not None
    
    def has_error(self) -> bool:
        return self._last_error is not None
    
    def shows_fees_note(self) -> bool:
        """Check if the result on display includes lot fees."""
        return self.has_result() and self._last_inputs.fees > 0
    
    def record_result(self, inputs: LoanInputs, result: AmortizationResult) -> None:
        """Show a new result, clearing any error.
        
        Args:
            inputs: Validated inputs the result was computed from.
            result: Fees-inclusive result.
        """
        self._last_inputs = inputs
        self._last_result = result
        self._last_error = None
        self._last_error_field = None
        self._notify()
    
    def record_error(self, message: str, field: str = None) -> None:
        """Show an error, replacing the previous one and hiding the result.
        
        Args:
            message: Error message to show.
            field: Optional name of the LoanInputs field the error is about.
        """
        self._last_error = message
        self._last_error_field = field
        self._last_inputs = None
        self._last_result = None
        self._notify()
    
    def clear_error(self) -> None:
        if self._last_error is not None:
            self._last_error = None
            self._last_error_field = None
            self._notify()
    
    def _notify(self) -> None:
        if self.on_state_changed:
            self.on_state_changed(self)

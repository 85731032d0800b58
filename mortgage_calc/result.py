"""Result pattern for consistent return types in the calculator controller.

Controller actions report their outcome through a Result instead of raising,
so the window can show ``result.error`` directly in its error label.
"""
from dataclasses import dataclass
from typing import Optional, TypeVar, Generic

T = TypeVar('T')


@dataclass
class Result(Generic[T]):
    """Represents the outcome of an operation.
    
    Attributes:
        success: Whether the operation succeeded.
        value: The return value on success, None on failure.
        error: Error message on failure, None on success.
        error_type: Category of error (see ErrorType).
        
    Usage:
        result = controller.calculate("6.5", "300,000", "30", "")
        if result:
            show(result.value)
        else:
            show_error(result.error)
    """
    success: bool
    value: Optional[T] = None
    error: Optional[str] = None
    error_type: Optional[str] = None
    
    @classmethod
    def ok(cls, value: T = None) -> 'Result[T]':
        """Create a successful result."""
        return cls(success=True, value=value)
    
    @classmethod
    def fail(cls, error: str, error_type: str = None) -> 'Result[T]':
        """Create a failure result.
        
        Args:
            error: Error message describing what went wrong.
            error_type: Optional error category for programmatic handling.
        """
        return cls(success=False, error=error, error_type=error_type)
    
    def __bool__(self) -> bool:
        return self.success


class ErrorType:
    """Standard error type constants."""
    VALIDATION = "VALIDATION"
    NO_CALCULATION = "NO_CALCULATION"
    OUT_OF_RANGE = "OUT_OF_RANGE"

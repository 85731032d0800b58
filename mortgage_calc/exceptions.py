"""Custom exceptions for the Mortgage Calculator application."""


class MortgageCalcError(Exception):
    """Base exception for all Mortgage Calculator errors."""
    
    def __init__(self, message: str, details: dict = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}
    
    def __str__(self):
        return self.message


class ValidationError(MortgageCalcError):
    """Describes a rejected loan input.
    
    Validation errors are returned to the caller as values rather than
    raised, so the presentation layer can show the message and carry on.
    Two errors are equal when they carry the same message and field.
    """
    
    def __init__(self, message: str, field: str = None):
        details = {'field': field} if field else {}
        super().__init__(message, details)
        self.field = field
    
    def __eq__(self, other):
        if not isinstance(other, ValidationError):
            return NotImplemented
        return self.message == other.message and self.field == other.field
    
    def __hash__(self):
        return hash((self.message, self.field))
    
    def __repr__(self):
        return f"ValidationError({self.message!r}, field={self.field!r})"

"""Exceptions raised by the math kernel."""

from bfhl.exceptions import ClientInputError


class ArithmeticDomainError(ClientInputError):
    """Raised when an arithmetic function is undefined for its inputs.
    
    Attributes:
        operation: Name of the function that rejected its inputs.
    """
    
    def __init__(self, operation: str, message: str):
        super().__init__(message=message, code="ARITHMETIC_DOMAIN_ERROR")
        self.operation = operation

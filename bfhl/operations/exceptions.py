"""Request validation exceptions for the operations endpoint."""

from bfhl.exceptions import ClientInputError


EXACTLY_ONE_KEY_MESSAGE = "Exactly one input key is required"
INVALID_KEY_MESSAGE = "Invalid input key"
MALFORMED_BODY_MESSAGE = "Request body must be valid JSON"


class ShapeError(ClientInputError):
    """Raised when an operation's value does not have the required shape.
    
    Attributes:
        operation: Key of the operation whose value was rejected.
    """
    
    def __init__(self, operation: str, message: str):
        super().__init__(message=message, code="INVALID_SHAPE")
        self.operation = operation


class UnknownOperationError(ClientInputError):
    """Raised when the body does not name exactly one known operation.
    
    Attributes:
        keys: Keys found in the request body.
    """
    
    def __init__(self, keys: list[str], message: str = INVALID_KEY_MESSAGE):
        super().__init__(message=message, code="UNKNOWN_OPERATION")
        self.keys = keys


class MalformedBodyError(ClientInputError):
    """Raised when the request body is not valid JSON."""
    
    def __init__(self):
        super().__init__(message=MALFORMED_BODY_MESSAGE, code="MALFORMED_BODY")

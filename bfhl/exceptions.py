"""Exception hierarchy for the BFHL API."""


INTERNAL_ERROR_MESSAGE = "Internal Server Error"


class BFHLError(Exception):
    """Base exception for all BFHL API errors."""
    
    def __init__(self, message: str, code: str | None = None):
        self.message = message
        self.code = code or self.__class__.__name__
        super().__init__(self.message)


class ClientInputError(BFHLError):
    """Raised when the request itself is at fault (rendered as HTTP 400)."""
    pass


class InternalOperationError(BFHLError):
    """Raised when an operation fails for a reason the caller cannot fix.

    The message is fixed so nothing about the underlying cause leaks out.
    """

    def __init__(self):
        super().__init__(message=INTERNAL_ERROR_MESSAGE, code="INTERNAL_ERROR")

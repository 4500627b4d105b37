"""Exceptions raised by the AI adapter."""

from bfhl.exceptions import BFHLError


class ProviderError(BFHLError):
    """Raised when the completion provider cannot produce an answer.
    
    Attributes:
        provider: Name of the provider that failed.
        reason: Description of the failure (for logs only).
    """
    
    def __init__(self, provider: str, reason: str):
        super().__init__(
            message=f"Provider '{provider}' failed: {reason}",
            code="PROVIDER_ERROR"
        )
        self.provider = provider
        self.reason = reason

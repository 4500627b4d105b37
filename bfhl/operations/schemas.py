"""Pydantic schemas for operation requests and the response envelope."""

from enum import Enum
from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, Field


class Operation(str, Enum):
    """The five operations selectable through the request key."""

    FIBONACCI = "fibonacci"
    PRIME = "prime"
    LCM = "lcm"
    HCF = "hcf"
    AI = "AI"


class FibonacciRequest(BaseModel):
    """Generate the first ``terms`` Fibonacci numbers."""

    operation: Literal[Operation.FIBONACCI] = Operation.FIBONACCI
    terms: int = Field(..., ge=0, description="Number of terms to generate")


class PrimeRequest(BaseModel):
    """Keep the prime integers of ``values``; other elements are dropped."""

    operation: Literal[Operation.PRIME] = Operation.PRIME
    values: list[Any] = Field(default_factory=list, description="Candidate values")


class LcmRequest(BaseModel):
    """Least common multiple of ``values``."""

    operation: Literal[Operation.LCM] = Operation.LCM
    values: list[int] = Field(..., min_length=1, description="Integers to fold")


class HcfRequest(BaseModel):
    """Highest common factor of ``values``."""

    operation: Literal[Operation.HCF] = Operation.HCF
    values: list[int] = Field(..., min_length=1, description="Integers to fold")


class AIRequest(BaseModel):
    """Ask the completion provider for a one-word answer."""

    operation: Literal[Operation.AI] = Operation.AI
    question: str = Field(..., min_length=1, description="Trimmed question text")


OperationRequest = Annotated[
    Union[FibonacciRequest, PrimeRequest, LcmRequest, HcfRequest, AIRequest],
    Field(discriminator="operation"),
]


class EnvelopeResponse(BaseModel):
    """Uniform response wrapper returned by every endpoint.
    
    Attributes:
        is_success: Whether the request succeeded.
        official_email: Configured contact address.
        data: Operation result (success only).
        error: Human-readable reason (failure only).
    """
    
    is_success: bool = Field(..., description="Whether the request succeeded")
    official_email: str = Field(..., description="Configured contact address")
    data: Any | None = Field(default=None, description="Result on success")
    error: str | None = Field(default=None, description="Error message on failure")
    
    @classmethod
    def success(cls, official_email: str, data: Any) -> "EnvelopeResponse":
        """Create a success envelope carrying ``data``."""
        return cls(is_success=True, official_email=official_email, data=data)
    
    @classmethod
    def failure(cls, official_email: str, error: str) -> "EnvelopeResponse":
        """Create a failure envelope carrying ``error``."""
        return cls(is_success=False, official_email=official_email, error=error)

    @classmethod
    def health(cls, official_email: str) -> "EnvelopeResponse":
        """Create the bare success envelope used by the health check."""
        return cls(is_success=True, official_email=official_email)
    
    def to_content(self) -> dict[str, Any]:
        """Serialize, omitting ``data``/``error`` unless explicitly set."""
        return self.model_dump(exclude_unset=True)

"""Operations module - request validation and dispatch."""

from .schemas import (
    Operation,
    OperationRequest,
    FibonacciRequest,
    PrimeRequest,
    LcmRequest,
    HcfRequest,
    AIRequest,
    EnvelopeResponse,
)
from .exceptions import ShapeError, UnknownOperationError, MalformedBodyError
from .validator import validate_request
from .service import execute_operation, filter_primes
from .router import router


__all__ = [
    "Operation",
    "OperationRequest",
    "FibonacciRequest",
    "PrimeRequest",
    "LcmRequest",
    "HcfRequest",
    "AIRequest",
    "EnvelopeResponse",
    "ShapeError",
    "UnknownOperationError",
    "MalformedBodyError",
    "validate_request",
    "execute_operation",
    "filter_primes",
    "router",
]

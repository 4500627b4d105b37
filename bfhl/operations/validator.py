"""Validation of raw request bodies into typed operation requests."""

from typing import Any

from typing_extensions import assert_never

from .exceptions import (
    EXACTLY_ONE_KEY_MESSAGE,
    ShapeError,
    UnknownOperationError,
)
from .schemas import (
    AIRequest,
    FibonacciRequest,
    HcfRequest,
    LcmRequest,
    Operation,
    OperationRequest,
    PrimeRequest,
)


DEFAULT_MAX_FIBONACCI_TERMS = 10000
DEFAULT_MAX_PRIME_VALUE = 10**12

SHAPE_ERROR_MESSAGES = {
    Operation.FIBONACCI: "Invalid fibonacci input",
    Operation.PRIME: "Prime input must be an array",
    Operation.LCM: "LCM input must be a non-empty array",
    Operation.HCF: "HCF input must be a non-empty array",
    Operation.AI: "AI input must be a string",
}


def as_integer(value: Any) -> int | None:
    """Return ``value`` as an int if it is an integral JSON number, else None.

    Booleans are not numbers here, and integral floats such as ``4.0`` count
    as integers.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return None


def _shape_error(operation: Operation) -> ShapeError:
    return ShapeError(operation=operation.value, message=SHAPE_ERROR_MESSAGES[operation])


def _integer_array(operation: Operation, value: Any) -> list[int]:
    if not isinstance(value, list) or not value:
        raise _shape_error(operation)
    integers = [as_integer(item) for item in value]
    if any(item is None for item in integers):
        raise _shape_error(operation)
    return integers


def parse_operation_key(body: Any) -> tuple[Operation, Any]:
    """Extract the single operation key and its value from a request body.
    
    Args:
        body: Decoded JSON request body.
        
    Returns:
        Tuple of the operation and its raw value.
        
    Raises:
        UnknownOperationError: If the body is not an object with exactly one
            key, or the key is not a known operation.
    """
    if not isinstance(body, dict) or len(body) != 1:
        keys = list(body) if isinstance(body, dict) else []
        raise UnknownOperationError(keys=keys, message=EXACTLY_ONE_KEY_MESSAGE)

    key, value = next(iter(body.items()))
    try:
        return Operation(key), value
    except ValueError:
        raise UnknownOperationError(keys=[key])


def validate_request(
    body: Any,
    max_fibonacci_terms: int = DEFAULT_MAX_FIBONACCI_TERMS,
    max_prime_value: int = DEFAULT_MAX_PRIME_VALUE,
) -> OperationRequest:
    """Validate a request body and build the typed request for its operation.
    
    Args:
        body: Decoded JSON request body.
        max_fibonacci_terms: Upper bound on the fibonacci term count.
        max_prime_value: Largest integer accepted in a ``prime`` array.
        
    Returns:
        One of the typed operation requests.
        
    Raises:
        UnknownOperationError: If the body does not name exactly one known
            operation.
        ShapeError: If the value does not match the operation's shape.
    """
    operation, value = parse_operation_key(body)

    match operation:
        case Operation.FIBONACCI:
            terms = as_integer(value)
            if terms is None or terms < 0 or terms > max_fibonacci_terms:
                raise _shape_error(operation)
            return FibonacciRequest(terms=terms)

        case Operation.PRIME:
            if not isinstance(value, list):
                raise _shape_error(operation)
            # Trial division cost grows with the square root of each element
            for item in value:
                number = as_integer(item)
                if number is not None and number > max_prime_value:
                    raise _shape_error(operation)
            return PrimeRequest(values=value)

        case Operation.LCM:
            return LcmRequest(values=_integer_array(operation, value))

        case Operation.HCF:
            return HcfRequest(values=_integer_array(operation, value))

        case Operation.AI:
            if not isinstance(value, str) or not value.strip():
                raise _shape_error(operation)
            return AIRequest(question=value.strip())

        case _:
            assert_never(operation)

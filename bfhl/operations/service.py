"""Operation dispatch: run a validated request against the math kernel or AI adapter."""

from typing import Any

import structlog
from anyio.to_thread import run_sync
from typing_extensions import assert_never

from bfhl.ai import AnswerProvider, ProviderError, ask_one_word
from bfhl.exceptions import ClientInputError, InternalOperationError
from bfhl.mathkit import fibonacci_sequence, hcf_of, is_prime, lcm_of

from .schemas import (
    AIRequest,
    FibonacciRequest,
    HcfRequest,
    LcmRequest,
    OperationRequest,
    PrimeRequest,
)
from .validator import as_integer


logger = structlog.get_logger("operations")


def filter_primes(values: list[Any]) -> list[int]:
    """Keep the prime integers of ``values`` in order, dropping everything else."""
    primes = []
    for value in values:
        number = as_integer(value)
        if number is not None and is_prime(number):
            primes.append(number)
    return primes


async def _run(request: OperationRequest, provider: AnswerProvider) -> Any:
    # Kernel calls are CPU-bound; keep them off the event loop
    match request:
        case FibonacciRequest():
            return await run_sync(fibonacci_sequence, request.terms)
        case PrimeRequest():
            return await run_sync(filter_primes, request.values)
        case LcmRequest():
            return await run_sync(lcm_of, request.values)
        case HcfRequest():
            return await run_sync(hcf_of, request.values)
        case AIRequest():
            return await ask_one_word(provider, request.question)
        case _:
            assert_never(request)


async def execute_operation(request: OperationRequest, provider: AnswerProvider) -> Any:
    """Execute a validated operation request.
    
    Args:
        request: Typed request produced by the validator.
        provider: Answer provider used by the ``AI`` operation.
        
    Returns:
        The ``data`` payload for the success envelope.
        
    Raises:
        ClientInputError: If the inputs are outside the operation's domain.
        InternalOperationError: For any other failure, including provider
            errors. The original exception is logged and chained.
    """
    operation = request.operation.value
    try:
        data = await _run(request, provider)
    except ClientInputError as e:
        logger.info("operation_rejected", operation=operation, error_code=e.code)
        raise
    except ProviderError as e:
        logger.error("provider_error", operation=operation, provider=e.provider, reason=e.reason)
        raise InternalOperationError() from e
    except Exception as e:
        logger.exception("operation_failed", operation=operation, error=str(e))
        raise InternalOperationError() from e

    logger.info("operation_completed", operation=operation)
    return data

"""Unit tests for operation dispatch."""

import threading
from types import SimpleNamespace

import pytest
from unittest.mock import patch

from bfhl.ai import ProviderError
from bfhl.exceptions import InternalOperationError
from bfhl.mathkit import ArithmeticDomainError
from bfhl.operations.schemas import (
    AIRequest,
    FibonacciRequest,
    HcfRequest,
    LcmRequest,
    Operation,
    PrimeRequest,
)
from bfhl.operations.service import execute_operation, filter_primes

from tests.fakes import FakeAnswerProvider


class TestFilterPrimes:
    """Tests for prime filtering."""

    def test_keeps_primes_in_order(self):
        assert filter_primes([2, 3, 4, 5, 9]) == [2, 3, 5]

    def test_drops_non_integers(self):
        assert filter_primes([7, "7", 2.5, None, True, [3], 11.0]) == [7, 11]

    def test_keeps_duplicates(self):
        assert filter_primes([5, 4, 5]) == [5, 5]

    def test_output_is_subsequence(self):
        values = [10, 13, -3, 17, 0, 1, 19, 20]
        result = filter_primes(values)

        remaining = iter(values)
        assert all(any(r == v for v in remaining) for r in result)
        assert result == [13, 17, 19]


class TestExecuteOperation:
    """Tests for execute_operation."""

    @pytest.mark.asyncio
    async def test_fibonacci(self):
        data = await execute_operation(FibonacciRequest(terms=5), FakeAnswerProvider())
        assert data == [0, 1, 1, 2, 3]

    @pytest.mark.asyncio
    async def test_prime(self):
        data = await execute_operation(PrimeRequest(values=[2, 3, 4, 5, 9]), FakeAnswerProvider())
        assert data == [2, 3, 5]

    @pytest.mark.asyncio
    async def test_lcm(self):
        data = await execute_operation(LcmRequest(values=[4, 6]), FakeAnswerProvider())
        assert data == 12

    @pytest.mark.asyncio
    async def test_hcf(self):
        data = await execute_operation(HcfRequest(values=[12, 18]), FakeAnswerProvider())
        assert data == 6

    @pytest.mark.asyncio
    async def test_ai_sanitizes_answer(self):
        provider = FakeAnswerProvider(answer="  Paris. It is the capital")

        data = await execute_operation(AIRequest(question="Capital of France?"), provider)

        assert data == "Paris"
        assert provider.questions == ["Capital of France?"]

    @pytest.mark.asyncio
    async def test_arithmetic_domain_error_propagates(self):
        with pytest.raises(ArithmeticDomainError):
            await execute_operation(LcmRequest(values=[0, 0]), FakeAnswerProvider())

    @pytest.mark.asyncio
    async def test_provider_error_becomes_internal_error(self):
        provider = FakeAnswerProvider(error=ProviderError("openai", "secret upstream detail"))

        with pytest.raises(InternalOperationError) as exc_info:
            await execute_operation(AIRequest(question="q"), provider)

        assert exc_info.value.message == "Internal Server Error"
        assert "secret" not in exc_info.value.message
        assert isinstance(exc_info.value.__cause__, ProviderError)

    @pytest.mark.asyncio
    async def test_unexpected_error_becomes_internal_error(self):
        with patch("bfhl.operations.service.fibonacci_sequence", side_effect=RuntimeError("boom")):
            with pytest.raises(InternalOperationError) as exc_info:
                await execute_operation(FibonacciRequest(terms=3), FakeAnswerProvider())

        assert isinstance(exc_info.value.__cause__, RuntimeError)


class TestKernelOffloading:
    """Kernel work must not run on the event loop thread."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("request_model,kernel_name", [
        (FibonacciRequest(terms=3), "fibonacci_sequence"),
        (PrimeRequest(values=[2, 3]), "filter_primes"),
        (LcmRequest(values=[4, 6]), "lcm_of"),
        (HcfRequest(values=[12, 18]), "hcf_of"),
    ])
    async def test_runs_in_worker_thread(self, request_model, kernel_name):
        loop_thread = threading.get_ident()
        seen_threads = []

        def record_thread(*args):
            seen_threads.append(threading.get_ident())
            return "ok"

        with patch(f"bfhl.operations.service.{kernel_name}", side_effect=record_thread):
            data = await execute_operation(request_model, FakeAnswerProvider())

        assert data == "ok"
        assert len(seen_threads) == 1
        assert seen_threads[0] != loop_thread


class TestDispatchExhaustiveness:
    """Requests outside the known models never produce data."""

    @pytest.mark.asyncio
    async def test_unknown_request_type_is_internal_error(self):
        stray = SimpleNamespace(operation=Operation.FIBONACCI, terms=3)

        with pytest.raises(InternalOperationError) as exc_info:
            await execute_operation(stray, FakeAnswerProvider())

        assert isinstance(exc_info.value.__cause__, AssertionError)

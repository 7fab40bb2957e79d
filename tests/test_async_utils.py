"""Tests for async_utils.py: CircuitBreaker and ordered gather."""

import asyncio

import pytest

from pixabay_search.shared.async_utils import CircuitBreaker, gather_with_errors
from pixabay_search.shared.exceptions import RateLimitError


# ============================================================
# gather_with_errors
# ============================================================

class TestGatherWithErrors:
    """Tests for concurrent fan-out with per-task error isolation."""

    async def test_results_in_input_order(self):
        async def delayed(value, delay):
            await asyncio.sleep(delay)
            return value

        results = await gather_with_errors(
            delayed("slow", 0.03),
            delayed("fast", 0.0),
            delayed("medium", 0.01),
        )
        assert results == ["slow", "fast", "medium"]

    async def test_return_exceptions_isolates_failures(self):
        async def ok():
            return 1

        async def boom():
            raise ValueError("category failed")

        results = await gather_with_errors(ok(), boom(), ok(), return_exceptions=True)

        assert results[0] == 1
        assert isinstance(results[1], ValueError)
        assert results[2] == 1

    async def test_fail_fast_without_return_exceptions(self):
        async def boom():
            raise ValueError("fail")

        with pytest.raises(ExceptionGroup):
            await gather_with_errors(boom())

    async def test_empty(self):
        assert await gather_with_errors() == []


# ============================================================
# CircuitBreaker
# ============================================================

class TestCircuitBreaker:
    """Tests for circuit breaker state transitions."""

    async def test_closed_state_allows_calls(self):
        cb = CircuitBreaker(failure_threshold=3)
        async with cb:
            pass
        assert cb.state == "closed"

    async def test_opens_after_threshold_failures(self):
        cb = CircuitBreaker(failure_threshold=2, recovery_timeout=10.0)

        for _ in range(2):
            try:
                async with cb:
                    raise RuntimeError("fail")
            except RuntimeError:
                pass

        assert cb.state == "open"
        assert cb.is_open

    async def test_open_rejects_calls(self):
        cb = CircuitBreaker(failure_threshold=1, recovery_timeout=60.0)

        try:
            async with cb:
                raise RuntimeError("fail")
        except RuntimeError:
            pass

        with pytest.raises(RateLimitError) as exc_info:
            async with cb:
                pass
        assert exc_info.value.context.retry_after == 60.0

    async def test_success_decrements_failure_count(self):
        cb = CircuitBreaker(failure_threshold=5)
        cb._failure_count = 3

        async with cb:
            pass

        assert cb._failure_count == 2

    async def test_half_open_recovery(self):
        cb = CircuitBreaker(failure_threshold=1, recovery_timeout=0.01)

        try:
            async with cb:
                raise RuntimeError("fail")
        except RuntimeError:
            pass

        await asyncio.sleep(0.02)

        async with cb:
            pass

        assert cb.state == "closed"

"""
Shared kernel for Pixabay Image Search.

Provides:
- Unified exception hierarchy
- Async utilities (parallel fan-out, circuit breaker)
"""

from .async_utils import CircuitBreaker, gather_with_errors
from .exceptions import (
    ConfigurationError,
    ErrorCategory,
    ErrorContext,
    ErrorSeverity,
    InvalidParameterError,
    InvalidQueryError,
    ParseError,
    PixabaySearchError,
    RateLimitError,
    ValidationError,
    is_retryable_error,
)

__all__ = [
    # Exceptions
    "PixabaySearchError",
    "RateLimitError",
    "ValidationError",
    "InvalidQueryError",
    "InvalidParameterError",
    "ParseError",
    "ConfigurationError",
    "ErrorContext",
    "ErrorSeverity",
    "ErrorCategory",
    "is_retryable_error",
    # Async utilities
    "CircuitBreaker",
    "gather_with_errors",
]

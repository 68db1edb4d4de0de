"""Custom exceptions for the deferjob library.

Errors raised while building a deferred call are fatal to job creation
and are never retried. Errors raised by the performed method itself are
not wrapped and reach the caller unchanged.
"""

from deferjob._internal.exceptions import (
    BaseDeferjobError,
    DeserializationError,
    InvalidPayloadError,
    InvalidStateError,
    NotCallableError,
)

__all__ = (
    "BaseDeferjobError",
    "DeserializationError",
    "InvalidPayloadError",
    "InvalidStateError",
    "NotCallableError",
)

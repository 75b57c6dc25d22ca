"""Failure signals raised by the order workflow.

A missing order is never one of these: lookups answer with ``None`` or
``False``. These cover the cases where a write was attempted and could not
complete, and each carries an :class:`ErrorKind` so callers can branch on the
kind instead of on the persistence engine's exception types.
"""

from enum import Enum


class ErrorKind(Enum):
    INVALID_REQUEST = "invalid_request"
    CONSTRAINT_VIOLATION = "constraint_violation"
    INTERNAL = "internal"


class StorefrontError(Exception):
    kind = ErrorKind.INTERNAL

    def __init__(self, messages):
        if isinstance(messages, str):
            messages = {"_entity": [messages]}
        self.messages = dict(messages)
        super().__init__(self.messages)


class InvalidOrderRequest(StorefrontError):
    """The request was rejected before anything was written."""

    kind = ErrorKind.INVALID_REQUEST


class ConstraintViolation(StorefrontError):
    """A uniqueness, reference or required-field rule failed at write time."""

    kind = ErrorKind.CONSTRAINT_VIOLATION


class StorageFailure(StorefrontError):
    kind = ErrorKind.INTERNAL

"""
Error types raised by the collection synchronization core.
"""
from __future__ import annotations
from typing import Any, Optional


class SyncError(Exception):
    """Base exception for all mvc_sync errors."""


class RemoteUnavailable(SyncError):
    """
    The remote source could not complete a call.

    Covers transport failures, timeouts, non-success statuses and payloads
    that do not validate as the expected entity shape.
    """

    def __init__(self, message: str, status_code: Optional[int] = None):
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class NotFound(SyncError, KeyError):
    """No entity with the given identifier is held locally."""

    def __init__(self, entity_id: Any):
        self.entity_id = entity_id
        super().__init__(entity_id)

    def __str__(self) -> str:
        return f"Entity {self.entity_id!r} not found"


class WrongKind(SyncError, TypeError):
    """A draft or entity of another kind was passed to a store."""

    def __init__(self, expected: type, value: Any):
        self.expected = expected
        self.value = value
        super().__init__(f"Expected {expected.__name__}, got {type(value).__name__}")

"""Result and exception types for store operations."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from .kinds import ERROR_MESSAGES, ErrorCode


@dataclass(frozen=True)
class OperationResult:
    """Outcome of a fallible property or registry call.

    ``bool(result)`` is ``result.ok`` so callers can write
    ``if not registry.define(...)``.
    """

    ok: bool
    code: Optional[ErrorCode] = None
    message: str = ""
    value: Any = None

    def __bool__(self) -> bool:
        return self.ok

    @classmethod
    def success(cls, value: Any = None) -> "OperationResult":
        return cls(ok=True, value=value)

    @classmethod
    def failure(cls, code: ErrorCode, message: Optional[str] = None) -> "OperationResult":
        return cls(ok=False, code=code, message=message or ERROR_MESSAGES[code])


class PropertyError(Exception):
    """Base exception for the strict registry accessors."""

    code: Optional[ErrorCode] = None

    def __init__(self, name: str, message: Optional[str] = None) -> None:
        self.name = name
        if message is None:
            reason = ERROR_MESSAGES[self.code] if self.code is not None else "Property error"
            message = f"{reason}: {name}"
        super().__init__(message)


class PropertyNotDefinedError(PropertyError):
    """Raised when a strict lookup names a missing property."""

    code = ErrorCode.NOT_DEFINED

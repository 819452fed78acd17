"""
Property contract and its per-kind implementations.

A property pairs an explicit kind tag with a typed value container and
adds text parsing, validated assignment, type-safe copying and equality.
Every mutating call clears ``last_error`` on entry and records the failure
message when it rejects its input; a rejected call never touches the value.
"""

from __future__ import annotations

import logging
import math
import re
from abc import ABC, abstractmethod
from typing import Any, Dict, Optional, Type

from .kinds import (
    ILLEGAL_OPERATION,
    INT32_MAX,
    INT32_MIN,
    INT64_MAX,
    INT64_MIN,
    ErrorCode,
    PropertyKind,
)
from .results import OperationResult
from .values import Float64Value, Int32Value, Int64Value, PropertyValue, TextValue

logger = logging.getLogger(__name__)

_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")
_FLOAT_PATTERN = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")

# No literal with more significant digits fits any integer kind.
_MAX_INTEGER_DIGITS = 20


def parse_integer(text: str, lower: int, upper: int) -> OperationResult:
    """Parse a signed decimal integer and check it against ``[lower, upper]``."""
    candidate = text.strip()
    if not _INTEGER_PATTERN.fullmatch(candidate):
        return OperationResult.failure(ErrorCode.INVALID_VALUE)
    sign = "-" if candidate.startswith("-") else ""
    digits = candidate.lstrip("+-").lstrip("0") or "0"
    if len(digits) > _MAX_INTEGER_DIGITS:
        return OperationResult.failure(ErrorCode.OUT_OF_RANGE)
    number = int(sign + digits)
    if number < lower or number > upper:
        return OperationResult.failure(ErrorCode.OUT_OF_RANGE)
    return OperationResult.success(number)


def parse_float(text: str) -> OperationResult:
    """Parse a decimal number; literals that overflow a double are out of range."""
    candidate = text.strip()
    if not _FLOAT_PATTERN.fullmatch(candidate):
        return OperationResult.failure(ErrorCode.INVALID_VALUE)
    number = float(candidate)
    if math.isinf(number):
        return OperationResult.failure(ErrorCode.OUT_OF_RANGE)
    return OperationResult.success(number)


def _check_integer(value: Any, lower: int, upper: int) -> OperationResult:
    # bool is an int subclass but never a valid integer property value
    if isinstance(value, bool) or not isinstance(value, int):
        return OperationResult.failure(ErrorCode.TYPE_MISMATCH)
    if value < lower or value > upper:
        return OperationResult.failure(ErrorCode.OUT_OF_RANGE)
    return OperationResult.success(value)


class Property(ABC):
    """A typed, mutable value owned by a registry."""

    value_type: Type[PropertyValue] = PropertyValue

    def __init__(self, kind: PropertyKind) -> None:
        self._kind = kind
        self._container = self.value_type()
        self.last_error: Optional[str] = None

    @property
    def kind(self) -> PropertyKind:
        return self._kind

    @property
    def value(self) -> Any:
        return self._container.get()

    def render(self) -> str:
        return self._container.render()

    def reset(self) -> None:
        self.last_error = None
        self._container.default()

    @abstractmethod
    def _from_text(self, text: str) -> OperationResult:
        """Interpret ``text`` as this kind without storing it."""

    @abstractmethod
    def _check(self, value: Any) -> OperationResult:
        """Validate a native Python value for this kind."""

    def _reject(self, result: OperationResult) -> OperationResult:
        self.last_error = result.message
        return result

    def parse(self, text: str) -> OperationResult:
        """Store ``text`` interpreted as this property's kind."""
        self.last_error = None
        result = self._from_text(text)
        if not result:
            return self._reject(result)
        self._container.set(result.value)
        return OperationResult.success()

    def set_value(self, value: Any) -> OperationResult:
        """Assign a native value after checking its type and range."""
        self.last_error = None
        result = self._check(value)
        if not result:
            return self._reject(result)
        self._container.set(result.value)
        return OperationResult.success()

    def copy_from(self, other: Optional["Property"]) -> OperationResult:
        """Overwrite this value with ``other``'s when both share a kind."""
        self.last_error = None
        if other is None or other.kind is not self.kind:
            return self._reject(OperationResult.failure(ErrorCode.TYPE_MISMATCH, ILLEGAL_OPERATION))
        self._container.set(other.value)
        return OperationResult.success()

    def clone(self) -> "Property":
        twin = type(self)()
        twin.copy_from(self)
        return twin

    def equals(self, other: object) -> bool:
        if not isinstance(other, Property):
            return False
        return other.kind is self.kind and other.value == self.value

    def __eq__(self, other: object) -> bool:
        return self.equals(other)

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.value!r})"


class TextProperty(Property):
    value_type = TextValue

    def __init__(self) -> None:
        super().__init__(PropertyKind.TEXT)

    def _from_text(self, text: str) -> OperationResult:
        return OperationResult.success(text)

    def _check(self, value: Any) -> OperationResult:
        if not isinstance(value, str):
            return OperationResult.failure(ErrorCode.TYPE_MISMATCH)
        return OperationResult.success(value)


class Int32Property(Property):
    value_type = Int32Value

    def __init__(self) -> None:
        super().__init__(PropertyKind.INT32)

    def _from_text(self, text: str) -> OperationResult:
        return parse_integer(text, INT32_MIN, INT32_MAX)

    def _check(self, value: Any) -> OperationResult:
        return _check_integer(value, INT32_MIN, INT32_MAX)


class Int64Property(Property):
    value_type = Int64Value

    def __init__(self) -> None:
        super().__init__(PropertyKind.INT64)

    def _from_text(self, text: str) -> OperationResult:
        return parse_integer(text, INT64_MIN, INT64_MAX)

    def _check(self, value: Any) -> OperationResult:
        return _check_integer(value, INT64_MIN, INT64_MAX)


class Float64Property(Property):
    value_type = Float64Value

    def __init__(self) -> None:
        super().__init__(PropertyKind.FLOAT64)

    def _from_text(self, text: str) -> OperationResult:
        return parse_float(text)

    def _check(self, value: Any) -> OperationResult:
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            return OperationResult.failure(ErrorCode.TYPE_MISMATCH)
        try:
            number = float(value)
        except OverflowError:
            return OperationResult.failure(ErrorCode.OUT_OF_RANGE)
        if math.isnan(number):
            return OperationResult.failure(ErrorCode.INVALID_VALUE)
        if math.isinf(number):
            return OperationResult.failure(ErrorCode.OUT_OF_RANGE)
        return OperationResult.success(number)


PROPERTY_TYPES: Dict[PropertyKind, Type[Property]] = {
    PropertyKind.TEXT: TextProperty,
    PropertyKind.INT32: Int32Property,
    PropertyKind.INT64: Int64Property,
    PropertyKind.FLOAT64: Float64Property,
}


def create_property(kind: PropertyKind) -> Optional[Property]:
    """Build a default-valued property of ``kind``; ``None`` for unknown kinds."""
    factory = PROPERTY_TYPES.get(kind)
    if factory is None:
        logger.debug("No property implementation for kind %s", kind)
        return None
    return factory()

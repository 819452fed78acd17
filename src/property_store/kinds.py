"""Primitive kinds, value ranges and error codes shared across the store."""

from __future__ import annotations

from enum import Enum
from typing import Dict


INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1
INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

FLOAT_PRECISION = 5


class PropertyKind(str, Enum):
    """Fixed primitive type tag of a property."""

    TEXT = "text"
    INT32 = "int32"
    INT64 = "int64"
    FLOAT64 = "float64"
    UNKNOWN = "unknown"

    @classmethod
    def from_name(cls, value: str) -> "PropertyKind":
        """Resolve a kind from its value or member name, ignoring case."""
        key = value.strip().lower()
        for member in cls:
            if key in (member.value, member.name.lower()):
                return member
        return cls.UNKNOWN

    @property
    def is_valid(self) -> bool:
        return self is not PropertyKind.UNKNOWN


class ErrorCode(str, Enum):
    """Failure reasons reported by properties and the registry."""

    EMPTY_NAME = "empty_name"
    ALREADY_DEFINED = "already_defined"
    NOT_DEFINED = "not_defined"
    TYPE_MISMATCH = "type_mismatch"
    INVALID_VALUE = "invalid_value"
    OUT_OF_RANGE = "out_of_range"
    NULL_VALUE = "null_value"
    UNKNOWN_KIND = "unknown_kind"


ERROR_MESSAGES: Dict[ErrorCode, str] = {
    ErrorCode.EMPTY_NAME: "Empty property name",
    ErrorCode.ALREADY_DEFINED: "Attempt property redefinition",
    ErrorCode.NOT_DEFINED: "Property not defined",
    ErrorCode.TYPE_MISMATCH: "Attempt property type redefinition",
    ErrorCode.INVALID_VALUE: "Invalid property value",
    ErrorCode.OUT_OF_RANGE: "Out of Range error",
    ErrorCode.NULL_VALUE: "Wrong property value",
    ErrorCode.UNKNOWN_KIND: "Wrong property type",
}

# Property.copy_from reports kind mismatches with its own wording.
ILLEGAL_OPERATION = "Illegal operation"

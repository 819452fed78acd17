"""Typed value containers.

Each container holds exactly one value of a fixed primitive kind and knows
its zero value and canonical rendering. No validation happens here; the
property layer decides what may be stored.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from .kinds import FLOAT_PRECISION, PropertyKind

T = TypeVar("T")


class PropertyValue(ABC, Generic[T]):
    """Holder for a single value of one kind."""

    kind: PropertyKind = PropertyKind.UNKNOWN

    def __init__(self) -> None:
        self._value: T
        self.default()

    @abstractmethod
    def default(self) -> None:
        """Reset to the zero value of the kind."""

    def get(self) -> T:
        return self._value

    def set(self, value: T) -> None:
        self._value = value

    def render(self) -> str:
        return str(self._value)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._value!r})"


class TextValue(PropertyValue[str]):
    kind = PropertyKind.TEXT

    def default(self) -> None:
        self._value = ""

    def render(self) -> str:
        # Quoted so text never reads like a number in GET output.
        return f'"{self._value}"'


class Int32Value(PropertyValue[int]):
    kind = PropertyKind.INT32

    def default(self) -> None:
        self._value = 0


class Int64Value(PropertyValue[int]):
    kind = PropertyKind.INT64

    def default(self) -> None:
        self._value = 0


class Float64Value(PropertyValue[float]):
    kind = PropertyKind.FLOAT64

    def default(self) -> None:
        self._value = 0.0

    def render(self) -> str:
        return f"{self._value:.{FLOAT_PRECISION}f}"

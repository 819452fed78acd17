"""
Property registry - the owning map from property name to Property.

Guarantees:
- Names are non-empty and unique.
- A property's kind is fixed when it is defined; ``set`` never changes it.
- Failed calls leave the registry untouched and report an OperationResult.
- Full dumps iterate in lexicographic name order.

Public surface:
    - PropertyRegistry
    - infer_kind_from_text
    - create_property_from_text
"""

from __future__ import annotations

import logging
import re
from typing import Any, Dict, Iterator, List, Mapping, Optional, Tuple

from .kinds import INT32_MAX, INT32_MIN, ErrorCode, PropertyKind
from .properties import PROPERTY_TYPES, Property, create_property, parse_integer
from .results import OperationResult, PropertyNotDefinedError

logger = logging.getLogger(__name__)

# Digits and dots with at most one leading sign. Deliberately loose: "1.2.3",
# "+" and "." all count as numeric here and are rejected by the strict parse.
_NUMERIC_PATTERN = re.compile(r"[+-]?[0-9.]*")


def infer_kind_from_text(text: str) -> PropertyKind:
    """Best-effort guess of the kind a bare value should be stored as."""
    if not text or not _NUMERIC_PATTERN.fullmatch(text):
        return PropertyKind.TEXT
    if "." in text:
        return PropertyKind.FLOAT64
    result = parse_integer(text, INT32_MIN, INT32_MAX)
    if result.code is ErrorCode.OUT_OF_RANGE:
        return PropertyKind.INT64
    return PropertyKind.INT32


def create_property_from_text(text: str) -> Property:
    """Default-valued property of the kind inferred from ``text``."""
    return PROPERTY_TYPES[infer_kind_from_text(text)]()


class PropertyRegistry:
    """Named store of typed properties.

    Every public operation except ``is_defined`` clears ``last_error`` on
    entry; a failing operation leaves the matching message there until the
    next call.
    """

    def __init__(
        self,
        name: str = "",
        seed: Optional[Mapping[str, PropertyKind]] = None,
    ) -> None:
        self.name = name
        self._properties: Dict[str, Property] = {}
        self._last_error: Optional[str] = None

        for prop_name, kind in (seed or {}).items():
            result = self.define(prop_name, kind)
            if not result:
                logger.warning("Skipping seed property %r: %s", prop_name, result.message)
        self._last_error = None

    infer_kind_from_text = staticmethod(infer_kind_from_text)
    create_property = staticmethod(create_property)
    create_property_from_text = staticmethod(create_property_from_text)

    @property
    def last_error(self) -> Optional[str]:
        return self._last_error

    def _begin(self) -> None:
        self._last_error = None

    def _fail(self, code: ErrorCode, name: str, message: Optional[str] = None) -> OperationResult:
        result = OperationResult.failure(code, message)
        self._last_error = result.message
        logger.debug("Rejected operation on %r: %s (%s)", name, result.message, code.value)
        return result

    # ------------------------------------------------------------------
    # Core operations
    # ------------------------------------------------------------------

    def define(self, name: str, kind: PropertyKind) -> OperationResult:
        """Create ``name`` with ``kind``'s default value.

        Plain strings are resolved through ``PropertyKind.from_name``.
        """
        self._begin()
        if not isinstance(kind, PropertyKind):
            kind = PropertyKind.from_name(str(kind))
        if not name:
            return self._fail(ErrorCode.EMPTY_NAME, name)
        if name in self._properties:
            return self._fail(ErrorCode.ALREADY_DEFINED, name)
        prop = create_property(kind)
        if prop is None:
            return self._fail(ErrorCode.UNKNOWN_KIND, name)
        self._properties[name] = prop
        logger.debug("Defined %r as %s", name, prop.kind.value)
        return OperationResult.success(prop)

    def is_defined(self, name: str) -> bool:
        return name in self._properties

    def get(self, name: str) -> OperationResult:
        """Look up ``name``; the property is returned in ``result.value``.

        The returned property stays owned by the registry and must not be
        held across a ``delete`` or ``assign_all``.
        """
        self._begin()
        prop = self._properties.get(name)
        if prop is None:
            return self._fail(ErrorCode.NOT_DEFINED, name)
        return OperationResult.success(prop)

    def set(self, name: str, prop: Optional[Property]) -> OperationResult:
        """Copy ``prop``'s value into the stored property of the same kind."""
        self._begin()
        if not name:
            return self._fail(ErrorCode.EMPTY_NAME, name)
        stored = self._properties.get(name)
        if stored is None:
            return self._fail(ErrorCode.NOT_DEFINED, name)
        if not isinstance(prop, Property):
            return self._fail(ErrorCode.NULL_VALUE, name)
        if prop.kind is not stored.kind:
            return self._fail(ErrorCode.TYPE_MISMATCH, name)
        result = stored.copy_from(prop)
        if not result:
            return self._fail(result.code or ErrorCode.TYPE_MISMATCH, name, stored.last_error)
        return OperationResult.success(stored)

    def delete(self, name: str) -> OperationResult:
        self._begin()
        if self._properties.pop(name, None) is None:
            return self._fail(ErrorCode.NOT_DEFINED, name)
        logger.debug("Deleted %r", name)
        return OperationResult.success()

    def count(self) -> int:
        return len(self._properties)

    def clear(self) -> None:
        self._begin()
        self._properties.clear()

    # ------------------------------------------------------------------
    # Text helpers used by the console
    # ------------------------------------------------------------------

    def set_from_text(self, name: str, text: str) -> OperationResult:
        """Parse ``text`` as the stored kind of ``name`` and set it."""
        self._begin()
        stored = self._properties.get(name)
        if stored is None:
            return self._fail(ErrorCode.NOT_DEFINED, name)
        scratch = type(stored)()
        parsed = scratch.parse(text)
        if not parsed:
            return self._fail(parsed.code or ErrorCode.INVALID_VALUE, name, scratch.last_error)
        return self.set(name, scratch)

    def define_from_text(self, name: str, text: str) -> OperationResult:
        """Define ``name`` with a kind inferred from ``text`` and store it.

        Nothing is defined unless ``text`` parses as the inferred kind.
        """
        self._begin()
        if not name:
            return self._fail(ErrorCode.EMPTY_NAME, name)
        if name in self._properties:
            return self._fail(ErrorCode.ALREADY_DEFINED, name)
        prop = create_property_from_text(text)
        parsed = prop.parse(text)
        if not parsed:
            return self._fail(parsed.code or ErrorCode.INVALID_VALUE, name, prop.last_error)
        self._properties[name] = prop
        logger.debug("Defined %r as %s from %r", name, prop.kind.value, text)
        return OperationResult.success(prop)

    # ------------------------------------------------------------------
    # Typed accessors
    # ------------------------------------------------------------------

    def _typed_value(self, name: str, kind: PropertyKind, default: Any) -> Any:
        prop = self._properties.get(name)
        if prop is None or prop.kind is not kind:
            return default
        return prop.value

    def get_text(self, name: str) -> str:
        return self._typed_value(name, PropertyKind.TEXT, "")

    def get_int32(self, name: str) -> int:
        return self._typed_value(name, PropertyKind.INT32, 0)

    def get_int64(self, name: str) -> int:
        return self._typed_value(name, PropertyKind.INT64, 0)

    def get_float64(self, name: str) -> float:
        return self._typed_value(name, PropertyKind.FLOAT64, 0.0)

    def value_of(self, name: str) -> Any:
        """Raw value of ``name``; raises PropertyNotDefinedError if missing."""
        prop = self._properties.get(name)
        if prop is None:
            raise PropertyNotDefinedError(name)
        return prop.value

    # ------------------------------------------------------------------
    # Iteration and bulk operations
    # ------------------------------------------------------------------

    def names(self) -> List[str]:
        return sorted(self._properties)

    def items(self) -> Iterator[Tuple[str, Property]]:
        for name in sorted(self._properties):
            yield name, self._properties[name]

    def dump(self) -> List[str]:
        """``name = value`` lines for every property, ordered by name."""
        return [f"{name} = {prop.render()}" for name, prop in self.items()]

    def assign_all(self, other: "PropertyRegistry") -> OperationResult:
        """Replace this registry's content and name with a copy of ``other``."""
        self._begin()
        if other is self:
            return OperationResult.success()
        self._properties.clear()
        self.name = other.name
        for name, prop in other.items():
            self._properties[name] = prop.clone()
        logger.debug("Copied %d properties from %r into %r", len(self._properties), other.name, self.name)
        return OperationResult.success()

    def copy(self) -> "PropertyRegistry":
        twin = PropertyRegistry()
        twin.assign_all(self)
        return twin

    def save(self) -> OperationResult:
        # Durable storage is not implemented; the hook always succeeds.
        self._begin()
        logger.debug("save() requested for %r; nothing to persist", self.name)
        return OperationResult.success()

    def load(self) -> OperationResult:
        self._begin()
        logger.debug("load() requested for %r; nothing to restore", self.name)
        return OperationResult.success()

    def __len__(self) -> int:
        return len(self._properties)

    def __contains__(self, name: object) -> bool:
        return name in self._properties

    def __iter__(self) -> Iterator[str]:
        return iter(self.names())

    def __repr__(self) -> str:
        return f"PropertyRegistry(name={self.name!r}, count={len(self._properties)})"

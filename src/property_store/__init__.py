"""
Property Store: an in-memory registry of named, typed properties

Properties are defined with a fixed kind (text, 32/64-bit integer or double),
read and written by name, and rendered canonically. A line-oriented console
exposes the registry through GET/SET/DELETE commands.
"""

__version__ = "0.1.0"

from .kinds import ErrorCode, PropertyKind
from .properties import (
    Float64Property,
    Int32Property,
    Int64Property,
    Property,
    TextProperty,
    create_property,
)
from .registry import PropertyRegistry, create_property_from_text, infer_kind_from_text
from .results import OperationResult, PropertyError, PropertyNotDefinedError

__all__ = [
    "ErrorCode",
    "Float64Property",
    "Int32Property",
    "Int64Property",
    "OperationResult",
    "Property",
    "PropertyError",
    "PropertyKind",
    "PropertyNotDefinedError",
    "PropertyRegistry",
    "TextProperty",
    "create_property",
    "create_property_from_text",
    "infer_kind_from_text",
]

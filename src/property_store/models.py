from __future__ import annotations

from typing import Any, Dict, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

from .kinds import PropertyKind


def _default_seed() -> Dict[str, PropertyKind]:
    """Properties pre-registered when the console starts."""
    return {
        "str": PropertyKind.TEXT,
        "number": PropertyKind.INT32,
        "very_long": PropertyKind.INT64,
        "dbl": PropertyKind.FLOAT64,
    }


class StoreConfig(BaseModel):
    """Configuration for the property store console."""

    model_config = ConfigDict(validate_assignment=True, extra="ignore", populate_by_name=True)

    store_name: str = Field(default="alfa", validation_alias=AliasChoices("store_name", "name"))
    log_level: str = Field(default="WARNING")
    log_file: Optional[str] = Field(default=None)
    prompt: str = Field(default=">")
    seed_properties: Dict[str, PropertyKind] = Field(
        default_factory=_default_seed,
        validation_alias=AliasChoices("seed_properties", "properties"),
    )

    @field_validator("log_level")
    @classmethod
    def _upper_log_level(cls, value: str) -> str:
        return value.upper()

    @field_validator("seed_properties", mode="before")
    @classmethod
    def _normalize_seed(cls, value: Any) -> Dict[str, PropertyKind]:
        if value is None:
            return {}
        seed: Dict[str, PropertyKind] = {}
        for name, kind in dict(value).items():
            resolved = kind if isinstance(kind, PropertyKind) else PropertyKind.from_name(str(kind))
            if not resolved.is_valid:
                raise ValueError(f"Unsupported kind {kind!r} for property {name!r}")
            if not str(name):
                raise ValueError("Seed property names must not be empty")
            seed[str(name)] = resolved
        return seed

"""Boat Schemas — Pydantic models with field-level validation for API boundaries.

Invariants:
    - BoatCreate/BoatReplace: name and description required, non-blank; a missing
      or null field reports the same message as a blank one
    - BoatPatch: any subset of fields; a supplied field must be non-blank (null rejected)
    - Unknown properties (including a client-sent id) are ignored
    - BoatResponse is the only wire shape for a Boat: {id, name, description}

Design Decisions:
    - Blank checks delegate to core.boat_rules so the HTTP layer and the stores
      report the same messages
    - Values are not stripped: what passes validation is stored as sent
"""

from pydantic import (
    BaseModel, ConfigDict, Field, ValidationInfo, field_validator, model_validator,
)

from boatyard.core.boat_rules import BOAT_FIELD_MESSAGES, find_violations, is_blank


class BoatCreate(BaseModel):
    """Boat creation: both fields mandatory."""
    # defaults route missing keys through check_not_blank
    name: str = Field(None, validate_default=True)
    description: str = Field(None, validate_default=True)

    @field_validator("name", "description", mode="before")
    @classmethod
    def check_not_blank(cls, v: object, info: ValidationInfo) -> object:
        if is_blank(v):
            raise ValueError(BOAT_FIELD_MESSAGES[info.field_name])
        return v


class BoatReplace(BoatCreate):
    """Full replacement (PUT), same rules as creation."""


class BoatPatch(BaseModel):
    """Partial update (PATCH): only supplied fields change."""
    name: str | None = None
    description: str | None = None

    @model_validator(mode="after")
    def check_supplied_fields(self):
        violations = find_violations(**self.changes())
        if violations:
            raise ValueError(", ".join(msg for _, msg in violations))
        return self

    def changes(self) -> dict[str, str | None]:
        """Fields present in the request body, with their values."""
        return {f: getattr(self, f) for f in self.model_fields_set}


class BoatResponse(BaseModel):
    """Public-facing boat data."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    description: str

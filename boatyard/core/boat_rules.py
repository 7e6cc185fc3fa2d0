"""Boat Rules — field constraints enforced before any record is persisted.

Invariants:
    - name and description must contain at least one non-whitespace character
    - Values are stored exactly as sent (no stripping) once they pass
    - Violations are reported together, in field declaration order

Design Decisions:
    - Pure functions shared by the request schemas and every store implementation,
      so a Boat can never be persisted blank whichever path wrote it
"""

from boatyard.core.errors import BoatValidationError

# field name -> message used when the field is missing or blank
BOAT_FIELD_MESSAGES: dict[str, str] = {
    "name": "Name is mandatory",
    "description": "Description is mandatory",
}


def is_blank(value: object) -> bool:
    """True for None, non-strings, and whitespace-only strings."""
    return not isinstance(value, str) or not value.strip()


def find_violations(**fields: object) -> list[tuple[str, str]]:
    """Return (field, message) for every blank field, in declaration order."""
    return [
        (name, message)
        for name, message in BOAT_FIELD_MESSAGES.items()
        if name in fields and is_blank(fields[name])
    ]


def check_boat_fields(name: object, description: object) -> None:
    """Raise BoatValidationError if name or description is missing or blank."""
    violations = find_violations(name=name, description=description)
    if violations:
        raise BoatValidationError(
            ", ".join(f"{f}: {msg}" for f, msg in violations),
            fields=[f for f, _ in violations],
        )

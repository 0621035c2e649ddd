"""Lesson identifier format checks."""

from uuid import UUID

from protean.exceptions import ValidationError


def is_well_formed(value) -> bool:
    """True when ``value`` parses as a UUID, the identity format lessons are stored under."""
    try:
        UUID(str(value))
    except ValueError:
        return False
    return True


def ensure_well_formed_lesson_id(value) -> None:
    if not is_well_formed(value):
        raise ValidationError({"lesson_id": ["Invalid lesson ID format"]})

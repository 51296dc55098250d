"""Field rules applied before any persistence call."""

from geothing.core.errors import FieldEmptyError, FieldTooShortError

MIN_NAME_LENGTH = 5


def validate_name(
    name: str | None, min_length: int = MIN_NAME_LENGTH, field: str = "name"
) -> str:
    """Check a name against the business rules and return it unchanged.

    The name is trimmed before measuring: blank input raises FieldEmptyError,
    a non blank name shorter than ``min_length`` raises FieldTooShortError.
    """
    length = len((name or "").strip())
    if length == 0:
        raise FieldEmptyError(field)
    if length < min_length:
        raise FieldTooShortError(field, min_length, length)
    return name

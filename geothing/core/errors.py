"""Domain errors shared by every thing and type thing use case.

Each error carries a stable ``code``. Transports translate the code, never the
message, so the same condition always reaches the wire with the same status.
"""

from fastapi import status


class DomainError(Exception):
    """Base class for errors raised by the business layer."""

    code: str = "internal"
    default_detail: str = "internal error"

    def __init__(self, detail: str | None = None):
        self.detail = detail or self.default_detail
        super().__init__(self.detail)


class NotFoundError(DomainError):
    """Raised when a thing does not exist or was soft deleted."""

    code = "not_found"
    default_detail = "thing not found"


class AlreadyExistsError(DomainError):
    """Raised when creating a thing with an id already present in the store."""

    code = "already_exists"
    default_detail = "thing already exists"


class InvalidInputError(DomainError):
    """Base class for validation errors."""

    code = "invalid_input"
    default_detail = "invalid input"


class FieldEmptyError(InvalidInputError):
    """Raised when a required field is empty once trimmed."""

    def __init__(self, field: str):
        self.field = field
        super().__init__(f"field {field} cannot be empty")


class FieldTooShortError(InvalidInputError):
    """Raised when a field is shorter than its minimum length."""

    def __init__(self, field: str, min_length: int, found: int):
        self.field = field
        self.min_length = min_length
        self.found = found
        super().__init__(
            f"field {field} minimum length is {min_length}, found {found}"
        )


class TypeThingNotFoundError(DomainError):
    """Raised when a type thing id does not reference an existing type thing."""

    code = "type_not_found"
    default_detail = "type thing not found"


class NotOwnerError(DomainError):
    """Raised when the caller is not the creator of the thing."""

    code = "not_owner"
    default_detail = "user is not the owner"


class AdminRequiredError(DomainError):
    """Raised when a non admin caller tries to manage type things."""

    code = "admin_required"
    default_detail = "only admin users can manage type things"


class OperationCancelledError(DomainError):
    """Raised when a database call was aborted by its deadline."""

    code = "cancelled"
    default_detail = "operation cancelled before completion"


class InternalError(DomainError):
    """Raised for unexpected failures. The detail never reaches the caller."""

    code = "internal"
    default_detail = "internal error"


class StorageError(InternalError):
    """Raised by repositories when the database call failed."""

    default_detail = "storage failure"


class NoRowsError(Exception):
    """Raised by repositories when a query returned no rows.

    This is not a domain error: use cases turn it into an empty collection
    for list shaped queries and into ``NotFoundError`` for single row reads.
    """


# Both permission kinds share 403, the "code" field of the body tells them
# apart. 401 stays reserved for a missing or invalid bearer token.
HTTP_STATUS_BY_CODE: dict[str, int] = {
    NotFoundError.code: status.HTTP_404_NOT_FOUND,
    AlreadyExistsError.code: status.HTTP_409_CONFLICT,
    InvalidInputError.code: status.HTTP_400_BAD_REQUEST,
    TypeThingNotFoundError.code: status.HTTP_422_UNPROCESSABLE_ENTITY,
    NotOwnerError.code: status.HTTP_403_FORBIDDEN,
    AdminRequiredError.code: status.HTTP_403_FORBIDDEN,
    OperationCancelledError.code: status.HTTP_504_GATEWAY_TIMEOUT,
    InternalError.code: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def http_status_for(error: DomainError) -> int:
    """Return the HTTP status code for a domain error."""
    return HTTP_STATUS_BY_CODE.get(
        error.code, status.HTTP_500_INTERNAL_SERVER_ERROR
    )

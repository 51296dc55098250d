"""Tests for the domain error taxonomy and its HTTP mapping."""

from geothing.core.errors import (
    HTTP_STATUS_BY_CODE,
    AdminRequiredError,
    AlreadyExistsError,
    DomainError,
    FieldEmptyError,
    FieldTooShortError,
    InternalError,
    InvalidInputError,
    NoRowsError,
    NotFoundError,
    NotOwnerError,
    OperationCancelledError,
    StorageError,
    TypeThingNotFoundError,
    http_status_for,
)


def test_each_kind_maps_to_its_status():
    assert http_status_for(NotFoundError()) == 404
    assert http_status_for(AlreadyExistsError()) == 409
    assert http_status_for(InvalidInputError()) == 400
    assert http_status_for(TypeThingNotFoundError()) == 422
    assert http_status_for(NotOwnerError()) == 403
    assert http_status_for(AdminRequiredError()) == 403
    assert http_status_for(OperationCancelledError()) == 504
    assert http_status_for(InternalError()) == 500

    statuses = list(HTTP_STATUS_BY_CODE.values())
    assert statuses.count(403) == 2
    assert len(set(statuses)) == len(statuses) - 1
    assert 401 not in statuses


def test_validation_errors_are_invalid_input():
    empty = FieldEmptyError("name")
    too_short = FieldTooShortError("name", 5, 3)

    assert isinstance(empty, InvalidInputError)
    assert isinstance(too_short, InvalidInputError)
    assert http_status_for(too_short) == 400
    assert "name" in empty.detail
    assert "5" in too_short.detail and "3" in too_short.detail


def test_storage_error_is_internal():
    error = StorageError()

    assert isinstance(error, InternalError)
    assert error.code == "internal"
    assert http_status_for(error) == 500


def test_default_and_custom_detail():
    assert NotFoundError().detail == "thing not found"
    assert NotFoundError("thing 42 does not exist").detail == "thing 42 does not exist"


def test_no_rows_is_not_a_domain_error():
    assert not issubclass(NoRowsError, DomainError)

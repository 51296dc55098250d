"""Tests for CreateThingUseCaseImpl."""

import pytest

from geothing.core.errors import (
    AlreadyExistsError,
    FieldTooShortError,
    TypeThingNotFoundError,
)
from geothing.features.things.usecases.create_thing_usecase import CreateThingUseCaseImpl


@pytest.fixture
def use_case(mock_repository):
    return CreateThingUseCaseImpl(repository=mock_repository)


@pytest.mark.asyncio
async def test_creates_with_caller_as_creator(
    use_case, mock_repository, owner_user, thing_request, stored_thing
):
    mock_repository.type_thing_exists.return_value = True
    mock_repository.exist.return_value = False
    mock_repository.create.return_value = stored_thing

    result = await use_case.execute(owner_user, thing_request)

    assert result == stored_thing
    mock_repository.create.assert_awaited_once_with(owner_user.user_id, thing_request)


@pytest.mark.asyncio
async def test_short_name_fails_before_any_storage_call(
    use_case, mock_repository, owner_user, thing_request
):
    request = thing_request.model_copy(update={"name": "abc"})

    with pytest.raises(FieldTooShortError):
        await use_case.execute(owner_user, request)

    mock_repository.type_thing_exists.assert_not_called()
    mock_repository.create.assert_not_called()


@pytest.mark.asyncio
async def test_unknown_type_thing(use_case, mock_repository, owner_user, thing_request):
    mock_repository.type_thing_exists.return_value = False

    with pytest.raises(TypeThingNotFoundError):
        await use_case.execute(owner_user, thing_request)

    mock_repository.create.assert_not_called()


@pytest.mark.asyncio
async def test_existing_id(use_case, mock_repository, owner_user, thing_request):
    mock_repository.type_thing_exists.return_value = True
    mock_repository.exist.return_value = True

    with pytest.raises(AlreadyExistsError):
        await use_case.execute(owner_user, thing_request)

    mock_repository.create.assert_not_called()

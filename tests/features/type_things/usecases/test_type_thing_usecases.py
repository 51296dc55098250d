"""Tests for the type thing use cases."""

import pytest

from geothing.core.errors import (
    AdminRequiredError,
    FieldTooShortError,
    NoRowsError,
    NotFoundError,
)
from geothing.features.crud.filters import Opt
from geothing.features.type_things.models import (
    TypeThingCountParams,
    TypeThingListParams,
)
from geothing.features.type_things.usecases.create_type_thing_usecase import (
    CreateTypeThingUseCaseImpl,
)
from geothing.features.type_things.usecases.delete_type_thing_usecase import (
    DeleteTypeThingUseCaseImpl,
)
from geothing.features.type_things.usecases.get_type_thing_usecase import (
    GetTypeThingUseCaseImpl,
)
from geothing.features.type_things.usecases.list_type_things_usecase import (
    CountTypeThingsUseCaseImpl,
    ListTypeThingsUseCaseImpl,
)
from geothing.features.type_things.usecases.update_type_thing_usecase import (
    UpdateTypeThingUseCaseImpl,
)


@pytest.mark.asyncio
async def test_admin_creates(
    mock_repository, admin_user, type_thing_request, stored_type_thing
):
    mock_repository.create.return_value = stored_type_thing

    result = await CreateTypeThingUseCaseImpl(mock_repository).execute(
        admin_user, type_thing_request
    )

    assert result.id == 7
    mock_repository.create.assert_awaited_once_with(admin_user.user_id, type_thing_request)


@pytest.mark.asyncio
async def test_non_admin_create_fails_before_any_write(
    mock_repository, owner_user, type_thing_request
):
    with pytest.raises(AdminRequiredError):
        await CreateTypeThingUseCaseImpl(mock_repository).execute(
            owner_user, type_thing_request
        )

    mock_repository.create.assert_not_called()


@pytest.mark.asyncio
async def test_admin_check_comes_before_validation(mock_repository, owner_user, type_thing_request):
    request = type_thing_request.model_copy(update={"name": "x"})

    with pytest.raises(AdminRequiredError):
        await CreateTypeThingUseCaseImpl(mock_repository).execute(owner_user, request)


@pytest.mark.asyncio
async def test_short_name(mock_repository, admin_user, type_thing_request):
    request = type_thing_request.model_copy(update={"name": "abc"})

    with pytest.raises(FieldTooShortError):
        await CreateTypeThingUseCaseImpl(mock_repository).execute(admin_user, request)


@pytest.mark.asyncio
async def test_get_is_admin_only(mock_repository, owner_user):
    with pytest.raises(AdminRequiredError):
        await GetTypeThingUseCaseImpl(mock_repository).execute(owner_user, 7)

    mock_repository.exist.assert_not_called()


@pytest.mark.asyncio
async def test_get(mock_repository, admin_user, stored_type_thing):
    mock_repository.exist.return_value = True
    mock_repository.get.return_value = stored_type_thing

    assert await GetTypeThingUseCaseImpl(mock_repository).execute(admin_user, 7) == stored_type_thing


@pytest.mark.asyncio
async def test_get_missing(mock_repository, admin_user):
    mock_repository.exist.return_value = False

    with pytest.raises(NotFoundError):
        await GetTypeThingUseCaseImpl(mock_repository).execute(admin_user, 99)


@pytest.mark.asyncio
async def test_update_missing(mock_repository, admin_user, type_thing_request):
    mock_repository.exist.return_value = False

    with pytest.raises(NotFoundError):
        await UpdateTypeThingUseCaseImpl(mock_repository).execute(
            admin_user, 99, type_thing_request
        )

    mock_repository.update.assert_not_called()


@pytest.mark.asyncio
async def test_update(mock_repository, admin_user, type_thing_request, stored_type_thing):
    mock_repository.exist.return_value = True
    mock_repository.update.return_value = stored_type_thing

    await UpdateTypeThingUseCaseImpl(mock_repository).execute(
        admin_user, 7, type_thing_request
    )

    mock_repository.update.assert_awaited_once_with(7, admin_user.user_id, type_thing_request)


@pytest.mark.asyncio
async def test_delete_by_non_admin(mock_repository, owner_user):
    with pytest.raises(AdminRequiredError):
        await DeleteTypeThingUseCaseImpl(mock_repository).execute(owner_user, 7)

    mock_repository.delete.assert_not_called()


@pytest.mark.asyncio
async def test_delete(mock_repository, admin_user):
    mock_repository.exist.return_value = True

    await DeleteTypeThingUseCaseImpl(mock_repository).execute(admin_user, 7)

    mock_repository.delete.assert_awaited_once_with(7, admin_user.user_id)


@pytest.mark.asyncio
async def test_list_is_open_and_empty_is_not_an_error(mock_repository):
    mock_repository.list.side_effect = NoRowsError()
    params = TypeThingListParams(external_id=Opt.of(0))

    assert await ListTypeThingsUseCaseImpl(mock_repository).execute(0, 250, params) == []
    mock_repository.list.assert_awaited_once_with(0, 250, params)


@pytest.mark.asyncio
async def test_count(mock_repository):
    mock_repository.count.return_value = 2

    assert await CountTypeThingsUseCaseImpl(mock_repository).execute(TypeThingCountParams()) == 2

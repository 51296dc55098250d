"""Type thing API routes."""

from typing import Protocol

from fastapi import APIRouter, Depends, Query, Response, status

from geothing.core.authentication import get_current_user
from geothing.core.schemas import AuthenticatedUser
from geothing.core.settings import get_settings
from geothing.db.postgres.connection import Database, get_database
from geothing.features.crud.filters import Opt
from geothing.features.things.dtos import CountResponse
from geothing.features.type_things.dtos import TypeThingRequest
from geothing.features.type_things.models import (
    TypeThing,
    TypeThingCountParams,
    TypeThingList,
    TypeThingListParams,
)
from geothing.features.type_things.repositories.postgres_repository import (
    PostgresTypeThingRepository,
)
from geothing.features.type_things.repositories.protocols import TypeThingRepository
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

router = APIRouter(prefix="/types", tags=["types"])


class ListTypeThingsUseCase(Protocol):
    """Protocol for the list type things use case."""

    async def execute(
        self, offset: int, limit: int, params: TypeThingListParams
    ) -> list[TypeThingList]:
        """List type things matching the optional filters."""
        ...


class CountTypeThingsUseCase(Protocol):
    """Protocol for the count type things use case."""

    async def execute(self, params: TypeThingCountParams) -> int:
        """Count type things matching the optional filters."""
        ...


class GetTypeThingUseCase(Protocol):
    """Protocol for the get type thing use case."""

    async def execute(self, user: AuthenticatedUser, type_thing_id: int) -> TypeThing:
        """Get a single type thing by id."""
        ...


class CreateTypeThingUseCase(Protocol):
    """Protocol for the create type thing use case."""

    async def execute(
        self, user: AuthenticatedUser, type_thing: TypeThingRequest
    ) -> TypeThing:
        """Create a type thing."""
        ...


class UpdateTypeThingUseCase(Protocol):
    """Protocol for the update type thing use case."""

    async def execute(
        self, user: AuthenticatedUser, type_thing_id: int, type_thing: TypeThingRequest
    ) -> TypeThing:
        """Update a type thing."""
        ...


class DeleteTypeThingUseCase(Protocol):
    """Protocol for the delete type thing use case."""

    async def execute(self, user: AuthenticatedUser, type_thing_id: int) -> None:
        """Soft delete a type thing."""
        ...


async def get_type_thing_repository(
    db: Database = Depends(get_database),
) -> TypeThingRepository:
    """Dependency injection for the type thing repository."""
    return PostgresTypeThingRepository(db, schema=get_settings().db_schema)


async def get_list_type_things_use_case(
    repository: TypeThingRepository = Depends(get_type_thing_repository),
):
    """Dependency injection for the list type things use case."""
    return ListTypeThingsUseCaseImpl(repository=repository)


async def get_count_type_things_use_case(
    repository: TypeThingRepository = Depends(get_type_thing_repository),
):
    """Dependency injection for the count type things use case."""
    return CountTypeThingsUseCaseImpl(repository=repository)


async def get_get_type_thing_use_case(
    repository: TypeThingRepository = Depends(get_type_thing_repository),
):
    """Dependency injection for the get type thing use case."""
    return GetTypeThingUseCaseImpl(repository=repository)


async def get_create_type_thing_use_case(
    repository: TypeThingRepository = Depends(get_type_thing_repository),
):
    """Dependency injection for the create type thing use case."""
    return CreateTypeThingUseCaseImpl(
        repository=repository, min_name_length=get_settings().min_name_length
    )


async def get_update_type_thing_use_case(
    repository: TypeThingRepository = Depends(get_type_thing_repository),
):
    """Dependency injection for the update type thing use case."""
    return UpdateTypeThingUseCaseImpl(
        repository=repository, min_name_length=get_settings().min_name_length
    )


async def get_delete_type_thing_use_case(
    repository: TypeThingRepository = Depends(get_type_thing_repository),
):
    """Dependency injection for the delete type thing use case."""
    return DeleteTypeThingUseCaseImpl(repository=repository)


@router.get("", response_model=list[TypeThingList])
async def list_type_things(
    offset: int = Query(0, ge=0),
    limit: int | None = Query(None, ge=1),
    keywords: str | None = Query(None, description="Words to look for"),
    created_by: int | None = Query(None),
    external_id: int | None = Query(None),
    inactivated: bool | None = Query(None),
    _user: AuthenticatedUser = Depends(get_current_user),
    use_case: ListTypeThingsUseCase = Depends(get_list_type_things_use_case),
) -> list[TypeThingList]:
    """List type things, newest first. Open to every authenticated caller."""
    params = TypeThingListParams(
        created_by=Opt.from_optional(created_by),
        external_id=Opt.from_optional(external_id),
        inactivated=Opt.from_optional(inactivated),
        keywords=Opt.from_optional(keywords or None),
    )
    if limit is None:
        limit = get_settings().type_list_default_limit
    return await use_case.execute(offset, limit, params)


@router.post("", response_model=TypeThing, status_code=status.HTTP_201_CREATED)
async def create_type_thing(
    request: TypeThingRequest,
    user: AuthenticatedUser = Depends(get_current_user),
    use_case: CreateTypeThingUseCase = Depends(get_create_type_thing_use_case),
) -> TypeThing:
    """Create a type thing. Admin only."""
    return await use_case.execute(user, request)


@router.get("/count", response_model=CountResponse)
async def count_type_things(
    keywords: str | None = Query(None, description="Words to look for"),
    created_by: int | None = Query(None),
    inactivated: bool | None = Query(None),
    _user: AuthenticatedUser = Depends(get_current_user),
    use_case: CountTypeThingsUseCase = Depends(get_count_type_things_use_case),
) -> CountResponse:
    """Count type things matching the filters."""
    params = TypeThingCountParams(
        created_by=Opt.from_optional(created_by),
        inactivated=Opt.from_optional(inactivated),
        keywords=Opt.from_optional(keywords or None),
    )
    return CountResponse(count=await use_case.execute(params))


@router.get("/{type_thing_id}", response_model=TypeThing)
async def get_type_thing(
    type_thing_id: int,
    user: AuthenticatedUser = Depends(get_current_user),
    use_case: GetTypeThingUseCase = Depends(get_get_type_thing_use_case),
) -> TypeThing:
    """Get a type thing by id. Admin only."""
    return await use_case.execute(user, type_thing_id)


@router.put("/{type_thing_id}", response_model=TypeThing)
async def update_type_thing(
    type_thing_id: int,
    request: TypeThingRequest,
    user: AuthenticatedUser = Depends(get_current_user),
    use_case: UpdateTypeThingUseCase = Depends(get_update_type_thing_use_case),
) -> TypeThing:
    """Update a type thing. Admin only."""
    return await use_case.execute(user, type_thing_id, request)


@router.delete("/{type_thing_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_type_thing(
    type_thing_id: int,
    user: AuthenticatedUser = Depends(get_current_user),
    use_case: DeleteTypeThingUseCase = Depends(get_delete_type_thing_use_case),
) -> Response:
    """Soft delete a type thing. Admin only."""
    await use_case.execute(user, type_thing_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)

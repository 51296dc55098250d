"""Thing API routes."""

from typing import Any, Protocol
from uuid import UUID

from fastapi import APIRouter, Depends, Query, Response, status

from geothing.core.authentication import get_current_user
from geothing.core.schemas import AuthenticatedUser
from geothing.core.settings import get_settings
from geothing.db.postgres.connection import Database, get_database
from geothing.features.crud.filters import Opt
from geothing.features.things.dtos import CountResponse, FeatureCollection, ThingRequest
from geothing.features.things.models import (
    CountParams,
    GeoJsonParams,
    ListParams,
    SearchParams,
    Thing,
    ThingList,
)
from geothing.features.things.repositories.postgres_repository import (
    PostgresThingRepository,
)
from geothing.features.things.repositories.protocols import ThingRepository
from geothing.features.things.usecases.count_things_usecase import CountThingsUseCaseImpl
from geothing.features.things.usecases.create_thing_usecase import CreateThingUseCaseImpl
from geothing.features.things.usecases.delete_thing_usecase import DeleteThingUseCaseImpl
from geothing.features.things.usecases.geojson_things_usecase import (
    GeoJsonThingsUseCaseImpl,
)
from geothing.features.things.usecases.get_thing_usecase import GetThingUseCaseImpl
from geothing.features.things.usecases.list_things_usecase import (
    ListThingsByExternalIdUseCaseImpl,
    ListThingsUseCaseImpl,
    SearchThingsUseCaseImpl,
)
from geothing.features.things.usecases.update_thing_usecase import UpdateThingUseCaseImpl

router = APIRouter(prefix="/thing", tags=["thing"])


class ListThingsUseCase(Protocol):
    """Protocol for the list things use case."""

    async def execute(self, offset: int, limit: int, params: ListParams) -> list[ThingList]:
        """List things matching the optional filters."""
        ...


class ListThingsByExternalIdUseCase(Protocol):
    """Protocol for the list things by external id use case."""

    async def execute(self, offset: int, limit: int, external_id: int) -> list[ThingList]:
        """List things having an external id."""
        ...


class SearchThingsUseCase(Protocol):
    """Protocol for the search things use case."""

    async def execute(
        self, offset: int, limit: int, params: SearchParams
    ) -> list[ThingList]:
        """List things matching the filters and keywords."""
        ...


class CountThingsUseCase(Protocol):
    """Protocol for the count things use case."""

    async def execute(self, params: CountParams) -> int:
        """Count things matching the filters and keywords."""
        ...


class GeoJsonThingsUseCase(Protocol):
    """Protocol for the geojson things use case."""

    async def execute(
        self, offset: int, limit: int, params: GeoJsonParams
    ) -> dict[str, Any]:
        """Render things as a GeoJSON FeatureCollection."""
        ...


class GetThingUseCase(Protocol):
    """Protocol for the get thing use case."""

    async def execute(self, thing_id: UUID) -> Thing:
        """Get a single thing by id."""
        ...


class CreateThingUseCase(Protocol):
    """Protocol for the create thing use case."""

    async def execute(self, user: AuthenticatedUser, thing: ThingRequest) -> Thing:
        """Create a thing owned by the user."""
        ...


class UpdateThingUseCase(Protocol):
    """Protocol for the update thing use case."""

    async def execute(
        self, user: AuthenticatedUser, thing_id: UUID, thing: ThingRequest
    ) -> Thing:
        """Update a thing owned by the user."""
        ...


class DeleteThingUseCase(Protocol):
    """Protocol for the delete thing use case."""

    async def execute(self, user: AuthenticatedUser, thing_id: UUID) -> None:
        """Soft delete a thing owned by the user."""
        ...


async def get_thing_repository(db: Database = Depends(get_database)) -> ThingRepository:
    """Dependency injection for the thing repository."""
    settings = get_settings()
    return PostgresThingRepository(db, schema=settings.db_schema, srid=settings.db_srid)


async def get_list_things_use_case(
    repository: ThingRepository = Depends(get_thing_repository),
):
    """Dependency injection for the list things use case."""
    return ListThingsUseCaseImpl(repository=repository)


async def get_list_things_by_external_id_use_case(
    repository: ThingRepository = Depends(get_thing_repository),
):
    """Dependency injection for the list things by external id use case."""
    return ListThingsByExternalIdUseCaseImpl(repository=repository)


async def get_search_things_use_case(
    repository: ThingRepository = Depends(get_thing_repository),
):
    """Dependency injection for the search things use case."""
    return SearchThingsUseCaseImpl(repository=repository)


async def get_count_things_use_case(
    repository: ThingRepository = Depends(get_thing_repository),
):
    """Dependency injection for the count things use case."""
    return CountThingsUseCaseImpl(repository=repository)


async def get_geojson_things_use_case(
    repository: ThingRepository = Depends(get_thing_repository),
):
    """Dependency injection for the geojson things use case."""
    return GeoJsonThingsUseCaseImpl(repository=repository)


async def get_get_thing_use_case(
    repository: ThingRepository = Depends(get_thing_repository),
):
    """Dependency injection for the get thing use case."""
    return GetThingUseCaseImpl(repository=repository)


async def get_create_thing_use_case(
    repository: ThingRepository = Depends(get_thing_repository),
):
    """Dependency injection for the create thing use case."""
    return CreateThingUseCaseImpl(
        repository=repository, min_name_length=get_settings().min_name_length
    )


async def get_update_thing_use_case(
    repository: ThingRepository = Depends(get_thing_repository),
):
    """Dependency injection for the update thing use case."""
    return UpdateThingUseCaseImpl(
        repository=repository, min_name_length=get_settings().min_name_length
    )


async def get_delete_thing_use_case(
    repository: ThingRepository = Depends(get_thing_repository),
):
    """Dependency injection for the delete thing use case."""
    return DeleteThingUseCaseImpl(repository=repository)


def _page_limit(limit: int | None) -> int:
    return limit if limit is not None else get_settings().thing_list_default_limit


def list_params(
    type: int | None = Query(None, description="Only things of this type thing"),
    created_by: int | None = Query(None, description="Only things created by this user"),
    inactivated: bool | None = Query(None, description="Only (in)active things"),
    validated: bool | None = Query(None, description="Only (not) validated things"),
) -> ListParams:
    """Build list filters; an omitted query parameter is an absent filter."""
    return ListParams(
        type_id=Opt.from_optional(type),
        created_by=Opt.from_optional(created_by),
        inactivated=Opt.from_optional(inactivated),
        validated=Opt.from_optional(validated),
    )


def search_params(
    base: ListParams = Depends(list_params),
    keywords: str | None = Query(None, description="Words to look for"),
) -> SearchParams:
    """Build list filters plus the optional keyword query."""
    return SearchParams(
        type_id=base.type_id,
        created_by=base.created_by,
        inactivated=base.inactivated,
        validated=base.validated,
        keywords=Opt.from_optional(keywords or None),
    )


@router.get("", response_model=list[ThingList])
async def list_things(
    offset: int = Query(0, ge=0),
    limit: int | None = Query(None, ge=1),
    params: ListParams = Depends(list_params),
    _user: AuthenticatedUser = Depends(get_current_user),
    use_case: ListThingsUseCase = Depends(get_list_things_use_case),
) -> list[ThingList]:
    """List things, newest first."""
    return await use_case.execute(offset, _page_limit(limit), params)


@router.post("", response_model=Thing, status_code=status.HTTP_201_CREATED)
async def create_thing(
    request: ThingRequest,
    user: AuthenticatedUser = Depends(get_current_user),
    use_case: CreateThingUseCase = Depends(get_create_thing_use_case),
) -> Thing:
    """Create a thing owned by the caller."""
    return await use_case.execute(user, request)


@router.get("/geojson", response_model=FeatureCollection)
async def geojson_things(
    offset: int = Query(0, ge=0),
    limit: int | None = Query(None, ge=1),
    params: GeoJsonParams = Depends(list_params),
    _user: AuthenticatedUser = Depends(get_current_user),
    use_case: GeoJsonThingsUseCase = Depends(get_geojson_things_use_case),
) -> dict[str, Any]:
    """List things as a GeoJSON FeatureCollection."""
    return await use_case.execute(offset, _page_limit(limit), params)


@router.get("/count", response_model=CountResponse)
async def count_things(
    params: CountParams = Depends(search_params),
    _user: AuthenticatedUser = Depends(get_current_user),
    use_case: CountThingsUseCase = Depends(get_count_things_use_case),
) -> CountResponse:
    """Count things matching the filters."""
    return CountResponse(count=await use_case.execute(params))


@router.get("/search", response_model=list[ThingList])
async def search_things(
    offset: int = Query(0, ge=0),
    limit: int | None = Query(None, ge=1),
    params: SearchParams = Depends(search_params),
    _user: AuthenticatedUser = Depends(get_current_user),
    use_case: SearchThingsUseCase = Depends(get_search_things_use_case),
) -> list[ThingList]:
    """Search things by keywords and filters."""
    return await use_case.execute(offset, _page_limit(limit), params)


@router.get("/by-external-id/{external_id}", response_model=list[ThingList])
async def list_things_by_external_id(
    external_id: int,
    offset: int = Query(0, ge=0),
    limit: int | None = Query(None, ge=1),
    _user: AuthenticatedUser = Depends(get_current_user),
    use_case: ListThingsByExternalIdUseCase = Depends(
        get_list_things_by_external_id_use_case
    ),
) -> list[ThingList]:
    """List things having this external id."""
    return await use_case.execute(offset, _page_limit(limit), external_id)


@router.get("/{thing_id}", response_model=Thing)
async def get_thing(
    thing_id: UUID,
    _user: AuthenticatedUser = Depends(get_current_user),
    use_case: GetThingUseCase = Depends(get_get_thing_use_case),
) -> Thing:
    """Get a thing by id."""
    return await use_case.execute(thing_id)


@router.put("/{thing_id}", response_model=Thing)
async def update_thing(
    thing_id: UUID,
    request: ThingRequest,
    user: AuthenticatedUser = Depends(get_current_user),
    use_case: UpdateThingUseCase = Depends(get_update_thing_use_case),
) -> Thing:
    """Update a thing. Only its creator may do so."""
    return await use_case.execute(user, thing_id, request)


@router.delete("/{thing_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_thing(
    thing_id: UUID,
    user: AuthenticatedUser = Depends(get_current_user),
    use_case: DeleteThingUseCase = Depends(get_delete_thing_use_case),
) -> Response:
    """Soft delete a thing. Only its creator may do so."""
    await use_case.execute(user, thing_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)

"""Thing DTOs for API requests and responses."""

from datetime import datetime
from typing import Any
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from geothing.features.things.models import ThingStatus


class ThingRequest(BaseModel):
    """Body of create and update requests.

    Audit fields are not accepted; they are set from the authenticated user
    and by the database.
    """

    model_config = ConfigDict(use_enum_values=True)

    id: UUID = Field(..., description="Identifier chosen by the client")
    type_id: int = Field(..., description="Type thing of this thing")
    name: str = Field(..., description="Name, at least 5 characters once trimmed")
    description: str | None = None
    comment: str | None = None
    external_id: int | None = None
    external_ref: str | None = None
    build_at: datetime | None = None
    status: ThingStatus | None = None
    contained_by: UUID | None = None
    contained_by_old: int | None = None
    inactivated: bool = False
    inactivated_time: datetime | None = None
    inactivated_by: int | None = None
    inactivated_reason: str | None = None
    validated: bool = False
    validated_time: datetime | None = None
    validated_by: int | None = None
    managed_by: int | None = None
    more_data: dict[str, Any] | None = None
    pos_x: float = Field(..., description="Projected x coordinate")
    pos_y: float = Field(..., description="Projected y coordinate")


class CountResponse(BaseModel):
    """Number of rows matching a query."""

    count: int


class FeatureCollection(BaseModel):
    """GeoJSON FeatureCollection as returned by the database."""

    type: str = "FeatureCollection"
    features: list[dict[str, Any]] = Field(default_factory=list)

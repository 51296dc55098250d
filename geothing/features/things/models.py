"""Thing models.

``Thing`` is the full row returned by get, create and update; ``ThingList`` is
the lighter projection returned by list shaped queries. The filter classes
carry one ``Opt`` per optional predicate.
"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from geothing.features.crud.filters import ABSENT, Opt


class ThingStatus(str, Enum):
    """Lifecycle of a thing, stored as its French label."""

    PLANNED = "Planifié"
    UNDER_CONSTRUCTION = "En Construction"
    USED = "Utilisé"
    ABANDONED = "Abandonné"
    DEMOLISHED = "Démoli"


class Thing(BaseModel):
    """A thing as stored, audit fields included."""

    model_config = ConfigDict(use_enum_values=True)

    id: UUID = Field(..., description="Client supplied identifier")
    type_id: int = Field(..., description="Type thing of this thing")
    name: str = Field(..., description="Name of the thing")
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
    created_at: datetime | None = None
    created_by: int | None = None
    last_modified_at: datetime | None = None
    last_modified_by: int | None = None
    deleted: bool = False
    deleted_at: datetime | None = None
    deleted_by: int | None = None


class ThingList(BaseModel):
    """List view of a thing."""

    model_config = ConfigDict(use_enum_values=True)

    id: UUID
    type_id: int
    name: str
    description: str | None = None
    external_id: int | None = None
    inactivated: bool = False
    validated: bool = False
    status: ThingStatus | None = None
    created_by: int
    created_at: datetime
    pos_x: float
    pos_y: float


@dataclass(frozen=True)
class ListParams:
    """Optional predicates of list and geojson queries."""

    type_id: Opt[int] = ABSENT
    created_by: Opt[int] = ABSENT
    inactivated: Opt[bool] = ABSENT
    validated: Opt[bool] = ABSENT


@dataclass(frozen=True)
class SearchParams(ListParams):
    """List predicates plus a full text keyword query."""

    keywords: Opt[str] = ABSENT


CountParams = SearchParams
GeoJsonParams = ListParams

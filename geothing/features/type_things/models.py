"""Type thing models.

A type thing categorises things; every thing references one through
``type_id``. Only admins manage them.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field

from geothing.features.crud.filters import ABSENT, Opt


class TypeThing(BaseModel):
    """A type thing as stored, audit fields included."""

    id: int = Field(..., description="Serial identifier")
    name: str = Field(..., description="Name of the type thing")
    description: str | None = None
    comment: str | None = None
    external_id: int | None = None
    table_name: str | None = None
    geometry_type: str | None = None
    inactivated: bool = False
    inactivated_time: datetime | None = None
    inactivated_by: int | None = None
    inactivated_reason: str | None = None
    managed_by: int | None = None
    icon_path: str = ""
    more_data_schema: dict[str, Any] | None = None
    created_at: datetime | None = None
    created_by: int | None = None
    last_modified_at: datetime | None = None
    last_modified_by: int | None = None
    deleted: bool = False
    deleted_at: datetime | None = None
    deleted_by: int | None = None


class TypeThingList(BaseModel):
    """List view of a type thing."""

    id: int
    name: str
    external_id: int | None = None
    table_name: str | None = None
    geometry_type: str | None = None
    inactivated: bool = False
    managed_by: int | None = None
    icon_path: str = ""
    created_by: int
    created_at: datetime


@dataclass(frozen=True)
class TypeThingListParams:
    """Optional predicates of the type thing list."""

    created_by: Opt[int] = ABSENT
    external_id: Opt[int] = ABSENT
    inactivated: Opt[bool] = ABSENT
    keywords: Opt[str] = ABSENT


@dataclass(frozen=True)
class TypeThingCountParams:
    """Optional predicates of the type thing count."""

    created_by: Opt[int] = ABSENT
    inactivated: Opt[bool] = ABSENT
    keywords: Opt[str] = ABSENT

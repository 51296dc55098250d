"""Type thing DTOs for API requests and responses."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field


class TypeThingRequest(BaseModel):
    """Body of create and update requests. The id is assigned by the database."""

    name: str = Field(..., description="Name, at least 5 characters once trimmed")
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

"""Use case for rendering things as GeoJSON."""

import json
from typing import Any

from geothing.core.errors import NoRowsError
from geothing.features.things.models import GeoJsonParams
from geothing.features.things.repositories.protocols import ThingRepository

EMPTY_FEATURE_COLLECTION = '{"type":"FeatureCollection","features":[]}'


class GeoJsonThingsUseCaseImpl:
    """Render a page of things as one GeoJSON FeatureCollection."""

    def __init__(self, repository: ThingRepository):
        self.repository = repository

    async def execute(
        self, offset: int, limit: int, params: GeoJsonParams
    ) -> dict[str, Any]:
        """Return the FeatureCollection, empty when nothing matches."""
        try:
            collection = await self.repository.geojson(offset, limit, params)
        except NoRowsError:
            collection = EMPTY_FEATURE_COLLECTION
        return json.loads(collection)

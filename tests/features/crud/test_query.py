"""Tests for the SQL composition of list, count and geojson queries."""

import pytest

from geothing.features.crud.filters import Opt
from geothing.features.crud.query import (
    EntityDescriptor,
    count_query,
    exist_query,
    geojson_query,
    is_owner_query,
    list_by_column_query,
    list_query,
    soft_delete_query,
)
from geothing.features.things.models import ListParams, SearchParams
from geothing.features.things.sql import thing_descriptor
from geothing.features.type_things.models import TypeThingCountParams, TypeThingListParams
from geothing.features.type_things.sql import type_thing_descriptor


@pytest.fixture
def descriptor() -> EntityDescriptor:
    return thing_descriptor("geothing")


def test_list_without_filters_binds_nulls(descriptor):
    query = list_query(descriptor, ListParams(), offset=10, limit=50)

    assert query.args == [50, 10, None, None, None, None]
    assert "type_id = COALESCE($3, type_id)" in query.sql
    assert "_created_by = COALESCE($4, _created_by)" in query.sql
    assert "inactivated = COALESCE($5, inactivated)" in query.sql
    assert "validated = COALESCE($6, validated)" in query.sql
    assert "plainto_tsquery" not in query.sql
    assert query.sql.rstrip(";").endswith("ORDER BY _created_at DESC LIMIT $1 OFFSET $2")


def test_absent_filter_leaves_sql_unchanged(descriptor):
    unfiltered = list_query(descriptor, ListParams(), offset=0, limit=5)
    filtered = list_query(descriptor, ListParams(type_id=Opt.of(3)), offset=0, limit=5)

    assert unfiltered.sql == filtered.sql
    assert filtered.args[2] == 3


def test_false_and_zero_filters_are_bound(descriptor):
    params = ListParams(created_by=Opt.of(0), validated=Opt.of(False))

    query = list_query(descriptor, params, offset=0, limit=5)

    assert query.args[3] == 0
    assert query.args[5] is False


def test_list_excludes_deleted_rows_and_rows_without_position(descriptor):
    query = list_query(descriptor, ListParams(), offset=0, limit=5)

    assert "WHERE _deleted = false AND position IS NOT NULL" in query.sql
    assert "FROM geothing.thing" in query.sql


def test_search_appends_keywords_last(descriptor):
    params = SearchParams(inactivated=Opt.of(False), keywords=Opt.of("école"))

    query = list_query(descriptor, params, offset=0, limit=5)

    assert "text_search @@ plainto_tsquery('french', unaccent($7))" in query.sql
    assert query.args[-1] == "école"
    assert len(query.args) == 7


def test_count_numbers_filters_from_one(descriptor):
    query = count_query(descriptor, SearchParams(keywords=Opt.of("pont")))

    assert query.sql.startswith("SELECT COUNT(*) FROM geothing.thing")
    assert "type_id = COALESCE($1, type_id)" in query.sql
    assert "unaccent($5)" in query.sql
    assert query.args == [None, None, None, None, "pont"]
    assert "ORDER BY" not in query.sql
    assert "LIMIT" not in query.sql


def test_count_ignores_filters_its_params_do_not_carry():
    descriptor = type_thing_descriptor("geothing")

    query = count_query(descriptor, TypeThingCountParams(inactivated=Opt.of(True)))

    assert query.args == [None, True]
    assert "external_id" not in query.sql
    assert "inactivated = COALESCE($2, inactivated)" in query.sql


def test_nullable_filter_column_keeps_null_rows_when_absent():
    descriptor = type_thing_descriptor("geothing")

    query = list_query(descriptor, TypeThingListParams(), offset=0, limit=250)

    assert "external_id IS NOT DISTINCT FROM COALESCE($4, external_id)" in query.sql
    assert "_created_by = COALESCE($3, _created_by)" in query.sql
    assert query.args == [250, 0, None, None, None]


def test_list_by_external_id_has_a_single_mandatory_predicate(descriptor):
    query = list_by_column_query(descriptor, "external_id", 77, offset=0, limit=5)

    assert "external_id = $3" in query.sql
    assert "COALESCE" not in query.sql
    assert query.args == [5, 0, 77]


def test_geojson_wraps_the_list_page_in_a_feature_collection(descriptor):
    query = geojson_query(descriptor, ListParams(validated=Opt.of(True)), offset=0, limit=5)

    assert "row_to_json(fc)::text" in query.sql
    assert "'FeatureCollection' AS type" in query.sql
    assert "ST_AsGeoJSON(t.position, 6)::json" in query.sql
    assert "icon_path" in query.sql
    assert "LIMIT $1 OFFSET $2" in query.sql
    assert query.args == [5, 0, None, None, None, True]


def test_geojson_needs_a_geometry():
    with pytest.raises(ValueError):
        geojson_query(type_thing_descriptor("geothing"), TypeThingCountParams(), 0, 5)


def test_single_row_statements_skip_deleted_rows(descriptor):
    assert "id = $1 AND _deleted = false" in exist_query(descriptor)
    assert "_created_by = $2 AND _deleted = false" in is_owner_query(descriptor)

    delete_sql = soft_delete_query(descriptor)
    assert delete_sql.startswith("UPDATE geothing.thing")
    assert "_deleted = true, _deleted_by = $1" in delete_sql
    assert "WHERE id = $2 AND _deleted = false" in delete_sql

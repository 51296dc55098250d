"""SQL of the thing table.

Statements are templated on the schema and SRID configured in settings; the
shared shapes (list, count, geojson, get, exist, soft delete) are composed by
``geothing.features.crud.query`` from the descriptor built here.
"""

from geothing.features.crud.query import EntityDescriptor

LIST_COLUMNS = """id,
       type_id,
       name,
       description,
       external_id,
       inactivated,
       validated,
       status,
       _created_by AS created_by,
       _created_at AS created_at,
       st_x(position) AS pos_x,
       st_y(position) AS pos_y"""

GET_COLUMNS = """id,
       type_id,
       name,
       description,
       comment,
       external_id,
       external_ref,
       build_at,
       status,
       contained_by,
       contained_by_old,
       inactivated,
       inactivated_time,
       inactivated_by,
       inactivated_reason,
       validated,
       validated_time,
       validated_by,
       managed_by,
       _created_at AS created_at,
       _created_by AS created_by,
       _last_modified_at AS last_modified_at,
       _last_modified_by AS last_modified_by,
       _deleted AS deleted,
       _deleted_at AS deleted_at,
       _deleted_by AS deleted_by,
       more_data,
       round(st_x(ST_Centroid(position))::numeric, 2) AS pos_x,
       round(st_y(ST_Centroid(position))::numeric, 2) AS pos_y"""

GEOJSON_PROPERTIES = """id,
                   type_id,
                   name,
                   description,
                   external_id,
                   inactivated,
                   validated,
                   status,
                   (SELECT icon_path FROM {schema}.type_thing tt WHERE tt.id = t.type_id) AS icon_path,
                   _created_by AS created_by,
                   _created_at AS created_at,
                   st_x(position) AS pos_x,
                   st_y(position) AS pos_y"""

# Every filter attribute of ListParams and the column it constrains.
FILTER_COLUMNS = {
    "type_id": "type_id",
    "created_by": "_created_by",
    "inactivated": "inactivated",
    "validated": "validated",
}

TEXT_SEARCH_EXPRESSION = """to_tsvector('french', unaccent($3) ||
                              ' ' || coalesce(unaccent($4), ' ') ||
                              ' ' || coalesce(unaccent($5), ' '))"""

INSERT_THING = """
INSERT INTO {schema}.thing
(id, type_id, name, description, comment, external_id, external_ref,
 build_at, status, contained_by, contained_by_old, validated, validated_time, validated_by,
 managed_by, _created_at, _created_by, more_data, text_search, position)
VALUES ($1, $2, $3, $4, $5, $6, $7,
        $8, $9, $10, $11, $12, $13, $14,
        $15, CURRENT_TIMESTAMP, $16, $17,
        {text_search},
        ST_SetSRID(ST_MakePoint($18, $19), {srid}));
"""

UPDATE_THING = """
UPDATE {schema}.thing SET
       type_id = $2,
       name = $3,
       description = $4,
       comment = $5,
       external_id = $6,
       external_ref = $7,
       build_at = $8,
       status = $9,
       contained_by = $10,
       contained_by_old = $11,
       inactivated = $12,
       inactivated_time = $13,
       inactivated_by = $14,
       inactivated_reason = $15,
       validated = $16,
       validated_time = $17,
       validated_by = $18,
       managed_by = $19,
       _last_modified_at = CURRENT_TIMESTAMP,
       _last_modified_by = $20,
       more_data = $21,
       position = ST_SetSRID(ST_MakePoint($22, $23), {srid}),
       text_search = {text_search}
WHERE id = $1 AND _deleted = false;
"""

TYPE_THING_EXISTS = (
    "SELECT COUNT(*) FROM {schema}.type_thing WHERE id = $1 AND _deleted = false;"
)


def thing_descriptor(schema: str) -> EntityDescriptor:
    """Describe the thing table of ``schema`` to the query composer."""
    return EntityDescriptor(
        name="thing",
        table=f"{schema}.thing",
        list_columns=LIST_COLUMNS,
        get_columns=GET_COLUMNS,
        base_condition="_deleted = false AND position IS NOT NULL",
        filter_columns=FILTER_COLUMNS,
        geometry_column="position",
        geojson_properties=GEOJSON_PROPERTIES.format(schema=schema),
    )


def insert_thing_sql(schema: str, srid: int) -> str:
    return INSERT_THING.format(
        schema=schema, srid=srid, text_search=TEXT_SEARCH_EXPRESSION
    )


def update_thing_sql(schema: str, srid: int) -> str:
    return UPDATE_THING.format(
        schema=schema, srid=srid, text_search=TEXT_SEARCH_EXPRESSION
    )


def type_thing_exists_sql(schema: str) -> str:
    return TYPE_THING_EXISTS.format(schema=schema)
